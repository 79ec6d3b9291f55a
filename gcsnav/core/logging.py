"""
Session logging for gcsnav.

The entry script replaces sys.stdout with a TeeOutput for the whole session:
the terminal sees everything, the day's log file sees the lines worth
keeping (breadcrumbs, operation results, errors) without colors, cursor
movement or menu redraws.
"""

import re
import sys
from datetime import datetime
from pathlib import Path

# Colors and cursor/line control
ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z]')


def _timestamp() -> str:
    return datetime.now().strftime("[%H:%M:%S]")


class TeeOutput:
    """Write to both stdout and a log file, filtering out menu redraws."""

    # Lines never written to the log file
    _SKIP_PATTERNS = [
        r'⏳',      # Transient progress
        r'^\s*$',  # Blank lines
    ]

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._pending = ""
        self._write_header(version)

    def _write_header(self, version: str = None):
        version_str = f" v{version}" if version else ""
        rule = "=" * 60
        self.log_file.write(f"\n{rule}\nSession started: {datetime.now().isoformat()}{version_str}\n{rule}\n\n")
        self.log_file.flush()

    def _log_line(self, line: str):
        # Redrawn lines: only what follows the last carriage return is visible
        line = line.rsplit('\r', 1)[-1].rstrip()
        if line and not self._skip_regex.search(line):
            self.log_file.write(f"{_timestamp()} {line}\n")

    def write(self, message):
        self.terminal.write(message)

        self._pending += ANSI_ESCAPE.sub('', message)
        *complete, self._pending = self._pending.split('\n')
        for line in complete:
            self._log_line(line)
        self.log_file.flush()

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def isatty(self) -> bool:
        return self.terminal.isatty()

    def fileno(self) -> int:
        return self.terminal.fileno()

    def close(self):
        """Log any unterminated last line and close the file."""
        self._log_line(self._pending)
        self._pending = ""
        self.log_file.close()

    def write_transient(self, message):
        """Write a menu redraw to the terminal only; the next frame replaces it."""
        self.terminal.write(message)

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        self.log_file.write(f"{_timestamp()} {message}\n")
        self.log_file.flush()


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, 'log_only'):
        sys.stdout.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore


def write_transient(out, message: str):
    """Write output that is redrawn in place and should stay out of the session log."""
    if hasattr(out, 'write_transient'):
        out.write_transient(message)
    else:
        out.write(message)
