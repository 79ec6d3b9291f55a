"""
Line-oriented screen output for the navigator.

Everything is written below the cursor and overwritten in place with ANSI
cursor movement; the screen is never cleared, so the breadcrumb trail of
previous steps stays visible above the current menu.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from ..primitives import (
    Colors,
    colorize,
    fit_line,
    cursor_up,
    CLEAR_LINE,
    CURSOR_COL0,
)


LOG_SUCCESS = "success"
LOG_ERROR = "error"
LOG_INFO = "info"

# kind -> (marker, color)
LOG_STYLES = {
    LOG_SUCCESS: ("✓", Colors.GREEN),
    LOG_ERROR: ("✗", Colors.RED),
    LOG_INFO: ("·", Colors.MUTED),
}


@dataclass(frozen=True)
class OperationLogEntry:
    """Outcome of one action, shown once above the next menu."""
    kind: str  # LOG_SUCCESS, LOG_ERROR or LOG_INFO
    message: str


# === Breadcrumb labels ===

def exit_label() -> str:
    return colorize("<- exit", Colors.RED)


def back_label() -> str:
    return colorize("<- back", Colors.CYAN)


def folder_label(folder_display_name: str) -> str:
    return colorize(f"[D] {folder_display_name}", Colors.CYAN)


def format_log_entry(entry: OperationLogEntry) -> str:
    marker, color = LOG_STYLES.get(entry.kind, LOG_STYLES[LOG_INFO])
    return colorize(f" {marker} {entry.message}", color)


class ScreenRenderer:
    """
    Terminal operations used by the navigation loop.

    Tracks whether the cursor sits mid-line (after an inline breadcrumb or a
    pending progress indicator) so that the next block starts on a fresh line.
    """

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out
        self._mid_line = False
        self._progress_active = False

    @property
    def _out(self) -> TextIO:
        return self.out or sys.stdout

    @property
    def progress_active(self) -> bool:
        return self._progress_active

    def _write(self, text: str):
        if not text:
            return
        out = self._out
        out.write(text)
        out.flush()
        self._mid_line = not text.endswith("\n")

    def write_inline(self, text: str):
        """Write text without a trailing newline."""
        self._write(text)

    def end_line(self):
        """Terminate the current line if something was written inline."""
        if self._mid_line:
            self._write("\n")

    def show_progress(self, message: str):
        """Show a transient "message..." indicator on its own line."""
        if self._progress_active:
            self.clear_progress()
        self.end_line()
        self._write(fit_line(colorize(f"⏳ {message}...", Colors.YELLOW)))
        self._progress_active = True

    def clear_progress(self):
        """Erase the progress line in place; the cursor stays on that line."""
        if not self._progress_active:
            return
        self._out.write(f"{CLEAR_LINE}{CURSOR_COL0}")
        self._out.flush()
        self._progress_active = False
        self._mid_line = False

    def clear_line_above(self):
        """Move up one line and erase it."""
        self._out.write(f"{cursor_up(1)}{CLEAR_LINE}{CURSOR_COL0}")
        self._out.flush()
        self._mid_line = False

    def overwrite_last_menu_line(self, text: str):
        """Replace the line the last prompt left behind (its summary) with text."""
        self.clear_line_above()
        self._write(fit_line(text))

    def flush_operation_log(self, entries: Iterable[OperationLogEntry]):
        """Print every entry once, tagged by kind. The caller clears its log."""
        entries = list(entries)
        if not entries:
            return
        self.end_line()
        self._write("".join(f"{format_log_entry(entry)}\n" for entry in entries))

    def show_error(self, message: str):
        self.end_line()
        self._write(f"{colorize(message, Colors.RED)}\n")

    def show_info(self, message: str):
        self.end_line()
        self._write(f"{colorize(message, Colors.CYAN)}\n")
