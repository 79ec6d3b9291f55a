"""
Terminal utilities for gcsnav.

Handles terminal size and the ANSI sequences used for in-place repaints.
"""

import os
import re
import shutil
import unicodedata

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

# Cursor/line control sequences
CLEAR_LINE = "\x1b[2K"       # Erase entire line
CURSOR_COL0 = "\x1b[G"       # Move to column 0
CLEAR_TO_END = "\x1b[J"      # Erase from cursor to end of screen


def cursor_up(lines: int = 1) -> str:
    """ANSI sequence moving the cursor up (empty for 0 lines)."""
    return f"\x1b[{lines}A" if lines > 0 else ""


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def get_terminal_width() -> int:
    """Get terminal width, with fallback."""
    try:
        return os.get_terminal_size().columns
    except OSError:
        return 80


def get_terminal_height() -> int:
    """Get terminal height, with fallback."""
    return shutil.get_terminal_size(fallback=(80, 24)).lines


def char_width(ch: str) -> int:
    """Terminal columns taken by one character (wide CJK = 2, combining = 0)."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    """Terminal columns taken by text, colors excluded."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def truncate_text(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate text to max_len columns, adding suffix if truncated. Returns plain text (no ANSI)."""
    text = strip_ansi(text)  # Strip first - colors should be added after truncation, not before
    if display_width(text) <= max_len:
        return text
    if max_len > len(suffix):
        budget = max_len - len(suffix)
    else:
        budget, suffix = max_len, ""

    kept = []
    used = 0
    for ch in text:
        width = char_width(ch)
        if used + width > budget:
            break
        kept.append(ch)
        used += width
    return "".join(kept) + suffix


def fit_line(text: str, width: int = None) -> str:
    """
    Keep a colored line from wrapping (a wrapped line breaks cursor-up math).

    Lines that already fit are returned untouched, colors included.
    """
    width = width or get_terminal_width()
    if display_width(text) < width:
        return text
    return truncate_text(text, width - 1)
