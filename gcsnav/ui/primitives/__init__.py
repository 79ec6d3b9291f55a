"""
Terminal I/O primitives.

Low-level terminal control, keyboard input, and color handling.
"""

from .terminal import (
    strip_ansi,
    get_terminal_width,
    get_terminal_height,
    truncate_text,
    fit_line,
    cursor_up,
    CLEAR_LINE,
    CURSOR_COL0,
    CLEAR_TO_END,
)
from .keyboard_input import (
    CancelInput,
    raw_terminal,
    cbreak_noecho,
    getch,
    read_key,
    decode_unix_key,
    decode_windows_key,
    input_with_esc,
    flush_input,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_PAGE_UP,
    KEY_PAGE_DOWN,
    KEY_HOME,
    KEY_END,
    KEY_DELETE,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
)
from .colors import (
    Colors,
    colorize,
)

__all__ = [
    # Terminal
    "strip_ansi",
    "get_terminal_width",
    "get_terminal_height",
    "truncate_text",
    "fit_line",
    "cursor_up",
    "CLEAR_LINE",
    "CURSOR_COL0",
    "CLEAR_TO_END",
    # Keyboard input
    "CancelInput",
    "raw_terminal",
    "cbreak_noecho",
    "getch",
    "read_key",
    "decode_unix_key",
    "decode_windows_key",
    "input_with_esc",
    "flush_input",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_PAGE_UP",
    "KEY_PAGE_DOWN",
    "KEY_HOME",
    "KEY_END",
    "KEY_DELETE",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_BACKSPACE",
    # Colors
    "Colors",
    "colorize",
]
