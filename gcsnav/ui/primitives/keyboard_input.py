"""
Keyboard input handling for gcsnav.

Key presses are read one at a time in raw/cbreak mode and decoded into KEY_*
constants (arrows, paging, Delete, Enter, ESC). Decoding is kept in pure
functions so it can be tested without a terminal.
"""

import os
import sys
from contextlib import contextmanager

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import termios
    import tty
    import select


class CancelInput(Exception):
    """Raised when user cancels input with ESC."""
    pass


# Special key constants
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_PAGE_UP = "KEY_PAGE_UP"
KEY_PAGE_DOWN = "KEY_PAGE_DOWN"
KEY_HOME = "KEY_HOME"
KEY_END = "KEY_END"
KEY_DELETE = "KEY_DELETE"
KEY_ENTER = "KEY_ENTER"
KEY_ESC = "KEY_ESC"
KEY_BACKSPACE = "KEY_BACKSPACE"

CTRL_C = '\x03'

# Escape sequence tails (after ESC) -> KEY_* constants.
# xterm sends "[A" style, application cursor mode sends "OA" style.
UNIX_ESCAPE_CODES = {
    '[A': KEY_UP,
    '[B': KEY_DOWN,
    '[C': KEY_RIGHT,
    '[D': KEY_LEFT,
    'OA': KEY_UP,
    'OB': KEY_DOWN,
    'OC': KEY_RIGHT,
    'OD': KEY_LEFT,
    '[5~': KEY_PAGE_UP,
    '[6~': KEY_PAGE_DOWN,
    '[H': KEY_HOME,
    '[F': KEY_END,
    '[1~': KEY_HOME,
    '[4~': KEY_END,
    '[3~': KEY_DELETE,
}

# Second byte after a 0xe0/0x00 prefix -> KEY_* constants
WINDOWS_KEY_CODES = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'K': KEY_LEFT,
    b'M': KEY_RIGHT,
    b'I': KEY_PAGE_UP,
    b'Q': KEY_PAGE_DOWN,
    b'G': KEY_HOME,
    b'O': KEY_END,
    b'S': KEY_DELETE,
}

# Control characters that have a KEY_* name
CONTROL_KEYS = {
    '\r': KEY_ENTER,
    '\n': KEY_ENTER,
    '\x7f': KEY_BACKSPACE,
    '\x08': KEY_BACKSPACE,
}


# ============================================================================
# Terminal modes
# ============================================================================

@contextmanager
def _terminal_mode(configure):
    """Apply configure(fd) to stdin and restore the previous settings on exit."""
    if os.name == 'nt':
        yield None
        return
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        configure(fd)
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def _set_cbreak_noecho(fd):
    attrs = termios.tcgetattr(fd)
    attrs[3] &= ~(termios.ECHO | termios.ICANON)
    attrs[6][termios.VMIN] = 1
    attrs[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def raw_terminal():
    """Context manager for raw terminal mode (Unix only, no-op on Windows)."""
    return _terminal_mode(tty.setraw if os.name != 'nt' else None)


def cbreak_noecho():
    """
    Context manager for cbreak mode with echo disabled (Unix only, no-op on Windows).

    Output processing stays on, so "\\n" still returns the carriage while a
    menu is being drawn.
    """
    return _terminal_mode(_set_cbreak_noecho)


@contextmanager
def _nonblocking(fd):
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        yield
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


def _read_available(max_chars: int) -> str:
    try:
        return sys.stdin.read(max_chars) or ''
    except (IOError, BlockingIOError):
        return ''


def read_escape_sequence(fd) -> str:
    """
    Read the rest of an escape sequence after ESC (Unix only).

    Returns the characters after the ESC, or '' for a standalone ESC.
    """
    with _nonblocking(fd):
        # Sequence bytes arrive together with the ESC; a lone ESC has none
        select.select([sys.stdin], [], [], 0.005)
        return _read_available(10)


# ============================================================================
# Decoding
# ============================================================================

def decode_unix_key(ch: str, extra: str, return_special_keys: bool = True) -> str:
    """
    Map a character (plus any escape-sequence tail) to a key.

    Args:
        ch: First character read
        extra: Characters read after a leading ESC ('' for standalone ESC)
        return_special_keys: If True, return KEY_* constants

    Returns:
        KEY_* constant, the raw character, or '' for escape sequences
        that are unknown or not wanted
    """
    if ch in CONTROL_KEYS:
        return CONTROL_KEYS[ch] if return_special_keys else ch

    if ch == '\x1b':
        if not extra:
            return KEY_ESC if return_special_keys else ch
        return UNIX_ESCAPE_CODES.get(extra, '') if return_special_keys else ''

    return ch


def decode_windows_key(ch: bytes, code: bytes = b'', return_special_keys: bool = True) -> str:
    """
    Windows counterpart of decode_unix_key().

    Args:
        ch: First byte from msvcrt.getch()
        code: Second byte when ch is a 0xe0/0x00 prefix
        return_special_keys: If True, return KEY_* constants
    """
    if ch in (b'\xe0', b'\x00'):
        return WINDOWS_KEY_CODES.get(code, '') if return_special_keys else ''
    if ch == b'\x1b':
        return KEY_ESC if return_special_keys else '\x1b'
    return decode_unix_key(ch.decode('utf-8', errors='ignore'), '', return_special_keys)


# ============================================================================
# Reading
# ============================================================================

def getch(return_special_keys: bool = False) -> str:
    """
    Read a single key from stdin without echo.

    With return_special_keys, arrows/paging/Delete/Enter/ESC come back as
    KEY_* constants; otherwise special keys come back as '' and control
    characters as themselves.
    """
    if os.name == 'nt':
        ch = msvcrt.getch()
        code = msvcrt.getch() if ch in (b'\xe0', b'\x00') else b''
        if ch == b'\x1b' and msvcrt.kbhit():
            # ANSI sequence from a VT-mode console; drop it
            while msvcrt.kbhit():
                msvcrt.getch()
            return ''
        return decode_windows_key(ch, code, return_special_keys)

    with raw_terminal() as fd:
        ch = sys.stdin.read(1)
        extra = read_escape_sequence(fd) if ch == '\x1b' else ''
    return decode_unix_key(ch, extra, return_special_keys)


def read_key() -> str:
    """Read one key as a KEY_* constant or printable character."""
    return getch(return_special_keys=True)


def input_with_esc(prompt: str = "") -> str:
    """
    Read a line of input; ESC cancels.

    Raises:
        CancelInput: If ESC is pressed
        KeyboardInterrupt: On Ctrl+C (not delivered as a signal in raw mode)
    """
    out = sys.stdout
    if prompt:
        out.write(prompt)
        out.flush()

    chars = []
    while True:
        key = read_key()

        if key == KEY_ESC:
            out.write("\n")
            raise CancelInput()
        if key == CTRL_C:
            out.write("\n")
            raise KeyboardInterrupt
        if key == KEY_ENTER:
            out.write("\n")
            return ''.join(chars)

        if key == KEY_BACKSPACE:
            if chars:
                chars.pop()
                out.write('\b \b')
        elif len(key) == 1 and key >= ' ':
            chars.append(key)
            out.write(key)
        out.flush()


def flush_input():
    """
    Discard keys typed ahead of the next prompt.

    Keeps fast repeated keys from leaking escape sequence fragments into
    the next menu.
    """
    if os.name == 'nt':
        while msvcrt.kbhit():
            msvcrt.getch()
        return

    with raw_terminal() as fd, _nonblocking(fd):
        while _read_available(1):
            pass
