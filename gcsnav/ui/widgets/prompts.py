"""
Small blocking sub-prompts: a line of text and a yes/no question.
"""

import sys
from typing import Callable, Optional, TextIO

from ..primitives import (
    CancelInput,
    Colors,
    colorize,
    input_with_esc,
    read_key as _read_terminal_key,
    KEY_ENTER,
    KEY_ESC,
)


def prompt_text(
    message: str,
    validate: Optional[Callable[[str], Optional[str]]] = None,
    read_line: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> Optional[str]:
    """
    Ask for one line of text.

    Args:
        message: Question shown after "? "
        validate: Returns an error message for rejected input, None if accepted.
                  Rejected input is reported and the question asked again.
        read_line: Line reader (default: ESC-aware terminal input)
        out: Output stream (default: sys.stdout)

    Returns:
        The stripped answer, or None if it was empty or ESC was pressed
    """
    read_line = read_line or input_with_esc
    out = out or sys.stdout
    question = f"{colorize('?', Colors.GREEN)} {Colors.BOLD}{message}{Colors.RESET} "

    while True:
        try:
            answer = read_line(question).strip()
        except CancelInput:
            return None

        if not answer:
            return None

        error = validate(answer) if validate else None
        if not error:
            return answer

        out.write(f"{colorize(f'>> {error}', Colors.RED)}\n")
        out.flush()


def confirm(
    message: str,
    default: bool = False,
    read_key: Optional[Callable[[], str]] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """
    Ask a yes/no question answered with a single key.

    y/n answer directly, Enter takes the default, ESC answers no.
    """
    read_key = read_key or _read_terminal_key
    out = out or sys.stdout
    hint = "(Y/n)" if default else "(y/N)"
    out.write(f"{colorize('?', Colors.GREEN)} {Colors.BOLD}{message}{Colors.RESET} {Colors.MUTED}{hint}{Colors.RESET} ")
    out.flush()

    while True:
        key = read_key()
        if key in ("y", "Y"):
            answer = True
        elif key in ("n", "N", KEY_ESC):
            answer = False
        elif key == KEY_ENTER:
            answer = default
        elif key == '\x03':
            out.write("\n")
            raise KeyboardInterrupt
        else:
            continue

        out.write(f"{colorize('Yes' if answer else 'No', Colors.CYAN)}\n")
        out.flush()
        return answer
