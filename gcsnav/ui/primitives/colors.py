"""
Shared color definitions for terminal output.
"""


class Colors:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    MUTED = "\x1b[38;2;148;163;184m"
    RED = "\x1b[38;2;239;68;68m"
    GREEN = "\x1b[38;2;34;197;94m"
    YELLOW = "\x1b[38;2;234;179;8m"
    CYAN = "\x1b[38;2;34;211;238m"


def colorize(text: str, color: str) -> str:
    """Wrap text in a color and a reset."""
    return f"{color}{text}{Colors.RESET}"
