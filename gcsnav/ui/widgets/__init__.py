"""
Interactive reusable pieces: list prompt, line/confirm prompts, screen output.
"""

from .menu import (
    KeyEventPrompt,
    MenuItem,
    MenuDivider,
    MenuResult,
    Select,
    Delete,
    Back,
    Escape,
    DIVIDER_LINE,
)
from .prompts import prompt_text, confirm
from .screen import (
    ScreenRenderer,
    OperationLogEntry,
    LOG_SUCCESS,
    LOG_ERROR,
    LOG_INFO,
    exit_label,
    back_label,
    folder_label,
    format_log_entry,
)

__all__ = [
    "KeyEventPrompt",
    "MenuItem",
    "MenuDivider",
    "MenuResult",
    "Select",
    "Delete",
    "Back",
    "Escape",
    "DIVIDER_LINE",
    "prompt_text",
    "confirm",
    "ScreenRenderer",
    "OperationLogEntry",
    "LOG_SUCCESS",
    "LOG_ERROR",
    "LOG_INFO",
    "exit_label",
    "back_label",
    "folder_label",
    "format_log_entry",
]
