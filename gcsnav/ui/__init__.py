"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (keyboard, colors, ANSI cursor control)
- widgets/: Interactive pieces (list prompt, sub-prompts, screen renderer)
"""

from .primitives import (
    getch,
    input_with_esc,
    CancelInput,
    Colors,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_DELETE,
    KEY_ENTER,
    KEY_ESC,
)
from .widgets import (
    KeyEventPrompt,
    MenuItem,
    MenuDivider,
    MenuResult,
    Select,
    Delete,
    Back,
    Escape,
    prompt_text,
    confirm,
    ScreenRenderer,
    OperationLogEntry,
)

__all__ = [
    # Primitives
    "getch",
    "input_with_esc",
    "CancelInput",
    "Colors",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_DELETE",
    "KEY_ENTER",
    "KEY_ESC",
    # Widgets
    "KeyEventPrompt",
    "MenuItem",
    "MenuDivider",
    "MenuResult",
    "Select",
    "Delete",
    "Back",
    "Escape",
    "prompt_text",
    "confirm",
    "ScreenRenderer",
    "OperationLogEntry",
]
