"""
Single-selection list prompt with extra key bindings.

Besides Up/Down/Enter, the prompt reacts to Escape, Left and Delete and
returns a tagged result (Select, Back, Delete, Escape). The menu is redrawn
in place below the cursor; on return the drawn region is erased and replaced
by a plain one-line summary.
"""

import contextlib
import sys
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Callable, Optional, TextIO, Union

from ...core.logging import write_transient
from ..primitives import (
    read_key as _read_terminal_key,
    cbreak_noecho,
    flush_input,
    Colors,
    strip_ansi,
    fit_line,
    cursor_up,
    get_terminal_height,
    CLEAR_TO_END,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_PAGE_UP,
    KEY_PAGE_DOWN,
    KEY_HOME,
    KEY_END,
    KEY_DELETE,
    KEY_ENTER,
    KEY_ESC,
)


DIVIDER_LINE = "─" * 13


@dataclass
class MenuItem:
    """A selectable menu item."""
    label: str
    value: Any = None
    color: str = ""

    def __post_init__(self):
        if self.value is None:
            self.value = self.label


@dataclass
class MenuDivider:
    """A non-selectable row (separator line or notice)."""
    label: str = DIVIDER_LINE
    color: str = Colors.MUTED


# Result variants - exactly one is returned per prompt run

@dataclass(frozen=True)
class Select:
    """Enter pressed on an item."""
    value: Any


@dataclass(frozen=True)
class Delete:
    """Delete pressed on an item that allows deletion."""
    value: Any


@dataclass(frozen=True)
class Back:
    """Left arrow pressed while going back is enabled."""
    pass


@dataclass(frozen=True)
class Escape:
    """Escape pressed."""
    pass


MenuResult = Union[Select, Back, Delete, Escape]


@dataclass
class KeyEventPrompt:
    """Interactive list prompt with Escape/Left/Delete bindings."""

    message: str = ""
    items: list = field(default_factory=list)
    back_enabled: bool = False
    delete_allowed: Optional[Callable[[Any], bool]] = None
    read_key: Optional[Callable[[], str]] = None  # Default: raw terminal read
    out: Optional[TextIO] = None  # Default: current sys.stdout
    page_size: int = 0  # Rows of items shown at once (0 = fit terminal)
    _selected: int = field(default=0, init=False)
    _scroll_offset: int = field(default=0, init=False)
    _rendered_lines: int = field(default=0, init=False)

    @property
    def _out(self) -> TextIO:
        return self.out or sys.stdout

    def _selectable(self) -> list[int]:
        return [i for i, item in enumerate(self.items) if isinstance(item, MenuItem)]

    def _current_value(self) -> Any:
        return self.items[self._selected].value

    def _move_selection(self, selectable: list[int], delta: int):
        """Move selection by delta steps (positive=down, negative=up), wrapping."""
        if not selectable or delta == 0:
            return
        pos = selectable.index(self._selected)
        pos = (pos + delta) % len(selectable)
        self._selected = selectable[pos]

    def _jump_selection(self, selectable: list[int], delta: int):
        """Move selection by delta steps, clamped to the first/last item."""
        if not selectable:
            return
        pos = selectable.index(self._selected)
        pos = max(0, min(len(selectable) - 1, pos + delta))
        self._selected = selectable[pos]

    def _visible_capacity(self) -> int:
        """Rows available for items (prompt line and scroll indicators excluded)."""
        if self.page_size > 0:
            return self.page_size
        return max(5, get_terminal_height() - 4)

    def _adjust_scroll(self):
        """Adjust scroll offset to keep selected item visible."""
        capacity = self._visible_capacity()
        total = len(self.items)
        if total <= capacity:
            self._scroll_offset = 0
            return
        if self._selected < self._scroll_offset:
            self._scroll_offset = self._selected
        elif self._selected >= self._scroll_offset + capacity:
            self._scroll_offset = self._selected - capacity + 1
        self._scroll_offset = max(0, min(self._scroll_offset, total - capacity))

    # ------------------------------------------------------------------
    # Key bindings
    # ------------------------------------------------------------------

    def _on_enter(self) -> Optional[MenuResult]:
        if not self._selectable():
            return None
        return Select(self._current_value())

    def _on_escape(self) -> Optional[MenuResult]:
        return Escape()

    def _on_left(self) -> Optional[MenuResult]:
        return Back()

    def _on_delete(self) -> Optional[MenuResult]:
        if not self._selectable() or self.delete_allowed is None:
            return None
        value = self._current_value()
        if not self.delete_allowed(value):
            return None
        return Delete(value)

    def _key_bindings(self) -> dict[str, Callable[[], Optional[MenuResult]]]:
        """Keys that may end the prompt. A handler returning None keeps it open."""
        bindings = {
            KEY_ENTER: self._on_enter,
            KEY_ESC: self._on_escape,
            KEY_DELETE: self._on_delete,
        }
        if self.back_enabled:
            bindings[KEY_LEFT] = self._on_left
        return bindings

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_item(self, idx: int, item: Any) -> str:
        if isinstance(item, MenuDivider):
            return f"  {item.color}{item.label}{Colors.RESET}"
        if idx == self._selected:
            return f"{Colors.CYAN}❯ {strip_ansi(item.label)}{Colors.RESET}"
        if item.color:
            return f"  {item.color}{item.label}{Colors.RESET}"
        return f"  {item.label}"

    def render_lines(self) -> list[str]:
        """Build the lines of the current frame (prompt line first)."""
        lines = [f"{Colors.GREEN}?{Colors.RESET} {Colors.BOLD}{self.message}{Colors.RESET}"]

        self._adjust_scroll()
        capacity = self._visible_capacity()
        start = self._scroll_offset
        end = min(len(self.items), start + capacity)

        if start > 0:
            lines.append(f"  {Colors.MUTED}▲ {start} more above{Colors.RESET}")
        for idx in range(start, end):
            lines.append(self._render_item(idx, self.items[idx]))
        if end < len(self.items):
            lines.append(f"  {Colors.MUTED}▼ {len(self.items) - end} more below{Colors.RESET}")

        return [fit_line(line) for line in lines]

    def _erase_sequence(self) -> str:
        """Move to the first drawn line and clear everything below it."""
        return f"{cursor_up(self._rendered_lines)}\r{CLEAR_TO_END}"

    def _render(self):
        """Redraw the menu in place using a single buffered write to prevent flicker."""
        lines = self.render_lines()
        buf = StringIO()
        buf.write(self._erase_sequence())
        for line in lines:
            buf.write(f"{line}\n")
        out = self._out
        write_transient(out, buf.getvalue())
        out.flush()
        self._rendered_lines = len(lines)

    def _finish(self, result: MenuResult) -> MenuResult:
        """Erase the drawn region and leave a plain summary line."""
        summary = f"? {strip_ansi(self.message)}"
        if isinstance(result, Select):
            summary += f" {strip_ansi(self.items[self._selected].label)}"
        out = self._out
        out.write(f"{self._erase_sequence()}{fit_line(summary)}\n")
        out.flush()
        self._rendered_lines = 0
        return result

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self, initial_index: int = 0) -> MenuResult:
        """Show the menu and block until one of the bound keys ends it."""
        selectable = self._selectable()
        if initial_index in selectable:
            self._selected = initial_index
        elif selectable:
            self._selected = selectable[0]
        else:
            self._selected = 0

        self._scroll_offset = 0
        self._rendered_lines = 0
        bindings = self._key_bindings()

        if self.read_key is None:
            read = _read_terminal_key
            mode = cbreak_noecho()
        else:
            read = self.read_key
            mode = contextlib.nullcontext()

        with mode:
            if self.read_key is None:
                flush_input()
            self._render()

            while True:
                key = read()

                if key in bindings:
                    result = bindings[key]()
                    if result is not None:
                        return self._finish(result)

                elif key == KEY_UP:
                    self._move_selection(selectable, -1)
                    self._render()

                elif key == KEY_DOWN:
                    self._move_selection(selectable, 1)
                    self._render()

                elif key == KEY_PAGE_UP:
                    self._jump_selection(selectable, -max(1, self._visible_capacity() - 1))
                    self._render()

                elif key == KEY_PAGE_DOWN:
                    self._jump_selection(selectable, max(1, self._visible_capacity() - 1))
                    self._render()

                elif key == KEY_HOME:
                    self._jump_selection(selectable, -len(selectable))
                    self._render()

                elif key == KEY_END:
                    self._jump_selection(selectable, len(selectable))
                    self._render()

                elif key == '\x03':
                    # Ctrl+C arrives as a character in raw mode
                    write_transient(self._out, self._erase_sequence())
                    self._out.flush()
                    raise KeyboardInterrupt
