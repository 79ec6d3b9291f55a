"""
Tests for KeyEventPrompt.

Keys are scripted through read_key and output captured in a StringIO, so
these run without a terminal.
"""

from io import StringIO

import pytest

from gcsnav.ui.primitives import (
    strip_ansi,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_PAGE_DOWN,
    KEY_HOME,
    KEY_END,
    KEY_DELETE,
    KEY_ENTER,
    KEY_ESC,
)
from gcsnav.ui.widgets import (
    KeyEventPrompt,
    MenuItem,
    MenuDivider,
    Select,
    Delete,
    Back,
    Escape,
)


def make_prompt(keys, items=None, **kwargs):
    """Prompt reading the given keys in order, writing to a StringIO."""
    key_iter = iter(keys)
    out = StringIO()
    if items is None:
        items = [
            MenuItem("[D] a/", "a/"),
            MenuItem("[F] b.txt (2.0 KB)", "b.txt"),
            MenuDivider(),
            MenuItem("↑ Upload file here", "upload"),
        ]
    prompt = KeyEventPrompt(
        message="assets:/",
        items=items,
        read_key=lambda: next(key_iter),
        out=out,
        **kwargs,
    )
    return prompt, out


class TestSelection:
    """Tests for Up/Down/Enter behavior."""

    def test_enter_selects_first_item(self):
        prompt, _ = make_prompt([KEY_ENTER])
        assert prompt.run() == Select("a/")

    def test_down_moves_highlight(self):
        prompt, _ = make_prompt([KEY_DOWN, KEY_ENTER])
        assert prompt.run() == Select("b.txt")

    def test_divider_is_skipped(self):
        prompt, _ = make_prompt([KEY_DOWN, KEY_DOWN, KEY_ENTER])
        assert prompt.run() == Select("upload")

    def test_up_wraps_to_last(self):
        prompt, _ = make_prompt([KEY_UP, KEY_ENTER])
        assert prompt.run() == Select("upload")

    def test_down_wraps_to_first(self):
        prompt, _ = make_prompt([KEY_DOWN, KEY_DOWN, KEY_DOWN, KEY_ENTER])
        assert prompt.run() == Select("a/")

    def test_home_and_end(self):
        prompt, _ = make_prompt([KEY_END, KEY_ENTER])
        assert prompt.run() == Select("upload")
        prompt, _ = make_prompt([KEY_END, KEY_HOME, KEY_ENTER])
        assert prompt.run() == Select("a/")

    def test_page_down_clamps(self):
        prompt, _ = make_prompt([KEY_PAGE_DOWN, KEY_PAGE_DOWN, KEY_ENTER], page_size=2)
        assert prompt.run() == Select("upload")

    def test_initial_index(self):
        prompt, _ = make_prompt([KEY_ENTER])
        assert prompt.run(initial_index=1) == Select("b.txt")

    def test_cursor_state_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            KeyEventPrompt(message="assets:/", _selected=2)

    def test_other_keys_are_ignored(self):
        prompt, _ = make_prompt(["x", KEY_RIGHT, " ", "", KEY_DOWN, KEY_ENTER])
        assert prompt.run() == Select("b.txt")


class TestExtraBindings:
    """Tests for the Escape/Left/Delete bindings."""

    def test_escape_always_returns(self):
        prompt, _ = make_prompt([KEY_DOWN, KEY_ESC])
        assert prompt.run() == Escape()

    def test_escape_with_back_enabled(self):
        prompt, _ = make_prompt([KEY_ESC], back_enabled=True)
        assert prompt.run() == Escape()

    def test_left_returns_back_when_enabled(self):
        prompt, _ = make_prompt([KEY_LEFT], back_enabled=True)
        assert prompt.run() == Back()

    def test_left_ignored_when_disabled(self):
        """Left arrow does nothing at the root; the next key decides."""
        prompt, _ = make_prompt([KEY_LEFT, KEY_ENTER], back_enabled=False)
        assert prompt.run() == Select("a/")

    def test_delete_allowed_item(self):
        prompt, _ = make_prompt([KEY_DOWN, KEY_DELETE], delete_allowed=lambda v: v != "upload")
        assert prompt.run() == Delete("b.txt")

    def test_delete_on_disallowed_item_keeps_prompt_open(self):
        prompt, _ = make_prompt(
            [KEY_UP, KEY_DELETE, KEY_ENTER],
            delete_allowed=lambda v: v != "upload",
        )
        assert prompt.run() == Select("upload")

    def test_delete_without_predicate_is_ignored(self):
        prompt, _ = make_prompt([KEY_DELETE, KEY_ESC])
        assert prompt.run() == Escape()

    def test_no_selectable_items_still_honours_escape_and_back(self):
        items = [MenuDivider("(empty)")]
        prompt, _ = make_prompt([KEY_ENTER, KEY_DELETE, KEY_ESC], items=items,
                                delete_allowed=lambda v: True)
        assert prompt.run() == Escape()
        prompt, _ = make_prompt([KEY_LEFT], items=items, back_enabled=True)
        assert prompt.run() == Back()

    def test_ctrl_c_raises_keyboard_interrupt(self):
        prompt, _ = make_prompt(["\x03"])
        with pytest.raises(KeyboardInterrupt):
            prompt.run()


class TestRendering:
    """Tests for drawing, redrawing and the summary line."""

    def test_renders_prompt_and_rows(self):
        prompt, _ = make_prompt([])
        lines = [strip_ansi(line) for line in prompt.render_lines()]
        assert lines[0] == "? assets:/"
        assert lines[1] == "❯ [D] a/"
        assert lines[2] == "  [F] b.txt (2.0 KB)"
        assert lines[3].strip() == "─" * 13

    def test_summary_line_for_select(self):
        prompt, out = make_prompt([KEY_DOWN, KEY_ENTER])
        prompt.run()
        written = out.getvalue()
        assert written.endswith("? assets:/ [F] b.txt (2.0 KB)\n")

    def test_summary_line_is_uncolored(self):
        prompt, out = make_prompt([KEY_ESC])
        prompt.run()
        last_line = out.getvalue().rsplit("\x1b[J", 1)[-1]
        assert last_line == "? assets:/\n"

    def test_redraw_moves_up_over_previous_frame(self):
        """Each redraw starts by moving up over the lines drawn before."""
        prompt, out = make_prompt([KEY_DOWN, KEY_ENTER])
        prompt.run()
        # 5 lines drawn (prompt + 4 rows), so redraws move up 5
        assert "\x1b[5A\r\x1b[J" in out.getvalue()

    def test_scroll_indicators(self):
        items = [MenuItem(f"item {i}", i) for i in range(10)]
        prompt, _ = make_prompt([], items=items, page_size=3)
        prompt._selected = 5
        lines = [strip_ansi(line) for line in prompt.render_lines()]
        assert any("more above" in line for line in lines)
        assert any("more below" in line for line in lines)
        assert "❯ item 5" in lines

    def test_selected_row_has_no_inner_colors(self):
        items = [MenuItem("\x1b[32m↑ Upload file here\x1b[0m", "upload")]
        prompt, _ = make_prompt([], items=items)
        selected = prompt.render_lines()[1]
        assert "❯ ↑ Upload file here" in selected
        assert "\x1b[32m" not in selected
