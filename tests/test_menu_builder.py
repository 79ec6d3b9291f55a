"""
Tests for menu construction: ordering, truncation, labels and delete gating.
"""

import pytest

from gcsnav.nav import (
    DirectoryContents,
    FileEntry,
    FolderItem,
    FileItem,
    UPLOAD_ACTION,
    CREATE_FOLDER_ACTION,
    build_menu_items,
    is_nav_item,
    prompt_message,
)
from gcsnav.ui.primitives import strip_ansi
from gcsnav.ui.widgets import MenuItem, MenuDivider


def labels(items):
    return [strip_ansi(item.label) for item in items]


class TestBuildMenuItems:
    """Tests for build_menu_items()."""

    def test_root_scenario(self):
        contents = DirectoryContents(["a/"], [FileEntry("b.txt", 2048)])
        items = build_menu_items(contents, "", 30)
        assert labels(items) == [
            "[D] a/",
            "[F] b.txt (2.0 KB)",
            "─" * 13,
            "↑ Upload file here",
            "+ Create folder here",
        ]
        assert isinstance(items[2], MenuDivider)
        assert items[0].value == FolderItem("a/")
        assert items[1].value == FileItem("b.txt", 2048)
        assert items[3].value == UPLOAD_ACTION
        assert items[4].value == CREATE_FOLDER_ACTION

    def test_names_relative_to_current_path(self):
        contents = DirectoryContents(["docs/img/"], [FileEntry("docs/readme.md", 1536)])
        items = build_menu_items(contents, "docs/", 30)
        assert labels(items)[:2] == ["[D] img/", "[F] readme.md (1.5 KB)"]

    def test_empty_directory_has_only_actions(self):
        items = build_menu_items(DirectoryContents(), "", 30)
        assert labels(items) == ["↑ Upload file here", "+ Create folder here"]

    def test_folders_precede_files(self):
        contents = DirectoryContents(
            ["x/", "y/"],
            [FileEntry("a.txt", 1), FileEntry("b.txt", 1)],
        )
        items = [i for i in build_menu_items(contents, "", 30) if isinstance(i, MenuItem)]
        kinds = [type(i.value) for i in items if is_nav_item(i.value)]
        assert kinds == [FolderItem, FolderItem, FileItem, FileItem]

    @pytest.mark.parametrize("max_items", [1, 2, 3, 4])
    def test_truncation_drops_trailing_only(self, max_items):
        contents = DirectoryContents(
            ["x/", "y/"],
            [FileEntry("a.txt", 1), FileEntry("b.txt", 1), FileEntry("c.txt", 1)],
        )
        full = [i.value for i in build_menu_items(contents, "", 30) if is_nav_item(getattr(i, "value", None))]
        shown = [i.value for i in build_menu_items(contents, "", max_items) if is_nav_item(getattr(i, "value", None))]
        assert shown == full[:max_items]

    def test_truncation_notice(self):
        contents = DirectoryContents(["x/", "y/"], [FileEntry("a.txt", 1)])
        items = build_menu_items(contents, "", 2)
        assert labels(items) == [
            "[D] x/",
            "[D] y/",
            "─" * 13,
            "(showing first 2 items)",
            "↑ Upload file here",
            "+ Create folder here",
        ]
        assert isinstance(items[3], MenuDivider)

    def test_no_notice_when_exactly_full(self):
        contents = DirectoryContents(["x/"], [FileEntry("a.txt", 1)])
        assert "(showing first 2 items)" not in labels(build_menu_items(contents, "", 2))


class TestDeleteGating:
    """Only real folder/file entries can be deleted."""

    def test_pseudo_items_not_deletable(self):
        assert not is_nav_item(UPLOAD_ACTION)
        assert not is_nav_item(CREATE_FOLDER_ACTION)
        assert not is_nav_item(None)

    def test_real_items_deletable(self):
        assert is_nav_item(FolderItem("a/"))
        assert is_nav_item(FileItem("b.txt", 0))


class TestPromptMessage:
    """Tests for the menu question line."""

    def test_root_message_has_no_back_hint(self):
        assert prompt_message("assets", "", False) == "assets:/ (DEL delete, ESC exit)"

    def test_nested_message_has_back_hint(self):
        assert prompt_message("assets", "a/", True) == "assets:a/ (← back, DEL delete, ESC exit)"
