"""
Menu construction for one directory listing.
"""

from ..core.formatting import display_name, display_path, format_size
from ..ui.primitives import Colors, colorize
from ..ui.widgets import MenuItem, MenuDivider
from .contents import DirectoryContents, FolderItem, FileItem, NavItem


# Values of the fixed actions shown below the entries
UPLOAD_ACTION = "upload"
CREATE_FOLDER_ACTION = "createFolder"

BACK_HINT = "← back"
KEY_HINTS = "DEL delete, ESC exit"


def is_nav_item(value) -> bool:
    """True for real folder/file entries (the only values that can be deleted)."""
    return isinstance(value, (FolderItem, FileItem))


def upload_label() -> str:
    return colorize("↑ Upload file here", Colors.GREEN)


def create_folder_label() -> str:
    return colorize("+ Create folder here", Colors.GREEN)


def truncation_notice(max_items: int) -> str:
    return colorize(f"(showing first {max_items} items)", Colors.YELLOW)


def folder_entry_label(prefix: str, current_path: str) -> str:
    return f"[D] {display_name(prefix, current_path)}"


def file_entry_label(name: str, size_bytes: int, current_path: str) -> str:
    return f"[F] {display_name(name, current_path)} ({format_size(size_bytes)})"


def entry_label(item: NavItem, current_path: str) -> str:
    if isinstance(item, FolderItem):
        return folder_entry_label(item.prefix, current_path)
    return file_entry_label(item.path, item.size_bytes, current_path)


def prompt_message(bucket: str, current_path: str, back_enabled: bool) -> str:
    """Menu question, e.g. "assets:photos/ (← back, DEL delete, ESC exit)"."""
    hints = f"{BACK_HINT}, {KEY_HINTS}" if back_enabled else KEY_HINTS
    return f"{bucket}:{display_path(current_path)} ({hints})"


def build_menu_items(contents: DirectoryContents, current_path: str, max_items: int) -> list:
    """
    Build menu rows for a directory.

    Folders come first, then files, each group in listing order. At most
    max_items entries are shown (folders count first); when entries were
    dropped a notice row is added. The upload and create-folder actions are
    always last.
    """
    items = []
    for entry in contents.items()[:max_items]:
        items.append(MenuItem(entry_label(entry, current_path), entry))

    if not contents.is_empty():
        items.append(MenuDivider())
    if len(contents) > max_items:
        items.append(MenuDivider(truncation_notice(max_items), color=""))

    items.append(MenuItem(upload_label(), UPLOAD_ACTION))
    items.append(MenuItem(create_folder_label(), CREATE_FOLDER_ACTION))
    return items
