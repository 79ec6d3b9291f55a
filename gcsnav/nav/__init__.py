"""
Bucket navigation: path history, directory listing, menus and the
state machine that ties them together.
"""

from .path_stack import PathStack, ROOT_PREFIX
from .contents import (
    FolderItem,
    FileItem,
    NavItem,
    FileEntry,
    DirectoryContents,
    BucketContentsAdapter,
)
from .menu_builder import (
    UPLOAD_ACTION,
    CREATE_FOLDER_ACTION,
    build_menu_items,
    is_nav_item,
    prompt_message,
)
from .controller import (
    NavigationController,
    Browsing,
    ConfirmingDelete,
    AwaitingUploadPath,
    AwaitingFolderName,
    Exited,
    validate_folder_name,
)
from .selection import select_configuration, select_bucket

__all__ = [
    "PathStack",
    "ROOT_PREFIX",
    "FolderItem",
    "FileItem",
    "NavItem",
    "FileEntry",
    "DirectoryContents",
    "BucketContentsAdapter",
    "UPLOAD_ACTION",
    "CREATE_FOLDER_ACTION",
    "build_menu_items",
    "is_nav_item",
    "prompt_message",
    "NavigationController",
    "Browsing",
    "ConfirmingDelete",
    "AwaitingUploadPath",
    "AwaitingFolderName",
    "Exited",
    "validate_folder_name",
    "select_configuration",
    "select_bucket",
]
