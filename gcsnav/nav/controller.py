"""
Navigation state machine.

One NavigationController drives a browsing session over a single bucket:
list the directory on top of the path stack, show it as a menu, act on the
result, repeat. Per-item failures (transfers, deletes) become entries in the
operation log shown above the next menu; only a failed listing ends the
session.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from ..core.errors import ListingError, TransferError, DeleteError
from ..core.formatting import DELIMITER, base_name, display_name, display_path
from ..core.logging import debug_log
from ..config.settings import NavigatorSettings
from ..ui.widgets import (
    KeyEventPrompt,
    Select,
    Back,
    Delete,
    Escape,
    ScreenRenderer,
    OperationLogEntry,
    LOG_SUCCESS,
    LOG_ERROR,
    LOG_INFO,
    exit_label,
    back_label,
    folder_label,
    prompt_text,
    confirm,
)
from .contents import BucketContentsAdapter, FolderItem, FileItem, NavItem
from .menu_builder import (
    UPLOAD_ACTION,
    CREATE_FOLDER_ACTION,
    build_menu_items,
    is_nav_item,
    prompt_message,
)
from .path_stack import PathStack, ROOT_PREFIX


UPLOAD_PATH_PROMPT = "Enter local file path to upload (or leave empty to cancel):"
FOLDER_NAME_PROMPT = "Enter folder name (or leave empty to cancel):"


# ============================================================================
# States
# ============================================================================

@dataclass(frozen=True)
class Browsing:
    path: str


@dataclass(frozen=True)
class ConfirmingDelete:
    item: NavItem


@dataclass(frozen=True)
class AwaitingUploadPath:
    pass


@dataclass(frozen=True)
class AwaitingFolderName:
    pass


@dataclass(frozen=True)
class Exited:
    pass


NavState = Union[Browsing, ConfirmingDelete, AwaitingUploadPath, AwaitingFolderName, Exited]


def validate_folder_name(name: str) -> Optional[str]:
    """Error message for a folder name that cannot be used, None if it can."""
    if DELIMITER in name:
        return f"Folder name cannot contain {DELIMITER}"
    return None


# ============================================================================
# Controller
# ============================================================================

class NavigationController:
    """
    Interactive browser for one bucket.

    Collaborators are injectable so sessions can be scripted:
        storage: backend with list/download/upload/delete/create_folder calls
        prompt_factory: builds the menu prompt (KeyEventPrompt signature)
        ask_text: line prompt, returns None when cancelled
        ask_confirm: yes/no prompt
    """

    def __init__(
        self,
        storage,
        bucket: str,
        max_items: int = NavigatorSettings.DEFAULT_MAX_ITEMS,
        renderer: Optional[ScreenRenderer] = None,
        prompt_factory: Callable[..., KeyEventPrompt] = KeyEventPrompt,
        ask_text: Callable[..., Optional[str]] = prompt_text,
        ask_confirm: Callable[..., bool] = confirm,
        download_dir: Optional[Path] = None,
    ):
        self.storage = storage
        self.adapter = BucketContentsAdapter(storage)
        self.bucket = bucket
        self.max_items = max_items
        self.renderer = renderer or ScreenRenderer()
        self.prompt_factory = prompt_factory
        self.ask_text = ask_text
        self.ask_confirm = ask_confirm
        self.download_dir = download_dir

        self.path_stack = PathStack()
        self.operation_log: list[OperationLogEntry] = []
        self.state: NavState = Browsing(ROOT_PREFIX)

        self._handlers = {
            Browsing: self._browse,
            ConfirmingDelete: self._confirm_delete,
            AwaitingUploadPath: self._await_upload_path,
            AwaitingFolderName: self._await_folder_name,
        }

    @property
    def current_path(self) -> str:
        return self.path_stack.top()

    @property
    def back_enabled(self) -> bool:
        return not self.path_stack.at_root

    def _log(self, kind: str, message: str):
        self.operation_log.append(OperationLogEntry(kind, message))

    def _breadcrumb(self, message: str, label: str):
        """Replace the prompt's summary line with the action just taken."""
        self.renderer.overwrite_last_menu_line(f"? {message} {label}")

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def step(self) -> NavState:
        """Run the handler for the current state and move to the next one."""
        if isinstance(self.state, Exited):
            return self.state
        handler = self._handlers[type(self.state)]
        self.state = handler(self.state)
        return self.state

    def run(self):
        """Browse until the user exits or a listing fails."""
        debug_log(f"Navigator started: {self.bucket}")
        while not isinstance(self.state, Exited):
            self.step()
        debug_log(f"Navigator exited: {self.bucket}")

    # ------------------------------------------------------------------
    # Browsing
    # ------------------------------------------------------------------

    def _browse(self, state: Browsing) -> NavState:
        path = state.path

        # Results of the previous pass are shown once, above this menu
        self.renderer.flush_operation_log(self.operation_log)
        self.operation_log.clear()

        self.renderer.show_progress(f"Listing {display_path(path)}")
        try:
            contents = self.adapter.list_contents(self.bucket, path)
        except ListingError as e:
            self.renderer.show_error(f"Error listing objects: {e}")
            return Exited()
        self.renderer.clear_progress()

        message = prompt_message(self.bucket, path, self.back_enabled)
        prompt = self.prompt_factory(
            message=message,
            items=build_menu_items(contents, path, self.max_items),
            back_enabled=self.back_enabled,
            delete_allowed=is_nav_item,
        )
        result = prompt.run()
        return self._dispatch(result, path, message)

    def _dispatch(self, result, path: str, message: str) -> NavState:
        if isinstance(result, Escape):
            self._breadcrumb(message, exit_label())
            self.renderer.end_line()
            return Exited()

        if isinstance(result, Back):
            self._breadcrumb(message, back_label())
            return Browsing(self.path_stack.pop())

        if isinstance(result, Delete):
            return ConfirmingDelete(result.value)

        value = result.value if isinstance(result, Select) else None

        if isinstance(value, FolderItem):
            self._breadcrumb(message, folder_label(display_name(value.prefix, path)))
            self.path_stack.push(value.prefix)
            return Browsing(value.prefix)

        if isinstance(value, FileItem):
            self._download(value, path)
            return Browsing(path)

        if value == UPLOAD_ACTION:
            return AwaitingUploadPath()

        if value == CREATE_FOLDER_ACTION:
            return AwaitingFolderName()

        return Browsing(path)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _download(self, item: FileItem, path: str):
        file_name = base_name(item.path)
        local_path = (self.download_dir or Path.cwd()) / file_name

        self.renderer.show_progress(f"Downloading {file_name}")
        try:
            self.storage.download_object(self.bucket, item.path, local_path)
        except TransferError as e:
            self._log(LOG_ERROR, f"Download failed: {file_name} - {e}")
        else:
            self._log(LOG_SUCCESS, f"Downloaded: {file_name} → {local_path}")
        finally:
            self.renderer.clear_progress()

    def _confirm_delete(self, state: ConfirmingDelete) -> NavState:
        path = self.current_path
        item = state.item
        is_folder = isinstance(item, FolderItem)
        key = item.prefix if is_folder else item.path
        kind = "folder" if is_folder else "file"
        name = display_name(key, path)

        if not self.ask_confirm(f'Delete {kind} "{name}"?', default=False):
            self._log(LOG_INFO, f"Delete cancelled: {name}")
            return Browsing(path)

        self.renderer.show_progress(f"Deleting {kind} {name}")
        try:
            if is_folder:
                count = self.storage.delete_objects_by_prefix(self.bucket, key)
                outcome = f'Deleted folder "{name}" ({count} files)'
            else:
                self.storage.delete_object(self.bucket, key)
                outcome = f'Deleted file "{name}"'
        except DeleteError as e:
            self._log(LOG_ERROR, f"Delete failed: {name} - {e}")
        else:
            self._log(LOG_SUCCESS, outcome)
        finally:
            self.renderer.clear_progress()

        return Browsing(path)

    def _await_upload_path(self, state: AwaitingUploadPath) -> NavState:
        path = self.current_path
        local_path = self.ask_text(UPLOAD_PATH_PROMPT)
        if not local_path:
            self._log(LOG_INFO, "Upload cancelled")
            return Browsing(path)

        file_name = base_name(local_path)
        remote_path = path + file_name

        self.renderer.show_progress(f"Uploading {file_name}")
        try:
            self.storage.upload_object(self.bucket, local_path, remote_path)
        except TransferError as e:
            self._log(LOG_ERROR, f"Upload failed: {file_name} - {e}")
        else:
            self._log(LOG_SUCCESS, f"Uploaded: {file_name} → {self.bucket}/{remote_path}")
        finally:
            self.renderer.clear_progress()

        return Browsing(path)

    def _await_folder_name(self, state: AwaitingFolderName) -> NavState:
        path = self.current_path
        folder_name = self.ask_text(FOLDER_NAME_PROMPT, validate=validate_folder_name)
        if not folder_name:
            self._log(LOG_INFO, "Create folder cancelled")
            return Browsing(path)

        self.renderer.show_progress(f"Creating folder {folder_name}")
        try:
            self.storage.create_folder(self.bucket, path + folder_name + DELIMITER)
        except TransferError as e:
            self._log(LOG_ERROR, f"Create folder failed: {folder_name} - {e}")
        else:
            self._log(LOG_SUCCESS, f"Folder created: {folder_name} at {self.bucket}:{display_path(path)}")
        finally:
            self.renderer.clear_progress()

        return Browsing(path)
