"""
Directory view over a flat object listing.

The storage backend returns common prefixes and objects for one prefix;
BucketContentsAdapter turns that into the folders and files of a single
directory, dropping anything that does not belong to it.
"""

from dataclasses import dataclass, field
from typing import Union

from ..core.formatting import is_folder_key
from ..core.logging import debug_log


@dataclass(frozen=True)
class FolderItem:
    """A folder; prefix is the full delimiter-terminated key prefix."""
    prefix: str


@dataclass(frozen=True)
class FileItem:
    """A file; path is the full object key."""
    path: str
    size_bytes: int = 0


NavItem = Union[FolderItem, FileItem]


@dataclass(frozen=True)
class FileEntry:
    name: str
    size_bytes: int = 0


@dataclass
class DirectoryContents:
    """Folders and files directly under one prefix, in backend order."""
    folders: list[str] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    def items(self) -> list[NavItem]:
        """All entries as nav items, folders first."""
        result: list[NavItem] = [FolderItem(prefix) for prefix in self.folders]
        result.extend(FileItem(f.name, f.size_bytes) for f in self.files)
        return result

    def is_empty(self) -> bool:
        return not self.folders and not self.files

    def __len__(self) -> int:
        return len(self.folders) + len(self.files)


def _parse_size(value) -> int:
    """Object sizes come back from the JSON API as decimal strings."""
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


class BucketContentsAdapter:
    """Lists one directory of a bucket through a storage backend."""

    def __init__(self, storage):
        self.storage = storage

    def list_contents(self, bucket: str, prefix: str) -> DirectoryContents:
        """
        List the folders and files directly under prefix.

        Raises:
            ListingError: propagated from the storage backend
        """
        raw = self.storage.list_objects(bucket, prefix)

        folders = []
        for sub in raw.get("prefixes", []):
            if not sub.startswith(prefix) or sub == prefix or not is_folder_key(sub):
                continue
            folders.append(sub)

        files = []
        for obj in raw.get("items", []):
            name = obj.get("name", "")
            # The folder's own marker object and nested markers are not files
            if not name.startswith(prefix) or name == prefix or is_folder_key(name):
                continue
            files.append(FileEntry(name, _parse_size(obj.get("size", 0))))

        debug_log(f"List {bucket}/{prefix}: {len(folders)} folders, {len(files)} files")
        return DirectoryContents(folders, files)
