"""
Formatting helpers for gcsnav.
"""

import math
import posixpath


# Object keys are folded into folders on this character
DELIMITER = "/"

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


# ============================================================================
# Size formatting
# ============================================================================

def format_size(size_bytes: int) -> str:
    """
    Format bytes as a human readable string using binary units.

    0 -> "0 B", 1536 -> "1.5 KB", 1048576 -> "1.0 MB".
    Sizes past the largest unit stay in TB.
    """
    if size_bytes <= 0:
        return "0 B"
    unit = min(int(math.log(size_bytes, 1024)), len(SIZE_UNITS) - 1)
    # log() can land on the wrong side of an exact power of 1024
    if unit + 1 < len(SIZE_UNITS) and size_bytes >= 1024 ** (unit + 1):
        unit += 1
    elif unit > 0 and size_bytes < 1024 ** unit:
        unit -= 1
    return f"{size_bytes / 1024 ** unit:.1f} {SIZE_UNITS[unit]}"


# ============================================================================
# Key/path helpers
# ============================================================================

def display_name(full_path: str, prefix: str) -> str:
    """
    Name of an object or folder relative to the directory being shown.

    Example: display_name("photos/2024/a.jpg", "photos/2024/") -> "a.jpg"
    """
    if prefix and full_path.startswith(prefix):
        return full_path[len(prefix):]
    return full_path


def base_name(path: str) -> str:
    """Last component of a local or remote path ("dir/file.txt" -> "file.txt")."""
    return posixpath.basename(path.replace("\\", "/"))


def display_path(prefix: str) -> str:
    """Path as shown in prompts and breadcrumbs (root is "/")."""
    return prefix or "/"


def is_folder_key(key: str) -> bool:
    """True for delimiter-terminated keys (folder prefixes and folder markers)."""
    return key.endswith(DELIMITER)
