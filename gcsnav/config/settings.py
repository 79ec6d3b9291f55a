"""
Navigator settings for gcsnav.

Reads settings.json from the working directory, falling back to the global
config dir. Only the "storage" section is used:

    {"storage": {"maxItems": 30}}
"""

import json
from pathlib import Path
from typing import Optional

from ..core.paths import get_local_settings_path, get_global_settings_path


class NavigatorSettings:
    """
    User preferences for the storage navigator.

    Stores:
    - max_items: how many folder/file entries a directory menu shows
    """

    DEFAULT_MAX_ITEMS = 30

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self.max_items: int = self.DEFAULT_MAX_ITEMS

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "NavigatorSettings":
        """
        Load settings from file.

        With no explicit path, the local settings.json wins over the global
        one. A missing or unreadable file leaves the defaults in place.
        """
        if path is None:
            local_path = get_local_settings_path()
            path = local_path if local_path.exists() else get_global_settings_path()

        settings = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError):
                return settings

            storage = data.get("storage", {}) if isinstance(data, dict) else {}
            if isinstance(storage, dict):
                settings.set_max_items(storage.get("maxItems"))

        return settings

    def set_max_items(self, value) -> bool:
        """Set max_items if value is a positive int. Returns True if applied."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return False
        self.max_items = value
        return True

    def save(self):
        """Save settings to file, keeping any unrelated keys already there."""
        data = {}
        if self.path.exists():
            try:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError):
                data = {}
        if not isinstance(data, dict) or not isinstance(data.get("storage", {}), dict):
            data = {}
        data.setdefault("storage", {})["maxItems"] = self.max_items
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
