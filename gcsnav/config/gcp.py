"""
GCP configuration loading for gcsnav.

A configuration is a JSON file named gcp-options-<name>.json:

    {
        "credentialsFile": "my-service-account.json",
        "defaultProjectId": "my-project",
        "defaultBucket": "my-bucket",
        "buckets": [{"name": "my-bucket", "displayName": "Main"}]
    }

credentialsFile is resolved against the credentials dir (see core.paths).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.errors import ConfigurationError
from ..core.paths import (
    CONFIG_PREFIX,
    CONFIG_SUFFIX,
    get_configurations_dir,
    get_config_path,
    get_credentials_path,
)


def list_configurations(config_dir: Optional[Path] = None) -> list[str]:
    """
    List configuration names found in the configurations dir.

    Returns:
        Sorted names (gcp-options-<name>.json -> <name>), empty if the dir is missing
    """
    config_dir = config_dir or get_configurations_dir()
    if not config_dir.is_dir():
        return []
    names = []
    for path in config_dir.iterdir():
        fname = path.name
        if fname.startswith(CONFIG_PREFIX) and fname.endswith(CONFIG_SUFFIX):
            names.append(fname[len(CONFIG_PREFIX):-len(CONFIG_SUFFIX)])
    return sorted(names)


# Written by "gcsnav --init"; the placeholders are meant to be edited
EXAMPLE_CONFIG_NAME = "example"
EXAMPLE_CONFIGURATION = {
    "credentialsFile": "gcp-credentials-example.json",
    "defaultProjectId": "YOUR_PROJECT_ID",
    "defaultBucket": "YOUR_BUCKET_NAME",
}


def write_example_configuration(config_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Write gcp-options-example.json unless it already exists.

    Returns:
        Path of the new file, or None if one was already there
    """
    config_dir = config_dir or get_configurations_dir()
    path = config_dir / f"{CONFIG_PREFIX}{EXAMPLE_CONFIG_NAME}{CONFIG_SUFFIX}"
    if path.exists():
        return None
    config_dir.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(EXAMPLE_CONFIGURATION, f, indent=2)
    return path


def _read_json(path: Path, what: str) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"{what} not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{what} is not valid JSON: {path} ({e})") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {what.lower()} {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{what} must contain a JSON object: {path}")
    return data


@dataclass
class BucketInfo:
    """A bucket listed in a configuration."""
    name: str
    display_name: str = ""

    def __post_init__(self):
        if not self.display_name:
            self.display_name = self.name


@dataclass
class GcpConfiguration:
    """A loaded GCP configuration plus its service-account credentials."""
    name: str
    credentials_file: str
    credentials: dict = field(default_factory=dict)
    project_id: Optional[str] = None
    default_bucket: Optional[str] = None
    buckets: list[BucketInfo] = field(default_factory=list)

    @classmethod
    def load(cls, config_name: str, config_path: Optional[Path] = None,
             credentials_path: Optional[Path] = None) -> "GcpConfiguration":
        """
        Load a configuration and the credentials it points to.

        Args:
            config_name: Configuration name (the <name> in gcp-options-<name>.json)
            config_path: Explicit config file path (default: resolved from name)
            credentials_path: Explicit credentials path (default: from credentialsFile)

        Raises:
            ConfigurationError: missing name/file, invalid JSON, or missing credentialsFile
        """
        if not config_name:
            raise ConfigurationError("Missing configuration name.")

        config_path = config_path or get_config_path(config_name)
        data = _read_json(config_path, "Configuration file")

        credentials_file = data.get("credentialsFile")
        if not credentials_file or not isinstance(credentials_file, str):
            raise ConfigurationError(
                f"Configuration '{config_name}' has no 'credentialsFile' entry."
            )

        credentials_path = credentials_path or get_credentials_path(credentials_file)
        credentials = _read_json(credentials_path, "Credentials file")

        raw_buckets = data.get("buckets") or []
        if not isinstance(raw_buckets, list):
            raise ConfigurationError(f"Configuration '{config_name}': 'buckets' must be a list.")

        buckets = []
        for entry in raw_buckets:
            if isinstance(entry, str):
                buckets.append(BucketInfo(entry))
            elif isinstance(entry, dict) and entry.get("name"):
                buckets.append(BucketInfo(entry["name"], entry.get("displayName", "")))
            else:
                raise ConfigurationError(
                    f"Configuration '{config_name}' has an invalid bucket entry: {entry!r}"
                )

        return cls(
            name=config_name,
            credentials_file=credentials_file,
            credentials=credentials,
            project_id=data.get("defaultProjectId") or credentials.get("project_id"),
            default_bucket=data.get("defaultBucket"),
            buckets=buckets,
        )
