"""
Centralized path management for gcsnav.

Two modes, chosen by the working directory:

Local mode (./Configurations exists):
    ./Configurations/gcp-options-<name>.json
    ./Credentials/<credentialsFile>
    ./settings.json                 - optional, checked first in every mode

Global mode (default):
    ~/.gcsnav/                      (%APPDATA%/gcsnav on Windows)
        configurations/gcp-options-<name>.json
        credentials/<credentialsFile>
        settings.json
        logs/                       - session logs
"""

import os
import sys
from pathlib import Path


APP_NAME = "gcsnav"
LOCAL_CONFIG_DIR = "Configurations"
LOCAL_CREDS_DIR = "Credentials"
CONFIG_PREFIX = "gcp-options-"
CONFIG_SUFFIX = ".json"
SETTINGS_FILE = "settings.json"
GLOBAL_CONFIG_DIR = "configurations"
GLOBAL_CREDS_DIR = "credentials"


def is_local_mode() -> bool:
    """True if a Configurations/ folder exists in the working directory."""
    return (Path.cwd() / LOCAL_CONFIG_DIR).is_dir()


def get_global_config_dir() -> Path:
    """
    Get the per-user configuration directory.

    Can be overridden with the GCSNAV_HOME env var (used by tests and
    portable installs).
    """
    override = os.environ.get("GCSNAV_HOME")
    if override:
        return Path(override)
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_NAME
    return Path.home() / f".{APP_NAME}"


def get_global_configurations_dir() -> Path:
    return get_global_config_dir() / GLOBAL_CONFIG_DIR


def get_global_credentials_dir() -> Path:
    return get_global_config_dir() / GLOBAL_CREDS_DIR


def get_configurations_dir() -> Path:
    if is_local_mode():
        return Path.cwd() / LOCAL_CONFIG_DIR
    return get_global_configurations_dir()


def get_credentials_dir() -> Path:
    if is_local_mode():
        return Path.cwd() / LOCAL_CREDS_DIR
    return get_global_credentials_dir()


def get_config_path(config_name: str) -> Path:
    """Full path of the configuration file for a configuration name."""
    return get_configurations_dir() / f"{CONFIG_PREFIX}{config_name}{CONFIG_SUFFIX}"


def get_credentials_path(credentials_file: str) -> Path:
    return get_credentials_dir() / credentials_file


def get_local_settings_path() -> Path:
    return Path.cwd() / SETTINGS_FILE


def get_global_settings_path() -> Path:
    return get_global_config_dir() / SETTINGS_FILE


def get_logs_dir() -> Path:
    """Get the session log directory, creating it if needed."""
    logs_dir = get_global_config_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir
