"""
Core utilities for gcsnav.

Errors, paths, formatting and session logging.
"""

from .errors import (
    NavigatorError,
    ConfigurationError,
    ListingError,
    TransferError,
    DeleteError,
    IllegalBack,
)

from .paths import (
    is_local_mode,
    get_global_config_dir,
    get_global_configurations_dir,
    get_global_credentials_dir,
    get_configurations_dir,
    get_credentials_dir,
    get_config_path,
    get_credentials_path,
    get_local_settings_path,
    get_global_settings_path,
    get_logs_dir,
)

from .formatting import (
    DELIMITER,
    format_size,
    display_name,
    display_path,
    base_name,
    is_folder_key,
)

__all__ = [
    # Errors
    "NavigatorError",
    "ConfigurationError",
    "ListingError",
    "TransferError",
    "DeleteError",
    "IllegalBack",
    # Paths
    "is_local_mode",
    "get_global_config_dir",
    "get_global_configurations_dir",
    "get_global_credentials_dir",
    "get_configurations_dir",
    "get_credentials_dir",
    "get_config_path",
    "get_credentials_path",
    "get_local_settings_path",
    "get_global_settings_path",
    "get_logs_dir",
    # Formatting
    "DELIMITER",
    "format_size",
    "display_name",
    "display_path",
    "base_name",
    "is_folder_key",
]
