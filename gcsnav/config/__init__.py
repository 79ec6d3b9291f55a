"""
Configuration management for gcsnav.

Config files:
- gcp-options-<name>.json: project, buckets and credentials file per configuration
- settings.json: navigator preferences (menu size)
"""

from .gcp import (
    BucketInfo,
    GcpConfiguration,
    list_configurations,
    write_example_configuration,
)
from .settings import NavigatorSettings

__all__ = [
    "BucketInfo",
    "GcpConfiguration",
    "list_configurations",
    "write_example_configuration",
    "NavigatorSettings",
]
