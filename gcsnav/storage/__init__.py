"""
Storage backend for gcsnav (Google Cloud Storage JSON API).
"""

from .client import StorageClient, StorageClientConfig

__all__ = [
    "StorageClient",
    "StorageClientConfig",
]
