"""
Error types for gcsnav.

Only ConfigurationError and ListingError end a session. TransferError and
DeleteError are turned into operation log entries by the navigator.
"""


class NavigatorError(Exception):
    """Base class for all gcsnav errors."""
    pass


class ConfigurationError(NavigatorError):
    """Missing or malformed configuration/credentials. Raised before navigation starts."""
    pass


class ListingError(NavigatorError):
    """Listing a bucket path failed."""
    pass


class TransferError(NavigatorError):
    """Upload, download or folder-marker creation failed."""
    pass


class DeleteError(NavigatorError):
    """Deleting an object or a prefix failed."""
    pass


class IllegalBack(NavigatorError):
    """Tried to go back from the root of the path stack."""
    pass
