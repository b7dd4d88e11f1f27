"""
errors
~~~~~~
Failure taxonomy for the shelf.

None of these reach the GUI: each is caught where it happens, written to the
debug log and turned into "nothing changed".
"""


class ShelfError(Exception):
    """Base class for app-specific errors."""


class ConfigError(ShelfError):
    """A required setting (e.g. the catalog token) is missing."""


class NetworkError(ShelfError):
    """Bad URL, transport failure or non-2xx HTTP status."""


class DecodeError(ShelfError):
    """Payload is not JSON or a movie lacks a required field."""


class StorageDecodeError(DecodeError):
    """A value read back from the key-value store is corrupt."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"corrupt entry {key!r}: {reason}")
        self.key = key
