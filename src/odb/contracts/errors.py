"""Error taxonomy for the object store.

Every failure surfaces synchronously as one of these. Nothing is retried
and nothing is repaired: a corrupt file stays where it is, and the caller
decides what to do with it.
"""

from __future__ import annotations

from pathlib import Path


class ObjectStoreError(Exception):
    """Base class for all object store failures."""

    pass


class MalformedFrameError(ObjectStoreError, ValueError):
    """Raised when a frame lacks its space/NUL header delimiters in order."""

    pass


class InvalidAddressError(ObjectStoreError, ValueError):
    """Raised when an address is not 40 lowercase hex characters."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid object address: {address!r}")
        self.address = address


class ObjectNotFoundError(ObjectStoreError, LookupError):
    """Raised when no object file exists at the requested path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Object not found: {path}")
        self.path = path


class CorruptObjectError(ObjectStoreError):
    """Raised when an object file does not decompress.

    Attributes:
        path: File that failed to decompress
        reason: Message from the decompressor
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Corrupt object {path}: {reason}")
        self.path = path
        self.reason = reason


class ObjectIOError(ObjectStoreError):
    """Raised on a filesystem failure while reading or writing an object.

    The original OSError is chained as __cause__.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"I/O error on {path}: {reason}")
        self.path = path
        self.reason = reason
