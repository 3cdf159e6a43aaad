"""Shared contracts for types that cross the codec/store/CLI boundaries.

Import pattern:
    from odb.contracts import GitObject, ObjectKind, ObjectNotFoundError
"""

from odb.contracts.enums import ObjectKind
from odb.contracts.errors import (
    CorruptObjectError,
    InvalidAddressError,
    MalformedFrameError,
    ObjectIOError,
    ObjectNotFoundError,
    ObjectStoreError,
)
from odb.contracts.objects import GitObject

__all__ = [
    "CorruptObjectError",
    "GitObject",
    "InvalidAddressError",
    "MalformedFrameError",
    "ObjectIOError",
    "ObjectKind",
    "ObjectNotFoundError",
    "ObjectStoreError",
]
