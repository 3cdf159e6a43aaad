# src/odb/core/object_store.py
"""
Hash-addressed, zlib-compressed object storage.

Objects are stored by the SHA-1 of their frame, which gives:
- Automatic deduplication of identical content
- Conflict-free concurrent writes (same address means same bytes)
- A location that is a pure function of content

Structure: root/objects/ab/cdef0123... (2-char fan-out, 38-char file name)
"""

import os
import re
import zlib
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from uuid import uuid4

from odb.contracts.enums import ObjectKind
from odb.contracts.errors import (
    CorruptObjectError,
    InvalidAddressError,
    ObjectIOError,
    ObjectNotFoundError,
)
from odb.contracts.objects import GitObject
from odb.core.codec import decode_frame, encode_frame, hash_frame
from odb.core.logging import get_logger

if TYPE_CHECKING:
    from odb.core.config import StoreSettings

OBJECTS_DIR = "objects"

_ADDRESS_PATTERN = re.compile(r"^[0-9a-f]{40}$")
_FANOUT_PATTERN = re.compile(r"^[0-9a-f]{2}$")
_REST_PATTERN = re.compile(r"^[0-9a-f]{38}$")

logger = get_logger(__name__)


def fanout_path(root: Path, address: str) -> Path:
    """Get the storage path for an address under a store root.

    Raises:
        InvalidAddressError: If address is not 40 lowercase hex characters
    """
    if not _ADDRESS_PATTERN.match(address):
        raise InvalidAddressError(address)
    return root / OBJECTS_DIR / address[:2] / address[2:]


@runtime_checkable
class ObjectStore(Protocol):
    """Protocol for object storage backends.

    All implementations address frames by the SHA-1 of the full frame.
    """

    def put(self, frame: bytes) -> str:
        """Store a frame and return its address."""
        ...

    def get(self, path: Path) -> bytes:
        """Return the decompressed frame stored at path.

        Raises:
            ObjectNotFoundError: If nothing is stored at path
            CorruptObjectError: If the stored bytes do not decompress
        """
        ...

    def read_object(self, path: Path) -> GitObject:
        """Return the decoded object stored at path."""
        ...

    def exists(self, address: str) -> bool:
        """Check if an object is stored under address."""
        ...


class FilesystemObjectStore:
    """Filesystem-based loose object store.

    The root directory is supplied by the caller and must already exist;
    only the objects/<fan-out> subtree beneath it is created.
    """

    def __init__(
        self,
        root: Path,
        *,
        compression_level: int = -1,
        fsync: bool = False,
        legacy_size: bool = False,
    ) -> None:
        """Initialize filesystem store.

        Args:
            root: Store root directory
            compression_level: zlib level, -1 for the library default
            fsync: Flush each object to disk before renaming it into place
            legacy_size: Encode sizes as len(payload) - 1 in write_object
        """
        self.root = Path(root)
        self.compression_level = compression_level
        self.fsync = fsync
        self.legacy_size = legacy_size

    @classmethod
    def from_settings(cls, settings: "StoreSettings") -> "FilesystemObjectStore":
        """Build a store from validated settings."""
        return cls(
            settings.root,
            compression_level=settings.compression_level,
            fsync=settings.fsync,
            legacy_size=settings.legacy_size,
        )

    @property
    def objects_dir(self) -> Path:
        return self.root / OBJECTS_DIR

    def path_for(self, address: str) -> Path:
        """Get filesystem path for an address."""
        return fanout_path(self.root, address)

    def put(self, frame: bytes) -> str:
        """Compress a frame and store it under its address.

        The write goes to a temporary file in the fan-out directory and is
        renamed into place, so readers never see a partial object. An
        existing file at the same address is replaced with identical bytes.

        Returns:
            40-char hex address of the frame

        Raises:
            ObjectIOError: On any filesystem failure
        """
        address = hash_frame(frame)
        path = self.path_for(address)

        if not self.root.is_dir():
            raise ObjectIOError(self.root, "store root does not exist or is not a directory")

        try:
            # exist_ok covers a concurrent writer creating the same fan-out dir
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("fanout_mkdir_failed", path=str(path.parent), error=str(e))
            raise ObjectIOError(path.parent, str(e)) from e

        compressed = zlib.compress(frame, self.compression_level)
        tmp_path = path.parent / f".{path.name}.tmp-{uuid4().hex}"
        try:
            with open(tmp_path, "wb") as handle:
                handle.write(compressed)
                if self.fsync:
                    handle.flush()
                    os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            logger.warning("object_write_failed", address=address, path=str(path), error=str(e))
            raise ObjectIOError(path, str(e)) from e
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.debug(
            "object_written",
            address=address,
            path=str(path),
            size=len(frame),
            compressed_size=len(compressed),
        )
        return address

    def get(self, path: Path) -> bytes:
        """Read and decompress the frame stored at path.

        A path whose parent is a regular file counts as missing.
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except (FileNotFoundError, NotADirectoryError):
            logger.warning("object_not_found", path=str(path))
            raise ObjectNotFoundError(path) from None
        except OSError as e:
            logger.warning("object_read_failed", path=str(path), error=str(e))
            raise ObjectIOError(path, str(e)) from e

        try:
            frame = zlib.decompress(data)
        except zlib.error as e:
            logger.warning("object_corrupt", path=str(path), error=str(e))
            raise CorruptObjectError(path, str(e)) from e

        logger.debug("object_read", path=str(path), size=len(frame))
        return frame

    def read_object(self, path: Path) -> GitObject:
        """Read, decompress and decode the object stored at path.

        Raises:
            ObjectNotFoundError: If nothing is stored at path
            CorruptObjectError: If the file does not decompress
            MalformedFrameError: If the frame header is invalid
        """
        return decode_frame(self.get(path))

    def read(self, address: str) -> GitObject:
        """Read the object stored under address."""
        return self.read_object(self.path_for(address))

    def write_object(self, kind: str | ObjectKind, payload: bytes) -> str:
        """Encode and store an object, returning its address."""
        return self.put(encode_frame(kind, payload, legacy_size=self.legacy_size))

    def hash_object(self, kind: str | ObjectKind, payload: bytes) -> str:
        """Compute the address an object would be stored under, without writing."""
        return hash_frame(encode_frame(kind, payload, legacy_size=self.legacy_size))

    def exists(self, address: str) -> bool:
        """Check if an object is stored under address."""
        return self.path_for(address).is_file()

    def iter_addresses(self) -> Iterator[str]:
        """Yield the address of every stored object.

        Entries that do not follow the fan-out layout (including in-flight
        temporary files) are skipped.
        """
        if not self.objects_dir.is_dir():
            return
        for fanout in sorted(self.objects_dir.iterdir()):
            if not (fanout.is_dir() and _FANOUT_PATTERN.match(fanout.name)):
                continue
            for entry in sorted(fanout.iterdir()):
                if entry.is_file() and _REST_PATTERN.match(entry.name):
                    yield fanout.name + entry.name
