# src/odb/core/codec.py
"""
Canonical byte framing for stored objects.

Frame layout (no other delimiters, no escaping):

    kind SP ascii_decimal(size) NUL payload

The content address of an object is the SHA-1 of its whole frame. The hash
function is fixed: addresses must be comparable between every reader and
writer of a store.
"""

import hashlib

from odb.contracts.enums import ObjectKind
from odb.contracts.errors import MalformedFrameError
from odb.contracts.objects import GitObject

SPACE = b" "
NUL = b"\x00"


def encode_frame(kind: str | ObjectKind, payload: bytes, *, legacy_size: bool = False) -> bytes:
    """Build the frame for a kind and payload.

    Kind must not contain a space or NUL byte; that is the caller's
    responsibility and is not checked here.

    Args:
        kind: Object type tag
        payload: Raw content bytes
        legacy_size: Record len(payload) - 1 as the size, matching stores
            written by the first generation of this format. Only for
            byte-for-byte compatibility with such stores.

    Returns:
        Frame bytes, deterministic for the same inputs

    Raises:
        MalformedFrameError: If kind is not ASCII
    """
    tag = kind.value if isinstance(kind, ObjectKind) else kind
    try:
        tag_bytes = tag.encode("ascii")
    except UnicodeEncodeError as e:
        raise MalformedFrameError(f"Object kind is not ASCII: {tag!r}") from e
    size = len(payload) - 1 if legacy_size else len(payload)
    return b"".join([tag_bytes, SPACE, str(size).encode("ascii"), NUL, payload])


def decode_frame(frame: bytes) -> GitObject:
    """Split a frame into kind, size text and payload.

    Only the first space and first NUL delimit the header; the payload is
    everything after that NUL and may itself contain either byte.

    Raises:
        MalformedFrameError: If a delimiter is missing or out of order
    """
    space = frame.find(SPACE)
    nul = frame.find(NUL)
    if space < 0:
        raise MalformedFrameError("Frame has no space after the object kind")
    if nul < 0:
        raise MalformedFrameError("Frame has no NUL after the size header")
    if nul < space:
        raise MalformedFrameError("Frame NUL separator precedes the kind delimiter")

    try:
        kind = frame[:space].decode("ascii")
        size = frame[space + 1 : nul].decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedFrameError(f"Frame header is not ASCII: {e}") from e

    return GitObject(kind=kind, size=size, payload=frame[nul + 1 :])


def hash_frame(frame: bytes) -> str:
    """Return the 40-char lowercase hex SHA-1 address of a frame."""
    return hashlib.sha1(frame).hexdigest()
