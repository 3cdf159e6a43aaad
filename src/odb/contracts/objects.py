"""The object value type handed across the codec/store boundary."""

from dataclasses import dataclass

from odb.contracts.errors import MalformedFrameError


@dataclass(frozen=True)
class GitObject:
    """A decoded object frame.

    Fields are kept exactly as they appear in the frame header: size is
    the header text, not a recomputed length, so a frame written by a
    store that recorded a wrong size still round-trips byte for byte.
    """

    kind: str
    size: str
    payload: bytes

    @property
    def declared_size(self) -> int:
        """Size header as an integer.

        Raises:
            MalformedFrameError: If the header is not a non-negative decimal
        """
        if not (self.size.isascii() and self.size.isdigit()):
            raise MalformedFrameError(f"Size header is not a decimal length: {self.size!r}")
        return int(self.size)

    def to_frame(self) -> bytes:
        """Rebuild the frame these fields were decoded from."""
        return b"".join(
            [self.kind.encode("ascii"), b" ", self.size.encode("ascii"), b"\x00", self.payload]
        )

    @property
    def address(self) -> str:
        """Content address of the frame (re-derived, never stored)."""
        from odb.core.codec import hash_frame

        return hash_frame(self.to_frame())
