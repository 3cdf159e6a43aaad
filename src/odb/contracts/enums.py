"""Object kinds recognised by callers of the store.

The codec treats kind as opaque text. This enumeration is the closed set
the outer layers (CLI, higher-level repository code) check against.
"""

from enum import Enum


class ObjectKind(str, Enum):
    """Type tag written at the start of every object frame.

    Uses (str, Enum) because the value IS the on-disk tag.
    """

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"
    TAG = "tag"

    @classmethod
    def parse(cls, text: str) -> "ObjectKind":
        """Look up a kind by its tag.

        Raises:
            ValueError: If text is not a known kind
        """
        try:
            return cls(text)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown object kind {text!r} (expected one of: {known})") from None
