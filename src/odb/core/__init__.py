"""Core infrastructure: Codec, Object Store, Configuration, Logging."""

from odb.core.codec import (
    decode_frame,
    encode_frame,
    hash_frame,
)
from odb.core.config import (
    LoggingSettings,
    OdbSettings,
    StoreSettings,
    load_settings,
)
from odb.core.logging import (
    configure_logging,
    get_logger,
)
from odb.core.object_store import (
    FilesystemObjectStore,
    ObjectStore,
    fanout_path,
)

__all__ = [
    "FilesystemObjectStore",
    "LoggingSettings",
    "ObjectStore",
    "OdbSettings",
    "StoreSettings",
    "configure_logging",
    "decode_frame",
    "encode_frame",
    "fanout_path",
    "get_logger",
    "hash_frame",
    "load_settings",
]
