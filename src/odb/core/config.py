# src/odb/core/config.py
"""
Configuration schema and loading for odb.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class StoreSettings(BaseModel):
    """Object store configuration.

    Example YAML:
        store:
          root: .odb
          compression_level: 6
          fsync: true
    """

    model_config = {"frozen": True}

    root: Path = Field(
        default=Path(".odb"),
        description="Store root; objects live under <root>/objects",
    )
    compression_level: int = Field(
        default=-1,
        ge=-1,
        le=9,
        description="zlib level, -1 for the library default",
    )
    fsync: bool = Field(
        default=False,
        description="fsync each object file before it is renamed into place",
    )
    legacy_size: bool = Field(
        default=False,
        description="Write len(payload) - 1 as the size header (first-generation store compatibility)",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum level emitted",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON lines instead of console text",
    )


class OdbSettings(BaseModel):
    """Top-level odb configuration."""

    model_config = {"frozen": True}

    store: StoreSettings = Field(
        default_factory=StoreSettings,
        description="Object store configuration",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )


def load_settings(config_path: Path) -> OdbSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (ODB_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: ODB_STORE__root for nested keys.

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="ODB",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic wants the field names
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): _lower_keys(v)
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return OdbSettings(**raw_config)


def _lower_keys(value: object) -> object:
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value
