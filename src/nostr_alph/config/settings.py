"""Application settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``NOSTR_ALPH_``, nested via ``__``)
2. YAML config file (``config_path`` or ``NOSTR_ALPH_CONFIG_PATH`` env var)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nostr_alph.codec.params import (
    GROUP_COUNT,
    SCHNORR_SCRIPT_PREFIX,
    SCHNORR_SCRIPT_SUFFIX,
    TAG_P2SH,
    ProtocolParams,
)
from nostr_alph.utils.crypto import HashFunction

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class LogLevel(enum.StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class ProtocolConfig(BaseSettings):
    """Address derivation constants for one protocol version."""

    model_config = SettingsConfigDict(
        env_prefix="NOSTR_ALPH_PROTOCOL__",
        case_sensitive=False,
    )

    name: str = "schnorr-v1"
    script_prefix: str = Field(
        default=SCHNORR_SCRIPT_PREFIX.hex(),
        description="Hex bytes of the unlock script before the public key",
    )
    script_suffix: str = Field(
        default=SCHNORR_SCRIPT_SUFFIX.hex(),
        description="Hex bytes of the unlock script after the public key",
    )
    tag_byte: int = Field(default=TAG_P2SH, ge=0, le=255)
    group_count: int = Field(default=GROUP_COUNT, ge=1, le=256)
    hash_name: HashFunction = HashFunction.BLAKE2B_256

    @field_validator("script_prefix", "script_suffix")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        value = value.strip().lower()
        bytes.fromhex(value)  # raises ValueError on bad hex
        return value

    def to_params(self) -> ProtocolParams:
        """Build the codec's :class:`ProtocolParams` from this config."""
        return ProtocolParams(
            name=self.name,
            script_prefix=bytes.fromhex(self.script_prefix),
            script_suffix=bytes.fromhex(self.script_suffix),
            tag_byte=self.tag_byte,
            group_count=self.group_count,
            hash_name=self.hash_name,
        )


class LogConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="NOSTR_ALPH_LOG__",
        case_sensitive=False,
    )

    level: LogLevel = LogLevel.WARNING
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Loads settings from environment variables (``NOSTR_ALPH_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOSTR_ALPH_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False
    config_path: str = ""

    protocol: ProtocolConfig = Field(default_factory=ProtocolConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))

    @property
    def log_level(self) -> str:
        return LogLevel.DEBUG if self.debug else self.log.level
