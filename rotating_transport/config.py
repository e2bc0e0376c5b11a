"""Configuration module — frozen dataclasses loaded from env vars and optional YAML."""

import logging
import os
from dataclasses import dataclass

import yaml

from rotating_transport.errors import ConfigError

logger = logging.getLogger(__name__)

STREAM_MODES = ("a", "w")
_DISABLED_LEVELS = ("false", "off", "0", "no")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_level(value):
    if value is False or value is None:
        return False
    if isinstance(value, str) and value.strip().lower() in _DISABLED_LEVELS:
        return False
    return value


def _parse_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class RotationPolicy:
    max_size_bytes: int = 1024 * 1024  # 1 MiB
    max_archive_count: int = 5

    @property
    def rotation_enabled(self) -> bool:
        return self.max_size_bytes > 0


@dataclass(frozen=True)
class TransportConfig:
    file: str | None = None
    app_name: str | None = None
    max_size_bytes: int = 1024 * 1024  # 1 MiB
    max_archive_count: int = 5
    level: bool | str = "warn"
    stream_mode: str = "a"
    disambiguate_collisions: bool = True

    def __post_init__(self):
        if self.stream_mode not in STREAM_MODES:
            raise ConfigError(
                f"stream_mode must be one of {STREAM_MODES}, got {self.stream_mode!r}"
            )
        if self.max_archive_count < 0:
            raise ConfigError("max_archive_count must not be negative")

    @property
    def enabled(self) -> bool:
        return _parse_level(self.level) is not False

    @property
    def policy(self) -> RotationPolicy:
        return RotationPolicy(
            max_size_bytes=self.max_size_bytes,
            max_archive_count=self.max_archive_count,
        )


def load_yaml_config(path: str | None) -> dict:
    """Load transport settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> TransportConfig:
    """Build TransportConfig from env vars layered over parsed YAML data."""
    data = yaml_data or {}

    def pick(env_name, key, default):
        raw = os.environ.get(env_name)
        if raw is not None:
            return raw
        return data.get(key, default)

    return TransportConfig(
        file=pick("LOG_FILE", "file", TransportConfig.file),
        app_name=pick("LOG_APP_NAME", "app_name", TransportConfig.app_name),
        max_size_bytes=_parse_int(
            "max_size_bytes",
            pick("MAX_SIZE_BYTES", "max_size_bytes", TransportConfig.max_size_bytes),
        ),
        max_archive_count=_parse_int(
            "max_archive_count",
            pick("MAX_ARCHIVE_COUNT", "max_archive_count", TransportConfig.max_archive_count),
        ),
        level=_parse_level(pick("LOG_LEVEL", "level", TransportConfig.level)),
        stream_mode=str(pick("STREAM_MODE", "stream_mode", TransportConfig.stream_mode)),
        disambiguate_collisions=_parse_bool(
            pick(
                "DISAMBIGUATE_COLLISIONS",
                "disambiguate_collisions",
                TransportConfig.disambiguate_collisions,
            )
        ),
    )
