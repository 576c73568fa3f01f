"""icsprose.config_loader

Lightweight config loader for icsprose.

- Reads YAML via PyYAML (JSON files load too, JSON being a YAML subset).
- Exposes a typed dataclass `Config` and a `load_config()` helper that accepts
  an optional path override.
- Environment variables override file values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from icsprose.exceptions import ICSConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "icsprose" / "config.yaml"

ENV_DISPLAY_TIMEZONE = "ICSPROSE_DISPLAY_TIMEZONE"
ENV_LOG_LEVEL = "ICSPROSE_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Typed configuration for icsprose.

    Fields:
        display_timezone: IANA timezone used to render floating (non-Z) date-times
        log_level: logging level name
    """

    display_timezone: str = "UTC"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Unknown log levels fall back to INFO with a warning. An unknown
        timezone raises ICSConfigError since every floating date would
        otherwise fail to render.
        """
        if data is None:
            data = {}

        display_timezone = str(data.get("display_timezone") or "UTC")
        try:
            ZoneInfo(display_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ICSConfigError(
                f"Unknown display_timezone {display_timezone!r}", value=display_timezone
            ) from exc

        log_level = data.get("log_level", "INFO")
        log_level = str(log_level).upper() if log_level is not None else "INFO"
        if log_level not in VALID_LOG_LEVELS:
            logger.warning("Config log_level=%r is not a valid level; using INFO", log_level)
            log_level = "INFO"

        return cls(display_timezone=display_timezone, log_level=log_level)


def _load_yaml(path: Path) -> Any:
    """Load a YAML document, normalizing an empty file to an empty mapping."""
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    return {} if loaded is None else loaded


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    merged = dict(raw)
    env_tz = os.environ.get(ENV_DISPLAY_TIMEZONE, "").strip()
    if env_tz:
        merged["display_timezone"] = env_tz
    env_level = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if env_level:
        merged["log_level"] = env_level
    return merged


def load_config(path: str | None = None) -> Config:
    """Load configuration from a YAML file and return a Config instance.

    Args:
        path: Optional path to the config file. Defaults to
              ~/.config/icsprose/config.yaml.

    Returns:
        Config dataclass instance with values from file, env and defaults.

    Raises:
        ICSConfigError: If the file is not valid YAML, its top level is not a
            mapping, or the timezone is unknown.
    """
    p = Path(path) if path else DEFAULT_CONFIG_PATH
    logger.debug("Attempting to load config from %s", p)

    raw: Any = {}
    if p.exists():
        try:
            raw = _load_yaml(p)
        except yaml.YAMLError as exc:
            raise ICSConfigError(f"Config file {p} is not valid YAML: {exc}") from exc
        if not isinstance(raw, dict):
            logger.warning("Config file %s parsed but top-level is not a mapping: %r", p, raw)
            raise ICSConfigError("Config file must contain a mapping at top level")
        logger.info("Loaded configuration from %s", p)
    else:
        logger.info("Config file %s not found; using defaults", p)

    cfg = Config.from_dict(_apply_env_overrides(raw))
    logger.debug("Configuration values: %s", cfg)
    return cfg
