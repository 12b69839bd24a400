"""Utility helpers for RingBot."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError

logger = logging.getLogger("ringbot.utils")


def int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%s. Falling back to %s.", name, raw, default)
        return default


def path_from_env(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    source = os.environ if environ is None else environ
    value = (source.get(name) or "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def require_env(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return a non-blank environment value or raise ``ConfigurationError``."""
    source = os.environ if environ is None else environ
    value = (source.get(name) or "").strip()
    if not value:
        raise ConfigurationError(f"No variable with name {name} found in the environment")
    return value


def parse_snowflake(name: str, raw: str) -> int:
    """Parse a Discord id read from ``name``."""
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be a positive id, got {value}")
    return value


__all__ = [
    "int_from_env",
    "parse_snowflake",
    "path_from_env",
    "require_env",
]
