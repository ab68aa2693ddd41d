from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VAR = "SEQFIND_LOG_LEVEL"
_DEBUG_FLAG = "SEQFIND_DEBUG"


def _coerce_level(value: str | None, fallback: int) -> int:
    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    if isinstance(candidate, int):
        return candidate
    return fallback


def _env_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_env_level() -> int | None:
    """Return the level requested through the environment, if any."""
    value = os.getenv(_LEVEL_ENV_VAR)
    if value:
        return _coerce_level(value, logging.WARNING)
    if _env_truthy(os.getenv(_DEBUG_FLAG)):
        return logging.DEBUG
    return None


def configure_root(default_level: int = logging.WARNING) -> int:
    """
    Configure the root logger with a compact format.

    Environment overrides:
      - SEQFIND_LOG_LEVEL: explicit log level (name or number)
      - SEQFIND_DEBUG: truthy -> DEBUG
    Returns the effective level.
    """
    env_level = resolve_env_level()
    effective = env_level if env_level is not None else default_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective
