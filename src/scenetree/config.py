"""Local configuration for scenetree."""

from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SHOW_TYPES = True
DEFAULT_SHOW_PROPERTIES = True
DEFAULT_SHOW_CONNECTIONS = True

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def env_optional_int(name: str) -> int | None:
    """Read a non-negative integer environment variable, or None when unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    value = int(raw)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


SCENETREE_LOG_LEVEL = os.getenv("SCENETREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
SCENETREE_SHOW_TYPES = env_flag("SCENETREE_SHOW_TYPES", DEFAULT_SHOW_TYPES)
SCENETREE_SHOW_PROPERTIES = env_flag("SCENETREE_SHOW_PROPERTIES", DEFAULT_SHOW_PROPERTIES)
SCENETREE_SHOW_CONNECTIONS = env_flag("SCENETREE_SHOW_CONNECTIONS", DEFAULT_SHOW_CONNECTIONS)
# Unset means unlimited depth.
SCENETREE_MAX_DEPTH = env_optional_int("SCENETREE_MAX_DEPTH")
