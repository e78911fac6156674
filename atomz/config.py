"""Environment-driven configuration for the atomz engine.

Settings are read from the process environment at call time so tests can
override them with ``monkeypatch.setenv``:

* ``ATOMZ_LOG_LEVEL``: level name used by ``setup_logging`` (default INFO).
* ``ATOMZ_MAX_REACTIONS``: ceiling on reactions executed for one dispatched
  action (default 100000, ``0`` disables the ceiling).
* ``ATOMZ_DEBUG_ENGINE``: when truthy, the dispatcher logs every step.
"""

from __future__ import annotations

import os

from .errors import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_REACTIONS = 100_000

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Return True when environment variable ``name`` holds a truthy value."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Return environment variable ``name`` as a non-negative int."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", setting=name
        ) from e
    if value < 0:
        raise ConfigurationError(
            f"{name} must not be negative, got {value}", setting=name
        )
    return value


def log_level() -> str:
    return os.environ.get("ATOMZ_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def max_reactions() -> int | None:
    """Reaction ceiling for one dispatch, ``None`` when disabled."""
    limit = env_int("ATOMZ_MAX_REACTIONS", DEFAULT_MAX_REACTIONS)
    return limit or None


def debug_engine() -> bool:
    return env_flag("ATOMZ_DEBUG_ENGINE")
