"""Logging configuration for atomz.

Library modules only ever call ``logging.getLogger(__name__)``; hosts (a
CLI, a game server, a test session) call ``setup_logging`` once to attach a
handler to the ``atomz`` logger.

Usage:
    from atomz.logging_config import setup_logging

    logger = setup_logging(level="DEBUG", format_style="compact")
"""

from __future__ import annotations

import logging
import sys

from . import config

__all__ = [
    "COMPACT_FORMAT",
    "DEFAULT_FORMAT",
    "DETAILED_FORMAT",
    "LogContext",
    "ROOT_LOGGER_NAME",
    "get_logger",
    "setup_logging",
]

ROOT_LOGGER_NAME = "atomz"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
COMPACT_FORMAT = "%(levelname)s %(name)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
)

_FORMATS = {
    "default": DEFAULT_FORMAT,
    "compact": COMPACT_FORMAT,
    "detailed": DETAILED_FORMAT,
}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = config.log_level()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        # getLevelName returns "Level X" for unknown names
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    level: int | str | None = None,
    format_style: str = "default",
    console: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Configure and return logger ``name``.

    Calling it again for the same name updates the level but never adds a
    second console handler.

    Args:
        name: Logger name, ``atomz`` by default
        level: Level as int or name; ``ATOMZ_LOG_LEVEL`` when omitted
        format_style: One of ``default``, ``compact``, ``detailed``
            (unknown styles fall back to ``default``)
        console: Attach a stderr handler
        propagate: Whether records also reach ancestor loggers
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.propagate = propagate

    if console and not any(
        getattr(h, "_atomz_console", False) for h in logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(_FORMATS.get(format_style, DEFAULT_FORMAT))
        )
        handler._atomz_console = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``atomz`` logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogContext:
    """Temporarily change a logger's level.

    with LogContext(logger, logging.DEBUG):
        dispatcher.dispatch(state, action)
    """

    def __init__(self, logger: logging.Logger, level: int):
        self.logger = logger
        self.level = level
        self._previous = logger.level

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        self.logger.setLevel(self._previous)
