"""Logging configuration for SieveStore."""

from __future__ import annotations

import logging
import os
import sys

_CONFIGURED = False
LOG_LEVEL_ENV_KEY = "SIEVESTORE_LOG_LEVEL"


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV_KEY, "WARNING")).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def _apply_level(package_logger: logging.Logger, level: int) -> None:
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def configure_logging(level: str | int | None = None) -> None:
    """Configure the ``sievestore`` logger hierarchy.

    Handlers are installed once per process (on package import). A later call
    with an explicit ``level`` re-levels the logger and its handlers.

    ``level`` wins over ``SIEVESTORE_LOG_LEVEL`` (default: WARNING). Records
    carry the emitting thread name.
    """
    global _CONFIGURED
    package_logger = logging.getLogger("sievestore")
    if _CONFIGURED:
        # already set up on import; only an explicit level changes anything
        if level is not None:
            _apply_level(package_logger, _resolve_level(level))
        return
    _CONFIGURED = True

    resolved = _resolve_level(level)
    package_logger.setLevel(resolved)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(resolved)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        package_logger.addHandler(handler)
