"""Configuration helpers shared by the store and the CLI."""

from __future__ import annotations

import logging
import math
import os
from datetime import timedelta

logger = logging.getLogger("sievestore.utils")

DEFAULT_TTL_SECONDS = 10.0
TTL_ENV_KEY = "SIEVESTORE_TTL"


def to_seconds(value: float | int | timedelta) -> float:
    """Normalize a duration given as seconds or ``timedelta`` to float seconds."""
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Duration must be seconds or timedelta, got {type(value).__name__}")
    return float(value)


def ttl_from_env(default: float = DEFAULT_TTL_SECONDS) -> float:
    """Read the default TTL (seconds) from ``SIEVESTORE_TTL``.

    Blank, unparseable or non-positive values fall back to ``default``.
    """
    raw = os.getenv(TTL_ENV_KEY, "").strip()
    if not raw:
        return default
    try:
        ttl = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %.1fs", TTL_ENV_KEY, raw, default)
        return default
    if not math.isfinite(ttl) or ttl <= 0:
        logger.warning("Ignoring %s=%r: must be a positive finite number, using %.1fs", TTL_ENV_KEY, raw, default)
        return default
    return ttl
