"""Expiring filtered store: thread-safe TTL cache with an admission filter."""

from __future__ import annotations

import logging
import math
import threading
import time
from datetime import timedelta
from typing import Any, Callable, Generic, Optional, TypeVar

from .models import CacheItem
from .sweeper import Sweeper
from .utils import to_seconds, ttl_from_env

logger = logging.getLogger("sievestore.cache")

V = TypeVar("V")


class SieveCache(Generic[V]):
    """Thread-safe key/value store that only admits entries passing a filter.

    Every admitted entry expires ``ttl`` seconds after its last successful
    ``set``. Expired entries are dropped lazily on ``get`` and reclaimed in the
    background by a sweeper that runs every ``ttl / 2`` until ``stop()``.

    Args:
        ttl: Time-to-live in seconds (or a ``timedelta``). Must be positive.
        sieve_filter: ``(key, value) -> bool`` deciding admission on ``set``.
            Runs on the caller's thread; its exceptions propagate.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        ttl: float | timedelta,
        sieve_filter: Callable[[str, V], bool],
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        ttl_s = to_seconds(ttl)
        if not math.isfinite(ttl_s) or ttl_s <= 0:
            raise ValueError(f"TTL must be a positive finite duration, got {ttl!r}")
        if not callable(sieve_filter):
            raise TypeError("sieve_filter must be callable")

        self._ttl = ttl_s
        self._sieve_filter = sieve_filter
        self._clock = clock
        self._data: dict[str, CacheItem] = {}
        self._lock = threading.Lock()
        self._sweeper = Sweeper(ttl_s / 2, self._sweep, name=f"sievestore-sweeper-{id(self):x}")
        self._sweeper.start()

    @classmethod
    def from_env(
        cls,
        sieve_filter: Callable[[str, V], bool],
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> "SieveCache[V]":
        """Build a store whose TTL comes from ``SIEVESTORE_TTL``."""
        return cls(ttl_from_env(), sieve_filter, clock=clock)

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def sieve_filter(self) -> Callable[[str, V], bool]:
        return self._sieve_filter

    @property
    def running(self) -> bool:
        """True while the background sweeper is alive."""
        return self._sweeper.is_alive

    def set(self, key: str, value: V) -> None:
        if not self._sieve_filter(key, value):
            logger.debug("Filter rejected key %r", key)
            return
        item = CacheItem(value=value, expires_at=self._clock() + self._ttl)
        with self._lock:
            self._data[key] = item

    def get(self, key: str) -> tuple[Optional[V], bool]:
        """Return ``(value, True)`` for a live entry, else ``(None, False)``.

        An entry found past its expiration is removed before returning.
        """
        with self._lock:
            item = self._data.get(key)
            if item is None:
                return None, False
            if item.is_expired(self._clock()):
                del self._data[key]
                return None, False
            return item.value, True

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def stop(self) -> None:
        """Stop background reclamation. Safe to call more than once.

        The store stays usable afterwards; entries then only expire on read.
        """
        self._sweeper.stop()

    def __contains__(self, key: str) -> bool:
        return self.get(key)[1]

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for item in self._data.values() if not item.is_expired(now))

    def __enter__(self) -> "SieveCache[V]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "running" if self.running else "stopped"
        return f"SieveCache(ttl={self._ttl}, entries={len(self._data)}, {state})"

    def _sweep(self) -> None:
        """Remove every entry already past its expiration instant.

        Works from a snapshot of the container and re-checks each candidate
        under the lock, so an entry refreshed mid-scan survives.
        """
        with self._lock:
            snapshot = list(self._data.items())
        now = self._clock()
        for key, item in snapshot:
            if not item.is_expired(now):
                continue
            with self._lock:
                current = self._data.get(key)
                if current is not None and current.is_expired(now):
                    del self._data[key]
