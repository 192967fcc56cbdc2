"""Core data models for SieveStore."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CacheItem:
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Return True once ``now`` is strictly past the expiration instant.

        Both the read path and the background sweep use this comparison, so an
        entry is still served at exactly ``expires_at``.
        """
        return now > self.expires_at
