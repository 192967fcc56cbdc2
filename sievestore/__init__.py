"""SieveStore: expiring key/value store with an admission filter."""

from .core import CacheItem, SieveCache, SieveFilter, Sweeper
from .core.logging_config import configure_logging

configure_logging()

__all__ = ["SieveCache", "CacheItem", "Sweeper", "SieveFilter"]
__version__ = "0.1.0"
