from .cache import SieveCache
from .filters import SieveFilter, accept_all, all_of, any_of, instance_of, longer_than, negate
from .models import CacheItem
from .sweeper import Sweeper

__all__ = [
    "SieveCache",
    "CacheItem",
    "Sweeper",
    "SieveFilter",
    "accept_all",
    "all_of",
    "any_of",
    "instance_of",
    "longer_than",
    "negate",
]
