"""Ready-made admission filters for ``SieveCache``."""

from __future__ import annotations

from typing import Any, Callable

SieveFilter = Callable[[str, Any], bool]


def accept_all(key: str, value: Any) -> bool:
    return True


def longer_than(n: int) -> SieveFilter:
    """Admit only ``str`` values longer than ``n`` characters."""
    if n < 0:
        raise ValueError(f"longer_than expects n >= 0, got {n}")

    def _filter(key: str, value: Any) -> bool:
        return isinstance(value, str) and len(value) > n

    _filter.__name__ = f"longer_than_{n}"
    return _filter


def instance_of(*types: type) -> SieveFilter:
    if not types:
        raise ValueError("instance_of needs at least one type")

    def _filter(key: str, value: Any) -> bool:
        return isinstance(value, types)

    return _filter


def all_of(*filters: SieveFilter) -> SieveFilter:
    """Admit when every filter admits; stops at the first rejection."""

    def _filter(key: str, value: Any) -> bool:
        return all(f(key, value) for f in filters)

    return _filter


def any_of(*filters: SieveFilter) -> SieveFilter:
    """Admit when at least one filter admits; stops at the first admission."""

    def _filter(key: str, value: Any) -> bool:
        return any(f(key, value) for f in filters)

    return _filter


def negate(sieve_filter: SieveFilter) -> SieveFilter:
    def _filter(key: str, value: Any) -> bool:
        return not sieve_filter(key, value)

    return _filter
