"""Shared fixtures for SieveStore test suite."""

from __future__ import annotations

import time
from typing import Callable, Optional

import pytest

from sievestore.core.cache import SieveCache
from sievestore.core.filters import longer_than


class FakeClock:
    """Manually advanced clock; optionally runs a hook on the next read."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self._hook: Optional[Callable[[], None]] = None

    def __call__(self) -> float:
        hook, self._hook = self._hook, None
        if hook is not None:
            hook()
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def on_next_call(self, hook: Callable[[], None]) -> None:
        self._hook = hook


def _wait_until(predicate: Callable[[], bool], timeout: float = 2.0, step: float = 0.01) -> bool:
    """Poll ``predicate`` until it holds or ``timeout`` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(step)
    return predicate()


@pytest.fixture()
def wait_until() -> Callable[..., bool]:
    return _wait_until


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock):
    """A 10s-TTL store admitting strings longer than 3 chars, on a fake clock."""
    store = SieveCache(10, longer_than(3), clock=clock)
    yield store
    store.stop()
