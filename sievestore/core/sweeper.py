"""Owned, cancellable periodic background task."""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger("sievestore.sweeper")

# Longest single Event.wait; longer intervals are waited out in slices.
_MAX_WAIT_SLICE = 3600.0


class Sweeper:
    """Run ``task`` every ``interval`` seconds on a daemon thread until stopped.

    The loop parks on a ``threading.Event`` between ticks, so ``stop()`` wakes
    it immediately instead of waiting out the current interval. ``stop()`` may
    be called any number of times; only the first call signals, and every call
    returns once the thread has exited.

    Args:
        interval: Seconds between the end of one tick and the start of the next.
        task: Zero-argument callable run on each tick.
        name: Thread name, useful in thread dumps.
    """

    def __init__(self, interval: float, task: Callable[[], None], name: str = "sievestore-sweeper"):
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"Sweep interval must be a positive finite number, got {interval!r}")
        self.interval = interval
        self.name = name
        self._task = task
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._started = False
        self._stopped = False
        self._thread: Optional[threading.Thread] = None

    @property
    def is_alive(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self._started or self._stopped:
                return
            self._started = True
            self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
            self._thread.start()
        logger.debug("Sweeper '%s' started (interval %.3fs)", self.name, self.interval)

    def stop(self) -> None:
        with self._lock:
            first = not self._stopped
            self._stopped = True
            self._stop_event.set()
            thread = self._thread

        # every caller waits for the thread, not only the first one
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        if first:
            logger.debug("Sweeper '%s' stopped", self.name)

    def _wait_interval(self) -> bool:
        """Sleep one interval; return True as soon as stop is requested."""
        deadline = time.monotonic() + self.interval
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return self._stop_event.is_set()
            if self._stop_event.wait(min(remaining, _MAX_WAIT_SLICE)):
                return True

    def _run(self) -> None:
        while not self._wait_interval():
            try:
                self._task()
            except Exception:
                logger.exception("Sweeper '%s' tick failed", self.name)
