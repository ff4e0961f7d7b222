"""Engine - driver loop and pacing."""

import logging
import os
import random
import threading
import time

from pulse.clock import Clock
from pulse.types import System

logger = logging.getLogger(__name__)


class Engine:
    """Serialized tick driver.

    Systems run in registration order, one tick at a time, on the calling
    thread. ``run_forever`` paces ticks in real time; the wait between two
    ticks is the only blocking point and is released by ``stop()``.
    """

    def __init__(self, tps: int = 1, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested: bool = False
        self._wake = threading.Event()

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def stop(self) -> None:
        """Request a stop and release a pending tick wait, if any."""
        self._request_stop()

    def _request_stop(self) -> None:
        self._stop_requested = True
        self._wake.set()

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

    def run_forever(self) -> None:
        self._stop_requested = False
        self._wake.clear()
        logger.debug("engine started at %d tps (seed=%d)", self._clock.tps, self._seed)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0 and self._wake.wait(sleep_time):
                break

        logger.debug("engine stopped at tick %d", self._clock.tick_number)
