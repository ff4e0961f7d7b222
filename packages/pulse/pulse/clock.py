"""Clock for the fixed-timestep driver."""

import random
from typing import Callable

from pulse.types import TickContext


class Clock:
    """Counts ticks and the whole seconds they add up to.

    ``second`` is integer arithmetic on the tick count, so a driver at any
    rate crosses each second boundary exactly once.
    """

    def __init__(self, tps: int = 1) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return 1.0 / self._tps

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def second(self) -> int:
        return self._tick_number // self._tps

    @property
    def elapsed(self) -> float:
        return self._tick_number / self._tps

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            second=self.second,
            dt=self.dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
            random=rng,
        )
