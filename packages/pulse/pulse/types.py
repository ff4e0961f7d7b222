"""Shared type aliases for the tick driver."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    second: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


System = Callable[[TickContext], None]
