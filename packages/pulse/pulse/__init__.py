"""pulse - A one-second tick driver for the pulse window core."""

from pulse.clock import Clock
from pulse.engine import Engine
from pulse.types import System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
]
