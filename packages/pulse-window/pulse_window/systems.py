"""System factory advancing a pulse cycle from the tick driver."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from pulse import TickContext


class _Tickable(Protocol):
    def tick(self) -> None: ...


def make_pulse_system(target: _Tickable) -> Callable[[TickContext], None]:
    """Return a system that ticks *target* once per elapsed engine second.

    At 1 tps this is one tick per engine tick. Faster engines only tick the
    countdown on the engine tick that completes a second.
    """
    seconds_done = 0

    def pulse_system(ctx: TickContext) -> None:
        nonlocal seconds_done
        while seconds_done < ctx.second:
            seconds_done += 1
            target.tick()

    return pulse_system
