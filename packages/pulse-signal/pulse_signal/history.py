"""Capture history kept on behalf of the presentation layer."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from pulse_window import CaptureAttempt, Tier

from pulse_signal import signals

if TYPE_CHECKING:
    from pulse_signal.bus import SignalBus


@dataclass(frozen=True)
class CaptureRecord:
    cycle: int
    tier: Tier
    cost: int
    at: float  # seconds of driver time when the signal was delivered


class CaptureHistory:
    """Accepted captures, newest first. Rejected attempts are ignored.

    ``clock`` returns the current driver time; it defaults to 0.0 for
    callers that only care about order.
    """

    def __init__(
        self,
        bus: SignalBus,
        clock: Callable[[], float] | None = None,
        limit: int = 50,
    ) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._clock = clock
        self._records: deque[CaptureRecord] = deque(maxlen=limit)
        bus.subscribe(signals.CAPTURE, self._on_capture)

    def records(self) -> list[CaptureRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def rare_count(self) -> int:
        return sum(1 for r in self._records if r.tier is Tier.RARE)

    def total_spent(self) -> int:
        return sum(r.cost for r in self._records)

    def _on_capture(self, signal: str, data: dict[str, Any]) -> None:
        attempt: CaptureAttempt = data["attempt"]
        if not attempt.accepted or attempt.tier is None:
            return
        at = self._clock() if self._clock is not None else 0.0
        self._records.appendleft(
            CaptureRecord(cycle=attempt.cycle, tier=attempt.tier, cost=attempt.cost, at=at)
        )
