"""Translate lifecycle signals into user-facing notices."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pulse_window import CaptureAttempt, CaptureOutcome, Tier

from pulse_signal import signals

if TYPE_CHECKING:
    from pulse_signal.bus import SignalBus


@dataclass(frozen=True)
class Notice:
    message: str
    level: str = "info"


def _credits(n: int) -> str:
    return f"{n} credit" if n == 1 else f"{n} credits"


def describe_attempt(attempt: CaptureAttempt) -> Notice:
    """Notice for one capture attempt, whatever its outcome."""
    outcome = attempt.outcome
    if outcome is CaptureOutcome.ACCEPTED:
        if attempt.tier is Tier.RARE:
            return Notice(
                f"Super Pulse captured! Outstanding move! ({_credits(attempt.cost)} used)",
                "success",
            )
        return Notice(f"Pulse captured successfully! ({_credits(attempt.cost)} used)", "success")
    if outcome is CaptureOutcome.REJECTED_INSUFFICIENT_BALANCE:
        return Notice(f"Not enough credits! You need {_credits(attempt.cost)}.", "error")
    if outcome is CaptureOutcome.REJECTED_ALREADY_CAPTURED:
        return Notice("Pulse already captured.", "info")
    return Notice("No active pulse to capture.", "info")


class NoticeBoard:
    """Collects notices from the bus, newest first, up to *limit*."""

    def __init__(self, bus: SignalBus, limit: int = 20) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._notices: deque[Notice] = deque(maxlen=limit)
        bus.subscribe(signals.WARNING, self._on_warning)
        bus.subscribe(signals.OPENED, self._on_opened)
        bus.subscribe(signals.CLOSED, self._on_closed)
        bus.subscribe(signals.CAPTURE, self._on_capture)
        bus.subscribe(signals.CREDIT, self._on_credit)

    def latest(self) -> Notice | None:
        return self._notices[0] if self._notices else None

    def notices(self) -> list[Notice]:
        return list(self._notices)

    def clear(self) -> None:
        self._notices.clear()

    def _post(self, notice: Notice) -> None:
        self._notices.appendleft(notice)

    def _on_warning(self, signal: str, data: dict[str, Any]) -> None:
        self._post(Notice("Pulse approaching! Get ready!", "warning"))

    def _on_opened(self, signal: str, data: dict[str, Any]) -> None:
        price = _credits(data["cost"])
        if data["is_rare_tier"]:
            self._post(Notice(f"SUPER PULSE ACTIVE! ({price})", "success"))
        else:
            self._post(Notice(f"Pulse active! ({price})", "success"))

    def _on_closed(self, signal: str, data: dict[str, Any]) -> None:
        if not data["was_captured"]:
            self._post(Notice("Pulse opportunity missed!", "error"))

    def _on_capture(self, signal: str, data: dict[str, Any]) -> None:
        self._post(describe_attempt(data["attempt"]))

    def _on_credit(self, signal: str, data: dict[str, Any]) -> None:
        self._post(Notice(f"{_credits(data['amount'])} purchased successfully!", "success"))
