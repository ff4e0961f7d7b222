"""Signal names and the hook adapters publishing them."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pulse_window import CycleConfig, PulseTimer, Tier

if TYPE_CHECKING:
    from pulse_window import CaptureAttempt

    from pulse_signal.bus import SignalBus

WARNING = "pulse.warning"
OPENED = "pulse.opened"
CLOSED = "pulse.closed"
CAPTURE = "pulse.capture"
CREDIT = "pulse.credit"


def make_bus_hooks(
    bus: SignalBus, price: Callable[[Tier], int]
) -> dict[str, Callable[..., None]]:
    """Return PulseTimer hook keyword arguments that publish onto *bus*.

    ``price`` is asked for the window's cost when it opens, so the
    ``pulse.opened`` payload always quotes the config in force.
    """

    def on_warning() -> None:
        bus.publish(WARNING)

    def on_window_opened(is_rare_tier: bool, window_duration: int) -> None:
        tier = Tier.RARE if is_rare_tier else Tier.NORMAL
        bus.publish(
            OPENED,
            is_rare_tier=is_rare_tier,
            window_duration=window_duration,
            cost=price(tier),
        )

    def on_window_closed(was_captured: bool, is_rare_tier: bool) -> None:
        bus.publish(CLOSED, was_captured=was_captured, is_rare_tier=is_rare_tier)

    def on_capture(attempt: CaptureAttempt) -> None:
        bus.publish(CAPTURE, attempt=attempt)

    def on_credit(amount: int, balance: int) -> None:
        bus.publish(CREDIT, amount=amount, balance=balance)

    hooks: dict[str, Callable[..., Any]] = {
        "on_warning": on_warning,
        "on_window_opened": on_window_opened,
        "on_window_closed": on_window_closed,
        "on_capture": on_capture,
        "on_credit": on_credit,
    }
    return hooks


def make_bus_timer(bus: SignalBus, config: CycleConfig | None = None, **kwargs: Any) -> PulseTimer:
    """Build a PulseTimer whose lifecycle is published onto *bus*.

    Prices come from the timer's current config, which follows
    ``reconfigure``. Extra keyword arguments go to PulseTimer.
    """
    timer: PulseTimer | None = None

    def price(tier: Tier) -> int:
        assert timer is not None
        return timer.config.cost(tier)

    timer = PulseTimer(config, **make_bus_hooks(bus, price), **kwargs)
    return timer
