"""CaptureController — validates and settles capture attempts."""
from __future__ import annotations

import logging

from pulse_window.scheduler import Scheduler
from pulse_window.types import CaptureAttempt, CaptureOutcome, Phase, Tier

logger = logging.getLogger(__name__)


class CaptureController:
    """Owns the balance and the captured flag of the current window.

    The captured flag is tied to the window's cycle number, so a new window
    starts uncaptured without the Scheduler writing controller state.
    """

    def __init__(self, scheduler: Scheduler, balance: int = 0) -> None:
        if not _is_int(balance) or balance < 0:
            raise ValueError(f"balance must be a non-negative integer, got {balance!r}")
        self._scheduler = scheduler
        self._balance = balance
        self._captured_cycle: int | None = None
        scheduler._bind_capture_check(self.is_window_captured)

    @property
    def balance(self) -> int:
        return self._balance

    def is_window_captured(self) -> bool:
        """True while the open (or closing) window has been captured."""
        state = self._scheduler.state
        if state.phase is Phase.COUNTDOWN:
            return False
        return self._captured_cycle == state.cycle

    def attempt_capture(self) -> CaptureAttempt:
        """Try to claim the current window. Rejections are returned, not raised.

        Checks run in order: window open, not yet captured, balance covers
        the tier's cost. Only an accepted attempt changes any state.
        """
        state = self._scheduler.state
        if not self._scheduler.is_open:
            return self._result(CaptureOutcome.REJECTED_NOT_OPEN, None, 0, state.cycle)

        tier = state.tier
        cost = self._scheduler.config.cost(tier)
        if self._captured_cycle == state.cycle:
            return self._result(CaptureOutcome.REJECTED_ALREADY_CAPTURED, tier, cost, state.cycle)
        if self._balance < cost:
            logger.info(
                "capture of window %d rejected: balance %d < cost %d",
                state.cycle, self._balance, cost,
            )
            return self._result(
                CaptureOutcome.REJECTED_INSUFFICIENT_BALANCE, tier, cost, state.cycle
            )

        self._captured_cycle = state.cycle
        self._balance -= cost
        logger.info(
            "window %d captured (%s): -%d, balance %d",
            state.cycle, tier.value, cost, self._balance,
        )
        return self._result(CaptureOutcome.ACCEPTED, tier, cost, state.cycle)

    def credit_balance(self, amount: int) -> int:
        """Add a top-up to the balance. Returns the new balance."""
        if not _is_int(amount) or amount <= 0:
            raise ValueError(f"amount must be a positive integer, got {amount!r}")
        self._balance += amount
        logger.info("balance credited +%d, balance %d", amount, self._balance)
        return self._balance

    def _result(
        self, outcome: CaptureOutcome, tier: Tier | None, cost: int, cycle: int
    ) -> CaptureAttempt:
        return CaptureAttempt(
            outcome=outcome, tier=tier, cost=cost, balance=self._balance, cycle=cycle
        )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
