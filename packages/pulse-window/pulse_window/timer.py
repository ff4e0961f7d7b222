"""PulseTimer — one object wiring a Scheduler to its CaptureController."""
from __future__ import annotations

import random as _random_mod
from typing import Callable

from pulse_window.config import CycleConfig
from pulse_window.controller import CaptureController
from pulse_window.format import format_clock
from pulse_window.scheduler import ClosedHook, OpenedHook, Scheduler, WarningHook
from pulse_window.types import CaptureAttempt, Phase


class PulseTimer:
    """Facade handed to the presentation layer.

    Every attempt is reported to ``on_capture`` whatever its outcome, so the
    caller can surface rejections or keep its own history. Top-ups are
    reported to ``on_credit(amount, balance)``.
    """

    def __init__(
        self,
        config: CycleConfig | None = None,
        *,
        balance: int = 0,
        rng: _random_mod.Random | None = None,
        on_warning: WarningHook | None = None,
        on_window_opened: OpenedHook | None = None,
        on_window_closed: ClosedHook | None = None,
        on_capture: Callable[[CaptureAttempt], None] | None = None,
        on_credit: Callable[[int, int], None] | None = None,
    ) -> None:
        self._scheduler = Scheduler(
            config if config is not None else CycleConfig(),
            rng=rng,
            on_warning=on_warning,
            on_window_opened=on_window_opened,
            on_window_closed=on_window_closed,
        )
        self._controller = CaptureController(self._scheduler, balance=balance)
        self._on_capture = on_capture
        self._on_credit = on_credit

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def controller(self) -> CaptureController:
        return self._controller

    @property
    def config(self) -> CycleConfig:
        return self._scheduler.config

    @property
    def phase(self) -> Phase:
        return self._scheduler.phase

    @property
    def remaining(self) -> int:
        return self._scheduler.remaining

    @property
    def formatted_time(self) -> str:
        return format_clock(self._scheduler.remaining)

    @property
    def is_open(self) -> bool:
        return self._scheduler.is_open

    @property
    def is_captured(self) -> bool:
        return self._controller.is_window_captured()

    @property
    def is_rare_tier(self) -> bool:
        return self._scheduler.is_rare_tier

    @property
    def cycle(self) -> int:
        return self._scheduler.cycle

    @property
    def balance(self) -> int:
        return self._controller.balance

    def tick(self) -> None:
        self._scheduler.tick()

    def attempt_capture(self) -> CaptureAttempt:
        attempt = self._controller.attempt_capture()
        if self._on_capture is not None:
            self._on_capture(attempt)
        return attempt

    def credit_balance(self, amount: int) -> int:
        balance = self._controller.credit_balance(amount)
        if self._on_credit is not None:
            self._on_credit(amount, balance)
        return balance

    def reset(self, graceful: bool = False) -> None:
        self._scheduler.reset(graceful=graceful)

    def reconfigure(self, config: CycleConfig, graceful: bool = False) -> None:
        """Switch timing (e.g. demo mode) and restart the countdown."""
        self._scheduler.reset(config=config, graceful=graceful)

    def cancel(self) -> None:
        self._scheduler.cancel()
