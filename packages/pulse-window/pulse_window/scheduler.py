"""Scheduler — owns the countdown and drives the window lifecycle."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import Callable

from pulse_window.config import CycleConfig
from pulse_window.format import format_clock
from pulse_window.types import CycleState, Phase

logger = logging.getLogger(__name__)

WarningHook = Callable[[], None]
OpenedHook = Callable[[bool, int], None]
ClosedHook = Callable[[bool, bool], None]


class Scheduler:
    """Advances the single CycleState one second per ``tick()``.

    Phases run Countdown -> Open -> (Settling) -> Countdown. Settling is
    entered and left inside the same tick: it only exists while
    ``on_window_closed`` runs, so the captured flag is read before the
    cycle is reset.
    """

    def __init__(
        self,
        config: CycleConfig,
        rng: _random_mod.Random | None = None,
        on_warning: WarningHook | None = None,
        on_window_opened: OpenedHook | None = None,
        on_window_closed: ClosedHook | None = None,
    ) -> None:
        self._config = config
        self._rng = rng if rng is not None else _random_mod.Random()
        self._on_warning = on_warning
        self._on_window_opened = on_window_opened
        self._on_window_closed = on_window_closed
        self._capture_check: Callable[[], bool] | None = None
        self._cancelled = False
        self._generation = 0
        self._state = CycleState(phase=Phase.COUNTDOWN, remaining=0)
        self._start_countdown()

    # --- Queries ---

    @property
    def config(self) -> CycleConfig:
        return self._config

    @property
    def state(self) -> CycleState:
        """The live cycle record. Read-only for callers."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def remaining(self) -> int:
        return self._state.remaining

    @property
    def formatted_remaining(self) -> str:
        return format_clock(self._state.remaining)

    @property
    def is_rare_tier(self) -> bool:
        return self._state.is_rare_tier

    @property
    def cycle(self) -> int:
        return self._state.cycle

    @property
    def is_open(self) -> bool:
        return not self._cancelled and self._state.phase is Phase.OPEN

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    # --- Commands ---

    def tick(self) -> None:
        """Advance one second. No-op once cancelled."""
        if self._cancelled:
            return
        state = self._state

        if state.phase is Phase.OPEN:
            state.remaining -= 1
            if state.remaining <= 0:
                state.remaining = 0
                self._close()
            elif self._config.close_on_capture and self._is_captured():
                logger.debug("window %d closing early after capture", state.cycle)
                self._close()
            return

        state.remaining -= 1
        threshold = self._config.warning_threshold
        if threshold > 0 and state.remaining == threshold:
            logger.debug("window opens in %d s", threshold)
            if self._on_warning is not None:
                self._on_warning()
            if self._cancelled or self._state.phase is not Phase.COUNTDOWN:
                return
        if state.remaining <= 0:
            state.remaining = 0
            self._open()

    def reset(self, config: CycleConfig | None = None, graceful: bool = False) -> None:
        """Drop the current cycle and start a fresh countdown.

        An open window is discarded silently unless ``graceful`` is set, in
        which case ``on_window_closed`` fires for it first. Passing
        ``config`` switches to the new timing for this and later cycles.
        """
        if self._cancelled:
            logger.debug("reset ignored: scheduler cancelled")
            return
        if graceful and self._state.phase is Phase.OPEN:
            self._close(config)
            return
        if self._state.phase is Phase.OPEN:
            logger.info("window %d aborted by reset", self._state.cycle)
        if config is not None:
            self._config = config
        self._start_countdown()

    def cancel(self) -> None:
        """Tear down: later ticks, resets and hooks never fire."""
        if not self._cancelled:
            logger.debug("scheduler cancelled in %s phase", self._state.phase.value)
        self._cancelled = True

    # --- Internal ---

    def _bind_capture_check(self, check: Callable[[], bool]) -> None:
        """Install the reader for the current window's captured flag.

        One controller per scheduler: a second binding would let two
        balances settle the same window.
        """
        if self._capture_check is not None:
            raise RuntimeError("Scheduler already has a capture controller bound")
        self._capture_check = check

    def _is_captured(self) -> bool:
        return self._capture_check is not None and self._capture_check()

    def _draw_delay(self) -> int:
        return self._rng.randint(self._config.min_open_delay, self._config.max_open_delay)

    def _start_countdown(self) -> None:
        self._generation += 1
        state = self._state
        state.phase = Phase.COUNTDOWN
        state.remaining = self._draw_delay()
        state.is_rare_tier = False
        logger.debug("countdown started: %d s", state.remaining)

    def _open(self) -> None:
        state = self._state
        state.cycle += 1
        state.is_rare_tier = self._rng.random() < self._config.rare_tier_probability
        state.phase = Phase.OPEN
        state.remaining = self._config.window_duration
        logger.info(
            "window %d opened (%s, %d s)",
            state.cycle, state.tier.value, state.remaining,
        )
        if self._on_window_opened is not None:
            self._on_window_opened(state.is_rare_tier, self._config.window_duration)

    def _settle(self) -> None:
        state = self._state
        state.phase = Phase.SETTLING
        was_captured = self._is_captured()
        logger.info(
            "window %d closed (%s)", state.cycle,
            "captured" if was_captured else "missed",
        )
        if self._on_window_closed is not None:
            self._on_window_closed(was_captured, state.is_rare_tier)

    def _close(self, config: CycleConfig | None = None) -> None:
        # The countdown restarts even if on_window_closed raises, so Settling
        # never outlives the tick. A hook that reset or cancelled wins.
        generation = self._generation
        try:
            self._settle()
        finally:
            if not self._cancelled and generation == self._generation:
                if config is not None:
                    self._config = config
                self._start_countdown()
