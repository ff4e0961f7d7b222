"""Tests for pulse_window.scheduler — the countdown/open/close lifecycle."""
from __future__ import annotations

import random

import pytest

from pulse_window import CycleConfig, Phase, Scheduler


def _setup(
    config: CycleConfig | None = None, seed: int = 42
) -> tuple[Scheduler, list[tuple]]:
    """Create a scheduler whose hooks append to a shared log."""
    log: list[tuple] = []
    scheduler = Scheduler(
        config or CycleConfig(min_open_delay=5, max_open_delay=5, window_duration=3,
                              rare_tier_probability=0.0, warning_threshold=2),
        rng=random.Random(seed),
        on_warning=lambda: log.append(("warning",)),
        on_window_opened=lambda rare, dur: log.append(("opened", rare, dur)),
        on_window_closed=lambda captured, rare: log.append(("closed", captured, rare)),
    )
    return scheduler, log


def _observe(scheduler: Scheduler, n: int) -> list[tuple[Phase, int]]:
    seen = []
    for _ in range(n):
        scheduler.tick()
        seen.append((scheduler.phase, scheduler.remaining))
    return seen


class TestScenario:
    def test_full_cycle_sequence(self) -> None:
        scheduler, log = _setup()
        assert (scheduler.phase, scheduler.remaining) == (Phase.COUNTDOWN, 5)

        seen = _observe(scheduler, 9)
        assert seen == [
            (Phase.COUNTDOWN, 4),
            (Phase.COUNTDOWN, 3),
            (Phase.COUNTDOWN, 2),
            (Phase.COUNTDOWN, 1),
            (Phase.OPEN, 3),
            (Phase.OPEN, 2),
            (Phase.OPEN, 1),
            (Phase.COUNTDOWN, 5),
            (Phase.COUNTDOWN, 4),
        ]
        assert log == [("warning",), ("opened", False, 3), ("closed", False, False)]

    def test_warning_fires_at_threshold(self) -> None:
        scheduler, log = _setup()
        _observe(scheduler, 2)
        assert log == []
        scheduler.tick()
        assert scheduler.remaining == 2
        assert log == [("warning",)]

    def test_warning_fires_once_per_countdown(self) -> None:
        scheduler, log = _setup()
        _observe(scheduler, 8 * 3)
        kinds = [entry[0] for entry in log]
        assert kinds == ["warning", "opened", "closed"] * 3

    def test_cycle_counter_advances_on_open(self) -> None:
        scheduler, _ = _setup()
        assert scheduler.cycle == 0
        _observe(scheduler, 5)
        assert scheduler.cycle == 1
        _observe(scheduler, 8)
        assert scheduler.cycle == 2


class TestEdgeCases:
    def test_fixed_length_countdown(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=1, window_duration=1,
                          warning_threshold=0)
        scheduler, log = _setup(cfg)
        scheduler.tick()
        assert scheduler.phase is Phase.OPEN
        scheduler.tick()
        assert scheduler.phase is Phase.COUNTDOWN
        assert scheduler.remaining == 1

    def test_zero_threshold_never_warns(self) -> None:
        cfg = CycleConfig(min_open_delay=3, max_open_delay=6, window_duration=2,
                          rare_tier_probability=0.0, warning_threshold=0)
        scheduler, log = _setup(cfg)
        _observe(scheduler, 100)
        assert ("warning",) not in log
        assert ("opened", False, 2) in log

    def test_settling_never_observed_between_ticks(self) -> None:
        phases_in_hook: list[Phase] = []
        scheduler = Scheduler(
            CycleConfig(min_open_delay=2, max_open_delay=4, window_duration=2,
                        warning_threshold=0),
            rng=random.Random(3),
            on_window_closed=lambda c, r: phases_in_hook.append(scheduler.phase),
        )
        seen = _observe(scheduler, 200)
        assert all(phase is not Phase.SETTLING for phase, _ in seen)
        assert phases_in_hook and all(p is Phase.SETTLING for p in phases_in_hook)

    def test_rare_flag_reported_at_close(self) -> None:
        cfg = CycleConfig(min_open_delay=2, max_open_delay=2, window_duration=2,
                          rare_tier_probability=1.0, warning_threshold=0)
        scheduler, log = _setup(cfg)
        _observe(scheduler, 4)
        assert log == [("opened", True, 2), ("closed", False, True)]
        assert scheduler.is_rare_tier is False

    def test_formatted_remaining(self) -> None:
        cfg = CycleConfig(min_open_delay=75, max_open_delay=75)
        scheduler, _ = _setup(cfg)
        assert scheduler.formatted_remaining == "01:15"


class TestProperties:
    def test_countdown_starts_within_bounds(self) -> None:
        cfg = CycleConfig(min_open_delay=3, max_open_delay=7, window_duration=1,
                          warning_threshold=0)
        starts: list[int] = []
        just_closed = []
        scheduler = Scheduler(
            cfg, rng=random.Random(11),
            on_window_closed=lambda c, r: just_closed.append(True),
        )
        starts.append(scheduler.remaining)
        for _ in range(2000):
            scheduler.tick()
            if just_closed:
                just_closed.clear()
                starts.append(scheduler.remaining)
        assert len(starts) > 100
        assert all(3 <= s <= 7 for s in starts)
        assert min(starts) == 3
        assert max(starts) == 7

    def test_open_and_close_strictly_alternate(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=4, window_duration=3,
                          rare_tier_probability=0.5, warning_threshold=0)
        scheduler, log = _setup(cfg, seed=5)
        _observe(scheduler, 1000)
        kinds = [entry[0] for entry in log]
        assert kinds[0] == "opened"
        for prev, cur in zip(kinds, kinds[1:]):
            assert prev != cur

    def test_close_reports_same_tier_as_open(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=2, window_duration=1,
                          rare_tier_probability=0.5, warning_threshold=0)
        scheduler, log = _setup(cfg, seed=9)
        _observe(scheduler, 500)
        opened = [e[1] for e in log if e[0] == "opened"]
        closed = [e[2] for e in log if e[0] == "closed"]
        assert opened[: len(closed)] == closed

    def test_rare_tier_frequency(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=1, window_duration=1,
                          rare_tier_probability=0.2, warning_threshold=0)
        scheduler, log = _setup(cfg, seed=1234)
        _observe(scheduler, 20_000)
        rare = [e[1] for e in log if e[0] == "opened"]
        assert len(rare) == 10_000
        assert abs(sum(rare) / len(rare) - 0.2) < 0.02

    def test_same_seed_same_schedule(self) -> None:
        cfg = CycleConfig(min_open_delay=2, max_open_delay=9, window_duration=2,
                          rare_tier_probability=0.3, warning_threshold=1)
        a, log_a = _setup(cfg, seed=77)
        b, log_b = _setup(cfg, seed=77)
        assert _observe(a, 300) == _observe(b, 300)
        assert log_a == log_b


class TestReset:
    def test_reset_mid_open_emits_no_close(self) -> None:
        cfg = CycleConfig(min_open_delay=2, max_open_delay=6, window_duration=5,
                          warning_threshold=0)
        scheduler, log = _setup(cfg)
        while scheduler.phase is not Phase.OPEN:
            scheduler.tick()
        scheduler.reset()
        assert scheduler.phase is Phase.COUNTDOWN
        assert 2 <= scheduler.remaining <= 6
        assert [e[0] for e in log] == ["opened"]

    def test_reset_cancels_pending_close(self) -> None:
        cfg = CycleConfig(min_open_delay=4, max_open_delay=4, window_duration=2,
                          warning_threshold=0)
        scheduler, log = _setup(cfg)
        _observe(scheduler, 4)
        assert scheduler.phase is Phase.OPEN
        scheduler.reset()
        # The aborted window would have closed after two more ticks
        _observe(scheduler, 3)
        assert [e[0] for e in log] == ["opened"]
        _observe(scheduler, 1)
        assert [e[0] for e in log] == ["opened", "opened"]

    def test_graceful_reset_emits_close_first(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=1, window_duration=5,
                          rare_tier_probability=0.0, warning_threshold=0)
        scheduler, log = _setup(cfg)
        scheduler.tick()
        scheduler.reset(graceful=True)
        assert log == [("opened", False, 5), ("closed", False, False)]
        assert scheduler.phase is Phase.COUNTDOWN

    def test_graceful_reset_in_countdown_emits_nothing(self) -> None:
        scheduler, log = _setup()
        scheduler.reset(graceful=True)
        assert log == []

    def test_reset_with_new_config(self) -> None:
        scheduler, _ = _setup()
        demo = CycleConfig.demo()
        scheduler.reset(config=demo)
        assert scheduler.config is demo
        assert 15 <= scheduler.remaining <= 60

    def test_reset_keeps_state_identity(self) -> None:
        scheduler, _ = _setup()
        state = scheduler.state
        _observe(scheduler, 6)
        scheduler.reset()
        assert scheduler.state is state

    def test_hook_may_reset_scheduler(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=1, window_duration=3,
                          warning_threshold=0)
        scheduler = Scheduler(cfg, rng=random.Random(0),
                              on_window_opened=lambda r, d: scheduler.reset())
        scheduler.tick()
        assert scheduler.phase is Phase.COUNTDOWN
        assert scheduler.remaining == 1


class TestCancel:
    def test_cancelled_scheduler_ignores_ticks(self) -> None:
        scheduler, log = _setup()
        _observe(scheduler, 2)
        scheduler.cancel()
        before = (scheduler.phase, scheduler.remaining)
        _observe(scheduler, 50)
        assert (scheduler.phase, scheduler.remaining) == before
        assert log == []
        assert scheduler.cancelled

    def test_cancelled_scheduler_ignores_reset(self) -> None:
        scheduler, log = _setup()
        _observe(scheduler, 5)
        scheduler.cancel()
        scheduler.reset(graceful=True)
        assert scheduler.phase is Phase.OPEN
        assert not scheduler.is_open
        assert [e[0] for e in log] == ["warning", "opened"]

    def test_cancel_from_close_hook_stops_restart(self) -> None:
        cfg = CycleConfig(min_open_delay=1, max_open_delay=1, window_duration=1,
                          warning_threshold=0)
        closes = []

        def on_closed(captured: bool, rare: bool) -> None:
            closes.append(captured)
            scheduler.cancel()

        scheduler = Scheduler(cfg, rng=random.Random(0), on_window_closed=on_closed)
        _observe(scheduler, 10)
        assert closes == [False]
        assert scheduler.cycle == 1


class TestHookFailures:
    def _raising(self) -> tuple[Scheduler, list[bool]]:
        cfg = CycleConfig(min_open_delay=3, max_open_delay=3, window_duration=2,
                          rare_tier_probability=0.0, warning_threshold=0)
        closes: list[bool] = []

        def on_closed(captured: bool, rare: bool) -> None:
            closes.append(captured)
            raise RuntimeError("renderer failed")

        return Scheduler(cfg, rng=random.Random(0), on_window_closed=on_closed), closes

    def test_raising_close_hook_still_restarts_countdown(self) -> None:
        scheduler, closes = self._raising()
        _observe(scheduler, 4)
        assert scheduler.phase is Phase.OPEN
        with pytest.raises(RuntimeError):
            scheduler.tick()
        assert closes == [False]
        assert (scheduler.phase, scheduler.remaining) == (Phase.COUNTDOWN, 3)

        # A full countdown precedes the next window
        assert _observe(scheduler, 3) == [
            (Phase.COUNTDOWN, 2),
            (Phase.COUNTDOWN, 1),
            (Phase.OPEN, 2),
        ]
        assert scheduler.cycle == 2

    def test_raising_close_hook_on_graceful_reset(self) -> None:
        scheduler, closes = self._raising()
        _observe(scheduler, 3)
        demo = CycleConfig.demo()
        with pytest.raises(RuntimeError):
            scheduler.reset(config=demo, graceful=True)
        assert closes == [False]
        assert scheduler.phase is Phase.COUNTDOWN
        assert scheduler.config is demo
        assert 15 <= scheduler.remaining <= 60
