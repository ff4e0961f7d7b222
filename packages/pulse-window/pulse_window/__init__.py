"""pulse-window - Pulse lifecycle scheduler and capture settlement."""
from __future__ import annotations

from pulse_window.config import CycleConfig
from pulse_window.controller import CaptureController
from pulse_window.format import format_clock
from pulse_window.scheduler import Scheduler
from pulse_window.systems import make_pulse_system
from pulse_window.timer import PulseTimer
from pulse_window.types import (
    CaptureAttempt,
    CaptureOutcome,
    ConfigurationError,
    CycleState,
    Phase,
    Tier,
)

__all__ = [
    "CycleConfig",
    "CycleState",
    "Phase",
    "Tier",
    "CaptureOutcome",
    "CaptureAttempt",
    "ConfigurationError",
    "Scheduler",
    "CaptureController",
    "PulseTimer",
    "format_clock",
    "make_pulse_system",
]
