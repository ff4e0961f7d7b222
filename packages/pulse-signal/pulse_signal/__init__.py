"""pulse-signal - Lifecycle notification fan-out for the pulse core."""
from __future__ import annotations

from pulse_signal.bus import SignalBus
from pulse_signal.history import CaptureHistory, CaptureRecord
from pulse_signal.notices import Notice, NoticeBoard, describe_attempt
from pulse_signal.signals import make_bus_hooks, make_bus_timer
from pulse_signal.systems import make_signal_system

__all__ = [
    "SignalBus",
    "make_signal_system",
    "make_bus_hooks",
    "make_bus_timer",
    "Notice",
    "NoticeBoard",
    "describe_attempt",
    "CaptureHistory",
    "CaptureRecord",
]
