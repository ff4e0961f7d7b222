"""Cycle configuration."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from pulse_window.types import ConfigurationError, Tier


@dataclass(frozen=True)
class CycleConfig:
    """Immutable timing and pricing of the pulse cycle.

    Attributes:
        min_open_delay: Shortest countdown before a window opens, seconds.
        max_open_delay: Longest countdown before a window opens, seconds.
        window_duration: Seconds a window stays open.
        rare_tier_probability: Chance in [0, 1] that a window is rare.
        warning_threshold: Countdown value at which the warning fires
            (0 disables it). Must be below min_open_delay.
        close_on_capture: Close the window on the tick after a capture
            instead of waiting for window_duration to run out.
        normal_cost: Credits charged for a normal capture.
        rare_cost: Credits charged for a rare capture.
    """

    min_open_delay: int = 300
    max_open_delay: int = 900
    window_duration: int = 30
    rare_tier_probability: float = 0.2
    warning_threshold: int = 10
    close_on_capture: bool = False
    normal_cost: int = 1
    rare_cost: int = 3

    def __post_init__(self) -> None:
        for name in ("min_open_delay", "max_open_delay", "window_duration",
                     "normal_cost", "rare_cost"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if self.min_open_delay > self.max_open_delay:
            raise ConfigurationError(
                f"min_open_delay ({self.min_open_delay}) must be <= "
                f"max_open_delay ({self.max_open_delay})"
            )
        prob = self.rare_tier_probability
        if isinstance(prob, bool) or not isinstance(prob, (int, float)) or not 0.0 <= prob <= 1.0:
            raise ConfigurationError(
                f"rare_tier_probability must be in [0, 1], got {prob!r}"
            )
        threshold = self.warning_threshold
        if not _is_int(threshold) or not 0 <= threshold < self.min_open_delay:
            raise ConfigurationError(
                f"warning_threshold must be in [0, min_open_delay), got {threshold!r}"
            )

    def cost(self, tier: Tier) -> int:
        return self.rare_cost if tier is Tier.RARE else self.normal_cost

    @classmethod
    def demo(cls, **overrides: Any) -> CycleConfig:
        """Short cycle for demonstrations: 15-60 s countdown, 15 s window."""
        params: dict[str, Any] = {
            "min_open_delay": 15,
            "max_open_delay": 60,
            "window_duration": 15,
        }
        params.update(overrides)
        return cls(**params)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CycleConfig:
        """Build from a plain mapping. Unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
