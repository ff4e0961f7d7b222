"""Core data types for the pulse window lifecycle."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Lifecycle phase of the single active cycle."""

    COUNTDOWN = "countdown"
    OPEN = "open"
    SETTLING = "settling"  # only observable from inside the close notification


class Tier(str, Enum):
    NORMAL = "normal"
    RARE = "rare"


class CaptureOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED_NOT_OPEN = "rejected-not-open"
    REJECTED_ALREADY_CAPTURED = "rejected-already-captured"
    REJECTED_INSUFFICIENT_BALANCE = "rejected-insufficient-balance"


class ConfigurationError(ValueError):
    """Raised when a CycleConfig violates its bounds."""


@dataclass
class CycleState:
    """Runtime state of the cycle. Reset in place, never replaced.

    ``cycle`` counts opened windows and identifies the current one.
    """

    phase: Phase
    remaining: int
    is_rare_tier: bool = False
    cycle: int = 0

    @property
    def tier(self) -> Tier:
        return Tier.RARE if self.is_rare_tier else Tier.NORMAL


@dataclass(frozen=True)
class CaptureAttempt:
    """Settlement result of one attempt_capture() call.

    Attributes:
        outcome: Accepted, or the first failed precondition.
        tier: Tier of the window the attempt targeted, None if none was open.
        cost: Price of the targeted window's tier, debited only when
            accepted. 0 when no window was open.
        balance: Balance after the attempt.
        cycle: Window the attempt targeted (0 before the first window).
    """

    outcome: CaptureOutcome
    tier: Tier | None
    cost: int
    balance: int
    cycle: int

    @property
    def accepted(self) -> bool:
        return self.outcome is CaptureOutcome.ACCEPTED
