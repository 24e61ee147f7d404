"""
Limit Models
============
Limit categories and per-category quota records.
"""

import operator
from dataclasses import dataclass
from enum import Enum

# Largest value of an unsigned 64-bit counter, used as the "no limit" marker.
UNLIMITED = 2**64 - 1


class LimitType(str, Enum):
    """Rate-limit bucket advertised by an instance."""
    AUTH_REGISTER = "auth_register"
    AUTH_LOGIN = "auth_login"
    ABSOLUTE_MESSAGE = "absolute_message"
    ABSOLUTE_REGISTER = "absolute_register"
    GLOBAL = "global"
    IP = "ip"
    CHANNEL = "channel"
    ERROR = "error"
    GUILD = "guild"
    WEBHOOK = "webhook"

    def __str__(self) -> str:
        return self.value


@dataclass
class Limit:
    """Quota state for one bucket."""
    bucket: LimitType
    limit: int      # Ceiling per window
    remaining: int  # Left in the current window
    reset: int      # Window length in seconds

    def __post_init__(self):
        for name in ("limit", "remaining", "reset"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= UNLIMITED:
                raise ValueError(f"{name} must be between 0 and {UNLIMITED}, got {value}")

    @classmethod
    def unlimited(cls, bucket: LimitType) -> "Limit":
        return cls(bucket=bucket, limit=UNLIMITED, remaining=UNLIMITED, reset=UNLIMITED)

    @classmethod
    def from_window(cls, bucket: LimitType, count: int, window: int) -> "Limit":
        """Fresh quota with the whole window still available."""
        return cls(bucket=bucket, limit=count, remaining=count, reset=window)

    @property
    def is_unlimited(self) -> bool:
        return self.limit == UNLIMITED

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def add_remaining(self, delta: int) -> None:
        """
        Apply a signed change to the remaining quota.

        Negative deltas saturate at zero. Positive deltas are not clamped
        to ``limit``; they only stop at the 64-bit ceiling.

        Raises:
            TypeError: If delta is not an integer
        """
        if isinstance(delta, bool):
            raise TypeError("delta must be an integer, not bool")
        delta = operator.index(delta)
        if delta < 0:
            if self.remaining + delta <= 0:
                self.remaining = 0
                return
            self.remaining -= abs(delta)
            return
        self.remaining = min(self.remaining + delta, UNLIMITED)

    def __str__(self) -> str:
        return (
            f"Bucket: {self.bucket}, Limit: {self.limit}, "
            f"Remaining: {self.remaining}, Reset: {self.reset}"
        )
