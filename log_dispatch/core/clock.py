"""
Time sources for log entries

A Logger asks its clock for every timestamp, so tests can pin time
by handing the logger a FixedClock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Abstract source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""
        pass


class LocalClock(Clock):
    """Default clock reading local system time."""

    def now(self) -> datetime:
        return datetime.now()

    def __repr__(self) -> str:
        return "LocalClock()"


class FixedClock(Clock):
    """Clock that always returns the instant it was given."""

    def __init__(self, instant: datetime):
        """
        Initialize fixed clock.

        Args:
            instant: Value returned by every now() call
        """
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"
