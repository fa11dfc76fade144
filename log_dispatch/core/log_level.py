"""
Log level enumeration

Totally ordered severities used for filtering and rendering.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Levels compare by their numeric value: TRACE < INFO < ERROR.
    """

    TRACE = 0   # Detailed tracing
    INFO = 1    # Informational messages
    ERROR = 2   # Errors, including escalated writer failures

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.INFO: "INFO",
    LogLevel.ERROR: "ERROR",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

# Label for values outside the known levels
UNKNOWN_LEVEL_NAME = "NONE"


def level_name(level: int) -> str:
    """
    Render any integer level as a short uppercase label.

    Unknown values render as "NONE" instead of raising, so entries
    carrying a newer level still print.
    """
    try:
        return LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        return UNKNOWN_LEVEL_NAME
