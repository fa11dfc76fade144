"""
Log entry data structure

One immutable record per log call.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from log_dispatch.core.log_level import LogLevel, level_name


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Entries are value objects: writers may keep them but can never
    change what other writers observe.
    """

    level: Union[LogLevel, int]
    timestamp: datetime = field(default_factory=datetime.now)
    message: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError("level must be LogLevel enum or int")
        try:
            object.__setattr__(self, "level", LogLevel(self.level))
        except ValueError:
            pass  # Unknown levels are kept and render as "NONE"
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @property
    def level_name(self) -> str:
        """Rendered level label ("NONE" for unknown levels)."""
        return level_name(self.level)

    def __str__(self) -> str:
        """String representation is the message text only."""
        return self.message
