"""
Level-based filter

Forwards entries at or above a minimum log level
"""

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.writer import LogWriter
from log_dispatch.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log entries based on a minimum log level.

    Holds no state besides the wrapped writer and the threshold, so one
    instance can serve concurrent writes.
    """

    def __init__(self, writer: LogWriter, min_level: LogLevel):
        """
        Initialize level filter.

        Args:
            writer: Writer that receives qualifying entries
            min_level: Minimum log level (inclusive)

        Example:
            # Only pass ERROR entries to the console
            errors_only = LevelFilter(ConsoleWriter(), LogLevel.ERROR)
        """
        super().__init__(writer)
        self.min_level = min_level

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry's level reaches the threshold.

        Args:
            entry: Log entry to check

        Returns:
            True if entry level >= min_level, False otherwise
        """
        return entry.level >= self.min_level

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level!s}, writer={self.writer!r})"
