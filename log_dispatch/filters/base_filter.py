"""
Base filter interface

A filter is a writer that wraps another writer and decides, entry by
entry, whether to pass it on.
"""

from abc import abstractmethod

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.writer import LogWriter


class BaseFilter(LogWriter):
    """
    Abstract base class for filtering writers.

    Entries rejected by should_log() are dropped silently; dropping is
    not a failure. Accepted entries go to the wrapped writer, whose
    outcome (including any exception) is passed through untouched.
    """

    def __init__(self, writer: LogWriter):
        """
        Initialize filter.

        Args:
            writer: Writer that receives accepted entries
        """
        self.writer = writer

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Determine if a log entry should be forwarded.

        Args:
            entry: The log entry to filter

        Returns:
            True if the entry should be forwarded, False otherwise
        """
        pass

    def write(self, entry: LogEntry) -> None:
        """Forward entry to the wrapped writer if it passes the filter."""
        if self.should_log(entry):
            self.writer.write(entry)

    def __call__(self, entry: LogEntry) -> bool:
        """Allow filters to be callable."""
        return self.should_log(entry)
