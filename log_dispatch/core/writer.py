"""
Writer interface

Every log destination implements this: filters, loggers and
concrete outputs alike.
"""

from abc import ABC, abstractmethod

from log_dispatch.core.log_entry import LogEntry


class LogWriter(ABC):
    """
    Abstract base class for log destinations.

    A writer accepts one entry per call. Returning normally means the
    entry was handled; failure is reported by raising, and str() of the
    exception is used as the error description.
    """

    @abstractmethod
    def write(self, entry: LogEntry) -> None:
        """
        Write a log entry.

        Args:
            entry: The log entry to write

        Raises:
            Exception: Any destination-specific I/O or resource failure
        """
        pass
