"""
Main Logger class - synchronous fan-out dispatcher

A Logger owns an ordered list of level-filtered writers and is itself a
writer, so loggers can be nested inside other loggers.
"""

from __future__ import annotations
from typing import Any, Callable, List, Mapping, Optional, Tuple
import sys
import threading

from log_dispatch.core.clock import Clock, LocalClock
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.writer import LogWriter
from log_dispatch.filters.level_filter import LevelFilter


class Logger(LogWriter):
    """
    Logger that routes entries to filtered writers.

    Writer failures never reach the caller. A failure while writing an
    entry below ERROR is turned into a new ERROR entry carrying the
    failure text and written through this logger once more. That second
    pass is already at ERROR, so it cannot escalate again.

    Thread Safety:
        Register writers during setup, before logging starts. After that,
        write() may be called from many threads as long as every
        registered writer is itself thread-safe.
    """

    def __init__(
        self,
        name: str = "logger",
        clock: Optional[Clock] = None,
        terminate: Optional[Callable[[int], Any]] = None,
        exit_status: int = 1,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name, used in repr only
            clock: Timestamp source (default: LocalClock)
            terminate: Called with exit_status by fatal() and fatal_error()
                       (default: sys.exit)
            exit_status: Process exit status used by the fatal methods
        """
        self.name = name
        self.clock = clock or LocalClock()
        self.terminate = terminate or sys.exit
        self.exit_status = exit_status
        self._writers: List[LogWriter] = []
        self._metrics = {"logged": 0, "failed": 0, "escalated": 0}
        self._metrics_lock = threading.Lock()

    @property
    def writers(self) -> Tuple[LogWriter, ...]:
        """Registered (filter-wrapped) writers in fan-out order."""
        return tuple(self._writers)

    def add_writer(self, min_level: LogLevel, writer: LogWriter) -> None:
        """
        Add a writer that only receives entries at or above min_level.

        Not safe to call while other threads are logging.
        """
        self._writers.append(LevelFilter(writer, min_level))

    def write(self, entry: LogEntry) -> None:
        """
        Write entry to every registered writer in registration order.

        Never raises. See the class docstring for failure escalation.
        """
        self._count("logged")
        for writer in self._writers:
            try:
                writer.write(entry)
            except Exception as e:
                self._count("failed")
                if entry.level < LogLevel.ERROR:
                    self._count("escalated")
                    self.error(e)

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        """
        Build an entry and write it.

        Args:
            level: Entry level
            message: Text, or a %-style format when args are given
            *args: Format arguments; with none, message is used verbatim.
                   A single non-empty mapping is used for %(name)s keys.
        """
        self.write(LogEntry(
            level=level,
            timestamp=self.clock.now(),
            message=self._format(message, args),
        ))

    def trace(self, message: str, *args: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, *args)

    def errorf(self, message: str, *args: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, *args)

    def error(self, err: BaseException) -> None:
        """Log an exception's text at ERROR level."""
        self.errorf(self._describe(err))

    def fatal(self, message: str, *args: Any) -> None:
        """Log error message, then terminate the process."""
        self.errorf(message, *args)
        self.terminate(self.exit_status)

    def fatal_error(self, err: BaseException) -> None:
        """Log an exception's text at ERROR level, then terminate the process."""
        self.error(err)
        self.terminate(self.exit_status)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    @staticmethod
    def _describe(err: BaseException) -> str:
        try:
            return str(err)
        except Exception:
            return f"<unprintable {type(err).__name__}>"

    @staticmethod
    def _format(message: str, args: tuple) -> str:
        if not args:
            return message
        # A single mapping feeds %(name)s placeholders, as in stdlib logging
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            args = args[0]
        try:
            return message % args
        except (TypeError, ValueError) as e:
            # Fallback so a bad format never fails the caller
            return f"[FORMAT ERROR: {e}] {message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self.name!r}, writers={len(self._writers)})"
