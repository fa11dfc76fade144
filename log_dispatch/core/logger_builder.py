"""Logger builder pattern"""

from dataclasses import replace
from typing import Any, Callable, List, Optional, TextIO, Tuple, Union

from log_dispatch.core.clock import Clock
from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.writer import LogWriter
from log_dispatch.writers.console_writer import ConsoleWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        # Builders never modify the caller's config
        self._config = replace(config) if config else LoggerConfig()
        self._console_stream: Optional[TextIO] = None
        self._clock: Optional[Clock] = None
        self._terminate: Optional[Callable[[int], Any]] = None
        self._custom_writers: List[Tuple[LogLevel, LogWriter]] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_console(
        self,
        level: Union[LogLevel, str] = LogLevel.INFO,
        stream: Optional[TextIO] = None
    ) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            level: Minimum level written to the console, as a LogLevel
                   or a level name such as "error"
            stream: Output stream (default: sys.stderr)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If level is an unknown level name
        """
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.console_level = level
        self._console_stream = stream
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._config.console_level = None
        return self

    def with_clock(self, clock: Clock) -> "LoggerBuilder":
        """Set the timestamp source."""
        self._clock = clock
        return self

    def with_terminate(self, terminate: Callable[[int], Any]) -> "LoggerBuilder":
        """
        Set the callable used by fatal() and fatal_error().

        Args:
            terminate: Called with the exit status after the fatal entry
                       has been written

        Returns:
            Self for method chaining

        Example:
            exits = []
            logger = (LoggerBuilder()
                .with_terminate(exits.append)
                .build())
            logger.fatal("cannot continue")
            assert exits == [1]
        """
        self._terminate = terminate
        return self

    def with_exit_status(self, status: int) -> "LoggerBuilder":
        """Set the exit status used by the fatal methods."""
        if status <= 0:
            raise ValueError("exit_status must be positive")
        self._config.exit_status = status
        return self

    def add_writer(self, min_level: LogLevel, writer: LogWriter) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            min_level: Minimum level the writer receives
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._custom_writers.append((min_level, writer))
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(
            name=self._config.name,
            clock=self._clock,
            terminate=self._terminate,
            exit_status=self._config.exit_status,
        )

        # Console writer is registered ahead of custom writers
        if self._config.console_level is not None:
            logger.add_writer(
                self._config.console_level,
                ConsoleWriter(stream=self._console_stream),
            )

        for min_level, writer in self._custom_writers:
            logger.add_writer(min_level, writer)

        return logger
