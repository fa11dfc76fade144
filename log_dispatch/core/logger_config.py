"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Optional, Union

from log_dispatch.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    console_level is the threshold of the built-in stderr writer;
    None means no console writer is registered.
    """

    name: str = "logger"
    console_level: Optional[Union[LogLevel, str]] = LogLevel.INFO

    # Status passed to terminate() by fatal() and fatal_error()
    exit_status: int = 1

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Accept level names such as "info" or "ERROR"
        if isinstance(self.console_level, str):
            self.console_level = LogLevel.from_string(self.console_level)

        if self.exit_status == 0:
            raise ValueError("exit_status must be non-zero")
        if self.exit_status < 0:
            raise ValueError("exit_status cannot be negative")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(console_level=LogLevel.TRACE)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(console_level=LogLevel.ERROR)

    @classmethod
    def silent_config(cls) -> "LoggerConfig":
        """Create configuration without console output."""
        return cls(console_level=None)
