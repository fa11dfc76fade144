"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Fan-out dispatcher with failure escalation
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LogWriter: Writer interface
- Clock, LocalClock, FixedClock: Timestamp sources
- LoggerConfig: Configuration management
"""

from log_dispatch.core.clock import Clock, LocalClock, FixedClock
from log_dispatch.core.log_level import LogLevel, level_name
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.writer import LogWriter
from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.core.logger_builder import LoggerBuilder

__all__ = [
    "Clock",
    "LocalClock",
    "FixedClock",
    "LogLevel",
    "level_name",
    "LogEntry",
    "LogWriter",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
]
