"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Log Dispatch - A leveled, multi-destination logging dispatcher
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_dispatch.core.logger import Logger
from log_dispatch.core.logger_builder import LoggerBuilder
from log_dispatch.core.log_entry import LogEntry
from log_dispatch.core.log_level import LogLevel
from log_dispatch.core.logger_config import LoggerConfig
from log_dispatch.core.writer import LogWriter
from log_dispatch.core.clock import Clock, LocalClock, FixedClock

# Import submodules (not all classes by default)
from log_dispatch import filters
from log_dispatch import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "LogWriter",
    "Clock",
    "LocalClock",
    "FixedClock",
    "filters",
    "writers",
]
