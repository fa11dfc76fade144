"""Writers module - Log output handlers"""

from log_dispatch.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
