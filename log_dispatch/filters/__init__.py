"""
Log filters module

Writers that wrap other writers and drop entries they should not see.
"""

from log_dispatch.filters.base_filter import BaseFilter
from log_dispatch.filters.level_filter import LevelFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
]
