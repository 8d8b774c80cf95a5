"""lutpack utilities module.

This module contains shared utilities used across lutpack.

Components:
- exceptions: Custom exception classes
- settings: Configuration and settings management
- processpool: Process pool utilities for parallel execution
"""

from lutpack.utils.exceptions import CommandError, InvalidFileType
from lutpack.utils.processpool import DillProcessPoolExecutor
from lutpack.utils.settings import (
    LutpackSettings,
    get_context,
    init_context,
    reset_context,
)

__all__ = [
    "CommandError",
    "InvalidFileType",
    "DillProcessPoolExecutor",
    "LutpackSettings",
    "get_context",
    "init_context",
    "reset_context",
]
