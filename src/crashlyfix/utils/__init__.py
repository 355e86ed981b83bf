"""Utility functions and helpers.

- errors: Exception hierarchy
- logging: Structured logging configuration
"""

from crashlyfix.utils.errors import (
    CrashlyfixError,
    InputSelectionError,
    MapLoadError,
    StackParseError,
)
from crashlyfix.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
)

__all__ = [
    # Errors
    "CrashlyfixError",
    "InputSelectionError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "MapLoadError",
    "StackParseError",
    "bind_context",
    "clear_context",
    "configure_logging",
]
