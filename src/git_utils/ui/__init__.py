"""UI components for terminal output."""

from git_utils.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    Logger,
    error,
    log,
    success,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "log",
    "success",
    "error",
    # Classes
    "Logger",
]
