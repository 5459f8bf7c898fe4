# Area: Shared
"""
Shared utilities used by the engine and the command line.

This package contains:
- Logging configuration and formatters
"""

from .logging_config import (
    setup_logging,
    enable_quiet_mode,
    disable_quiet_mode,
)

__all__ = [
    "setup_logging",
    "enable_quiet_mode",
    "disable_quiet_mode",
]
