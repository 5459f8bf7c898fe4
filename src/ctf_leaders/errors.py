"""
ctf_leaders.errors — Custom exception classes
=============================================

Defines the exception hierarchy for configuration and replay errors.
Bot chat content never raises; these cover the package's own inputs.
"""

from __future__ import annotations
from typing import List, Optional


class LeadersError(Exception):
    """Base exception for all ctf_leaders package errors."""
    pass


class ConfigurationError(LeadersError):
    """Raised when configuration cannot be read or fails validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 problems: Optional[List[str]] = None):
        self.source = source
        self.problems = problems or []
        details = f" ({source})" if source else ""
        if self.problems:
            details += ": " + "; ".join(self.problems)
        super().__init__(f"{message}{details}")


class ReplayFormatError(LeadersError):
    """Raised when a replay event line is malformed."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Replay line {line_number}: {reason}")
