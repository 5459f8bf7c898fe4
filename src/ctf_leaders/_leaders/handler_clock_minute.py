# Area: Leaders
"""
ctf_leaders._leaders.handler_clock_minute — Clock Minute Handler
================================================================

Handles TIMELINE_CLOCK_MINUTE events. Resets elections that never
received a confirmation line, e.g. when nobody voted.
"""

from typing import Any, Dict, List

from .enums import CtfTeam
from .handler_base import BaseEventHandler


class ClockMinuteHandler(BaseEventHandler):
    """Handler for TIMELINE_CLOCK_MINUTE events."""

    def handle(self, event: Dict[str, Any]) -> List[CtfTeam]:
        """Return the teams whose stale election was reset."""
        return self.state_machine.on_periodic_tick()
