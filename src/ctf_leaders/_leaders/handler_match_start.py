# Area: Leaders
"""
ctf_leaders._leaders.handler_match_start — Match Start Handler
==============================================================

Handles TIMELINE_GAME_MATCH_START events by forgetting both leaders.
"""

import logging
from typing import Any, Dict, Optional

from .handler_base import BaseEventHandler

logger = logging.getLogger("ctf_leaders.leaders.handler.match_start")


class MatchStartHandler(BaseEventHandler):
    """Handler for TIMELINE_GAME_MATCH_START events."""

    def handle(self, event: Dict[str, Any]) -> Optional[Any]:
        # Election flags survive the restart; the next tick or
        # confirmation line settles them.
        self.state_machine.on_match_start()
        logger.debug("Match started, team leaders reset")
        return None
