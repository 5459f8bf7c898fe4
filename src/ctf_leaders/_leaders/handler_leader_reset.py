# Area: Leaders
"""
ctf_leaders._leaders.handler_leader_reset — Leader Reset Handler
================================================================

Handles CTF_PLAYER_SWITCHED and PLAYERS_REMOVED events. A leader who
leaves their team, or the server, stops being that team's leader.
"""

import logging
from typing import Any, Dict, List

from .enums import CtfTeam
from .handler_base import BaseEventHandler

logger = logging.getLogger("ctf_leaders.leaders.handler.leader_reset")


class LeaderResetHandler(BaseEventHandler):
    """Handler for player switch and disconnect events."""

    def handle(self, event: Dict[str, Any]) -> List[CtfTeam]:
        """
        Handle CTF_PLAYER_SWITCHED or PLAYERS_REMOVED event.

        Args:
            event: Event with payload {player_id}

        Returns:
            Teams whose leader was cleared
        """
        player_id = self.extract_player_id(event)
        if player_id is None:
            return []

        cleared = self.state_machine.clear_if_leader(player_id)
        if cleared:
            logger.debug(
                "%s: player %s no longer leads %s",
                self.extract_event_type(event), player_id,
                ", ".join(team.name for team in cleared),
            )
        return cleared
