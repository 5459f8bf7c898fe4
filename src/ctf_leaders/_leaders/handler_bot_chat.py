# Area: Leaders
"""
ctf_leaders._leaders.handler_bot_chat — Bot Team Chat Handler
=============================================================

Handles CTF_BOT_CHAT_TEAM events: classifies the bot's line and
applies the result to the leader state machine.
"""

import logging
from typing import Any, Dict, Optional

from .classifier import Chosen, ControlledBy, ElectionStart, StillLeader, classify
from .handler_base import BaseEventHandler

logger = logging.getLogger("ctf_leaders.leaders.handler.bot_chat")


class BotChatHandler(BaseEventHandler):
    """
    Handler for CTF_BOT_CHAT_TEAM events.

    1. Ignore lines from senders that are no longer connected
    2. Classify the line
    3. Start an election, or record the named leader
    """

    def handle(self, event: Dict[str, Any]) -> Optional[Any]:
        """
        Handle CTF_BOT_CHAT_TEAM event.

        Args:
            event: Event with payload {player_id, text}

        Returns:
            The classified message, or None if the event was ignored
        """
        bot_id = self.extract_player_id(event)
        text = self.extract_payload(event).get("text")
        if bot_id is None or not isinstance(text, str):
            return None

        registry = self.state_machine.registry
        if not registry.is_connected(bot_id):
            logger.debug("Chat from disconnected bot %s ignored", bot_id)
            return None

        message = classify(text)

        if isinstance(message, ElectionStart):
            team = self.state_machine.current_team(bot_id)
            if team is None:
                logger.debug("Election start from bot %s without a team ignored", bot_id)
                return None
            self.state_machine.on_election_begin(team)
        elif isinstance(message, ControlledBy):
            # Status line only; it does not conclude a running election.
            self.state_machine.set_leader(message.name, message.team, stop_election=False)
        elif isinstance(message, (Chosen, StillLeader)):
            self.state_machine.set_leader(message.name)

        return message
