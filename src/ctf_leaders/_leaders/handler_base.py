# Area: Leaders
"""
ctf_leaders._leaders.handler_base — Base Event Handler
======================================================

Abstract base class for game event handlers. Provides the common
payload accessors every handler needs.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .state_machine import LeaderStateMachine

logger = logging.getLogger("ctf_leaders.leaders.handler")


class BaseEventHandler(ABC):
    """
    Abstract base class for game event handlers.

    Handlers receive the leader state machine at construction and
    implement handle(). Malformed events are logged and ignored,
    never raised.
    """

    def __init__(self, state_machine: LeaderStateMachine):
        self.state_machine = state_machine

    @abstractmethod
    def handle(self, event: Dict[str, Any]) -> Optional[Any]:
        """
        Handle a game event.

        Args:
            event: The event to handle

        Returns:
            Optional result describing what changed, or None
        """
        pass

    def extract_event_type(self, event: Dict[str, Any]) -> str:
        """Return the event_type, or empty string if missing."""
        return event.get("event_type", "")

    def extract_payload(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """Return the payload dict, or empty dict if missing."""
        payload = event.get("payload")
        return payload if isinstance(payload, dict) else {}

    def extract_player_id(self, event: Dict[str, Any]) -> Optional[int]:
        """
        Extract the player_id from the event payload.

        Args:
            event: The event to extract from

        Returns:
            The player id, or None if absent or not an integer
        """
        player_id = self.extract_payload(event).get("player_id")
        if isinstance(player_id, bool) or not isinstance(player_id, int):
            logger.debug("Event %s without a usable player_id", self.extract_event_type(event))
            return None
        return player_id
