# Area: Leaders
"""
ctf_leaders._leaders.event_router — Game Event Router
=====================================================

Routes events from the game event bus to their registered handlers
based on event type.
"""

import logging
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger("ctf_leaders.leaders.router")


class EventHandler(Protocol):
    """Protocol for game event handlers."""

    def handle(self, event: Dict[str, Any]) -> Optional[Any]:
        """Handle an event and optionally return a result."""
        ...


class EventRouter:
    """
    Routes game events to handlers.

    Maintains a registry of handlers for each event type and
    dispatches incoming events to the appropriate handler.

    Usage:
        router = EventRouter()
        router.register_handler("TIMELINE_CLOCK_MINUTE", tick_handler)
        result = router.route(event)
    """

    def __init__(self):
        """Initialize router with empty handler registry."""
        self._handlers: Dict[str, EventHandler] = {}

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: The event type to handle
            handler: The handler instance
        """
        self._handlers[event_type] = handler
        logger.debug("Registered handler for %s", event_type)

    def get_handler(self, event_type: str) -> Optional[EventHandler]:
        """
        Get the handler for an event type.

        Args:
            event_type: The event type to look up

        Returns:
            The handler if registered, None otherwise
        """
        return self._handlers.get(event_type)

    def route(self, event: Dict[str, Any]) -> Optional[Any]:
        """
        Route an event to its handler.

        Args:
            event: The event to route (must have 'event_type' key)

        Returns:
            The handler's result, or None if no handler found
        """
        event_type = event.get("event_type", "")
        handler = self._handlers.get(event_type)
        player_id = _sender(event)

        if handler is None:
            logger.warning(
                "No handler for event type: %s (player_id=%s), event dropped",
                event_type, player_id,
            )
            return None

        logger.debug("Routing %s (player_id=%s) to %s", event_type, player_id, type(handler).__name__)
        return handler.handle(event)


def _sender(event: Dict[str, Any]) -> Optional[Any]:
    """Player id carried by the event payload, if any."""
    payload = event.get("payload")
    if not isinstance(payload, dict):
        return None
    return payload.get("player_id")
