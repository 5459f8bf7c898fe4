# Area: Leaders
"""Orchestrator — wires the classifier, state machine and event handlers."""
import logging
import time
from typing import Any, Callable, Dict, Optional
from ..config import LeadersConfig
from ..registry import PlayerRegistry
from ..types import GameEvent, LeaderSnapshot
from .enums import LeaderEvent
from .event_router import EventRouter
from .handler_bot_chat import BotChatHandler
from .handler_clock_minute import ClockMinuteHandler
from .handler_leader_reset import LeaderResetHandler
from .handler_match_start import MatchStartHandler
from .records import LeadersStorage
from .state_machine import LeaderStateMachine

logger = logging.getLogger("ctf_leaders.leaders.orchestrator")

class LeadersOrchestrator:
    def __init__(self, registry: PlayerRegistry, config: Optional[LeadersConfig] = None,
                 clock: Callable[[], float] = time.time):
        self.config = config or LeadersConfig()
        self.state_machine = LeaderStateMachine(
            registry, clock=clock,
            election_grace_seconds=self.config.election_grace_seconds)
        self.router = EventRouter()
        self._register_handlers()
    def _register_handlers(self) -> None:
        reg, sm = self.router.register_handler, self.state_machine
        reg(LeaderEvent.BOT_CHAT_TEAM.value, BotChatHandler(sm))
        reg(LeaderEvent.PLAYER_SWITCHED.value, LeaderResetHandler(sm))
        reg(LeaderEvent.PLAYERS_REMOVED.value, LeaderResetHandler(sm))
        reg(LeaderEvent.MATCH_START.value, MatchStartHandler(sm))
        reg(LeaderEvent.CLOCK_MINUTE.value, ClockMinuteHandler(sm))
    @property
    def leaders(self) -> LeadersStorage:
        """Both teams' records, shared by reference with readers."""
        return self.state_machine.storage
    def handle_event(self, event: GameEvent) -> Optional[Any]:
        logger.debug("Event: %s", event.get("event_type", ""))
        return self.router.route(event)
    def snapshot(self) -> Dict[str, LeaderSnapshot]: return self.leaders.snapshot()
