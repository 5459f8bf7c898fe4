"""
ctf_leaders — CTF Team-Leader Inference Engine
==============================================

Tracks which human player controls each team's bot squad in a
capture-the-flag match, by reading the team-control bot's chat and
correlating the names it mentions with the player registry.

Quick Start:
    from ctf_leaders import LeadersOrchestrator, InMemoryPlayerRegistry

    registry = InMemoryPlayerRegistry()
    registry.connect(1, "Alice", team=1)
    registry.connect(9, "Bot", team=1)

    leaders = LeadersOrchestrator(registry)
    leaders.handle_event({
        "event_type": "CTF_BOT_CHAT_TEAM",
        "payload": {"player_id": 9, "text": "Alice is still the team leader."},
    })
    leaders.leaders.blue.leader_id   # -> 1

Host integration:
    Implement PlayerRegistry over the server's player list and name
    history, then forward the five subscribed events to handle_event().
"""

from ._leaders import (
    CtfTeam,
    ElectionState,
    LeaderEvent,
    LeaderRecord,
    LeadersStorage,
    LeaderStateMachine,
    LeadersOrchestrator,
    classify,
    ElectionStart,
    ControlledBy,
    Chosen,
    StillLeader,
    Unrecognized,
)
from ._shared.logging_config import setup_logging
from .config import LeadersConfig, load_config
from .errors import LeadersError, ConfigurationError, ReplayFormatError
from .registry import PlayerRegistry, PlayerInfo, InMemoryPlayerRegistry
from .replay import EventReplayer

__all__ = [
    # Engine
    "LeadersOrchestrator",
    "LeaderStateMachine",
    "LeadersStorage",
    "LeaderRecord",
    "CtfTeam",
    "ElectionState",
    "LeaderEvent",
    # Classifier
    "classify",
    "ElectionStart",
    "ControlledBy",
    "Chosen",
    "StillLeader",
    "Unrecognized",
    # Registry
    "PlayerRegistry",
    "PlayerInfo",
    "InMemoryPlayerRegistry",
    # Config / logging
    "LeadersConfig",
    "load_config",
    "setup_logging",
    # Replay
    "EventReplayer",
    # Errors
    "LeadersError",
    "ConfigurationError",
    "ReplayFormatError",
]
__version__ = "1.0.0"
