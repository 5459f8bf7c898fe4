# Area: Leaders
"""
Leaders engine - Team-leader inference for CTF bot squads.

This package handles:
- Classifying team-control bot chat lines
- Per-team leader records and election state
- Routing game events to handlers
"""

from .enums import CtfTeam, ElectionState, ElectionEvent, LeaderEvent
from .records import LeaderRecord, LeadersStorage
from .classifier import (
    classify,
    BotMessage,
    ElectionStart,
    ControlledBy,
    Chosen,
    StillLeader,
    Unrecognized,
)
from .state_machine import LeaderStateMachine
from .event_router import EventRouter
from .handler_base import BaseEventHandler
from .orchestrator import LeadersOrchestrator

__all__ = [
    "CtfTeam",
    "ElectionState",
    "ElectionEvent",
    "LeaderEvent",
    "LeaderRecord",
    "LeadersStorage",
    "classify",
    "BotMessage",
    "ElectionStart",
    "ControlledBy",
    "Chosen",
    "StillLeader",
    "Unrecognized",
    "LeaderStateMachine",
    "EventRouter",
    "BaseEventHandler",
    "LeadersOrchestrator",
]
