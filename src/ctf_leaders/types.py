"""
ctf_leaders.types — TypedDict schemas for events and snapshots
==============================================================

Documents the structure of the events the engine consumes and the
snapshot it produces. Events are plain dicts:

    {"event_type": "CTF_BOT_CHAT_TEAM",
     "payload": {"player_id": 7, "text": "Bob is still the team leader."}}
"""

from typing import Dict, Optional, TypedDict


class BotChatPayload(TypedDict):
    """Payload of CTF_BOT_CHAT_TEAM."""
    player_id: int          # the bot that spoke
    text: str               # the raw chat line


class PlayerPayload(TypedDict):
    """Payload of CTF_PLAYER_SWITCHED and PLAYERS_REMOVED."""
    player_id: int


class GameEvent(TypedDict, total=False):
    """An event as delivered by the game event bus.

    Fields
    ------
    event_type : str
        One of CTF_BOT_CHAT_TEAM, CTF_PLAYER_SWITCHED, PLAYERS_REMOVED,
        TIMELINE_GAME_MATCH_START, TIMELINE_CLOCK_MINUTE.
    payload : dict
        Event-specific fields; empty for match start and clock ticks.
    """
    event_type: str
    payload: Dict[str, object]


class LeaderSnapshot(TypedDict):
    """One team's record as returned by snapshot()."""
    team: str                       # "BLUE" or "RED"
    leader_id: Optional[int]
    updated_at: float               # 0 until a leader is detected
    election_active: bool
    election_started_at: float
    election_state: str             # "IDLE" or "ELECTING"
