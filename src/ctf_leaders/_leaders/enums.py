# Area: Leaders
"""
ctf_leaders._leaders.enums — Teams, election states and event types
===================================================================

Defines the two CTF teams, the per-team election states and the
event types the leaders engine subscribes to.
"""

from enum import Enum, IntEnum


class CtfTeam(IntEnum):
    """CTF team identifiers, as carried in player records."""
    BLUE = 1
    RED = 2


class ElectionState(Enum):
    """
    Per-team election states.

    State transitions:
    IDLE -> ELECTING (on STARTED)
    ELECTING -> ELECTING (on STARTED, timer restarts)
    ELECTING -> IDLE (on FINISHED or EXPIRED)
    IDLE -> IDLE (on FINISHED)
    """
    IDLE = "IDLE"
    ELECTING = "ELECTING"


class ElectionEvent(Enum):
    """
    Events that move a team between election states.

    - STARTED: the bot announced the voting window
    - FINISHED: a "chosen" or "still the team leader" confirmation
    - EXPIRED: a clock tick found the election past its grace window
    """
    STARTED = "STARTED"
    FINISHED = "FINISHED"
    EXPIRED = "EXPIRED"


class LeaderEvent(str, Enum):
    """Event types delivered by the game event bus."""
    BOT_CHAT_TEAM = "CTF_BOT_CHAT_TEAM"
    PLAYER_SWITCHED = "CTF_PLAYER_SWITCHED"
    PLAYERS_REMOVED = "PLAYERS_REMOVED"
    CLOCK_MINUTE = "TIMELINE_CLOCK_MINUTE"
    MATCH_START = "TIMELINE_GAME_MATCH_START"
