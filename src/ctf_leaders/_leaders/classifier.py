# Area: Leaders
"""
ctf_leaders._leaders.classifier — Bot chat message classifier
=============================================================

Decodes the team-control bot's broadcast lines. The bot speaks plain
English, not a structured protocol, so each shape is recognised by
substring position. Matchers run in a fixed order and the first match
wins:

1. ElectionStart   "Type #yes in the next 30 seconds to become the new team leader."
2. ControlledBy    "The blue team has 5 bots in auto mode controlled by playerName."
3. Chosen          "playerName has been chosen as the new team leader."
4. StillLeader     "playerName is still the team leader."

Anything else is Unrecognized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .enums import CtfTeam

logger = logging.getLogger("ctf_leaders.leaders.classifier")

ELECTION_START_TEXT = "Type #yes in the next 30 seconds to become the new team leader."
CHOSEN_MARKER = " has been chosen as the new team leader."
STILL_MARKER = " is still the team leader."
CONTROLLED_BY = "controlled by"
CONTROLLED_BY_NAME_START = "controlled by "

# "controlled by" must appear past the "The xxx team has" preamble.
CONTROLLED_BY_MIN_OFFSET = 20

# Name lengths used when a marker sits at position 0.
CHOSEN_FALLBACK_LENGTH = 40
STILL_FALLBACK_LENGTH = 26

TEAM_PREAMBLES = (
    ("The blue team has", CtfTeam.BLUE),
    ("The red team has", CtfTeam.RED),
)


@dataclass(frozen=True)
class ElectionStart:
    """The bot opened a voting window for its own team."""


@dataclass(frozen=True)
class ControlledBy:
    """Team status line naming the current controller."""
    team: CtfTeam
    name: str


@dataclass(frozen=True)
class Chosen:
    """An election finished with a new leader."""
    name: str


@dataclass(frozen=True)
class StillLeader:
    """An election finished with the previous leader kept."""
    name: str


@dataclass(frozen=True)
class Unrecognized:
    text: str


BotMessage = Union[ElectionStart, ControlledBy, Chosen, StillLeader, Unrecognized]


@dataclass(frozen=True)
class _Scan:
    """Marker positions shared by all matchers for one line."""
    text: str
    chosen_index: int
    still_index: int


def _match_election_start(scan: _Scan) -> Optional[BotMessage]:
    if scan.text == ELECTION_START_TEXT:
        return ElectionStart()
    return None


def _match_controlled_by(scan: _Scan) -> Optional[BotMessage]:
    if scan.still_index != -1 or scan.chosen_index != -1:
        return None
    if scan.text.find(CONTROLLED_BY, CONTROLLED_BY_MIN_OFFSET) == -1:
        return None

    for preamble, team in TEAM_PREAMBLES:
        if scan.text.startswith(preamble):
            name_at = scan.text.find(CONTROLLED_BY_NAME_START)
            if name_at == -1:
                return None
            # The trailing period is not part of the name.
            name = scan.text[name_at + len(CONTROLLED_BY_NAME_START):len(scan.text) - 1]
            return ControlledBy(team=team, name=name)
    return None


def _match_chosen(scan: _Scan) -> Optional[BotMessage]:
    if scan.chosen_index == -1:
        return None
    if scan.still_index not in (-1, 0):
        return None
    if scan.chosen_index == 0:
        return Chosen(name=scan.text[:CHOSEN_FALLBACK_LENGTH])
    return Chosen(name=scan.text[:scan.chosen_index])


def _match_still_leader(scan: _Scan) -> Optional[BotMessage]:
    if scan.still_index == -1:
        return None
    if scan.still_index == 0:
        return StillLeader(name=scan.text[:STILL_FALLBACK_LENGTH])
    return StillLeader(name=scan.text[:scan.still_index])


MATCHERS: List[Callable[[_Scan], Optional[BotMessage]]] = [
    _match_election_start,
    _match_controlled_by,
    _match_chosen,
    _match_still_leader,
]


def classify(text: str) -> BotMessage:
    """
    Classify one bot chat line.

    Args:
        text: The raw chat line

    Returns:
        The first matching message variant, or Unrecognized
    """
    scan = _Scan(
        text=text,
        chosen_index=text.find(CHOSEN_MARKER),
        still_index=text.find(STILL_MARKER),
    )

    for matcher in MATCHERS:
        message = matcher(scan)
        if message is not None:
            logger.debug("Classified bot message as %s", type(message).__name__)
            return message

    logger.debug("Unrecognized bot message: %r", text)
    return Unrecognized(text=text)
