# Area: Leaders
"""
ctf_leaders._leaders.records — Per-team leader records
======================================================

Holds the two LeaderRecords (BLUE and RED) owned by one engine instance.
Readers get the storage object by reference; all writes go through the
state machine.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from ..registry import PlayerId
from ..types import LeaderSnapshot
from .enums import CtfTeam, ElectionState


@dataclass
class LeaderRecord:
    """Leader bookkeeping for one team."""
    team: CtfTeam
    leader_id: Optional[PlayerId] = None
    updated_at: float = 0                    # 0 until a leader is detected
    election_active: bool = False
    election_started_at: float = 0           # valid while election_active

    @property
    def election_state(self) -> ElectionState:
        return ElectionState.ELECTING if self.election_active else ElectionState.IDLE

    def to_dict(self) -> LeaderSnapshot:
        return {
            "team": self.team.name,
            "leader_id": self.leader_id,
            "updated_at": self.updated_at,
            "election_active": self.election_active,
            "election_started_at": self.election_started_at,
            "election_state": self.election_state.value,
        }


@dataclass
class LeadersStorage:
    """
    Both teams' leader records.

    Exactly two records exist for the lifetime of the storage; match
    restarts reset their fields instead of replacing them, so references
    handed to readers stay valid.
    """
    blue: LeaderRecord = field(default_factory=lambda: LeaderRecord(CtfTeam.BLUE))
    red: LeaderRecord = field(default_factory=lambda: LeaderRecord(CtfTeam.RED))

    def get(self, team: CtfTeam) -> LeaderRecord:
        if team == CtfTeam.BLUE:
            return self.blue
        if team == CtfTeam.RED:
            return self.red
        raise ValueError(f"Unknown team: {team!r}")

    def __iter__(self) -> Iterator[LeaderRecord]:
        yield self.blue
        yield self.red

    def snapshot(self) -> Dict[str, LeaderSnapshot]:
        """Serializable view of both records, keyed by team name."""
        return {record.team.name.lower(): record.to_dict() for record in self}
