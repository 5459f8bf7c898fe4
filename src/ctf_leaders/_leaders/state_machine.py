# Area: Leaders
"""
ctf_leaders._leaders.state_machine — Leader State Machine
=========================================================

Owns the per-team LeaderRecords and applies every change to them:
leader detection from classified bot messages, leader invalidation on
disconnect or team switch, match restarts, and the election sub-protocol
with its tick-driven timeout.

Each team runs its own election state machine (IDLE / ELECTING).
Leader identity may be written in either state.
"""

import logging
import time
from typing import Callable, List, Optional

from ..registry import PlayerId, PlayerRegistry
from .enums import CtfTeam, ElectionEvent, ElectionState
from .records import LeaderRecord, LeadersStorage

logger = logging.getLogger("ctf_leaders.leaders.state_machine")

DEFAULT_ELECTION_GRACE_SECONDS = 32.0


# Valid election transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    ElectionState.IDLE: {
        ElectionEvent.STARTED: ElectionState.ELECTING,
        ElectionEvent.FINISHED: ElectionState.IDLE,
    },
    ElectionState.ELECTING: {
        ElectionEvent.STARTED: ElectionState.ELECTING,
        ElectionEvent.FINISHED: ElectionState.IDLE,
        ElectionEvent.EXPIRED: ElectionState.IDLE,
    },
}


class LeaderStateMachine:
    """
    Leader bookkeeping for both teams.

    Attributes:
        storage: The two LeaderRecords, shared with readers by reference
        registry: Player registry used for name and team resolution
        election_grace_seconds: Age after which a tick ends an election
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        storage: Optional[LeadersStorage] = None,
        clock: Callable[[], float] = time.time,
        election_grace_seconds: float = DEFAULT_ELECTION_GRACE_SECONDS,
    ):
        self.registry = registry
        self.storage = storage if storage is not None else LeadersStorage()
        self.election_grace_seconds = election_grace_seconds
        self._clock = clock

    # ── Election transitions ─────────────────────────────────

    def can_transition(self, team: CtfTeam, event: ElectionEvent) -> bool:
        """
        Check if an election event is valid for the team's current state.

        Args:
            team: The team whose election state is checked
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        record = self.storage.get(team)
        return event in TRANSITIONS.get(record.election_state, {})

    def transition(self, team: CtfTeam, event: ElectionEvent) -> ElectionState:
        """
        Execute an election transition for one team.

        Args:
            team: The team whose election changes
            event: The event triggering the transition

        Returns:
            The team's new election state

        Raises:
            ValueError: If the transition is not valid
        """
        record = self.storage.get(team)
        if not self.can_transition(team, event):
            raise ValueError(
                f"Invalid election transition for {team.name}: "
                f"{event.value} from {record.election_state.value}"
            )

        next_state = TRANSITIONS[record.election_state][event]
        if next_state == ElectionState.ELECTING:
            record.election_active = True
            record.election_started_at = self._clock()
        else:
            record.election_active = False
        return next_state

    # ── Leader identity ──────────────────────────────────────

    def set_leader(
        self,
        name: str,
        team_hint: Optional[CtfTeam] = None,
        stop_election: bool = True,
    ) -> Optional[CtfTeam]:
        """
        Record a player as their team's leader.

        Args:
            name: Player name extracted from a bot message
            team_hint: Team named by the message itself, if any
            stop_election: Whether this message concludes an election

        Returns:
            The team whose record was written, or None if the name or
            team could not be resolved
        """
        player_id = self._resolve_name(name)
        if player_id is None:
            logger.debug("Team leader not found: %r", name)
            return None

        team = team_hint if team_hint is not None else self.current_team(player_id)
        if team is None:
            logger.debug("Team leader %r (id=%s) has no known team, skipped", name, player_id)
            return None

        record = self.storage.get(team)
        record.leader_id = player_id
        record.updated_at = self._clock()

        if stop_election:
            self.transition(team, ElectionEvent.FINISHED)
            logger.debug("%s team leader elections finished.", team.name.capitalize())

        logger.debug("Detect %s team leader: %r (id=%s)", team.name.lower(), name, player_id)
        return team

    def clear_if_leader(self, player_id: PlayerId) -> List[CtfTeam]:
        """
        Forget a player as leader of any team they lead.

        Args:
            player_id: The disconnected or switched player

        Returns:
            Teams whose leader was cleared (empty if the player led none)
        """
        cleared = []
        for record in self.storage:
            if record.leader_id is not None and record.leader_id == player_id:
                record.leader_id = None
                cleared.append(record.team)
                logger.debug("%s team leader %s cleared", record.team.name.capitalize(), player_id)
        return cleared

    def on_match_start(self) -> None:
        """Forget both leaders. Election flags are left as they are."""
        for record in self.storage:
            record.leader_id = None
            record.updated_at = 0

    # ── Elections ────────────────────────────────────────────

    def on_election_begin(self, team: CtfTeam) -> None:
        """Mark the team as voting, restarting the grace window."""
        self.transition(team, ElectionEvent.STARTED)
        logger.debug("%s team leader elections started.", team.name.capitalize())

    def on_periodic_tick(self) -> List[CtfTeam]:
        """
        End elections that outlived the grace window.

        Returns:
            Teams whose election flag was reset
        """
        now = self._clock()
        expired = []
        for record in self.storage:
            if self._is_expired(record, now):
                self.transition(record.team, ElectionEvent.EXPIRED)
                expired.append(record.team)
                logger.debug("Reset %s elections status.", record.team.name.lower())
        return expired

    # ── Helpers ──────────────────────────────────────────────

    def _is_expired(self, record: LeaderRecord, now: float) -> bool:
        if not record.election_active:
            return False
        return now - record.election_started_at >= self.election_grace_seconds

    def _resolve_name(self, name: str) -> Optional[PlayerId]:
        if not self.registry.has_active_name(name):
            return None
        return self.registry.resolve_by_name(name)

    def current_team(self, player_id: PlayerId) -> Optional[CtfTeam]:
        """Team of a connected player, or None if offline or not on BLUE/RED."""
        if not self.registry.is_connected(player_id):
            return None
        player = self.registry.get_by_id(player_id)
        if player is None:
            return None
        try:
            return CtfTeam(player.current_team)
        except ValueError:
            return None
