# Area: Shared
"""
ctf_leaders.registry — Player registry interface
================================================

The leaders engine never owns player data. It reads it through the
PlayerRegistry protocol, which the host game server implements over its
own player list and name-history index.

InMemoryPlayerRegistry is a complete reference implementation used by
the replay harness and by tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

logger = logging.getLogger("ctf_leaders.registry")

PlayerId = int


@dataclass
class PlayerInfo:
    """A player as seen by the registry."""
    player_id: PlayerId
    name: str
    current_team: Optional[int] = None


class PlayerRegistry(Protocol):
    """Read-only view of players the leaders engine depends on."""

    def is_connected(self, player_id: PlayerId) -> bool:
        """True if the player is currently connected."""
        ...

    def get_by_id(self, player_id: PlayerId) -> Optional[PlayerInfo]:
        """Connected player by id, or None."""
        ...

    def has_active_name(self, name: str) -> bool:
        """True if a connected player currently uses this name."""
        ...

    def resolve_by_name(self, name: str) -> Optional[PlayerId]:
        """Player id from the name history, or None if never seen."""
        ...


class InMemoryPlayerRegistry:
    """
    Dictionary-backed PlayerRegistry.

    Connected players are keyed by id and by active name. The name
    history maps every name a player has ever used to their id and is
    never pruned, so disconnected or renamed players stay resolvable.
    """

    def __init__(self) -> None:
        self._players: Dict[PlayerId, PlayerInfo] = {}
        self._active_names: Dict[str, PlayerId] = {}
        self._name_history: Dict[str, PlayerId] = {}

    # ── Mutations (host side) ──────────────────────────────────

    def connect(self, player_id: PlayerId, name: str, team: Optional[int] = None) -> PlayerInfo:
        """Add a connected player and record their name in the history."""
        player = PlayerInfo(player_id=player_id, name=name, current_team=team)
        self._players[player_id] = player
        self._active_names[name] = player_id
        self._name_history[name] = player_id
        logger.debug("Player connected: %s (id=%s, team=%s)", name, player_id, team)
        return player

    def disconnect(self, player_id: PlayerId) -> None:
        """Remove a connected player. No-op if unknown. History is kept."""
        player = self._players.pop(player_id, None)
        if player is None:
            return
        if self._active_names.get(player.name) == player_id:
            del self._active_names[player.name]
        logger.debug("Player disconnected: %s (id=%s)", player.name, player_id)

    def rename(self, player_id: PlayerId, new_name: str) -> None:
        """Change a connected player's active name."""
        player = self._players.get(player_id)
        if player is None:
            logger.debug("Rename ignored, player %s not connected", player_id)
            return
        if self._active_names.get(player.name) == player_id:
            del self._active_names[player.name]
        player.name = new_name
        self._active_names[new_name] = player_id
        self._name_history[new_name] = player_id

    def switch_team(self, player_id: PlayerId, team: int) -> None:
        """Move a connected player to another team."""
        player = self._players.get(player_id)
        if player is None:
            logger.debug("Team switch ignored, player %s not connected", player_id)
            return
        player.current_team = team

    # ── PlayerRegistry ────────────────────────────────────────

    def is_connected(self, player_id: PlayerId) -> bool:
        return player_id in self._players

    def get_by_id(self, player_id: PlayerId) -> Optional[PlayerInfo]:
        return self._players.get(player_id)

    def has_active_name(self, name: str) -> bool:
        return name in self._active_names

    def resolve_by_name(self, name: str) -> Optional[PlayerId]:
        return self._name_history.get(name)
