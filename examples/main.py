"""
main.py — Track team leaders from a host game loop
==================================================

Shows how a game server plugs the leaders engine into its own player
list and event dispatch.

    python main.py

The host:
  1. Implements PlayerRegistry over its player tables
  2. Forwards the five subscribed events to handle_event()
  3. Reads the two leader records whenever it needs them
"""

import logging
from typing import Dict, Optional

from ctf_leaders import CtfTeam, LeadersOrchestrator, PlayerInfo, setup_logging

# ── Setup logging (so you can see what's happening) ──
setup_logging(log_file_path=None, level=logging.DEBUG)


class ServerPlayers:
    """A host's player tables, exposed through the PlayerRegistry protocol."""

    def __init__(self):
        self.online: Dict[int, PlayerInfo] = {}
        self.name_history: Dict[str, int] = {}

    def join(self, player_id: int, name: str, team: CtfTeam) -> None:
        self.online[player_id] = PlayerInfo(player_id, name, team)
        self.name_history[name] = player_id

    def is_connected(self, player_id: int) -> bool:
        return player_id in self.online

    def get_by_id(self, player_id: int) -> Optional[PlayerInfo]:
        return self.online.get(player_id)

    def has_active_name(self, name: str) -> bool:
        return any(p.name == name for p in self.online.values())

    def resolve_by_name(self, name: str) -> Optional[int]:
        return self.name_history.get(name)


players = ServerPlayers()
players.join(1, "Alice", CtfTeam.BLUE)
players.join(2, "Bob", CtfTeam.RED)
players.join(101, "Q-Bot blue", CtfTeam.BLUE)
players.join(102, "Q-Bot red", CtfTeam.RED)

leaders = LeadersOrchestrator(players)


def bot_says(bot_id: int, text: str) -> None:
    leaders.handle_event({"event_type": "CTF_BOT_CHAT_TEAM",
                          "payload": {"player_id": bot_id, "text": text}})


bot_says(102, "Type #yes in the next 30 seconds to become the new team leader.")
bot_says(102, "Bob has been chosen as the new team leader.")
bot_says(101, "The blue team has 5 bots in auto mode controlled by Alice.")

for record in leaders.leaders:
    print(f"{record.team.name:<5} leader={record.leader_id} electing={record.election_active}")
