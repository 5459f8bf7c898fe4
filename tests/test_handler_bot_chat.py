# Area: Leaders Tests
"""Tests for CTF_BOT_CHAT_TEAM handler."""

from ctf_leaders._leaders.handler_bot_chat import BotChatHandler
from ctf_leaders._leaders.state_machine import LeaderStateMachine
from ctf_leaders._leaders.classifier import (
    Chosen, ControlledBy, ElectionStart, StillLeader, Unrecognized,
)
from ctf_leaders._leaders.enums import CtfTeam
from ctf_leaders.registry import InMemoryPlayerRegistry

ALICE, BOB, BLUE_BOT, RED_BOT = 1, 2, 8, 9
ELECTION_TEXT = "Type #yes in the next 30 seconds to become the new team leader."


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestBotChatHandler:
    """Tests for BotChatHandler."""

    def create_handler(self):
        """Alice on BLUE, Bob on RED, one bot per team."""
        registry = InMemoryPlayerRegistry()
        registry.connect(ALICE, "Alice", team=CtfTeam.BLUE)
        registry.connect(BOB, "Bob", team=CtfTeam.RED)
        registry.connect(BLUE_BOT, "BlueBot", team=CtfTeam.BLUE)
        registry.connect(RED_BOT, "RedBot", team=CtfTeam.RED)
        clock = FakeClock()
        sm = LeaderStateMachine(registry, clock=clock)
        return BotChatHandler(sm), sm, registry, clock

    def create_chat(self, bot_id, text):
        return {
            "event_type": "CTF_BOT_CHAT_TEAM",
            "payload": {"player_id": bot_id, "text": text},
        }

    def test_election_start_uses_bot_team(self):
        handler, sm, _, clock = self.create_handler()
        result = handler.handle(self.create_chat(RED_BOT, ELECTION_TEXT))
        assert result == ElectionStart()
        assert sm.storage.red.election_active is True
        assert sm.storage.red.election_started_at == clock.now
        assert sm.storage.blue.election_active is False

    def test_election_start_from_bot_without_team(self):
        handler, sm, registry, _ = self.create_handler()
        registry.connect(10, "LostBot", team=None)
        assert handler.handle(self.create_chat(10, ELECTION_TEXT)) is None
        assert sm.storage.blue.election_active is False
        assert sm.storage.red.election_active is False

    def test_controlled_by_sets_leader_without_ending_election(self):
        handler, sm, _, _ = self.create_handler()
        handler.handle(self.create_chat(BLUE_BOT, ELECTION_TEXT))

        result = handler.handle(self.create_chat(
            BLUE_BOT, "The blue team has 5 bots in auto mode controlled by Alice."))

        assert result == ControlledBy(team=CtfTeam.BLUE, name="Alice")
        assert sm.storage.blue.leader_id == ALICE
        assert sm.storage.blue.election_active is True

    def test_controlled_by_team_is_explicit(self):
        """The preamble decides the team, not the sending bot."""
        handler, sm, _, _ = self.create_handler()
        handler.handle(self.create_chat(
            BLUE_BOT, "The red team has 7 bots in capture mode controlled by Bob."))
        assert sm.storage.red.leader_id == BOB
        assert sm.storage.blue.leader_id is None

    def test_chosen_ends_election(self):
        handler, sm, _, _ = self.create_handler()
        handler.handle(self.create_chat(RED_BOT, ELECTION_TEXT))

        result = handler.handle(self.create_chat(
            RED_BOT, "Bob has been chosen as the new team leader."))

        assert result == Chosen(name="Bob")
        assert sm.storage.red.leader_id == BOB
        assert sm.storage.red.election_active is False

    def test_still_leader_ends_election(self):
        handler, sm, _, _ = self.create_handler()
        handler.handle(self.create_chat(BLUE_BOT, ELECTION_TEXT))

        result = handler.handle(self.create_chat(BLUE_BOT, "Alice is still the team leader."))

        assert result == StillLeader(name="Alice")
        assert sm.storage.blue.leader_id == ALICE
        assert sm.storage.blue.election_active is False

    def test_unresolvable_name_changes_nothing(self):
        handler, sm, _, _ = self.create_handler()
        before = sm.storage.snapshot()
        result = handler.handle(self.create_chat(
            RED_BOT, "Zzyxx has been chosen as the new team leader."))
        assert result == Chosen(name="Zzyxx")
        assert sm.storage.snapshot() == before

    def test_unrecognized_line_changes_nothing(self):
        handler, sm, _, _ = self.create_handler()
        before = sm.storage.snapshot()
        result = handler.handle(self.create_chat(RED_BOT, "Defending the flag."))
        assert isinstance(result, Unrecognized)
        assert sm.storage.snapshot() == before

    def test_disconnected_sender_ignored(self):
        handler, sm, registry, _ = self.create_handler()
        registry.disconnect(RED_BOT)
        assert handler.handle(self.create_chat(RED_BOT, ELECTION_TEXT)) is None
        assert sm.storage.red.election_active is False

    def test_missing_text_ignored(self):
        handler, _, _, _ = self.create_handler()
        event = {"event_type": "CTF_BOT_CHAT_TEAM", "payload": {"player_id": RED_BOT}}
        assert handler.handle(event) is None

    def test_missing_sender_ignored(self):
        handler, _, _, _ = self.create_handler()
        event = {"event_type": "CTF_BOT_CHAT_TEAM", "payload": {"text": ELECTION_TEXT}}
        assert handler.handle(event) is None
