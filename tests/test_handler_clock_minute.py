# Area: Leaders Tests
"""Tests for TIMELINE_CLOCK_MINUTE handler."""

from ctf_leaders._leaders.handler_clock_minute import ClockMinuteHandler
from ctf_leaders._leaders.state_machine import LeaderStateMachine
from ctf_leaders._leaders.enums import CtfTeam
from ctf_leaders.registry import InMemoryPlayerRegistry


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class TestClockMinuteHandler:
    """Tests for ClockMinuteHandler."""

    def test_resets_stale_election(self):
        clock = FakeClock(1000.0)
        sm = LeaderStateMachine(InMemoryPlayerRegistry(), clock=clock)
        sm.on_election_begin(CtfTeam.RED)
        handler = ClockMinuteHandler(sm)

        clock.now = 1010.0
        assert handler.handle({"event_type": "TIMELINE_CLOCK_MINUTE"}) == []
        assert sm.storage.red.election_active is True

        clock.now = 1040.0
        assert handler.handle({"event_type": "TIMELINE_CLOCK_MINUTE"}) == [CtfTeam.RED]
        assert sm.storage.red.election_active is False
