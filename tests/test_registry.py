# Area: Shared Tests
"""Tests for InMemoryPlayerRegistry."""

from ctf_leaders.registry import InMemoryPlayerRegistry, PlayerInfo


class TestInMemoryPlayerRegistry:
    """Tests for the reference registry."""

    def test_connect(self):
        registry = InMemoryPlayerRegistry()
        player = registry.connect(1, "Alice", team=1)
        assert player == PlayerInfo(player_id=1, name="Alice", current_team=1)
        assert registry.is_connected(1)
        assert registry.get_by_id(1) is player
        assert registry.has_active_name("Alice")
        assert registry.resolve_by_name("Alice") == 1

    def test_unknown_player(self):
        registry = InMemoryPlayerRegistry()
        assert registry.is_connected(5) is False
        assert registry.get_by_id(5) is None
        assert registry.has_active_name("Nobody") is False
        assert registry.resolve_by_name("Nobody") is None

    def test_disconnect_keeps_history(self):
        registry = InMemoryPlayerRegistry()
        registry.connect(1, "Alice", team=1)
        registry.disconnect(1)
        assert registry.is_connected(1) is False
        assert registry.has_active_name("Alice") is False
        assert registry.resolve_by_name("Alice") == 1

    def test_disconnect_unknown_is_noop(self):
        InMemoryPlayerRegistry().disconnect(42)

    def test_rename(self):
        registry = InMemoryPlayerRegistry()
        registry.connect(1, "Alice", team=1)
        registry.rename(1, "Alicia")
        assert registry.has_active_name("Alicia")
        assert registry.has_active_name("Alice") is False
        assert registry.resolve_by_name("Alice") == 1
        assert registry.resolve_by_name("Alicia") == 1

    def test_reconnect_under_taken_name(self):
        """A name freed by one player and reused by another resolves to the new one."""
        registry = InMemoryPlayerRegistry()
        registry.connect(1, "Alice", team=1)
        registry.disconnect(1)
        registry.connect(2, "Alice", team=2)
        assert registry.resolve_by_name("Alice") == 2

    def test_switch_team(self):
        registry = InMemoryPlayerRegistry()
        registry.connect(1, "Alice", team=1)
        registry.switch_team(1, 2)
        assert registry.get_by_id(1).current_team == 2

    def test_switch_team_unknown_is_noop(self):
        InMemoryPlayerRegistry().switch_team(42, 2)
