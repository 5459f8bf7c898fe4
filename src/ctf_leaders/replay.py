"""
ctf_leaders.replay — Event log replay
=====================================

Feeds a recorded event log through a leaders engine backed by an
in-memory player registry. Each line of the log is one JSON object:

    {"at": 1000.0, "event_type": "PLAYER_CONNECTED",
     "payload": {"player_id": 1, "name": "Alice", "team": 1}}
    {"at": 1005.5, "event_type": "CTF_BOT_CHAT_TEAM",
     "payload": {"player_id": 9, "text": "Alice is still the team leader."}}

"at" (seconds) drives the engine clock. Blank lines and lines starting
with '#' are skipped. Registry events (PLAYER_CONNECTED, PLAYER_RENAMED)
only update the registry; CTF_PLAYER_SWITCHED and PLAYERS_REMOVED update
the registry and are then routed to the engine like every other event.
"""

from __future__ import annotations

import json
import math
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ._leaders.enums import LeaderEvent
from ._leaders.orchestrator import LeadersOrchestrator
from .config import LeadersConfig
from .errors import ReplayFormatError
from .registry import InMemoryPlayerRegistry

logger = logging.getLogger("ctf_leaders.replay")

PLAYER_CONNECTED = "PLAYER_CONNECTED"
PLAYER_RENAMED = "PLAYER_RENAMED"

NumberedEvent = Tuple[int, Dict[str, Any]]


class ReplayClock:
    """Clock whose time is set from the replayed events."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def parse_event_line(line: str, line_number: int) -> Dict[str, Any]:
    """
    Parse one event line.

    Args:
        line: Raw JSON text
        line_number: 1-based line number, for error messages

    Returns:
        Event dict with event_type, payload and optional at

    Raises:
        ReplayFormatError: If the line is not a valid event
    """
    try:
        event = json.loads(line)
    except json.JSONDecodeError as e:
        raise ReplayFormatError(line_number, f"invalid JSON ({e.msg})") from e

    if not isinstance(event, dict):
        raise ReplayFormatError(line_number, "event must be a JSON object")
    if not isinstance(event.get("event_type"), str):
        raise ReplayFormatError(line_number, "missing event_type")

    at = event.get("at")
    if at is not None and (isinstance(at, bool) or not isinstance(at, (int, float))):
        raise ReplayFormatError(line_number, "'at' must be a number")

    payload = event.setdefault("payload", {})
    if not isinstance(payload, dict):
        raise ReplayFormatError(line_number, "payload must be a JSON object")
    return event


def read_events(lines: Iterable[str]) -> List[NumberedEvent]:
    """Parse event lines, skipping blanks and '#' comments."""
    events: List[NumberedEvent] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        events.append((line_number, parse_event_line(text, line_number)))
    return events


def load_events(path: str) -> List[NumberedEvent]:
    """Read and parse a UTF-8 event log file."""
    with open(Path(path), "rb") as f:
        return read_events(_decode_lines(f))


def _decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    for line_number, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReplayFormatError(line_number, f"not valid UTF-8 (byte {e.start})") from e


class EventReplayer:
    """
    Replays recorded events through a LeadersOrchestrator.

    With auto_tick, a TIMELINE_CLOCK_MINUTE event is injected every
    tick_interval_seconds of replay time, counted from the first
    timestamped event. A gap spanning several intervals produces a
    single tick at the last boundary it crosses.
    """

    def __init__(
        self,
        config: Optional[LeadersConfig] = None,
        registry: Optional[InMemoryPlayerRegistry] = None,
        auto_tick: bool = False,
    ):
        self.config = config or LeadersConfig()
        self.registry = registry if registry is not None else InMemoryPlayerRegistry()
        self.clock = ReplayClock()
        self.orchestrator = LeadersOrchestrator(self.registry, self.config, clock=self.clock)
        self.auto_tick = auto_tick
        self._next_tick_at: Optional[float] = None
        self.events_replayed = 0

    def replay(self, events: Iterable[NumberedEvent]) -> Dict[str, Dict[str, Any]]:
        """
        Replay events in order.

        Args:
            events: (line_number, event) pairs

        Returns:
            The final leaders snapshot
        """
        for line_number, event in events:
            self._advance_clock(event.get("at"))
            self.apply(event, line_number)
            self.events_replayed += 1

        logger.info("Replayed %d events", self.events_replayed)
        return self.orchestrator.snapshot()

    def apply(self, event: Dict[str, Any], line_number: int = 0) -> Optional[Any]:
        """Apply one event to the registry and, where relevant, the engine."""
        event_type = event["event_type"]
        payload = event.get("payload", {})

        if event_type == PLAYER_CONNECTED:
            self.registry.connect(
                _require(payload, "player_id", int, line_number),
                _require(payload, "name", str, line_number),
                payload.get("team"),
            )
            return None
        if event_type == PLAYER_RENAMED:
            self.registry.rename(
                _require(payload, "player_id", int, line_number),
                _require(payload, "name", str, line_number),
            )
            return None
        if event_type == LeaderEvent.PLAYER_SWITCHED.value and "team" in payload:
            self.registry.switch_team(
                _require(payload, "player_id", int, line_number), payload["team"],
            )
        elif event_type == LeaderEvent.PLAYERS_REMOVED.value:
            self.registry.disconnect(_require(payload, "player_id", int, line_number))

        return self.orchestrator.handle_event(event)

    def _advance_clock(self, at: Optional[float]) -> None:
        if at is None:
            return
        if at < self.clock.now:
            logger.warning("Event time %.3f is before replay time %.3f, clock kept", at, self.clock.now)
            return

        if self.auto_tick:
            self._tick_until(at)

        self.clock.now = at

    def _tick_until(self, at: float) -> None:
        interval = self.config.tick_interval_seconds
        if self._next_tick_at is None:
            self._next_tick_at = at + interval
        if self._next_tick_at > at:
            return

        # Ticks only ever clear elections, so the latest missed boundary
        # has the same effect as firing every one of them.
        missed = math.floor((at - self._next_tick_at) / interval)
        self.clock.now = self._next_tick_at + missed * interval
        self.orchestrator.handle_event({"event_type": LeaderEvent.CLOCK_MINUTE.value})

        self._next_tick_at = self.clock.now + interval
        while self._next_tick_at <= at:
            self._next_tick_at += interval


def _require(payload: Dict[str, Any], key: str, kind: type, line_number: int) -> Any:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ReplayFormatError(line_number, f"payload.{key} must be {kind.__name__}")
    return value
