"""
ctf_leaders.cli — Command-line interface
========================================

Replays a recorded event log and prints the resulting leader records.

Usage:
    python -m ctf_leaders replay events.jsonl
    python -m ctf_leaders replay events.jsonl --config leaders.json --auto-tick
    LEADERS_LOG_LEVEL=DEBUG python -m ctf_leaders replay events.jsonl --verbose
"""

import argparse
import json
import sys
from typing import List, Optional

from ._shared.logging_config import disable_quiet_mode, enable_quiet_mode, setup_logging
from .config import load_config
from .errors import ConfigurationError, ReplayFormatError
from .replay import EventReplayer, load_events


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ctf_leaders",
        description="CTF team leader tracking - replay recorded game events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ctf_leaders replay events.jsonl
  python -m ctf_leaders replay events.jsonl --auto-tick
  python -m ctf_leaders replay events.jsonl --config leaders.json --verbose
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser("replay", help="Replay a JSON-lines event log")
    replay.add_argument("events", help="Path to the event log (one JSON event per line)")
    replay.add_argument("--config", type=str, help="Path to JSON config file")
    replay.add_argument(
        "--auto-tick",
        action="store_true",
        help="Inject a clock tick every tick_interval_seconds of replay time",
    )
    replay.add_argument(
        "--verbose",
        action="store_true",
        help="Show log output on the terminal while replaying",
    )
    return parser


def run_replay(args: argparse.Namespace) -> int:
    """Replay the event log and print the final snapshot as JSON."""
    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file, level=config.log_level)
    if args.verbose:
        disable_quiet_mode()
    else:
        enable_quiet_mode()

    try:
        events = load_events(args.events)
        replayer = EventReplayer(config=config, auto_tick=args.auto_tick)
        snapshot = replayer.replay(events)
    except OSError as e:
        print(f"Error: Could not read event log: {e}", file=sys.stderr)
        return 1
    except ReplayFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(snapshot, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    if args.command == "replay":
        return run_replay(args)
    return 1
