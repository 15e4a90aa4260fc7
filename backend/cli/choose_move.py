#!/usr/bin/env python3
"""
Choose a move for a saved Battlesnake move request, offline.

Reads the JSON body of a /move request from a file (or stdin with "-"),
runs the configured player and prints the chosen move. Handy for replaying
a turn that went wrong in a live game:

    python cli/choose_move.py turn_42.json --seed 7 --trace --show-board
"""

import argparse
import json
import logging
import os
import random
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Add backend to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import InvalidGameStateError  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players.greedy_player import GreedyPlayer  # noqa: E402
from players.variant_registry import AVAILABLE_VARIANTS, get_player_class, list_variants  # noqa: E402
from services.move_trace import TraceRecorder  # noqa: E402


logger = logging.getLogger(__name__)


def load_payload(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Pick a move for a saved move request.")
    parser.add_argument("state", nargs="?", help="Path to a move request JSON file, or - for stdin")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random fallback")
    parser.add_argument(
        "--variant",
        default="greedy",
        choices=AVAILABLE_VARIANTS,
        help="Player variant to run (default: %(default)s)",
    )
    parser.add_argument(
        "--legacy-vertical-gate",
        action="store_true",
        help="Only count DOWN as vertical capability, as earlier releases did",
    )
    parser.add_argument("--trace", action="store_true", help="Print the decision trace as JSON lines")
    parser.add_argument("--show-board", action="store_true", help="Print an ASCII view of the board")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--list-variants", action="store_true", help="List the player variants and exit")
    args = parser.parse_args(argv)

    if args.list_variants:
        for variant in list_variants():
            print(f"{variant['key']}: {variant['description']}")
        return 0
    if args.state is None:
        parser.error("the following arguments are required: state")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        game_state = GameState.from_payload(load_payload(args.state))
    except (OSError, ValueError) as exc:
        # ValueError covers bad JSON, non-UTF-8 files and InvalidGameStateError
        print(f"Could not load move request from {args.state}: {exc}", file=sys.stderr)
        return 2

    recorder = TraceRecorder()
    rng = random.Random(args.seed)
    player_cls = get_player_class(args.variant)
    if issubclass(player_cls, GreedyPlayer):
        player = player_cls(rng=rng, tracer=recorder, legacy_vertical_gate=args.legacy_vertical_gate)
    else:
        player = player_cls(rng=rng, tracer=recorder)

    direction = player.get_move(game_state)

    if args.show_board:
        print(game_state.print_board())
    if args.trace:
        for event in recorder.as_dicts():
            print(json.dumps(event))
    print(direction.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
