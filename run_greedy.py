#!/usr/bin/env python3
"""Print the move a bot would play in a saved Othello position."""
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from reversi.bots import BOTS
from reversi.game import Board


def load_game(path: Path) -> Board:
    """Load a saved game state from ``path``.

    The file may either contain a single game state or a history list as
    produced by the HTTP API's clients. In the latter case the last state in
    the history is used.
    """
    with path.open() as f:
        data = json.load(f)
    if isinstance(data, dict) and "history" in data:
        if not data["history"]:
            raise ValueError("History is empty")
        state = data["history"][-1]
    else:
        state = data
    return Board.from_state(state)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot on a saved game")
    parser.add_argument("file", type=Path, help="Path to saved game JSON file")
    parser.add_argument(
        "--bot", default="Greedy", choices=sorted(BOTS), help="Strategy to consult"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log the engine's decisions"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        game = load_game(args.file)
    except (OSError, ValueError) as exc:
        parser.error(f"cannot load {args.file}: {exc}")

    print(game)
    if game.is_game_over():
        dark, light = game.score()
        print(f"Game over. Score: dark {dark} - light {light}")
        return
    move = BOTS[args.bot](game)
    if move:
        print(f"Next move: {move[0]} {move[1]}")
    else:
        print("No valid moves available.")


if __name__ == "__main__":
    main()
