"""Bot strategies for Othello."""
from __future__ import annotations

import random
from typing import Callable, Dict, Mapping, Optional, Tuple

from .game import NO_MOVE, Board, Side

BotStrategy = Callable[[Board], Optional[Tuple[int, int]]]


def greedy(board: Board) -> Optional[Tuple[int, int]]:
    """Greedy: choose the move that flips the most discs."""
    move = board.compute_greedy_move()
    return None if move == NO_MOVE else move


def random_mover(board: Board, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int]]:
    """Random: choose any legal move with equal probability."""
    moves = board.valid_moves()
    if not moves:
        return None
    return (rng or random).choice(moves)


BOTS: Dict[str, BotStrategy] = {
    "Greedy": greedy,
    "Random": random_mover,
}


def play_out(board: Board, strategies: Mapping[Side, BotStrategy]) -> int:
    """Let the bots in ``strategies`` play ``board`` to the end.

    Returns the number of moves played. Passes happen inside
    :meth:`Board.make_move`, so a strategy is only asked for a move when its
    side actually has one.
    """
    played = 0
    while not board.is_game_over():
        side = board.current
        move = strategies[side](board)
        if move is None:
            # Only reachable for a hand-built position whose side to move is stuck
            break
        board.make_move(*move)
        played += 1
    return played
