import random

from reversi.bots import BOTS, greedy, play_out, random_mover
from reversi.game import Board, Side


def stuck_board():
    # Dark to move with no dark discs at all
    return Board.from_text("\n".join(["OO......"] + ["........"] * 7), Side.DARK)


def test_registry_names():
    assert set(BOTS) == {"Greedy", "Random"}


def test_greedy_matches_engine():
    game = Board()
    assert greedy(game) == (2, 3)
    game.make_move(2, 3)
    assert greedy(game) == game.compute_greedy_move()


def test_bots_return_none_without_moves():
    assert greedy(stuck_board()) is None
    assert random_mover(stuck_board()) is None


def test_random_mover_is_seedable():
    first = random_mover(Board(), random.Random(7))
    second = random_mover(Board(), random.Random(7))
    assert first == second
    assert first in Board().valid_moves()


def test_play_out_finishes_game():
    rng = random.Random(3)
    game = Board()
    played = play_out(
        game,
        {Side.DARK: greedy, Side.LIGHT: lambda b: random_mover(b, rng)},
    )
    assert game.is_game_over()
    dark, light = game.score()
    assert dark + light == 4 + played


def test_play_out_stops_when_side_is_stuck():
    game = stuck_board()
    assert play_out(game, {Side.DARK: greedy, Side.LIGHT: greedy}) == 0
    assert game.current is Side.DARK
