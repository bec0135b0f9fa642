import json

import pytest

import run_greedy
from reversi.game import Board, GAME_OVER, Side


def write(tmp_path, data):
    path = tmp_path / "game.json"
    path.write_text(json.dumps(data))
    return path


def test_prints_greedy_move(tmp_path, capsys):
    path = write(tmp_path, Board().to_state())
    run_greedy.main([str(path)])
    out = capsys.readouterr().out
    assert "...OX..." in out
    assert "Next move: 2 3" in out


def test_uses_last_history_entry(tmp_path, capsys):
    game = Board()
    first = game.to_state()
    game.make_move(2, 3)
    path = write(tmp_path, {"history": [first, game.to_state()]})
    loaded = run_greedy.load_game(path)
    assert loaded.current is Side.LIGHT
    assert loaded.last_move == (2, 3)

    run_greedy.main([str(path)])
    assert "Next move:" in capsys.readouterr().out


def test_reports_no_moves(tmp_path, capsys):
    stuck = Board.from_text("\n".join(["OO......"] + ["........"] * 7), Side.DARK)
    path = write(tmp_path, stuck.to_state())
    run_greedy.main([str(path), "--bot", "Random"])
    assert "No valid moves available." in capsys.readouterr().out


def test_reports_finished_game(tmp_path, capsys):
    rows = ["OOOOOOOO"] * 5 + ["XXXXXXXX"] * 3
    path = write(tmp_path, Board.from_text("\n".join(rows), GAME_OVER).to_state())
    run_greedy.main([str(path)])
    assert "Game over. Score: dark 24 - light 40" in capsys.readouterr().out


def test_bad_file_exits(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(SystemExit):
        run_greedy.main([str(path)])
    with pytest.raises(SystemExit):
        run_greedy.main([str(tmp_path / "missing.json")])
