import argparse

import pytest

import main
from ai.alphabeta_ai import AlphaBetaAI
from ai.random_ai import RandomAI
from config import GameConfig, Settings, load_settings
from game.game_logic import Board, Direction


def test_play_game_until_the_end():
    result = main.play_game(AlphaBetaAI(depth=1), GameConfig(16), seed=3)
    assert result.moves > 0
    assert result.minimum_score == 32
    if result.won:
        assert result.max_tile >= 16
        assert result.score >= 32


def test_random_game_ends_without_winning_2048():
    result = main.play_game(RandomAI(seed=4), GameConfig(2048), seed=4)
    assert not result.won
    assert result.moves > 0
    assert result.max_tile < 2048


def test_run_trials_plays_every_game():
    settings = Settings(depth=1, num_of_games=2, target_value=8)
    results = main.run_trials(AlphaBetaAI(depth=1), settings, seed=10)
    assert len(results) == 2
    assert all(r.minimum_score == 8 for r in results)


def test_summarize():
    results = [
        main.GameResult(True, 100, 16, 10, 1.0, 32),
        main.GameResult(False, 50, 8, 8, 2.0, 32),
        main.GameResult(True, 90, 16, 9, 0.5, 32),
    ]
    assert main.summarize(results) == {
        "wins": 2,
        "games": 3,
        "avg_time": 1.17,
        "avg_score": 80.0,
        "success_rate": 66.67,
    }
    assert main.summarize([])["games"] == 0


def test_random_ai_only_picks_moves_that_change_the_board():
    board = Board.from_grid([[2, 0, 0, 0], [4, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0]])
    for seed in range(10):
        direction, analysis = RandomAI(seed=seed).get_move(board)
        assert direction == Direction.RIGHT
        assert analysis["valid_moves"] == [Direction.RIGHT]


def test_random_ai_on_stuck_board():
    stuck = Board.from_grid([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
    assert RandomAI(seed=1).get_move(stuck) == (None, {})


@pytest.mark.parametrize("value", ["0", "-3", "abc"])
def test_positive_int_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        main.positive_int(value)


def test_cli_set_and_show(tmp_path, capsys):
    path = str(tmp_path / "settings.json")
    assert main.main(["--settings", path, "set", "--depth", "2", "--games", "-1", "--target", "64"]) == 0
    assert load_settings(path) == Settings(depth=2, target_value=64)

    assert main.main(["--settings", path, "show"]) == 0
    assert "depth=2" in capsys.readouterr().out


def test_cli_play(tmp_path):
    path = str(tmp_path / "settings.json")
    argv = ["--settings", path, "play", "--depth", "1", "--games", "1", "--target", "8", "--seed", "1"]
    assert main.main(argv) == 0


def test_cli_rejects_non_positive_depth(tmp_path):
    with pytest.raises(SystemExit):
        main.main(["--settings", str(tmp_path / "s.json"), "play", "--depth", "0"])


def test_cli_without_command(tmp_path):
    assert main.main(["--settings", str(tmp_path / "s.json")]) == 1
