"""
Tests for hex_mcts.cli
"""

import pytest

from hex_mcts.cli import main, parse_args
from hex_mcts.core.types import PlayerColor


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert (args.width, args.height) == (11, 11)
        assert args.black == "human"
        assert args.white == "mcts"
        assert args.iterations == 100
        assert args.seed is None
        assert not args.swap_rule
        assert not args.reverse
        assert not args.dark
        assert (args.exploration, args.rollouts, args.win_reward) == (1.0, 3, 10)
        assert args.playouts == 1000

    def test_overrides(self):
        args = parse_args([
            "-W", "5", "-H", "6", "-b", "random", "-w", "most-winning-cell",
            "--seed", "3", "--swap-rule", "--reverse", "--dark", "-v",
            "-c", "0.5", "--rollouts", "2", "--win-reward", "4",
        ])
        assert (args.width, args.height) == (5, 6)
        assert (args.black, args.white) == ("random", "most-winning-cell")
        assert args.seed == 3
        assert args.swap_rule and args.reverse and args.dark and args.verbose
        assert (args.exploration, args.rollouts, args.win_reward) == (0.5, 2, 4)

    def test_unknown_agent(self):
        with pytest.raises(SystemExit):
            parse_args(["--black", "alphazero"])


class TestMain:

    def test_self_play(self, capsys):
        main(["-W", "4", "-H", "4", "-b", "random", "-w", "mcts", "-i", "10", "-s", "1"])
        out = capsys.readouterr().out
        assert "GAME OVER" in out
        assert "Winner:" in out

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            main(["-W", "0", "-b", "random", "-w", "random"])

    def test_dark_self_play(self, capsys):
        main(["-W", "3", "-H", "3", "-b", "random", "-w", "random", "-s", "2", "--dark"])
        out = capsys.readouterr().out
        assert "Starting dark_hex on a 3x3 board" in out
        assert "GAME OVER" in out

    def test_reverse_rejects_search_agent(self):
        with pytest.raises(ValueError, match="cannot play Reverse Hex"):
            main(["-W", "3", "-H", "3", "-b", "random", "--reverse"])

    def test_search_settings_reach_agent(self, monkeypatch):
        captured = {}

        def fake_play_game(game, agents):
            captured.update(agents)

        monkeypatch.setattr("hex_mcts.cli.play_game", fake_play_game)
        main(["-b", "random", "-w", "mcts", "-c", "0.25", "--rollouts", "5", "--win-reward", "7"])
        white = captured[PlayerColor.WHITE]
        assert (white.exploration, white.rollouts_per_child, white.win_reward) == (0.25, 5, 7)
