"""Tests for the console front end."""

import pytest

from logic.board import Board, Mark
from logic.config import GameConfig
from logic.game_state import GameEngine, Outcome
from main import ConsoleGame, main


@pytest.fixture
def game():
    return ConsoleGame(human_mark=Mark.X, think_delay=0)


def test_human_move_gets_an_ai_reply(game):
    game.handle_command("1")

    assert game.engine.board.get(0) == Mark.X
    assert game.engine.board.get(4) == Mark.O
    assert game.engine.turn == Mark.X


def test_illegal_move_reports_reason(game, capsys):
    game.handle_command("5")
    capsys.readouterr()

    game.handle_command("5")
    out = capsys.readouterr().out
    assert "already taken" in out
    assert len(game.engine.board.empty_indices()) == 7


@pytest.mark.parametrize("command", ["0", "10"])
def test_out_of_range_cell_is_rejected(game, capsys, command):
    game.handle_command(command)
    assert "1 to 9" in capsys.readouterr().out
    assert game.engine == GameEngine.fresh()


def test_unknown_command(game, capsys):
    game.handle_command("hello")
    assert "Unknown command" in capsys.readouterr().out


def test_rules_and_scores(game, capsys):
    game.handle_command("?")
    assert "3x3 grid" in capsys.readouterr().out

    game.handle_command("s")
    assert "Player (X): 0" in capsys.readouterr().out


def test_quit_stops_loop(game):
    game.is_running = True
    game.handle_command("q")
    assert not game.is_running


def test_finished_round_is_tallied(game, capsys):
    # The AI (O) completes the middle row after the human's move
    game.engine = GameEngine(Board.from_string("XX.OO...."), Mark.X)

    game.handle_command("9")
    out = capsys.readouterr().out

    assert game.engine.current_status().outcome == Outcome.WON
    assert game.engine.current_status().winner == Mark.O
    assert game.scoreboard.ai_wins == 1
    assert "AI wins" in out


def test_reset_keeps_score(game):
    game.scoreboard.ties = 2
    game.handle_command("1")
    game.handle_command("r")

    assert game.engine == GameEngine.fresh()
    assert game.scoreboard.ties == 2


def test_ai_first_moves_on_reset():
    game = ConsoleGame(human_mark=Mark.O, think_delay=0)
    game.handle_command("r")

    assert game.engine.board.get(0) == Mark.X
    assert game.engine.turn == Mark.O


def test_full_console_session(monkeypatch, capsys):
    commands = iter(["5", "1", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

    assert main(["--no-ui", "--delay", "0"]) == 0

    out = capsys.readouterr().out
    assert "AI plays O" in out
    assert "Final score" in out
    assert "Goodbye!" in out


def test_session_ends_on_eof(monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main(["--no-ui", "--delay", "0", "--ai-first"]) == 0
    assert "AI plays X at 1" in capsys.readouterr().out


def test_negative_delay_is_rejected():
    with pytest.raises(SystemExit):
        main(["--no-ui", "--delay", "-1"])


def test_board_lists_open_squares(game, capsys):
    game.handle_command("5")
    out = capsys.readouterr().out

    # X took 5 and the AI answered in the corner at 1
    assert "Open squares: 2 3 4 6 7 8 9" in out


def test_ai_first_swaps_the_configured_mark(monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    monkeypatch.setattr(GameConfig, "HUMAN_MARK", Mark.O)

    assert main(["--no-ui", "--delay", "0", "--ai-first"]) == 0
    out = capsys.readouterr().out
    assert "Human plays: X" in out
    assert "AI plays: O" in out
