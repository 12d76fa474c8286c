"""Tests for the game engine: turns, legality, status and reset."""

import pytest

from logic.board import Board, Mark
from logic.game_state import GameEngine, GameStatus, Outcome


def test_fresh_game():
    game = GameEngine.fresh()
    assert game.board == Board.empty()
    assert game.turn == Mark.X
    assert game.current_status() == GameStatus.in_progress()
    assert not game.is_over()
    assert game.cells == (None,) * 9


def test_turn_alternates():
    game = GameEngine.fresh().apply_move(0)
    assert game.turn == Mark.O
    assert game.board.get(0) == Mark.X

    game = game.apply_move(4)
    assert game.turn == Mark.X
    assert game.board.get(4) == Mark.O


def test_move_returns_new_engine():
    fresh = GameEngine.fresh()
    moved = fresh.apply_move(3)

    assert fresh == GameEngine.fresh()
    assert moved != fresh


def test_move_on_occupied_cell_is_ignored():
    game = GameEngine.fresh().apply_move(0).apply_move(4)

    for index in (0, 4):
        again = game.apply_move(index)
        assert again.board == game.board
        assert again.turn == game.turn


def test_move_after_win_is_ignored():
    board = Board.from_string("XXXOO....")
    game = GameEngine(board, Mark.O)
    assert game.current_status() == GameStatus.won(Mark.X)

    after = game.apply_move(8)
    assert after.board == board
    assert after.turn == Mark.O


@pytest.mark.parametrize("index", [-1, 9])
def test_out_of_range_move_raises(index):
    with pytest.raises(IndexError):
        GameEngine.fresh().apply_move(index)


def test_draw_status():
    game = GameEngine(Board.from_string("XOXXXOOXO"), Mark.O)
    status = game.current_status()

    assert status.outcome == Outcome.DRAW
    assert status.winner is None
    assert status.is_over
    assert status.describe() == "It's a draw!"


def test_won_status():
    game = GameEngine(Board.from_string("XXXOO...."), Mark.O)
    status = game.current_status()

    assert status.outcome == Outcome.WON
    assert status.winner == Mark.X
    assert status.describe() == "X wins!"


def test_status_is_derived_from_board():
    game = GameEngine.fresh()
    for index in (0, 3, 1, 4):
        game = game.apply_move(index)
        assert game.current_status() == GameStatus.in_progress()

    game = game.apply_move(2)
    assert game.current_status() == GameStatus.won(Mark.X)


def test_reset_returns_fresh_game():
    game = GameEngine.fresh()
    for index in (0, 3, 1, 4, 2):
        game = game.apply_move(index)
    assert game.is_over()

    assert game.reset() == GameEngine.fresh()
    assert GameEngine.fresh().apply_move(5).reset() == GameEngine.fresh()


def test_apply_best_move_plays_for_the_ai():
    game = GameEngine.fresh().apply_move(0)
    after = game.apply_best_move(Mark.O)

    assert after.turn == Mark.X
    assert len(after.board.empty_indices()) == 7
    # Against a corner opening the only safe reply is the center
    assert after.board.get(4) == Mark.O


def test_best_move_on_finished_game_raises():
    game = GameEngine(Board.from_string("XXXOO...."), Mark.O)
    with pytest.raises(ValueError):
        game.best_move_for(Mark.O)

    full = GameEngine(Board.from_string("XOXXXOOXO"), Mark.O)
    with pytest.raises(ValueError):
        full.best_move_for(Mark.O)
