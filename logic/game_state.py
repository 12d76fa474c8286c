"""
Game state management for TicTacToe.
Tracks the board and whose turn it is, and hands out new states on every move.
"""

import logging
from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark, Slot
from .move_validator import MoveValidator
from . import ai_player


logger = logging.getLogger(__name__)

_VALIDATOR = MoveValidator()


class Outcome(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    The status of a game.

    `winner` is only set when the outcome is WON.
    """
    outcome: Outcome
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark) -> "GameStatus":
        return cls(Outcome.WON, mark)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def describe(self) -> str:
        """Short status line, e.g. "X wins!"."""
        if self.outcome == Outcome.WON:
            return f"{self.winner} wins!"
        if self.outcome == Outcome.DRAW:
            return "It's a draw!"
        return "Game in progress"


@dataclass(frozen=True)
class GameEngine:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board
    - Whose turn it is

    Status (won, draw, ongoing) is always derived from the board, never
    stored. Every move returns a new GameEngine.
    """

    board: Board = field(default_factory=Board.empty)
    turn: Mark = Mark.X

    @classmethod
    def fresh(cls) -> "GameEngine":
        """A new game: empty board, X to move."""
        return cls()

    @property
    def cells(self) -> Tuple[Slot, ...]:
        """The 9 slots in row-major order, for rendering."""
        return self.board.cells

    def current_status(self) -> GameStatus:
        """Work out the game status from the board."""
        winner = self.board.winner()

        if winner is not None:
            return GameStatus.won(winner)
        if self.board.is_full():
            return GameStatus.draw()
        return GameStatus.in_progress()

    def is_over(self) -> bool:
        return self.current_status().is_over

    def apply_move(self, index: int) -> "GameEngine":
        """
        Make a move at the given cell for the player whose turn it is.

        Args:
            index: Cell index (0-8).

        Returns:
            The game after the move, or this game unchanged if the move
            is illegal (cell taken or game over).
        """
        result = _VALIDATOR.validate_move(self, index)
        if not result.is_valid:
            logger.debug("Ignoring move %d by %s: %s", index, self.turn, result.error_message)
            return self

        return GameEngine(
            board=self.board.place(index, self.turn),
            turn=self.turn.opposite()
        )

    def reset(self) -> "GameEngine":
        """Start over with a fresh game."""
        return GameEngine.fresh()

    def best_move_for(self, mark: Mark) -> int:
        """
        Get the optimal move for `mark` on the current board.

        Raises:
            ValueError: If the game is already over.
        """
        return ai_player.best_move(self.board, mark)

    def apply_best_move(self, mark: Mark) -> "GameEngine":
        """Compute the optimal move for `mark` and play it."""
        return self.apply_move(self.best_move_for(mark))


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    game = GameEngine.fresh()

    # Simulate a game where X plays the center and the AI answers
    for index in (4, 0, 8, 2, 6):
        if game.is_over():
            break
        if not game.board.is_empty(index):
            continue
        print(f"\n{game.turn} moves to {index + 1}")
        game = game.apply_move(index)
        if not game.is_over():
            game = game.apply_best_move(game.turn)
        print(game.board.render())

    print(f"\n{game.current_status().describe()}")
    print("\nGame state test done!")
