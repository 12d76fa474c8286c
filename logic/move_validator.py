"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from .game_state import GameEngine


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The index must be on the board (0-8), otherwise IndexError
    2. Game must not be over
    3. Can only place on empty cells
    """

    def validate_move(self, engine: "GameEngine", index: int) -> ValidationResult:
        """
        Validate a move for the player whose turn it is.

        Args:
            engine: Current game.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Raises IndexError for anything off the board
        occupant = engine.board.get(index)

        # Check if game is over
        if engine.is_over():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + 1} is already taken by {occupant}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, engine: "GameEngine") -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Cell indices in ascending order, empty once the game is over.
        """
        if engine.is_over():
            return []

        return engine.board.empty_indices()
