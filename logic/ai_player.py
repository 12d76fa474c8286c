"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.

The search always plays optimally: it wins if possible, blocks the
opponent if needed, and never loses (at worst, draw).
"""

import logging
from functools import lru_cache
from typing import List, Optional, Tuple, TYPE_CHECKING

from .board import Board, Mark

if TYPE_CHECKING:
    from .game_state import GameEngine


logger = logging.getLogger(__name__)

# Base score of a decided game, before the depth bonus
WIN_SCORE = 10


@lru_cache(maxsize=None)
def minimax(board: Board, depth: int, is_maximizing: bool, mark: Mark) -> int:
    """
    Full-depth minimax (no pruning).

    Results are memoised in a module-level lru_cache that lives for the
    whole process. Boards are immutable and the score depends only on the
    arguments, so the cache never changes a result, only how fast it comes
    back. `minimax.cache_clear()` empties it.

    Args:
        board: Position to evaluate.
        depth: Remaining depth budget (empty cells left at this point).
        is_maximizing: True if `mark` is the one to move.
        mark: The mark the search plays for.

    Returns:
        The score of the position from `mark`'s point of view.
    """
    # Check terminal states
    winner = board.winner()

    if winner == mark:
        return WIN_SCORE + depth  # Win (prefer faster wins)
    elif winner == mark.opposite():
        return -WIN_SCORE - depth  # Loss (prefer slower losses)

    if depth == 0 or board.is_full():
        return 0  # Draw

    to_move = mark if is_maximizing else mark.opposite()
    scores = [
        minimax(board.place(index, to_move), depth - 1, not is_maximizing, mark)
        for index in board.empty_indices()
    ]

    if is_maximizing:
        return max(scores)
    return min(scores)


def score_moves(board: Board, mark: Mark) -> List[Tuple[int, int]]:
    """
    Score every legal move for `mark`.

    Args:
        board: Current position, with at least one empty cell and no winner.
        mark: The mark about to move.

    Returns:
        (index, score) pairs in ascending index order.
    """
    if board.winner() is not None or board.is_full():
        raise ValueError(f"No move to search for {mark}: the game is already over")

    scored = []
    for index in board.empty_indices():
        child = board.place(index, mark)

        # The opponent moves next, with one budget step per empty cell
        score = minimax(child, len(child.empty_indices()), False, mark)
        scored.append((index, score))

    return scored


def best_move(board: Board, mark: Mark) -> int:
    """
    Get the best move for the current position.

    Ties go to the lowest index.

    Args:
        board: Current position.
        mark: The mark about to move.

    Returns:
        Index of the best move.
    """
    scored = score_moves(board, mark)

    best_score = float('-inf')
    best_index = scored[0][0]

    for index, score in scored:
        if score > best_score:
            best_score = score
            best_index = index

    logger.debug(
        "%s scored %d moves on %s: %s -> best %d (score %d)",
        mark, len(scored), board, scored, best_index, best_score
    )

    return best_index


class AIPlayer:
    """
    An AI that plays one mark using the Minimax algorithm.

    Holds no game state: every call works from the engine it is given.
    """

    def __init__(self, player: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
        """
        self.player = player

    def get_best_move(self, engine: "GameEngine") -> Optional[int]:
        """
        Get the best move for the current game.

        Args:
            engine: Current game.

        Returns:
            Cell index of the best move, or None if the game is over or
            it is not the AI's turn.
        """
        if engine.is_over():
            return None

        # Check if it's our turn
        if engine.turn != self.player:
            logger.debug("Not %s's turn, no move suggested", self.player)
            return None

        return engine.best_move_for(self.player)

    def play(self, engine: "GameEngine") -> "GameEngine":
        """Play the best move, or return the game unchanged if there is none."""
        move = self.get_best_move(engine)
        if move is None:
            return engine
        return engine.apply_move(move)

    def get_move_suggestion(self, engine: "GameEngine") -> str:
        """Get a human-readable move suggestion."""
        move = self.get_best_move(engine)

        if move is None:
            return "No moves available!"

        return f"Place {self.player} on square {move + 1}"


# Quick test
if __name__ == "__main__":
    print("Testing minimax search...")

    # O should take the win at 2
    board = Board.from_string("OO.XX....")
    print(board.render())
    move = best_move(board, Mark.O)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    # O should block X at 2
    board = Board.from_string("XX..O....")
    print(board.render())
    move = best_move(board, Mark.O)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    print("\nSearch test done!")
