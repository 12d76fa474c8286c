"""
Win checker for TicTacToe.
Scans the 8 winning lines of a 3x3 board.
"""

from typing import Optional, Sequence, Tuple, TypeVar


T = TypeVar("T")


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as index triples, row-major 0-8)
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, cells: Sequence[Optional[T]]) -> Optional[T]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board slots, None for empty.

        Returns:
            The mark filling the first complete line, or None if no winner yet.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def get_winning_line(self, cells: Sequence[Optional[T]]) -> Optional[Tuple[int, int, int]]:
        """
        Get the first complete line, in declaration order.

        Args:
            cells: The 9 board slots, None for empty.

        Returns:
            The winning line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._is_complete(cells, line):
                return line
        return None

    def _is_complete(self, cells: Sequence[Optional[T]], line: Tuple[int, int, int]) -> bool:
        first, second, third = line
        mark = cells[first]

        # Empty cell, no winner on this line
        if mark is None:
            return False

        return mark == cells[second] and mark == cells[third]


WIN_LINES = WinChecker.WINNING_LINES
