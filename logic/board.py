"""
Board model for TicTacToe.
An immutable 3x3 grid: every change returns a new Board.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .win_checker import WinChecker


BOARD_CELLS = 9

# Stateless, shared by every board
_WIN_CHECKER = WinChecker()


class Mark(Enum):
    """The two marks a player can place. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


Slot = Optional[Mark]

# Characters accepted as an empty slot by Board.from_string
EMPTY_CHARS = (".", "_", " ", "-")


def _empty_cells() -> Tuple[Slot, ...]:
    return (None,) * BOARD_CELLS


@dataclass(frozen=True)
class Board:
    """
    The 9 slots of a TicTacToe board, indexed 0-8 in row-major order.

    Boards are values: they compare and hash by content, and place()
    never mutates the receiver.
    """

    cells: Tuple[Slot, ...] = field(default_factory=_empty_cells)

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        cells = tuple(self.cells)
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with every slot empty."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from 9 characters in row-major order.

        Args:
            text: "X" or "O" for marks, one of ". _ -" or a space for an
                empty slot. Newlines and "|" separators are ignored.

        Returns:
            The parsed Board.
        """
        cells: List[Slot] = []
        for char in text:
            if char in ("\n", "|"):
                continue
            if char in EMPTY_CHARS:
                cells.append(None)
            elif char.upper() in ("X", "O"):
                cells.append(Mark(char.upper()))
            else:
                raise ValueError(f"Unexpected character in board string: {char!r}")
        return cls(tuple(cells))

    def _check_index(self, index: int) -> None:
        # Negative indices are a caller bug, not a wrap-around
        if not 0 <= index < BOARD_CELLS:
            raise IndexError(f"Cell index {index} out of range 0-{BOARD_CELLS - 1}")

    def get(self, index: int) -> Slot:
        """Get the mark at a cell, or None if it is empty."""
        self._check_index(index)
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        """Check if a cell holds no mark."""
        return self.get(index) is None

    def is_full(self) -> bool:
        """Check if every cell is occupied."""
        return all(cell is not None for cell in self.cells)

    def is_board_empty(self) -> bool:
        """Check if no mark has been placed yet."""
        return all(cell is None for cell in self.cells)

    def empty_indices(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def winner(self) -> Optional[Mark]:
        """Get the mark that completed a line, or None."""
        return _WIN_CHECKER.check_winner(self.cells)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the completed line, or None."""
        return _WIN_CHECKER.get_winning_line(self.cells)

    def place(self, index: int, mark: Mark) -> "Board":
        """
        Place a mark on the board.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Returns:
            A new Board with the mark placed, or this board unchanged if
            the cell is already occupied.
        """
        if not self.is_empty(index):
            return self

        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def render(self) -> str:
        """Render the board as a text grid, showing cell numbers 1-9 for empty cells."""
        rows = []
        for row in range(3):
            symbols = []
            for col in range(3):
                index = row * 3 + col
                cell = self.cells[index]
                symbols.append(str(cell) if cell is not None else str(index + 1))
            rows.append(" " + " | ".join(symbols))
        return "\n---+---+---\n".join(rows)

    def __str__(self) -> str:
        return "".join(str(cell) if cell is not None else "." for cell in self.cells)
