"""
Board for console Tic Tac Toe.
Holds the 3x3 grid of cells and answers structural queries.
"""

import logging
from enum import IntEnum
from typing import List, Tuple

import numpy as np

logger = logging.getLogger(__name__)

BOARD_SIZE = 3


class Cell(IntEnum):
    """The value of a single cell on the board."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        """Character used to display this cell."""
        return " " if self == Cell.EMPTY else self.name

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell.O if self == Cell.X else Cell.X


class Board:
    """
    The 3x3 grid, row-major and 0-indexed.

    The board knows nothing about turns or rules. Indices are trusted:
    bounds checking belongs to whoever drives the board.
    """

    def __init__(self):
        self._grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    def place_mark(self, mark: Cell, row: int, col: int) -> bool:
        """
        Place a mark on an empty cell.

        Args:
            mark: Cell.X or Cell.O.
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the mark was placed, False if the cell is occupied.
        """
        if mark == Cell.EMPTY:
            raise ValueError("Cannot place an EMPTY mark")

        if self._grid[row, col] != Cell.EMPTY:
            return False

        self._grid[row, col] = mark
        return True

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return Cell(int(self._grid[row, col]))

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        return self.get(row, col)

    def is_full(self) -> bool:
        """True if every cell holds a mark."""
        return bool(np.all(self._grid != Cell.EMPTY))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        rows, cols = np.nonzero(self._grid == Cell.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_marks(self) -> int:
        """Number of cells holding a mark."""
        return int(np.count_nonzero(self._grid))

    def reset(self):
        """Clear every cell, keeping the same storage."""
        self._grid.fill(Cell.EMPTY)
        logger.debug("Board cleared")

    def render(self) -> List[Tuple[Cell, ...]]:
        """
        Project the grid for display.

        Returns:
            One tuple of cells per row, top to bottom.
        """
        return [tuple(Cell(int(v)) for v in row) for row in self._grid]
