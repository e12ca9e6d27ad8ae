"""
Win checker for console Tic Tac Toe.
Checks if a player has won or if the game is a draw.
"""

from typing import List, Optional, Tuple

from .board import Board, Cell

Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as (row, col) triples)
    WINNING_LINES: List[Line] = [
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Diagonals
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    ]

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        row, col = line[0]
        return board.get(row, col)

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first completed line, if there is one.

        Args:
            board: The board to inspect.

        Returns:
            The winning line as three (row, col) positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._line_owner(board, line) is not None:
                return line
        return None

    def _line_owner(self, board: Board, line: Line) -> Optional[Cell]:
        first, second, third = (board.get(row, col) for row, col in line)
        if first != Cell.EMPTY and first == second == third:
            return first
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no completed line."""
        return board.is_full() and self.check_winner(board) is None
