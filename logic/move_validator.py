"""
Move validator for console Tic Tac Toe.
Validates that moves follow the rules and tags the ones that don't.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional

from .board import Board, Cell
from .config import GameConfig


class MoveError(Enum):
    """Why a move was rejected."""
    INVALID_COORDINATE = "invalid_coordinate"
    CELL_OCCUPIED = "cell_occupied"
    MOVE_AFTER_GAME_OVER = "move_after_game_over"


@dataclass(frozen=True)
class MoveResult:
    """
    Result of a move attempt.

    Truthy when the move was accepted, so callers can treat it as a bool
    and look at `error` only when they need to know what went wrong.
    """
    accepted: bool
    error: Optional[MoveError] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def ok(cls) -> "MoveResult":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, error: MoveError, message: str) -> "MoveResult":
        return cls(accepted=False, error=error, message=message)


def is_coordinate(value, size: int = GameConfig.BOARD_SIZE) -> bool:
    """True if value is an integer index on the board (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        return False
    return 0 <= value < size


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Game must not be over
    2. Row and column must be integers in 0-2
    3. Can only place on empty cells
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check_preconditions(self, row, col, is_over: bool = False) -> MoveResult:
        """
        Check everything that can be decided without touching the board.

        Args:
            row: Row to place the mark.
            col: Column to place the mark.
            is_over: Whether the match has already ended.

        Returns:
            MoveResult, accepted or tagged with the first rule broken.
        """
        if is_over:
            return MoveResult.rejected(
                MoveError.MOVE_AFTER_GAME_OVER,
                "Game is already over!"
            )

        size = self.config.BOARD_SIZE
        if not (is_coordinate(row, size) and is_coordinate(col, size)):
            return MoveResult.rejected(
                MoveError.INVALID_COORDINATE,
                f"Invalid position ({row!r}, {col!r}). Must be 0-{size - 1}."
            )

        return MoveResult.ok()

    def validate_move(
        self,
        board: Board,
        row,
        col,
        is_over: bool = False
    ) -> MoveResult:
        """
        Validate a move without making it.

        Args:
            board: The board the move would be placed on.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).
            is_over: Whether the match has already ended.

        Returns:
            MoveResult, accepted or tagged with the first rule broken.
        """
        result = self.check_preconditions(row, col, is_over)
        if not result:
            return result

        if board.get(row, col) != Cell.EMPTY:
            return self.occupied(board, row, col)

        return MoveResult.ok()

    def occupied(self, board: Board, row: int, col: int) -> MoveResult:
        """Rejection for a cell that already holds a mark."""
        return MoveResult.rejected(
            MoveError.CELL_OCCUPIED,
            f"Cell ({row}, {col}) is already occupied by {board.get(row, col).symbol}"
        )
