"""
Match controller for console Tic Tac Toe.
Tracks whose turn it is, the move history, and how the match ended.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell
from .config import GameConfig
from .move_validator import MoveResult, MoveValidator
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)


class MatchStatus(Enum):
    """Where the match is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Move:
    """
    An accepted move.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Position in the match, starting at 1


class MatchController:
    """
    One match of Tic Tac Toe played on its own board.

    This is the only object allowed to change the current player, the
    game-over flag and the winner. Every failed move leaves the match
    exactly as it was.

    Game flow:
    1. The current player attempts a move
    2. The board takes the mark if the cell is free
    3. The lines are checked for a winner, then the board for a draw
    4. If the match goes on, the turn passes to the other player
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Create a match in its initial state.

        Args:
            config: Game settings (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self._board = Board()
        self._validator = MoveValidator(self.config)
        self._win_checker = WinChecker()

        self._current_player = self.config.FIRST_PLAYER
        self._is_over = False
        self._winner: Optional[Cell] = None
        self._winning_line: Optional[Line] = None
        self._moves: List[Move] = []

    # ==================== ACCESSORS ====================

    @property
    def current_player(self) -> Cell:
        return self._current_player

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Optional[Cell]:
        """The winning mark, or None while in progress or after a draw."""
        return self._winner

    @property
    def status(self) -> MatchStatus:
        if not self._is_over:
            return MatchStatus.IN_PROGRESS
        return MatchStatus.WON if self._winner is not None else MatchStatus.DRAWN

    @property
    def winning_line(self) -> Optional[Line]:
        return self._winning_line

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    def cell(self, row: int, col: int) -> Cell:
        """Look up one cell of the board."""
        return self._board.get(row, col)

    def render(self) -> List[Tuple[Cell, ...]]:
        """Rows of the board for display."""
        return self._board.render()

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Cells the current player may take; empty once the match is over."""
        if self._is_over:
            return []
        return self._board.empty_cells()

    # ==================== MOVES ====================

    def attempt_move(self, row, col) -> MoveResult:
        """
        Place the current player's mark at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            A truthy MoveResult for every accepted move, including the one
            that ends the match. Rejections carry a MoveError tag and leave
            the match untouched.
        """
        result = self._validator.check_preconditions(row, col, self._is_over)
        if not result:
            logger.debug("Rejected move (%r, %r): %s", row, col, result.error.value)
            return result

        player = self._current_player
        if not self._board.place_mark(player, row, col):
            result = self._validator.occupied(self._board, row, col)
            logger.debug("Rejected move (%r, %r): %s", row, col, result.error.value)
            return result

        self._moves.append(Move(player, row, col, len(self._moves) + 1))
        logger.debug("Move %d: %s at (%d, %d)", len(self._moves), player.name, row, col)

        self._update_status(player)
        return result

    def _update_status(self, player: Cell):
        line = self._win_checker.get_winning_line(self._board)
        if line is not None:
            self._is_over = True
            self._winner = player
            self._winning_line = line
            logger.info("%s wins on %s", player.name, line)
        elif self._board.is_full():
            self._is_over = True
            self._winner = None
            logger.info("Match drawn after %d moves", len(self._moves))
        else:
            self._current_player = player.opposite()

    def reset(self):
        """
        Start a new match on the same board.
        Safe to call at any time, including mid-match.
        """
        self._board.reset()
        self._current_player = self.config.FIRST_PLAYER
        self._is_over = False
        self._winner = None
        self._winning_line = None
        self._moves.clear()
        logger.debug("Match reset")
