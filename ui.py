"""
Console Tic Tac Toe UI
Text presentation for the console driver.

Shows:
- The board with row and column indices
- Move prompts
- Rejection and result messages
"""

from typing import Optional, Sequence

from logic.board import Cell
from logic.move_validator import MoveError


# ==================== MESSAGES ====================
WELCOME = "--- Welcome to Console Tic Tac Toe! ---"
DEMO_BANNER = "\n--- Running a Non-Interactive Demo ---"
NEW_GAME = "\n--- New Game Started! ---"
INVALID_INPUT = "Invalid input. Please use the format 'row,col' (e.g., '1,2')."
SPOT_TAKEN = "That spot is already taken! Try another one."
GAME_ALREADY_OVER = "The game is already over."
PLAY_AGAIN = "Play again? (yes/no): "
GOODBYE = "Thanks for playing!"

REJECTION_MESSAGES = {
    MoveError.INVALID_COORDINATE: INVALID_INPUT,
    MoveError.CELL_OCCUPIED: SPOT_TAKEN,
    MoveError.MOVE_AFTER_GAME_OVER: GAME_ALREADY_OVER,
}


def format_board(rows: Sequence[Sequence[Cell]]) -> str:
    """
    Draw the board as text.

    Args:
        rows: Rows of cells, as returned by MatchController.render().

    Returns:
        Multi-line string with column headers and row labels.
    """
    lines = ["", "    0   1   2", "  ┌───┬───┬───┐"]

    for index, row in enumerate(rows):
        cells = " │ ".join(cell.symbol for cell in row)
        lines.append(f"{index} │ {cells} │")
        if index < len(rows) - 1:
            lines.append("  ├───┼───┼───┤")

    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


def move_prompt(player: Cell) -> str:
    return f"Player '{player.symbol}', enter your move (row,col): "


def demo_move(player: Cell, row: int, col: int) -> str:
    return f"\nPlayer '{player.symbol}' moves to {row},{col}"


def rejection_message(error: MoveError) -> str:
    """User-facing text for a rejected move."""
    return REJECTION_MESSAGES[error]


def result_message(winner: Optional[Cell]) -> str:
    """User-facing text for a finished match."""
    if winner is None:
        return "\nIt's a draw! Good game."
    return f"\nCongratulations! Player '{winner.symbol}' wins!"
