"""
Game configuration for console Tic Tac Toe.
All the settings for the board, turn order, and the scripted demo.
"""

from .board import Cell


class GameConfig:
    """
    Configuration class for game settings.
    The board size is fixed; the rest can be changed per front end.
    """

    # ==================== BOARD SETTINGS ====================
    # Tic Tac Toe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== TURN SETTINGS ====================
    # X always opens a new match
    FIRST_PLAYER = Cell.X

    # ==================== DEMO SETTINGS ====================
    # Moves played when no interactive console is attached.
    # X completes the top row on the fifth move.
    DEMO_MOVES = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]
