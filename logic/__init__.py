"""
Logic module for console Tic Tac Toe.
Handles the board, move rules, win detection, and turn order.
"""

__version__ = "1.0.0"

from .board import Board, Cell
from .config import GameConfig
from .move_validator import MoveError, MoveResult, MoveValidator
from .win_checker import WinChecker
from .match_controller import MatchController, MatchStatus, Move
