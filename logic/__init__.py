"""
Logic module for console TicTacToe.
Handles board state, move rules, and win detection.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, MoveError, OutOfBounds, CellOccupied, InputParseError
from .players import Player, Tile
from .game_state import BoardState, Move, BOARD_SIZE
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, all_eq
