"""
Console module for TicTacToe.
Handles prompting players and reading their moves.
"""

from .config import ConsoleConfig
from .input_reader import prompt, parse_list, read_coords
