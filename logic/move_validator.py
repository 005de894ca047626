"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

import numpy as np

from .errors import MoveError, OutOfBounds, CellOccupied
from .players import Tile


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        """Human readable reason the move was refused."""
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Both coordinates must be on the board (0 <= x, y < size)
    2. Can only place on empty cells
    """

    def validate_move(
        self,
        grid: np.ndarray,
        x: int,
        y: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            grid: Square board of tile codes, indexed [y, x].
            x: Column to place the mark.
            y: Row to place the mark.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        size = grid.shape[0]

        # Negative values would wrap around in numpy, so reject them too
        if not (0 <= x < size and 0 <= y < size):
            return ValidationResult(is_valid=False, error=OutOfBounds(x, y))

        if grid[y, x] != Tile.EMPTY:
            return ValidationResult(is_valid=False, error=CellOccupied(x, y))

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, grid: np.ndarray) -> List[Tuple[int, int]]:
        """
        Get all empty cells, row by row.

        Args:
            grid: Square board of tile codes, indexed [y, x].

        Returns:
            List of (x, y) positions.
        """
        rows, cols = np.nonzero(grid == Tile.EMPTY)
        return [(int(x), int(y)) for y, x in zip(rows, cols)]
