"""
Win checker for TicTacToe.
Checks if a player has won or if the board is full.
"""

from typing import Optional, List, Tuple, Sequence, Iterator, Any

import numpy as np

from .config import GameConfig
from .players import Player, Tile


def all_eq(sequence: Sequence[Any]) -> Optional[Any]:
    """
    Get the value every element of a sequence shares.

    Args:
        sequence: Values to compare.

    Returns:
        The common value, or None if the sequence is empty or mixed.
    """
    if len(sequence) == 0:
        return None

    first = sequence[0]
    for item in sequence[1:]:
        if item != first:
            return None
    return first


def build_lines(size: int) -> List[List[Tuple[int, int]]]:
    """
    Build every line of a square board as (x, y) coordinates.

    Order: rows top to bottom, columns left to right, the primary
    diagonal, then the anti-diagonal.
    """
    lines = []
    # Rows
    for y in range(size):
        lines.append([(x, y) for x in range(size)])
    # Columns
    for x in range(size):
        lines.append([(x, y) for y in range(size)])
    # Diagonals
    lines.append([(i, i) for i in range(size)])
    lines.append([(size - 1 - i, i) for i in range(size)])
    return lines


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: a full line of the same mark
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (x, y) tuples)
    LINES = build_lines(GameConfig.BOARD_SIZE)

    def iter_lines(self, grid: np.ndarray) -> Iterator[np.ndarray]:
        """
        Yield the tile codes of each line, in the same order as LINES.

        Args:
            grid: Square board of tile codes, indexed [y, x].
        """
        size = grid.shape[0]
        for y in range(size):
            yield grid[y, :]
        for x in range(size):
            yield grid[:, x]
        yield np.diag(grid)
        # Flipping left-right turns the anti-diagonal into the main one,
        # read from the top row down
        yield np.diag(np.fliplr(grid))

    def check_winner(self, grid: np.ndarray) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            grid: Square board of tile codes, indexed [y, x].

        Returns:
            The first winning Player in scan order, or None.
        """
        for values in self.iter_lines(grid):
            winner = self._check_line(values)
            if winner is not None:
                return winner

        return None

    def _check_line(self, values: np.ndarray) -> Optional[Player]:
        common = all_eq(values.tolist())
        if common is None:
            return None
        # An all-empty line maps to no player
        return Tile(common).to_player()

    def check_draw(self, grid: np.ndarray) -> bool:
        """
        Check if every tile is taken.

        This does NOT look for a winner: a full board with a won line is
        also reported here. Call check_winner first.

        Args:
            grid: Square board of tile codes.

        Returns:
            True if no tile is empty.
        """
        return bool(np.all(grid != Tile.EMPTY))

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            grid: Square board of tile codes.

        Returns:
            The winning line as list of (x, y), or None.
        """
        for line, values in zip(build_lines(grid.shape[0]), self.iter_lines(grid)):
            if self._check_line(values) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Column win
    grid = np.array([
        [Tile.X, Tile.X, Tile.EMPTY],
        [Tile.O, Tile.X, Tile.EMPTY],
        [Tile.O, Tile.X, Tile.EMPTY],
    ], dtype=np.int8)

    winner = checker.check_winner(grid)
    print(f"Test 1 (column): winner = {winner}")
    assert winner == Player.X

    # Test 2: No winner
    grid = np.array([
        [Tile.X, Tile.X, Tile.EMPTY],
        [Tile.O, Tile.X, Tile.EMPTY],
        [Tile.EMPTY, Tile.EMPTY, Tile.O],
    ], dtype=np.int8)

    winner = checker.check_winner(grid)
    print(f"Test 2 (no winner): winner = {winner}")
    assert winner is None

    print("\nWinChecker test done!")
