"""
Board state for TicTacToe.
Tracks the grid, whose turn it is, and the moves played so far.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .players import Player, Tile
from .move_validator import MoveValidator
from .win_checker import WinChecker


BOARD_SIZE = GameConfig.BOARD_SIZE


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    x: int                  # Column (0-2)
    y: int                  # Row (0-2)
    move_number: int        # Which move this is, counting both players from 0


def _empty_tiles() -> np.ndarray:
    return np.full(BOARD_SIZE * BOARD_SIZE, Tile.EMPTY, dtype=np.int8)


@dataclass(eq=False)
class BoardState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board, stored flat and row-major from the upper left
    - The player whose turn is next
    - Move history for this game (never persisted)

    play() is the only way to change a board. A finished board is thrown
    away; a new game starts from a new BoardState.
    """

    # Flat tile codes, index x + y * BOARD_SIZE
    tiles: np.ndarray = field(default_factory=_empty_tiles)

    # Player to move
    next_player: Player = Player(GameConfig.FIRST_PLAYER)

    # Move history
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self):
        if self.tiles.shape != (BOARD_SIZE * BOARD_SIZE,):
            raise ValueError(
                f"Board needs exactly {BOARD_SIZE * BOARD_SIZE} tiles, got {self.tiles.size}"
            )
        unknown = np.setdiff1d(self.tiles, [int(tile) for tile in Tile])
        if unknown.size:
            raise ValueError(f"Unknown tile codes: {unknown.tolist()}")
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @classmethod
    def from_tiles(cls, tiles: List[Tile], next_player: Player = Player.X) -> "BoardState":
        """
        Build a board from row-major tiles, mostly for setting up positions.

        Args:
            tiles: BOARD_SIZE * BOARD_SIZE tiles.
            next_player: Who moves next.
        """
        return cls(tiles=np.array(tiles, dtype=np.int8), next_player=next_player)

    # ==================== COORDINATE ACCESS ====================

    def get(self, coords: Tuple[int, int]) -> Tile:
        """Get the tile at (x, y)."""
        x, y = coords
        return Tile(int(self.tiles[x + y * BOARD_SIZE]))

    def _set(self, coords: Tuple[int, int], tile: Tile):
        x, y = coords
        self.tiles[x + y * BOARD_SIZE] = tile

    def __getitem__(self, coords: Tuple[int, int]) -> Tile:
        return self.get(coords)

    @property
    def grid(self) -> np.ndarray:
        """Read-only square view of the tiles, indexed [y, x]."""
        view = self.tiles.reshape(BOARD_SIZE, BOARD_SIZE)
        view.flags.writeable = False
        return view

    # ==================== MOVES ====================

    def play(self, x: int, y: int) -> "BoardState":
        """
        Place the current player's mark at column x, row y.

        Args:
            x: Column index (0-2).
            y: Row index (0-2).

        Returns:
            This board, so calls can be chained.

        Raises:
            OutOfBounds: x or y is not on the board.
            CellOccupied: The tile already holds a mark.
        """
        result = self.validator.validate_move(self.grid, x, y)
        if not result.is_valid:
            raise result.error

        self._set((x, y), Tile.from_player(self.next_player))
        self.moves.append(Move(
            player=self.next_player,
            x=x,
            y=y,
            move_number=len(self.moves)
        ))
        self.next_player = self.next_player.opponent()
        return self

    def next(self) -> Player:
        """Get the player whose turn it is."""
        return self.next_player

    # ==================== OUTCOME ====================

    def won(self) -> Optional[Player]:
        """
        Get the winner, if any.

        Rows are checked top to bottom, then columns left to right, then
        the primary diagonal and finally the anti-diagonal. The first
        complete line decides.
        """
        return self.win_checker.check_winner(self.grid)

    def drawn(self) -> bool:
        """
        True if every tile is taken.

        A full board that also has a winning line counts as drawn here,
        so check won() before drawn().
        """
        return self.win_checker.check_draw(self.grid)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Get the (x, y) coordinates of the winning line, or None."""
        return self.win_checker.get_winning_line(self.grid)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (x, y) tuples, row by row.
        """
        return self.validator.get_valid_moves(self.grid)

    # ==================== DISPLAY ====================

    def __str__(self) -> str:
        separator = "+".join("-" * BOARD_SIZE)
        rows = []
        for y in range(BOARD_SIZE):
            rows.append("|".join(str(self.get((x, y))) for x in range(BOARD_SIZE)))
        return f"\n{separator}\n".join(rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            np.array_equal(self.tiles, other.tiles)
            and self.next_player == other.next_player
        )


# Quick test
if __name__ == "__main__":
    print("Testing BoardState...")

    board = BoardState()

    # Simulate a game
    moves = [
        (1, 1),  # X center
        (0, 0),  # O top-left
        (2, 0),  # X top-right
        (0, 2),  # O bottom-left
        (0, 1),  # X middle-left
        (2, 1),  # O middle-right
        (1, 0),  # X top-middle
        (1, 2),  # O bottom-middle
        (2, 2),  # X bottom-right
    ]

    for x, y in moves:
        print(f"\n{board.next()} moves to ({x}, {y})")
        board.play(x, y)
        print(board)

    print(f"\nWinner: {board.won()}  Drawn: {board.drawn()}")
    print("\nBoardState test done!")
