"""
Players and tiles for TicTacToe.
A Tile is what sits in one cell; a Player is who is moving.
"""

from enum import Enum, IntEnum
from typing import Optional


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opponent(self) -> "Player":
        """Get the other player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


class Tile(IntEnum):
    """
    Occupancy of one cell.

    Integer codes so a whole board fits in a numpy int8 array.
    """
    EMPTY = 0
    X = 1
    O = 2

    @classmethod
    def from_player(cls, player: Player) -> "Tile":
        """Get the mark a player leaves on the board."""
        return cls.X if player == Player.X else cls.O

    def to_player(self) -> Optional[Player]:
        """
        Get the player who owns this tile.

        Returns:
            Player.X or Player.O, or None for an empty tile.
        """
        if self == Tile.X:
            return Player.X
        if self == Tile.O:
            return Player.O
        return None

    def __str__(self) -> str:
        return " " if self == Tile.EMPTY else self.name

    # IntEnum formats as its integer otherwise
    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
