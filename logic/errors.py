"""
Errors raised by the TicTacToe engine and console input.
Every one of them is a rejected move, never a crash.
"""


class GameError(Exception):
    """Base class for recoverable game errors."""


class MoveError(GameError):
    """
    A move the board refused.

    Attributes:
        x: Column that was requested.
        y: Row that was requested.
    """

    message = "({x}, {y}) is not a legal move"

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(self.message.format(x=x, y=y))


class OutOfBounds(MoveError):
    """The coordinates are not on the board."""

    message = "({x}, {y}) is out of bounds"


class CellOccupied(MoveError):
    """The target tile already holds a mark."""

    message = "({x}, {y}) has already been played"


class InputParseError(GameError):
    """A line of console input could not be turned into coordinates."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
