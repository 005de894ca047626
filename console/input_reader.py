"""
Console input for TicTacToe.
Prompts a player and turns a typed line like "1, 2" into coordinates.
"""

import re
from typing import Callable, List, Optional, Tuple

from logic.errors import InputParseError
from logic.players import Player
from .config import ConsoleConfig


NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


def prompt(text: str, input_func: Callable[[str], str] = input) -> str:
    """
    Show a prompt and read one line.

    Args:
        text: Prompt written before reading, without a newline.
        input_func: Line reader, input() by default.

    Returns:
        The line the user typed.

    Raises:
        EOFError: Input was closed.
    """
    return input_func(text)


def parse_list(text: str, separator: str = ConsoleConfig.COORD_SEPARATOR) -> List[int]:
    """
    Parse a separated list of non-negative integers.

    Args:
        text: Raw line, e.g. " 1, 2 ".
        separator: Item separator.

    Returns:
        The parsed numbers in order.

    Raises:
        InputParseError: An item is blank, not a non-negative integer, or
            larger than ConsoleConfig.MAX_NUMBER.
    """
    max_digits = len(str(ConsoleConfig.MAX_NUMBER))

    numbers = []
    for item in text.split(separator):
        item = item.strip()
        if not item:
            raise InputParseError("cannot parse integer from empty string")
        # ASCII digits with an optional leading "+"; a "-" never matches
        if not NUMBER_PATTERN.fullmatch(item):
            raise InputParseError(f"invalid number: {item!r}")
        # Length first, so huge inputs never reach int()
        digits = item.lstrip("+").lstrip("0")
        if len(digits) > max_digits or int(digits or "0") > ConsoleConfig.MAX_NUMBER:
            raise InputParseError("number too large to fit in target type")
        numbers.append(int(digits or "0"))
    return numbers


def read_coords(
    player: Player,
    input_func: Callable[[str], str] = input,
    config: Optional[ConsoleConfig] = None
) -> Tuple[int, int]:
    """
    Ask a player for the coordinates of their move.

    Args:
        player: Whose turn it is, shown in the prompt.
        input_func: Line reader, input() by default.
        config: Console configuration. Uses defaults if not provided.

    Returns:
        (x, y) as typed.

    Raises:
        InputParseError: The line is not exactly two numbers.
        EOFError: Input was closed.
    """
    config = config or ConsoleConfig()

    line = prompt(config.PROMPT_FORMAT.format(player=player), input_func)
    numbers = parse_list(line, config.COORD_SEPARATOR)

    if len(numbers) != config.COORD_COUNT:
        raise InputParseError(
            f"expected exactly {config.COORD_COUNT} input numbers, got {len(numbers)}"
        )

    x, y = numbers
    return x, y
