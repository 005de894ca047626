"""
Console configuration for TicTacToe.
Prompt and message text shown to the players.
"""


class ConsoleConfig:
    """
    Configuration class for console input and output.
    """

    # ==================== INPUT SETTINGS ====================
    # Shown before every read, e.g. "X > "
    PROMPT_FORMAT = "{player} > "

    # Coordinates are typed as "x, y"
    COORD_SEPARATOR = ","
    COORD_COUNT = 2

    # Largest number accepted, an unsigned 64-bit value
    MAX_NUMBER = 2 ** 64 - 1

    # ==================== OUTPUT SETTINGS ====================
    WIN_MESSAGE = "{player} wins!"
    DRAW_MESSAGE = "Draw!"
    INTERRUPTED_MESSAGE = "Game interrupted by user."
    GOODBYE_MESSAGE = "Goodbye!"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_PREFIX = "[debug]"
