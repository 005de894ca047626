"""
Game configuration for console TicTacToe.
Board dimensions and engine switches.
"""


class GameConfig:
    """
    Configuration class for the board engine.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid. Fixed for the whole program, not a CLI option.
    BOARD_SIZE = 3

    # Total number of tiles on the board
    TILE_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 tiles

    # ==================== TURN SETTINGS ====================
    # X always opens the game
    FIRST_PLAYER = "X"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
