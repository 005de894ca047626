"""
Main game loop for console TicTacToe.

This script ties together:
- Console input (prompting, parsing coordinates)
- Logic (board state, move validation, win detection)

Run this script to play TicTacToe with a friend on one terminal!
"""

import sys
from typing import Callable, Optional

# Console imports
from console.config import ConsoleConfig
from console.input_reader import read_coords

# Logic imports
from logic.config import GameConfig
from logic.errors import GameError
from logic.game_state import BoardState
from logic.players import Player


class TicTacToeConsole:
    """
    Main controller for a two-player console game.

    Game flow:
    1. Show the board
    2. Ask the player to move for coordinates
    3. Apply the move (bad input or an illegal move re-asks the same player)
    4. Show the board and check for a win, then for a draw
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        debug: bool = GameConfig.DEBUG_MODE,
        config: Optional[ConsoleConfig] = None
    ):
        """
        Initialize the game.

        Args:
            input_func: Reads one line after showing a prompt. Defaults to input().
            output_func: Writes one message. Defaults to print().
            debug: If True, also print debug lines for each move.
            config: Console configuration. Uses defaults if not provided.
        """
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.debug = debug
        self.config = config or ConsoleConfig()

        # The loop owns the only board for this game
        self.board = BoardState()

    def run(self) -> Optional[Player]:
        """
        Play one game to the end.

        Returns:
            The winner, or None on a draw.

        Raises:
            EOFError: Input closed before the game finished.
        """
        self._show_board()

        while True:
            self._play_turn()
            self._show_board()

            # won() first: a full board with a line is a win, not a draw
            winner = self.board.won()
            if winner is not None:
                self.output_func(self.config.WIN_MESSAGE.format(player=winner))
                self._debug(f"winning line: {self.board.winning_line()}")
                return winner

            if self.board.drawn():
                self.output_func(self.config.DRAW_MESSAGE)
                return None

    def _play_turn(self):
        """Keep asking the current player until one move is accepted."""
        player = self.board.next()

        while True:
            try:
                x, y = read_coords(player, self.input_func, self.config)
                self.board.play(x, y)
            except GameError as e:
                self.output_func(str(e))
                continue

            self._debug(
                f"{player} played ({x}, {y}), move {len(self.board.moves)}, "
                f"{len(self.board.empty_cells())} cells free"
            )
            return

    def _show_board(self):
        self.output_func(f"\n{self.board}\n")

    def _debug(self, message: str):
        if self.debug:
            self.output_func(f"{self.config.DEBUG_PREFIX} {message}")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug information about each move"
    )

    args = parser.parse_args(argv)

    config = ConsoleConfig()
    game = TicTacToeConsole(debug=args.debug or GameConfig.DEBUG_MODE, config=config)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n" + config.INTERRUPTED_MESSAGE)
    finally:
        print(config.GOODBYE_MESSAGE)

    return 0


if __name__ == "__main__":
    sys.exit(main())
