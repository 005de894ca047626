"""
Tests for the win checker and move validator.
"""

import numpy as np
import pytest

from logic.errors import OutOfBounds, CellOccupied
from logic.move_validator import MoveValidator
from logic.players import Player, Tile
from logic.win_checker import WinChecker, all_eq, build_lines

X, O, E = Tile.X, Tile.O, Tile.EMPTY


def make_grid(rows):
    return np.array(rows, dtype=np.int8)


class TestAllEq:

    def test_empty_sequence(self):
        assert all_eq([]) is None

    def test_single_item(self):
        assert all_eq(["a"]) == "a"

    def test_all_equal(self):
        assert all_eq([2, 2, 2]) == 2

    def test_mixed(self):
        assert all_eq([1, 1, 2]) is None

    def test_all_empty_tiles_match(self):
        # all_eq itself reports the match; mapping to a player drops it
        assert all_eq([E, E, E]) == E


class TestWinChecker:

    def setup_method(self):
        self.checker = WinChecker()

    def test_lines_order(self):
        lines = build_lines(3)
        assert len(lines) == 8
        assert lines[0] == [(0, 0), (1, 0), (2, 0)]
        assert lines[3] == [(0, 0), (0, 1), (0, 2)]
        assert lines[6] == [(0, 0), (1, 1), (2, 2)]
        assert lines[7] == [(2, 0), (1, 1), (0, 2)]
        assert WinChecker.LINES == lines

    def test_empty_board_has_no_winner(self):
        grid = np.zeros((3, 3), dtype=np.int8)
        assert self.checker.check_winner(grid) is None
        assert not self.checker.check_draw(grid)

    @pytest.mark.parametrize("rows, expected", [
        ([[O, O, O], [X, X, E], [X, E, E]], Player.O),     # row
        ([[X, O, E], [X, O, E], [X, E, E]], Player.X),     # column
        ([[O, X, X], [E, O, X], [X, E, O]], Player.O),     # primary diagonal
        ([[E, E, X], [O, X, E], [X, O, E]], Player.X),     # anti-diagonal
        ([[X, X, E], [O, X, E], [E, E, O]], None),
        ([[X, O, X], [X, O, O], [O, X, X]], None),
    ])
    def test_check_winner(self, rows, expected):
        assert self.checker.check_winner(make_grid(rows)) == expected

    def test_check_draw_only_looks_at_fullness(self):
        full_with_win = make_grid([[X, X, X], [O, O, X], [X, O, O]])
        assert self.checker.check_winner(full_with_win) == Player.X
        assert self.checker.check_draw(full_with_win)

    def test_winning_line(self):
        grid = make_grid([[E, E, X], [O, X, E], [X, O, E]])
        assert self.checker.get_winning_line(grid) == [(2, 0), (1, 1), (0, 2)]
        assert self.checker.get_winning_line(np.zeros((3, 3), dtype=np.int8)) is None


class TestMoveValidator:

    def setup_method(self):
        self.validator = MoveValidator()
        self.grid = make_grid([[X, E, E], [E, O, E], [E, E, E]])

    def test_valid_move(self):
        result = self.validator.validate_move(self.grid, 2, 0)
        assert result.is_valid
        assert result.error is None
        assert result.error_message is None

    def test_occupied(self):
        result = self.validator.validate_move(self.grid, 1, 1)
        assert not result.is_valid
        assert isinstance(result.error, CellOccupied)
        assert result.error_message == "(1, 1) has already been played"

    @pytest.mark.parametrize("x, y", [(3, 0), (0, 3), (-1, 1), (7, 9)])
    def test_out_of_bounds(self, x, y):
        result = self.validator.validate_move(self.grid, x, y)
        assert not result.is_valid
        assert isinstance(result.error, OutOfBounds)

    def test_valid_moves_row_major(self):
        moves = self.validator.get_valid_moves(self.grid)
        assert moves == [(1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]
