"""Unit tests for /src/reversi/selector.py"""

import random

import pytest

from src.core.exceptions import GameStateError, NoMoveAvailableError
from src.reversi.board import Board
from src.reversi.cell import Cell
from src.reversi.coordinates import Coord
from src.reversi.selector import select_best_move, select_setup_cell

EMPTY_ROW = "........"


def _board(rows: dict[int, str]) -> Board:
    return Board.from_rows([rows.get(y, EMPTY_ROW) for y in range(8)])


def test_highest_score_wins() -> None:
    """E1 and H3 flip one piece each, A4 flips two."""
    board = _board({0: "XOO.....", 4: ".OX.....", 7: "XO......"})
    assert select_best_move(board, Cell.LIGHT) == Coord(3, 0)


def test_ties_go_to_the_first_field_in_scan_order() -> None:
    board = _board({4: ".OX.....", 7: "XO......"})
    assert board.score_move(0, 4, Cell.LIGHT) == board.score_move(2, 7, Cell.LIGHT) == 2
    assert select_best_move(board, Cell.LIGHT) == Coord(0, 4)


def test_othello_start_is_deterministic() -> None:
    """All four opening moves flip one piece; the first one scanned is picked, every time."""
    for _ in range(3):
        board = Board.othello_start()
        assert select_best_move(board, Cell.LIGHT) == Coord(2, 4)
        assert select_best_move(board, Cell.DARK) == Coord(2, 3)


def test_no_move_available() -> None:
    with pytest.raises(NoMoveAvailableError):
        select_best_move(Board.empty(), Cell.LIGHT)


def test_selector_does_not_change_the_board() -> None:
    board = Board.othello_start()
    select_best_move(board, Cell.DARK)
    assert board == Board.othello_start()


# --- SETUP PHASE ---
def test_setup_cell_is_a_free_centre_field() -> None:
    rng = random.Random(42)
    board = Board.empty()
    for _ in range(4):
        coord = select_setup_cell(board, rng)
        assert coord.is_centre()
        assert board.is_empty(coord.x, coord.y)
        board.place_unchecked(coord.x, coord.y, Cell.LIGHT)
    assert board.count(Cell.LIGHT) == 4


def test_setup_cell_finds_last_free_field() -> None:
    board = Board.empty()
    for x, y in ((3, 3), (3, 4), (4, 4)):
        board.place_unchecked(x, y, Cell.DARK)
    assert select_setup_cell(board, random.Random(0)) == Coord(4, 3)


def test_setup_cell_with_full_centre() -> None:
    with pytest.raises(GameStateError):
        select_setup_cell(Board.othello_start(), random.Random(0))
