"""Unit tests for /src/reversi/cell.py"""

import pytest

from src.reversi.cell import PLAYABLE_COLOURS, Cell


def test_colours_are_each_others_opposite() -> None:
    assert Cell.LIGHT.opposite == Cell.DARK
    assert Cell.DARK.opposite == Cell.LIGHT
    assert Cell.EMPTY.opposite == Cell.EMPTY


def test_flip_empty_field_stays_empty() -> None:
    assert Cell.EMPTY.flipped() == Cell.EMPTY
    for colour in PLAYABLE_COLOURS:
        assert colour.flipped() == colour.opposite


@pytest.mark.parametrize(
    "cell, symbol",
    [
        (Cell.EMPTY, "."),
        (Cell.LIGHT, "X"),
        (Cell.DARK, "O"),
    ],
)
def test_symbols(cell: Cell, symbol: str) -> None:
    assert cell.symbol == symbol
    assert Cell.from_symbol(symbol) == cell


def test_symbols_are_case_insensitive() -> None:
    assert Cell.from_symbol("x") == Cell.LIGHT
    assert Cell.from_symbol("o") == Cell.DARK


def test_unknown_symbol() -> None:
    with pytest.raises(KeyError):
        Cell.from_symbol("?")
