"""The state of a single field on the Reversi grid"""

from enum import IntEnum


class Cell(IntEnum):
    """
    Signed encoding: the two colours are each other's negation, EMPTY is the neutral zero.
    The same values are used for "what piece lies here" and "whose turn it is".
    """

    EMPTY = 0
    LIGHT = 1
    DARK = -1

    @property
    def opposite(self) -> "Cell":
        return Cell(-self.value)

    def flipped(self) -> "Cell":
        """A flip turns a piece over. Flipping an empty field leaves it empty."""
        return self.opposite

    @property
    def symbol(self) -> str:
        return CELL_TO_SYMBOL[self]

    @classmethod
    def from_symbol(cls, character: str) -> "Cell":
        return SYMBOL_TO_CELL[character.upper()]


# Colour is just a non-empty Cell. Alias to make signatures read clearly.
Colour = Cell

CELL_TO_SYMBOL: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.LIGHT: "X",
    Cell.DARK: "O",
}

SYMBOL_TO_CELL: dict[str, Cell] = {value: key for key, value in CELL_TO_SYMBOL.items()}

PLAYABLE_COLOURS: tuple[Cell, Cell] = (Cell.LIGHT, Cell.DARK)
