"""
A coordinate on the board and the 8 compass directions

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Reversi is played on 8x8. The board logic only relies on these bounds, never on the literal 8.
BOARD_DIMENSIONS = (8, 8)

# Rows are labelled with letters, columns with numbers (as printed by the renderer)
ROW_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# The 2x2 block in the middle of the board, used by the Traditional setup phase
CENTRE_CELLS: tuple[tuple[int, int], ...] = ((3, 3), (3, 4), (4, 3), (4, 4))

Vector = tuple[int, int]

DIRECTIONS: tuple[Vector, ...] = (
    (-1, 0),  # left
    (-1, -1),  # left up
    (0, -1),  # up
    (1, -1),  # right up
    (1, 0),  # right
    (1, 1),  # right down
    (0, 1),  # down
    (-1, 1),  # left down
)


@dataclass(frozen=True)
class Coord:
    """x is the column (printed as a number), y is the row (printed as a letter). Both 0-indexed."""

    x: int
    y: int

    @classmethod
    def from_alphanumeric(cls, code: str) -> Coord:
        """Alphanumeric notation: 'A1' - 'H8' get converted to (0,0) - (7,7). Row letter first, column number second."""
        y = ROW_LETTERS.index(code[0].upper())
        x = int(code[1:]) - 1
        return cls(x, y)

    def to_alphanumeric(self) -> str:
        return f"{ROW_LETTERS[self.y]}{self.x + 1}"

    def is_within_bounds(
        self, size_x: int = BOARD_DIMENSIONS[0], size_y: int = BOARD_DIMENSIONS[1]
    ) -> bool:
        return (0 <= self.x < size_x) and (0 <= self.y < size_y)

    def step(self, direction: Vector) -> Coord:
        dx, dy = direction
        return Coord(self.x + dx, self.y + dy)

    def is_centre(self) -> bool:
        return (self.x, self.y) in CENTRE_CELLS
