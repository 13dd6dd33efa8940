"""The Game board implements all rules that affect the position of the pieces: legality, capturing (flips), scoring and tallying."""

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Self

from src.core.exceptions import GameStateError
from src.reversi.cell import PLAYABLE_COLOURS, SYMBOL_TO_CELL, Cell, Colour
from src.reversi.coordinates import BOARD_DIMENSIONS, DIRECTIONS, Coord, Vector

logger = logging.getLogger(__name__)


class Tally(NamedTuple):
    """Result of counting the pieces. leader is Cell.EMPTY on a draw."""

    leader: Colour
    light: int
    dark: int


@dataclass
class Board:
    # indexed as cells[x][y]
    cells: list[list[Cell]]

    @classmethod
    def empty(
        cls, size_x: int = BOARD_DIMENSIONS[0], size_y: int = BOARD_DIMENSIONS[1]
    ) -> Self:
        return cls([[Cell.EMPTY for _ in range(size_y)] for _ in range(size_x)])

    @classmethod
    def othello_start(cls) -> Self:
        """
        The four centre fields are pre-filled according to the Othello rule set:
        light on (3,3) and (4,4), dark on (4,3) and (3,4).
        """
        board = cls.empty()
        board.cells[3][3] = Cell.LIGHT
        board.cells[4][4] = Cell.LIGHT
        board.cells[4][3] = Cell.DARK
        board.cells[3][4] = Cell.DARK
        return board

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from its text encoding.

        One string per row (y), one character per column (x):
        * '.' an empty field
        * 'X' a light piece
        * 'O' a dark piece

        ex. the Othello starting position has rows 'D' and 'E' equal to '...XO...' and '...OX...'
        """
        if not rows:
            raise GameStateError("Cannot build a board without any rows.")

        size_y = len(rows)
        size_x = len(rows[0])
        if any(len(row) != size_x for row in rows):
            raise GameStateError(f"All rows must have the same length: {rows!r}")

        board = cls.empty(size_x, size_y)
        for y, row in enumerate(rows):
            for x, character in enumerate(row):
                if character.upper() not in SYMBOL_TO_CELL:
                    raise GameStateError(
                        f"Unknown field {character!r} in row {y}. Use one of {''.join(SYMBOL_TO_CELL)}"
                    )
                board.cells[x][y] = Cell.from_symbol(character)
        return board

    def to_rows(self) -> list[str]:
        return [
            "".join(self.cells[x][y].symbol for x in range(self.size_x))
            for y in range(self.size_y)
        ]

    @property
    def size_x(self) -> int:
        return len(self.cells)

    @property
    def size_y(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    def coordinates(self) -> Iterator[Coord]:
        """All fields in scan order: x outer, y inner."""
        for x in range(self.size_x):
            for y in range(self.size_y):
                yield Coord(x, y)

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[x][y] == Cell.EMPTY

    def place_unchecked(self, x: int, y: int, colour: Colour) -> None:
        """Place a piece without abiding to the move rules (only used for the free setup phase). Occupied fields are left alone."""
        if self.is_empty(x, y):
            self.cells[x][y] = colour

    # --- CAPTURE RULES ---
    def is_move_legal(self, x: int, y: int, colour: Colour) -> bool:
        if not self.is_empty(x, y):
            return False
        origin = Coord(x, y)
        return any(self._captured_in_direction(origin, colour, d) for d in DIRECTIONS)

    def captures(self, x: int, y: int, colour: Colour) -> list[Coord]:
        """
        All fields that a move at (x, y) would flip, gathered over the 8 directions.
        ---

        Every direction is judged on the current (pre-move) position. An occupied target field captures nothing.
        """
        if not self.is_empty(x, y):
            return []
        origin = Coord(x, y)
        captured: list[Coord] = []
        for direction in DIRECTIONS:
            captured.extend(self._captured_in_direction(origin, colour, direction))
        return captured

    def apply_move(self, x: int, y: int, colour: Colour) -> list[Coord]:
        """Place the piece and flip all captured pieces. An illegal move leaves the board untouched.

        Returns the flipped fields (empty list when nothing happened).
        """
        captured = self.captures(x, y, colour)
        if not captured:
            return []

        self.cells[x][y] = colour
        for coord in captured:
            self.cells[coord.x][coord.y] = self.cells[coord.x][coord.y].flipped()

        logger.debug(
            "%s played %s, flipping %d piece(s)",
            colour.name,
            Coord(x, y).to_alphanumeric(),
            len(captured),
        )
        return captured

    def score_move(self, x: int, y: int, colour: Colour) -> int:
        """Utility for the greedy computer player: the placed piece plus every piece it flips. Zero for an illegal move."""
        captured = self.captures(x, y, colour)
        if not captured:
            return 0
        return 1 + len(captured)

    def _captured_in_direction(
        self, origin: Coord, colour: Colour, direction: Vector
    ) -> list[Coord]:
        """
        Raycasting from the origin
        -----

        Walk along the direction while the fields hold the opponent's colour.
        The run only counts if it is closed off by one of your own pieces (the anchor).
        Running into an empty field or the edge of the board means nothing gets captured.
        An own piece right next to the origin (a run of length 0) captures nothing either.
        """
        opponent = colour.opposite
        run: list[Coord] = []
        target = origin.step(direction)
        while target.is_within_bounds(self.size_x, self.size_y):
            occupant = self.cells[target.x][target.y]
            if occupant == opponent:
                run.append(target)
            elif occupant == colour:
                return run
            else:
                break
            target = target.step(direction)
        return []

    # --- QUERIES FOR THE TURN CONTROLLER ---
    def legal_moves(self, colour: Colour) -> list[Coord]:
        return [
            coord
            for coord in self.coordinates()
            if self.is_move_legal(coord.x, coord.y, colour)
        ]

    def has_any_legal_move(self, colour: Colour) -> bool:
        return any(
            self.is_move_legal(coord.x, coord.y, colour) for coord in self.coordinates()
        )

    def has_any_legal_move_either_colour(self) -> bool:
        """Used by the Othello rule set: the game ends once neither colour can move."""
        return any(self.has_any_legal_move(colour) for colour in PLAYABLE_COLOURS)

    def count(self, cell: Cell) -> int:
        return sum(column.count(cell) for column in self.cells)

    def tally(self) -> Tally:
        """Count the pieces of both colours and determine the (current) leader"""
        light = self.count(Cell.LIGHT)
        dark = self.count(Cell.DARK)
        if light > dark:
            leader = Cell.LIGHT
        elif dark > light:
            leader = Cell.DARK
        else:
            leader = Cell.EMPTY
        return Tally(leader, light, dark)
