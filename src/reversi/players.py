"""
Players and the sources of their moves

Key idea: a player is plain data (name, colour, human or computer). What differs between a human and a computer
is where the next move comes from, so that part is captured by the MoveSource protocol.
"""

import logging
import random
from dataclasses import dataclass
from typing import Protocol, Self

from src.core.exceptions import GameStateError
from src.core.models import PlayerRecord
from src.core.shared_types import PlayerKind
from src.reversi.board import Board
from src.reversi.cell import PLAYABLE_COLOURS, Cell, Colour
from src.reversi.coordinates import Coord
from src.reversi.selector import select_best_move, select_setup_cell

logger = logging.getLogger(__name__)

COMPUTER_NAME = "Computer"


@dataclass
class Player:
    name: str
    colour: Colour
    kind: PlayerKind

    @property
    def label(self) -> str:
        """How the player is addressed on screen, ex. 'Alice (X)'"""
        return f"{self.name} ({self.colour.symbol})"

    @classmethod
    def from_record(cls, record: PlayerRecord) -> Self:
        try:
            colour = Cell[record["colour"].upper()]
            kind = PlayerKind(record["kind"])
            name = record["name"]
        except (KeyError, ValueError, AttributeError) as exc:
            raise GameStateError(f"Invalid player record: {record!r}") from exc

        if colour not in PLAYABLE_COLOURS:
            raise GameStateError(f"A player cannot play with {colour.name} pieces.")
        return cls(name=name, colour=colour, kind=kind)

    def to_record(self) -> PlayerRecord:
        return {
            "name": self.name,
            "colour": self.colour.name.lower(),
            "kind": self.kind.value,
        }


class MoveSource(Protocol):
    """Where a player's decisions come from"""

    def select_move(self, board: Board, colour: Colour) -> Coord:
        """A legal move for the colour. Only asked when at least one legal move exists."""
        ...

    def select_setup_cell(self, board: Board) -> Coord:
        """An empty field in the centre 2x2 block (Traditional setup)."""
        ...


class Prompter(Protocol):
    """Just the parts of the console a human move source needs"""

    def read_coordinate(self, message: str, size_x: int, size_y: int) -> Coord: ...
    def read_centre_coordinate(self, message: str) -> Coord: ...
    def write(self, message: str = "") -> None: ...


class ComputerMoveSource:
    """Greedy heuristic. The random source is only used during the Traditional setup phase."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def select_move(self, board: Board, colour: Colour) -> Coord:
        return select_best_move(board, colour)

    def select_setup_cell(self, board: Board) -> Coord:
        return select_setup_cell(board, self.rng)


class HumanMoveSource:
    """
    Asks the person behind the console
    ----

    Input that is not a move on the board is handled by the prompter (it keeps asking until it gets a coordinate).
    This class keeps asking until that coordinate is also a legal move. There is no retry limit.
    """

    def __init__(self, player: Player, prompter: Prompter) -> None:
        self.player = player
        self.prompter = prompter

    def select_move(self, board: Board, colour: Colour) -> Coord:
        while True:
            coord = self.prompter.read_coordinate(
                f"{self.player.label} - Enter your move: ", board.size_x, board.size_y
            )
            if board.is_move_legal(coord.x, coord.y, colour):
                return coord
            logger.debug("rejected illegal move %s", coord.to_alphanumeric())
            self.prompter.write("This move is not valid, please try again.")

    def select_setup_cell(self, board: Board) -> Coord:
        while True:
            coord = self.prompter.read_centre_coordinate(
                f"{self.player.name}: Please enter a field to place your piece on: "
            )
            if board.is_empty(coord.x, coord.y):
                return coord
            self.prompter.write("This field is invalid, please try again.")


def build_move_source(
    player: Player, prompter: Prompter, rng: random.Random | None = None
) -> MoveSource:
    if player.kind == PlayerKind.HUMAN:
        return HumanMoveSource(player, prompter)
    return ComputerMoveSource(rng)
