"""
Move selection for the computer player

Greedy single-ply heuristic: take the move that turns the most pieces into your colour.
No lookahead, no positional weighting.
"""

import logging
import random

from src.core.exceptions import GameStateError, NoMoveAvailableError
from src.reversi.board import Board
from src.reversi.cell import Colour
from src.reversi.coordinates import CENTRE_CELLS, Coord

logger = logging.getLogger(__name__)


def select_best_move(board: Board, colour: Colour) -> Coord:
    """
    Score every field in the board's scan order and keep the best one
    ----

    Only a strictly higher score replaces the current best, so among equally good moves the first one scanned wins.
    The turn controller checks for available moves before asking, so finding none is a broken contract, not a game state.
    """
    best_move: Coord | None = None
    best_score = 0
    for coord in board.coordinates():
        score = board.score_move(coord.x, coord.y, colour)
        if score > best_score:
            best_move = coord
            best_score = score

    if best_move is None:
        raise NoMoveAvailableError(f"No legal move available for {colour.name}.")

    logger.debug(
        "best move for %s: %s (score %d)",
        colour.name,
        best_move.to_alphanumeric(),
        best_score,
    )
    return best_move


def select_setup_cell(board: Board, rng: random.Random | None = None) -> Coord:
    """Pick a random empty field in the centre 2x2 block (Traditional setup). Draws coordinates until an empty one comes up."""
    if not any(board.is_empty(x, y) for x, y in CENTRE_CELLS):
        raise GameStateError("All centre fields are occupied. Setup cannot continue.")

    rng = rng or random.Random()
    low = min(x for x, _ in CENTRE_CELLS)
    high = max(x for x, _ in CENTRE_CELLS)
    while True:
        x = rng.randint(low, high)
        y = rng.randint(low, high)
        if board.is_empty(x, y):
            return Coord(x, y)
