"""Text rendering of the board: 'X' light pieces, 'O' dark pieces, '*' hints"""

from typing import Optional

from src.reversi.board import Board
from src.reversi.cell import Cell, Colour
from src.reversi.coordinates import ROW_LETTERS

HINT_SYMBOL = "*"


def render_board(board: Board, hint_colour: Optional[Colour] = None) -> str:
    """
    Column numbers across the top, row letters down the side.
    With a hint colour, every empty field that is a legal move for that colour is marked.
    """
    divider = "   +" + "---+" * board.size_x
    lines = [
        "   " + "".join(f"  {x + 1} " for x in range(board.size_x)),
        divider,
    ]
    for y in range(board.size_y):
        fields = [
            _render_field(board, x, y, hint_colour) for x in range(board.size_x)
        ]
        lines.append(f" {ROW_LETTERS[y]} | " + " | ".join(fields) + " |")
        lines.append(divider)
    return "\n".join(lines)


def _render_field(board: Board, x: int, y: int, hint_colour: Optional[Colour]) -> str:
    cell = board.cell(x, y)
    if cell != Cell.EMPTY:
        return cell.symbol
    if hint_colour is not None and board.is_move_legal(x, y, hint_colour):
        return HINT_SYMBOL
    return " "
