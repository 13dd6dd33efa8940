"""
Console input/output

Every read_* method keeps asking until the answer is valid. Invalid input is reported, never fatal, and there is no retry limit.
"""

import logging
from typing import Callable, TypeVar

from pydantic import ValidationError

from src.api.models import MoveRequest, SetupMoveRequest
from src.core.exceptions import InvalidRequestError
from src.reversi.coordinates import Coord

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_FIELD = "This field is invalid, please try again."


class Console:
    """Thin wrapper around input/print so the prompts can be scripted in tests."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def write(self, message: str = "") -> None:
        self._write(message)

    def read(self, message: str) -> str:
        return self._read(message)

    def read_valid(
        self, message: str, parse: Callable[[str], T], error_message: str
    ) -> T:
        """Ask until parse accepts the answer. parse signals rejection by raising InvalidRequestError or a pydantic ValidationError."""
        while True:
            answer = self.read(message)
            try:
                return parse(answer)
            except (InvalidRequestError, ValidationError) as exc:
                logger.debug("rejected input %r: %s", answer, exc)
                self.write(error_message)

    def read_int_in_bounds(self, low: int, high: int, message: str) -> int:
        def _parse(answer: str) -> int:
            try:
                value = int(answer.strip())
            except ValueError as exc:
                raise InvalidRequestError(f"{answer!r} is not a number.") from exc
            if not low <= value <= high:
                raise InvalidRequestError(f"{value} is not within [{low}, {high}].")
            return value

        return self.read_valid(message, _parse, "Invalid input, try again.")

    def read_choice(self, message: str, values: list[str]) -> str:
        """Case-insensitive pick from a fixed list of answers. Returns the lower cased answer."""
        allowed = {value.lower() for value in values}

        def _parse(answer: str) -> str:
            answer = answer.strip().lower()
            if answer not in allowed:
                raise InvalidRequestError(f"{answer!r} is not one of {sorted(allowed)}.")
            return answer

        return self.read_valid(message, _parse, "Please enter a valid input.")

    def read_coordinate(self, message: str, size_x: int, size_y: int) -> Coord:
        def _parse(answer: str) -> Coord:
            coord = MoveRequest(code=answer).to_coord()
            if not coord.is_within_bounds(size_x, size_y):
                raise InvalidRequestError(f"{answer!r} is not on the board.")
            return coord

        return self.read_valid(message, _parse, INVALID_FIELD)

    def read_centre_coordinate(self, message: str) -> Coord:
        return self.read_valid(
            message, lambda answer: SetupMoveRequest(code=answer).to_coord(), INVALID_FIELD
        )
