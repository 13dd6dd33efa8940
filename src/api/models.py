"""Request models: validation of the raw text a user types before it reaches the service"""

from typing import ClassVar

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerSetup, Variant
from src.reversi.coordinates import CENTRE_CELLS, ROW_LETTERS, Coord

MAX_NAME_LENGTH = 30
SAVE_NAME_CHARACTERS = set(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 _-"
)
# there is no column 0. Columns beyond the board are left to the bounds check
COLUMN_DIGITS = "123456789"


def clean_player_name(value: str) -> str:
    """Shared by the new game request and the console prompt that asks for the names"""
    name = value.strip()
    if not name:
        raise InvalidRequestError("A player name cannot be empty.")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidRequestError(
            f"A player name can have at most {MAX_NAME_LENGTH} characters."
        )
    return name


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    setup: PlayerSetup
    player_1_name: str
    player_2_name: str
    variant: Variant
    player_1_plays_light: bool = True
    starting_player: int = 1
    hints: bool = False

    @field_validator("player_1_name", "player_2_name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return clean_player_name(value)

    @field_validator("starting_player")
    @classmethod
    def validate_starting_player(cls, value: int) -> int:
        if value not in (1, 2):
            raise InvalidRequestError(f"Starting player must be 1 or 2, got {value}.")
        return value


class MoveRequest(BaseModel):
    """A field written alphanumerically: row letter first, column number second, ex. 'D3'"""

    code: str

    # setup placements must land in the centre 2x2 block
    centre_only: ClassVar[bool] = False

    @field_validator("code")
    @classmethod
    def validate_code(cls, value: str) -> str:
        def _is_alphanumeric_notation(value: str) -> bool:
            if len(value) != 2:
                return False

            first_character = value[0]
            second_character = value[1]
            return (
                first_character.upper() in ROW_LETTERS
                and first_character.isalpha()
                and second_character in COLUMN_DIGITS
            )

        value = value.strip()
        if not _is_alphanumeric_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a field on the board."
            )
        code = value.upper()
        if cls.centre_only:
            coord = Coord.from_alphanumeric(code)
            if (coord.x, coord.y) not in CENTRE_CELLS:
                raise InvalidRequestError(f"{code} is not one of the centre fields.")
        return code

    def to_coord(self) -> Coord:
        return Coord.from_alphanumeric(self.code)


class SetupMoveRequest(MoveRequest):
    centre_only: ClassVar[bool] = True


class SaveGameRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("A save file needs a name.")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidRequestError(
                f"A save name can have at most {MAX_NAME_LENGTH} characters."
            )
        if not set(name) <= SAVE_NAME_CHARACTERS:
            raise InvalidRequestError(
                "Use only letters, digits, spaces, '-' and '_' in a save name."
            )
        return name
