"""Unit tests for src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    MoveRequest,
    NewGameRequest,
    SaveGameRequest,
    SetupMoveRequest,
    clean_player_name,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PlayerSetup, Variant
from src.reversi.coordinates import Coord


# -- Validation - NewGameRequest --
def test_valid_new_game_request() -> None:
    request = NewGameRequest(
        setup=PlayerSetup.HUMAN_VS_HUMAN,
        player_1_name="  Alice ",
        player_2_name="Bob",
        variant=Variant.TRADITIONAL,
        starting_player=2,
    )
    assert request.player_1_name == "Alice"
    assert request.player_1_plays_light
    assert not request.hints


def test_enums_from_their_values() -> None:
    request = NewGameRequest(
        setup="human vs computer",
        player_1_name="Alice",
        player_2_name="Computer",
        variant="othello",
    )
    assert request.setup == PlayerSetup.HUMAN_VS_COMPUTER
    assert request.variant == Variant.OTHELLO


@pytest.mark.parametrize("name", ["", "   ", "x" * 31])
def test_invalid_player_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        NewGameRequest(
            setup=PlayerSetup.HUMAN_VS_HUMAN,
            player_1_name="Alice",
            player_2_name=name,
            variant=Variant.OTHELLO,
        )


def test_invalid_starting_player() -> None:
    with pytest.raises(InvalidRequestError):
        NewGameRequest(
            setup=PlayerSetup.HUMAN_VS_HUMAN,
            player_1_name="Alice",
            player_2_name="Bob",
            variant=Variant.OTHELLO,
            starting_player=0,
        )


def test_unknown_variant() -> None:
    with pytest.raises(ValidationError):
        NewGameRequest(
            setup=PlayerSetup.HUMAN_VS_HUMAN,
            player_1_name="Alice",
            player_2_name="Bob",
            variant="checkers",
        )


def test_clean_player_name() -> None:
    assert clean_player_name(" Grace Hopper ") == "Grace Hopper"
    assert clean_player_name("x" * 30) == "x" * 30


# -- Validation - MoveRequest --
@pytest.mark.parametrize(
    "code, expected",
    [
        ("D3", Coord(2, 3)),
        ("d3", Coord(2, 3)),
        (" h8 ", Coord(7, 7)),
        ("A1", Coord(0, 0)),
    ],
)
def test_valid_move(code: str, expected: Coord) -> None:
    request = MoveRequest(code=code)
    assert request.code == code.strip().upper()
    assert request.to_coord() == expected


@pytest.mark.parametrize(
    "code",
    [
        "",
        "D",
        "3D",
        "D0",
        "D10",
        "DD",
        "?3",
        "exit",
        "D²",  # superscript two is a digit, but not a column
        "D٣",  # arabic-indic three
    ],
)
def test_invalid_move(code: str) -> None:
    with pytest.raises(InvalidRequestError):
        MoveRequest(code=code)


def test_setup_move_must_be_in_the_centre() -> None:
    assert SetupMoveRequest(code="e5").to_coord() == Coord(4, 4)
    assert SetupMoveRequest(code="D4").to_coord() == Coord(3, 3)
    with pytest.raises(InvalidRequestError):
        SetupMoveRequest(code="D3")
    # the same field is fine as a regular move
    assert MoveRequest(code="D3").to_coord() == Coord(2, 3)


# -- Validation - SaveGameRequest --
def test_valid_save_name() -> None:
    assert SaveGameRequest(name=" Sunday_game-2 ").name == "Sunday_game-2"


@pytest.mark.parametrize("name", ["", "  ", "a" * 31, "../etc", "game!"])
def test_invalid_save_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        SaveGameRequest(name=name)
