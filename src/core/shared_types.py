"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    SETUP = "setup"
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


class Variant(StrEnum):
    OTHELLO = "othello"
    TRADITIONAL = "traditional"


class PlayerKind(StrEnum):
    HUMAN = "human"
    COMPUTER = "computer"


class PlayerSetup(StrEnum):
    """Who is sitting at the board. Decides the statistics bucket a finished game lands in."""

    HUMAN_VS_COMPUTER = "human vs computer"
    HUMAN_VS_HUMAN = "human vs human"
    COMPUTER_VS_COMPUTER = "computer vs computer"


class PlayerMode(StrEnum):
    SINGLE = "single"
    MULTI = "multi"


class Outcome(StrEnum):
    PLAYER_1_WON = "player 1 won"
    PLAYER_2_WON = "player 2 won"
    DRAW = "draw"
