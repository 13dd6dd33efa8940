"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the persistence layer (lower) and the domain layer use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PlayerNumber = str
PlayerRecord = dict[str, str]


@dataclass
class GameModel:
    """Transport-safe snapshot of a game session used between Service, DB, and Game layers."""

    board: list[str]
    players: dict[PlayerNumber, PlayerRecord]
    variant: str
    hints: bool
    starting_player: int
    rounds: int
    status: str


@dataclass
class StatisticsModel:
    """Counters of the statistics aggregator. Win rates are derived, so they are not part of the contract."""

    sp_games_won: int = 0
    sp_games_lost: int = 0
    sp_draws: int = 0
    mp_player_1_wins: int = 0
    mp_player_2_wins: int = 0
    mp_draws: int = 0
