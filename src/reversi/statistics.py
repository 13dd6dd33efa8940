"""Statistics aggregator: counts the outcomes of finished games, split by single player and multiplayer games."""

import logging
from dataclasses import asdict, dataclass
from typing import Self

from src.core.models import StatisticsModel
from src.core.shared_types import Outcome, PlayerMode
from src.reversi.game import GameResult

logger = logging.getLogger(__name__)


@dataclass
class Statistics:
    # Single player: player 1 is the human, player 2 the computer
    sp_games_won: int = 0
    sp_games_lost: int = 0
    sp_draws: int = 0

    # Multiplayer
    mp_player_1_wins: int = 0
    mp_player_2_wins: int = 0
    mp_draws: int = 0

    @classmethod
    def from_model(cls, model: StatisticsModel) -> Self:
        return cls(**asdict(model))

    def to_model(self) -> StatisticsModel:
        return StatisticsModel(**asdict(self))

    @property
    def sp_games(self) -> int:
        return self.sp_games_won + self.sp_games_lost + self.sp_draws

    @property
    def mp_games(self) -> int:
        return self.mp_player_1_wins + self.mp_player_2_wins + self.mp_draws

    @property
    def sp_win_rate(self) -> float:
        return _rate(self.sp_games_won, self.sp_games)

    @property
    def mp_player_1_win_rate(self) -> float:
        return _rate(self.mp_player_1_wins, self.mp_games)

    @property
    def mp_player_2_win_rate(self) -> float:
        return _rate(self.mp_player_2_wins, self.mp_games)

    def record(self, result: GameResult) -> bool:
        """Add a finished game to the matching bucket. Returns False if the game does not count (computer vs computer)."""
        if result.mode == PlayerMode.SINGLE:
            if result.outcome == Outcome.PLAYER_1_WON:
                self.sp_games_won += 1
            elif result.outcome == Outcome.PLAYER_2_WON:
                self.sp_games_lost += 1
            else:
                self.sp_draws += 1
        elif result.mode == PlayerMode.MULTI:
            if result.outcome == Outcome.PLAYER_1_WON:
                self.mp_player_1_wins += 1
            elif result.outcome == Outcome.PLAYER_2_WON:
                self.mp_player_2_wins += 1
            else:
                self.mp_draws += 1
        else:
            return False

        logger.info("recorded %s game: %s", result.mode, result.outcome)
        return True

    def reset(self) -> None:
        """Set all counters back to 0"""
        for name in asdict(self):
            setattr(self, name, 0)


def _rate(part: int, total: int) -> float:
    # no games played yet: report 0 instead of dividing by zero
    if total == 0:
        return 0.0
    return part / total
