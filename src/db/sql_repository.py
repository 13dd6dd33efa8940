"""Implementation of the repositories using SQLAlchemy"""

import logging
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel, StatisticsModel
from src.db.schema import DBGame, DBStatistics

logger = logging.getLogger(__name__)

STATISTICS_ROW_ID = 1


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, name: str) -> GameModel | None:
        """Get game by name, if record exists."""
        game_db = self._fetch_game(name)
        if game_db:
            return self._to_model(game_db)
        return None

    def list_games(self) -> list[str]:
        query = select(DBGame.name).order_by(DBGame.name)
        return list(self.db.scalars(query))

    def create_game(self, name: str, game: GameModel) -> GameModel:
        """Store new game under the given name."""
        if self._fetch_game(name) is not None:
            raise RepositoryError(f"A saved game called {name!r} already exists.")

        game_db = DBGame(
            id=uuid4(),
            name=name,
            board=list(game.board),
            players={number: dict(record) for number, record in game.players.items()},
            variant=game.variant,
            hints=game.hints,
            starting_player=game.starting_player,
            rounds=game.rounds,
            status=game.status,
        )
        self.db.add(game_db)
        self._commit(f"save game {name!r}")
        self.db.refresh(game_db)
        logger.info("saved game %r", name)
        return self._to_model(game_db)

    def delete_game(self, name: str) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(name)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self._commit(f"delete game {name!r}")
        logger.info("deleted saved game %r", name)
        return game_model

    def _fetch_game(self, name: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.name == name)
        return self.db.scalar(query)

    def _commit(self, action: str) -> None:
        """Commit or roll back entirely. Nothing is left half written."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not {action}.") from exc

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board=list(game_db.board),
            players={
                number: dict(record) for number, record in game_db.players.items()
            },
            variant=game_db.variant,
            hints=game_db.hints,
            starting_player=game_db.starting_player,
            rounds=game_db.rounds,
            status=game_db.status,
        )


class SQLStatisticsRepository:
    """The statistics live in a single row"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def load(self) -> StatisticsModel:
        statistics_db = self.db.get(DBStatistics, STATISTICS_ROW_ID)
        if statistics_db is None:
            return StatisticsModel()
        return self._to_model(statistics_db)

    def save(self, statistics: StatisticsModel) -> StatisticsModel:
        statistics_db = self.db.get(DBStatistics, STATISTICS_ROW_ID)
        if statistics_db is None:
            statistics_db = DBStatistics(id=STATISTICS_ROW_ID)
            self.db.add(statistics_db)

        statistics_db.sp_games_won = statistics.sp_games_won
        statistics_db.sp_games_lost = statistics.sp_games_lost
        statistics_db.sp_draws = statistics.sp_draws
        statistics_db.mp_player_1_wins = statistics.mp_player_1_wins
        statistics_db.mp_player_2_wins = statistics.mp_player_2_wins
        statistics_db.mp_draws = statistics.mp_draws
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError("Could not save the statistics.") from exc
        self.db.refresh(statistics_db)
        return self._to_model(statistics_db)

    def _to_model(self, statistics_db: DBStatistics) -> StatisticsModel:
        return StatisticsModel(
            sp_games_won=statistics_db.sp_games_won,
            sp_games_lost=statistics_db.sp_games_lost,
            sp_draws=statistics_db.sp_draws,
            mp_player_1_wins=statistics_db.mp_player_1_wins,
            mp_player_2_wins=statistics_db.mp_player_2_wins,
            mp_draws=statistics_db.mp_draws,
        )
