"""Protocol repositories (implemented with SQL Alchemy, but anything that stores the models will do)"""

from typing import Protocol

from src.core.models import GameModel, StatisticsModel


class GameRepository(Protocol):
    """Persistence of saved game sessions. Saves are identified by their (unique) name."""

    def get_game(self, name: str) -> GameModel | None:
        """Get game by name, if record exists."""
        ...

    def list_games(self) -> list[str]:
        """Names of all saved games, sorted."""
        ...

    def create_game(self, name: str, game: GameModel) -> GameModel:
        """Store new game under the given name. Raises RepositoryError if the name is taken."""
        ...

    def delete_game(self, name: str) -> GameModel | None:
        """Remove a game's record."""
        ...


class StatisticsRepository(Protocol):
    """Persistence of the statistics counters"""

    def load(self) -> StatisticsModel:
        """Current counters (all zero if nothing was stored yet)."""
        ...

    def save(self, statistics: StatisticsModel) -> StatisticsModel:
        """Overwrite the stored counters."""
        ...
