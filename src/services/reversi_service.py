"""Orchestration of communication from the console to business logic and persistence layers (and the reverse direction)."""

import logging

from src.api.models import NewGameRequest, SaveGameRequest
from src.core.exceptions import RepositoryError
from src.core.shared_types import PlayerKind, PlayerSetup, Status
from src.db.repository import GameRepository, StatisticsRepository
from src.reversi.cell import Cell
from src.reversi.game import Game, GameResult
from src.reversi.players import COMPUTER_NAME, Player
from src.reversi.statistics import Statistics

logger = logging.getLogger(__name__)

PLAYER_KINDS: dict[PlayerSetup, tuple[PlayerKind, PlayerKind]] = {
    PlayerSetup.HUMAN_VS_COMPUTER: (PlayerKind.HUMAN, PlayerKind.COMPUTER),
    PlayerSetup.HUMAN_VS_HUMAN: (PlayerKind.HUMAN, PlayerKind.HUMAN),
    PlayerSetup.COMPUTER_VS_COMPUTER: (PlayerKind.COMPUTER, PlayerKind.COMPUTER),
}


class ReversiService:
    """Orchestration of layers for the Reversi game."""

    def __init__(
        self, games: GameRepository, statistics: StatisticsRepository
    ) -> None:
        self.games = games
        self.statistics_repo = statistics

    # -- game sessions ---
    def create_new_game(self, request: NewGameRequest) -> Game:
        """Build a new Game from the choices made in the new game menu. Computer players are always called 'Computer'."""
        kind_1, kind_2 = PLAYER_KINDS[request.setup]
        colour_1 = Cell.LIGHT if request.player_1_plays_light else Cell.DARK

        player_1 = Player(
            name=request.player_1_name if kind_1 == PlayerKind.HUMAN else COMPUTER_NAME,
            colour=colour_1,
            kind=kind_1,
        )
        player_2 = Player(
            name=request.player_2_name if kind_2 == PlayerKind.HUMAN else COMPUTER_NAME,
            colour=colour_1.opposite,
            kind=kind_2,
        )
        game = Game.new_game(
            player_1=player_1,
            player_2=player_2,
            variant=request.variant,
            hints=request.hints,
            starting_player=request.starting_player,
        )
        self.track(game)
        return game

    def save_game(self, request: SaveGameRequest, game: Game) -> None:
        """Persist an unfinished game. The in-memory game is left untouched, whether this works or not."""
        if game.status == Status.GAME_OVER:
            raise RepositoryError("A finished game cannot be saved.")
        self.games.create_game(request.name, game.to_model())

    def load_game(self, name: str) -> Game:
        """Restore a saved game, ready to be continued."""
        model = self.games.get_game(name)
        if model is None:
            raise RepositoryError(f"No saved game called {name!r}.")
        game = Game.from_model(model)
        logger.info("loaded game %r (round %d)", name, game.rounds)
        self.track(game)
        return game

    def list_saves(self) -> list[str]:
        return self.games.list_games()

    def save_exists(self, name: str) -> bool:
        return self.games.get_game(name) is not None

    def delete_save(self, name: str) -> None:
        if self.games.delete_game(name) is None:
            raise RepositoryError(f"No saved game called {name!r}.")

    # -- statistics ---
    def track(self, game: Game) -> None:
        """Subscribe the statistics to the game: the finished game reports its result, the game never sees the statistics."""
        game.subscribe(self.record_result)

    def statistics(self) -> Statistics:
        return Statistics.from_model(self.statistics_repo.load())

    def record_result(self, result: GameResult) -> Statistics:
        statistics = self.statistics()
        if statistics.record(result):
            self.statistics_repo.save(statistics.to_model())
        return statistics

    def reset_statistics(self) -> Statistics:
        statistics = self.statistics()
        statistics.reset()
        self.statistics_repo.save(statistics.to_model())
        logger.info("statistics reset")
        return statistics
