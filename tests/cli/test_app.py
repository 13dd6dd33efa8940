"""Scripted sessions through the menus of src/cli/app.py"""

import random
from typing import Callable, Iterable

import pytest
from sqlalchemy.orm import Session

from src.api.models import NewGameRequest, SaveGameRequest
from src.cli.app import HELP_TEXT, ReversiApp
from src.cli.console import Console
from src.core.exceptions import RepositoryError
from src.core.models import StatisticsModel
from src.core.shared_types import PlayerKind, PlayerSetup, Status, Variant
from src.db.sql_repository import SQLGameRepository, SQLStatisticsRepository
from src.reversi.board import Board
from src.reversi.cell import Cell
from src.reversi.game import Game
from src.reversi.players import Player
from src.services.reversi_service import ReversiService

ConsoleFactory = Callable[[Iterable[str]], tuple[Console, list[str]]]


@pytest.fixture
def service(db_session_repo: Session) -> ReversiService:
    return ReversiService(
        SQLGameRepository(db_session_repo), SQLStatisticsRepository(db_session_repo)
    )


def _run(service: ReversiService, console: Console) -> None:
    ReversiApp(service, console, rng=random.Random(0)).run()


def _save_a_game(service: ReversiService, name: str) -> None:
    request = NewGameRequest(
        setup=PlayerSetup.HUMAN_VS_HUMAN,
        player_1_name="Alice",
        player_2_name="Bob",
        variant=Variant.OTHELLO,
    )
    service.save_game(SaveGameRequest(name=name), service.create_new_game(request))


def test_exit_right_away(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    console, written = scripted_console(["0"])
    _run(service, console)
    assert any("Create new game" in line for line in written)


def test_help(service: ReversiService, scripted_console: ConsoleFactory) -> None:
    console, written = scripted_console(["5", "0"])
    _run(service, console)
    assert HELP_TEXT in written


def test_cancel_new_game(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    console, written = scripted_console(["1", "0", "0"])
    _run(service, console)
    assert "     (0)     Back" in written
    assert not any("final score" in line for line in written)


def test_computer_vs_computer_game(service: ReversiService) -> None:
    """Players, game mode, colours, starting player, hints. Enter between every round."""
    answers = iter(["1", "3", "1", "1", "1", "1", "0"])
    written: list[str] = []

    def _read(message: str) -> str:
        if message.startswith("Press Enter"):
            return ""
        return next(answers)

    _run(service, Console(read=_read, write=written.append))

    assert any(line.startswith("The final score is X") for line in written)
    assert any(line.startswith("Computer (X) plays") for line in written)
    # computer vs computer does not count
    stats = service.statistics()
    assert stats.sp_games == stats.mp_games == 0


def test_exit_and_save(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    """Alice (X) plays E3, the computer answers, then the game is saved after the first round."""
    console, written = scripted_console(
        ["1", "1", "Alice", "1", "1", "1", "2", "E3", "exit", "1", "my game", "0"]
    )
    _run(service, console)

    assert "Alice (X) plays E3." in written
    assert "Your game has been saved as my game" in written
    assert service.list_saves() == ["my game"]

    game = service.load_game("my game")
    assert game.rounds == 1
    assert game.status == Status.IN_PROGRESS
    tally = game.board.tally()
    assert tally.light + tally.dark == 6


def test_save_name_must_be_unique(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    _save_a_game(service, "taken")
    console, written = scripted_console(
        ["1", "1", "Alice", "1", "1", "1", "1", "E3", "exit", "1", "taken", "new", "0"]
    )
    _run(service, console)

    assert "This save file already exists." in written
    assert service.list_saves() == ["new", "taken"]


def test_exit_without_saving(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    console, written = scripted_console(
        ["1", "1", "Alice", "1", "1", "1", "1", "E3", "exit", "2", "0"]
    )
    _run(service, console)
    assert "Your game will not be saved." in written
    assert service.list_saves() == []


def test_load_without_saves(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    console, written = scripted_console(["2", "0"])
    _run(service, console)
    assert any("No save files found" in line for line in written)


def test_load_and_exit_again(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    """Alice (X) starts the loaded game with E3, Bob (O) answers F5, then stop without saving."""
    _save_a_game(service, "saved")
    console, written = scripted_console(["2", "1", "E3", "F5", "exit", "2", "0"])
    _run(service, console)
    assert "saved was loaded successfully." in written
    assert "Alice (X) plays E3." in written
    assert "Bob (O) plays F5." in written


def test_delete_save(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    _save_a_game(service, "old")
    console, written = scripted_console(["3", "1", "0"])
    _run(service, console)
    assert "old has been deleted." in written
    assert service.list_saves() == []


def test_reset_statistics(
    service: ReversiService, scripted_console: ConsoleFactory
) -> None:
    console, written = scripted_console(["4", "1", "0"])
    _run(service, console)
    assert "All statistics have been reset." in written


class BrokenStatisticsRepository:
    def load(self) -> StatisticsModel:
        return StatisticsModel()

    def save(self, statistics: StatisticsModel) -> StatisticsModel:
        raise RepositoryError("database is locked")


def test_failed_statistics_update_is_reported(
    db_session_repo: Session, scripted_console: ConsoleFactory
) -> None:
    """Alice (X) has no move and skips, the computer takes the last move and the game ends without asking for input."""
    service = ReversiService(
        SQLGameRepository(db_session_repo), BrokenStatisticsRepository()
    )
    game = Game(
        board=Board.from_rows(["OX......"] + ["........"] * 7),
        player_1=Player("Alice", Cell.LIGHT, PlayerKind.HUMAN),
        player_2=Player("Computer", Cell.DARK, PlayerKind.COMPUTER),
        variant=Variant.OTHELLO,
        hints=False,
        starting_player=1,
    )
    service.track(game)
    console, written = scripted_console([])

    ReversiApp(service, console, rng=random.Random(0)).run_game(game)

    assert game.status == Status.GAME_OVER
    assert "Computer won the game." in written
    assert "Statistics could not be updated." in written
