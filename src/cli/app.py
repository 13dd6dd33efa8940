"""
Text menu application: the console front-end of the game.

The menus only collect choices and show results. Game rules live in src.reversi, storage in src.db,
and ReversiService connects the two.
"""

import logging
import random
from typing import Optional

from pydantic import ValidationError

from src.api.models import NewGameRequest, SaveGameRequest, clean_player_name
from src.cli.console import Console
from src.cli.render import render_board
from src.core.config import Settings
from src.core.exceptions import GameStateError, InvalidRequestError, RepositoryError
from src.core.log_setup import configure_logging
from src.core.shared_types import Outcome, PlayerSetup, Variant
from src.db.database import create_db_engine, session_factory
from src.db.sql_repository import SQLGameRepository, SQLStatisticsRepository
from src.reversi.board import Board
from src.reversi.cell import Colour
from src.reversi.coordinates import Coord
from src.reversi.game import Game, GameResult
from src.reversi.players import COMPUTER_NAME, Player, build_move_source
from src.services.reversi_service import ReversiService

logger = logging.getLogger(__name__)

BANNER_WIDTH = 60

HELP_TEXT = """\
Reversi is played on an 8x8 board by two players, X and O.
A move places a piece so that one or more lines (horizontal, vertical or diagonal)
of your opponent's pieces are enclosed between the new piece and one of your own.
All enclosed pieces are flipped to your colour.

Othello: the game starts with four pieces in the centre. A player without a valid
move skips; the game ends when neither player can move.
Traditional: the players first place two pieces each in the four centre fields.
The game ends as soon as one player cannot make a valid move.

Fields are entered as row letter and column number, for example D3.
With hints enabled, '*' marks the fields you can play."""


def banner(title: str) -> str:
    line = "+" + "-" * BANNER_WIDTH + "+"
    return f"{line}\n|{title.center(BANNER_WIDTH)}|\n{line}"


def menu(title: str, options: list[str]) -> str:
    """Numbered menu. Option 0 is always 'back' (or exit)."""
    lines = [banner(title)]
    lines.extend(f"     ({number})     {text}" for number, text in enumerate(options, 1))
    return "\n".join(lines)


class ConsoleObserver:
    """Shows the game on the console as it is played"""

    def __init__(self, console: Console) -> None:
        self.console = console

    def board_changed(self, board: Board, hint_colour: Optional[Colour]) -> None:
        self.console.write()
        self.console.write(render_board(board, hint_colour))

    def move_made(self, player: Player, coord: Coord) -> None:
        self.console.write(f"{player.label} plays {coord.to_alphanumeric()}.")

    def turn_skipped(self, player: Player) -> None:
        self.console.write(f"{player.name} skips because there are no valid moves.")

    def game_over(self, result: GameResult, players: tuple[Player, Player]) -> None:
        player_1, player_2 = players
        self.console.write()
        if result.outcome == Outcome.PLAYER_1_WON:
            self.console.write(f"{player_1.name} won the game.")
        elif result.outcome == Outcome.PLAYER_2_WON:
            self.console.write(f"{player_2.name} won the game.")
        else:
            self.console.write("It's a draw!")
        self.console.write(
            f"The final score is X {result.light} : O {result.dark}."
        )


class ReversiApp:
    """Main menu loop"""

    def __init__(
        self,
        service: ReversiService,
        console: Console,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.service = service
        self.console = console
        self.rng = rng or random.Random()
        self.exit = False

    def run(self) -> None:
        while not self.exit:
            self.main_menu()

    def main_menu(self) -> None:
        self.console.write()
        self.console.write(
            menu(
                "Reversi",
                [
                    "Create new game",
                    "Load existing game",
                    "Delete save files",
                    "Statistics",
                    "Help",
                ],
            )
        )
        self.console.write("     (0)     Exit")
        choice = self.console.read_int_in_bounds(
            0, 5, "Please select one of the options above: "
        )
        if choice == 0:
            self.exit = True
        elif choice == 1:
            self.new_game_menu()
        elif choice == 2:
            self.load_menu()
        elif choice == 3:
            self.delete_menu()
        elif choice == 4:
            self.statistics_menu()
        else:
            self.console.write(HELP_TEXT)

    # -- NEW GAME ---
    def new_game_menu(self) -> None:
        """Five questions; answering 0 to any of them cancels the setup."""
        setups = list(PlayerSetup)
        self.console.write(menu("Players", [s.value.capitalize() for s in setups]))
        choice = self._ask(len(setups))
        if choice == 0:
            return
        setup = setups[choice - 1]

        player_1_name, player_2_name = self._ask_names(setup)

        variants = list(Variant)
        self.console.write(menu("Game mode", [v.value.capitalize() for v in variants]))
        choice = self._ask()
        if choice == 0:
            return
        variant = variants[choice - 1]

        self.console.write(
            menu(
                "Colours",
                [
                    f"{player_1_name} (X)   {player_2_name} (O)",
                    f"{player_2_name} (X)   {player_1_name} (O)",
                ],
            )
        )
        colours = self._ask()
        if colours == 0:
            return

        self.console.write(menu("Starting player", [player_1_name, player_2_name]))
        starting_player = self._ask()
        if starting_player == 0:
            return

        self.console.write(menu("Hints", ["No hints", "Show hints"]))
        hints = self._ask()
        if hints == 0:
            return

        try:
            request = NewGameRequest(
                setup=setup,
                player_1_name=player_1_name,
                player_2_name=player_2_name,
                variant=variant,
                player_1_plays_light=colours == 1,
                starting_player=starting_player,
                hints=hints == 2,
            )
        except (InvalidRequestError, ValidationError) as exc:
            self.console.write(f"The game could not be created: {exc}")
            return
        self.run_game(self.service.create_new_game(request))

    def _ask(self, options: int = 2) -> int:
        self.console.write("     (0)     Back")
        return self.console.read_int_in_bounds(
            0, options, "Please select one of the options above: "
        )

    def _ask_names(self, setup: PlayerSetup) -> tuple[str, str]:
        def _name(number: int) -> str:
            return self.console.read_valid(
                f"Please enter the name of Player {number}: ",
                clean_player_name,
                "Please enter a name of 1 to 30 characters.",
            )

        if setup == PlayerSetup.HUMAN_VS_COMPUTER:
            return _name(1), COMPUTER_NAME
        if setup == PlayerSetup.HUMAN_VS_HUMAN:
            return _name(1), _name(2)
        return COMPUTER_NAME, COMPUTER_NAME

    # -- PLAYING ---
    def run_game(self, game: Game) -> None:
        sources = {
            1: build_move_source(game.player_1, self.console, self.rng),
            2: build_move_source(game.player_2, self.console, self.rng),
        }
        game.attach(sources, ConsoleObserver(self.console))
        try:
            finished = game.play(self._between_rounds)
        except RepositoryError as exc:
            # only the statistics listener touches storage during play
            logger.error("updating statistics failed: %s", exc)
            self.console.write("Statistics could not be updated.")
            return
        if not finished:
            self.exit_menu(game)

    def _between_rounds(self, game: Game) -> bool:
        result = game.result
        self.console.write()
        self.console.write(
            f"Round {game.rounds}: The score is X {result.light} : O {result.dark}."
        )
        reply = self.console.read_choice(
            "Press Enter to continue | Type Exit to save and exit ", ["", "exit"]
        )
        return reply != "exit"

    def exit_menu(self, game: Game) -> None:
        self.console.write(menu("Save game?", ["Save", "Don't save"]))
        choice = self.console.read_int_in_bounds(
            1, 2, "Please select one of the options above: "
        )
        if choice == 2:
            self.console.write("Your game will not be saved.")
            return

        while True:
            request = self.console.read_valid(
                "Enter a name for your save file: ",
                lambda answer: SaveGameRequest(name=answer),
                "Please use 1 to 30 letters, digits, spaces, '-' or '_'.",
            )
            if not self.service.save_exists(request.name):
                break
            self.console.write("This save file already exists.")

        try:
            self.service.save_game(request, game)
        except RepositoryError as exc:
            logger.error("saving failed: %s", exc)
            self.console.write("Something went wrong. Your game could not be saved.")
            return
        self.console.write(f"Your game has been saved as {request.name}")

    # -- SAVE FILES ---
    def _pick_save(self, title: str, message: str) -> Optional[str]:
        saves = self.service.list_saves()
        self.console.write(banner(title))
        if not saves:
            self.console.write("No save files found".center(BANNER_WIDTH))
            return None
        for number, name in enumerate(saves, 1):
            self.console.write(f"     ({number})     {name}")
        self.console.write("     (0)     Back")
        choice = self.console.read_int_in_bounds(0, len(saves), message)
        if choice == 0:
            return None
        return saves[choice - 1]

    def load_menu(self) -> None:
        name = self._pick_save("Load game", "Please select a save file: ")
        if name is None:
            return
        try:
            game = self.service.load_game(name)
        except (RepositoryError, GameStateError) as exc:
            logger.error("loading %r failed: %s", name, exc)
            self.console.write(
                "Your save file could not be loaded. The save might be corrupted."
            )
            return
        self.console.write(f"{name} was loaded successfully.")
        self.run_game(game)

    def delete_menu(self) -> None:
        name = self._pick_save("Delete save files", "Please select a save file to delete: ")
        if name is None:
            return
        try:
            self.service.delete_save(name)
        except RepositoryError as exc:
            logger.error("deleting %r failed: %s", name, exc)
            self.console.write("Something went wrong. The save file was not deleted.")
            return
        self.console.write(f"{name} has been deleted.")

    # -- STATISTICS ---
    def statistics_menu(self) -> None:
        stats = self.service.statistics()
        self.console.write(banner("Statistics"))
        self.console.write("Singleplayer")
        self.console.write(
            f"     Games won: {stats.sp_games_won:9d}     Games lost: {stats.sp_games_lost:8d}"
        )
        self.console.write(
            f"     Draws: {stats.sp_draws:13d}     Total: {stats.sp_games:13d}"
        )
        self.console.write(f"     Win rate: {stats.sp_win_rate:10.2f}")
        self.console.write("Multiplayer")
        self.console.write(
            f"     Player 1 won: {stats.mp_player_1_wins:6d}     Player 2 won: {stats.mp_player_2_wins:6d}"
        )
        self.console.write(
            f"     Draws: {stats.mp_draws:13d}     Total: {stats.mp_games:13d}"
        )
        self.console.write(
            f"     Win rate P1: {stats.mp_player_1_win_rate:7.2f}     Win rate P2: {stats.mp_player_2_win_rate:7.2f}"
        )
        self.console.write(menu("Options", ["Reset statistics"]))
        self.console.write("     (0)     Back")
        if self.console.read_int_in_bounds(0, 1, "Please select one of the options above: ") == 1:
            self.service.reset_statistics()
            self.console.write("All statistics have been reset.")


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    engine = create_db_engine(settings)
    console = Console()

    with session_factory(engine)() as session:
        service = ReversiService(
            SQLGameRepository(session), SQLStatisticsRepository(session)
        )
        try:
            ReversiApp(service, console).run()
        except (KeyboardInterrupt, EOFError):
            console.write()
    console.write("Goodbye.")


if __name__ == "__main__":
    main()
