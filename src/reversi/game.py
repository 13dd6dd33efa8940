"""
The Game class is the entrypoint into the domain layer for the service layer.
It is the turn controller: it decides whose turn it is, asks that player's MoveSource for a move, lets the Board apply it,
and detects the end of the game according to the rule variant being played.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Protocol, Self

from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import GameModel
from src.core.shared_types import Outcome, PlayerKind, PlayerMode, Status, Variant
from src.reversi.board import Board
from src.reversi.cell import Cell, Colour
from src.reversi.coordinates import BOARD_DIMENSIONS, Coord
from src.reversi.players import MoveSource, Player

logger = logging.getLogger(__name__)

# Traditional setup: every player places this many pieces in the centre block
SETUP_PASSES = 2


@dataclass
class GameResult:
    """Terminal outcome of a game. This is what the statistics aggregator consumes."""

    outcome: Outcome
    leader: Colour
    light: int
    dark: int
    rounds: int
    mode: Optional[PlayerMode]


class GameObserver(Protocol):
    """Gets told what happens during play (the console renders it). The game never depends on the answers."""

    def board_changed(self, board: Board, hint_colour: Optional[Colour]) -> None: ...
    def move_made(self, player: Player, coord: Coord) -> None: ...
    def turn_skipped(self, player: Player) -> None: ...
    def game_over(self, result: GameResult, players: tuple[Player, Player]) -> None: ...


ResultListener = Callable[[GameResult], None]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    player_1: Player
    player_2: Player
    variant: Variant
    hints: bool
    starting_player: int
    rounds: int = 0
    status: Status = Status.IN_PROGRESS

    # runtime collaborators. Not part of a snapshot.
    sources: dict[int, MoveSource] = field(
        default_factory=dict, repr=False, compare=False
    )
    observer: Optional[GameObserver] = field(default=None, repr=False, compare=False)
    listeners: list[ResultListener] = field(
        default_factory=list, repr=False, compare=False
    )

    @classmethod
    def new_game(
        cls,
        player_1: Player,
        player_2: Player,
        variant: Variant,
        hints: bool = False,
        starting_player: int = 1,
    ) -> Self:
        """Othello starts from the fixed centre position, Traditional starts empty and goes through the setup phase first."""
        if player_1.colour == player_2.colour or Cell.EMPTY in (
            player_1.colour,
            player_2.colour,
        ):
            raise GameStateError("Players must play with opposite colours.")
        if starting_player not in (1, 2):
            raise GameStateError(f"Starting player must be 1 or 2, got {starting_player}.")

        if variant == Variant.OTHELLO:
            board = Board.othello_start()
            status = Status.IN_PROGRESS
        else:
            board = Board.empty()
            status = Status.SETUP

        logger.info(
            "new %s game: %s vs %s", variant, player_1.label, player_2.label
        )
        return cls(
            board=board,
            player_1=player_1,
            player_2=player_2,
            variant=variant,
            hints=hints,
            starting_player=starting_player,
            status=status,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has.

        Everything is validated before the Game gets built, so a corrupt snapshot never yields a half restored game.
        """
        try:
            variant = Variant(model.variant)
            status = Status(model.status)
        except ValueError as exc:
            raise GameStateError(f"Invalid game snapshot: {exc}") from exc

        if model.starting_player not in (1, 2):
            raise GameStateError(
                f"Starting player must be 1 or 2, got {model.starting_player}."
            )
        if model.rounds < 0:
            raise GameStateError(f"Round counter cannot be negative: {model.rounds}")
        if set(model.players.keys()) != {"1", "2"}:
            raise GameStateError(
                f"Expected records for players '1' and '2', got {sorted(model.players)}"
            )

        board = Board.from_rows(model.board)
        if (board.size_x, board.size_y) != BOARD_DIMENSIONS:
            raise GameStateError(
                f"Board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]}, got {board.size_x}x{board.size_y}."
            )

        player_1 = Player.from_record(model.players["1"])
        player_2 = Player.from_record(model.players["2"])
        if player_1.colour == player_2.colour:
            raise GameStateError("Players must play with opposite colours.")

        return cls(
            board=board,
            player_1=player_1,
            player_2=player_2,
            variant=variant,
            hints=model.hints,
            starting_player=model.starting_player,
            rounds=model.rounds,
            status=status,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_rows(),
            players={
                "1": self.player_1.to_record(),
                "2": self.player_2.to_record(),
            },
            variant=self.variant.value,
            hints=self.hints,
            starting_player=self.starting_player,
            rounds=self.rounds,
            status=self.status.value,
        )

    def attach(
        self,
        sources: dict[int, MoveSource],
        observer: Optional[GameObserver] = None,
    ) -> None:
        """Plug in where the moves come from (keyed by player number) and who watches."""
        self.sources = sources
        self.observer = observer

    def subscribe(self, listener: ResultListener) -> None:
        """The listener receives the GameResult once, when the game ends."""
        self.listeners.append(listener)

    @property
    def is_over(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def mode(self) -> Optional[PlayerMode]:
        """Statistics bucket: one human is single player, two humans is multiplayer. Computer vs computer is not recorded."""
        humans = [
            player
            for player in (self.player_1, self.player_2)
            if player.kind == PlayerKind.HUMAN
        ]
        if len(humans) == 2:
            return PlayerMode.MULTI
        if len(humans) == 1:
            return PlayerMode.SINGLE
        return None

    @property
    def result(self) -> GameResult:
        """Current standings. Final once the game is over."""
        tally = self.board.tally()
        if tally.leader == self.player_1.colour:
            outcome = Outcome.PLAYER_1_WON
        elif tally.leader == self.player_2.colour:
            outcome = Outcome.PLAYER_2_WON
        else:
            outcome = Outcome.DRAW
        return GameResult(
            outcome=outcome,
            leader=tally.leader,
            light=tally.light,
            dark=tally.dark,
            rounds=self.rounds,
            mode=self.mode,
        )

    def turn_order(self) -> Iterator[tuple[int, Player]]:
        """Player numbers and players, in the order they act within a round."""
        if self.starting_player == 1:
            yield 1, self.player_1
            yield 2, self.player_2
        else:
            yield 2, self.player_2
            yield 1, self.player_1

    def run_setup(self) -> None:
        """
        Traditional setup
        ----

        In two passes, each player (starting player first) places one piece in the centre 2x2 block.
        No capture rules apply here.
        """
        if self.status != Status.SETUP:
            raise GameStateError(f"Game is not in its setup phase. status: {self.status}")

        for _ in range(SETUP_PASSES):
            for number, player in self.turn_order():
                coord = self._source(number).select_setup_cell(self.board)
                if not coord.is_centre() or not self.board.is_empty(coord.x, coord.y):
                    raise IllegalMoveError(
                        f"{coord.to_alphanumeric()} is not a free centre field."
                    )
                self.board.place_unchecked(coord.x, coord.y, player.colour)
                self._notify_move(player, coord)
                if self.observer:
                    self.observer.board_changed(self.board, None)

        self._change_status(Status.IN_PROGRESS)

    def play_round(self) -> bool:
        """
        Both players get one turn, in turn order
        ----

        1. A player without a legal move: Othello skips the turn, Traditional ends the game right there.
        2. Otherwise the player's MoveSource supplies a move and the board applies it.
        3. Othello only: after both turns, the game ends when neither colour can move anymore.

        Returns True if the game is over.
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        for number, player in self.turn_order():
            if not self._take_turn(number, player):
                logger.info(
                    "%s cannot make a valid move, game over", player.label
                )
                self._finish()
                return True

        self.rounds += 1

        if (
            self.variant == Variant.OTHELLO
            and not self.board.has_any_legal_move_either_colour()
        ):
            self._finish()
            return True
        return False

    def play(self, keep_playing: Callable[[Self], bool] = lambda _: True) -> bool:
        """Run the setup (if needed) and then rounds until the game ends or keep_playing (asked between rounds) says stop.

        Returns True if the game is over.
        """
        if self.status == Status.SETUP:
            self.run_setup()

        self._notify_board(self._first_colour())
        while self.status == Status.IN_PROGRESS:
            if self.play_round():
                break
            if not keep_playing(self):
                logger.info("game interrupted after round %d", self.rounds)
                break
        return self.is_over

    # -- PRIVATE HELPERS ---
    def _take_turn(self, number: int, player: Player) -> bool:
        """Returns False when the turn could not be played and that ends the game."""
        colour = player.colour
        if not self.board.has_any_legal_move(colour):
            if self.variant == Variant.TRADITIONAL:
                return False
            logger.info("%s skips, no valid moves", player.label)
            if self.observer:
                self.observer.turn_skipped(player)
            return True

        coord = self._source(number).select_move(self.board, colour)
        if not self.board.is_move_legal(coord.x, coord.y, colour):
            raise IllegalMoveError(
                f"Move not allowed for {player.label}: {coord.to_alphanumeric()}"
            )
        self.board.apply_move(coord.x, coord.y, colour)
        self._notify_move(player, coord)
        self._notify_board(colour.opposite)
        return True

    def _source(self, number: int) -> MoveSource:
        if number not in self.sources:
            raise GameStateError(f"No move source attached for player {number}.")
        return self.sources[number]

    def _first_colour(self) -> Colour:
        _, first = next(self.turn_order())
        return first.colour

    def _notify_move(self, player: Player, coord: Coord) -> None:
        logger.info("%s plays %s", player.label, coord.to_alphanumeric())
        if self.observer:
            self.observer.move_made(player, coord)

    def _notify_board(self, next_colour: Colour) -> None:
        if self.observer:
            self.observer.board_changed(
                self.board, next_colour if self.hints else None
            )

    def _finish(self) -> None:
        self._change_status(Status.GAME_OVER)
        result = self.result
        logger.info(
            "game over after %d round(s): %s (X %d : O %d)",
            result.rounds,
            result.outcome,
            result.light,
            result.dark,
        )
        if self.observer:
            self.observer.game_over(result, (self.player_1, self.player_2))
        for listener in self.listeners:
            listener(result)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
