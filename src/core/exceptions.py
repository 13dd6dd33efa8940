"""Custom exceptions shared across layers. Every exception raised on purpose derives from GameError."""


class GameError(Exception):
    """Top level exception of the application."""


class GameStateError(GameError):
    """The game (or its snapshot) is not in a state that allows the requested operation."""


class NoMoveAvailableError(GameStateError):
    """The move selector was asked for a move while none exists. The turn controller should have caught this first."""


class IllegalMoveError(GameError):
    """A move that violates the capture rule."""


class InvalidRequestError(GameError):
    """Raw user input that cannot be interpreted."""


class RepositoryError(GameError):
    """Failure to store or retrieve data."""
