"""Console logging for the application. Modules only ever call logging.getLogger(__name__)."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single stream handler to the `src` logger tree (idempotent)."""
    root = logging.getLogger("src")
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if any(getattr(handler, "_reversi", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    # mark the handler so repeated calls do not stack handlers
    handler._reversi = True  # type: ignore[attr-defined]
    root.addHandler(handler)
