"""Runtime settings. Read from environment variables so tests and deployments can point elsewhere."""

import os
from dataclasses import dataclass
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///reversi.db"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = DEFAULT_LOG_LEVEL
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> Self:
        """
        REVERSI_DATABASE_URL: any SQLAlchemy URL
        REVERSI_LOG_LEVEL: name of a logging level (DEBUG, INFO, ...)
        REVERSI_SQL_ECHO: "1", "true" or "yes" to echo SQL statements
        """
        return cls(
            database_url=os.environ.get("REVERSI_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.environ.get("REVERSI_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            sql_echo=os.environ.get("REVERSI_SQL_ECHO", "").lower()
            in {"1", "true", "yes"},
        )
