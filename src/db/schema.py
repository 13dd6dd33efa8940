"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """A saved (unfinished) game session, looked up by the name the player gave it."""

    __tablename__ = "saved_games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    board: Mapped[list[str]] = mapped_column(JSON)
    players: Mapped[dict[str, dict[str, str]]] = mapped_column(JSON)
    variant: Mapped[str]
    hints: Mapped[bool]
    starting_player: Mapped[int]
    rounds: Mapped[int]
    status: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBStatistics(Base):
    """Single row table (id = 1) holding the counters of the statistics aggregator."""

    __tablename__ = "statistics"
    id: Mapped[int] = mapped_column(primary_key=True)
    sp_games_won: Mapped[int] = mapped_column(default=0)
    sp_games_lost: Mapped[int] = mapped_column(default=0)
    sp_draws: Mapped[int] = mapped_column(default=0)
    mp_player_1_wins: Mapped[int] = mapped_column(default=0)
    mp_player_2_wins: Mapped[int] = mapped_column(default=0)
    mp_draws: Mapped[int] = mapped_column(default=0)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
