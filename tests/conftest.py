"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator, Iterable

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.cli.console import Console
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def scripted_console() -> Callable[[Iterable[str]], tuple[Console, list[str]]]:
    """Call the inner function with the answers the 'user' will type. Returns the console and the list collecting everything written."""

    def _create_console(answers: Iterable[str]) -> tuple[Console, list[str]]:
        remaining = iter(answers)
        written: list[str] = []
        console = Console(read=lambda _message: next(remaining), write=written.append)
        return console, written

    return _create_console
