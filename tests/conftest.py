"""Pytest configuration and shared fixtures for Happify tests.

Provides an isolated SQLite database per test, repository session factories
and small builders for daily logs and habit rows.
"""

from __future__ import annotations

import tempfile
from datetime import date, timedelta
from pathlib import Path

import pytest
from sqlmodel import Session, create_engine

from happify.domain.daily_log import DailyLog
from happify.infra.database import create_session_factory, init_database
from happify.models import HappinessHabit

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    init_database(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """A session for arranging test data directly."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what repositories receive in the app."""
    return create_session_factory(db_engine)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def habit_factory(db_session):
    """Factory for persisting habit rows.

    Returns:
        Callable: Function that creates and persists HappinessHabit instances
    """

    def _create_habit(
        day: date,
        completed: bool = False,
        habit_type: str = "mindfulness",
        description: str = "Take three deep breaths",
        user_id: str = "user-1",
    ) -> HappinessHabit:
        habit = HappinessHabit(
            user_id=user_id,
            date=day,
            habit_type=habit_type,
            description=description,
            completed=completed,
        )
        db_session.add(habit)
        db_session.commit()
        db_session.refresh(habit)
        return habit

    return _create_habit


def perfect_run(end: date, length: int, total: int = 3) -> list[DailyLog]:
    """``length`` perfect days ending at ``end`` (inclusive)."""
    return [DailyLog(end - timedelta(days=i), total, total) for i in range(length)]


@pytest.fixture
def make_perfect_run():
    return perfect_run
