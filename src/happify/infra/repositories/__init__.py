"""Concrete repository implementations."""

from .habit import SQLModelHabitRepository
from .journal import SQLModelJournalRepository

__all__ = ["SQLModelHabitRepository", "SQLModelJournalRepository"]
