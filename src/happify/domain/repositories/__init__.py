"""Repository protocols."""

from .habit import HabitRepository
from .journal import JournalRepository

__all__ = ["HabitRepository", "JournalRepository"]
