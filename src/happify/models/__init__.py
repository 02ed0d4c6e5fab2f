"""SQLModel table exports."""

from .habit import HappinessHabit
from .journal import GratitudeEntry, KindnessCompletion, MoodEntry

__all__ = [
    "GratitudeEntry",
    "HappinessHabit",
    "KindnessCompletion",
    "MoodEntry",
]
