"""Habit repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, runtime_checkable

from ...models.habit import HappinessHabit
from ..daily_log import DEFAULT_HISTORY_DAYS, DEFAULT_WINDOW_DAYS, DailyLog, StreakSummary


@runtime_checkable
class HabitRepository(Protocol):
    """Repository for a user's daily habits."""

    def add_habit(self, habit: HappinessHabit) -> HappinessHabit:
        """Persist a new habit row."""
        ...

    def list_for_day(self, user_id: str, day: date) -> list[HappinessHabit]:
        """List the habits scheduled for one day."""
        ...

    def replace_day(
        self, user_id: str, day: date, habits: Iterable[tuple[str, str]]
    ) -> list[HappinessHabit]:
        """Swap a day's habits for a fresh set of (habit_type, description)."""
        ...

    def toggle_completed(self, habit_id: int, *, user_id: str) -> Optional[HappinessHabit]:
        """Flip the completed flag of a habit."""
        ...

    def list_between(self, user_id: str, start: date, end: date) -> list[HappinessHabit]:
        """List habits dated within [start, end]."""
        ...

    def daily_logs(self, user_id: str, start: date, end: date) -> list[DailyLog]:
        """Per-day completion counts within [start, end]."""
        ...

    def daily_logs_until(self, user_id: str, end: date) -> list[DailyLog]:
        """Per-day completion counts for every day up to and including end."""
        ...

    def count_completed(self, user_id: str) -> int:
        """Total completed habits over all time."""
        ...

    def get_streak_summary(
        self,
        user_id: str,
        today: date,
        *,
        window_days: int = DEFAULT_WINDOW_DAYS,
        history_days: int = DEFAULT_HISTORY_DAYS,
    ) -> StreakSummary:
        """Streak card data for a user."""
        ...
