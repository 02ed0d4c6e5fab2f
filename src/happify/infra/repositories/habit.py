"""SQLModel implementation of the habit repository."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...domain.daily_log import DEFAULT_HISTORY_DAYS, DEFAULT_WINDOW_DAYS, DailyLog, StreakSummary
from ...logging_config import get_logger
from ...models.habit import HappinessHabit
from ...services.habits import group_habit_rows
from ...services.streaks import compute_streaks

logger = get_logger(__name__)


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def add_habit(self, habit: HappinessHabit) -> HappinessHabit:
        with self.session_factory() as session:
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            logger.info(
                "Habit added",
                extra={"user_id": habit.user_id, "habit_type": habit.habit_type, "day": habit.date},
            )
            return habit

    def list_for_day(self, user_id: str, day: date) -> list[HappinessHabit]:
        return self.list_between(user_id, day, day)

    def replace_day(
        self, user_id: str, day: date, habits: Iterable[tuple[str, str]]
    ) -> list[HappinessHabit]:
        """Delete the day's habits and insert a new set; progress on the old set is lost."""
        with self.session_factory() as session:
            existing = session.exec(
                select(HappinessHabit)
                .where(HappinessHabit.user_id == user_id)
                .where(HappinessHabit.date == day)
            ).all()
            for row in existing:
                session.delete(row)

            created = [
                HappinessHabit(user_id=user_id, date=day, habit_type=habit_type, description=description)
                for habit_type, description in habits
            ]
            session.add_all(created)
            session.commit()
            for row in created:
                session.refresh(row)
            session.expunge_all()
            logger.info(
                "Habits regenerated",
                extra={"user_id": user_id, "day": day, "removed": len(existing), "added": len(created)},
            )
            return created

    def toggle_completed(self, habit_id: int, *, user_id: str) -> Optional[HappinessHabit]:
        with self.session_factory() as session:
            habit = session.exec(
                select(HappinessHabit)
                .where(HappinessHabit.id == habit_id)
                .where(HappinessHabit.user_id == user_id)
            ).first()
            if habit is None:
                return None
            habit.completed = not habit.completed
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def list_between(self, user_id: str, start: date, end: date) -> list[HappinessHabit]:
        with self.session_factory() as session:
            statement = (
                select(HappinessHabit)
                .where(HappinessHabit.user_id == user_id)
                .where(HappinessHabit.date >= start)
                .where(HappinessHabit.date <= end)
                .order_by(HappinessHabit.date, HappinessHabit.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def daily_logs(self, user_id: str, start: date, end: date) -> list[DailyLog]:
        return group_habit_rows(self.list_between(user_id, start, end))

    def daily_logs_until(self, user_id: str, end: date) -> list[DailyLog]:
        """Whole history up to ``end``; badge streaks can outgrow any fixed span."""
        with self.session_factory() as session:
            statement = (
                select(HappinessHabit)
                .where(HappinessHabit.user_id == user_id)
                .where(HappinessHabit.date <= end)
                .order_by(HappinessHabit.date, HappinessHabit.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
        return group_habit_rows(rows)

    def count_completed(self, user_id: str) -> int:
        with self.session_factory() as session:
            total = session.exec(
                select(func.count(HappinessHabit.id))
                .where(HappinessHabit.user_id == user_id)
                .where(HappinessHabit.completed == True)  # noqa: E712
            ).one()
            return int(total or 0)

    def get_streak_summary(
        self,
        user_id: str,
        today: date,
        *,
        window_days: int = DEFAULT_WINDOW_DAYS,
        history_days: int = DEFAULT_HISTORY_DAYS,
    ) -> StreakSummary:
        """Streaks over the last ``history_days`` days (never less than the window)."""
        span = max(history_days, window_days)
        logs = self.daily_logs(user_id, today - timedelta(days=span), today)
        return compute_streaks(logs, today, window_days=window_days)
