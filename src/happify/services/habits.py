"""Habit helpers: grouping per-habit rows into daily logs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from datetime import date
from typing import Any, Iterable

from ..domain.daily_log import DailyLog, parse_log_date

HABIT_CATEGORIES = (
    "gratitude",
    "kindness",
    "mindfulness",
    "movement",
    "connection",
    "selfcare",
)


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def group_habit_rows(rows: Iterable[Any]) -> list[DailyLog]:
    """Collapse per-habit rows into one ``DailyLog`` per date.

    Each row needs a ``date`` and a truthy/falsy ``completed``; rows may be
    mappings or objects such as ``HappinessHabit``. The result is sorted by
    date.
    """

    totals: dict[date, list[int]] = defaultdict(lambda: [0, 0])
    for row in rows:
        day = parse_log_date(_field(row, "date"))
        counts = totals[day]
        counts[1] += 1
        if _field(row, "completed"):
            counts[0] += 1

    return [
        DailyLog(date=day, completed_count=completed, total_count=total)
        for day, (completed, total) in sorted(totals.items())
    ]


def count_completed(rows: Iterable[Any]) -> int:
    """Return how many habit rows are marked completed."""

    return sum(1 for row in rows if _field(row, "completed"))


__all__ = ["HABIT_CATEGORIES", "count_completed", "group_habit_rows"]
