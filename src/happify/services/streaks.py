"""Streak and recent-window computation over daily habit logs."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable

from ..domain.daily_log import (
    DEFAULT_HISTORY_DAYS,
    DEFAULT_WINDOW_DAYS,
    DailyLog,
    DayView,
    StreakSummary,
    ValidationError,
    parse_log_date,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

ONE_DAY = timedelta(days=1)


def _index_by_day(logs: Iterable[DailyLog]) -> dict[date, DailyLog]:
    # Duplicate dates are a caller error; the last record wins.
    return {log.date: log for log in logs}


def _current_streak(by_day: dict[date, DailyLog], today: date) -> int:
    cursor = today
    today_log = by_day.get(today)
    if today_log is None or not today_log.has_data:
        # Habits may simply not be generated yet today.
        cursor -= ONE_DAY

    current = 0
    while True:
        log = by_day.get(cursor)
        if log is None or not log.is_perfect:
            break
        current += 1
        cursor -= ONE_DAY
    return current


def _longest_streak(by_day: dict[date, DailyLog]) -> int:
    perfect_days = sorted(day for day, log in by_day.items() if log.is_perfect)

    longest = 0
    run = 0
    last_day: date | None = None
    for day in perfect_days:
        if last_day is not None and day == last_day + ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest


def _recent_window(by_day: dict[date, DailyLog], today: date, days: int) -> tuple[DayView, ...]:
    views = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        log = by_day.get(day)
        if log is None:
            views.append(DayView(date=day))
        else:
            views.append(DayView(date=day, completed_count=log.completed_count, total_count=log.total_count))
    return tuple(views)


def _resolve_today(today: Any) -> date:
    if today is None:
        raise ValidationError("A reference date for 'today' is required", value=today)
    return parse_log_date(today)


def compute_streaks(
    logs: Iterable[DailyLog],
    today: date | str,
    *,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> StreakSummary:
    """Derive current/longest streaks and the recent window from daily logs.

    ``today`` is always passed in; the system clock is never read. A day with
    no data is skipped only when it is ``today`` itself, anywhere else it ends
    the current streak. The longest streak is the best run of consecutive
    perfect dates over the whole history.
    """

    if isinstance(window_days, bool) or not isinstance(window_days, int) or window_days < 1:
        raise ValidationError(f"window_days must be a positive integer, got {window_days!r}", value=window_days)

    reference = _resolve_today(today)
    by_day = _index_by_day(logs)

    summary = StreakSummary(
        current=_current_streak(by_day, reference),
        longest=_longest_streak(by_day),
        recent_window=_recent_window(by_day, reference, window_days),
    )
    logger.debug(
        "Computed streaks",
        extra={"days": len(by_day), "current": summary.current, "longest": summary.longest},
    )
    return summary


def current_streak(logs: Iterable[DailyLog], today: date | str) -> int:
    """Return only the current streak ending at ``today``."""

    return _current_streak(_index_by_day(logs), _resolve_today(today))


def longest_streak(logs: Iterable[DailyLog]) -> int:
    """Return the longest run of consecutive perfect days."""

    return _longest_streak(_index_by_day(logs))


def recent_window(logs: Iterable[DailyLog], today: date | str, days: int = DEFAULT_WINDOW_DAYS) -> tuple[DayView, ...]:
    """Return the last ``days`` calendar days ending at ``today``, oldest first."""

    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValidationError(f"days must be a positive integer, got {days!r}", value=days)
    return _recent_window(_index_by_day(logs), _resolve_today(today), days)


__all__ = [
    "DEFAULT_HISTORY_DAYS",
    "DEFAULT_WINDOW_DAYS",
    "compute_streaks",
    "current_streak",
    "longest_streak",
    "recent_window",
]
