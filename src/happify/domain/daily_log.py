"""Value objects for per-day habit completion data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

# Days shown in the streak card window.
DEFAULT_WINDOW_DAYS = 7
# Days of history read for the streak card.
DEFAULT_HISTORY_DAYS = 30


class ValidationError(ValueError):
    """Raised when a log record carries a value the streak math cannot use."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


def parse_log_date(value: Any) -> date:
    """Return ``value`` as a calendar date.

    Accepts ``date``, ``datetime`` (date part) or a ``YYYY-MM-DD`` string.
    Anything else raises ``ValidationError`` naming the value.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            # fromisoformat alone would also take "20240110" on newer Pythons
            if len(text) != 10:
                raise ValueError(text)
            return date.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid log date: {value!r}", value=value) from None
    raise ValidationError(f"Invalid log date: {value!r}", value=value)


class DayStatus(str, Enum):
    """Completion status of a single calendar day."""

    PERFECT = "perfect"
    PARTIAL = "partial"
    FAILED = "failed"
    NO_DATA = "no_data"


def classify(completed_count: int, total_count: int) -> DayStatus:
    if total_count == 0:
        return DayStatus.NO_DATA
    if completed_count == total_count:
        return DayStatus.PERFECT
    if completed_count == 0:
        return DayStatus.FAILED
    return DayStatus.PARTIAL


def _check_counts(completed_count: Any, total_count: Any) -> None:
    for label, count in (("completed_count", completed_count), ("total_count", total_count)):
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValidationError(f"{label} must be a non-negative integer, got {count!r}", value=count)
    if completed_count > total_count:
        raise ValidationError(
            f"completed_count ({completed_count}) exceeds total_count ({total_count})",
            value=completed_count,
        )


@dataclass(frozen=True, slots=True)
class DailyLog:
    """Habit completion counts for one user on one calendar date."""

    date: date
    completed_count: int
    total_count: int

    def __post_init__(self) -> None:
        if not isinstance(self.date, date) or isinstance(self.date, datetime):
            raise ValidationError(f"Invalid log date: {self.date!r}", value=self.date)
        _check_counts(self.completed_count, self.total_count)

    @classmethod
    def from_raw(cls, date_value: Any, completed_count: int, total_count: int) -> "DailyLog":
        """Build a log from loosely typed input, parsing the date once."""

        return cls(parse_log_date(date_value), completed_count, total_count)

    @property
    def status(self) -> DayStatus:
        return classify(self.completed_count, self.total_count)

    @property
    def is_perfect(self) -> bool:
        return self.status is DayStatus.PERFECT

    @property
    def has_data(self) -> bool:
        return self.total_count > 0


@dataclass(frozen=True, slots=True)
class DayView:
    """One day of the recent window, as shown on the streak card."""

    date: date
    completed_count: int = 0
    total_count: int = 0

    @property
    def status(self) -> DayStatus:
        return classify(self.completed_count, self.total_count)

    @property
    def ratio(self) -> float:
        """Completed share of scheduled habits; 0.0 when nothing was scheduled."""
        if self.total_count == 0:
            return 0.0
        return self.completed_count / self.total_count


@dataclass(frozen=True, slots=True)
class StreakSummary:
    """Result of a streak computation."""

    current: int
    longest: int
    recent_window: tuple[DayView, ...]

    def as_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "longest": self.longest,
            "recent_window": [
                {
                    "date": view.date.isoformat(),
                    "completed_count": view.completed_count,
                    "total_count": view.total_count,
                    "status": view.status.value,
                }
                for view in self.recent_window
            ],
        }


__all__ = [
    "DEFAULT_HISTORY_DAYS",
    "DEFAULT_WINDOW_DAYS",
    "DailyLog",
    "DayStatus",
    "DayView",
    "StreakSummary",
    "ValidationError",
    "classify",
    "parse_log_date",
]
