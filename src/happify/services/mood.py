"""Mood scale and the day-by-day mood trend used by the journal chart."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Iterable, Optional

from ..domain.daily_log import ValidationError, parse_log_date

MOOD_VALUES: dict[str, int] = {
    "stressed": 1,
    "anxious": 2,
    "neutral": 3,
    "calm": 4,
    "happy": 5,
    "joyful": 6,
}

MOOD_EMOJIS: dict[int, str] = {
    1: "😰",
    2: "😟",
    3: "😐",
    4: "😌",
    5: "😊",
    6: "🥰",
}

NEUTRAL_VALUE = MOOD_VALUES["neutral"]
DEFAULT_TREND_DAYS = 14


@dataclass(frozen=True, slots=True)
class MoodPoint:
    """Average mood for one calendar day; ``value`` is None without entries."""

    date: date
    value: Optional[float]
    emoji: str


def validate_mood(mood: str) -> str:
    """Normalize a mood label, raising ``ValidationError`` when unknown."""

    normalized = (mood or "").strip().lower()
    if normalized not in MOOD_VALUES:
        raise ValidationError(f"Unknown mood: {mood!r}", value=mood)
    return normalized


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def emoji_for(value: float) -> str:
    return MOOD_EMOJIS.get(int(_round_half_up(value)), MOOD_EMOJIS[NEUTRAL_VALUE])


def _entry_field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _local_day(created: Any, tz: Optional[tzinfo]) -> date:
    """Calendar day of an entry in local time.

    Aware datetimes (and ISO timestamps with an offset) are converted to
    ``tz``, or the host's local zone when ``tz`` is None. Naive values are
    already local.
    """

    if isinstance(created, str) and len(created.strip()) > 10:
        text = created.strip().replace("Z", "+00:00")
        try:
            created = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid entry timestamp: {created!r}", value=created) from None
    if isinstance(created, datetime) and created.tzinfo is not None:
        created = created.astimezone(tz)
    return parse_log_date(created)


def mood_trend(
    entries: Iterable[Any],
    today: date | str,
    *,
    days: int = DEFAULT_TREND_DAYS,
    tz: Optional[tzinfo] = None,
) -> list[MoodPoint]:
    """Average mood per local day over the ``days`` days ending at ``today``.

    Entries need ``mood`` and ``created_at`` (a date, datetime or ISO
    string). Unknown mood labels count as neutral.
    """

    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValidationError(f"days must be a positive integer, got {days!r}", value=days)
    reference = parse_log_date(today)

    by_day: dict[date, list[int]] = defaultdict(list)
    for entry in entries:
        day = _local_day(_entry_field(entry, "created_at"), tz)
        by_day[day].append(MOOD_VALUES.get(_entry_field(entry, "mood"), NEUTRAL_VALUE))

    points = []
    for offset in range(days - 1, -1, -1):
        day = reference - timedelta(days=offset)
        values = by_day.get(day)
        if not values:
            points.append(MoodPoint(date=day, value=None, emoji=""))
            continue
        average = sum(values) / len(values)
        points.append(MoodPoint(date=day, value=_round_half_up(average, 1), emoji=emoji_for(average)))
    return points


def has_mood_data(points: Iterable[MoodPoint]) -> bool:
    return any(point.value is not None for point in points)


__all__ = [
    "DEFAULT_TREND_DAYS",
    "MOOD_EMOJIS",
    "MOOD_VALUES",
    "MoodPoint",
    "emoji_for",
    "has_mood_data",
    "mood_trend",
    "validate_mood",
]
