"""Achievement badges unlocked by streaks and activity counts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Literal, Optional

from ..domain.daily_log import DailyLog
from .streaks import current_streak

BadgeType = Literal["streak", "total", "gratitude", "kindness"]


@dataclass(frozen=True, slots=True)
class Badge:
    """A badge and the threshold that unlocks it."""

    id: str
    name: str
    description: str
    emoji: str
    requirement: int
    type: BadgeType


@dataclass(frozen=True, slots=True)
class BadgeStats:
    """Counters a user's badges are measured against."""

    streak: int = 0
    total_habits: int = 0
    gratitude_count: int = 0
    kindness_count: int = 0


BADGES: tuple[Badge, ...] = (
    # Streak badges
    Badge("streak_3", "Getting Started", "Complete 3-day habit streak", "🌱", 3, "streak"),
    Badge("streak_7", "Week Warrior", "Complete 7-day habit streak", "🔥", 7, "streak"),
    Badge("streak_14", "Consistency King", "Complete 14-day habit streak", "👑", 14, "streak"),
    Badge("streak_30", "Monthly Master", "Complete 30-day habit streak", "🏆", 30, "streak"),
    Badge("streak_60", "Two Month Titan", "Complete 60-day habit streak", "💎", 60, "streak"),
    Badge("streak_100", "Centurion", "Complete 100-day habit streak", "🌟", 100, "streak"),
    # Total habits completed
    Badge("total_10", "First Steps", "Complete 10 habits total", "👣", 10, "total"),
    Badge("total_50", "Habit Builder", "Complete 50 habits total", "🏗️", 50, "total"),
    Badge("total_100", "Century Club", "Complete 100 habits total", "💯", 100, "total"),
    Badge("total_500", "Habit Hero", "Complete 500 habits total", "🦸", 500, "total"),
    # Gratitude
    Badge("gratitude_5", "Grateful Heart", "Write 5 gratitude entries", "💕", 5, "gratitude"),
    Badge("gratitude_30", "Thankful Soul", "Write 30 gratitude entries", "🙏", 30, "gratitude"),
    Badge("gratitude_100", "Gratitude Guru", "Write 100 gratitude entries", "✨", 100, "gratitude"),
    # Kindness
    Badge("kindness_3", "Kind Spirit", "Complete 3 kindness challenges", "💝", 3, "kindness"),
    Badge("kindness_10", "Kindness Champion", "Complete 10 kindness challenges", "🌈", 10, "kindness"),
    Badge("kindness_30", "Compassion Master", "Complete 30 kindness challenges", "🕊️", 30, "kindness"),
)


def stat_for(badge: Badge, stats: BadgeStats) -> int:
    """Return the counter a badge is measured against."""

    if badge.type == "streak":
        return stats.streak
    if badge.type == "total":
        return stats.total_habits
    if badge.type == "gratitude":
        return stats.gratitude_count
    if badge.type == "kindness":
        return stats.kindness_count
    raise ValueError(f"Unknown badge type: {badge.type!r}")


def unlocked_badges(stats: BadgeStats, catalog: Iterable[Badge] = BADGES) -> list[Badge]:
    """Return every badge whose requirement is met, in catalog order."""

    return [badge for badge in catalog if stat_for(badge, stats) >= badge.requirement]


def next_unlock(
    stats: BadgeStats,
    unlocked_ids: Iterable[str],
    catalog: Iterable[Badge] = BADGES,
) -> Optional[Badge]:
    """Return the first newly earned badge not already in ``unlocked_ids``."""

    already = set(unlocked_ids)
    for badge in catalog:
        if badge.id in already:
            continue
        if stat_for(badge, stats) >= badge.requirement:
            return badge
    return None


def badge_progress(badge: Badge, stats: BadgeStats) -> float:
    """Percent progress toward ``badge`` clamped to [0, 100]."""

    return min(stat_for(badge, stats) / badge.requirement * 100, 100.0)


def badges_by_type(catalog: Iterable[Badge] = BADGES) -> dict[str, list[Badge]]:
    grouped: dict[str, list[Badge]] = {"streak": [], "total": [], "gratitude": [], "kindness": []}
    for badge in catalog:
        grouped[badge.type].append(badge)
    return grouped


def build_badge_stats(
    logs: Iterable[DailyLog],
    today: date | str,
    *,
    total_habits: int = 0,
    gratitude_count: int = 0,
    kindness_count: int = 0,
) -> BadgeStats:
    """Assemble badge counters, using the streak engine for the streak."""

    return BadgeStats(
        streak=current_streak(logs, today),
        total_habits=total_habits,
        gratitude_count=gratitude_count,
        kindness_count=kindness_count,
    )


__all__ = [
    "BADGES",
    "Badge",
    "BadgeStats",
    "badge_progress",
    "badges_by_type",
    "build_badge_stats",
    "next_unlock",
    "stat_for",
    "unlocked_badges",
]
