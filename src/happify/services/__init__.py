"""Service module exports."""

from . import badges, content, habits, mood, streaks

__all__ = [
    "badges",
    "content",
    "habits",
    "mood",
    "streaks",
]
