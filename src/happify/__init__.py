"""Happify wellness tracker: streaks, badges, moods and daily content."""

from __future__ import annotations

from .config import BaseConfig, TestConfig
from .domain.daily_log import DailyLog, DayStatus, DayView, StreakSummary, ValidationError
from .services.streaks import compute_streaks

__version__ = "0.1.0"

__all__ = [
    "BaseConfig",
    "DailyLog",
    "DayStatus",
    "DayView",
    "StreakSummary",
    "TestConfig",
    "ValidationError",
    "compute_streaks",
]
