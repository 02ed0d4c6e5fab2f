"""Habit tracking data structures."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class HappinessHabit(SQLModel, table=True):
    """One habit scheduled for a user on a calendar day."""

    __tablename__: ClassVar[str] = "happiness_habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    # Local calendar day the habit belongs to, not the creation instant.
    date: dt.date = Field(nullable=False, index=True)
    habit_type: str = Field(nullable=False, max_length=32)
    description: str = Field(default="", max_length=255)
    completed: bool = Field(default=False, nullable=False)
    created_at: dt.datetime = Field(default_factory=_utcnow, nullable=False)
