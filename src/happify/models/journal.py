"""Mood, gratitude and kindness records."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MoodEntry(SQLModel, table=True):
    """A mood check-in with an optional note."""

    __tablename__: ClassVar[str] = "mood_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    mood: str = Field(nullable=False, max_length=16)
    note: str = Field(default="", max_length=1000)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False, index=True)


class GratitudeEntry(SQLModel, table=True):
    __tablename__: ClassVar[str] = "gratitude_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    content: str = Field(nullable=False, max_length=1000)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)


class KindnessCompletion(SQLModel, table=True):
    """A kindness challenge the user marked as done."""

    __tablename__: ClassVar[str] = "kindness_completion"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    challenge_title: str = Field(nullable=False, max_length=120)
    completed_on: date = Field(nullable=False, index=True)
