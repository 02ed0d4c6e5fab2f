"""SQLModel implementation of the journal repository."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable

from sqlalchemy import func
from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.journal import GratitudeEntry, KindnessCompletion, MoodEntry
from ...services.mood import validate_mood

logger = get_logger(__name__)


class SQLModelJournalRepository:
    """Mood, gratitude and kindness storage."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def _save(self, obj):
        with self.session_factory() as session:
            session.add(obj)
            session.commit()
            session.refresh(obj)
            session.expunge(obj)
            return obj

    def add_mood(self, user_id: str, mood: str, note: str = "") -> MoodEntry:
        entry = self._save(MoodEntry(user_id=user_id, mood=validate_mood(mood), note=note.strip()))
        logger.info("Mood logged", extra={"user_id": user_id, "mood": entry.mood})
        return entry

    def list_moods_since(self, user_id: str, since: datetime) -> list[MoodEntry]:
        """Mood entries at or after ``since``, with UTC-aware ``created_at``.

        SQLite drops the offset on write, so stored values are naive UTC.
        A naive ``since`` is taken as local time.
        """
        since_utc = since.astimezone(timezone.utc).replace(tzinfo=None)
        with self.session_factory() as session:
            rows = list(
                session.exec(
                    select(MoodEntry)
                    .where(MoodEntry.user_id == user_id)
                    .where(MoodEntry.created_at >= since_utc)
                    .order_by(MoodEntry.created_at)  # type: ignore
                ).all()
            )
            session.expunge_all()
        for row in rows:
            if row.created_at.tzinfo is None:
                row.created_at = row.created_at.replace(tzinfo=timezone.utc)
        return rows

    def add_gratitude(self, user_id: str, content: str) -> GratitudeEntry:
        text = content.strip()
        if not text:
            raise ValueError("Gratitude entry cannot be empty")
        return self._save(GratitudeEntry(user_id=user_id, content=text))

    def count_gratitude(self, user_id: str) -> int:
        with self.session_factory() as session:
            return int(
                session.exec(
                    select(func.count(GratitudeEntry.id)).where(GratitudeEntry.user_id == user_id)
                ).one()
                or 0
            )

    def record_kindness(self, user_id: str, challenge_title: str, completed_on: date) -> KindnessCompletion:
        return self._save(
            KindnessCompletion(user_id=user_id, challenge_title=challenge_title, completed_on=completed_on)
        )

    def count_kindness(self, user_id: str) -> int:
        with self.session_factory() as session:
            return int(
                session.exec(
                    select(func.count(KindnessCompletion.id)).where(KindnessCompletion.user_id == user_id)
                ).one()
                or 0
            )
