"""Journal repository protocol."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, runtime_checkable

from ...models.journal import GratitudeEntry, KindnessCompletion, MoodEntry


@runtime_checkable
class JournalRepository(Protocol):
    """Repository for mood, gratitude and kindness records."""

    def add_mood(self, user_id: str, mood: str, note: str = "") -> MoodEntry:
        ...

    def list_moods_since(self, user_id: str, since: datetime) -> list[MoodEntry]:
        ...

    def add_gratitude(self, user_id: str, content: str) -> GratitudeEntry:
        ...

    def count_gratitude(self, user_id: str) -> int:
        ...

    def record_kindness(self, user_id: str, challenge_title: str, completed_on: date) -> KindnessCompletion:
        ...

    def count_kindness(self, user_id: str) -> int:
        ...
