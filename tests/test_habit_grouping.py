"""Tests for turning per-habit rows into daily logs."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from happify.domain.daily_log import DailyLog, ValidationError
from happify.services.habits import count_completed, group_habit_rows


def test_rows_grouped_by_date_and_sorted():
    rows = [
        {"date": "2024-01-10", "completed": True},
        {"date": "2024-01-09", "completed": True},
        {"date": "2024-01-10", "completed": False},
        {"date": "2024-01-10", "completed": True},
        {"date": "2024-01-09", "completed": True},
    ]

    assert group_habit_rows(rows) == [
        DailyLog(date(2024, 1, 9), 2, 2),
        DailyLog(date(2024, 1, 10), 2, 3),
    ]


def test_object_rows_supported():
    rows = [
        SimpleNamespace(date=date(2024, 3, 1), completed=False),
        SimpleNamespace(date=date(2024, 3, 1), completed=False),
    ]

    assert group_habit_rows(rows) == [DailyLog(date(2024, 3, 1), 0, 2)]


def test_empty_rows():
    assert group_habit_rows([]) == []
    assert count_completed([]) == 0


def test_malformed_row_date_raises():
    with pytest.raises(ValidationError):
        group_habit_rows([{"date": "yesterday", "completed": True}])


def test_count_completed():
    rows = [{"date": "2024-01-01", "completed": flag} for flag in (True, False, True, True)]

    assert count_completed(rows) == 3
