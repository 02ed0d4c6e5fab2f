"""Tests for daily log parsing and validation."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from happify.domain.daily_log import DailyLog, DayStatus, DayView, ValidationError, classify, parse_log_date


class TestParseLogDate:
    def test_iso_string(self):
        assert parse_log_date("2024-02-29") == date(2024, 2, 29)

    def test_surrounding_whitespace_ignored(self):
        assert parse_log_date(" 2024-01-10 ") == date(2024, 1, 10)

    def test_datetime_uses_date_part(self):
        assert parse_log_date(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 10)

    @pytest.mark.parametrize("value", ["2024-02-30", "not-a-date", "", "20240110", "2024-1-5", None, 20240110])
    def test_malformed_values_raise_validation_error(self, value):
        """Bad dates must not be coerced to some default day."""
        with pytest.raises(ValidationError) as excinfo:
            parse_log_date(value)

        assert excinfo.value.value == value
        assert repr(value) in str(excinfo.value)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_log_date("nope")


class TestDailyLog:
    def test_from_raw_parses_once(self):
        log = DailyLog.from_raw("2024-01-10", 2, 3)

        assert log.date == date(2024, 1, 10)
        assert log.status is DayStatus.PARTIAL

    def test_counts_must_be_non_negative(self):
        with pytest.raises(ValidationError):
            DailyLog(date(2024, 1, 1), -1, 3)

    def test_completed_cannot_exceed_total(self):
        with pytest.raises(ValidationError):
            DailyLog(date(2024, 1, 1), 4, 3)

    def test_string_date_rejected_by_constructor(self):
        with pytest.raises(ValidationError):
            DailyLog("2024-01-01", 1, 1)  # type: ignore[arg-type]

    def test_logs_are_immutable(self):
        log = DailyLog(date(2024, 1, 1), 1, 1)

        with pytest.raises(AttributeError):
            log.completed_count = 0  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("completed", "total", "expected"),
        [
            (3, 3, DayStatus.PERFECT),
            (1, 3, DayStatus.PARTIAL),
            (0, 3, DayStatus.FAILED),
            (0, 0, DayStatus.NO_DATA),
        ],
    )
    def test_classification(self, completed, total, expected):
        assert classify(completed, total) is expected
        assert DayView(date(2024, 1, 1), completed, total).status is expected

    def test_no_data_day_is_not_perfect(self):
        log = DailyLog(date(2024, 1, 1), 0, 0)

        assert not log.is_perfect
        assert not log.has_data
