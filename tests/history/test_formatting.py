"""Tests for relative-time and display formatting of history entries."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tempconv.history import HistoryStore
from tempconv.history.formatting import format_relative_time
from tempconv.models.conversion import ConversionDirection, ConversionRecord

TS = datetime(2026, 3, 1, 9, 30, 0, tzinfo=UTC)


def _record(timestamp: datetime = TS) -> ConversionRecord:
    return ConversionRecord(
        direction=ConversionDirection.C_TO_F,
        input_value=100.0,
        output_value=212.0,
        timestamp=timestamp,
    )


class TestDisplayText:
    def test_c_to_f(self) -> None:
        assert HistoryStore.display_text(_record()) == "C to F: 100.0 => 212.00"

    def test_negative_values(self) -> None:
        rec = ConversionRecord(
            direction=ConversionDirection.F_TO_C,
            input_value=-40.0,
            output_value=-40.0,
            timestamp=TS,
        )
        assert HistoryStore.display_text(rec) == "F to C: -40.0 => -40.00"


class TestFormatRelativeTime:
    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [
            (timedelta(0), "Just now"),
            (timedelta(seconds=30), "Just now"),
            (timedelta(seconds=59.9), "Just now"),
            (timedelta(minutes=1), "1 min ago"),
            (timedelta(minutes=5), "5 min ago"),
            (timedelta(minutes=59, seconds=59), "59 min ago"),
            (timedelta(hours=1), "1 hr ago"),
            (timedelta(hours=3), "3 hr ago"),
            (timedelta(hours=3, minutes=59), "3 hr ago"),
            (timedelta(hours=23, minutes=59), "23 hr ago"),
        ],
    )
    def test_relative(self, elapsed: timedelta, expected: str) -> None:
        assert format_relative_time(_record(), TS + elapsed) == expected

    def test_two_days_shows_calendar_date(self) -> None:
        assert format_relative_time(_record(), TS + timedelta(days=2)) == "1/3/2026"

    def test_exactly_one_day_shows_calendar_date(self) -> None:
        assert format_relative_time(_record(), TS + timedelta(days=1)) == "1/3/2026"

    def test_date_uses_record_timestamp_components(self) -> None:
        ts = datetime(2025, 12, 25, 23, 0, 0, tzinfo=timezone(timedelta(hours=-5)))
        now = ts + timedelta(days=400)
        assert format_relative_time(_record(ts), now) == "25/12/2025"

    def test_future_timestamp_is_just_now(self) -> None:
        assert format_relative_time(_record(), TS - timedelta(minutes=10)) == "Just now"

    def test_does_not_read_clock(self) -> None:
        old = datetime(2000, 1, 1, tzinfo=UTC)
        assert format_relative_time(_record(old), old + timedelta(minutes=2)) == "2 min ago"
