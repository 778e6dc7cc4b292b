"""Display helpers for history entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from tempconv.models.conversion import ConversionRecord

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def format_relative_time(record: ConversionRecord, now: datetime) -> str:
    """Describe how long ago *record* was created, relative to *now*.

    Under a day old the result is relative (``"Just now"``,
    ``"5 min ago"``, ``"3 hr ago"``); older records show the calendar date
    of the record's own timestamp as ``day/month/year``.
    """
    elapsed = (now - record.timestamp).total_seconds()

    if elapsed < _MINUTE:
        return "Just now"
    if elapsed < _HOUR:
        return f"{int(elapsed // _MINUTE)} min ago"
    if elapsed < _DAY:
        return f"{int(elapsed // _HOUR)} hr ago"

    ts = record.timestamp
    return f"{ts.day}/{ts.month}/{ts.year}"
