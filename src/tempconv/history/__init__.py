"""Conversion history management."""

from tempconv.history.formatting import format_relative_time
from tempconv.history.store import HistoryStore

__all__ = [
    "HistoryStore",
    "format_relative_time",
]
