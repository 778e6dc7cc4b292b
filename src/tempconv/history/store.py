"""Bounded, newest-first store of completed conversions."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from tempconv.history import formatting
from tempconv.models.config import DEFAULT_HISTORY_CAPACITY
from tempconv.models.conversion import ConversionDirection, ConversionRecord

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

logger = logging.getLogger(__name__)


class HistoryStore:
    """In-memory conversion history.

    New records go to the head.  Once more than *capacity* records are held,
    the oldest one is dropped, so ``len(store) <= capacity`` after every call.
    The underlying sequence is only changed by :meth:`record` and
    :meth:`clear`; readers get snapshots.

    Parameters
    ----------
    capacity:
        Maximum number of records kept.  Must be at least 1.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._entries: deque[ConversionRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def entries(self) -> tuple[ConversionRecord, ...]:
        """Snapshot of all records, newest first."""
        return tuple(self._entries)

    def record(
        self,
        direction: ConversionDirection,
        input_value: float,
        output_value: float,
        timestamp: datetime,
    ) -> ConversionRecord:
        """Create a record and insert it at the head, evicting the oldest if full."""
        entry = ConversionRecord(
            direction=direction,
            input_value=input_value,
            output_value=output_value,
            timestamp=timestamp,
        )
        if len(self._entries) == self._capacity:
            logger.debug("History full (%d), evicting %s", self._capacity, self._entries[-1])
        # deque(maxlen=...) drops exactly one item from the right on overflow
        self._entries.appendleft(entry)
        logger.debug("Recorded %s", entry.display_text)
        return entry

    def clear(self) -> None:
        """Remove every record.  Safe to call on an empty store."""
        removed = len(self._entries)
        self._entries.clear()
        logger.debug("Cleared %d history entries", removed)

    def is_empty(self) -> bool:
        return not self._entries

    def latest(self) -> ConversionRecord | None:
        """Return the most recent record, or ``None``."""
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(tuple(self._entries))

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    @staticmethod
    def display_text(record: ConversionRecord) -> str:
        return record.display_text

    @staticmethod
    def format_relative_time(record: ConversionRecord, now: datetime) -> str:
        return formatting.format_relative_time(record, now)
