"""Caller-side conversion state machine.

The engine and history are pure building blocks; this module owns the
transient state a front end needs between them::

    Idle --submit(valid)--> Success --set_direction / reset--> Idle
    Idle --submit(invalid)--> Error --set_direction / reset--> Idle

History is only touched by a successful submit or :meth:`clear_history`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from tempconv._internal.clock import Clock, local_now
from tempconv.engine import convert
from tempconv.history.store import HistoryStore
from tempconv.models.conversion import (
    ConversionDirection,
    ConversionRecord,
    InputErrorKind,
)

if TYPE_CHECKING:
    from datetime import datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    kind: Literal["idle"] = "idle"


@dataclass(frozen=True, slots=True)
class Success:
    value: float
    record: ConversionRecord
    kind: Literal["success"] = "success"


@dataclass(frozen=True, slots=True)
class Error:
    error: InputErrorKind
    kind: Literal["error"] = "error"

    @property
    def message(self) -> str:
        return self.error.message


SessionState = Idle | Success | Error


class ConverterSession:
    """Drives conversions for one front end.

    Parameters
    ----------
    history:
        Store to record successful conversions in.  A new one with the
        default capacity is created when omitted.
    direction:
        Initial conversion direction.
    clock:
        Zero-argument callable returning the current time; used to stamp
        history records.
    """

    def __init__(
        self,
        history: HistoryStore | None = None,
        direction: ConversionDirection = ConversionDirection.F_TO_C,
        clock: Clock | None = None,
    ) -> None:
        self._history = history if history is not None else HistoryStore()
        self._direction = direction
        self._clock = clock or local_now
        self._state: SessionState = Idle()
        self._last_input: str = ""

    @property
    def history(self) -> HistoryStore:
        return self._history

    @property
    def direction(self) -> ConversionDirection:
        return self._direction

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def last_input(self) -> str:
        """Raw text of the most recent submission (kept on failure too)."""
        return self._last_input

    def submit(self, raw: str) -> SessionState:
        """Convert *raw* in the current direction and record it on success."""
        self._last_input = raw
        result = convert(raw, self._direction)
        if result.error is not None:
            logger.info("Rejected input %r: %s", raw, result.error.value)
            self._state = Error(error=result.error)
            return self._state

        output = result.unwrap()
        source = result.source if result.source is not None else output
        record = self._history.record(self._direction, source, output, self._clock())
        self._state = Success(value=output, record=record)
        return self._state

    def set_direction(self, direction: ConversionDirection) -> None:
        """Select a direction, discarding any pending result or error."""
        if direction is not self._direction:
            logger.debug("Direction changed to %s", direction.label)
        self._direction = direction
        self._state = Idle()

    def toggle_direction(self) -> ConversionDirection:
        self.set_direction(self._direction.toggled())
        return self._direction

    def now(self) -> datetime:
        """Current time according to the session clock."""
        return self._clock()

    def reset(self) -> None:
        """Drop the pending result or error and the entered text."""
        self._last_input = ""
        self._state = Idle()

    def clear_history(self) -> None:
        self._history.clear()

    def result_summary(self) -> str | None:
        """Describe the pending result, e.g. ``"98.6°F = 37.00°C"``."""
        if not isinstance(self._state, Success):
            return None
        record = self._state.record
        return (
            f"{self._last_input.strip()}°{record.direction.source_unit}"
            f" = {record.output_value:.2f}°{record.direction.target_unit}"
        )
