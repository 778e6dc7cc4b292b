"""Pydantic v2 models for conversions and their validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from tempconv.errors import InputValidationError


class ConversionDirection(StrEnum):
    """Which of the two supported conversions to apply."""

    F_TO_C = "f_to_c"
    C_TO_F = "c_to_f"

    @property
    def label(self) -> str:
        """Short label shown in history rows (``"F to C"`` / ``"C to F"``)."""
        return _LABELS[self]

    @property
    def source_unit(self) -> str:
        return "F" if self is ConversionDirection.F_TO_C else "C"

    @property
    def target_unit(self) -> str:
        return "C" if self is ConversionDirection.F_TO_C else "F"

    def toggled(self) -> ConversionDirection:
        """Return the opposite direction."""
        if self is ConversionDirection.F_TO_C:
            return ConversionDirection.C_TO_F
        return ConversionDirection.F_TO_C


_LABELS = {
    ConversionDirection.F_TO_C: "F to C",
    ConversionDirection.C_TO_F: "C to F",
}


class InputErrorKind(StrEnum):
    """Reasons raw input can be rejected."""

    EMPTY_INPUT = "empty_input"
    NOT_A_NUMBER = "not_a_number"

    @property
    def message(self) -> str:
        """User-facing prompt for this error."""
        if self is InputErrorKind.EMPTY_INPUT:
            return "Please enter a temperature value"
        return "Please enter a valid number"


class ConversionRecord(BaseModel):
    """One completed conversion, immutable once created."""

    model_config = ConfigDict(frozen=True)

    direction: ConversionDirection
    input_value: float = Field(allow_inf_nan=False)
    output_value: float = Field(allow_inf_nan=False)
    timestamp: datetime

    @property
    def display_text(self) -> str:
        return f"{self.direction.label}: {self.input_value:.1f} => {self.output_value:.2f}"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing or converting raw input.

    Exactly one of ``value`` and ``error`` is set.  Failures are returned,
    not raised; use :meth:`unwrap` to get exception semantics instead.
    ``source`` is the parsed input a converted ``value`` was computed from
    (for a plain parse it equals ``value``).
    """

    value: float | None = None
    error: InputErrorKind | None = None
    source: float | None = None

    @classmethod
    def success(cls, value: float, source: float | None = None) -> ParseResult:
        return cls(value=value, source=value if source is None else source)

    @classmethod
    def failure(cls, kind: InputErrorKind) -> ParseResult:
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """The user-facing error message, or ``None`` on success."""
        return self.error.message if self.error is not None else None

    def unwrap(self) -> float:
        """Return the value or raise :class:`InputValidationError`."""
        if self.error is not None:
            raise InputValidationError(self.error)
        if self.value is None:
            raise ValueError("ParseResult holds neither a value nor an error")
        return self.value
