"""Exceptions raised by tempconv."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tempconv.models.conversion import InputErrorKind


class TempconvError(Exception):
    """Base class for tempconv errors."""


class InputValidationError(TempconvError):
    """Raised when a failed :class:`ParseResult` is unwrapped."""

    def __init__(self, kind: InputErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind
