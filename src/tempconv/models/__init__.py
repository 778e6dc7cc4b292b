from __future__ import annotations

from tempconv.errors import InputValidationError
from tempconv.models.config import DEFAULT_HISTORY_CAPACITY, AppSettings
from tempconv.models.conversion import (
    ConversionDirection,
    ConversionRecord,
    InputErrorKind,
    ParseResult,
)

__all__ = [
    # config
    "DEFAULT_HISTORY_CAPACITY",
    "AppSettings",
    # conversion
    "ConversionDirection",
    "ConversionRecord",
    "InputErrorKind",
    "InputValidationError",
    "ParseResult",
]
