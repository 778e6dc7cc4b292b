"""Fahrenheit/Celsius conversion with a bounded conversion history."""

from tempconv.engine import convert, parse_input
from tempconv.history import HistoryStore
from tempconv.models import (
    ConversionDirection,
    ConversionRecord,
    InputErrorKind,
    InputValidationError,
    ParseResult,
)
from tempconv.session import ConverterSession

__version__ = "0.1.0"

__all__ = [
    "ConversionDirection",
    "ConversionRecord",
    "ConverterSession",
    "HistoryStore",
    "InputErrorKind",
    "InputValidationError",
    "ParseResult",
    "__version__",
    "convert",
    "parse_input",
]
