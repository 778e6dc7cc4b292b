"""Input parsing and conversion dispatch.

Everything here is a pure function: no state is kept between calls and
failures come back as :class:`ParseResult` values rather than exceptions.
"""

from __future__ import annotations

import logging
import math
import re

from tempconv._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius
from tempconv.models.conversion import ConversionDirection, InputErrorKind, ParseResult

logger = logging.getLogger(__name__)

# Optional leading minus, digits, at most one decimal point, digits.
_NUMBER_RE = re.compile(r"-?\d*\.?\d*", re.ASCII)

_FORMULAS = {
    ConversionDirection.F_TO_C: fahrenheit_to_celsius,
    ConversionDirection.C_TO_F: celsius_to_fahrenheit,
}


def parse_input(raw: str) -> ParseResult:
    """Parse user-entered text into a temperature value.

    Leading and trailing whitespace is ignored.  Values below absolute zero
    are accepted; no plausibility check is made.
    """
    text = raw.strip()
    if not text:
        return ParseResult.failure(InputErrorKind.EMPTY_INPUT)

    if _NUMBER_RE.fullmatch(text) is None or not any(ch.isdigit() for ch in text):
        logger.debug("Rejected non-numeric input %r", text)
        return ParseResult.failure(InputErrorKind.NOT_A_NUMBER)

    value = float(text)
    if not math.isfinite(value):
        # Too many digits for a float
        logger.debug("Rejected out-of-range input %r", text)
        return ParseResult.failure(InputErrorKind.NOT_A_NUMBER)
    return ParseResult.success(value)


def apply_formula(value: float, direction: ConversionDirection) -> float:
    """Convert an already-parsed *value* in *direction*."""
    return _FORMULAS[direction](value)


def convert(raw: str, direction: ConversionDirection) -> ParseResult:
    """Parse *raw* and apply the formula for *direction*.

    On success ``value`` is the converted temperature and ``source`` the
    parsed input.  A result that overflows the float range fails with
    ``NOT_A_NUMBER`` like any other unrepresentable input.
    """
    parsed = parse_input(raw)
    if parsed.error is not None:
        return parsed

    source = parsed.unwrap()
    output = apply_formula(source, direction)
    if not math.isfinite(output):
        logger.debug("Conversion of %r overflowed (%s)", source, direction.label)
        return ParseResult.failure(InputErrorKind.NOT_A_NUMBER)
    return ParseResult.success(output, source=source)
