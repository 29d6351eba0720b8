"""Text to bounded integer conversion used by option handlers."""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MAX_DIGITS = len(str(INT32_MAX))


class NumberConversionError(ValueError):
    """Raised when text cannot be converted to a 32-bit signed integer."""


def parse_int32(text: str | None) -> int:
    """Convert decimal text to an int within the signed 32-bit range."""
    if not text:
        raise NumberConversionError("empty value is not a number")
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise NumberConversionError(f"'{text}' is not a decimal integer")

    if len(text.lstrip("+-").lstrip("0")) > _INT32_MAX_DIGITS:
        raise NumberConversionError(f"'{text}' is outside the 32-bit integer range")

    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        raise NumberConversionError(f"'{text}' is outside the 32-bit integer range")
    return value
