"""Generic value conversions shared by the scalar definitions.

Wire values reach the scalars from JSON decoders, resolvers, and custom
objects, so the conversions follow the loose rules GraphQL clients expect:

- :func:`to_number`: numeric conversion.  Numeric strings (decimal,
  exponent, ``Infinity``, ``0x``/``0o``/``0b``) convert, blank strings are
  zero, anything unconvertible is NaN.
- :func:`to_display_string`: string conversion.  Booleans render as
  ``true``/``false``, integral floats drop their ``.0``, sequences join
  with commas.
- :func:`to_boolean`: truthiness, with NaN treated as false.
"""

from __future__ import annotations

import math
import operator
import re
from typing import Any

_DECIMAL_RE = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)$", re.ASCII
)
_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)

_RADIX_PREFIXES: dict[str, tuple[int, re.Pattern[str]]] = {
    "0x": (16, re.compile(r"^[0-9a-fA-F]+$")),
    "0o": (8, re.compile(r"^[0-7]+$")),
    "0b": (2, re.compile(r"^[01]+$")),
}

# Floats at or above this magnitude render in exponent form.
_EXPONENT_THRESHOLD = 1e21


def is_nan(num: int | float) -> bool:
    """Return True if *num* is the float NaN."""
    return isinstance(num, float) and math.isnan(num)


def _string_to_number(text: str) -> int | float:
    text = text.strip()
    if not text:
        return 0

    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        base, digits = radix
        if digits.match(text[2:]):
            return int(text[2:], base)
        return math.nan

    if not _DECIMAL_RE.match(text):
        return math.nan
    if _INTEGER_RE.match(text):
        try:
            return int(text)
        except ValueError:
            # Beyond the int string-conversion digit limit.
            return float(text)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def to_number(value: Any) -> int | float:
    """Convert *value* to a number, returning NaN when it has no numeric form."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _string_to_number(value)
    try:
        if hasattr(value, "__index__"):
            return operator.index(value)
        if hasattr(value, "__float__"):
            return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan
    return math.nan


def _float_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def _int_to_string(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # Too many digits to render exactly; anything that long is past the
        # double range.
        return "Infinity" if value > 0 else "-Infinity"


def to_display_string(value: Any) -> str:
    """Convert *value* to its wire string form."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_string(value)
    if isinstance(value, int):
        return _int_to_string(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_display_string(item) for item in value)
    return str(value)


def to_boolean(value: Any) -> bool:
    """Convert *value* to a bool by truthiness; NaN is false."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)
