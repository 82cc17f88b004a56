"""Truthiness and type coercion for resolved variable values.

Values reaching these helpers come either from the environment (always
strings) or from a defaults table and caller fallbacks (any type). Numeric
parsing reads the leading literal of a string and ignores trailing text, so
``"8080/tcp"`` converts to ``8080``.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from typedenv.errors import TypeConversionError

__all__ = ["has_value", "is_truthy", "to_string", "to_int", "to_float", "to_array"]

_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def has_value(value: Any) -> bool:
    """Whether a defaults table entry is set: None, empty containers, zero and NaN are not."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def is_truthy(value: Any) -> bool:
    """Loose truthiness for resolved values: like has_value, but the string "0" is unset too."""
    if isinstance(value, str) and value == "0":
        return False
    return has_value(value)


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_as_text(item) for item in value)
    return str(value)


def to_string(value: Any) -> str:
    """Render any value as a string."""
    return _as_text(value)


def to_int(value: Any) -> int:
    """Convert a value to int, truncating numbers and parsing string prefixes."""
    if isinstance(value, bool):
        raise TypeConversionError(value, "int")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeConversionError(value, "int")
        return math.trunc(value)

    match = _INT_PREFIX.match(_as_text(value))
    if match is None:
        raise TypeConversionError(value, "int")
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        parsed = int(digits, 16)
    else:
        parsed = int(digits)
    return -parsed if sign == "-" else parsed


def to_float(value: Any) -> float:
    """Convert a value to float, parsing the leading decimal literal of strings."""
    if isinstance(value, bool):
        raise TypeConversionError(value, "float")
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    match = _FLOAT_PREFIX.match(_as_text(value))
    if match is None:
        raise TypeConversionError(value, "float")
    return float(match.group(1).replace("Infinity", "inf"))


def to_array(value: Any) -> list[Any]:
    """Convert a value to a list.

    Sequences are copied as-is. Strings holding a JSON array are decoded;
    any other string is split on commas. This never fails.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            decoded = None
        if isinstance(decoded, list):
            return decoded
        return value.split(",")
    return _as_text(value).split(",")
