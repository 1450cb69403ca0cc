"""Scalar-to-text formatting, one formatter per scalar kind."""

import ctypes
import json
import math
import struct
from decimal import Decimal
from typing import Any, Callable

from .kinds import Kind


def _native(value: Any) -> Any:
    """Unwrap ctypes scalars to their Python value."""
    if isinstance(value, ctypes._SimpleCData):
        return value.value
    return value


def quote(text: str) -> str:
    """Double-quote text with JSON escaping; non-ASCII is kept as-is."""
    return json.dumps(text, ensure_ascii=False)


def _positional(digits: str) -> str:
    """
    Rewrite a shortest-digits float literal without an exponent.

    Trailing fractional zeros are dropped, so "3.0" becomes "3" and
    "1e+21" becomes "1000000000000000000000".
    """
    text = format(Decimal(digits), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _non_finite(number: float) -> str | None:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    return None


def _to_float32(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


def format_int(value: Any) -> str:
    return str(int(_native(value)))


def format_uint(value: Any) -> str:
    # ctypes already wraps negatives into the unsigned range
    return str(int(_native(value)))


def format_float64(value: Any) -> str:
    number = float(_native(value))
    special = _non_finite(number)
    if special is not None:
        return special
    # repr() yields the shortest digits that round-trip a double
    return _positional(repr(number))


def format_float32(value: Any) -> str:
    """
    Format at 32-bit precision.

    Picks the fewest significant digits whose parse rounds back to the same
    float32, e.g. c_float(0.1) is "0.1" rather than "0.10000000149011612".
    """
    number = _to_float32(float(_native(value)))
    special = _non_finite(number)
    if special is not None:
        return special
    # 9 significant digits always round-trip a float32
    for precision in range(9):
        digits = f"{number:.{precision}e}"
        if _to_float32(float(digits)) == number:
            return _positional(digits)
    return _positional(f"{number:.8e}")


def format_bool(value: Any) -> str:
    return "true" if _native(value) else "false"


def format_string(value: Any) -> str:
    # str subclasses (e.g. str-mixin enums) render their string content
    return quote(str.__str__(value))


def format_other(value: Any) -> str:
    return str(value)


SCALAR_FORMATTERS: dict[Kind, Callable[[Any], str]] = {
    Kind.INT: format_int,
    Kind.UINT: format_uint,
    Kind.FLOAT32: format_float32,
    Kind.FLOAT64: format_float64,
    Kind.BOOL: format_bool,
    Kind.STRING: format_string,
    Kind.OTHER: format_other,
}


def format_scalar(kind: Kind, value: Any) -> str:
    """
    Render a scalar value of the given kind.

    Args:
        kind: One of the scalar kinds
        value: The value classified as that kind

    Returns:
        Text to emit; only strings come back quoted

    Raises:
        KeyError: If kind is not a scalar kind
    """
    return SCALAR_FORMATTERS[kind](value)
