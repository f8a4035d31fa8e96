from __future__ import annotations

import math
import re

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(
    r"[+-]?(?:[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)|[nN][aA][nN]"
)


def parse_flag(value: object) -> bool:
    """Checkbox semantics: only the literal "1" is on."""
    if isinstance(value, bool):
        return value
    return value == "1"


def parse_int_or(value: object, fallback: int = 0) -> int:
    """Parse a base-10 integer, returning `fallback` when the text is not one.

    Accepts an optional sign and ASCII digits only (no whitespace, no
    underscores) and rejects values outside the signed 64-bit range.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str) or not _INTEGER_RE.fullmatch(value):
        return fallback

    number = int(value)
    if number < _INT64_MIN or number > _INT64_MAX:
        return fallback
    return number


def parse_float_or(value: object, fallback: float = 1.0) -> float:
    """Parse a decimal or hex float, returning `fallback` when the text is not one.

    The grammar is ASCII only: decimal with optional fraction and exponent,
    hex floats with a binary exponent ("0x1p-1"), signed "inf"/"infinity"
    and unsigned "nan". An overflow to infinity is a failure.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        return fallback

    if _SPECIAL_FLOAT_RE.fullmatch(value):
        return float(value)

    if _DECIMAL_FLOAT_RE.fullmatch(value):
        number = float(value)
    elif _HEX_FLOAT_RE.fullmatch(value):
        try:
            number = float.fromhex(value)
        except OverflowError:
            return fallback
    else:
        return fallback

    if math.isinf(number):
        return fallback
    return number
