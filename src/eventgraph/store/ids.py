"""
Record id helpers.

Seed records carry integer ids while ids coming in over GraphQL are always
strings, so lookups compare ids loosely: ``1``, ``"1"`` and ``" 1 "`` all
refer to the same record.
"""

import math
import re
import uuid
from typing import Any

RecordId = int | float | str

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}
_RADIX_DIGITS = re.compile(r"[0-9a-zA-Z]+")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _as_number(value: Any) -> float | None:
    """Convert an id to a number the way a JavaScript ``Number()`` call does.

    Accepts decimal literals, ``0x``/``0o``/``0b`` integers and ``Infinity``.
    Python-only spellings such as ``"inf"``, ``"nan"`` or ``"1_000"`` are
    not numbers. Returns ``None`` for anything that does not convert.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text in _INFINITY:
            return _INFINITY[text]
        base = _RADIX_PREFIXES.get(text[:2].lower())
        if base is not None:
            if not _RADIX_DIGITS.fullmatch(text[2:]):
                return None
            try:
                return float(int(text[2:], base))
            except ValueError:
                return None
        if _DECIMAL.fullmatch(text):
            return float(text)
        return None
    return None


def ids_match(left: Any, right: Any) -> bool:
    """Compare two ids, coercing a numeric side and a string side to numbers.

    Two strings compare as strings, so ``"1"`` and ``"01"`` differ while
    ``1`` and ``"01"`` match. ``None`` only matches ``None``.
    """
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, str) and isinstance(right, str):
        return left == right

    left_num = _as_number(left)
    right_num = _as_number(right)
    if left_num is None or right_num is None or math.isnan(left_num):
        return False
    return left_num == right_num


def new_record_id() -> str:
    """Generate an id for a newly created record."""
    return str(uuid.uuid4())
