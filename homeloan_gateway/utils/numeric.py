"""Numeric coercion utilities for raw form values"""

import math
from typing import Any


def to_amount(value: Any) -> float:
    """
    Coerce a raw form value to a finite float.

    None, empty strings, unparsable text, NaN and +/-inf all become 0.0.
    Strings may carry whitespace, thousands separators and a leading "$".
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        cleaned = value.strip().replace(",", "").lstrip("$").strip()
        if not cleaned:
            return 0.0
        value = cleaned

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0

    return number if math.isfinite(number) else 0.0


def to_non_negative(value: Any) -> float:
    """Coerce to a finite float and clamp negatives to zero"""
    return max(to_amount(value), 0.0)


def to_count(value: Any, minimum: int = 0) -> int:
    """Coerce to a whole count (truncated toward zero), floored at minimum"""
    return max(int(to_amount(value)), minimum)


def to_flag(value: Any) -> bool:
    """Coerce checkbox-style values ("on", "true", "1", "yes") to bool"""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on", "y"}
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return bool(value)


def finite_or_zero(value: float) -> float:
    """Clamp a computed result: NaN, infinities and negatives become 0.0"""
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value
