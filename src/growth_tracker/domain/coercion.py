"""Lenient conversions for user-entered and persisted field values."""

import math


def to_float(value: object) -> float:
    """Return a finite float, or 0.0 for anything that isn't one."""
    if isinstance(value, int | float):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip().replace(",", ""))
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(result):
        return 0.0
    return result


def to_int(value: object) -> int:
    """Return an integer, truncating fractions and defaulting to 0."""
    return int(to_float(value))


def to_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
