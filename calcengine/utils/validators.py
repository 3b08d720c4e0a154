"""
General-purpose validation utilities for calculator inputs.

These helpers keep NaN / Infinity / absurdly large values that arrive in
query strings from propagating through calculator logic and into pages.
None of them raise: bad input always resolves to a fallback.
"""

import math
from typing import Any, Sequence

# Values larger than this are treated as garbage input
MAX_MAGNITUDE = 1e15


def safe_number(value: Any, minimum: float, maximum: float, fallback: float) -> float:
    """
    Parse and clamp a numeric value to a safe range.

    Args:
        value: Raw value (string from a query string, number, or None)
        minimum: Lowest allowed value
        maximum: Highest allowed value
        fallback: Returned when the value cannot be parsed, is not finite,
            or its magnitude exceeds MAX_MAGNITUDE

    Returns:
        The parsed value clamped to [minimum, maximum], or the fallback
    """
    if value is None or isinstance(value, bool):
        return fallback
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(number) or abs(number) > MAX_MAGNITUDE:
        return fallback
    return min(max(number, minimum), maximum)


def safe_enum(value: Any, allowed: Sequence[str], fallback: str) -> str:
    """Return value if it is one of the allowed options, otherwise the fallback."""
    return value if value in allowed else fallback


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """Division that returns the fallback instead of raising or producing Infinity/NaN."""
    if denominator == 0 or not math.isfinite(numerator) or not math.isfinite(denominator):
        return fallback
    result = numerator / denominator
    return result if math.isfinite(result) else fallback


def clamp_result(value: float, maximum: float = MAX_MAGNITUDE) -> float:
    """Clamp a calculation result so absurdly large numbers are never displayed."""
    if not math.isfinite(value):
        return 0.0
    return math.copysign(min(abs(value), maximum), value)
