"""
Display rounding helpers.

Python's built-in round() uses banker's rounding (2.5 -> 2). Every rounded
figure shown to users here rounds half up (2.5 -> 3, -2.5 -> -2), so the
helpers below are used instead of round() throughout the calculators.
"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round a number to the given number of decimal places, ties toward +infinity.

    Args:
        value: Number to round
        digits: Decimal places to keep (0 for whole dollars, 2 for cents)

    Returns:
        Rounded value (non-finite values are returned unchanged)
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def to_cents(value: float) -> float:
    """Round a currency amount to the cent."""
    return round_half_up(value, 2)
