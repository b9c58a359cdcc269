"""
Numeric helpers shared by the analyzers.

Scores are rounded half-up (2.5 -> 3, -2.5 -> -2) rather than with Python's
banker's rounding so that reported values stay stable at .5 boundaries.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties toward positive infinity."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    """Constrain ``value`` to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


def percentage(part: float, whole: float) -> float:
    """Return ``part`` as a percentage of ``whole`` (0.0 when whole is zero)."""
    if whole <= 0:
        return 0.0
    return part / whole * 100
