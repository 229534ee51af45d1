"""Scalar helpers shared by the color math.

Integer channels are rounded half-up (``floor(x + 0.5)``) everywhere so that
midpoints such as ``127.5`` land on the same byte no matter which side of the
gradient they were interpolated from.
"""

import math

# Fractions produced by angle arithmetic carry binary noise (0.49999999999999994
# instead of 0.5). Interpolation factors are trimmed to this many places first.
FRACTION_PLACES = 12


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(x + 0.5)


def clamp(x: float, lower: float, upper: float) -> float:
    """Clamp ``x`` into ``[lower, upper]``."""
    if x < lower:
        return lower
    if x > upper:
        return upper
    return x


def trim_fraction(p: float) -> float:
    """Drop float noise from an interpolation factor."""
    return round(p, FRACTION_PLACES)
