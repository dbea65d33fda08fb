"""
Scaling Service

Scales parsed amounts by a servings multiplier and renders them as
quarter-rounded fraction strings ("1 ½", "¾", "3").
"""

import math

from config import get_config
from constants import QUARTER_GLYPHS
from models.measurement import Measurement, Numeric, Literal


def clamp_servings(n, min_servings=None, max_servings=None):
    """Clamp a servings count into the configured range (default 1-6)."""
    cfg = get_config()
    lo = cfg.SERVINGS_MIN if min_servings is None else min_servings
    hi = cfg.SERVINGS_MAX if max_servings is None else max_servings
    try:
        n = int(n)
    except (TypeError, ValueError, OverflowError):
        return lo
    return max(lo, min(hi, n))


def round_half_away(x):
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def to_nice_fraction(value):
    """Convert a decimal to the nearest quarter as a display string."""
    if not math.isfinite(value * 4):
        return str(value)
    rounded = round_half_away(value * 4) / 4
    sign = '-' if rounded < 0 else ''
    rounded = abs(rounded)

    whole = math.trunc(rounded)
    quarter = int(round_half_away((rounded - whole) * 4))
    glyph = QUARTER_GLYPHS[quarter]

    if not whole and glyph:
        return f"{sign}{glyph}"
    if whole and glyph:
        return f"{sign}{whole} {glyph}"
    if not whole:
        return '0'
    return f"{sign}{whole}"


def scaled_value(amount, servings, servings_range=None):
    """Return amount * servings (servings clamped) without rounding."""
    if isinstance(amount, Numeric):
        amount = amount.value
    return amount * clamp_servings(servings, *(servings_range or ()))


def scale_amount(amount, servings, servings_range=None):
    """
    Scale an amount for display.

    Numeric amounts (or bare numbers) are multiplied and rounded to a nice
    fraction. Literal amounts are returned unchanged.
    """
    if isinstance(amount, Literal):
        return amount.text
    return to_nice_fraction(scaled_value(amount, servings, servings_range))


def scale_measurement(measurement, servings):
    """Return a new Measurement whose amount is the scaled display string."""
    return Measurement(
        Literal(scale_amount(measurement.amount, servings)),
        measurement.unit,
        measurement.item,
        measurement.note,
    )


def scale_measurements(measurements, servings):
    """Scale a list of measurements by the same servings count."""
    return [scale_measurement(m, servings) for m in measurements]
