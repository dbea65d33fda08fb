"""
Conversion Service

US customary -> metric conversion for display. Conversion is total:
units without a metric factor pass through unchanged.
"""

from config import get_config
from constants import UNIT_ALIASES, METRIC_CONVERSIONS, METRIC_UNIT
from .scaling import round_half_away


def standardize_unit(unit):
    """Map a unit string to its canonical US unit, or None if unknown."""
    if not unit:
        return None
    key = str(unit).strip().lower().rstrip('.')
    return UNIT_ALIASES.get(key)


def get_conversion_factor(unit, dash_to_ml=None):
    """Return ml per unit, or None when the unit has no metric equivalent."""
    canonical = standardize_unit(unit)
    if canonical is None:
        return None
    if canonical == 'dash':
        if dash_to_ml is None:
            dash_to_ml = get_config().DASH_TO_ML
        return dash_to_ml
    return METRIC_CONVERSIONS.get(canonical)


def is_convertible(unit):
    return get_conversion_factor(unit) is not None


def convert_unit(unit, amount, dash_to_ml=None):
    """
    Convert (unit, amount) to metric for display.

    Returns (amount, unit). Known units come back as whole ml; unknown
    units come back exactly as given.
    """
    factor = get_conversion_factor(unit, dash_to_ml)
    if factor is None:
        return amount, unit
    return float(round_half_away(amount * factor)), METRIC_UNIT
