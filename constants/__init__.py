"""
Constants Package

Shared lookup tables for parsing, scaling and unit conversion.
"""

from .units import (
    UNICODE_FRACTIONS,
    QUARTER_GLYPHS,
    ITEM_UNIT,
    METRIC_UNIT,
    UNIT_ALIASES,
    KNOWN_UNITS,
    MAX_AMOUNT,
    METRIC_CONVERSIONS,
)

from .ingredients import (
    OPTIONAL_MARKER,
    OPTIONAL_NOTE,
    DEFAULT_DESCRIPTOR_SET,
    DESCRIPTOR_SETS,
)

from .validation import (
    VALID_UNIT_SYSTEMS,
    MAX_LENGTHS,
    MAX_INGREDIENT_LINES,
)
