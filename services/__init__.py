"""
Services Package

Measurement engine: parse, scale, convert and format ingredient lines.
"""

from .parsing import (
    display_to_decimal,
    get_descriptors,
    parse_amount,
    parse_ingredient,
    parse_ingredients,
)

from .scaling import (
    clamp_servings,
    round_half_away,
    to_nice_fraction,
    scaled_value,
    scale_amount,
    scale_measurement,
    scale_measurements,
)

from .conversion import (
    standardize_unit,
    get_conversion_factor,
    is_convertible,
    convert_unit,
)

from .formatting import (
    format_measurement,
    format_line,
    format_recipe,
    build_copy_text,
    build_preview_text,
)

__all__ = [
    # Parsing
    'display_to_decimal',
    'get_descriptors',
    'parse_amount',
    'parse_ingredient',
    'parse_ingredients',
    # Scaling
    'clamp_servings',
    'round_half_away',
    'to_nice_fraction',
    'scaled_value',
    'scale_amount',
    'scale_measurement',
    'scale_measurements',
    # Conversion
    'standardize_unit',
    'get_conversion_factor',
    'is_convertible',
    'convert_unit',
    # Formatting
    'format_measurement',
    'format_line',
    'format_recipe',
    'build_copy_text',
    'build_preview_text',
]
