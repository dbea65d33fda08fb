"""
Formatting Service

Composes parse -> scale -> convert into display-ready measurements,
plus the copy/share text built from them.
"""

import math

from models.measurement import DisplayMeasurement, Numeric, Literal, UnitSystem
from .conversion import convert_unit, get_conversion_factor
from .parsing import parse_ingredient
from .scaling import clamp_servings, scaled_value, to_nice_fraction


def format_measurement(measurement, servings, unit_system=UnitSystem.US,
                       dash_to_ml=None, servings_range=None):
    """
    Build the DisplayMeasurement for one parsed ingredient.

    Numeric amounts are scaled; in metric mode a convertible unit is
    converted from the unrounded scaled value. Literal amounts are shown
    as-is in both systems. `servings_range` is a (min, max) pair and
    `dash_to_ml` the dash factor; both default to the configured values.
    """
    servings = clamp_servings(servings, *(servings_range or ()))
    unit_system = UnitSystem.coerce(unit_system)
    amount = measurement.amount
    unit = measurement.unit

    if isinstance(amount, Literal):
        display_amount = amount.text
    elif isinstance(amount, Numeric):
        value = scaled_value(amount, servings, servings_range)
        display_amount = to_nice_fraction(value)
        factor = get_conversion_factor(unit, dash_to_ml)
        if unit_system is UnitSystem.METRIC and factor is not None:
            metric_amount, metric_unit = convert_unit(unit, value, dash_to_ml)
            if math.isfinite(metric_amount):
                display_amount = str(int(metric_amount))
                unit = metric_unit
    else:
        raise TypeError(f"Unsupported amount type: {type(amount).__name__}")

    return DisplayMeasurement(display_amount, unit, measurement.item, measurement.note)


def format_line(measurement, servings, unit_system=UnitSystem.US, **options):
    return format_measurement(measurement, servings, unit_system, **options).line


def format_recipe(lines, servings, unit_system=UnitSystem.US, descriptors=None, **options):
    """
    Parse and format an ordered list of raw ingredient lines.

    Extra keyword options (`dash_to_ml`, `servings_range`) go to
    format_measurement.
    """
    return [
        format_measurement(parse_ingredient(line, descriptors), servings, unit_system, **options)
        for line in lines
    ]


def build_copy_text(name, lines, servings, unit_system=UnitSystem.US, descriptors=None, **options):
    """Clipboard text: the recipe name with its serving count, then one '- ' line per ingredient."""
    servings = clamp_servings(servings, *(options.get('servings_range') or ()))
    displayed = format_recipe(lines, servings, unit_system, descriptors, **options)
    body = '\n'.join(f"- {d.line}" for d in displayed)
    header = f"{name} (serves {servings})"
    return f"{header}\n{body}" if body else header


def build_preview_text(name, lines, servings, unit_system=UnitSystem.US, limit=4,
                       descriptors=None, **options):
    """Share text: the name, the first `limit` ingredients, then a count of the rest."""
    displayed = format_recipe(lines, servings, unit_system, descriptors, **options)
    preview = ' • '.join(d.line for d in displayed[:limit])
    text = f"{name}\n{preview}" if preview else name
    remaining = len(displayed) - limit
    if remaining > 0:
        text = f"{text} …plus {remaining} more"
    return text
