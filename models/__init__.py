"""
Models Package

Exports the measurement records shared by the services and the API.
"""

from .measurement import (
    Numeric,
    Literal,
    Amount,
    UnitSystem,
    Measurement,
    DisplayMeasurement,
)

__all__ = [
    'Numeric',
    'Literal',
    'Amount',
    'UnitSystem',
    'Measurement',
    'DisplayMeasurement',
]
