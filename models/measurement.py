"""
Measurement Models

Immutable records produced by the ingredient parser and the display
records derived from them on every render.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Union

from constants import VALID_UNIT_SYSTEMS


@dataclass(frozen=True)
class Numeric:
    """A successfully parsed quantity."""
    value: float

    def __str__(self):
        if self.value == int(self.value):
            return str(int(self.value))
        return str(self.value)


@dataclass(frozen=True)
class Literal:
    """An amount token that is not a number ("2-3", "As"), kept verbatim."""
    text: str

    def __str__(self):
        return self.text


Amount = Union[Numeric, Literal]


class UnitSystem(enum.Enum):
    US = 'us'
    METRIC = 'metric'

    @classmethod
    def coerce(cls, value):
        """
        Accept a UnitSystem or a name such as 'us', 'imperial', 'metric'.

        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            canonical = VALID_UNIT_SYSTEMS.get(value.strip().lower())
            if canonical is not None:
                return cls(canonical)
        raise ValueError(f"Unknown unit system: {value!r}")


@dataclass(frozen=True)
class Measurement:
    """One parsed ingredient line: amount, unit, item and optional note."""
    amount: Amount
    unit: str
    item: str
    note: Optional[str] = None

    def to_dict(self):
        if isinstance(self.amount, Numeric):
            amount = self.amount.value
        else:
            amount = self.amount.text
        return {
            'amount': amount,
            'unit': self.unit,
            'item': self.item,
            'note': self.note,
        }


@dataclass(frozen=True)
class DisplayMeasurement:
    """A render-ready measurement. Recomputed on every render, never stored."""
    amount: str
    unit: str
    item: str
    note: Optional[str] = None

    @property
    def line(self):
        text = ' '.join(part for part in (self.amount, self.unit, self.item) if part)
        if self.note:
            text = f"{text} — {self.note}"
        return text

    def to_dict(self):
        return {
            'amount': self.amount,
            'unit': self.unit,
            'item': self.item,
            'note': self.note,
            'line': self.line,
        }
