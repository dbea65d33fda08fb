"""
Parsing Service

Functions for parsing ingredient lines into Measurement records.
Parsing is total: malformed text degrades to a Literal amount, never raises.
"""

import logging
import math
import re

from config import get_config
from constants import (
    UNICODE_FRACTIONS, ITEM_UNIT, KNOWN_UNITS, MAX_AMOUNT, OPTIONAL_MARKER, OPTIONAL_NOTE,
    DESCRIPTOR_SETS, DEFAULT_DESCRIPTOR_SET,
)
from models.measurement import Measurement, Numeric, Literal

logger = logging.getLogger(__name__)

# "cup of sugar" -> "cup sugar" (first occurrence only)
OF_PATTERN = re.compile(r'\s+of\s+', re.IGNORECASE)

# "(30g)" -> "30g", but leave "(optional)" alone
PAREN_GROUP = re.compile(r'\((?!optional\))([^()]*)\)', re.IGNORECASE)

OPTIONAL_PATTERN = re.compile(re.escape(OPTIONAL_MARKER), re.IGNORECASE)

DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def get_descriptors(domain=None, default=None):
    """
    Return the descriptor word set for a drink domain.

    Unknown or missing domains use `default`, then the configured
    DEFAULT_DESCRIPTOR_SET.
    """
    if default is None:
        default = get_config().DEFAULT_DESCRIPTOR_SET
    for name in (domain, default):
        if isinstance(name, str) and name.lower() in DESCRIPTOR_SETS:
            return DESCRIPTOR_SETS[name.lower()]
    return DESCRIPTOR_SETS[DEFAULT_DESCRIPTOR_SET]


def parse_amount(token):
    """Parse an amount token: fraction glyph, decimal number, or Literal."""
    if token in UNICODE_FRACTIONS:
        return Numeric(UNICODE_FRACTIONS[token])
    if DECIMAL_PATTERN.match(token):
        value = float(token)
        if math.isfinite(value) and abs(value) <= MAX_AMOUNT:
            return Numeric(value)
    logger.debug("Amount %r is not numeric, keeping it as a literal", token)
    return Literal(token)


def display_to_decimal(text):
    """
    Read a rendered display amount back into a float.

    Handles "3", "1.5", "½", "1 ½" and "-¼". Returns None when the text
    is not a number (e.g. a literal like "2-3").
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None

    sign = 1.0
    if text.startswith('-'):
        sign = -1.0
        text = text[1:].strip()

    total = 0.0
    parts = text.split()
    if not parts or len(parts) > 2:
        return None
    for i, part in enumerate(parts):
        if part in UNICODE_FRACTIONS:
            if i != len(parts) - 1:
                return None
            total += UNICODE_FRACTIONS[part]
        elif DECIMAL_PATTERN.match(part) and i == 0:
            total += float(part)
        else:
            return None
    return sign * total


def is_item_word(word, amount, descriptors):
    """
    True when the word after the amount belongs to the item, not the unit.

    Descriptors ("fresh", "large") always do. After a numeric amount, so
    does any word that is not a known unit ("1 lime wheel"). After a
    literal amount ("Absinthe rinse") the second word is kept as given.
    """
    key = word.lower()
    if key in descriptors:
        return True
    return isinstance(amount, Numeric) and key.rstrip('.') not in KNOWN_UNITS


def _strip_optional(item):
    if not OPTIONAL_PATTERN.search(item):
        return item, None
    item = OPTIONAL_PATTERN.sub(' ', item)
    item = ' '.join(item.split())
    return item, OPTIONAL_NOTE


def parse_ingredient(line, descriptors=None):
    """
    Parse an ingredient line like '2 oz Bourbon' into a Measurement.

    The first token is the amount, the second the unit, the rest the item.
    Lines with fewer than two tokens are a single whole item ("Ice").
    A descriptor word in the unit position ("1 Fresh lime") is folded
    back into the item and the unit becomes the 'item' sentinel.
    """
    if line is None:
        line = ''
    if descriptors is None:
        descriptors = get_descriptors()

    text = str(line).strip()
    text = OF_PATTERN.sub(' ', text, count=1)
    text = PAREN_GROUP.sub(r'\1', text)

    parts = text.split()
    if len(parts) < 2:
        return Measurement(Numeric(1.0), ITEM_UNIT, str(line).strip())

    amount = parse_amount(parts[0])
    unit = parts[1]
    item = ' '.join(parts[2:])

    if is_item_word(unit, amount, descriptors):
        item = ' '.join(p for p in (unit, item) if p)
        unit = ITEM_UNIT

    item, note = _strip_optional(item)
    return Measurement(amount, unit, item, note)


def parse_ingredients(lines, descriptors=None):
    """Parse an ordered list of ingredient lines."""
    return [parse_ingredient(line, descriptors) for line in lines]
