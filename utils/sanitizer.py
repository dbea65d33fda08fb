"""
Input Sanitization Module

Cleans ingredient lines and recipe names received by the API before
they reach the parser. Output is plain text, so nothing is escaped.
"""

import re

from constants import MAX_LENGTHS

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_recipe_name(name, max_length=None):
    """
    Sanitize a recipe name for copy/share text.

    Args:
        name: The recipe name to sanitize
        max_length: Maximum allowed length (default MAX_LENGTHS['recipe_name'])

    Returns:
        Sanitized recipe name, 'Recipe' when nothing is left
    """
    if max_length is None:
        max_length = MAX_LENGTHS['recipe_name']

    if not name:
        return 'Recipe'

    if not isinstance(name, str):
        name = str(name)

    name = name.strip()
    name = CONTROL_CHARS.sub('', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name)

    if len(name) > max_length:
        name = name[:max_length-3] + '...'

    if not name:
        return 'Recipe'

    return name


def sanitize_ingredient_text(text, max_length=None):
    """
    Sanitize one ingredient line before parsing.

    Unicode fraction glyphs, parentheses and "&" are kept; control
    characters are removed and the line is length-capped.
    """
    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_text']

    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = text.strip()
    text = CONTROL_CHARS.sub('', text)

    if len(text) > max_length:
        text = text[:max_length]

    return text
