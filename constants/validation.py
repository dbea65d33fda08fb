"""
Validation Constants

Whitelist values for validating API input.
"""

# Accepted unit system names (lowercase) -> canonical value
VALID_UNIT_SYSTEMS = {
    'us': 'us',
    'imperial': 'us',
    'metric': 'metric',
}

# Maximum field lengths
MAX_LENGTHS = {
    'recipe_name': 200,
    'ingredient_text': 500,
}

# Maximum ingredient lines accepted per request
MAX_INGREDIENT_LINES = 100
