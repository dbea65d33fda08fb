"""
Unit Constants and Conversion Tables

Contains the fraction glyph tables, unit aliases and the US -> metric
conversion factors shared by the parser, scaler and converter.
"""

# Unicode fraction characters mapping (glyph -> decimal)
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,   # ½
    '\u2153': 1/3,   # ⅓
    '\u2154': 2/3,   # ⅔
    '\u00bc': 0.25,  # ¼
    '\u00be': 0.75,  # ¾
    '\u215b': 0.125,  # ⅛
}

# Quarter-count -> display glyph
QUARTER_GLYPHS = {
    0: '',
    1: '\u00bc',  # ¼
    2: '\u00bd',  # ½
    3: '\u00be',  # ¾
}

# Sentinel unit for "count of whole items"
ITEM_UNIT = 'item'

# Metric display unit
METRIC_UNIT = 'ml'

# Unit aliases (lowercase input -> canonical US unit)
UNIT_ALIASES = {
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'tbsp': 'tbsp', 'tbs': 'tbsp', 'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    'tsp': 'tsp', 'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'cup': 'cup', 'cups': 'cup',
    'dash': 'dash', 'dashes': 'dash',
}

# US unit -> ml per unit. 'dash' comes from config (DASH_TO_ML).
METRIC_CONVERSIONS = {
    'oz': 30,
    'tbsp': 15,
    'tsp': 5,
    'cup': 240,
}

# Words accepted as a real unit after a numeric amount. Anything else
# ("1 lime wheel") is part of the item and the unit is ITEM_UNIT.
KNOWN_UNITS = set(UNIT_ALIASES) | {
    'ml', 'cl', 'l', 'g', 'kg', 'lb', 'lbs',
    'pint', 'pints', 'quart', 'quarts',
    'sprig', 'sprigs', 'slice', 'slices', 'wedge', 'wedges',
    'wheel', 'wheels', 'twist', 'twists', 'leaf', 'leaves',
    'barspoon', 'barspoons', 'bsp', 'splash', 'splashes',
    'pinch', 'pinches', 'drop', 'drops', 'scoop', 'scoops',
    'shot', 'shots', 'part', 'parts', 'jigger', 'jiggers',
    'can', 'cans', 'bottle', 'bottles', 'bag', 'bags',
    'stick', 'sticks', 'piece', 'pieces', 'cube', 'cubes',
    'pod', 'pods', 'packet', 'packets', 'handful', 'handfuls',
}

# Largest amount read as a number; bigger values stay literal text
MAX_AMOUNT = 1e6
