"""
Ingredient Constants

Descriptor words per drink domain. A descriptor in the unit position
("1 fresh lime") is folded back into the item name.
"""

OPTIONAL_MARKER = '(optional)'
OPTIONAL_NOTE = 'optional'

DEFAULT_DESCRIPTOR_SET = 'cocktails'

DESCRIPTOR_SETS = {
    'cocktails': frozenset({'fresh', 'large', 'simple', 'rich', 'dry'}),
    'daiquiri': frozenset({'fresh', 'large', 'simple', 'rich', 'dry'}),
    'martinis': frozenset({'fresh', 'large', 'sugar', 'simple', 'sweet', 'dry'}),
    'mocktails': frozenset({'fresh', 'whole', 'large', 'sugar', 'white'}),
    'rum': frozenset({'fresh', 'white', 'dark', 'gold', 'aged', 'light'}),
    'whiskey': frozenset({'fresh', 'large', 'premium', 'angostura', 'maraschino', 'simple', 'sugar'}),
    'scotch': frozenset({'blended', 'highland', 'islay', 'irish', 'fresh', 'sweet', 'honey'}),
    'seasonal': frozenset({'bourbon', 'fresh', 'vodka', 'vanilla', 'blanco', 'hot', 'heavy', 'lightly'}),
    'coffee': frozenset({'cold', 'specialty', 'fresh', 'brewed', 'strong', 'double', 'vanilla', 'chocolate'}),
    'espresso': frozenset({'fresh', 'hot', 'cold', 'steamed', 'foamed'}),
    'iced-coffee': frozenset({'cold', 'iced', 'fresh', 'brewed', 'strong', 'double', 'vanilla', 'chocolate'}),
    'cold-brew': frozenset({'cold', 'fresh', 'brewed', 'chilled', 'ice-cold'}),
    'tea': frozenset({'hot', 'green', 'black', 'herbal', 'white', 'oolong', 'fresh', 'brewed'}),
}
