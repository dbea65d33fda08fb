# Utility modules for the measurement API
from .sanitizer import sanitize_recipe_name, sanitize_ingredient_text
