"""
Recipe Text - deterministic recipe extraction from OCR or pasted text.

Handles English and Chinese input; no network calls, no model inference.
"""

from .extractor import assemble, parse_recipe_text
from .models import Category, Cuisine, Ingredient, PartialRecipe

__version__ = "1.0.0"

__all__ = [
    "Category",
    "Cuisine",
    "Ingredient",
    "PartialRecipe",
    "assemble",
    "parse_recipe_text",
]
