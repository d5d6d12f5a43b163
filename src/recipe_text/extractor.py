"""Main recipe text extraction orchestration."""

import logging

from .classifiers import (
    COOK_KEYWORDS,
    PREP_KEYWORDS,
    detect_categories,
    detect_cuisine,
    extract_portions,
    extract_time,
)
from .ingredients import extract_ingredients
from .instructions import extract_instructions
from .models import PartialRecipe
from .normalizer import normalize
from .title import extract_name

logger = logging.getLogger(__name__)


def parse_recipe_text(raw_text: str) -> PartialRecipe:
    """
    Turn raw OCR or pasted text into a structured recipe.

    Extraction pipeline:
    1. Normalize into clean lines
    2. Run the whole-text detectors (cuisine, categories, times, portions)
    3. Extract name, ingredients and instructions line by line
    4. Assemble the record with defaults for anything not found

    Never raises. Empty or unreadable text yields a record of defaults
    (name "Untitled Recipe", no ingredients or steps, 4 portions).

    Args:
        raw_text: Text as produced by OCR or pasted by the user

    Returns:
        PartialRecipe with original_text set to raw_text unchanged
    """
    if not isinstance(raw_text, str):
        raw_text = ""

    lines = normalize(raw_text)
    text = "\n".join(lines)

    recipe = PartialRecipe(
        name=extract_name(lines),
        original_text=raw_text,
        cuisine=detect_cuisine(text),
        categories=detect_categories(text),
        prep_time_minutes=extract_time(text, PREP_KEYWORDS),
        cook_time_minutes=extract_time(text, COOK_KEYWORDS),
        ingredients=extract_ingredients(lines),
        instructions=extract_instructions(lines),
        portions=extract_portions(text),
    )

    logger.debug(
        f"Parsed recipe text: {len(lines)} lines, {len(recipe.ingredients)} ingredients, "
        f"{len(recipe.instructions)} steps, cuisine={recipe.cuisine.value}"
    )
    return recipe


assemble = parse_recipe_text
