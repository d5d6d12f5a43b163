"""
Line-by-line ingredient parsing for Chinese and English recipe text.

Each line is tried against INGREDIENT_PATTERNS in order and the first
pattern that yields an ingredient wins. Lines no pattern understands are
kept verbatim when they are short and mention a known food word. Duplicate
names are dropped in a final pass.

Examples:
    "鸡腿 300g"          -> amount "300", unit "g", name "鸡腿"
    "盐 适量"            -> amount "适量", unit "", name "盐"
    "2 cups flour"       -> amount "2", unit "cups", name "flour"
    "胡萝卜 2 cm"        -> amount "2", unit "cm", name "胡萝卜"
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from .models import Ingredient

logger = logging.getLogger(__name__)

# (amount, unit, name)
ParsedParts = tuple[str, str, str]

_CHINESE_UNITS = r"g|ml|克|毫升|勺|杯|个|片|条"
_ENGLISH_UNITS = r"cups?|tbsp|tsp|tablespoons?|teaspoons?|oz|ounces?|lbs?|pounds?"

# Lines that introduce a section; never ingredients even if a pattern fits.
_SECTION_HEADER_RE = re.compile(
    r"^(做法|步骤|instructions?|directions?|method|烤箱|复脆|组装)[:：]?$",
    re.IGNORECASE,
)

FALLBACK_MAX_CHARS = 50

FOOD_WORDS: tuple[str, ...] = (
    "鸡", "牛", "猪", "鱼", "虾", "蛋", "肉", "菜", "面", "饭", "米", "豆腐",
    "胡萝卜", "白萝卜", "黄瓜", "番茄", "西红柿", "土豆", "洋葱", "大蒜",
    "姜", "葱", "香菜", "青椒", "辣椒",
    "chicken", "beef", "pork", "fish", "egg", "meat", "vegetable",
    "carrot", "potato", "onion", "garlic", "tomato",
    "油", "盐", "糖", "醋", "酱油", "oil", "salt", "sugar", "vinegar",
    "flour", "bread", "noodle", "rice",
)


def _name_quantity_unit(match: re.Match[str]) -> ParsedParts:
    name = re.sub(r"\s+", "", match.group(1))
    return match.group(2), match.group(3), name


def _name_to_taste(match: re.Match[str]) -> ParsedParts:
    return match.group(2), "", match.group(1).strip()


def _quantity_unit_name(match: re.Match[str]) -> ParsedParts:
    return match.group(1), match.group(2), match.group(3).strip()


@dataclass(frozen=True)
class IngredientPattern:
    """One entry of the ordered pattern table."""

    label: str
    regex: re.Pattern[str]
    build: Callable[[re.Match[str]], ParsedParts]

    def parse(self, line: str) -> ParsedParts | None:
        match = self.regex.search(line)
        if not match:
            return None
        amount, unit, name = self.build(match)
        if not name:
            return None
        return amount, unit, name


INGREDIENT_PATTERNS: tuple[IngredientPattern, ...] = (
    # 鸡腿 300g, 白糖 60克
    IngredientPattern(
        "zh_name_quantity_unit",
        re.compile(rf"([\u4e00-\u9fa5]+)\s*(\d+\.?\d*)\s*({_CHINESE_UNITS})"),
        _name_quantity_unit,
    ),
    # 胡萝卜 丝 150g, 法棍 2 cm
    IngredientPattern(
        "zh_spaced_name_quantity_unit",
        re.compile(
            rf"([\u4e00-\u9fa5]+[\u4e00-\u9fa5\s]*?)\s*(\d+\.?\d*)\s*({_CHINESE_UNITS}|cm)"
        ),
        _name_quantity_unit,
    ),
    # 盐 适量, 胡椒粉 少许
    IngredientPattern(
        "zh_name_to_taste",
        re.compile(r"([\u4e00-\u9fa5]+)\s*(适量|少许)"),
        _name_to_taste,
    ),
    # 2 cups flour, 1 tablespoon salt
    IngredientPattern(
        "en_quantity_unit_name",
        re.compile(
            rf"(\d+\.?\d*)\s+({_ENGLISH_UNITS})\s+([A-Za-z0-9_\s]+)",
            re.IGNORECASE,
        ),
        _quantity_unit_name,
    ),
)


def is_section_header(line: str) -> bool:
    return bool(_SECTION_HEADER_RE.match(line))


def contains_food_word(line: str) -> bool:
    return any(word in line for word in FOOD_WORDS)


def parse_ingredient_line(line: str) -> ParsedParts | None:
    """
    Parse one line into (amount, unit, name), or None if it is not an ingredient.
    """
    if is_section_header(line):
        return None

    for pattern in INGREDIENT_PATTERNS:
        parts = pattern.parse(line)
        if parts is not None:
            return parts

    if len(line) < FALLBACK_MAX_CHARS and contains_food_word(line):
        return "", "", line

    return None


def dedupe_ingredients(ingredients: list[Ingredient]) -> list[Ingredient]:
    """Keep the first ingredient for each case-insensitive name."""
    seen: set[str] = set()
    unique = []
    for ingredient in ingredients:
        key = ingredient.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(ingredient)
    return unique


def extract_ingredients(lines: list[str]) -> list[Ingredient]:
    """
    Extract ingredients from normalized lines.

    Ids are assigned in line order starting at "1", before duplicates are
    removed, so the surviving ids are unique but may skip numbers.
    """
    ingredients: list[Ingredient] = []
    next_id = 1

    for line in lines:
        parts = parse_ingredient_line(line)
        if parts is None:
            continue
        amount, unit, name = parts
        ingredients.append(Ingredient(id=str(next_id), amount=amount, unit=unit, name=name))
        next_id += 1

    unique = dedupe_ingredients(ingredients)
    if len(unique) < len(ingredients):
        logger.debug(f"Dropped {len(ingredients) - len(unique)} duplicate ingredients")
    return unique
