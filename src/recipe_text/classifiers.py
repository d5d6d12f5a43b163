"""
Whole-text detectors: cuisine, categories, prep/cook time, portions.

Every detector is a pure function over the normalized text and owns its
keyword tables. Tables are ordered; the order is the priority.
"""

import re

from .models import Category, Cuisine

# Checked in this order; the first cuisine whose pattern matches wins.
CUISINE_PATTERNS: tuple[tuple[Cuisine, re.Pattern[str]], ...] = (
    (
        Cuisine.CHINESE,
        re.compile(
            r"中式|中国|炒|爆炒|炒饭|酱油|锅|川菜|粤菜|湘菜|东北菜"
            r"|红烧|清蒸|腌|白糖|生抽|老抽|料酒|蚝油|花椒|八角|chinese",
            re.IGNORECASE,
        ),
    ),
    (Cuisine.VIETNAMESE, re.compile(r"越南|越式|vietnamese|banh|pho|米粉", re.IGNORECASE)),
    (
        Cuisine.JAPANESE,
        re.compile(r"日式|日本|寿司|拉面|天妇罗|味噌|japanese|sushi|ramen|teriyaki", re.IGNORECASE),
    ),
    (
        Cuisine.KOREAN,
        re.compile(r"韩式|韩国|泡菜|烤肉|石锅|korean|kimchi|bulgogi|bibimbap", re.IGNORECASE),
    ),
    (Cuisine.ITALIAN, re.compile(r"italian|pasta|pizza|risotto", re.IGNORECASE)),
    (Cuisine.MEXICAN, re.compile(r"mexican|taco|burrito|enchilada", re.IGNORECASE)),
    (Cuisine.INDIAN, re.compile(r"indian|curry|tikka|masala|naan", re.IGNORECASE)),
)

# Timing, then audience, then occasion.
CATEGORY_PATTERNS: tuple[tuple[Category, re.Pattern[str]], ...] = (
    (Category.BREAKFAST, re.compile(r"早餐|breakfast", re.IGNORECASE)),
    (Category.LUNCH, re.compile(r"午餐|午饭|中餐|lunch", re.IGNORECASE)),
    (Category.DINNER, re.compile(r"晚餐|晚饭|dinner", re.IGNORECASE)),
    (Category.KID_FRIENDLY, re.compile(r"儿童|孩子|kid|child", re.IGNORECASE)),
    (Category.MEAL_PREP, re.compile(r"批量|备餐|meal prep|batch", re.IGNORECASE)),
)

FALLBACK_CATEGORY = Category.MAIN_DISH

PREP_KEYWORDS: tuple[str, ...] = ("prep", "marinate", "准备", "腌")
COOK_KEYWORDS: tuple[str, ...] = ("cook", "bake", "roast", "fry", "boil", "烤", "煮", "炒")

_TIME_UNITS = r"分钟|minutes?|mins?|小时|hours?|hrs?"
_HOUR_UNIT_RE = re.compile(r"小时|hours?|hrs?", re.IGNORECASE)

# Tried in order; "人份" comes before the bare "份".
PORTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\s*人份"),
    re.compile(r"serves?\s*(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*servings?", re.IGNORECASE),
    re.compile(r"(\d+)\s*份"),
)

DEFAULT_PORTIONS = 4


def _to_int(digits: str) -> int | None:
    # int() refuses digit strings past the interpreter's conversion limit
    try:
        return int(digits)
    except ValueError:
        return None


def detect_cuisine(text: str) -> Cuisine:
    """Return the first cuisine (in priority order) mentioned anywhere in text."""
    for cuisine, pattern in CUISINE_PATTERNS:
        if pattern.search(text):
            return cuisine
    return Cuisine.OTHER


def detect_categories(text: str) -> list[Category]:
    """Collect every matching category; never returns an empty list."""
    categories = [category for category, pattern in CATEGORY_PATTERNS if pattern.search(text)]
    return categories or [FALLBACK_CATEGORY]


def _time_pattern(keywords: tuple[str, ...] | list[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(k) for k in keywords)
    return re.compile(
        rf"({alternatives}).{{0,20}}?(\d+)\s*({_TIME_UNITS})",
        re.IGNORECASE,
    )


def extract_time(text: str, keywords: tuple[str, ...] | list[str]) -> int:
    """
    Find "<keyword> ... <number><unit>" and return minutes.

    Only the first match counts. Hours are converted to minutes.

    Examples:
        "Bake for 25 minutes" with COOK_KEYWORDS -> 25
        "腌30分钟" with PREP_KEYWORDS -> 30
        "roast 2 hours" with COOK_KEYWORDS -> 120
    """
    if not text or not keywords:
        return 0

    match = _time_pattern(keywords).search(text)
    if not match:
        return 0

    amount = _to_int(match.group(2))
    if amount is None:
        return 0
    if _HOUR_UNIT_RE.fullmatch(match.group(3)):
        return amount * 60
    return amount


def extract_portions(text: str) -> int:
    """Return the serving count from the first matching pattern, default 4."""
    for pattern in PORTION_PATTERNS:
        match = pattern.search(text)
        if match:
            count = _to_int(match.group(1))
            # "serves 0" carries no usable signal
            if count:
                return count
    return DEFAULT_PORTIONS
