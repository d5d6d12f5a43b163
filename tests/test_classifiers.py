"""Tests for cuisine, category, time and portion detection."""

import pytest

from recipe_text.classifiers import (
    COOK_KEYWORDS,
    PREP_KEYWORDS,
    detect_categories,
    detect_cuisine,
    extract_portions,
    extract_time,
)
from recipe_text.models import Category, Cuisine


class TestDetectCuisine:
    """Tests for priority-ordered cuisine detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("红烧肉", Cuisine.CHINESE),
            ("越南河粉", Cuisine.VIETNAMESE),
            ("Beef pho with herbs", Cuisine.VIETNAMESE),
            ("日式咖喱", Cuisine.JAPANESE),
            ("Kimchi pancakes", Cuisine.KOREAN),
            ("Creamy mushroom risotto", Cuisine.ITALIAN),
            ("Fish tacos", Cuisine.MEXICAN),
            ("Chicken tikka masala", Cuisine.INDIAN),
        ],
    )
    def test_detects_each_cuisine(self, text, expected):
        assert detect_cuisine(text) == expected

    def test_no_keyword_is_other(self):
        assert detect_cuisine("A simple stir fry with chicken and rice.") == Cuisine.OTHER

    def test_empty_is_other(self):
        assert detect_cuisine("") == Cuisine.OTHER

    def test_earlier_cuisine_wins(self):
        """A Chinese dish that borrows an Italian word stays Chinese."""
        assert detect_cuisine("番茄炒意面 pasta") == Cuisine.CHINESE

    def test_case_insensitive_romanized_keywords(self):
        assert detect_cuisine("PIZZA NIGHT") == Cuisine.ITALIAN


class TestDetectCategories:
    """Tests for category tag collection."""

    def test_fallback_is_main_dish(self):
        assert detect_categories("") == [Category.MAIN_DISH]

    def test_collects_all_in_fixed_order(self):
        text = "Quick breakfast for kids, great for meal prep"
        assert detect_categories(text) == [
            Category.BREAKFAST,
            Category.KID_FRIENDLY,
            Category.MEAL_PREP,
        ]

    def test_timing_order_independent_of_text_order(self):
        assert detect_categories("dinner or lunch") == [Category.LUNCH, Category.DINNER]

    def test_chinese_keywords(self):
        assert detect_categories("晚餐 儿童") == [Category.DINNER, Category.KID_FRIENDLY]


class TestExtractTime:
    """Tests for keyword + number + unit time extraction."""

    def test_minutes(self):
        assert extract_time("Bake for 25 minutes", COOK_KEYWORDS) == 25

    def test_hours_converted(self):
        assert extract_time("Roast 2 hours", COOK_KEYWORDS) == 120

    def test_abbreviated_hours(self):
        assert extract_time("prep time: 1 hr", PREP_KEYWORDS) == 60

    def test_chinese_prep_and_cook(self, chinese_chicken_text):
        assert extract_time(chinese_chicken_text, PREP_KEYWORDS) == 30
        assert extract_time(chinese_chicken_text, COOK_KEYWORDS) == 20

    def test_chinese_hours(self):
        assert extract_time("煮1小时", COOK_KEYWORDS) == 60

    def test_only_first_match_counts(self):
        assert extract_time("Cook 10 minutes, then bake 30 minutes", COOK_KEYWORDS) == 10

    def test_gap_is_bounded(self):
        text = "Bake in a very hot oven until it is done, about 10 minutes"
        assert extract_time(text, COOK_KEYWORDS) == 0

    def test_no_match_is_zero(self):
        assert extract_time("Bake until golden", COOK_KEYWORDS) == 0
        assert extract_time("", COOK_KEYWORDS) == 0

    def test_custom_keywords(self):
        assert extract_time("rest 5 min", ["rest"]) == 5


class TestExtractPortions:
    """Tests for serving count extraction."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("4人份", 4),
            ("Serves 6", 6),
            ("8 servings", 8),
            ("2份", 2),
        ],
    )
    def test_patterns(self, text, expected):
        assert extract_portions(text) == expected

    def test_default_is_four(self):
        assert extract_portions("A simple stir fry with chicken and rice.") == 4

    def test_pattern_priority(self):
        assert extract_portions("3人份, serves 6") == 3

    def test_zero_is_not_a_serving_count(self):
        assert extract_portions("serves 0") == 4

    def test_oversized_number_does_not_raise(self):
        assert extract_portions("9" * 4400 + " servings") == 4
