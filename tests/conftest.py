"""
Pytest configuration and fixtures for Recipe Text tests.
"""

import os

import pytest

# Set test environment before importing recipe_text modules
os.environ["RECIPE_TEXT_ENV"] = "development"
os.environ["LOG_LEVEL"] = "INFO"


GARLIC_CHICKEN = (
    "Garlic Butter Chicken\n\n"
    "Ingredients:\n"
    "2 cups flour\n"
    "1 tablespoon salt\n\n"
    "Instructions:\n"
    "1. Preheat oven to 400 degrees and season the chicken generously.\n"
    "2. Bake for 25 minutes until golden brown and cooked through."
)

CHINESE_CHICKEN = "鸡腿 300g\n白糖 60g\n盐 适量\n腌30分钟后烤20分钟"


@pytest.fixture
def garlic_chicken_text():
    """English recipe card with ingredient and instruction headers."""
    return GARLIC_CHICKEN


@pytest.fixture
def chinese_chicken_text():
    """Short Chinese recipe without section headers."""
    return CHINESE_CHICKEN


@pytest.fixture
def garlic_chicken_lines():
    """GARLIC_CHICKEN after normalization."""
    return [
        "Garlic Butter Chicken",
        "Ingredients:",
        "2 cups flour",
        "1 tablespoon salt",
        "Instructions:",
        "1. Preheat oven to 400 degrees and season the chicken generously.",
        "2. Bake for 25 minutes until golden brown and cooked through.",
    ]
