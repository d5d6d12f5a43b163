"""Data models for free-text recipe extraction."""

from dataclasses import dataclass, field
from enum import Enum


class Cuisine(str, Enum):
    """Cuisine tag assigned to a parsed recipe."""

    CHINESE = "Chinese"
    VIETNAMESE = "Vietnamese"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    ITALIAN = "Italian"
    MEXICAN = "Mexican"
    INDIAN = "Indian"
    OTHER = "Other"


class Category(str, Enum):
    """Non-exclusive recipe labels (meal timing, audience, occasion)."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    KID_FRIENDLY = "Kid-Friendly"
    MEAL_PREP = "Meal Prep"
    MAIN_DISH = "Main Dish"


@dataclass
class Ingredient:
    """One ingredient line. amount and unit may be empty strings."""

    id: str
    name: str
    amount: str = ""
    unit: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "amount": self.amount, "unit": self.unit, "name": self.name}


@dataclass
class Nutrition:
    """Zero-valued placeholder; the nutrition calculator fills this in."""

    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0


@dataclass
class PlateComposition:
    """Zero-valued placeholder for plate percentages."""

    protein: int = 0
    carbs: int = 0
    vegetables: int = 0


@dataclass
class PartialRecipe:
    """
    Structured recipe produced from raw text.

    Structurally complete but possibly content-sparse: the storage layer
    adds owner, timestamps and image; other services add nutrition and
    translations.
    """

    name: str
    original_text: str
    cuisine: Cuisine = Cuisine.OTHER
    categories: list[Category] = field(default_factory=lambda: [Category.MAIN_DISH])
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    portions: int = 4
    image: str = ""
    nutrition: Nutrition = field(default_factory=Nutrition)
    plate_composition: PlateComposition = field(default_factory=PlateComposition)
    is_favorite: bool = False

    def to_dict(self) -> dict:
        """Serialize with the camelCase field names the app stores."""
        return {
            "name": self.name,
            "image": self.image,
            "cuisine": self.cuisine.value,
            "categories": [c.value for c in self.categories],
            "prepTimeMinutes": self.prep_time_minutes,
            "cookTimeMinutes": self.cook_time_minutes,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": list(self.instructions),
            "nutrition": {
                "calories": self.nutrition.calories,
                "protein": self.nutrition.protein,
                "carbs": self.nutrition.carbs,
                "fat": self.nutrition.fat,
            },
            "plateComposition": {
                "protein": self.plate_composition.protein,
                "carbs": self.plate_composition.carbs,
                "vegetables": self.plate_composition.vegetables,
            },
            "portions": self.portions,
            "isFavorite": self.is_favorite,
            "originalText": self.original_text,
        }
