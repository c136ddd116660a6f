from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from pantry_chef.models import GenerationConstraints

logger = logging.getLogger(__name__)

DIETARY_OPTIONS = [
    "Gluten-Free", "Dairy-Free", "Egg-Free", "Nut-Free",
    "Vegetarian", "Vegan", "Keto", "Low-Carb", "Low-Sodium", "Halal", "Kosher",
]

CUISINE_OPTIONS = [
    "American", "Italian", "Mexican", "Chinese", "Japanese", "Thai", "Indian",
    "Mediterranean", "French", "Korean", "Vietnamese", "Greek", "Middle Eastern",
]

PROTEIN_OPTIONS = [
    "Chicken", "Beef", "Pork", "Turkey", "Fish", "Shrimp", "Lamb",
    "Tofu", "Tempeh", "Beans/Legumes", "Eggs",
]

EQUIPMENT_OPTIONS = [
    "Instant Pot", "Air Fryer", "Slow Cooker", "Stand Mixer",
    "Food Processor", "Grill", "Smoker", "Sous Vide", "Dutch Oven",
]

STYLE_OPTIONS = {
    "chef": "chef's choice",
    "protein": "High protein meal - maximize protein content, ideal for meal prep",
    "quick": "Quick and easy - under 30 minutes, minimal prep",
    "meal-prep": "Meal prep friendly - stores well, easy to portion for the week",
    "comfort": "Comfort food - hearty, satisfying, homestyle cooking",
    "light": "Light and healthy - lower calorie, nutrient-dense",
}


def resolve_style(value: str | None) -> str:
    """Map a preset short name to its descriptor; free text passes through unchanged."""
    if not value:
        return STYLE_OPTIONS["chef"]
    return STYLE_OPTIONS.get(value.strip().lower(), value.strip())


class DietProfile(BaseModel):
    dietary_restrictions: list[str] = Field(default_factory=list)
    cuisine_preferences: list[str] = Field(default_factory=list)
    protein_preferences: list[str] = Field(default_factory=list)
    disliked_ingredients: list[str] = Field(default_factory=list)
    calorie_target: Optional[int] = Field(None, gt=0)
    kitchen_equipment: list[str] = Field(default_factory=list)
    budget_mode: bool = False

    def is_empty(self) -> bool:
        return self == DietProfile()


class DietProfileManager:
    def __init__(self, base_dir: Path | None = None):
        self._path = (base_dir or (Path.home() / ".pantry_chef")) / "diet_profile.json"

    def load(self) -> DietProfile:
        if not self._path.exists():
            return DietProfile()
        try:
            return DietProfile.model_validate_json(self._path.read_text())
        except Exception:
            logger.warning("Could not read diet profile %s, using an empty profile", self._path.name)
            return DietProfile()

    def save(self, profile: DietProfile) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(profile.model_dump_json(indent=2))

    def update(self, **fields) -> DietProfile:
        profile = DietProfile.model_validate({**self.load().model_dump(), **fields})
        self.save(profile)
        return profile

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


def apply_profile(constraints: GenerationConstraints, profile: DietProfile) -> GenerationConstraints:
    dietary = list(constraints.dietary)
    for tag in profile.dietary_restrictions:
        if tag not in dietary:
            dietary.append(tag)
    return constraints.model_copy(update={
        "dietary": dietary,
        "disliked_ingredients": list(profile.disliked_ingredients),
        "cuisine_preferences": list(profile.cuisine_preferences),
        "kitchen_equipment": list(profile.kitchen_equipment),
        "budget_mode": constraints.budget_mode or profile.budget_mode,
    })
