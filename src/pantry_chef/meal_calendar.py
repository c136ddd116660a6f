from __future__ import annotations
import json
import logging
import uuid
from datetime import date, timedelta
from pathlib import Path
from typing import Literal
from pydantic import BaseModel
from pantry_chef.recipe_book import SavedRecipe

logger = logging.getLogger(__name__)

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
MEAL_TYPES = ["breakfast", "lunch", "dinner", "snack"]


class ScheduledMeal(BaseModel):
    id: str
    recipe_id: str
    recipe_title: str
    day: date
    meal_type: MealType = "dinner"


class MealCalendar:
    def __init__(self, base_dir: Path | None = None):
        self._path = (base_dir or (Path.home() / ".pantry_chef")) / "calendar.json"

    def all(self) -> list[ScheduledMeal]:
        if not self._path.exists():
            return []
        try:
            return [ScheduledMeal.model_validate(m) for m in json.loads(self._path.read_text())]
        except Exception:
            logger.warning("Could not read meal calendar %s, starting empty", self._path.name)
            return []

    def schedule(self, recipe: SavedRecipe, day: date, meal_type: MealType = "dinner") -> ScheduledMeal:
        meal = ScheduledMeal(
            id=uuid.uuid4().hex[:8],
            recipe_id=recipe.id,
            recipe_title=recipe.title,
            day=day,
            meal_type=meal_type,
        )
        self._save(self.all() + [meal])
        return meal

    def unschedule(self, meal_id: str) -> None:
        meals = self.all()
        remaining = [m for m in meals if m.id != meal_id]
        if len(remaining) == len(meals):
            raise KeyError(f"Scheduled meal '{meal_id}' not found.")
        self._save(remaining)

    def between(self, start: date, end: date) -> list[ScheduledMeal]:
        meals = [m for m in self.all() if start <= m.day <= end]
        return sorted(meals, key=lambda m: (m.day, MEAL_TYPES.index(m.meal_type)))

    def week_of(self, day: date) -> list[ScheduledMeal]:
        monday = day - timedelta(days=day.weekday())
        return self.between(monday, monday + timedelta(days=6))

    def _save(self, meals: list[ScheduledMeal]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps([m.model_dump(mode="json") for m in meals], indent=2))
