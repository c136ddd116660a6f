from __future__ import annotations
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

Difficulty = Literal["easy", "medium", "hard"]

DEFAULT_STYLE = "chef's choice"


def normalize_ingredients(items: list[str]) -> list[str]:
    """Lower-case, trim and de-duplicate ingredient names, keeping first-seen order."""
    seen: list[str] = []
    for raw in items:
        name = raw.strip().lower()
        if name and name not in seen:
            seen.append(name)
    return seen


class GenerationConstraints(BaseModel):
    dietary: list[str] = Field(default_factory=list)
    disliked_ingredients: list[str] = Field(default_factory=list)
    cuisine_preferences: list[str] = Field(default_factory=list)
    kitchen_equipment: list[str] = Field(default_factory=list)
    budget_mode: bool = False
    style: str = DEFAULT_STYLE
    use_all_ingredients: bool = False


class RecipeRequest(BaseModel):
    """A generation request as submitted by a caller.

    Accepts the camelCase names used by the web client as well as snake_case.
    """

    model_config = ConfigDict(populate_by_name=True)

    ingredients: list[str]
    spices: list[str] = Field(default_factory=list)
    use_all_ingredients: bool = Field(False, alias="useAllIngredients")
    dietary: list[str] = Field(default_factory=list)
    disliked_ingredients: list[str] = Field(default_factory=list, alias="dislikedIngredients")
    cuisine_preferences: list[str] = Field(default_factory=list, alias="cuisinePreferences")
    kitchen_equipment: list[str] = Field(default_factory=list, alias="kitchenEquipment")
    budget_mode: bool = Field(False, alias="budgetMode")
    style: str = DEFAULT_STYLE

    @property
    def constraints(self) -> GenerationConstraints:
        return GenerationConstraints(
            dietary=self.dietary,
            disliked_ingredients=self.disliked_ingredients,
            cuisine_preferences=self.cuisine_preferences,
            kitchen_equipment=self.kitchen_equipment,
            budget_mode=self.budget_mode,
            style=self.style,
            use_all_ingredients=self.use_all_ingredients,
        )


class RecipeIngredient(BaseModel):
    item: str
    amount: str
    note: Optional[str] = None


class Macros(BaseModel):
    calories: float = Field(ge=0, strict=True, allow_inf_nan=False)
    protein_g: float = Field(ge=0, strict=True, allow_inf_nan=False)
    carbs_g: float = Field(ge=0, strict=True, allow_inf_nan=False)
    fat_g: float = Field(ge=0, strict=True, allow_inf_nan=False)


class RecipeDraft(BaseModel):
    title: str
    description: str
    servings: int = Field(gt=0, strict=True)
    prep_time_minutes: int = Field(ge=0, strict=True)
    cook_time_minutes: int = Field(ge=0, strict=True)
    difficulty: Difficulty
    ingredients: list[RecipeIngredient] = Field(min_length=1)
    instructions: list[str] = Field(min_length=1)
    macros_per_serving: Optional[Macros] = None
    grocery_list: Optional[list[str]] = None

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes


PLAN_TYPES = {
    "dinner-plan": "Dinner plan - one family dinner per day",
    "lunch-prep": "Lunch prep - portable lunches made ahead",
    "breakfast-prep": "Breakfast prep - grab-and-go breakfasts",
    "snack-prep": "Snack prep - healthy snacks portioned for the week",
    "freezer-burritos": "Freezer burritos - batch-cooked, wrapped and frozen",
    "full-week": "Full week - every meal of the day covered",
    "weekly-prep": "Weekly prep - one cooking session for the whole week",
}


class MealPlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan_type: str = Field("dinner-plan", alias="planType")
    people: int = Field(2, gt=0)
    days: int = Field(5, ge=1, le=14)
    meals_per_day: int = Field(1, ge=1, le=4, alias="mealsPerDay")
    ingredients: list[str] = Field(default_factory=list)
    constraints: GenerationConstraints = Field(default_factory=GenerationConstraints)

    @property
    def plan_description(self) -> str:
        return PLAN_TYPES.get(self.plan_type, self.plan_type)


class PlannedMeal(BaseModel):
    day: int = Field(ge=1, strict=True)
    meal_type: str
    title: str
    description: str = ""
    ingredients: list[RecipeIngredient] = Field(min_length=1)
    instructions: list[str] = Field(default_factory=list)


class MealPlanDraft(BaseModel):
    title: str
    description: str
    plan_type: str
    people: int = Field(gt=0, strict=True)
    days: int = Field(gt=0, strict=True)
    meals_per_day: int = Field(gt=0, strict=True)
    total_prep_time_hours: float = Field(ge=0, strict=True, allow_inf_nan=False)
    meals: list[PlannedMeal] = Field(min_length=1)
    prep_steps: list[str] = Field(default_factory=list)
    grocery_list: Optional[list[str]] = None

    @model_validator(mode="after")
    def _meals_within_plan(self) -> MealPlanDraft:
        for meal in self.meals:
            if meal.day > self.days:
                raise ValueError(f"meal '{meal.title}' is scheduled on day {meal.day} of a {self.days}-day plan")
        return self

    @property
    def total_meals(self) -> int:
        return self.days * self.meals_per_day
