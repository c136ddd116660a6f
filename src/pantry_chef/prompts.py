"""Prompt templates for recipe and meal-plan generation.

Rendering is plain string substitution: the same ingredients, spices and
constraints always produce the same prompt text.
"""
from __future__ import annotations
import re
from typing import Optional
from pantry_chef.models import GenerationConstraints, MealPlanRequest

NONE_SPECIFIED = "none specified"
NO_SPICES = "none specified - use basic seasonings"

PANTRY_STAPLES = ["salt", "black pepper", "water", "cooking oil", "butter", "flour", "sugar"]

USE_ALL_TEMPLATE = """You are a professional chef assistant. Generate a delicious recipe.

MAIN INGREDIENTS (the user has these and wants ALL of them used):
{ingredients}

AVAILABLE SEASONINGS (oils, spices, sauces the user has - pick the BEST ones for this dish, not all):
{spices}

{profile}

REQUIREMENTS:
- You MUST use EVERY main ingredient listed above
- Do NOT add any ingredient that is not listed, except water and seasonings from the list
- From the seasonings list, pick only what makes sense for the dish (don't use everything)
- Use ingredients EXACTLY as listed (if they say "tomatoes" use fresh tomatoes, not canned)
{rules}

{response_format}"""

BEST_MEAL_TEMPLATE = """You are a professional chef assistant. Create the best possible meal from what the user has.

AVAILABLE INGREDIENTS (choose the combination that makes the best dish - you do not need all of them):
{ingredients}

AVAILABLE SEASONINGS (oils, spices, sauces the user has - pick the BEST ones for this dish, not all):
{spices}

{profile}

REQUIREMENTS:
- Select the subset of the available ingredients that makes the most delicious, coherent meal
- Leave out ingredients that would not work well together
- You may add these common pantry staples if needed: {staples}
- Use ingredients EXACTLY as listed (if they say "tomatoes" use fresh tomatoes, not canned)
{rules}

{response_format}"""

PROFILE_TEMPLATE = """COOK PROFILE:
- Dietary restrictions (must be respected strictly): {dietary}
- Disliked ingredients (never use these): {disliked}
- Cuisine preferences: {cuisine}
- Kitchen equipment available: {equipment}
- Budget mode: {budget}
- Style: {style}"""

COMMON_RULES = """- Include exact measurements
- Provide clear step-by-step instructions
- Estimate prep time, cook time, and servings
- Estimate macros per serving
- Keep it practical and delicious"""

BUDGET_RULE = "- Favor inexpensive ingredients and avoid costly specialty items"

RESPONSE_FORMAT = """RESPOND ONLY WITH VALID JSON IN THIS EXACT FORMAT:
{
  "title": "Recipe Name",
  "description": "Brief 1-2 sentence description",
  "servings": 4,
  "prep_time_minutes": 15,
  "cook_time_minutes": 30,
  "difficulty": "easy",
  "ingredients": [
    {"item": "ingredient name", "amount": "1 cup", "note": "optional note"}
  ],
  "instructions": [
    "Step 1 description",
    "Step 2 description"
  ],
  "macros_per_serving": {"calories": 450, "protein_g": 35, "carbs_g": 40, "fat_g": 15},
  "grocery_list": ["items the user still needs to buy, if any"]
}"""


PLAN_TEMPLATE = """You are a professional chef and meal-prep planner. Create a meal plan.

PLAN TYPE: {plan}
PEOPLE: {people}
DAYS: {days}
MEALS PER DAY: {meals_per_day} ({total_meals} meals in total)

INGREDIENTS ON HAND (use them where they fit, buy the rest):
{ingredients}

{profile}

REQUIREMENTS:
- Plan exactly {meals_per_day} meal(s) for each of the {days} days, numbered from day 1
- Size every meal for {people} people
- Reuse ingredients across meals to keep shopping and waste down
- Give batch prep steps that can be done in one session where possible
- Estimate the total hands-on prep time in hours
{rules}

{response_format}"""

PLAN_RULES = """- Include exact measurements
- Keep it practical and delicious"""

PLAN_RESPONSE_FORMAT = """RESPOND ONLY WITH VALID JSON IN THIS EXACT FORMAT:
{
  "title": "Plan Name",
  "description": "Brief 1-2 sentence description",
  "plan_type": "dinner-plan",
  "people": 2,
  "days": 5,
  "meals_per_day": 1,
  "total_prep_time_hours": 3,
  "meals": [
    {
      "day": 1,
      "meal_type": "dinner",
      "title": "Meal Name",
      "description": "One sentence",
      "ingredients": [{"item": "ingredient name", "amount": "1 cup", "note": "optional note"}],
      "instructions": ["Step 1 description"]
    }
  ],
  "prep_steps": ["Batch prep step"],
  "grocery_list": ["items to buy for the whole plan"]
}"""


_PLACEHOLDER = re.compile(
    r"\{(ingredients|spices|profile|staples|rules|response_format"
    r"|plan|people|days|meals_per_day|total_meals)\}"
)


def _join(values: list[str], empty: str = NONE_SPECIFIED) -> str:
    return ", ".join(values) if values else empty


def render_profile(constraints: GenerationConstraints) -> str:
    return PROFILE_TEMPLATE.format(
        dietary=_join(constraints.dietary),
        disliked=_join(constraints.disliked_ingredients),
        cuisine=_join(constraints.cuisine_preferences),
        equipment=_join(constraints.kitchen_equipment),
        budget="yes" if constraints.budget_mode else "no",
        style=constraints.style.strip() or NONE_SPECIFIED,
    )


def render_prompt(
    ingredients: list[str],
    spices: list[str],
    constraints: Optional[GenerationConstraints] = None,
) -> str:
    constraints = constraints or GenerationConstraints()
    template = USE_ALL_TEMPLATE if constraints.use_all_ingredients else BEST_MEAL_TEMPLATE
    rules = COMMON_RULES
    if constraints.budget_mode:
        rules = f"{rules}\n{BUDGET_RULE}"
    values = {
        "ingredients": ", ".join(ingredients),
        "spices": _join(spices, empty=NO_SPICES),
        "profile": render_profile(constraints),
        "staples": ", ".join(PANTRY_STAPLES),
        "rules": rules,
        "response_format": RESPONSE_FORMAT,
    }
    # Single pass, so user text containing "{...}" is never expanded.
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], template)


def render_plan_prompt(request: MealPlanRequest, ingredients: list[str]) -> str:
    constraints = request.constraints
    rules = PLAN_RULES
    if constraints.budget_mode:
        rules = f"{rules}\n{BUDGET_RULE}"
    values = {
        "plan": request.plan_description,
        "people": str(request.people),
        "days": str(request.days),
        "meals_per_day": str(request.meals_per_day),
        "total_meals": str(request.days * request.meals_per_day),
        "ingredients": _join(ingredients),
        "profile": render_profile(constraints),
        "rules": rules,
        "response_format": PLAN_RESPONSE_FORMAT,
    }
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], PLAN_TEMPLATE)
