from __future__ import annotations
from collections import defaultdict
from pantry_chef.models import MealPlanDraft, RecipeDraft
from pantry_chef.shopping import ShoppingItem, ShoppingList


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_recipe(recipe: RecipeDraft) -> str:
    lines = [recipe.title, "=" * len(recipe.title), recipe.description, ""]
    lines.append(
        f"Serves {recipe.servings} | Prep {recipe.prep_time_minutes} min | "
        f"Cook {recipe.cook_time_minutes} min | {recipe.difficulty.capitalize()}"
    )

    if recipe.macros_per_serving:
        m = recipe.macros_per_serving
        lines.append(
            f"Per serving: {_format_number(m.calories)} kcal, {_format_number(m.protein_g)}g protein, "
            f"{_format_number(m.carbs_g)}g carbs, {_format_number(m.fat_g)}g fat"
        )

    lines += ["", "Ingredients", "-----------"]
    for ingredient in recipe.ingredients:
        note = f" ({ingredient.note})" if ingredient.note else ""
        lines.append(f"- {ingredient.amount} {ingredient.item}{note}")

    lines += ["", "Instructions", "------------"]
    for i, step in enumerate(recipe.instructions, start=1):
        lines.append(f"{i}. {step}")

    if recipe.grocery_list:
        lines += ["", "Grocery list", "------------"]
        lines += [f"[ ] {item}" for item in recipe.grocery_list]

    return "\n".join(lines)


def format_shopping_list(shopping_list: ShoppingList, categories: list[str]) -> str:
    by_category: dict[str, list[tuple[int, ShoppingItem]]] = defaultdict(list)
    for index, item in enumerate(shopping_list.items, start=1):
        category = item.category if item.category in categories else "Other"
        by_category[category].append((index, item))

    order = categories if "Other" in categories else categories + ["Other"]
    lines: list[str] = [shopping_list.name]
    for category in order:
        if category not in by_category:
            continue
        lines.append(f"\n{category}")
        lines.append("-" * len(category))
        for index, item in by_category[category]:
            box = "[x]" if item.checked else "[ ]"
            lines.append(f"{index:>2}. {box} {item.amount} {item.item}")

    return "\n".join(lines).strip()


def format_meal_plan(plan: MealPlanDraft) -> str:
    lines = [plan.title, "=" * len(plan.title), plan.description, ""]
    lines.append(
        f"{plan.days} days | {plan.people} people | {plan.meals_per_day} meal(s) per day | "
        f"{plan.total_meals} meals | ~{_format_number(plan.total_prep_time_hours)}h prep"
    )

    by_day: dict[int, list] = defaultdict(list)
    for meal in plan.meals:
        by_day[meal.day].append(meal)
    for day in sorted(by_day):
        header = f"Day {day}"
        lines += ["", header, "-" * len(header)]
        for meal in by_day[day]:
            lines.append(f"{meal.meal_type.capitalize()}: {meal.title}")
            if meal.description:
                lines.append(f"  {meal.description}")
            for ingredient in meal.ingredients:
                note = f" ({ingredient.note})" if ingredient.note else ""
                lines.append(f"  - {ingredient.amount} {ingredient.item}{note}")
            for i, step in enumerate(meal.instructions, start=1):
                lines.append(f"  {i}. {step}")

    if plan.prep_steps:
        lines += ["", "Prep session", "------------"]
        lines += [f"{i}. {step}" for i, step in enumerate(plan.prep_steps, start=1)]

    if plan.grocery_list:
        lines += ["", "Grocery list", "------------"]
        lines += [f"[ ] {item}" for item in plan.grocery_list]

    return "\n".join(lines)
