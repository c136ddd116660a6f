from datetime import datetime, timezone
from pantry_chef.formatter import format_meal_plan, format_recipe, format_shopping_list
from pantry_chef.shopping import DEFAULT_CATEGORIES, ShoppingItem, ShoppingList


def _list(*items: ShoppingItem) -> ShoppingList:
    return ShoppingList(id="abc", name="Weekend", created_at=datetime.now(tz=timezone.utc), items=list(items))


def test_format_recipe_sections(draft):
    output = format_recipe(draft)
    assert output.startswith("Chicken Stir-Fry")
    assert "Serves 4 | Prep 15 min | Cook 10 min | Medium" in output
    assert "- 450g chicken breast (sliced)" in output
    assert "1. Slice the chicken." in output
    assert output.index("Ingredients") < output.index("Instructions")


def test_format_recipe_macros_keep_decimals(draft):
    output = format_recipe(draft)
    assert "320 kcal, 30g protein, 12.5g carbs, 9g fat" in output


def test_format_recipe_grocery_list_only_when_present(draft):
    assert "Grocery list" not in format_recipe(draft)
    output = format_recipe(draft.model_copy(update={"grocery_list": ["ginger"]}))
    assert "[ ] ginger" in output


def test_format_shopping_list_groups_by_category_order():
    output = format_shopping_list(_list(
        ShoppingItem(item="broccoli", amount="1 head", category="Produce"),
        ShoppingItem(item="chicken breast", amount="450g", category="Proteins"),
    ), DEFAULT_CATEGORIES)
    assert output.index("Proteins") < output.index("Produce")
    assert output.index("Produce") < output.index("broccoli")


def test_format_shopping_list_checkboxes_and_indices():
    output = format_shopping_list(_list(
        ShoppingItem(item="eggs", amount="12", category="Proteins", checked=True),
        ShoppingItem(item="milk", amount="1 L", category="Dairy"),
    ), DEFAULT_CATEGORIES)
    assert " 1. [x] 12 eggs" in output
    assert " 2. [ ] 1 L milk" in output


def test_format_shopping_list_skips_empty_and_maps_unknown():
    output = format_shopping_list(_list(
        ShoppingItem(item="foil", category="Household"),
    ), DEFAULT_CATEGORIES)
    assert "Dairy" not in output
    assert "Other" in output
    assert "Household" not in output


def test_format_meal_plan_groups_meals_by_day(meal_plan):
    text = format_meal_plan(meal_plan)
    assert text.startswith("Lunch Prep\n==========")
    assert "2 days | 1 people | 1 meal(s) per day | 2 meals | ~1.5h prep" in text
    assert text.index("Day 1") < text.index("Chicken Wraps") < text.index("Day 2") < text.index("Lentil Salad")
    assert "  - 200g chicken breast" in text
    assert "  1. Grill the chicken." in text
    assert "Prep session" in text
    assert "Grocery list" not in text
