import pytest
from pantry_chef.shopping import ShoppingListManager, categorize


@pytest.fixture
def manager(tmp_path):
    return ShoppingListManager(base_dir=tmp_path)


@pytest.mark.parametrize("item, category", [
    ("chicken breast", "Proteins"),
    ("broccoli", "Produce"),
    ("whole milk", "Dairy"),
    ("jasmine rice", "Pantry"),
    ("paper towels", "Other"),
    ("eggs", "Proteins"),
    ("eggplant", "Produce"),
    ("peanut butter", "Pantry"),
    ("black pepper", "Pantry"),
    ("red bell peppers", "Produce"),
    ("tomatoes", "Produce"),
    ("graham crackers", "Other"),
    ("chicken broth", "Pantry"),
    ("ice cream", "Frozen"),
])
def test_categorize(item, category):
    assert categorize(item) == category


def test_new_list_is_empty(manager):
    shopping_list = manager.new(name="Weekend")
    assert shopping_list.items == []
    assert manager.get(shopping_list.id).name == "Weekend"


def test_from_recipes_uses_ingredients_when_no_grocery_list(manager, draft):
    shopping_list = manager.from_recipes([draft])
    assert [i.item for i in shopping_list.items] == ["chicken breast", "broccoli", "soy sauce"]
    assert shopping_list.items[0].amount == "450g"
    assert shopping_list.items[0].category == "Proteins"


def test_from_recipes_prefers_grocery_list_and_merges_duplicates(manager, draft):
    other = draft.model_copy(update={"grocery_list": ["Broccoli", "ginger"]})
    shopping_list = manager.from_recipes([draft, other])
    assert [i.item for i in shopping_list.items] == ["chicken breast", "broccoli", "soy sauce", "ginger"]


def test_add_item_defaults_amount(manager):
    shopping_list = manager.new()
    entry = manager.add_item(shopping_list.id, "eggs")
    assert entry.amount == "1"
    assert entry.category == "Proteins"
    assert len(manager.get(shopping_list.id).items) == 1


def test_toggle_and_clear_checked(manager):
    shopping_list = manager.new()
    manager.add_item(shopping_list.id, "eggs", "12")
    manager.add_item(shopping_list.id, "milk", "1 L")
    assert manager.toggle(shopping_list.id, 1).checked is True
    assert manager.clear_checked(shopping_list.id) == 1
    assert [i.item for i in manager.get(shopping_list.id).items] == ["milk"]


def test_toggle_out_of_range(manager):
    shopping_list = manager.new()
    with pytest.raises(ValueError, match="out of range"):
        manager.toggle(shopping_list.id, 1)


def test_remove_item(manager):
    shopping_list = manager.new()
    manager.add_item(shopping_list.id, "eggs")
    manager.add_item(shopping_list.id, "milk")
    removed = manager.remove_item(shopping_list.id, 1)
    assert removed.item == "eggs"
    assert [i.item for i in manager.get(shopping_list.id).items] == ["milk"]


def test_unknown_category_maps_to_other(tmp_path):
    manager = ShoppingListManager(base_dir=tmp_path, categories=["Produce", "Other"])
    shopping_list = manager.new()
    assert manager.add_item(shopping_list.id, "chicken thighs").category == "Other"


def test_delete(manager):
    shopping_list = manager.new()
    manager.delete(shopping_list.id)
    assert manager.list() == []
    with pytest.raises(FileNotFoundError):
        manager.get(shopping_list.id)


def test_from_meal_plan_merges_meal_ingredients(manager, meal_plan):
    shopping_list = manager.from_meal_plan(meal_plan)
    assert shopping_list.name == "Lunch Prep"
    assert [i.item for i in shopping_list.items] == ["lentils", "spinach", "chicken breast"]
    assert shopping_list.items[1].amount == "2 cups"
    assert shopping_list.items[2].category == "Proteins"


def test_from_meal_plan_prefers_grocery_list(manager, meal_plan):
    plan = meal_plan.model_copy(update={"grocery_list": ["tortillas", "lentils"]})
    shopping_list = manager.from_meal_plan(plan, name="Week 42")
    assert shopping_list.name == "Week 42"
    assert [(i.item, i.category) for i in shopping_list.items] == [("tortillas", "Bakery"), ("lentils", "Pantry")]
