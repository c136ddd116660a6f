from __future__ import annotations
import logging
import re
import uuid
from datetime import datetime, timezone
from pathlib import Path
from pydantic import BaseModel, Field
from pantry_chef.models import MealPlanDraft, RecipeDraft

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Proteins", "Produce", "Dairy", "Pantry", "Frozen", "Bakery", "Other"]

_CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "Proteins": [
        "chicken", "beef", "pork", "turkey", "fish", "salmon", "tuna", "shrimp",
        "lamb", "tofu", "tempeh", "bacon", "sausage", "ham", "steak", "egg",
    ],
    "Dairy": ["milk", "cheese", "butter", "cream", "yogurt", "parmesan", "mozzarella"],
    "Frozen": ["frozen", "ice cream"],
    "Bakery": ["bread", "bun", "tortilla", "pita", "bagel", "baguette", "croissant"],
    "Produce": [
        "onion", "garlic", "tomato", "potato", "carrot", "broccoli", "spinach", "lettuce",
        "pepper", "bell pepper", "celery", "cucumber", "zucchini", "mushroom", "lemon", "lime",
        "apple", "banana", "avocado", "cilantro", "parsley", "basil", "ginger", "cabbage",
        "kale", "eggplant",
    ],
    "Pantry": [
        "rice", "pasta", "flour", "sugar", "oil", "vinegar", "sauce", "broth", "stock",
        "beans", "lentil", "oat", "salt", "spice", "honey", "noodle", "black pepper",
        "peppercorn", "peanut butter", "almond butter", "coconut milk", "cream of tartar",
        "chicken broth", "chicken stock", "beef broth",
    ],
}

_KEYWORD_PATTERNS = [
    (category, keyword, re.compile(rf"\b{re.escape(keyword)}(?:e?s)?\b"))
    for category, keywords in _CATEGORY_KEYWORDS.items()
    for keyword in keywords
]


def categorize(item: str) -> str:
    """Best-effort store category for an item name.

    Keywords match whole words (plurals included). When several match, the
    longest keyword wins, so "peanut butter" is Pantry rather than Dairy.
    """
    name = item.lower()
    matches = [(len(keyword), category) for category, keyword, pattern in _KEYWORD_PATTERNS if pattern.search(name)]
    if not matches:
        return "Other"
    return max(matches, key=lambda m: m[0])[1]


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


class ShoppingItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    item: str
    amount: str = "1"
    category: str = "Other"
    checked: bool = False


class ShoppingList(BaseModel):
    id: str
    name: str
    created_at: datetime
    items: list[ShoppingItem] = Field(default_factory=list)


class ShoppingListManager:
    def __init__(self, base_dir: Path | None = None, categories: list[str] | None = None):
        self.base_dir = (base_dir or (Path.home() / ".pantry_chef")) / "shopping"
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.categories = categories or DEFAULT_CATEGORIES

    def _list_path(self, list_id: str) -> Path:
        return self.base_dir / f"{list_id}.json"

    def new(self, name: str = "New Shopping List", items: list[ShoppingItem] | None = None) -> ShoppingList:
        shopping_list = ShoppingList(id=_new_id(), name=name, created_at=_now(), items=items or [])
        self.save(shopping_list)
        return shopping_list

    def from_recipes(self, recipes: list[RecipeDraft], name: str = "New Shopping List") -> ShoppingList:
        entries: list[tuple[str, str]] = []
        for recipe in recipes:
            if recipe.grocery_list:
                entries += [(g, "1") for g in recipe.grocery_list]
            else:
                entries += [(i.item, i.amount) for i in recipe.ingredients]
        return self.new(name=name, items=self._merge(entries))

    def from_meal_plan(self, plan: MealPlanDraft, name: str | None = None) -> ShoppingList:
        if plan.grocery_list:
            entries = [(g, "1") for g in plan.grocery_list]
        else:
            entries = [(i.item, i.amount) for meal in plan.meals for i in meal.ingredients]
        return self.new(name=name or plan.title, items=self._merge(entries))

    def _merge(self, entries: list[tuple[str, str]]) -> list[ShoppingItem]:
        """One item per name (case-insensitive); the first amount seen is kept."""
        items: list[ShoppingItem] = []
        seen: set[str] = set()
        for item, amount in entries:
            key = item.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            items.append(ShoppingItem(item=item.strip(), amount=amount, category=self._category_for(item)))
        return items

    def save(self, shopping_list: ShoppingList) -> None:
        self._list_path(shopping_list.id).write_text(shopping_list.model_dump_json(indent=2))

    def get(self, list_id: str) -> ShoppingList:
        path = self._list_path(list_id)
        if not path.exists():
            raise FileNotFoundError(f"Shopping list '{list_id}' not found.")
        return ShoppingList.model_validate_json(path.read_text())

    def list(self) -> list[ShoppingList]:
        lists = []
        for path in self.base_dir.glob("*.json"):
            try:
                lists.append(ShoppingList.model_validate_json(path.read_text()))
            except Exception:
                logger.warning("Could not read shopping list file %s", path.name)
        return sorted(lists, key=lambda s: s.created_at, reverse=True)

    def add_item(self, list_id: str, item: str, amount: str = "", category: str | None = None) -> ShoppingItem:
        shopping_list = self.get(list_id)
        entry = ShoppingItem(
            item=item.strip(),
            amount=amount.strip() or "1",
            category=category or self._category_for(item),
        )
        shopping_list.items.append(entry)
        self.save(shopping_list)
        return entry

    def toggle(self, list_id: str, index: int) -> ShoppingItem:
        shopping_list = self.get(list_id)
        entry = self._item_at(shopping_list, index)
        entry.checked = not entry.checked
        self.save(shopping_list)
        return entry

    def remove_item(self, list_id: str, index: int) -> ShoppingItem:
        shopping_list = self.get(list_id)
        entry = self._item_at(shopping_list, index)
        shopping_list.items.remove(entry)
        self.save(shopping_list)
        return entry

    def clear_checked(self, list_id: str) -> int:
        shopping_list = self.get(list_id)
        before = len(shopping_list.items)
        shopping_list.items = [i for i in shopping_list.items if not i.checked]
        self.save(shopping_list)
        return before - len(shopping_list.items)

    def delete(self, list_id: str) -> None:
        path = self._list_path(list_id)
        if not path.exists():
            raise FileNotFoundError(f"Shopping list '{list_id}' not found.")
        path.unlink()

    def _category_for(self, item: str) -> str:
        category = categorize(item)
        return category if category in self.categories else "Other"

    @staticmethod
    def _item_at(shopping_list: ShoppingList, index: int) -> ShoppingItem:
        # 1-based, as shown by `chef shop show`
        if index < 1 or index > len(shopping_list.items):
            raise ValueError(f"Index {index} is out of range for list '{shopping_list.name}'.")
        return shopping_list.items[index - 1]
