from __future__ import annotations
import json
import logging
from pathlib import Path
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Spice(BaseModel):
    name: str
    category: str = "Other"
    is_common: bool = True


_DEFAULTS: dict[str, list[str]] = {
    "Basics": ["Salt", "Black Pepper", "Garlic Powder", "Onion Powder"],
    "Herbs": ["Oregano", "Basil", "Thyme", "Rosemary", "Parsley", "Cilantro"],
    "Warm Spices": [
        "Paprika", "Cumin", "Chili Powder", "Cayenne", "Ginger",
        "Turmeric", "Curry Powder", "Cinnamon", "Nutmeg",
    ],
    "Blends": [
        "Italian Seasoning", "Taco Seasoning", "Everything Bagel",
        "Cajun Seasoning", "Greek Seasoning",
    ],
    "Oils": ["Olive Oil", "Vegetable Oil", "Sesame Oil", "Coconut Oil", "Avocado Oil", "Butter"],
    "Sauces": [
        "Soy Sauce", "Fish Sauce", "Worcestershire", "Hot Sauce", "Sriracha",
        "Oyster Sauce", "Teriyaki Sauce", "BBQ Sauce",
    ],
    "Vinegars": [
        "White Vinegar", "Apple Cider Vinegar", "Balsamic Vinegar",
        "Rice Vinegar", "Red Wine Vinegar",
    ],
}

DEFAULT_SPICES = [Spice(name=name, category=category) for category, names in _DEFAULTS.items() for name in names]


class SpiceCatalog:
    """Seasonings the user keeps on hand. Falls back to the built-in list until customized."""

    def __init__(self, base_dir: Path | None = None):
        self._path = (base_dir or (Path.home() / ".pantry_chef")) / "spices.json"

    def list(self) -> list[Spice]:
        if not self._path.exists():
            return [s.model_copy() for s in DEFAULT_SPICES]
        try:
            spices = [Spice.model_validate(s) for s in json.loads(self._path.read_text())]
        except Exception:
            logger.warning("Could not read spice catalogue %s, using defaults", self._path.name)
            return [s.model_copy() for s in DEFAULT_SPICES]
        return spices or [s.model_copy() for s in DEFAULT_SPICES]

    def add(self, name: str, category: str = "Other") -> None:
        spices = self.list()
        if not any(s.name.lower() == name.lower() for s in spices):
            spices.append(Spice(name=name, category=category, is_common=False))
            self._save(spices)

    def remove(self, name: str) -> None:
        self._save([s for s in self.list() if s.name.lower() != name.lower()])

    def by_category(self) -> dict[str, list[Spice]]:
        grouped: dict[str, list[Spice]] = {}
        for spice in self.list():
            grouped.setdefault(spice.category, []).append(spice)
        return grouped

    def _save(self, spices: list[Spice]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps([s.model_dump() for s in spices], indent=2))
