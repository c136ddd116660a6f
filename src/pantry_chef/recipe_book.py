from __future__ import annotations
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from pydantic import Field
from pantry_chef.models import RecipeDraft

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


class SavedRecipe(RecipeDraft):
    id: str
    created_at: datetime
    is_favorite: bool = False
    is_family_favorite: bool = False
    ingredients_input: list[str] = Field(default_factory=list)
    spices_used: list[str] = Field(default_factory=list)


class RecipeBook:
    def __init__(self, base_dir: Path | None = None):
        self.base_dir = (base_dir or (Path.home() / ".pantry_chef")) / "recipes"
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _recipe_path(self, recipe_id: str) -> Path:
        return self.base_dir / f"{recipe_id}.json"

    def save(
        self,
        draft: RecipeDraft,
        ingredients_input: list[str] | None = None,
        spices_used: list[str] | None = None,
    ) -> SavedRecipe:
        recipe = SavedRecipe(
            **draft.model_dump(),
            id=uuid.uuid4().hex[:8],
            created_at=_now(),
            ingredients_input=ingredients_input or [],
            spices_used=spices_used or [],
        )
        self._write(recipe)
        return recipe

    def get(self, recipe_id: str) -> SavedRecipe:
        path = self._recipe_path(recipe_id)
        if not path.exists():
            raise FileNotFoundError(f"Recipe '{recipe_id}' not found.")
        return SavedRecipe.model_validate_json(path.read_text())

    def list(self, favorites_only: bool = False, family_only: bool = False) -> list[SavedRecipe]:
        recipes = []
        for path in self.base_dir.glob("*.json"):
            try:
                recipes.append(SavedRecipe.model_validate_json(path.read_text()))
            except Exception:
                logger.warning("Could not read recipe file %s", path.name)
        if favorites_only:
            recipes = [r for r in recipes if r.is_favorite]
        if family_only:
            recipes = [r for r in recipes if r.is_family_favorite]
        return sorted(recipes, key=lambda r: r.created_at, reverse=True)

    def set_favorite(self, recipe_id: str, favorite: bool = True) -> SavedRecipe:
        recipe = self.get(recipe_id)
        recipe.is_favorite = favorite
        self._write(recipe)
        return recipe

    def set_family_favorite(self, recipe_id: str, favorite: bool = True) -> SavedRecipe:
        recipe = self.get(recipe_id)
        recipe.is_family_favorite = favorite
        self._write(recipe)
        return recipe

    def delete(self, recipe_id: str) -> None:
        path = self._recipe_path(recipe_id)
        if not path.exists():
            raise FileNotFoundError(f"Recipe '{recipe_id}' not found.")
        path.unlink()

    def _write(self, recipe: SavedRecipe) -> None:
        self._recipe_path(recipe.id).write_text(recipe.model_dump_json(indent=2))
