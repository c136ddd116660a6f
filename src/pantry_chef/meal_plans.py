from __future__ import annotations
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from pydantic import Field
from pantry_chef.models import MealPlanDraft

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


class SavedMealPlan(MealPlanDraft):
    id: str
    created_at: datetime
    ingredients_input: list[str] = Field(default_factory=list)


class MealPlanBook:
    """Generated meal plans, one JSON file per plan under ``meal_plans/``."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = (base_dir or (Path.home() / ".pantry_chef")) / "meal_plans"
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _plan_path(self, plan_id: str) -> Path:
        return self.base_dir / f"{plan_id}.json"

    def save(self, draft: MealPlanDraft, ingredients_input: list[str] | None = None) -> SavedMealPlan:
        plan = SavedMealPlan(
            **draft.model_dump(),
            id=uuid.uuid4().hex[:8],
            created_at=_now(),
            ingredients_input=ingredients_input or [],
        )
        self._plan_path(plan.id).write_text(plan.model_dump_json(indent=2))
        return plan

    def get(self, plan_id: str) -> SavedMealPlan:
        path = self._plan_path(plan_id)
        if not path.exists():
            raise FileNotFoundError(f"Meal plan '{plan_id}' not found.")
        return SavedMealPlan.model_validate_json(path.read_text())

    def list(self) -> list[SavedMealPlan]:
        plans = []
        for path in self.base_dir.glob("*.json"):
            try:
                plans.append(SavedMealPlan.model_validate_json(path.read_text()))
            except Exception:
                logger.warning("Could not read meal plan file %s", path.name)
        return sorted(plans, key=lambda p: p.created_at, reverse=True)

    def delete(self, plan_id: str) -> None:
        path = self._plan_path(plan_id)
        if not path.exists():
            raise FileNotFoundError(f"Meal plan '{plan_id}' not found.")
        path.unlink()
