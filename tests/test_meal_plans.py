import logging
from datetime import datetime, timezone
import pytest
from pydantic import ValidationError
from pantry_chef.meal_plans import MealPlanBook, SavedMealPlan
from pantry_chef.models import MealPlanDraft, MealPlanRequest


@pytest.fixture
def book(tmp_path):
    return MealPlanBook(base_dir=tmp_path)


def test_save_creates_file(book, meal_plan, tmp_path):
    saved = book.save(meal_plan, ingredients_input=["lentils"])
    assert isinstance(saved, SavedMealPlan)
    assert (tmp_path / "meal_plans" / f"{saved.id}.json").exists()
    assert saved.ingredients_input == ["lentils"]


def test_get_round_trips(book, meal_plan):
    saved = book.save(meal_plan)
    loaded = book.get(saved.id)
    assert loaded.title == "Lunch Prep"
    assert loaded.total_prep_time_hours == 1.5
    assert [m.title for m in loaded.meals] == ["Lentil Salad", "Chicken Wraps"]


def test_get_missing_raises(book):
    with pytest.raises(FileNotFoundError, match="Meal plan 'nope' not found"):
        book.get("nope")


def test_list_newest_first(book, meal_plan, monkeypatch):
    stamps = iter([datetime(2026, 10, 1, tzinfo=timezone.utc), datetime(2026, 10, 8, tzinfo=timezone.utc)])
    monkeypatch.setattr("pantry_chef.meal_plans._now", lambda: next(stamps))
    first = book.save(meal_plan)
    second = book.save(meal_plan.model_copy(update={"title": "Next Week"}))
    assert [p.id for p in book.list()] == [second.id, first.id]


def test_delete(book, meal_plan):
    saved = book.save(meal_plan)
    book.delete(saved.id)
    assert book.list() == []
    with pytest.raises(FileNotFoundError):
        book.delete(saved.id)


def test_list_skips_corrupt_files_with_warning(book, meal_plan, tmp_path, caplog):
    book.save(meal_plan)
    (tmp_path / "meal_plans" / "bad.json").write_text("{")
    with caplog.at_level(logging.WARNING, logger="pantry_chef.meal_plans"):
        plans = book.list()
    assert len(plans) == 1
    assert any("bad.json" in msg for msg in caplog.messages)


def test_total_meals(meal_plan):
    assert meal_plan.total_meals == 2


def test_meal_on_day_beyond_plan_rejected(meal_plan):
    data = meal_plan.model_dump()
    data["meals"][0]["day"] = 3
    with pytest.raises(ValidationError, match="day 3 of a 2-day plan"):
        MealPlanDraft.model_validate(data)


def test_request_accepts_camel_case_wire_names():
    request = MealPlanRequest.model_validate({"planType": "weekly-prep", "mealsPerDay": 3, "people": 4})
    assert request.plan_type == "weekly-prep"
    assert request.meals_per_day == 3
    assert request.plan_description.startswith("Weekly prep")


@pytest.mark.parametrize("overrides", [{"people": 0}, {"days": 15}, {"meals_per_day": 5}])
def test_request_bounds(overrides):
    with pytest.raises(ValidationError):
        MealPlanRequest(**overrides)
