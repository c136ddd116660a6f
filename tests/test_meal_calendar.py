import logging
from datetime import date
import pytest
from pantry_chef.meal_calendar import MealCalendar
from pantry_chef.recipe_book import RecipeBook


@pytest.fixture
def saved(tmp_path, draft):
    return RecipeBook(base_dir=tmp_path).save(draft)


@pytest.fixture
def calendar(tmp_path):
    return MealCalendar(base_dir=tmp_path)


def test_schedule_persists(calendar, saved, tmp_path):
    meal = calendar.schedule(saved, date(2026, 10, 21), "lunch")
    reloaded = MealCalendar(base_dir=tmp_path).all()
    assert reloaded == [meal]
    assert reloaded[0].recipe_title == saved.title


def test_between_is_inclusive_and_sorted(calendar, saved):
    calendar.schedule(saved, date(2026, 10, 22), "dinner")
    calendar.schedule(saved, date(2026, 10, 20), "dinner")
    calendar.schedule(saved, date(2026, 10, 20), "breakfast")
    calendar.schedule(saved, date(2026, 10, 30), "dinner")
    meals = calendar.between(date(2026, 10, 20), date(2026, 10, 22))
    assert [(m.day.day, m.meal_type) for m in meals] == [(20, "breakfast"), (20, "dinner"), (22, "dinner")]


def test_week_of_runs_monday_to_sunday(calendar, saved):
    calendar.schedule(saved, date(2026, 10, 19), "dinner")  # Monday
    calendar.schedule(saved, date(2026, 10, 25), "dinner")  # Sunday
    calendar.schedule(saved, date(2026, 10, 26), "dinner")  # next Monday
    meals = calendar.week_of(date(2026, 10, 22))
    assert [m.day for m in meals] == [date(2026, 10, 19), date(2026, 10, 25)]


def test_unschedule(calendar, saved):
    meal = calendar.schedule(saved, date(2026, 10, 21))
    calendar.unschedule(meal.id)
    assert calendar.all() == []


def test_unschedule_unknown_raises(calendar):
    with pytest.raises(KeyError):
        calendar.unschedule("ghost")


def test_corrupt_calendar_warns_and_reads_empty(calendar, tmp_path, caplog):
    (tmp_path / "calendar.json").write_text("[{broken")
    with caplog.at_level(logging.WARNING, logger="pantry_chef.meal_calendar"):
        meals = calendar.all()
    assert meals == []
    assert any("calendar.json" in msg for msg in caplog.messages)


def test_schedule_after_corrupt_calendar_starts_fresh(calendar, saved, tmp_path):
    (tmp_path / "calendar.json").write_text('{"not": "a list"}')
    meal = calendar.schedule(saved, date(2026, 10, 21))
    assert calendar.all() == [meal]
