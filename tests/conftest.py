import pytest
from pantry_chef.models import MealPlanDraft, RecipeDraft


@pytest.fixture
def draft():
    return RecipeDraft(
        title="Chicken Stir-Fry",
        description="Fast and crunchy.",
        servings=4,
        prep_time_minutes=15,
        cook_time_minutes=10,
        difficulty="medium",
        ingredients=[
            {"item": "chicken breast", "amount": "450g", "note": "sliced"},
            {"item": "broccoli", "amount": "1 head"},
            {"item": "soy sauce", "amount": "2 tbsp"},
        ],
        instructions=["Slice the chicken.", "Stir-fry everything."],
        macros_per_serving={"calories": 320, "protein_g": 30, "carbs_g": 12.5, "fat_g": 9},
        grocery_list=None,
    )


@pytest.fixture
def meal_plan():
    return MealPlanDraft(
        title="Lunch Prep",
        description="Two days of desk lunches.",
        plan_type="lunch-prep",
        people=1,
        days=2,
        meals_per_day=1,
        total_prep_time_hours=1.5,
        meals=[
            {
                "day": 2,
                "meal_type": "lunch",
                "title": "Lentil Salad",
                "ingredients": [{"item": "lentils", "amount": "1 cup"}, {"item": "spinach", "amount": "2 cups"}],
            },
            {
                "day": 1,
                "meal_type": "lunch",
                "title": "Chicken Wraps",
                "description": "Grilled chicken in tortillas.",
                "ingredients": [{"item": "chicken breast", "amount": "200g"}, {"item": "Spinach", "amount": "1 cup"}],
                "instructions": ["Grill the chicken.", "Wrap."],
            },
        ],
        prep_steps=["Cook the lentils.", "Grill the chicken."],
    )
