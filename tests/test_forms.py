# tests/test_forms.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.forms import (
    CardioExercise,
    MealForm,
    ProfileForm,
    StrengthExercise,
    exercise_form,
)

UTC = timezone.utc


# ── meals ────────────────────────────────────────────────────────────
def test_meal_numbers_are_coerced():
    m = MealForm.model_validate(
        {"name": "Oatmeal", "calories": "300", "protein": "10", "carbs": 50, "fat": 5,
         "time": "2026-10-19T08:00"}
    )
    assert (m.calories, m.protein, m.carbs, m.fat) == (300, 10, 50, 5)
    assert m.meal_time == datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def test_meal_zero_allowed_negative_rejected():
    assert MealForm(name="Water", calories=0).calories == 0
    with pytest.raises(ValidationError):
        MealForm(name="Oops", calories=-1)


def test_meal_name_required():
    with pytest.raises(ValidationError):
        MealForm.model_validate({"name": "   ", "calories": 100})


# ── exercises ────────────────────────────────────────────────────────
def test_strength_drops_stale_cardio_fields():
    form = exercise_form.validate_python({
        "name": "Squats",
        "type": "Weight Training",
        "exercise_category": "strength",
        "sets": 5, "reps": 5, "weight": 100,
        # left over from an earlier cardio selection
        "duration": 30, "distance": 5.2, "calories_burned": 250,
    })
    assert isinstance(form, StrengthExercise)
    row = form.to_row()
    assert {"sets": 5, "reps": 5, "weight": 100}.items() <= row.items()
    for stale in ("duration", "distance", "calories_burned"):
        assert stale not in row


def test_empty_fields_are_stripped():
    form = exercise_form.validate_python({
        "name": "Jog", "type": "Running", "exercise_category": "cardio",
        "duration": "", "distance": None, "calories_burned": 120,
    })
    assert isinstance(form, CardioExercise)
    row = form.to_row()
    assert row["calories_burned"] == 120
    assert "duration" not in row and "distance" not in row


def test_exercise_time_normalised_to_instant():
    form = exercise_form.validate_python({
        "name": "Yoga", "type": "Yoga", "exercise_category": "flexibility",
        "date": "2026-01-15T07:00",
    })
    assert form.exercise_time == datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


def test_bad_exercise_time_falls_back_to_now():
    form = exercise_form.validate_python({
        "name": "Tennis", "type": "Tennis", "exercise_category": "sports",
        "date": "not a date",
    })
    assert abs(form.exercise_time - datetime.now(UTC)) < timedelta(minutes=1)


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "Running", "exercise_category": "cardio"},                  # no name
        {"name": "Run", "type": "", "exercise_category": "cardio"},          # empty type
        {"name": "Run", "type": "Running", "exercise_category": "dance"},    # unknown category
        {"name": "Run", "type": "Running"},                                  # no category
        {"name": "Lift", "type": "Weights", "exercise_category": "strength", "sets": -1},
    ],
)
def test_invalid_exercise_rejected(payload):
    with pytest.raises(ValidationError):
        exercise_form.validate_python(payload)


# ── profile ──────────────────────────────────────────────────────────
def test_profile_defaults():
    p = ProfileForm()
    assert p.activity_level == "Moderately Active"
    assert p.daily_calorie_goal == 2300


def test_profile_activity_level_is_enumerated():
    with pytest.raises(ValidationError):
        ProfileForm(activity_level="Couch Potato")
