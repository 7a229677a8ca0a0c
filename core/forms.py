"""
core/forms.py
────────────────────────────────────────────────────────────────────────
Validation models for everything a user types in:

* `MealForm`      – diet page "add meal"
* `ExerciseForm`  – exercise page "add exercise"; a tagged union on
                    `exercise_category`, so each variant only carries the
                    fields that make sense for it
* `ProfileForm`   – profile page "save"

Each model knows how to turn itself into column values (`to_row()`).
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union, get_args

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    TypeAdapter,
    field_validator,
)

from core.dates import as_utc, now_utc, parse_local_input

Category = Literal["cardio", "strength", "flexibility", "sports"]
CATEGORIES: tuple[str, ...] = get_args(Category)

# suggestions for the "type" picker, per category
EXERCISE_TYPES: dict[str, list[str]] = {
    "cardio": ["Running", "Cycling", "Swimming", "Walking", "Rowing", "HIIT", "Other Cardio"],
    "strength": ["Weight Training", "Bodyweight Exercise", "Resistance Bands", "Other Strength"],
    "flexibility": ["Yoga", "Pilates", "Stretching", "Other Flexibility"],
    "sports": ["Basketball", "Tennis", "Soccer", "Other Sports"],
}

ActivityLevel = Literal[
    "Sedentary",
    "Lightly Active",
    "Moderately Active",
    "Very Active",
    "Extremely Active",
]
ACTIVITY_LEVELS: tuple[str, ...] = get_args(ActivityLevel)
DEFAULT_CALORIE_GOAL = 2300

RequiredText = Annotated[str, Field(min_length=1)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalInt = Annotated[Optional[NonNegativeInt], BeforeValidator(_blank_to_none)]
OptionalFloat = Annotated[Optional[NonNegativeFloat], BeforeValidator(_blank_to_none)]
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]


# ───────────────────────────── meals ──────────────────────────────── #
class MealForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    name: RequiredText
    calories: NonNegativeFloat = 0
    protein: NonNegativeFloat = 0
    carbs: NonNegativeFloat = 0
    fat: NonNegativeFloat = 0
    meal_time: datetime = Field(default_factory=now_utc, alias="time")

    @field_validator("meal_time", mode="before")
    @classmethod
    def _parse_time(cls, v: Any) -> Any:
        # the picker already shows reference-zone wall clock: keep it as typed
        if isinstance(v, str) and v.strip():
            return parse_local_input(v)
        return v

    @field_validator("meal_time")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_row(self) -> dict[str, Any]:
        return self.model_dump()


# ─────────────────────────── exercises ────────────────────────────── #
class _ExerciseBase(BaseModel):
    # fields from other categories are silently discarded
    model_config = ConfigDict(
        str_strip_whitespace=True, populate_by_name=True, extra="ignore"
    )

    name: RequiredText
    type: RequiredText
    exercise_time: datetime = Field(default_factory=now_utc, alias="date")

    @field_validator("exercise_time", mode="before")
    @classmethod
    def _normalise_time(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v
        if isinstance(v, str):
            try:
                return parse_local_input(v)
            except ValueError:
                pass
        return now_utc()

    @field_validator("exercise_time")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_row(self) -> dict[str, Any]:
        """Column values with empty optionals stripped."""
        return self.model_dump(exclude_none=True)


class CardioExercise(_ExerciseBase):
    exercise_category: Literal["cardio"]
    duration: OptionalInt = None
    distance: OptionalFloat = None
    calories_burned: OptionalInt = None


class StrengthExercise(_ExerciseBase):
    exercise_category: Literal["strength"]
    sets: OptionalInt = None
    reps: OptionalInt = None
    weight: OptionalFloat = None


class FlexibilityExercise(_ExerciseBase):
    exercise_category: Literal["flexibility"]
    duration: OptionalInt = None
    calories_burned: OptionalInt = None


class SportsExercise(_ExerciseBase):
    exercise_category: Literal["sports"]
    duration: OptionalInt = None
    calories_burned: OptionalInt = None


ExerciseForm = Annotated[
    Union[CardioExercise, StrengthExercise, FlexibilityExercise, SportsExercise],
    Field(discriminator="exercise_category"),
]
exercise_form = TypeAdapter(ExerciseForm)


# ──────────────────────────── profile ─────────────────────────────── #
class ProfileForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: OptionalText = None
    avatar_url: OptionalText = None
    height: OptionalFloat = None
    weight: OptionalFloat = None
    goal_weight: OptionalFloat = None
    activity_level: ActivityLevel = "Moderately Active"
    daily_calorie_goal: NonNegativeInt = DEFAULT_CALORIE_GOAL

    def to_row(self) -> dict[str, Any]:
        return self.model_dump()
