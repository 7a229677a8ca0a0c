"""
Seed a few demo meals and exercises for one user, timed "today".

Usage
-----

    # default hard-coded day of food and training
    python -m scripts.seed_demo <USER_ID>

    # custom list in a JSON file: {"meals": [...], "exercises": [...]}
    python -m scripts.seed_demo <USER_ID> --file path/to/demo.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any, List

from core.forms import MealForm, exercise_form
from services.db import Exercise, Meal, engine, init_models, session_factory

# ────────────────────────────────────────────────────────────────────
_DEFAULT_MEALS: List[dict[str, Any]] = [
    {"name": "Oatmeal", "calories": 300, "protein": 10, "carbs": 50, "fat": 5},
    {"name": "Chicken Salad", "calories": 450, "protein": 40, "carbs": 20, "fat": 18},
    {"name": "Salmon & Rice", "calories": 620, "protein": 38, "carbs": 65, "fat": 20},
]

_DEFAULT_EXERCISES: List[dict[str, Any]] = [
    {"name": "Morning run", "type": "Running", "exercise_category": "cardio",
     "duration": 30, "distance": 5.0, "calories_burned": 320},
    {"name": "Bench press", "type": "Weight Training", "exercise_category": "strength",
     "sets": 4, "reps": 8, "weight": 60},
]


async def _seed(user_id: str, meals: list[dict[str, Any]], exercises: list[dict[str, Any]]) -> None:
    await init_models()
    async with session_factory()() as db:
        for m in meals:
            db.add(Meal(**MealForm.model_validate(m).to_row(), user_id=user_id))
        for e in exercises:
            db.add(Exercise(**exercise_form.validate_python(e).to_row(), user_id=user_id))
        await db.commit()
    await engine().dispose()
    print(f"✓ inserted {len(meals)} meals, {len(exercises)} exercises for user {user_id}")


def _load_json(path: Path) -> dict[str, list[dict[str, Any]]]:
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError('JSON file must contain {"meals": [...], "exercises": [...]}')
    return data


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("user_id", help="target user id (account uuid)")
    parser.add_argument(
        "--file",
        type=Path,
        help="optional JSON file with meals/exercises to seed (overrides defaults)",
    )
    args = parser.parse_args()

    if args.file:
        data = _load_json(args.file)
        meals, exercises = data.get("meals", []), data.get("exercises", [])
    else:
        meals, exercises = _DEFAULT_MEALS, _DEFAULT_EXERCISES
    asyncio.run(_seed(args.user_id, meals, exercises))


if __name__ == "__main__":
    main()
