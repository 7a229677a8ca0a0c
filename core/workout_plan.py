"""
core/workout_plan.py
────────────────────────────────────────────────────────────────────────
Prompt assembly for the AI workout-plan endpoint. No I/O in here: the
route loads the history, `services.gemini` talks to the model.
"""
from __future__ import annotations

import json
from typing import Any, Iterable

from pydantic import BaseModel, Field

from core.dates import to_reference_time
from services.db import Exercise

DEFAULT_LEVEL = "intermediate"
DEFAULT_GOALS = "general fitness"
HISTORY_LIMIT = 5

EXPLANATION = (
    "This personalized workout plan is based on your available equipment, "
    "fitness level, and recent exercise history."
)

PERSONA = "You are an expert fitness trainer. Create a personalized workout plan."

_TEMPLATE = """Create a personalized workout routine based on:

Equipment Available: {equipment}
Fitness Level: {level}
Fitness Goals: {goals}
Recent Exercise History: {history}

Please provide:
1. Warm-up routine (2-3 exercises)
2. Main workout with:
   - Exercise name
   - Sets and reps
   - Proper form cues
   - Rest periods
3. Cool-down routine
4. Total estimated time
5. Safety tips

Format the response in a clear, structured way."""


class WorkoutRequest(BaseModel):
    equipment: str | None = None
    fitness_level: str | None = Field(None, alias="fitnessLevel")
    goals: str | None = None

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @property
    def level(self) -> str:
        return self.fitness_level or DEFAULT_LEVEL

    @property
    def goal_text(self) -> str:
        return self.goals or DEFAULT_GOALS


class WorkoutResponse(BaseModel):
    workout: str
    explanation: str = EXPLANATION


def summarize_history(exercises: Iterable[Exercise]) -> list[dict[str, Any]]:
    out = []
    for e in exercises:
        item = {
            "name": e.name,
            "type": e.type,
            "category": e.exercise_category,
            "duration": e.duration,
            "when": to_reference_time(e.exercise_time).date().isoformat()
            if e.exercise_time else None,
        }
        out.append({k: v for k, v in item.items() if v is not None})
    return out


def build_prompt(req: WorkoutRequest, history: list[dict[str, Any]] | None) -> str:
    return "\n\n".join([
        PERSONA,
        _TEMPLATE.format(
            equipment=req.equipment or "",
            level=req.level,
            goals=req.goal_text,
            history=json.dumps(history) if history else "No recent history",
        ),
    ])
