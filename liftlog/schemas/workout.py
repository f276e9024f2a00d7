"""Workout read schemas: workout -> ordered exercises -> ordered sets."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class ExerciseRef(BaseModel):
    """Exercise info embedded in a workout (system or user-custom)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    user_id: int | None = None
    category_id: int | None = None
    instructions: str | None = None


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    set_number: int
    reps: int
    weight: Decimal
    is_warmup: bool = False
    rpe: int | None = None
    notes: str | None = None


class WorkoutExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_index: int
    notes: str | None = None
    exercise: ExerciseRef
    sets: list[WorkoutSetRead] = []


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    template_id: int | None = None
    name: str | None = None
    date: datetime
    duration_seconds: int | None = None
    notes: str | None = None
    workout_exercises: list[WorkoutExerciseRead] = []


class WorkoutCount(BaseModel):
    count: int
