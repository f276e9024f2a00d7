"""Display summaries derived from loaded workouts.

Pure functions over already-loaded ORM objects; no database access.
Weight unit is a display convention (settings.weight_unit), not stored data.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

from liftlog.core.constants import EMPTY_PLACEHOLDER, UNTITLED_WORKOUT
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet
from liftlog.schemas.dashboard import ExerciseSummary, WorkoutSummary


def format_number(value: Decimal | int | float) -> str:
    """Plain decimal text without trailing zeros: 80.00 -> '80', 82.50 -> '82.5'."""
    # normalize() alone would render 80 as 8E+1
    return format(Decimal(str(value)).normalize(), "f")


def format_range(values: Iterable[Decimal | int | float], suffix: str = "") -> str:
    """'<v><suffix>' when all values are equal, '<min>-<max><suffix>' otherwise.

    Empty input yields the placeholder rather than a numeric error.
    """
    items = [Decimal(str(v)) for v in values]
    if not items:
        return EMPTY_PLACEHOLDER
    low, high = min(items), max(items)
    if low == high:
        return f"{format_number(low)}{suffix}"
    return f"{format_number(low)}-{format_number(high)}{suffix}"


def format_completed_time(value: datetime, tz: ZoneInfo) -> str:
    """12-hour clock time in tz, e.g. '08:30 AM'. Naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz).strftime("%I:%M %p")


def format_duration(duration_seconds: int | None) -> str | None:
    """Whole minutes, e.g. '45 min'; None when no duration was logged."""
    if duration_seconds is None:
        return None
    return f"{duration_seconds // 60} min"


def summarize_sets(sets: Sequence[WorkoutSet], unit: str = "kg") -> tuple[int, str, str]:
    """(total_sets, reps_display, weight_display) for one exercise's sets."""
    return (
        len(sets),
        format_range(s.reps for s in sets),
        format_range((s.weight for s in sets), suffix=unit),
    )


def summarize_exercise(workout_exercise: WorkoutExercise, unit: str = "kg") -> ExerciseSummary:
    total_sets, reps_display, weight_display = summarize_sets(workout_exercise.sets, unit)
    return ExerciseSummary(
        workout_exercise_id=workout_exercise.id,
        exercise_id=workout_exercise.exercise_id,
        name=workout_exercise.exercise.name,
        notes=workout_exercise.notes,
        total_sets=total_sets,
        reps_display=reps_display,
        weight_display=weight_display,
    )


def summarize_workout(workout: Workout, tz: ZoneInfo, unit: str = "kg") -> WorkoutSummary:
    """Map a fully loaded workout to its display summary."""
    return WorkoutSummary(
        id=workout.id,
        title=workout.name or UNTITLED_WORKOUT,
        date=workout.date,
        completed_time=format_completed_time(workout.date, tz),
        duration=format_duration(workout.duration_seconds),
        notes=workout.notes,
        exercises=[summarize_exercise(we, unit) for we in workout.workout_exercises],
    )
