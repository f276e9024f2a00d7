"""Dashboard schemas - display-ready summaries of a day's workouts."""

from datetime import date, datetime

from pydantic import BaseModel


class ExerciseSummary(BaseModel):
    """One exercise within a workout: set count plus rep and weight ranges."""

    workout_exercise_id: int
    exercise_id: int
    name: str
    notes: str | None = None
    total_sets: int
    reps_display: str  # "8" or "6-8"
    weight_display: str  # "80kg" or "80-85kg"


class WorkoutSummary(BaseModel):
    id: int
    title: str
    date: datetime
    completed_time: str  # "08:30 AM"
    duration: str | None = None  # "45 min"
    notes: str | None = None
    exercises: list[ExerciseSummary] = []


class DashboardRead(BaseModel):
    """A selected day and the user's workouts on it."""

    selected_date: date
    selected_date_display: str  # "6th Jan 2026"
    timezone: str
    workouts: list[WorkoutSummary] = []
