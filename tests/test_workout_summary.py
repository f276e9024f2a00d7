from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from liftlog.core.constants import EMPTY_PLACEHOLDER
from liftlog.models import Exercise, Workout, WorkoutExercise, WorkoutSet
from liftlog.services.workout_summary import (
    format_completed_time,
    format_duration,
    format_number,
    format_range,
    summarize_sets,
    summarize_workout,
)

UTC = ZoneInfo("UTC")


def _sets(*pairs):
    return [
        WorkoutSet(set_number=i, reps=reps, weight=Decimal(str(weight)))
        for i, (reps, weight) in enumerate(pairs, start=1)
    ]


@pytest.mark.parametrize(
    "value,expected",
    [(Decimal("80.00"), "80"), (Decimal("82.50"), "82.5"), (Decimal("100"), "100"), (0, "0"), (7, "7")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_equal_weights_collapse_to_single_value():
    assert format_range([Decimal("80"), Decimal("80"), Decimal("80")], "kg") == "80kg"


def test_different_weights_show_min_max():
    assert format_range([Decimal("70"), Decimal("80"), Decimal("60")], "kg") == "60-80kg"


def test_empty_range_uses_placeholder():
    assert format_range([], "kg") == EMPTY_PLACEHOLDER


def test_summarize_sets():
    assert summarize_sets(_sets((8, 80), (8, 80), (6, 85))) == (3, "6-8", "80-85kg")
    assert summarize_sets(_sets((5, "102.5")), unit="lb") == (1, "5", "102.5lb")


def test_summarize_empty_sets():
    assert summarize_sets([]) == (0, EMPTY_PLACEHOLDER, EMPTY_PLACEHOLDER)


def test_duration_whole_minutes():
    assert format_duration(2700) == "45 min"
    assert format_duration(2759) == "45 min"
    assert format_duration(59) == "0 min"
    assert format_duration(None) is None


def test_completed_time_is_twelve_hour_in_zone():
    when = datetime(2026, 1, 6, 13, 30, tzinfo=timezone.utc)
    assert format_completed_time(when, UTC) == "01:30 PM"
    assert format_completed_time(when, ZoneInfo("America/New_York")) == "08:30 AM"
    # Naive values read back from the store are UTC
    assert format_completed_time(datetime(2026, 1, 6, 8, 30), UTC) == "08:30 AM"


def test_summarize_workout():
    bench = Exercise(id=1, name="Bench Press")
    squat = Exercise(id=2, name="Squat")
    workout = Workout(
        id=10,
        name=None,
        date=datetime(2026, 1, 6, 8, 30, tzinfo=timezone.utc),
        duration_seconds=None,
        workout_exercises=[
            WorkoutExercise(id=100, exercise_id=1, exercise=bench, order_index=0, sets=_sets((8, 80), (6, 85))),
            WorkoutExercise(id=101, exercise_id=2, exercise=squat, order_index=1, sets=[]),
        ],
    )

    summary = summarize_workout(workout, UTC)

    assert summary.title == "Untitled Workout"
    assert summary.completed_time == "08:30 AM"
    assert summary.duration is None
    assert [e.name for e in summary.exercises] == ["Bench Press", "Squat"]
    assert summary.exercises[0].reps_display == "6-8"
    assert summary.exercises[0].weight_display == "80-85kg"
    assert summary.exercises[1].total_sets == 0
    assert summary.exercises[1].weight_display == EMPTY_PLACEHOLDER
