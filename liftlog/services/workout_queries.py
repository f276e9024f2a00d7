"""Per-user workout queries.

Every statement here filters on Workout.user_id in the same WHERE clause as
its other predicates. Results are never narrowed in Python after the fact.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.dates import day_bounds
from liftlog.models.workout import Workout, WorkoutExercise

logger = logging.getLogger(__name__)


def _utc(value: datetime) -> datetime:
    # Same instant; bound as UTC so stores without zone support compare correctly
    if value.tzinfo is None:
        raise ValueError("Query bounds must be timezone-aware")
    return value.astimezone(timezone.utc)


def _workout_query() -> Select:
    """Workout with exercises (by order_index) and their sets (by set_number)."""
    return select(Workout).options(
        selectinload(Workout.workout_exercises).options(
            selectinload(WorkoutExercise.exercise),
            selectinload(WorkoutExercise.sets),
        )
    )


class WorkoutQueryService:
    """Read-only workout access scoped to one owner per call."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_workouts_for_date(
        self, user_id: int | None, day: date, tz: ZoneInfo
    ) -> list[Workout]:
        """All of the user's workouts on a local calendar day, most recent first."""
        if user_id is None:
            return []
        start, end = day_bounds(day, tz)
        result = await self.db.execute(
            _workout_query()
            .where(
                Workout.user_id == user_id,
                Workout.date >= _utc(start),
                Workout.date <= _utc(end),
            )
            .order_by(Workout.date.desc(), Workout.id.desc())
        )
        workouts = list(result.scalars().all())
        logger.debug(
            "user=%s day=%s tz=%s -> %d workouts", user_id, day.isoformat(), tz.key, len(workouts)
        )
        return workouts

    async def get_workout_by_id(self, user_id: int | None, workout_id: int) -> Workout | None:
        """The workout if it exists and belongs to user_id; None otherwise, either way."""
        if user_id is None:
            return None
        result = await self.db.execute(
            _workout_query().where(Workout.id == workout_id, Workout.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_workout_count(
        self, user_id: int | None, start: datetime, end: datetime
    ) -> int:
        """Count of the user's workouts with start <= date <= end (no day snapping)."""
        if user_id is None:
            return 0
        result = await self.db.execute(
            select(func.count(Workout.id)).where(
                Workout.user_id == user_id,
                Workout.date >= _utc(start),
                Workout.date <= _utc(end),
            )
        )
        return int(result.scalar_one())
