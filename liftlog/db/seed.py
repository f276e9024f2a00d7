"""Seed system-wide reference data: exercise categories and predefined exercises.

Run once against a migrated database:

    python -m liftlog.db.seed
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.enums import CategoryType
from liftlog.db.session import async_session_maker, engine
from liftlog.models.exercise import Exercise, ExerciseCategory

logger = logging.getLogger(__name__)

EXERCISE_TYPES = [
    ("Strength", "Resistance training exercises"),
    ("Cardio", "Cardiovascular exercises"),
    ("Flexibility", "Stretching and mobility exercises"),
]

MUSCLE_GROUPS = [
    ("Chest", "Pectoral muscles"),
    ("Back", "Latissimus dorsi, trapezius, rhomboids"),
    ("Legs", "Quadriceps, hamstrings, calves"),
    ("Shoulders", "Deltoids"),
    ("Arms", "Biceps, triceps, forearms"),
    ("Core", "Abdominals, obliques"),
    ("Full Body", "Multiple muscle groups"),
]

# (name, muscle group, description)
PREDEFINED_EXERCISES = [
    ("Bench Press", "Chest", "Classic barbell chest exercise"),
    ("Incline Dumbbell Press", "Chest", "Upper chest focused pressing movement"),
    ("Push-ups", "Chest", "Bodyweight chest exercise"),
    ("Deadlift", "Back", "Compound full-body pulling exercise"),
    ("Pull-ups", "Back", "Bodyweight back exercise"),
    ("Barbell Row", "Back", "Horizontal pulling exercise for back thickness"),
    ("Squat", "Legs", "Fundamental lower body exercise"),
    ("Romanian Deadlift", "Legs", "Hamstring and glute focused hinge movement"),
    ("Leg Press", "Legs", "Machine-based quad exercise"),
    ("Overhead Press", "Shoulders", "Vertical pressing movement for shoulders"),
    ("Lateral Raise", "Shoulders", "Isolation exercise for side deltoids"),
    ("Barbell Curl", "Arms", "Classic bicep exercise"),
    ("Tricep Dips", "Arms", "Bodyweight tricep exercise"),
    ("Plank", "Core", "Isometric core stability exercise"),
    ("Russian Twist", "Core", "Rotational core exercise"),
    ("Burpees", "Full Body", "High-intensity full body exercise"),
]


async def seed_reference_data(db: AsyncSession) -> bool:
    """Insert categories and predefined exercises. Returns False if already seeded."""
    existing = await db.execute(select(func.count(ExerciseCategory.id)))
    if existing.scalar_one() > 0:
        logger.info("Exercise categories already present; skipping seed")
        return False

    for name, description in EXERCISE_TYPES:
        db.add(ExerciseCategory(name=name, type=CategoryType.TYPE, description=description))
    groups = {
        name: ExerciseCategory(name=name, type=CategoryType.MUSCLE_GROUP, description=description)
        for name, description in MUSCLE_GROUPS
    }
    db.add_all(groups.values())
    await db.flush()

    for name, group, description in PREDEFINED_EXERCISES:
        db.add(
            Exercise(name=name, description=description, user_id=None, category_id=groups[group].id)
        )
    await db.flush()
    logger.info(
        "Seeded %d categories and %d exercises",
        len(EXERCISE_TYPES) + len(MUSCLE_GROUPS),
        len(PREDEFINED_EXERCISES),
    )
    return True


async def main() -> None:
    async with async_session_maker() as session:
        async with session.begin():
            await seed_reference_data(session)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
