from sqlalchemy import func, select

from liftlog.core.enums import CategoryType
from liftlog.db.seed import MUSCLE_GROUPS, PREDEFINED_EXERCISES, seed_reference_data
from liftlog.models import Exercise, ExerciseCategory


async def test_seed_inserts_system_exercises_once(db):
    assert await seed_reference_data(db) is True
    await db.commit()

    exercises = (await db.execute(select(Exercise))).scalars().all()
    assert len(exercises) == len(PREDEFINED_EXERCISES)
    assert not any(e.is_custom for e in exercises)

    groups = await db.execute(
        select(func.count(ExerciseCategory.id)).where(ExerciseCategory.type == CategoryType.MUSCLE_GROUP)
    )
    assert groups.scalar_one() == len(MUSCLE_GROUPS)

    assert await seed_reference_data(db) is False
    total = await db.execute(select(func.count(Exercise.id)))
    assert total.scalar_one() == len(PREDEFINED_EXERCISES)
