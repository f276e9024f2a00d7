"""Shared fixtures: in-memory SQLite schema, data builders, API client."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from liftlog.core.config import get_settings
from liftlog.db.base import Base
from liftlog.db.session import get_db
from liftlog.models import Exercise, User, Workout, WorkoutExercise, WorkoutSet

TEST_SECRET = "test-identity-secret"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def identity_settings(monkeypatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "identity_secret", TEST_SECRET)
    monkeypatch.setattr(settings, "identity_algorithm", "HS256")
    monkeypatch.setattr(settings, "identity_issuer", None)
    monkeypatch.setattr(settings, "identity_audience", None)
    monkeypatch.setattr(settings, "default_timezone", "UTC")
    monkeypatch.setattr(settings, "weight_unit", "kg")
    return settings


def make_token(subject: str | None, expires_in: timedelta = timedelta(minutes=5), **claims) -> str:
    payload = {"exp": datetime.now(timezone.utc) + expires_in, **claims}
    if subject is not None:
        payload["sub"] = subject
    return jwt.encode(payload, TEST_SECRET, algorithm="HS256")


def auth_header(subject: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(subject)}"}


@pytest.fixture
async def client(session_maker, identity_settings):
    from liftlog.main import app

    async def override_get_db():
        async with session_maker() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def local(year, month, day, hour=0, minute=0, second=0, tz="UTC") -> datetime:
    """Wall-clock time in tz, returned as the same instant in UTC."""
    return datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo(tz)).astimezone(timezone.utc)


async def add_user(db: AsyncSession, external_id: str, user_id: int | None = None) -> User:
    user = User(id=user_id, external_id=external_id, email=f"{external_id}@example.com")
    db.add(user)
    await db.flush()
    return user


async def add_exercise(db: AsyncSession, name: str, owner: User | None = None) -> Exercise:
    exercise = Exercise(name=name, user_id=owner.id if owner else None)
    db.add(exercise)
    await db.flush()
    return exercise


async def add_workout(
    db: AsyncSession,
    owner: User,
    when: datetime,
    entries=(),
    name: str | None = None,
    duration_seconds: int | None = None,
) -> Workout:
    """entries: (exercise, order_index, [(set_number, reps, weight), ...])"""
    workout = Workout(user_id=owner.id, date=when, name=name, duration_seconds=duration_seconds)
    for exercise, order_index, sets in entries:
        workout.workout_exercises.append(
            WorkoutExercise(
                exercise_id=exercise.id,
                order_index=order_index,
                sets=[
                    WorkoutSet(set_number=n, reps=reps, weight=Decimal(str(weight)))
                    for n, reps, weight in sets
                ],
            )
        )
    db.add(workout)
    await db.flush()
    return workout
