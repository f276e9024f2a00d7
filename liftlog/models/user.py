"""User model - internal record for an external identity."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.db.base import Base


class User(Base):
    """Internal user, keyed by the identity provider's subject id.

    Created on first authenticated access; this service only reads it.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Rows cascade in the database; passive_deletes leaves it to the FK
    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="user", cascade="all", passive_deletes=True
    )
    workouts: Mapped[list["Workout"]] = relationship(
        "Workout", back_populates="user", cascade="all", passive_deletes=True
    )
    workout_templates: Mapped[list["WorkoutTemplate"]] = relationship(
        "WorkoutTemplate", back_populates="user", cascade="all", passive_deletes=True
    )
