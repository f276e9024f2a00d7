"""Exercise and ExerciseCategory models - predefined and user-custom exercises."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.core.enums import CategoryType
from liftlog.db.base import Base


class ExerciseCategory(Base):
    """System-wide category: an exercise type (Strength) or a muscle group (Chest)."""

    __tablename__ = "exercise_categories"
    __table_args__ = (
        UniqueConstraint("name", "type", name="uq_exercise_categories_name_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[CategoryType] = mapped_column(
        Enum(CategoryType, name="category_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    exercises: Mapped[list["Exercise"]] = relationship("Exercise", back_populates="category")


class Exercise(Base):
    """Exercise definition. user_id NULL = predefined (system), set = custom for that user."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("exercise_categories.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User | None"] = relationship("User", back_populates="exercises")
    category: Mapped["ExerciseCategory | None"] = relationship(
        "ExerciseCategory", back_populates="exercises"
    )
    # History rows block deletion; never null them out from the ORM side
    workout_exercises: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise", back_populates="exercise", passive_deletes="all"
    )
    template_entries: Mapped[list["TemplateExercise"]] = relationship(
        "TemplateExercise", back_populates="exercise", passive_deletes="all"
    )

    @property
    def is_custom(self) -> bool:
        return self.user_id is not None
