"""ORM models - import all so Base.metadata is complete for migrations."""

from liftlog.models.exercise import Exercise, ExerciseCategory
from liftlog.models.template import TemplateExercise, WorkoutTemplate
from liftlog.models.user import User
from liftlog.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "Exercise",
    "ExerciseCategory",
    "TemplateExercise",
    "User",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "WorkoutTemplate",
]
