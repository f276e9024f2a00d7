"""Application constants."""

# Shown in place of a range when an exercise has no sets
EMPTY_PLACEHOLDER = "—"

UNTITLED_WORKOUT = "Untitled Workout"
WORKOUT_NOT_FOUND = "Workout not found"
