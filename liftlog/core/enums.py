"""Shared enums for models and API."""

from enum import Enum


class CategoryType(str, Enum):
    """How an exercise category classifies exercises."""

    TYPE = "type"  # strength, cardio, flexibility
    MUSCLE_GROUP = "muscle_group"  # chest, back, legs, ...
