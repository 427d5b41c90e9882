"""Repository layer for data access."""

from workout_builder.db.repositories.attribute import AttributeRepository
from workout_builder.db.repositories.exercise import ExerciseRepository

__all__ = [
    "AttributeRepository",
    "ExerciseRepository",
]
