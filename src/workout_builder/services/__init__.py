"""Service layer for business logic."""

from workout_builder.services.exercise import (
    FETCH_ERROR,
    ExerciseSelectionService,
    MuscleGroupSelection,
)

__all__ = [
    "ExerciseSelectionService",
    "MuscleGroupSelection",
    "FETCH_ERROR",
]
