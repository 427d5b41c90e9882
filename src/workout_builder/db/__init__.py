"""Database module for the exercise library."""

from workout_builder.db.models import (
    AttributeName,
    AttributeValue,
    Base,
    Exercise,
    ExerciseAttribute,
    ExerciseAttributeName,
    ExerciseAttributeValue,
)
from workout_builder.db.session import (
    create_tables,
    get_engine,
    get_session,
    init_db,
)

__all__ = [
    "Base",
    "AttributeName",
    "AttributeValue",
    "Exercise",
    "ExerciseAttribute",
    "ExerciseAttributeName",
    "ExerciseAttributeValue",
    "get_engine",
    "get_session",
    "create_tables",
    "init_db",
]
