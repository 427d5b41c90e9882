"""HTTP request and response schemas."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from workout_builder.db.models import EQUIPMENT, MUSCLES, AttributeValue

MAX_LIMIT = 10


def _dedupe(values: list[AttributeValue]) -> list[AttributeValue]:
    """Drop repeated values, keeping first-seen order."""
    return list(dict.fromkeys(values))


class GetExercisesRequest(BaseModel):
    """Body of an exercise selection request."""

    equipment: list[AttributeValue] = Field(
        min_length=1, description="Equipment the user has available"
    )
    muscles: list[AttributeValue] = Field(
        min_length=1, description="Muscle groups to train, in display order"
    )
    limit: int = Field(
        default=3, ge=1, le=MAX_LIMIT, description="Maximum exercises per muscle group"
    )

    @field_validator("equipment")
    @classmethod
    def check_equipment(cls, values: list[AttributeValue]) -> list[AttributeValue]:
        invalid = [v.value for v in values if v not in EQUIPMENT]
        if invalid:
            raise ValueError(f"Not equipment values: {', '.join(invalid)}")
        return _dedupe(values)

    @field_validator("muscles")
    @classmethod
    def check_muscles(cls, values: list[AttributeValue]) -> list[AttributeValue]:
        invalid = [v.value for v in values if v not in MUSCLES]
        if invalid:
            raise ValueError(f"Not muscle values: {', '.join(invalid)}")
        return _dedupe(values)


class MuscleGroupResponse(BaseModel):
    """Exercises selected for one muscle group."""

    muscle: str = Field(description="Requested muscle")
    exercises: list[dict[str, Any]] = Field(
        default_factory=list, description="Selected exercises with their attributes"
    )


class AttributeResponse(BaseModel):
    """An attribute name with the values stored for it."""

    id: int
    name: str
    values: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    service: str
