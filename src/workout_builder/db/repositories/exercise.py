"""Exercise repository for data access."""

from collections.abc import Collection

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session, selectinload

from workout_builder.db.models import (
    Exercise,
    ExerciseAttribute,
    ExerciseAttributeValue,
)


def _has_attribute(attribute_name_id: int | None, values: Collection[str]):
    """Build an EXISTS clause matching exercises carrying one of ``values``."""
    conditions = [ExerciseAttribute.attribute_value.has(ExerciseAttributeValue.value.in_(values))]
    if attribute_name_id is not None:
        conditions.append(ExerciseAttribute.attribute_name_id == attribute_name_id)
    return Exercise.attributes.any(and_(*conditions))


class ExerciseRepository:
    """Pure data access for Exercise entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID with its attributes loaded."""
        result = self.session.execute(
            select(Exercise).where(Exercise.id == exercise_id).options(*self._load_attributes())
        )
        return result.scalar_one_or_none()

    def get_by_slug(self, slug: str) -> Exercise | None:
        """Get an exercise by slug."""
        result = self.session.execute(
            select(Exercise).where(Exercise.slug == slug).options(*self._load_attributes())
        )
        return result.scalar_one_or_none()

    def count(self) -> int:
        """Count exercises in the library."""
        return self.session.execute(select(func.count()).select_from(Exercise)).scalar_one()

    def find_by_muscle(
        self,
        muscle_attribute_id: int,
        muscle: str,
        equipment_attribute_id: int,
        equipment: Collection[str],
        limit: int,
        exclude_ids: Collection[int] = (),
        excluded_value: str | None = None,
    ) -> list[Exercise]:
        """Find exercises working ``muscle`` with any of the given equipment.

        ``muscle_attribute_id`` selects whether the muscle must be a primary or
        a secondary one. Exercises carrying ``excluded_value`` under any
        attribute name, or whose id is in ``exclude_ids``, are skipped.
        """
        if limit <= 0 or not equipment:
            return []

        query = (
            select(Exercise)
            .where(_has_attribute(muscle_attribute_id, [muscle]))
            .where(_has_attribute(equipment_attribute_id, list(equipment)))
            .options(*self._load_attributes())
            .order_by(Exercise.id)
            .limit(limit)
        )

        if excluded_value:
            query = query.where(~_has_attribute(None, [excluded_value]))

        if exclude_ids:
            query = query.where(Exercise.id.not_in(list(exclude_ids)))

        result = self.session.execute(query)
        return list(result.scalars().unique().all())

    @staticmethod
    def _load_attributes():
        return (
            selectinload(Exercise.attributes).selectinload(ExerciseAttribute.attribute_name),
            selectinload(Exercise.attributes).selectinload(ExerciseAttribute.attribute_value),
        )
