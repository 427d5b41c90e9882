"""Attribute metadata repository."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from workout_builder.db.models import AttributeName, ExerciseAttributeName


class AttributeRepository:
    """Pure data access for attribute names and values."""

    def __init__(self, session: Session):
        self.session = session

    def get_name(self, name: AttributeName) -> ExerciseAttributeName | None:
        """Get an attribute name row by its enum value."""
        result = self.session.execute(
            select(ExerciseAttributeName).where(ExerciseAttributeName.name == name.value)
        )
        return result.scalar_one_or_none()

    def get_names(
        self, names: Iterable[AttributeName]
    ) -> dict[AttributeName, ExerciseAttributeName]:
        """Get several attribute name rows at once; missing names are left out."""
        wanted = {name.value: name for name in names}
        result = self.session.execute(
            select(ExerciseAttributeName).where(
                ExerciseAttributeName.name.in_(list(wanted))
            )
        )
        return {wanted[row.name]: row for row in result.scalars().all()}

    def list_all(self) -> list[ExerciseAttributeName]:
        """Get every attribute name with its values loaded."""
        result = self.session.execute(
            select(ExerciseAttributeName)
            .options(selectinload(ExerciseAttributeName.values))
            .order_by(ExerciseAttributeName.name)
        )
        return list(result.scalars().all())
