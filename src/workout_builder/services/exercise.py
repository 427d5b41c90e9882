"""Exercise selection service."""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from workout_builder.config import Settings, get_settings
from workout_builder.core.result import Result
from workout_builder.db.models import AttributeName, Exercise, ExerciseAttributeName
from workout_builder.db.repositories import AttributeRepository, ExerciseRepository
from workout_builder.selection import SelectionPolicy, weighted_select

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching exercises"

REQUIRED_ATTRIBUTES = (
    AttributeName.PRIMARY_MUSCLE,
    AttributeName.SECONDARY_MUSCLE,
    AttributeName.EQUIPMENT,
)


def _plain(value) -> str:
    """Unwrap enum members to their stored string value."""
    return getattr(value, "value", value)


class MissingAttributesError(LookupError):
    """Raised when attribute metadata needed for selection is not in the database."""


@dataclass
class MuscleGroupSelection:
    """Exercises picked for one requested muscle."""

    muscle: str
    exercises: list[Exercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "muscle": self.muscle,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }


class ExerciseSelectionService:
    """Builds randomized, primary-weighted exercise selections per muscle."""

    def __init__(
        self,
        session: Session,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.session = session
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.attribute_repo = AttributeRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.policy = SelectionPolicy(
            minimum_threshold=self.settings.minimum_threshold,
            pool_multiplier=self.settings.pool_multiplier,
            minimum_pool_size=self.settings.minimum_pool_size,
            primary_ratio=self.settings.primary_ratio,
        )

    def get_exercises(
        self, muscles: Sequence[str], equipment: Sequence[str], limit: int
    ) -> Result[list[MuscleGroupSelection]]:
        """Select up to ``limit`` exercises for each muscle.

        Muscle groups with no matching exercise are left out of the result.
        Any failure is logged and reported as a single generic error.
        """
        muscles = [_plain(m) for m in muscles]
        equipment = [_plain(e) for e in equipment]
        logger.info(f"Selecting exercises: muscles={muscles} equipment={equipment} limit={limit}")

        try:
            names = self._resolve_attribute_names()
            groups = [
                self._select_for_muscle(muscle, equipment, limit, names) for muscle in muscles
            ]
        except Exception:
            logger.exception("Error fetching exercises")
            return Result.err(FETCH_ERROR)

        results = [group for group in groups if group.exercises]

        logger.info(f"Muscle groups with exercises: {len(results)}/{len(muscles)}")
        for group in results:
            logger.debug(f"  - {group.muscle}: {len(group.exercises)} exercises")

        return Result.ok(results)

    def _resolve_attribute_names(self) -> dict[AttributeName, ExerciseAttributeName]:
        names = self.attribute_repo.get_names(REQUIRED_ATTRIBUTES)
        missing = [name.value for name in REQUIRED_ATTRIBUTES if name not in names]
        if missing:
            logger.error(f"Missing attribute names in database: {missing}")
            raise MissingAttributesError(f"Missing attributes in database: {missing}")
        return names

    def _select_for_muscle(
        self,
        muscle: str,
        equipment: list[str],
        limit: int,
        names: dict[AttributeName, ExerciseAttributeName],
    ) -> MuscleGroupSelection:
        pool_size = self.policy.target_pool_size(limit)
        equipment_id = names[AttributeName.EQUIPMENT].id

        primary = self.exercise_repo.find_by_muscle(
            muscle_attribute_id=names[AttributeName.PRIMARY_MUSCLE].id,
            muscle=muscle,
            equipment_attribute_id=equipment_id,
            equipment=equipment,
            limit=pool_size,
            excluded_value=self.settings.excluded_value,
        )
        logger.debug(f"[{muscle}] {len(primary)} primary exercises")

        secondary: list[Exercise] = []
        if self.policy.needs_secondary(len(primary)):
            secondary = self.exercise_repo.find_by_muscle(
                muscle_attribute_id=names[AttributeName.SECONDARY_MUSCLE].id,
                muscle=muscle,
                equipment_attribute_id=equipment_id,
                equipment=equipment,
                limit=pool_size - len(primary),
                exclude_ids=[ex.id for ex in primary],
                excluded_value=self.settings.excluded_value,
            )
            logger.debug(f"[{muscle}] {len(secondary)} secondary exercises")

        selected = weighted_select(primary, secondary, limit, self.policy, self.rng)
        logger.debug(f"[{muscle}] selected: {', '.join(ex.name for ex in selected)}")

        return MuscleGroupSelection(muscle=muscle, exercises=selected)
