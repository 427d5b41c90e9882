"""Seed data for attribute metadata and a starter exercise library."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from workout_builder.db.models import (
    VALUES_BY_NAME,
    AttributeName,
    AttributeValue,
    Exercise,
    ExerciseAttribute,
    ExerciseAttributeName,
    ExerciseAttributeValue,
)

logger = logging.getLogger(__name__)

V = AttributeValue

# Starter exercise library
EXERCISES = [
    # Chest
    {
        "name": "Barbell Bench Press",
        "slug": "barbell-bench-press",
        "description": "Lie on a flat bench and press the bar from mid-chest to lockout.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.CHEST],
        "secondary": [V.TRICEPS, V.SHOULDERS],
        "equipment": [V.BARBELL, V.BENCH],
    },
    {
        "name": "Dumbbell Bench Press",
        "slug": "dumbbell-bench-press",
        "description": "Press a pair of dumbbells from chest height while lying on a bench.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.CHEST],
        "secondary": [V.TRICEPS, V.SHOULDERS],
        "equipment": [V.DUMBBELL, V.BENCH],
    },
    {
        "name": "Dumbbell Fly",
        "slug": "dumbbell-fly",
        "description": "Open the arms in a wide arc and squeeze the dumbbells back together.",
        "type": [V.STRENGTH],
        "mechanics": [V.ISOLATION],
        "primary": [V.CHEST],
        "secondary": [V.SHOULDERS],
        "equipment": [V.DUMBBELL, V.BENCH],
    },
    {
        "name": "Push-Up",
        "slug": "push-up",
        "description": "Lower the chest to the floor with a rigid torso and push back up.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.COMPOUND],
        "primary": [V.CHEST],
        "secondary": [V.TRICEPS, V.SHOULDERS, V.ABDOMINALS],
        "equipment": [V.BODY_ONLY],
    },
    {
        "name": "Cable Crossover",
        "slug": "cable-crossover",
        "description": "Bring the cable handles together in front of the chest.",
        "type": [V.STRENGTH],
        "mechanics": [V.ISOLATION],
        "primary": [V.CHEST],
        "secondary": [],
        "equipment": [V.CABLE],
    },
    {
        "name": "Doorway Chest Stretch",
        "slug": "doorway-chest-stretch",
        "description": "Place the forearms on a door frame and lean through gently.",
        "type": [V.STRETCHING],
        "mechanics": [V.ISOLATION],
        "primary": [V.CHEST],
        "secondary": [V.SHOULDERS],
        "equipment": [V.BODY_ONLY],
    },
    # Back
    {
        "name": "Pull-Up",
        "slug": "pull-up",
        "description": "Hang from the bar and pull until the chin clears it.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.COMPOUND],
        "primary": [V.LATS, V.BACK],
        "secondary": [V.BICEPS, V.FOREARMS],
        "equipment": [V.PULLUP_BAR],
    },
    {
        "name": "Barbell Row",
        "slug": "barbell-row",
        "description": "Hinge forward and row the bar to the lower ribs.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.BACK],
        "secondary": [V.BICEPS, V.LATS],
        "equipment": [V.BARBELL],
    },
    {
        "name": "One-Arm Dumbbell Row",
        "slug": "one-arm-dumbbell-row",
        "description": "Brace on a bench and row the dumbbell towards the hip.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.BACK, V.LATS],
        "secondary": [V.BICEPS],
        "equipment": [V.DUMBBELL, V.BENCH],
    },
    {
        "name": "Deadlift",
        "slug": "deadlift",
        "description": "Lift the bar from the floor to full hip extension with a neutral spine.",
        "type": [V.POWERLIFTING],
        "mechanics": [V.COMPOUND],
        "primary": [V.HAMSTRINGS, V.BACK],
        "secondary": [V.GLUTES, V.TRAPS, V.FOREARMS],
        "equipment": [V.BARBELL],
    },
    # Shoulders
    {
        "name": "Overhead Press",
        "slug": "overhead-press",
        "description": "Press the bar from the collarbone to overhead lockout.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.SHOULDERS],
        "secondary": [V.TRICEPS, V.TRAPS],
        "equipment": [V.BARBELL],
    },
    {
        "name": "Dumbbell Lateral Raise",
        "slug": "dumbbell-lateral-raise",
        "description": "Raise the dumbbells out to the sides up to shoulder height.",
        "type": [V.STRENGTH],
        "mechanics": [V.ISOLATION],
        "primary": [V.SHOULDERS],
        "secondary": [V.TRAPS],
        "equipment": [V.DUMBBELL],
    },
    {
        "name": "Pike Push-Up",
        "slug": "pike-push-up",
        "description": "From a pike position, lower the head towards the floor and press back.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.COMPOUND],
        "primary": [V.SHOULDERS],
        "secondary": [V.TRICEPS, V.CHEST],
        "equipment": [V.BODY_ONLY],
    },
    # Arms
    {
        "name": "Dumbbell Curl",
        "slug": "dumbbell-curl",
        "description": "Curl the dumbbells with the elbows pinned to the sides.",
        "type": [V.STRENGTH],
        "mechanics": [V.ISOLATION],
        "primary": [V.BICEPS],
        "secondary": [V.FOREARMS],
        "equipment": [V.DUMBBELL],
    },
    {
        "name": "Bench Dip",
        "slug": "bench-dip",
        "description": "Lower and raise the body using the hands on the edge of a bench.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.COMPOUND],
        "primary": [V.TRICEPS],
        "secondary": [V.CHEST, V.SHOULDERS],
        "equipment": [V.BENCH, V.BODY_ONLY],
    },
    {
        "name": "Band Triceps Pushdown",
        "slug": "band-triceps-pushdown",
        "description": "Anchor the band overhead and extend the elbows fully.",
        "type": [V.RESISTANCE],
        "mechanics": [V.ISOLATION],
        "primary": [V.TRICEPS],
        "secondary": [],
        "equipment": [V.BANDS],
    },
    # Legs
    {
        "name": "Back Squat",
        "slug": "back-squat",
        "description": "Squat below parallel with the bar across the upper back.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.QUADRICEPS],
        "secondary": [V.GLUTES, V.HAMSTRINGS],
        "equipment": [V.BARBELL],
    },
    {
        "name": "Goblet Squat",
        "slug": "goblet-squat",
        "description": "Hold a kettlebell at the chest and squat between the knees.",
        "type": [V.STRENGTH],
        "mechanics": [V.COMPOUND],
        "primary": [V.QUADRICEPS],
        "secondary": [V.GLUTES],
        "equipment": [V.KETTLEBELLS, V.DUMBBELL],
    },
    {
        "name": "Bodyweight Lunge",
        "slug": "bodyweight-lunge",
        "description": "Step forward and lower the back knee towards the floor.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.COMPOUND],
        "primary": [V.QUADRICEPS, V.GLUTES],
        "secondary": [V.HAMSTRINGS],
        "equipment": [V.BODY_ONLY],
    },
    {
        "name": "Kettlebell Swing",
        "slug": "kettlebell-swing",
        "description": "Drive the hips forward to swing the kettlebell to chest height.",
        "type": [V.POWER],
        "mechanics": [V.COMPOUND],
        "primary": [V.GLUTES, V.HAMSTRINGS],
        "secondary": [V.BACK, V.SHOULDERS],
        "equipment": [V.KETTLEBELLS],
    },
    {
        "name": "Standing Calf Raise",
        "slug": "standing-calf-raise",
        "description": "Rise onto the toes and lower slowly under control.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.ISOLATION],
        "primary": [V.CALVES],
        "secondary": [],
        "equipment": [V.BODY_ONLY, V.STEP],
    },
    {
        "name": "Standing Hamstring Stretch",
        "slug": "standing-hamstring-stretch",
        "description": "Hinge over a straight front leg until a stretch is felt.",
        "type": [V.STRETCHING],
        "mechanics": [V.ISOLATION],
        "primary": [V.HAMSTRINGS],
        "secondary": [V.CALVES],
        "equipment": [V.BODY_ONLY],
    },
    # Core
    {
        "name": "Plank",
        "slug": "plank",
        "description": "Hold a straight line from head to heels on the forearms.",
        "type": [V.STABILIZATION],
        "mechanics": [V.ISOLATION],
        "primary": [V.ABDOMINALS],
        "secondary": [V.SHOULDERS, V.OBLIQUES],
        "equipment": [V.BODY_ONLY],
    },
    {
        "name": "Hanging Leg Raise",
        "slug": "hanging-leg-raise",
        "description": "Hang from the bar and raise straight legs to hip height.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.ISOLATION],
        "primary": [V.ABDOMINALS],
        "secondary": [V.HIP_FLEXOR, V.FOREARMS],
        "equipment": [V.PULLUP_BAR],
    },
    {
        "name": "Russian Twist",
        "slug": "russian-twist",
        "description": "Sit with the feet raised and rotate a medicine ball side to side.",
        "type": [V.BODYWEIGHT],
        "mechanics": [V.ISOLATION],
        "primary": [V.OBLIQUES],
        "secondary": [V.ABDOMINALS],
        "equipment": [V.MEDICINE_BALL, V.BODY_ONLY],
    },
]

# Seed keys mapped to the attribute name they populate
_ATTRIBUTE_KEYS: dict[str, AttributeName] = {
    "type": AttributeName.TYPE,
    "mechanics": AttributeName.MECHANICS_TYPE,
    "primary": AttributeName.PRIMARY_MUSCLE,
    "secondary": AttributeName.SECONDARY_MUSCLE,
    "equipment": AttributeName.EQUIPMENT,
}


def seed_attributes(
    session: Session,
) -> dict[tuple[AttributeName, AttributeValue], ExerciseAttributeValue]:
    """Create every attribute name and its allowed values if missing.

    Returns a lookup of (name, value) to the stored value row.
    """
    lookup: dict[tuple[AttributeName, AttributeValue], ExerciseAttributeValue] = {}

    for attribute_name, allowed in VALUES_BY_NAME.items():
        name_row = session.execute(
            select(ExerciseAttributeName).where(ExerciseAttributeName.name == attribute_name.value)
        ).scalar_one_or_none()
        if name_row is None:
            name_row = ExerciseAttributeName(name=attribute_name.value)
            session.add(name_row)
            session.flush()

        existing = {v.value: v for v in name_row.values}
        for value in sorted(allowed, key=lambda v: v.value):
            value_row = existing.get(value.value)
            if value_row is None:
                value_row = ExerciseAttributeValue(attribute_name=name_row, value=value.value)
                session.add(value_row)
            lookup[(attribute_name, value)] = value_row

    session.flush()
    return lookup


def add_exercise(
    session: Session,
    data: dict,
    lookup: dict[tuple[AttributeName, AttributeValue], ExerciseAttributeValue],
) -> Exercise:
    """Create one exercise with its attributes from a seed entry."""
    exercise = Exercise(
        name=data["name"],
        name_en=data.get("name_en", data["name"]),
        slug=data.get("slug"),
        description=data.get("description", ""),
        description_en=data.get("description_en", data.get("description")),
    )
    session.add(exercise)

    for key, attribute_name in _ATTRIBUTE_KEYS.items():
        for value in data.get(key, []):
            value_row = lookup[(attribute_name, value)]
            exercise.attributes.append(
                ExerciseAttribute(
                    attribute_name=value_row.attribute_name,
                    attribute_value=value_row,
                )
            )

    session.flush()
    return exercise


def seed_library(session: Session, exercises: list[dict] | None = None) -> int:
    """Seed attribute metadata and the exercise library if empty.

    Returns the number of exercises created.
    """
    lookup = seed_attributes(session)

    count = session.execute(select(func.count()).select_from(Exercise)).scalar_one()
    if count > 0:
        logger.info(f"Exercise library already has {count} exercises, skipping seed")
        return 0

    entries = EXERCISES if exercises is None else exercises
    for data in entries:
        add_exercise(session, data, lookup)

    logger.info(f"Seeded {len(entries)} exercises")
    return len(entries)
