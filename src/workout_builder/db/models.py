"""SQLAlchemy models for the exercise library."""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class AttributeName(str, Enum):
    """Kinds of attributes an exercise can carry."""

    TYPE = "TYPE"
    PRIMARY_MUSCLE = "PRIMARY_MUSCLE"
    SECONDARY_MUSCLE = "SECONDARY_MUSCLE"
    EQUIPMENT = "EQUIPMENT"
    MECHANICS_TYPE = "MECHANICS_TYPE"


class AttributeValue(str, Enum):
    """Every value an exercise attribute can take."""

    # Exercise types
    BODYWEIGHT = "BODYWEIGHT"
    STRENGTH = "STRENGTH"
    POWERLIFTING = "POWERLIFTING"
    CALISTHENIC = "CALISTHENIC"
    PLYOMETRICS = "PLYOMETRICS"
    STRETCHING = "STRETCHING"
    STRONGMAN = "STRONGMAN"
    CARDIO = "CARDIO"
    STABILIZATION = "STABILIZATION"
    POWER = "POWER"
    RESISTANCE = "RESISTANCE"
    CROSSFIT = "CROSSFIT"
    WEIGHTLIFTING = "WEIGHTLIFTING"

    # Muscles
    BICEPS = "BICEPS"
    SHOULDERS = "SHOULDERS"
    CHEST = "CHEST"
    BACK = "BACK"
    GLUTES = "GLUTES"
    TRICEPS = "TRICEPS"
    HAMSTRINGS = "HAMSTRINGS"
    QUADRICEPS = "QUADRICEPS"
    FOREARMS = "FOREARMS"
    CALVES = "CALVES"
    TRAPS = "TRAPS"
    ABDOMINALS = "ABDOMINALS"
    NECK = "NECK"
    LATS = "LATS"
    ADDUCTORS = "ADDUCTORS"
    ABDUCTORS = "ABDUCTORS"
    OBLIQUES = "OBLIQUES"
    GROIN = "GROIN"
    FULL_BODY = "FULL_BODY"
    ROTATOR_CUFF = "ROTATOR_CUFF"
    HIP_FLEXOR = "HIP_FLEXOR"
    ACHILLES_TENDON = "ACHILLES_TENDON"
    FINGERS = "FINGERS"

    # Equipment
    DUMBBELL = "DUMBBELL"
    KETTLEBELLS = "KETTLEBELLS"
    BARBELL = "BARBELL"
    SMITH_MACHINE = "SMITH_MACHINE"
    BODY_ONLY = "BODY_ONLY"
    OTHER = "OTHER"
    BANDS = "BANDS"
    EZ_BAR = "EZ_BAR"
    MACHINE = "MACHINE"
    DESK = "DESK"
    PULLUP_BAR = "PULLUP_BAR"
    NONE = "NONE"
    CABLE = "CABLE"
    MEDICINE_BALL = "MEDICINE_BALL"
    SWISS_BALL = "SWISS_BALL"
    FOAM_ROLL = "FOAM_ROLL"
    WEIGHT_PLATE = "WEIGHT_PLATE"
    TRX = "TRX"
    BOX = "BOX"
    ROPES = "ROPES"
    SPIN_BIKE = "SPIN_BIKE"
    STEP = "STEP"
    BOSU = "BOSU"
    TYRE = "TYRE"
    SANDBAG = "SANDBAG"
    SLED = "SLED"
    BENCH = "BENCH"

    # Mechanics
    ISOLATION = "ISOLATION"
    COMPOUND = "COMPOUND"


EXERCISE_TYPES: frozenset[AttributeValue] = frozenset({
    AttributeValue.BODYWEIGHT,
    AttributeValue.STRENGTH,
    AttributeValue.POWERLIFTING,
    AttributeValue.CALISTHENIC,
    AttributeValue.PLYOMETRICS,
    AttributeValue.STRETCHING,
    AttributeValue.STRONGMAN,
    AttributeValue.CARDIO,
    AttributeValue.STABILIZATION,
    AttributeValue.POWER,
    AttributeValue.RESISTANCE,
    AttributeValue.CROSSFIT,
    AttributeValue.WEIGHTLIFTING,
})

MUSCLES: frozenset[AttributeValue] = frozenset({
    AttributeValue.BICEPS,
    AttributeValue.SHOULDERS,
    AttributeValue.CHEST,
    AttributeValue.BACK,
    AttributeValue.GLUTES,
    AttributeValue.TRICEPS,
    AttributeValue.HAMSTRINGS,
    AttributeValue.QUADRICEPS,
    AttributeValue.FOREARMS,
    AttributeValue.CALVES,
    AttributeValue.TRAPS,
    AttributeValue.ABDOMINALS,
    AttributeValue.NECK,
    AttributeValue.LATS,
    AttributeValue.ADDUCTORS,
    AttributeValue.ABDUCTORS,
    AttributeValue.OBLIQUES,
    AttributeValue.GROIN,
    AttributeValue.FULL_BODY,
    AttributeValue.ROTATOR_CUFF,
    AttributeValue.HIP_FLEXOR,
    AttributeValue.ACHILLES_TENDON,
    AttributeValue.FINGERS,
})

MECHANICS: frozenset[AttributeValue] = frozenset({
    AttributeValue.ISOLATION,
    AttributeValue.COMPOUND,
})

EQUIPMENT: frozenset[AttributeValue] = frozenset(
    set(AttributeValue) - EXERCISE_TYPES - MUSCLES - MECHANICS
)

# Which values are valid under each attribute name
VALUES_BY_NAME: dict[AttributeName, frozenset[AttributeValue]] = {
    AttributeName.TYPE: EXERCISE_TYPES,
    AttributeName.PRIMARY_MUSCLE: MUSCLES,
    AttributeName.SECONDARY_MUSCLE: MUSCLES,
    AttributeName.EQUIPMENT: EQUIPMENT,
    AttributeName.MECHANICS_TYPE: MECHANICS,
}


class Exercise(Base):
    """An exercise in the library."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    name_en: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str] = mapped_column(Text, default="")
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    full_video_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    introduction: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str | None] = mapped_column(String(200), unique=True, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC)
    )

    # Relationships
    attributes: Mapped[list["ExerciseAttribute"]] = relationship(
        back_populates="exercise", cascade="all, delete"
    )

    def values_for(self, name: AttributeName) -> list[str]:
        """Get the attribute values stored under a given attribute name."""
        return [
            attr.attribute_value.value
            for attr in self.attributes
            if attr.attribute_name.name == name.value
        ]

    def to_dict(self) -> dict:
        """Convert exercise to dictionary for API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "name_en": self.name_en,
            "description": self.description,
            "description_en": self.description_en,
            "full_video_url": self.full_video_url,
            "full_video_image_url": self.full_video_image_url,
            "introduction": self.introduction,
            "slug": self.slug,
            "attributes": [attr.to_dict() for attr in self.attributes],
        }


class ExerciseAttributeName(Base):
    """Attribute kind, e.g. PRIMARY_MUSCLE or EQUIPMENT."""

    __tablename__ = "exercise_attribute_names"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True)

    # Relationships
    values: Mapped[list["ExerciseAttributeValue"]] = relationship(
        back_populates="attribute_name", cascade="all, delete"
    )

    def to_dict(self) -> dict:
        """Convert attribute name and its values to a dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "values": sorted(v.value for v in self.values),
        }


class ExerciseAttributeValue(Base):
    """Value belonging to one attribute name, e.g. CHEST under PRIMARY_MUSCLE."""

    __tablename__ = "exercise_attribute_values"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    attribute_name_id: Mapped[int] = mapped_column(ForeignKey("exercise_attribute_names.id"))
    value: Mapped[str] = mapped_column(String(50))

    __table_args__ = (
        UniqueConstraint("attribute_name_id", "value", name="uix_attribute_value"),
        Index("ix_attribute_value_value", "value"),
    )

    # Relationships
    attribute_name: Mapped["ExerciseAttributeName"] = relationship(back_populates="values")


class ExerciseAttribute(Base):
    """Association of an exercise with one attribute value."""

    __tablename__ = "exercise_attributes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"))
    attribute_name_id: Mapped[int] = mapped_column(ForeignKey("exercise_attribute_names.id"))
    attribute_value_id: Mapped[int] = mapped_column(ForeignKey("exercise_attribute_values.id"))

    __table_args__ = (
        UniqueConstraint(
            "exercise_id", "attribute_name_id", "attribute_value_id", name="uix_exercise_attribute"
        ),
        Index("ix_exercise_attribute_lookup", "attribute_name_id", "attribute_value_id"),
    )

    # Relationships
    exercise: Mapped["Exercise"] = relationship(back_populates="attributes")
    attribute_name: Mapped["ExerciseAttributeName"] = relationship()
    attribute_value: Mapped["ExerciseAttributeValue"] = relationship()

    def to_dict(self) -> dict:
        """Convert to a name/value pair for API responses."""
        return {
            "attribute_name": self.attribute_name.name,
            "attribute_value": self.attribute_value.value,
        }
