"""Domain models for user profiles and dietary constraints."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeVar
from uuid import UUID

from nutrition_planner.domain.errors import InvalidProfileError, UnknownEnumValueError

_LB_TO_KG = 0.453592
_FT_TO_CM = 30.48

E = TypeVar("E", bound=StrEnum)


class Sex(StrEnum):
    """Biological sex category used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class HealthGoal(StrEnum):
    """Health goal that shapes the calorie target."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    HEALTH_IMPROVEMENT = "health_improvement"
    ENERGY_BOOST = "energy_boost"


def parse_enum(enum_type: type[E], field_name: str, raw: object) -> E:
    """Parse a raw value into an enum member or raise a typed error."""
    if isinstance(raw, enum_type):
        return raw
    try:
        return enum_type(str(raw).strip().lower())
    except ValueError:
        raise UnknownEnumValueError(field_name, raw) from None


def parse_sex(raw: object) -> Sex:
    """Parse a stored sex value; anything but male or female is OTHER."""
    if isinstance(raw, Sex):
        return raw
    try:
        return Sex(str(raw).strip().lower())
    except ValueError:
        return Sex.OTHER


@dataclass(frozen=True)
class UserProfile:
    """Physiological profile used to estimate energy needs."""

    age: int
    sex: Sex
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    health_goal: HealthGoal

    def __post_init__(self) -> None:
        if self.age < 0:
            raise InvalidProfileError("age", self.age)
        if self.height_cm <= 0:
            raise InvalidProfileError("height_cm", self.height_cm)
        if self.weight_kg <= 0:
            raise InvalidProfileError("weight_kg", self.weight_kg)

    @classmethod
    def from_units(  # noqa: PLR0913
        cls,
        *,
        age: int,
        sex: Sex | str,
        height: float,
        weight: float,
        activity_level: ActivityLevel | str,
        health_goal: HealthGoal | str,
        height_unit: str = "cm",
        weight_unit: str = "kg",
    ) -> "UserProfile":
        """Build a profile from metric or imperial measurements."""
        if weight_unit == "kg":
            weight_kg = float(weight)
        elif weight_unit == "lb":
            weight_kg = float(weight) * _LB_TO_KG
        else:
            raise UnknownEnumValueError("weight_unit", weight_unit)
        if height_unit == "cm":
            height_cm = float(height)
        elif height_unit == "ft":
            height_cm = float(height) * _FT_TO_CM
        else:
            raise UnknownEnumValueError("height_unit", height_unit)
        return cls(
            age=int(age),
            sex=parse_sex(sex),
            height_cm=height_cm,
            weight_kg=weight_kg,
            activity_level=parse_enum(ActivityLevel, "activity_level", activity_level),
            health_goal=parse_enum(HealthGoal, "health_goal", health_goal),
        )


def _normalize(values: object) -> frozenset[str]:
    if not values:
        return frozenset()
    return frozenset(str(value).strip().lower() for value in values if value)


@dataclass(frozen=True)
class DietaryConstraints:
    """Dietary exclusions and preferences for recipe selection."""

    include_snacks: bool = False
    excluded_ingredients: frozenset[str] = field(default_factory=frozenset)
    allergies: frozenset[str] = field(default_factory=frozenset)
    intolerances: frozenset[str] = field(default_factory=frozenset)
    dietary_preferences: tuple[str, ...] = ()
    max_prep_time: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "excluded_ingredients", _normalize(self.excluded_ingredients)
        )
        object.__setattr__(self, "allergies", _normalize(self.allergies))
        object.__setattr__(self, "intolerances", _normalize(self.intolerances))
        object.__setattr__(
            self, "dietary_preferences", tuple(self.dietary_preferences or ())
        )

    def blocked_ingredients(self) -> frozenset[str]:
        """Return every ingredient name a recipe must not contain."""
        return self.excluded_ingredients | self.allergies | self.intolerances


@dataclass(frozen=True)
class UserPreferences:
    """Stored profile and constraints for a user."""

    user_id: UUID
    profile: UserProfile
    constraints: DietaryConstraints
