"""Domain models for the recipe catalog."""

from dataclasses import dataclass
from enum import StrEnum


class MealType(StrEnum):
    """Meal slot within a day, declared in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


MEAL_TYPE_ORDER: tuple[MealType, ...] = tuple(MealType)


@dataclass(frozen=True)
class RecipeCandidate:
    """Catalog recipe with the fields the planner needs."""

    id: str
    name: str
    calories: int
    meal_type: MealType | None = None
    ingredients: tuple[str, ...] = ()
    cook_time_minutes: int = 0
    prep_time_minutes: int = 0
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class RecipeFilters:
    """Upstream catalog query filters."""

    tags: tuple[str, ...] = ()
    max_cook_time: int | None = None
