"""Domain models for meal plans."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from nutrition_planner.domain.recipes import MealType


@dataclass(frozen=True)
class MealSlotAssignment:
    """A recipe placed in one day and meal slot of a plan."""

    recipe_id: str
    day_number: int
    meal_type: MealType


@dataclass(frozen=True)
class MealPlanRecord:
    """Represents a meal plan stored in the database."""

    id: UUID
    user_id: UUID
    name: str
    start_date: date
    end_date: date
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealPlanMeal:
    """Meal plan row with identifiers."""

    id: UUID
    meal_plan_id: UUID
    recipe_id: str
    day_number: int
    meal_type: MealType


@dataclass(frozen=True)
class MealPlanDetail:
    """Meal plan with its meals."""

    plan: MealPlanRecord
    meals: list[MealPlanMeal]
