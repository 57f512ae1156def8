"""Pydantic models for meal planner API payloads."""

from uuid import UUID

from pydantic import BaseModel, Field

from nutrition_planner.domain.plans import MealPlanDetail, MealPlanMeal, MealPlanRecord
from nutrition_planner.domain.profile import ActivityLevel, HealthGoal
from nutrition_planner.domain.recipes import MealType, RecipeCandidate


class GeneratePlanRequest(BaseModel):
    """Request to generate a weekly plan."""

    user_id: UUID
    distribution: dict[str, float] | None = None


class RegenerateMealRequest(BaseModel):
    """Request to pick a replacement recipe for one meal."""

    user_id: UUID
    meal_type: MealType
    target_calories: int = Field(ge=0)
    excluded_recipe_ids: list[str] = Field(default_factory=list)


class CustomSelection(BaseModel):
    """A hand-picked recipe for one day and meal."""

    day_number: int
    meal_type: MealType
    recipe_id: str


class SaveCustomPlanRequest(BaseModel):
    """Request to save a hand-built plan."""

    user_id: UUID
    selections: list[CustomSelection]


class UpdateMealRequest(BaseModel):
    """Request to swap the recipe of a plan meal."""

    user_id: UUID
    recipe_id: str


class CalorieCalculatorRequest(BaseModel):
    """Profile measurements for the calorie calculator."""

    age: int = Field(ge=0)
    gender: str
    height: float = Field(gt=0)
    weight: float = Field(gt=0)
    activity_level: ActivityLevel
    health_goal: HealthGoal
    height_unit: str = "cm"
    weight_unit: str = "kg"


def serialize_plan(plan: MealPlanRecord) -> dict[str, object]:
    """Return a JSON-ready plan summary."""
    return {
        "id": str(plan.id),
        "user_id": str(plan.user_id),
        "name": plan.name,
        "start_date": plan.start_date.isoformat(),
        "end_date": plan.end_date.isoformat(),
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }


def serialize_meal(meal: MealPlanMeal) -> dict[str, object]:
    """Return a JSON-ready plan meal."""
    return {
        "id": str(meal.id),
        "meal_plan_id": str(meal.meal_plan_id),
        "recipe_id": meal.recipe_id,
        "day_number": meal.day_number,
        "meal_type": meal.meal_type.value,
    }


def serialize_plan_detail(detail: MealPlanDetail) -> dict[str, object]:
    """Return a JSON-ready plan with meals."""
    return {
        **serialize_plan(detail.plan),
        "meals": [serialize_meal(meal) for meal in detail.meals],
    }


def serialize_recipe(recipe: RecipeCandidate) -> dict[str, object]:
    """Return a JSON-ready recipe."""
    return {
        "id": recipe.id,
        "name": recipe.name,
        "calories": recipe.calories,
        "meal_type": recipe.meal_type.value if recipe.meal_type else None,
        "ingredients": list(recipe.ingredients),
        "cook_time_minutes": recipe.cook_time_minutes,
        "prep_time_minutes": recipe.prep_time_minutes,
        "tags": list(recipe.tags),
    }
