"""Supabase repository for meal plans."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.plans import (
    MealPlanDetail,
    MealPlanMeal,
    MealPlanRecord,
    MealSlotAssignment,
)
from nutrition_planner.domain.recipes import MEAL_TYPE_ORDER, MealType
from nutrition_planner.services.planner import MealPlanRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plan persistence."""

    client: Client

    def create_plan(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        start_date: date,
        end_date: date,
        assignments: list[MealSlotAssignment],
    ) -> MealPlanRecord:
        """Insert the plan row followed by its meal rows."""
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        plan = _parse_plan(response.data[0])
        if not assignments:
            return plan
        rows = [
            {
                "meal_plan_id": str(plan.id),
                "recipe_id": assignment.recipe_id,
                "day_number": assignment.day_number,
                "meal_type": assignment.meal_type.value,
            }
            for assignment in assignments
        ]
        try:
            self.client.table("meal_plan_meals").insert(rows).execute()
        except Exception:
            _logger.exception("Failed to insert meals, removing plan %s", plan.id)
            self.client.table("meal_plans").delete().eq("id", str(plan.id)).execute()
            raise
        return plan

    def list_plans(self, user_id: UUID) -> list[MealPlanRecord]:
        """Return a user's plans, newest first."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def get_plan(self, plan_id: UUID) -> MealPlanDetail | None:
        """Return a plan with its meals ordered by day and meal slot."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        meals_response = (
            self.client.table("meal_plan_meals")
            .select("*")
            .eq("meal_plan_id", str(plan_id))
            .order("day_number")
            .execute()
        )
        meals = [_parse_meal(row) for row in meals_response.data or []]
        meals.sort(
            key=lambda meal: (meal.day_number, MEAL_TYPE_ORDER.index(meal.meal_type))
        )
        return MealPlanDetail(plan=_parse_plan(response.data[0]), meals=meals)

    def get_meal(self, meal_id: UUID) -> MealPlanMeal | None:
        """Return a plan meal by id, if present."""
        response = (
            self.client.table("meal_plan_meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def update_meal_recipe(self, meal_id: UUID, recipe_id: str) -> MealPlanMeal:
        """Replace the recipe of a plan meal."""
        response = (
            self.client.table("meal_plan_meals")
            .update({"recipe_id": recipe_id})
            .eq("id", str(meal_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal plan meal")
        return _parse_meal(response.data[0])

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete the plan's meals and then the plan."""
        self.client.table("meal_plan_meals").delete().eq(
            "meal_plan_id", str(plan_id)
        ).execute()
        self.client.table("meal_plans").delete().eq("id", str(plan_id)).execute()


def _parse_plan(row: dict[str, object]) -> MealPlanRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return MealPlanRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        created_at=created_at,
    )


def _parse_meal(row: dict[str, object]) -> MealPlanMeal:
    return MealPlanMeal(
        id=UUID(str(row["id"])),
        meal_plan_id=UUID(str(row["meal_plan_id"])),
        recipe_id=str(row["recipe_id"]),
        day_number=int(row["day_number"]),
        meal_type=MealType(str(row["meal_type"])),
    )
