"""Weekly meal plan generation and plan management."""

import logging
from collections.abc import Callable, Collection, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.errors import (
    InsufficientRecipesError,
    InvalidSelectionError,
    MealNotFoundError,
    NoRecipesAvailableError,
    PlanNotFoundError,
    PlanOwnershipError,
    RecipeNotFoundError,
)
from nutrition_planner.domain.plans import (
    MealPlanDetail,
    MealPlanMeal,
    MealPlanRecord,
    MealSlotAssignment,
)
from nutrition_planner.domain.profile import UserPreferences
from nutrition_planner.domain.recipes import (
    MEAL_TYPE_ORDER,
    MealType,
    RecipeCandidate,
    RecipeFilters,
)
from nutrition_planner.services.budget import active_meal_types, allocate_meal_budget
from nutrition_planner.services.candidates import exclude_recipe_ids, filter_candidates
from nutrition_planner.services.energy import estimate_energy
from nutrition_planner.services.preferences import PreferencesService
from nutrition_planner.services.recipes import RecipeCatalogService
from nutrition_planner.services.selection import (
    UsageTracker,
    closest_match,
    select_recipe,
)

PLAN_DAYS = 7

_logger = logging.getLogger(__name__)


class MealPlanRepository(Protocol):
    """Persistence interface for meal plans."""

    def create_plan(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        start_date: date,
        end_date: date,
        assignments: list[MealSlotAssignment],
    ) -> MealPlanRecord:
        """Create a plan with its meals and return the plan row."""

    def list_plans(self, user_id: UUID) -> list[MealPlanRecord]:
        """Return a user's plans, newest first."""

    def get_plan(self, plan_id: UUID) -> MealPlanDetail | None:
        """Return a plan with its meals, if present."""

    def get_meal(self, meal_id: UUID) -> MealPlanMeal | None:
        """Return a plan meal by id, if present."""

    def update_meal_recipe(self, meal_id: UUID, recipe_id: str) -> MealPlanMeal:
        """Replace the recipe of a plan meal and return the updated row."""

    def delete_plan(self, plan_id: UUID) -> None:
        """Delete a plan and its meals."""


def assemble_week(
    preferences: UserPreferences,
    catalog: Sequence[RecipeCandidate],
    distribution: Mapping[MealType, float] | None = None,
    days: int = PLAN_DAYS,
) -> list[MealSlotAssignment]:
    """Assign a recipe to every day and meal slot that has a candidate.

    Days run in ascending order and meals in serving order, so earlier slots
    get first pick of scarce recipes. Slots without any candidate are left
    empty.
    """
    constraints = preferences.constraints
    energy = estimate_energy(preferences.profile)
    budget = allocate_meal_budget(
        energy.calorie_target, constraints.include_snacks, distribution
    )
    candidates = filter_candidates(catalog, constraints)
    tracker = UsageTracker()
    meal_types = active_meal_types(constraints.include_snacks)

    assignments: list[MealSlotAssignment] = []
    for day_number in range(1, days + 1):
        for meal_type in meal_types:
            recipe = select_recipe(candidates, meal_type, budget[meal_type], tracker)
            if recipe is None:
                _logger.debug(
                    "No candidate for slot: day=%s meal_type=%s", day_number, meal_type
                )
                continue
            assignments.append(
                MealSlotAssignment(
                    recipe_id=recipe.id, day_number=day_number, meal_type=meal_type
                )
            )
    return assignments


@dataclass
class MealPlanService:
    """Application service for generating and editing meal plans."""

    preferences_service: PreferencesService
    recipe_service: RecipeCatalogService
    repository: MealPlanRepository
    default_distribution: Mapping[MealType, float] | None = None
    clock: Callable[[], date] = date.today

    def generate_weekly_plan(
        self,
        user_id: UUID,
        distribution: Mapping[MealType, float] | None = None,
    ) -> MealPlanRecord:
        """Generate and persist a seven-day plan for a user."""
        preferences = self.preferences_service.require(user_id)
        catalog = self.recipe_service.list_recipes(_catalog_filters(preferences))
        if not catalog:
            raise NoRecipesAvailableError
        assignments = assemble_week(
            preferences,
            catalog,
            distribution if distribution is not None else self.default_distribution,
        )
        expected = PLAN_DAYS * len(
            active_meal_types(preferences.constraints.include_snacks)
        )
        _logger.info(
            "Generated meal plan: user_id=%s meals=%s unfilled=%s",
            user_id,
            len(assignments),
            expected - len(assignments),
        )
        start_date, end_date = self._plan_range()
        return self.repository.create_plan(
            user_id=user_id,
            name=f"Meal Plan - {start_date.isoformat()}",
            start_date=start_date,
            end_date=end_date,
            assignments=assignments,
        )

    def regenerate_single_meal(
        self,
        user_id: UUID,
        meal_type: MealType,
        target_calories: int,
        excluded_recipe_ids: Collection[str] = (),
    ) -> RecipeCandidate:
        """Return the closest replacement recipe for one meal slot."""
        preferences = self.preferences_service.require(user_id)
        catalog = self.recipe_service.list_recipes(_catalog_filters(preferences))
        eligible = filter_candidates(catalog, preferences.constraints)
        pool = exclude_recipe_ids(
            [recipe for recipe in eligible if recipe.meal_type == meal_type],
            set(excluded_recipe_ids),
        )
        recipe = closest_match(pool, target_calories)
        if recipe is None:
            _logger.warning(
                "Meal regeneration failed: user_id=%s meal_type=%s excluded=%s",
                user_id,
                meal_type,
                len(excluded_recipe_ids),
            )
            raise InsufficientRecipesError(meal_type)
        return recipe

    def save_custom_plan(
        self,
        user_id: UUID,
        selections: Mapping[tuple[int, MealType], str],
    ) -> MealPlanRecord:
        """Persist a plan built from hand-picked recipes."""
        for day_number, _meal_type in selections:
            if not 1 <= day_number <= PLAN_DAYS:
                raise InvalidSelectionError(
                    f"Day number must be between 1 and {PLAN_DAYS}, got {day_number}"
                )
        assignments = [
            MealSlotAssignment(
                recipe_id=selections[(day_number, meal_type)],
                day_number=day_number,
                meal_type=meal_type,
            )
            for day_number in range(1, PLAN_DAYS + 1)
            for meal_type in MEAL_TYPE_ORDER
            if selections.get((day_number, meal_type))
        ]
        start_date, end_date = self._plan_range()
        return self.repository.create_plan(
            user_id=user_id,
            name=f"Custom Meal Plan - {start_date.isoformat()}",
            start_date=start_date,
            end_date=end_date,
            assignments=assignments,
        )

    def update_meal(self, user_id: UUID, meal_id: UUID, recipe_id: str) -> MealPlanMeal:
        """Swap the recipe of a meal in one of the user's plans."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(f"Meal {meal_id} not found")
        self._require_owned_plan(user_id, meal.meal_plan_id)
        if self.recipe_service.get_recipe(recipe_id) is None:
            raise RecipeNotFoundError(f"Recipe {recipe_id} not found")
        return self.repository.update_meal_recipe(meal_id, recipe_id)

    def list_plans(self, user_id: UUID) -> list[MealPlanRecord]:
        """Return the user's plans, newest first."""
        return self.repository.list_plans(user_id)

    def get_plan(self, plan_id: UUID) -> MealPlanDetail | None:
        """Return a plan with its meals."""
        return self.repository.get_plan(plan_id)

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Delete one of the user's plans."""
        self._require_owned_plan(user_id, plan_id)
        self.repository.delete_plan(plan_id)

    def _require_owned_plan(self, user_id: UUID, plan_id: UUID) -> MealPlanDetail:
        detail = self.repository.get_plan(plan_id)
        if detail is None:
            raise PlanNotFoundError(f"Meal plan {plan_id} not found")
        if detail.plan.user_id != user_id:
            raise PlanOwnershipError("You do not have permission to modify this plan")
        return detail

    def _plan_range(self) -> tuple[date, date]:
        start_date = self.clock()
        return start_date, start_date + timedelta(days=PLAN_DAYS - 1)


def _catalog_filters(preferences: UserPreferences) -> RecipeFilters:
    constraints = preferences.constraints
    return RecipeFilters(
        tags=constraints.dietary_preferences,
        max_cook_time=constraints.max_prep_time,
    )
