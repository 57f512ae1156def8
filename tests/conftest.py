"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from nutrition_planner.config import Settings
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.plans import (
    MealPlanDetail,
    MealPlanMeal,
    MealPlanRecord,
    MealSlotAssignment,
)
from nutrition_planner.domain.profile import (
    ActivityLevel,
    DietaryConstraints,
    HealthGoal,
    Sex,
    UserPreferences,
    UserProfile,
)
from nutrition_planner.domain.recipes import (
    MEAL_TYPE_ORDER,
    MealType,
    RecipeCandidate,
    RecipeFilters,
)
from nutrition_planner.services.cache import InMemoryCache
from nutrition_planner.services.planner import MealPlanRepository, MealPlanService
from nutrition_planner.services.preferences import (
    PreferencesRepository,
    PreferencesService,
)
from nutrition_planner.services.recipes import RecipeCatalogService, RecipeRepository

FIXED_TODAY = date(2026, 3, 2)


def make_profile(**overrides: object) -> UserProfile:
    """Return the reference 30-year-old male profile with overrides."""
    values: dict[str, object] = {
        "age": 30,
        "sex": Sex.MALE,
        "height_cm": 175.0,
        "weight_kg": 70.0,
        "activity_level": ActivityLevel.MODERATE,
        "health_goal": HealthGoal.MAINTENANCE,
    }
    values.update(overrides)
    return UserProfile(**values)  # type: ignore[arg-type]


def make_recipe(
    recipe_id: str,
    calories: int,
    meal_type: MealType | None = None,
    ingredients: tuple[str, ...] = (),
    tags: tuple[str, ...] = (),
) -> RecipeCandidate:
    return RecipeCandidate(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        calories=calories,
        meal_type=meal_type,
        ingredients=ingredients,
        tags=tags,
    )


def weekly_catalog(per_meal: int = 8) -> list[RecipeCandidate]:
    """Return a catalog with ``per_meal`` recipes for every meal type."""
    catalog = []
    for meal_type in MEAL_TYPE_ORDER:
        for index in range(per_meal):
            catalog.append(
                make_recipe(
                    f"{meal_type.value}-{index}",
                    calories=300 + index * 50,
                    meal_type=meal_type,
                )
            )
    return catalog


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    preferences: dict[UUID, UserPreferences] = field(default_factory=dict)

    def add(
        self,
        user_id: UUID,
        profile: UserProfile | None = None,
        constraints: DietaryConstraints | None = None,
    ) -> UserPreferences:
        preferences = UserPreferences(
            user_id=user_id,
            profile=profile or make_profile(),
            constraints=constraints or DietaryConstraints(),
        )
        self.preferences[user_id] = preferences
        return preferences

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        return self.preferences.get(user_id)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: list[RecipeCandidate] = field(default_factory=list)
    calls: list[RecipeFilters] = field(default_factory=list)

    def list_recipes(self, filters: RecipeFilters) -> list[RecipeCandidate]:
        self.calls.append(filters)
        results = list(self.recipes)
        if filters.max_cook_time:
            results = [
                recipe
                for recipe in results
                if recipe.cook_time_minutes <= filters.max_cook_time
            ]
        if filters.tags:
            wanted = set(filters.tags)
            results = [
                recipe for recipe in results if wanted.intersection(recipe.tags)
            ]
        return results

    def get_recipe(self, recipe_id: str) -> RecipeCandidate | None:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: dict[UUID, MealPlanRecord] = field(default_factory=dict)
    meals: dict[UUID, MealPlanMeal] = field(default_factory=dict)

    def create_plan(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        start_date: date,
        end_date: date,
        assignments: list[MealSlotAssignment],
    ) -> MealPlanRecord:
        plan = MealPlanRecord(
            id=uuid4(),
            user_id=user_id,
            name=name,
            start_date=start_date,
            end_date=end_date,
            created_at=datetime.now(tz=UTC),
        )
        self.plans[plan.id] = plan
        for assignment in assignments:
            meal = MealPlanMeal(
                id=uuid4(),
                meal_plan_id=plan.id,
                recipe_id=assignment.recipe_id,
                day_number=assignment.day_number,
                meal_type=assignment.meal_type,
            )
            self.meals[meal.id] = meal
        return plan

    def list_plans(self, user_id: UUID) -> list[MealPlanRecord]:
        plans = [plan for plan in self.plans.values() if plan.user_id == user_id]
        return sorted(plans, key=lambda plan: plan.created_at, reverse=True)

    def get_plan(self, plan_id: UUID) -> MealPlanDetail | None:
        plan = self.plans.get(plan_id)
        if plan is None:
            return None
        meals = [meal for meal in self.meals.values() if meal.meal_plan_id == plan_id]
        return MealPlanDetail(plan=plan, meals=meals)

    def get_meal(self, meal_id: UUID) -> MealPlanMeal | None:
        return self.meals.get(meal_id)

    def update_meal_recipe(self, meal_id: UUID, recipe_id: str) -> MealPlanMeal:
        meal = self.meals[meal_id]
        updated = MealPlanMeal(
            id=meal.id,
            meal_plan_id=meal.meal_plan_id,
            recipe_id=recipe_id,
            day_number=meal.day_number,
            meal_type=meal.meal_type,
        )
        self.meals[meal_id] = updated
        return updated

    def delete_plan(self, plan_id: UUID) -> None:
        self.plans.pop(plan_id, None)
        for meal_id in [
            meal.id for meal in self.meals.values() if meal.meal_plan_id == plan_id
        ]:
            del self.meals[meal_id]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        api_token="api-token",
    )


@pytest.fixture
def preferences_repository() -> InMemoryPreferencesRepository:
    return InMemoryPreferencesRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(recipes=weekly_catalog())


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def meal_plan_service(
    preferences_repository: InMemoryPreferencesRepository,
    recipe_repository: InMemoryRecipeRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
) -> MealPlanService:
    return MealPlanService(
        preferences_service=PreferencesService(preferences_repository),
        recipe_service=RecipeCatalogService(
            repository=recipe_repository, cache=InMemoryCache(), ttl_seconds=0
        ),
        repository=meal_plan_repository,
        clock=lambda: FIXED_TODAY,
    )


@pytest.fixture
def container(settings: Settings, meal_plan_service: MealPlanService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        preferences_service=meal_plan_service.preferences_service,
        recipe_service=meal_plan_service.recipe_service,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
