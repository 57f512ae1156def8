"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from nutrition_planner.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from nutrition_planner.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from nutrition_planner.config import Settings, parse_distribution
from nutrition_planner.services.budget import validate_distribution
from nutrition_planner.services.cache import InMemoryCache
from nutrition_planner.services.planner import MealPlanService
from nutrition_planner.services.preferences import PreferencesService
from nutrition_planner.services.recipes import RecipeCatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    preferences_service: PreferencesService
    recipe_service: RecipeCatalogService
    meal_plan_service: MealPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    preferences_service = PreferencesService(
        SupabasePreferencesRepository(supabase_client)
    )
    recipe_service = RecipeCatalogService(
        repository=SupabaseRecipeRepository(supabase_client),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.recipe_cache_ttl_seconds,
    )
    default_distribution = parse_distribution(resolved_settings.meal_distribution)
    if default_distribution is not None:
        default_distribution = validate_distribution(default_distribution)
    meal_plan_service = MealPlanService(
        preferences_service=preferences_service,
        recipe_service=recipe_service,
        repository=SupabaseMealPlanRepository(supabase_client),
        default_distribution=default_distribution,
    )

    async def close_resources() -> None:
        recipe_service.invalidate()

    return AppContainer(
        settings=resolved_settings,
        preferences_service=preferences_service,
        recipe_service=recipe_service,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
