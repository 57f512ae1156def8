"""Recipe catalog access with caching."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_planner.domain.recipes import RecipeCandidate, RecipeFilters
from nutrition_planner.services.cache import Cache

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for the recipe catalog."""

    def list_recipes(self, filters: RecipeFilters) -> list[RecipeCandidate]:
        """Return recipes matching the tag and cook-time filters."""

    def get_recipe(self, recipe_id: str) -> RecipeCandidate | None:
        """Return a recipe by id, if present."""


@dataclass
class RecipeCatalogService:
    """Service for catalog reads, caching snapshots per filter."""

    repository: RecipeRepository
    cache: Cache
    ttl_seconds: int = 300

    def list_recipes(self, filters: RecipeFilters) -> list[RecipeCandidate]:
        """Return a catalog snapshot for the filters."""
        cache_key = _cache_key(filters)
        cached = self.cache.get(cache_key)
        if isinstance(cached, tuple):
            return list(cached)

        recipes = self.repository.list_recipes(filters)
        if recipes:
            self.cache.set(cache_key, tuple(recipes), ttl_seconds=self.ttl_seconds)
        _logger.debug(
            "Recipe catalog fetched: key=%s count=%s", cache_key, len(recipes)
        )
        return recipes

    def get_recipe(self, recipe_id: str) -> RecipeCandidate | None:
        """Return a recipe by id without caching."""
        return self.repository.get_recipe(recipe_id)

    def invalidate(self) -> None:
        """Drop every cached catalog snapshot."""
        self.cache.invalidate("recipes:")


def _cache_key(filters: RecipeFilters) -> str:
    tags = ",".join(sorted(tag.lower() for tag in filters.tags))
    return f"recipes:tags={tags}:max_cook={filters.max_cook_time}"
