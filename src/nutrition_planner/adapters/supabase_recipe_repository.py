"""Supabase implementation for the recipe catalog."""

import logging
from dataclasses import dataclass

from supabase import Client

from nutrition_planner.domain.recipes import MealType, RecipeCandidate, RecipeFilters
from nutrition_planner.services.recipes import RecipeRepository

_RECIPE_COLUMNS = "id, name, calories, meal_type, cook_time_minutes, prep_time_minutes"

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes with ingredients and tags."""

    client: Client

    def list_recipes(self, filters: RecipeFilters) -> list[RecipeCandidate]:
        """Return recipes matching the cook-time and tag filters."""
        query = self.client.table("recipes").select(_RECIPE_COLUMNS)
        if filters.max_cook_time:
            query = query.lte("cook_time_minutes", filters.max_cook_time)
        response = query.order("name").execute()
        rows = response.data or []
        if not rows:
            return []

        recipe_ids = [str(row["id"]) for row in rows]
        ingredients = self._ingredients_by_recipe(recipe_ids)
        tags = self._tags_by_recipe(recipe_ids)
        recipes = [
            _parse_recipe(
                row,
                ingredients.get(str(row["id"]), []),
                tags.get(str(row["id"]), []),
            )
            for row in rows
        ]
        if not filters.tags:
            return recipes
        wanted = {tag.lower() for tag in filters.tags}
        return [
            recipe
            for recipe in recipes
            if any(tag.lower() in wanted for tag in recipe.tags)
        ]

    def get_recipe(self, recipe_id: str) -> RecipeCandidate | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select(_RECIPE_COLUMNS)
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        ingredients = self._ingredients_by_recipe([recipe_id])
        tags = self._tags_by_recipe([recipe_id])
        return _parse_recipe(
            response.data[0],
            ingredients.get(recipe_id, []),
            tags.get(recipe_id, []),
        )

    def _ingredients_by_recipe(self, recipe_ids: list[str]) -> dict[str, list[str]]:
        response = (
            self.client.table("recipe_ingredients")
            .select("recipe_id, name")
            .in_("recipe_id", recipe_ids)
            .execute()
        )
        grouped: dict[str, list[str]] = {}
        for row in response.data or []:
            name = row.get("name")
            if name:
                grouped.setdefault(str(row["recipe_id"]), []).append(str(name))
        return grouped

    def _tags_by_recipe(self, recipe_ids: list[str]) -> dict[str, list[str]]:
        response = (
            self.client.table("recipe_tag_associations")
            .select("recipe_id, recipe_tags!inner(id, name)")
            .in_("recipe_id", recipe_ids)
            .execute()
        )
        grouped: dict[str, list[str]] = {}
        for row in response.data or []:
            tag = row.get("recipe_tags") or {}
            name = tag.get("name") if isinstance(tag, dict) else None
            if name:
                grouped.setdefault(str(row["recipe_id"]), []).append(str(name))
        return grouped


def _parse_meal_type(raw: object, recipe_id: str) -> MealType | None:
    if not raw:
        return None
    try:
        return MealType(str(raw).strip().lower())
    except ValueError:
        _logger.warning("Ignoring unknown meal_type %r on recipe %s", raw, recipe_id)
        return None


def _parse_recipe(
    row: dict[str, object], ingredients: list[str], tags: list[str]
) -> RecipeCandidate:
    """Parse a recipe row into a domain model."""
    recipe_id = str(row["id"])
    return RecipeCandidate(
        id=recipe_id,
        name=str(row.get("name") or ""),
        calories=int(row.get("calories") or 0),
        meal_type=_parse_meal_type(row.get("meal_type"), recipe_id),
        ingredients=tuple(ingredients),
        cook_time_minutes=int(row.get("cook_time_minutes") or 0),
        prep_time_minutes=int(row.get("prep_time_minutes") or 0),
        tags=tuple(tags),
    )
