"""Recipe eligibility filtering."""

from collections.abc import Collection, Iterable

from nutrition_planner.domain.profile import DietaryConstraints
from nutrition_planner.domain.recipes import RecipeCandidate


def filter_candidates(
    catalog: Iterable[RecipeCandidate], constraints: DietaryConstraints
) -> list[RecipeCandidate]:
    """Drop recipes containing an excluded, allergenic or intolerated ingredient."""
    blocked = constraints.blocked_ingredients()
    if not blocked:
        return list(catalog)
    return [
        recipe
        for recipe in catalog
        if not any(
            ingredient.strip().lower() in blocked for ingredient in recipe.ingredients
        )
    ]


def exclude_recipe_ids(
    candidates: Iterable[RecipeCandidate], recipe_ids: Collection[str]
) -> list[RecipeCandidate]:
    """Drop recipes whose id is in ``recipe_ids``, keeping order."""
    return [recipe for recipe in candidates if recipe.id not in recipe_ids]
