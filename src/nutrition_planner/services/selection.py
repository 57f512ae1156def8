"""Closest-calorie recipe selection with weekly variety."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from nutrition_planner.domain.recipes import MealType, RecipeCandidate


@dataclass
class UsageTracker:
    """Recipe ids already assigned per meal type during one plan generation."""

    _used: dict[MealType, list[str]] = field(default_factory=dict)

    def used(self, meal_type: MealType) -> list[str]:
        """Return recipe ids used for a meal type, in pick order."""
        return list(self._used.get(meal_type, []))

    def contains(self, meal_type: MealType, recipe_id: str) -> bool:
        """Return True when the recipe was already used for the meal type."""
        return recipe_id in self._used.get(meal_type, [])

    def record(self, meal_type: MealType, recipe_id: str) -> None:
        """Mark a recipe as used for a meal type."""
        ids = self._used.setdefault(meal_type, [])
        if recipe_id not in ids:
            ids.append(recipe_id)


def closest_match(
    candidates: Sequence[RecipeCandidate], target: int
) -> RecipeCandidate | None:
    """Return the candidate whose calories are nearest the target.

    Ties go to the earliest candidate.
    """
    best: RecipeCandidate | None = None
    best_distance = 0
    for candidate in candidates:
        distance = abs(candidate.calories - target)
        if best is None or distance < best_distance:
            best = candidate
            best_distance = distance
    return best


def select_recipe(
    candidates: Sequence[RecipeCandidate],
    meal_type: MealType,
    target: int,
    tracker: UsageTracker,
) -> RecipeCandidate | None:
    """Pick a recipe for one slot and record it in the tracker.

    Recipes tagged with the slot's meal type are preferred; untagged recipes
    are only considered when no tagged recipe exists. Recipes already used
    for this meal type are skipped unless nothing else is left.
    """
    pool = [recipe for recipe in candidates if recipe.meal_type == meal_type]
    if not pool:
        pool = [recipe for recipe in candidates if recipe.meal_type is None]
    if not pool:
        return None

    fresh = [recipe for recipe in pool if not tracker.contains(meal_type, recipe.id)]
    chosen = closest_match(fresh or pool, target)
    if chosen is not None:
        tracker.record(meal_type, chosen.id)
    return chosen
