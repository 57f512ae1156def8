"""Daily calorie budget split across meal slots."""

import math
from collections.abc import Mapping

from nutrition_planner.domain.errors import InvalidDistributionError
from nutrition_planner.domain.recipes import MEAL_TYPE_ORDER, MealType
from nutrition_planner.services.energy import round_half_up

DEFAULT_DISTRIBUTION: dict[MealType, float] = {
    MealType.BREAKFAST: 0.3,
    MealType.LUNCH: 0.4,
    MealType.DINNER: 0.3,
    MealType.SNACK: 0.0,
}

DISTRIBUTION_TOLERANCE = 0.01


def active_meal_types(include_snacks: bool) -> list[MealType]:
    """Return the meal slots planned per day, in serving order."""
    if include_snacks:
        return list(MEAL_TYPE_ORDER)
    return [meal for meal in MEAL_TYPE_ORDER if meal != MealType.SNACK]


def allocate_meal_budget(
    calorie_target: int,
    include_snacks: bool,
    distribution: Mapping[MealType, float] | None = None,
) -> dict[MealType, int]:
    """Split a daily calorie target across the active meal slots.

    Fractions are used as given; a distribution that does not sum to 1.0 is
    the caller's responsibility (see ``validate_distribution``).
    """
    fractions = distribution if distribution is not None else DEFAULT_DISTRIBUTION
    return {
        meal: round_half_up(calorie_target * fractions.get(meal, 0.0))
        for meal in active_meal_types(include_snacks)
    }


def validate_distribution(
    distribution: Mapping[str, float],
    tolerance: float = DISTRIBUTION_TOLERANCE,
) -> dict[MealType, float]:
    """Check a caller-supplied distribution and return it keyed by meal type."""
    validated: dict[MealType, float] = {}
    for key, fraction in distribution.items():
        try:
            meal = MealType(str(key).strip().lower())
        except ValueError:
            raise InvalidDistributionError(f"Unknown meal type: {key!r}") from None
        value = float(fraction)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise InvalidDistributionError(
                f"Fraction for {meal} must be between 0 and 1, got {fraction!r}"
            )
        validated[meal] = value
    total = sum(validated.values())
    if abs(total - 1.0) > tolerance:
        raise InvalidDistributionError(
            f"Meal distribution must sum to 1.0, got {total:.3f}"
        )
    return validated
