"""Energy estimation from a physiological profile."""

import math
from dataclasses import dataclass

from nutrition_planner.domain.errors import UnknownEnumValueError
from nutrition_planner.domain.profile import ActivityLevel, HealthGoal, Sex, UserProfile

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_ADJUSTMENTS: dict[HealthGoal, float] = {
    HealthGoal.WEIGHT_LOSS: 0.8,
    HealthGoal.MUSCLE_GAIN: 1.1,
    HealthGoal.MAINTENANCE: 1.0,
    HealthGoal.HEALTH_IMPROVEMENT: 1.0,
    HealthGoal.ENERGY_BOOST: 1.0,
}


def round_half_up(value: float) -> int:
    """Round to the nearest kcal, sending exact halves up."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class EnergyEstimate:
    """BMR, TDEE and the resulting daily calorie target."""

    bmr: float
    tdee: int
    calorie_target: int


def calculate_bmr(profile: UserProfile) -> float:
    """Calculate Basal Metabolic Rate with the Mifflin-St Jeor equation.

    Male:      10 * weight(kg) + 6.25 * height(cm) - 5 * age + 5
    Otherwise: 10 * weight(kg) + 6.25 * height(cm) - 5 * age - 161
    """
    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.sex == Sex.MALE:
        return bmr + 5
    return bmr - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel | str) -> int:
    """Return BMR scaled by the activity multiplier, rounded to kcal."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level)
    if multiplier is None:
        raise UnknownEnumValueError("activity_level", activity_level)
    return round_half_up(bmr * multiplier)


def calculate_calorie_target(tdee: int, health_goal: HealthGoal | str) -> int:
    """Apply the goal's deficit or surplus to TDEE."""
    adjustment = GOAL_ADJUSTMENTS.get(health_goal)
    if adjustment is None:
        raise UnknownEnumValueError("health_goal", health_goal)
    return round_half_up(tdee * adjustment)


def estimate_energy(profile: UserProfile) -> EnergyEstimate:
    """Compute BMR, TDEE and calorie target for a profile."""
    bmr = calculate_bmr(profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    return EnergyEstimate(
        bmr=bmr,
        tdee=tdee,
        calorie_target=calculate_calorie_target(tdee, profile.health_goal),
    )
