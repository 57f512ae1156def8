"""Supabase repository for user preferences."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.profile import (
    ActivityLevel,
    DietaryConstraints,
    HealthGoal,
    UserPreferences,
    UserProfile,
    parse_enum,
    parse_sex,
)
from nutrition_planner.services.preferences import PreferencesRepository

_PROFILE_COLUMNS = (
    "age",
    "gender",
    "height",
    "weight",
    "activity_level",
    "health_goal",
)


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for user preferences."""

    client: Client

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return the stored preferences, or None when the profile is incomplete."""
        response = (
            self.client.table("user_preferences")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        if any(row.get(column) is None for column in _PROFILE_COLUMNS):
            return None
        return UserPreferences(
            user_id=user_id,
            profile=_parse_profile(row),
            constraints=_parse_constraints(row),
        )


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        age=int(row["age"]),
        sex=parse_sex(row["gender"]),
        height_cm=float(row["height"]),
        weight_kg=float(row["weight"]),
        activity_level=parse_enum(
            ActivityLevel, "activity_level", row["activity_level"]
        ),
        health_goal=parse_enum(HealthGoal, "health_goal", row["health_goal"]),
    )


def _parse_constraints(row: dict[str, object]) -> DietaryConstraints:
    max_prep_time = row.get("max_prep_time")
    return DietaryConstraints(
        include_snacks=bool(row.get("include_snacks") or False),
        excluded_ingredients=frozenset(row.get("excluded_ingredients") or []),
        allergies=frozenset(row.get("allergies") or []),
        intolerances=frozenset(row.get("intolerances") or []),
        dietary_preferences=tuple(row.get("dietary_preferences") or []),
        max_prep_time=int(max_prep_time) if max_prep_time else None,
    )
