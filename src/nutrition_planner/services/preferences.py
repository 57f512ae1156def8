"""User preference lookups."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.errors import MissingPreferencesError
from nutrition_planner.domain.profile import UserPreferences


class PreferencesRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return stored preferences for a user, if complete."""


@dataclass
class PreferencesService:
    """Service for reading the profile the planner depends on."""

    repository: PreferencesRepository

    def require(self, user_id: UUID) -> UserPreferences:
        """Return the user's preferences or raise when none are stored."""
        preferences = self.repository.get_preferences(user_id)
        if preferences is None:
            raise MissingPreferencesError(user_id)
        return preferences
