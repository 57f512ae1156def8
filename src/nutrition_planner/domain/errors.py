"""Errors raised by the meal planner."""


class PlannerError(Exception):
    """Base class for meal planner failures reported to callers."""


class MissingPreferencesError(PlannerError):
    """Raised when a user has no stored profile or preferences."""

    def __init__(self, user_id: object) -> None:
        super().__init__(f"No preferences found for user {user_id}")
        self.user_id = user_id


class UnknownEnumValueError(PlannerError):
    """Raised when a field holds a value outside its enumerated set."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Unknown value for {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidProfileError(PlannerError):
    """Raised when a numeric profile field is out of range."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidDistributionError(PlannerError):
    """Raised when a custom meal distribution fails validation."""


class InvalidSelectionError(PlannerError):
    """Raised when a custom plan selection cannot be placed in the week."""


class NoRecipesAvailableError(PlannerError):
    """Raised when the recipe catalog is empty for the user's preferences."""

    def __init__(self) -> None:
        super().__init__("No recipes available for your preferences")


class InsufficientRecipesError(PlannerError):
    """Raised when a single meal cannot be regenerated."""

    def __init__(self, meal_type: object) -> None:
        super().__init__(f"insufficient recipes for this meal type: {meal_type}")
        self.meal_type = meal_type


class MealNotFoundError(PlannerError):
    """Raised when a plan meal does not exist."""


class PlanNotFoundError(PlannerError):
    """Raised when a meal plan does not exist."""


class RecipeNotFoundError(PlannerError):
    """Raised when a recipe does not exist."""


class PlanOwnershipError(PlannerError):
    """Raised when a user acts on a plan they do not own."""
