"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_planner.domain.recipes import MealType

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    meal_distribution: str | None = None
    recipe_cache_ttl_seconds: int = 300
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_distribution(raw: str | None) -> dict[MealType, float] | None:
    """Parse a meal distribution like ``breakfast=0.25,lunch=0.4`` from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    distribution: dict[MealType, float] = {}
    for chunk in cleaned.split(","):
        key, sep, value = chunk.partition("=")
        if not sep:
            raise ValueError(f"Invalid meal distribution entry: {chunk!r}")
        distribution[MealType(key.strip().lower())] = float(value.strip())
    return distribution or None
