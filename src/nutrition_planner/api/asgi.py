"""ASGI entrypoint for the meal planner API."""

from nutrition_planner.api.app import create_app
from nutrition_planner.containers import build_container

app = create_app(build_container())
