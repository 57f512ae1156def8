"""Meal plan API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from nutrition_planner.api.models import (
    GeneratePlanRequest,
    RegenerateMealRequest,
    SaveCustomPlanRequest,
    UpdateMealRequest,
    serialize_meal,
    serialize_plan,
    serialize_plan_detail,
    serialize_recipe,
)
from nutrition_planner.domain.errors import InvalidSelectionError
from nutrition_planner.services.budget import validate_distribution

if TYPE_CHECKING:
    from nutrition_planner.containers import AppContainer
    from nutrition_planner.domain.recipes import MealType

router = APIRouter(prefix="/mealplans", tags=["mealplans"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/generate", dependencies=[Depends(require_api_token)])
async def generate_plan(
    payload: GeneratePlanRequest, request: Request
) -> dict[str, object]:
    """Generate and store a weekly plan for a user."""
    container: AppContainer = request.app.state.container
    distribution = (
        validate_distribution(payload.distribution)
        if payload.distribution is not None
        else None
    )
    service = container.meal_plan_service
    plan = service.generate_weekly_plan(payload.user_id, distribution)
    detail = service.get_plan(plan.id)
    if detail is None:
        return {**serialize_plan(plan), "meals": []}
    return serialize_plan_detail(detail)


@router.post("/regenerate", dependencies=[Depends(require_api_token)])
async def regenerate_meal(
    payload: RegenerateMealRequest, request: Request
) -> dict[str, object]:
    """Return a replacement recipe for a single meal."""
    container: AppContainer = request.app.state.container
    recipe = container.meal_plan_service.regenerate_single_meal(
        payload.user_id,
        payload.meal_type,
        payload.target_calories,
        payload.excluded_recipe_ids,
    )
    return serialize_recipe(recipe)


@router.post("/custom", dependencies=[Depends(require_api_token)])
async def save_custom_plan(
    payload: SaveCustomPlanRequest, request: Request
) -> dict[str, object]:
    """Store a plan from hand-picked recipes."""
    container: AppContainer = request.app.state.container
    selections: dict[tuple[int, MealType], str] = {}
    for selection in payload.selections:
        slot = (selection.day_number, selection.meal_type)
        if slot in selections:
            raise InvalidSelectionError(
                f"Duplicate selection for day {slot[0]} {slot[1]}"
            )
        selections[slot] = selection.recipe_id
    plan = container.meal_plan_service.save_custom_plan(payload.user_id, selections)
    return {"id": str(plan.id)}


@router.post("/meals/{meal_id}", dependencies=[Depends(require_api_token)])
async def update_meal(
    meal_id: UUID, payload: UpdateMealRequest, request: Request
) -> dict[str, object]:
    """Swap the recipe of a plan meal."""
    container: AppContainer = request.app.state.container
    meal = container.meal_plan_service.update_meal(
        payload.user_id, meal_id, payload.recipe_id
    )
    return serialize_meal(meal)


@router.get("", dependencies=[Depends(require_api_token)])
async def list_plans(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a user's plans, newest first."""
    container: AppContainer = request.app.state.container
    plans = container.meal_plan_service.list_plans(user_id)
    return {"meal_plans": [serialize_plan(plan) for plan in plans]}


@router.get("/{plan_id}", dependencies=[Depends(require_api_token)])
async def get_plan(plan_id: UUID, request: Request) -> dict[str, object]:
    """Return a plan with its meals."""
    container: AppContainer = request.app.state.container
    detail = container.meal_plan_service.get_plan(plan_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_plan_detail(detail)


@router.delete("/{plan_id}", dependencies=[Depends(require_api_token)])
async def delete_plan(
    plan_id: UUID, user_id: UUID, request: Request
) -> dict[str, str]:
    """Delete one of the user's plans."""
    container: AppContainer = request.app.state.container
    container.meal_plan_service.delete_plan(user_id, plan_id)
    return {"status": "deleted"}
