"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_planner.api.mealplans import router as mealplans_router
from nutrition_planner.api.models import CalorieCalculatorRequest
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.errors import (
    MealNotFoundError,
    MissingPreferencesError,
    PlannerError,
    PlanNotFoundError,
    PlanOwnershipError,
    RecipeNotFoundError,
)
from nutrition_planner.domain.profile import UserProfile
from nutrition_planner.services.energy import estimate_energy

_NOT_FOUND_ERRORS = (MealNotFoundError, PlanNotFoundError, RecipeNotFoundError)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(mealplans_router)

    @app.exception_handler(PlannerError)
    async def planner_error_handler(
        request: Request, exc: PlannerError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if isinstance(exc, MissingPreferencesError):
            logger.warning("Planner precondition failed: %s", exc)
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error: method=%s path=%s", request.method, request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/calorie-calculator")
    async def calorie_calculator(
        payload: CalorieCalculatorRequest,
    ) -> dict[str, object]:
        """Estimate BMR, TDEE and a daily calorie target."""
        profile = UserProfile.from_units(
            age=payload.age,
            sex=payload.gender,
            height=payload.height,
            weight=payload.weight,
            activity_level=payload.activity_level,
            health_goal=payload.health_goal,
            height_unit=payload.height_unit,
            weight_unit=payload.weight_unit,
        )
        estimate = estimate_energy(profile)
        return {
            "bmr": round(estimate.bmr, 1),
            "tdee": estimate.tdee,
            "calorie_target": estimate.calorie_target,
        }

    return app


def _status_for(exc: PlannerError) -> int:
    if isinstance(exc, _NOT_FOUND_ERRORS):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, PlanOwnershipError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_400_BAD_REQUEST
