"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from recipe_macros.api.models import (
    ConditionWarningModel,
    DailyTargetsModel,
    DailyTargetsRequest,
    EstimateRequest,
    GoalConfigModel,
    GuardrailRequest,
    MacroEstimateModel,
    RecipePayload,
    SubstitutionPlanModel,
    SubstitutionRequest,
)
from recipe_macros.app_logging import configure_logging
from recipe_macros.containers import AppContainer
from recipe_macros.domain.nutrition import MacroVector
from recipe_macros.domain.recipes import Recipe, RecipeShapeError
from recipe_macros.services.goals import GOAL_CONFIGS, calculate_daily_targets
from recipe_macros.services.guardrails import analyze_recipe_for_conditions
from recipe_macros.services.nutrition import NutritionConfigError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/goals", response_model=list[GoalConfigModel])
    async def goals() -> list[GoalConfigModel]:
        """List the supported recipe goals and their per-serving bands."""
        return [GoalConfigModel.model_validate(config) for config in GOAL_CONFIGS.values()]

    @app.post("/macros/estimate", response_model=MacroEstimateModel)
    async def estimate_macros(payload: EstimateRequest, request: Request) -> MacroEstimateModel:
        """Estimate total and per-serving macros for a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = _to_recipe(payload.recipe)
        try:
            estimate = await state_container.macro_estimator.estimate(
                recipe, include_yield_factors=payload.include_yield_factors
            )
        except NutritionConfigError as exc:
            logger.warning("Macro estimate rejected: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
            ) from exc
        return MacroEstimateModel.model_validate(estimate)

    @app.post("/substitutions/plan", response_model=SubstitutionPlanModel)
    async def substitution_plan(
        payload: SubstitutionRequest, request: Request
    ) -> SubstitutionPlanModel:
        """Build ranked ingredient swaps for a goal."""
        state_container: AppContainer = request.app.state.container
        recipe = _to_recipe(payload.recipe)
        user_context = payload.user_context.to_context() if payload.user_context else None
        plan = await state_container.substitution_service.build_plan(
            recipe, payload.goal_type, user_context
        )
        return SubstitutionPlanModel.model_validate(plan)

    @app.post("/guardrails", response_model=list[ConditionWarningModel])
    async def guardrails(payload: GuardrailRequest) -> list[ConditionWarningModel]:
        """Flag ingredients and macros that conflict with medical conditions."""
        recipe = _to_recipe(payload.recipe)
        per_serving = (
            MacroVector(**payload.per_serving.model_dump()) if payload.per_serving else None
        )
        warnings = analyze_recipe_for_conditions(recipe, payload.conditions, per_serving)
        return [ConditionWarningModel.model_validate(warning) for warning in warnings]

    @app.post("/targets/daily", response_model=DailyTargetsModel)
    async def daily_targets(payload: DailyTargetsRequest) -> DailyTargetsModel:
        """Compute daily calorie and macro targets from a body profile."""
        targets = calculate_daily_targets(
            weight_kg=payload.weight_kg,
            height_cm=payload.height_cm,
            age=payload.age,
            sex=payload.sex,
            activity_level=payload.activity_level,
            goal=payload.goal,
            pace=payload.pace,
        )
        return DailyTargetsModel.model_validate(targets)

    return app


def _to_recipe(payload: RecipePayload) -> Recipe:
    try:
        return payload.to_recipe()
    except RecipeShapeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
