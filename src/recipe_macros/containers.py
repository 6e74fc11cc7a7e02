"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_macros.adapters.fdc_client import FdcClient, HttpxFdcClient
from recipe_macros.config import Settings
from recipe_macros.services.cache import BoundedTTLCache
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.nutrition import NutritionService
from recipe_macros.services.substitutions import SubstitutionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fdc_client: FdcClient
    nutrition_service: NutritionService
    macro_estimator: MacroEstimator
    substitution_service: SubstitutionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        search_cache=BoundedTTLCache(
            max_entries=resolved_settings.search_cache_max_entries,
            ttl_seconds=resolved_settings.search_cache_ttl_seconds,
        ),
        food_cache=BoundedTTLCache(
            max_entries=resolved_settings.food_cache_max_entries,
            ttl_seconds=resolved_settings.food_cache_ttl_seconds,
        ),
        debug=resolved_settings.debug,
        retry_attempts=resolved_settings.retry_attempts,
    )
    macro_estimator = MacroEstimator(
        nutrition_service=nutrition_service,
        lookup_concurrency=resolved_settings.lookup_concurrency,
    )
    substitution_service = SubstitutionService(
        nutrition_service=nutrition_service,
        macro_estimator=macro_estimator,
        candidate_cache=BoundedTTLCache(
            max_entries=resolved_settings.candidate_cache_max_entries,
            ttl_seconds=None,
        ),
        lookup_concurrency=resolved_settings.lookup_concurrency,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        fdc_client=fdc_client,
        nutrition_service=nutrition_service,
        macro_estimator=macro_estimator,
        substitution_service=substitution_service,
        close_resources=close_resources,
    )
