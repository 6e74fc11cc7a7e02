"""Tests for container wiring."""

import asyncio

from recipe_macros.config import Settings
from recipe_macros.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.nutrition_service.is_configured()
    assert container.macro_estimator.nutrition_service is container.nutrition_service
    assert container.substitution_service.macro_estimator is container.macro_estimator
    asyncio.run(container.close_resources())


def test_build_container_applies_settings() -> None:
    settings = Settings(
        fdc_api_key=None,
        fdc_base_url="https://fdc.test/v1/",
        lookup_concurrency=2,
        search_cache_max_entries=10,
    )

    container = build_container(settings)

    assert not container.nutrition_service.is_configured()
    assert container.fdc_client.base_url == "https://fdc.test/v1"
    assert container.macro_estimator.lookup_concurrency == 2
    assert container.nutrition_service.search_cache.max_entries == 10
    asyncio.run(container.close_resources())
