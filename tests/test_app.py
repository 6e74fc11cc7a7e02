"""Tests for the HTTP surface."""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from recipe_macros.api.app import _to_recipe, create_app
from recipe_macros.api.models import RecipePayload
from recipe_macros.config import Settings
from recipe_macros.containers import AppContainer
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.nutrition import NutritionService
from recipe_macros.services.substitutions import SubstitutionService
from tests.conftest import FakeFdcClient


def _container(fdc_client: FakeFdcClient) -> AppContainer:
    nutrition_service = NutritionService(fdc_client)
    macro_estimator = MacroEstimator(nutrition_service)

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=Settings(fdc_api_key=fdc_client.api_key),
        fdc_client=fdc_client,
        nutrition_service=nutrition_service,
        macro_estimator=macro_estimator,
        substitution_service=SubstitutionService(nutrition_service, macro_estimator),
        close_resources=close_resources,
    )


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(_container(FakeFdcClient())))


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_goals_lists_configs(client: TestClient) -> None:
    response = client.get("/goals")

    goals = {goal["goalType"]: goal for goal in response.json()}
    assert set(goals) == {"bulk", "lean_bulk", "cut"}
    assert goals["cut"]["calories"] == {"direction": "decrease", "low": -400, "high": -200}


def test_estimate_macros(client: TestClient) -> None:
    response = client.post(
        "/macros/estimate",
        json={
            "recipe": {
                "title": "Plain chicken",
                "ingredients": [{"name": "chicken breast", "quantity": "200 g"}],
                "servings": 1,
            }
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["perServing"]["calories"] == pytest.approx(330)
    assert body["perServing"]["protein"] == pytest.approx(62)
    assert body["ingredients"][0]["gramsConfidence"] == "high"
    assert body["ingredients"][0]["fdcMatch"]["fdcId"] == 171077
    assert body["confidence"] == "high"


def test_estimate_requires_api_key() -> None:
    client = TestClient(create_app(_container(FakeFdcClient(api_key=None))))

    response = client.post("/macros/estimate", json={"recipe": {"ingredients": ["1 cup rice"]}})

    assert response.status_code == 503


def test_estimate_rejects_malformed_recipe(client: TestClient) -> None:
    response = client.post("/macros/estimate", json={"recipe": {"ingredients": "rice"}})

    assert response.status_code == 422


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_recipe_shape_error_maps_to_422() -> None:
    payload = RecipePayload.model_construct(ingredients=[42])

    with pytest.raises(HTTPException) as excinfo:
        _to_recipe(payload)

    assert excinfo.value.status_code == 422
    assert excinfo.value.detail == "Ingredient 0 must be a string or have a name"


def test_substitution_plan(client: TestClient) -> None:
    response = client.post(
        "/substitutions/plan",
        json={
            "recipe": {"ingredients": ["200 g chicken breast"]},
            "goalType": "cut",
            "userContext": {"allergens": ["shellfish"], "dietStyle": None},
        },
    )

    assert response.status_code == 200
    ingredient = response.json()["ingredients"][0]
    assert ingredient["roles"] == ["poultry", "lean_protein"]
    assert "shrimp" not in {candidate["id"] for candidate in ingredient["candidates"]}
    assert len(ingredient["candidates"]) <= 3


def test_substitution_plan_degrades_without_key() -> None:
    client = TestClient(create_app(_container(FakeFdcClient(api_key=None))))

    response = client.post(
        "/substitutions/plan",
        json={"recipe": {"ingredients": ["200 g chicken breast"]}, "goalType": "bulk"},
    )

    assert response.status_code == 200
    assert response.json()["warnings"] == [
        "FDC API key missing; substitution candidates limited to portion tweaks."
    ]


def test_substitution_plan_rejects_unknown_goal(client: TestClient) -> None:
    response = client.post(
        "/substitutions/plan",
        json={"recipe": {"ingredients": ["200 g chicken breast"]}, "goalType": "maintain"},
    )

    assert response.status_code == 422


def test_guardrails(client: TestClient) -> None:
    response = client.post(
        "/guardrails",
        json={
            "recipe": {"ingredients": ["2 tbsp soy sauce", "1 cup white rice"]},
            "conditions": ["celiac", "diabetes"],
            "perServing": {"carbs": 90},
        },
    )

    assert response.status_code == 200
    warnings = response.json()
    assert [warning["condition"] for warning in warnings] == ["celiac", "diabetes"]
    assert warnings[1]["hits"] == ["white rice", "~90g carbs/serving"]


def test_daily_targets(client: TestClient) -> None:
    response = client.post(
        "/targets/daily",
        json={
            "weightKg": 80,
            "heightCm": 180,
            "age": 30,
            "sex": "male",
            "activityLevel": "moderate",
            "goal": "cut",
        },
    )

    assert response.status_code == 200
    assert response.json()["macros"]["calories"] == 2459


def test_lifespan_closes_resources() -> None:
    fdc_client = FakeFdcClient()

    with TestClient(create_app(_container(fdc_client))) as client:
        client.get("/health")

    assert fdc_client.closed
