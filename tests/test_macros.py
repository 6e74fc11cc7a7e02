"""Tests for recipe macro estimation."""

import asyncio

import pytest

from recipe_macros.domain.recipes import Recipe, RecipeIngredient
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.nutrition import NutritionConfigError, NutritionService
from tests.conftest import FakeFdcClient, fdc_food


def test_chicken_breast_per_serving(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(ingredients=("200 g chicken breast",), servings=1)

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    per_serving = estimate.per_serving
    assert per_serving.calories == pytest.approx(330)
    assert per_serving.protein == pytest.approx(62)
    assert per_serving.carbs == pytest.approx(0)
    assert per_serving.fat == pytest.approx(7.2)
    assert estimate.confidence == "high"
    assert estimate.warnings == ()
    assert estimate.assumptions == (
        'Ingredient "chicken breast" → 200.0 g using unit "g" '
        "(FDC: Chicken, broiler or fryers, breast, skinless, boneless, meat only, raw)",
    )


def test_totals_are_split_across_servings(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(
        ingredients=(RecipeIngredient(name="chicken breast", quantity="400 g"),),
        servings=4,
    )

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    assert estimate.totals.calories == pytest.approx(660)
    assert estimate.per_serving.calories == pytest.approx(165)
    assert estimate.servings == 4


def test_missing_quantity_and_match_are_warnings(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(
        ingredients=("200 g chicken breast", "pepper to taste", "1 cup unicorn dust"),
    )

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    assert estimate.per_serving.calories == pytest.approx(330)
    assert 'Could not parse quantity for "pepper to taste"' in estimate.warnings
    assert 'No nutrition match for "unicorn dust"' in estimate.warnings
    assert estimate.confidence == "low"
    assert [item.macros is None for item in estimate.ingredients] == [False, True, True]


def test_cooked_weight_is_converted_to_raw(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(ingredients=("150 g cooked chicken breast",))

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    ingredient = estimate.ingredients[0]
    assert ingredient.grams == pytest.approx(200)
    assert ingredient.cooking_note is not None
    assert estimate.per_serving.protein == pytest.approx(62)


def test_uncooked_weight_is_not_converted(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(ingredients=("200 g uncooked chicken breast",))

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    ingredient = estimate.ingredients[0]
    assert ingredient.name == "chicken breast"
    assert ingredient.grams == pytest.approx(200)
    assert ingredient.cooking_note is None
    assert estimate.per_serving.calories == pytest.approx(330)


def test_yield_factors_can_be_disabled(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(ingredients=("150 g cooked chicken breast",))

    estimate = asyncio.run(macro_estimator.estimate(recipe, include_yield_factors=False))

    assert estimate.ingredients[0].grams == pytest.approx(150)


def test_retention_applies_to_named_cooking_method(macro_estimator: MacroEstimator) -> None:
    recipe = Recipe(ingredients=("200 g grilled chicken breast",))

    estimate = asyncio.run(macro_estimator.estimate(recipe))

    assert estimate.ingredients[0].cooking_note is not None
    assert "grilled" in estimate.ingredients[0].cooking_note
    assert estimate.per_serving.fat < 7.2 / 0.73


def test_calorie_sanity_warning() -> None:
    odd = fdc_food(9, "Mystery, bar", 900, 1, 1, 1)
    service = NutritionService(FakeFdcClient(foods=[odd]))
    estimator = MacroEstimator(service)

    estimate = asyncio.run(estimator.estimate(Recipe(ingredients=("100 g mystery bar",))))

    assert any("differs from macro-derived calories" in warning for warning in estimate.warnings)


def test_missing_api_key_is_fatal() -> None:
    estimator = MacroEstimator(NutritionService(FakeFdcClient(api_key=None)))

    with pytest.raises(NutritionConfigError):
        asyncio.run(estimator.estimate(Recipe(ingredients=("1 cup rice",))))
