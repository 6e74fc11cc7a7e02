"""Tests for substitution planning."""

import asyncio
from dataclasses import dataclass

import pytest

from recipe_macros.domain.nutrition import FoodMatch, MacroVector, NutrientProfile
from recipe_macros.domain.recipes import Recipe
from recipe_macros.domain.substitutions import UserContext
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.nutrition import NutritionService
from recipe_macros.services.substitutions import (
    SubstitutionService,
    infer_roles,
    is_candidate_allowed,
    should_skip_substitutions,
)
from recipe_macros.tables.catalog import SUBSTITUTION_CATALOG
from tests.conftest import CHICKEN_BREAST, FakeFdcClient

CHICKEN_RECIPE = Recipe(ingredients=("200 g chicken breast",), servings=1)


@dataclass
class FailingEstimator:
    async def estimate(self, recipe, normalized=None):  # type: ignore[no-untyped-def]
        raise RuntimeError("boom")


def _catalog_entry(candidate_id: str):  # type: ignore[no-untyped-def]
    return next(candidate for candidate in SUBSTITUTION_CATALOG if candidate.id == candidate_id)


def test_chicken_breast_cut_plan(substitution_service: SubstitutionService) -> None:
    plan = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "cut"))

    ingredient = plan.ingredients[0]
    assert ingredient.roles == ("poultry", "lean_protein")
    assert ingredient.base_macros == MacroVector(calories=330, protein=62, carbs=0, fat=7.2)
    assert ingredient.base_grams == 200
    assert ingredient.fdc_match is not None
    assert ingredient.fdc_match.fdc_id == 171077
    assert 0 < len(ingredient.candidates) <= 3
    assert all(
        candidate.role in {"poultry", "lean_protein"} for candidate in ingredient.candidates
    )
    assert "chicken_breast_skinless" not in {
        candidate.id for candidate in ingredient.candidates
    }
    scores = [candidate.score for candidate in ingredient.candidates]
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= candidate.goal_fit_score <= 100 for candidate in ingredient.candidates)
    assert plan.confidence == "high"


def test_plan_is_deterministic(substitution_service: SubstitutionService) -> None:
    first = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "bulk"))
    second = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "bulk"))

    assert first == second


def test_candidate_macros_and_delta(substitution_service: SubstitutionService) -> None:
    plan = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "lean_bulk"))

    turkey = next(item for item in plan.ingredients[0].candidates if item.id == "turkey_breast")
    assert turkey.role == "poultry"
    assert turkey.swap_grams == 200
    assert turkey.macro_per_swap.calories == 222
    assert turkey.macro_per_swap.protein == 49.2
    assert turkey.macro_delta.calories == -108
    assert turkey.fdc_match.fdc_id == 171494
    assert substitution_service.candidate_cache.get("turkey_breast") is not None


def test_salt_never_gets_candidates(substitution_service: SubstitutionService) -> None:
    recipe = Recipe(ingredients=("1 tsp salt", "200 g chicken breast"))

    plan = asyncio.run(substitution_service.build_plan(recipe, "cut"))

    salt = plan.ingredients[0]
    assert salt.candidates == ()
    assert salt.roles == ()
    assert salt.notes == ("Skip substitutions (minimal macro impact or no reliable USDA match).",)
    assert plan.ingredients[1].candidates


@pytest.mark.parametrize(
    ("name", "calories", "expected"),
    [
        ("salt", 500, True),
        ("sea salt", 0, True),
        ("unsalted butter", 100, False),
        ("black pepper", 6, True),
        ("pepper", 6, True),
        ("bell pepper", 30, False),
        ("baking soda", 0, True),
        ("lettuce", 4, True),
        ("lettuce", 5, True),
        ("chicken breast", 330, False),
    ],
)
def test_should_skip_substitutions(name: str, calories: float, expected: bool) -> None:
    assert should_skip_substitutions(name, MacroVector(calories=calories)) is expected


def test_should_skip_without_match() -> None:
    assert should_skip_substitutions("chicken breast", None)


@pytest.mark.parametrize("goal", ["bulk", "lean_bulk", "cut"])
def test_allergens_are_strict_for_every_goal(
    substitution_service: SubstitutionService, goal: str
) -> None:
    context = UserContext.build(allergens=["Shellfish", "soy", "eggs"])

    plan = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, goal, context))

    ids = {candidate.id for candidate in plan.ingredients[0].candidates}
    assert ids.isdisjoint({"shrimp", "tofu_firm", "egg_whites"})


@pytest.mark.parametrize(
    "tag", ["fish", "shellfish", "soy", "gluten", "egg", "dairy", "peanut", "tree_nut"]
)
def test_allergen_tag_excludes_every_catalog_candidate(tag: str) -> None:
    context = UserContext.build(allergens=[tag])

    tagged = [candidate for candidate in SUBSTITUTION_CATALOG if tag in candidate.allergens]

    assert tagged
    assert not any(is_candidate_allowed(candidate, context) for candidate in tagged)


def test_allergen_synonyms() -> None:
    assert not is_candidate_allowed(_catalog_entry("egg_whites"), UserContext.build(["eggs"]))
    assert not is_candidate_allowed(_catalog_entry("shrimp"), UserContext.build(["crustacean"]))
    nuts = UserContext.build(["nuts"])
    assert not any(
        is_candidate_allowed(candidate, nuts)
        for candidate in SUBSTITUTION_CATALOG
        if {"peanut", "tree_nut"} & set(candidate.allergens)
    )
    milk = UserContext.build(["milk"])
    assert not any(
        is_candidate_allowed(candidate, milk)
        for candidate in SUBSTITUTION_CATALOG
        if "dairy" in candidate.allergens
    )


def test_peanut_allergy_excludes_legumes_and_gluten_covers_optional() -> None:
    peanut = UserContext.build(["peanut"])
    gluten = UserContext.build(["gluten"])

    for candidate in SUBSTITUTION_CATALOG:
        if "legume" in candidate.allergens:
            assert not is_candidate_allowed(candidate, peanut)
        if "gluten_optional" in candidate.allergens:
            assert not is_candidate_allowed(candidate, gluten)


def test_diet_styles() -> None:
    vegan = UserContext.build(diet_style="Vegan")
    pescatarian = UserContext.build(diet_style="pescatarian")
    dairy_free = UserContext.build(diet_style="dairy_free")

    for candidate in SUBSTITUTION_CATALOG:
        if is_candidate_allowed(candidate, vegan):
            assert "vegan" in candidate.diets
        if is_candidate_allowed(candidate, dairy_free):
            assert "dairy" not in candidate.allergens
    assert is_candidate_allowed(_catalog_entry("shrimp"), pescatarian)
    assert not is_candidate_allowed(_catalog_entry("turkey_breast"), pescatarian)
    assert is_candidate_allowed(_catalog_entry("egg_whites"), UserContext.build(diet_style="none"))


def test_avoid_list_conditions_and_same_ingredient() -> None:
    avoid = UserContext.build(avoid_list="Turkey; shrimp, ")
    hypertension = UserContext.build(conditions=["hypertension"])

    assert not is_candidate_allowed(_catalog_entry("turkey_breast"), avoid)
    assert not is_candidate_allowed(_catalog_entry("shrimp"), avoid)
    assert is_candidate_allowed(_catalog_entry("tofu_firm"), avoid)
    assert not is_candidate_allowed(_catalog_entry("turkey_bacon"), hypertension)
    assert not is_candidate_allowed(
        _catalog_entry("chicken_breast_skinless"), UserContext(), "chicken breast"
    )


def test_no_safe_swaps_note() -> None:
    service = NutritionService(FakeFdcClient(foods=[CHICKEN_BREAST]))
    substitution_service = SubstitutionService(service, MacroEstimator(service))

    plan = asyncio.run(
        substitution_service.build_plan(
            CHICKEN_RECIPE, "cut", UserContext.build(avoid_list="chicken")
        )
    )

    ingredient = plan.ingredients[0]
    assert ingredient.candidates == ()
    assert ingredient.notes == (
        "No safe USDA-backed swaps; use portion adjustments/adds instead.",
    )


def test_missing_api_key_degrades() -> None:
    service = NutritionService(FakeFdcClient(api_key=None))
    substitution_service = SubstitutionService(service, MacroEstimator(service))

    plan = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "cut"))

    assert plan.ingredients == ()
    assert plan.warnings == (
        "FDC API key missing; substitution candidates limited to portion tweaks.",
    )
    assert plan.confidence == "low"


def test_estimation_failure_degrades(nutrition_service: NutritionService) -> None:
    substitution_service = SubstitutionService(nutrition_service, FailingEstimator())

    plan = asyncio.run(substitution_service.build_plan(CHICKEN_RECIPE, "cut"))

    assert plan.ingredients == ()
    assert plan.warnings == ("Macro estimation failed: boom",)


def test_supplied_estimate_skips_estimation(
    nutrition_service: NutritionService, macro_estimator: MacroEstimator
) -> None:
    estimate = asyncio.run(macro_estimator.estimate(CHICKEN_RECIPE))
    substitution_service = SubstitutionService(nutrition_service, FailingEstimator())

    plan = asyncio.run(
        substitution_service.build_plan(CHICKEN_RECIPE, "cut", macro_estimate=estimate)
    )

    assert plan.ingredients[0].candidates
    assert plan.assumptions == estimate.assumptions


def _food(category: str | None, description: str = "Food") -> FoodMatch:
    return FoodMatch(
        fdc_id=1,
        description=description,
        data_type="SR Legacy",
        nutrients=NutrientProfile(calories=100),
        category=category,
    )


def test_infer_roles_from_keywords_and_category() -> None:
    assert infer_roles("olive oil", None, None) == ("fat_oil",)
    assert infer_roles("cheddar cheese", None, None) == ("creamy_dairy", "cheese")
    assert infer_roles("eggs", _food("Dairy and Egg Products"), None) == ("binder",)
    assert infer_roles("salmon", _food("Finfish and Shellfish Products"), None) == ("seafood",)
    assert infer_roles("white rice", None, None) == ("carb_base",)
    assert infer_roles("flour tortilla", None, None) == ("bread_wrap",)


@pytest.mark.parametrize("name", ["eggplant", "butternut squash", "licorice", "chickpea flour"])
def test_infer_roles_ignores_keywords_inside_other_words(name: str) -> None:
    assert infer_roles(name, None, None) == ()


def test_infer_roles_accepts_plurals() -> None:
    assert infer_roles("black beans", None, None) == ("plant_protein",)
    assert infer_roles("rice noodles", None, None) == ("carb_base",)
    assert infer_roles("2 egg whites", None, None) == ("binder",)


def test_infer_roles_from_macro_shape() -> None:
    roles = infer_roles(
        "ground beef", _food("Beef Products"), MacroVector(calories=150, protein=20, fat=4)
    )

    assert roles == ("red_meat", "lean_protein", "lean_ground")
