"""Tests for goal configuration, goal fit and daily targets."""

import pytest

from recipe_macros.domain.nutrition import MacroVector
from recipe_macros.domain.recipes import MacroEstimate, Recipe
from recipe_macros.domain.substitutions import SubstitutionPlan
from recipe_macros.services.goals import (
    NEUTRAL_GOAL_FIT,
    build_edit_request,
    calculate_daily_targets,
    compute_goal_fit,
    get_goal_config,
    macro_targets_for,
)


def test_get_goal_config_known_and_unknown() -> None:
    assert get_goal_config("cut").calories.low == -400
    with pytest.raises(ValueError, match="Invalid goal type: maintain"):
        get_goal_config("maintain")


def test_goal_fit_saturates_at_targets() -> None:
    cut = MacroVector(calories=-180, protein=0, carbs=-25, fat=-10)
    bulk = MacroVector(calories=250, protein=12, carbs=0, fat=8)

    assert compute_goal_fit(cut, "cut") == pytest.approx(1.0)
    assert compute_goal_fit(bulk, "bulk") == pytest.approx(1.0)


def test_goal_fit_for_no_change() -> None:
    assert compute_goal_fit(MacroVector(), "bulk") == 0.0
    assert compute_goal_fit(MacroVector(), "cut") == pytest.approx(0.2)
    assert compute_goal_fit(MacroVector(), "lean_bulk") == pytest.approx(0.2)


def test_cut_penalizes_protein_loss() -> None:
    keeps = compute_goal_fit(MacroVector(calories=-100, protein=-2), "cut")
    loses = compute_goal_fit(MacroVector(calories=-100, protein=-10), "cut")

    assert keeps > loses


def test_unknown_goal_is_neutral() -> None:
    assert compute_goal_fit(MacroVector(calories=-500), "keto") == NEUTRAL_GOAL_FIT


@pytest.mark.parametrize("goal", ["bulk", "lean_bulk", "cut", "other"])
@pytest.mark.parametrize(
    "delta",
    [
        MacroVector(calories=900, protein=80, carbs=90, fat=60),
        MacroVector(calories=-900, protein=-80, carbs=-90, fat=-60),
        MacroVector(calories=120, protein=-4, carbs=10, fat=-3),
    ],
)
def test_goal_fit_stays_in_unit_interval(delta: MacroVector, goal: str) -> None:
    assert 0.0 <= compute_goal_fit(delta, goal) <= 1.0


def test_macro_targets_apply_band_midpoints() -> None:
    targets = macro_targets_for(MacroVector(calories=500, protein=30, carbs=50, fat=20), "cut")

    assert targets.calories == 200
    assert targets.protein == 35
    assert targets.carbs == 25
    assert targets.fat == 7.5


def test_macro_targets_never_negative() -> None:
    targets = macro_targets_for(MacroVector(calories=100, protein=5, carbs=5, fat=2), "cut")

    assert targets.calories == 0
    assert targets.carbs == 0
    assert targets.fat == 0


def test_daily_targets_for_male_cut() -> None:
    targets = calculate_daily_targets(
        weight_kg=80, height_cm=180, age=30, sex="male", activity_level="moderate", goal="cut"
    )

    assert targets.bmr == 1780
    assert targets.tdee == 2759
    assert targets.goal_adjustment == -300
    assert targets.macros == MacroVector(calories=2459, protein=176, carbs=197, fat=107)


def test_daily_targets_unspecified_sex_averages_equations() -> None:
    male = calculate_daily_targets(70, 170, 40, "male", None, "maintain")
    female = calculate_daily_targets(70, 170, 40, "female", None, "maintain")
    average = calculate_daily_targets(70, 170, 40, None, None, "maintain")

    assert average.bmr == (male.bmr + female.bmr) // 2


def test_daily_targets_are_clamped_and_paced() -> None:
    targets = calculate_daily_targets(40, 150, 80, "female", "sedentary", "cut", pace=5)

    assert targets.goal_adjustment == -400
    assert targets.macros.calories == 1200


def test_build_edit_request_packages_targets() -> None:
    per_serving = MacroVector(calories=500, protein=30, carbs=50, fat=20)
    estimate = MacroEstimate(totals=per_serving, per_serving=per_serving, servings=1)
    recipe = Recipe(ingredients=("1 cup rice",))

    request = build_edit_request(recipe, "cut", SubstitutionPlan(), estimate)

    assert request.goal_type == "cut"
    assert request.macro_targets.calories == 200
    assert request.recipe is recipe
