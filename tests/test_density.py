"""Tests for unit and density conversion."""

import pytest

from recipe_macros.domain.nutrition import FoodPortion
from recipe_macros.services.density import detect_category, get_density_data, volume_to_grams


@pytest.mark.parametrize(
    ("unit", "multiplier"),
    [("g", 1), ("kg", 1000), ("mg", 0.001), ("oz", 28.3495), ("lb", 453.592)],
)
def test_weight_units_bypass_density(unit: str, multiplier: float) -> None:
    result = volume_to_grams(2, unit, "anything at all")

    assert result.grams == pytest.approx(2 * multiplier)
    assert result.confidence == "high"
    assert result.source == "weight_unit"


def test_two_pounds_in_grams() -> None:
    assert volume_to_grams(2, "lb", "chicken breast").grams == pytest.approx(907.184)


def test_cup_of_white_rice_uses_exact_density() -> None:
    result = volume_to_grams(2, "cup", "rice white")

    assert result.grams == pytest.approx(370)
    assert result.confidence == "high"


def test_tablespoon_of_butter() -> None:
    result = volume_to_grams(1, "tbsp", "butter")

    assert result.grams == pytest.approx(14.2)
    assert result.confidence == "high"


def test_partial_name_match_is_medium_confidence() -> None:
    result = volume_to_grams(1, "cup", "unsalted butter")

    assert result.grams == pytest.approx(227)
    assert result.confidence == "medium"


def test_liquid_volume_goes_through_cup_density() -> None:
    result = volume_to_grams(236.588, "ml", "butter")

    assert result.grams == pytest.approx(227)


def test_count_units_use_item_weights() -> None:
    eggs = volume_to_grams(2, "large", "egg whole raw")
    breast = volume_to_grams(1, None, "chicken breast")

    assert eggs.grams == pytest.approx(100)
    assert eggs.confidence == "medium"
    assert breast.grams == pytest.approx(174)
    assert breast.source == "count_unit"


def test_reference_portions_cover_unknown_counts() -> None:
    portions = (FoodPortion(description="1 slice", amount=1, gram_weight=28),)

    result = volume_to_grams(3, "slice", "zzz mystery loaf", portions=portions)

    assert result.grams == pytest.approx(84)
    assert result.source == "portion"


def test_unknown_unit_falls_back_to_tablespoon() -> None:
    result = volume_to_grams(2, "pinch", "butter")

    assert result.grams == pytest.approx(28.4)
    assert result.confidence == "low"
    assert result.warning == 'Unknown unit "pinch" for "butter", approximated as tbsp'


def test_last_resort_without_tablespoon_density() -> None:
    result = volume_to_grams(2, "pinch", "egg whole raw")

    assert result.grams == pytest.approx(30)
    assert result.confidence == "very_low"
    assert result.warning is not None


@pytest.mark.parametrize("quantity", [None, 0, -1, float("nan")])
def test_invalid_quantity_fails(quantity: float | None) -> None:
    result = volume_to_grams(quantity, "cup", "butter")

    assert result.grams is None
    assert result.confidence == "failed"


def test_density_lookup_order() -> None:
    assert get_density_data("butter").match_type == "exact"
    assert get_density_data("zzz", "Butter").match_type == "description_exact"
    assert get_density_data("zzz qqq").match_type == "default"
    assert get_density_data("zzz qqq").cup == 240


def test_detect_category_word_boundaries() -> None:
    assert detect_category("peach") != "legume"
    assert detect_category("peanut butter") == "nut_butter"
