"""Tests for medical-condition recipe checks."""

from recipe_macros.domain.nutrition import MacroVector
from recipe_macros.domain.recipes import Recipe, RecipeIngredient
from recipe_macros.services.guardrails import analyze_recipe_for_conditions

RECIPE = Recipe(
    ingredients=(
        RecipeIngredient(name="soy sauce", quantity="2 tbsp"),
        RecipeIngredient(name="all-purpose flour", quantity="1 cup"),
        "1 tbsp butter",
    ),
)


def test_no_conditions_no_warnings() -> None:
    assert analyze_recipe_for_conditions(RECIPE, []) == []


def test_keyword_hits_per_condition() -> None:
    warnings = analyze_recipe_for_conditions(RECIPE, ["celiac", "hypertension"])

    assert [warning.condition for warning in warnings] == ["celiac", "hypertension"]
    celiac = warnings[0]
    assert celiac.label == "Celiac / gluten-free"
    assert celiac.hits == ("flour", "soy sauce")
    assert celiac.severity == "warning"
    assert celiac.suggestion is not None
    assert warnings[1].hits == ("soy sauce",)


def test_conditions_are_case_insensitive() -> None:
    warnings = analyze_recipe_for_conditions(RECIPE, ["High_Cholesterol"])

    assert warnings[0].hits == ("butter",)


def test_clean_recipe_for_condition_has_no_warning() -> None:
    recipe = Recipe(ingredients=("200 g chicken breast", "1 cup broccoli"))

    assert analyze_recipe_for_conditions(recipe, ["celiac", "diabetes"]) == []


def test_macro_limits_add_hits() -> None:
    recipe = Recipe(ingredients=("200 g chicken breast",))
    per_serving = MacroVector(calories=900, protein=62, carbs=88.4, fat=7)

    warnings = analyze_recipe_for_conditions(recipe, ["diabetes", "kidney"], per_serving)

    assert warnings[0].hits == ("~88g carbs/serving",)
    assert warnings[1].hits == ("~62g protein/serving",)
