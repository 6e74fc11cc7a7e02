"""Medical-condition checks over a recipe's ingredients and macros."""

from collections.abc import Iterable

from recipe_macros.domain.goals import ConditionWarning
from recipe_macros.domain.nutrition import MacroVector, round_value
from recipe_macros.domain.recipes import Recipe, RecipeIngredient
from recipe_macros.tables.guardrails import (
    CONDITION_LABELS,
    DIABETES_CARB_LIMIT,
    KIDNEY_PROTEIN_LIMIT,
    RECIPE_CONDITION_RULES,
)


def analyze_recipe_for_conditions(
    recipe: Recipe,
    conditions: Iterable[str],
    per_serving: MacroVector | None = None,
) -> list[ConditionWarning]:
    """Return one warning per condition whose keywords or limits the recipe hits."""
    wanted = {str(condition).lower().strip() for condition in conditions}
    if not wanted:
        return []
    lines = [_ingredient_text(ingredient) for ingredient in recipe.ingredients]

    warnings: list[ConditionWarning] = []
    for condition, (keywords, message, suggestion) in RECIPE_CONDITION_RULES.items():
        if condition not in wanted:
            continue
        hits = [keyword for keyword in keywords if any(keyword in line for line in lines)]
        if per_serving is not None:
            if condition == "diabetes" and per_serving.carbs > DIABETES_CARB_LIMIT:
                hits.append(f"~{round_value(per_serving.carbs, 0):.0f}g carbs/serving")
            if condition == "kidney" and per_serving.protein > KIDNEY_PROTEIN_LIMIT:
                hits.append(f"~{round_value(per_serving.protein, 0):.0f}g protein/serving")
        if hits:
            warnings.append(
                ConditionWarning(
                    condition=condition,
                    label=CONDITION_LABELS[condition],
                    message=message,
                    hits=tuple(hits),
                    suggestion=suggestion,
                )
            )
    return warnings


def _ingredient_text(ingredient: RecipeIngredient | str) -> str:
    if isinstance(ingredient, RecipeIngredient):
        return ingredient.as_text().lower()
    return str(ingredient).lower()
