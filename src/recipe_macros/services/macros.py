"""Recipe macro estimation from reference nutrient data."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from recipe_macros.domain.ingredients import ParsedIngredient
from recipe_macros.domain.nutrition import FoodMatch, MacroVector
from recipe_macros.domain.recipes import IngredientEstimate, MacroEstimate, Recipe
from recipe_macros.services.concurrency import gather_bounded
from recipe_macros.services.density import normalize_description, volume_to_grams
from recipe_macros.services.normalizer import (
    detect_cooked_state,
    normalize_recipe_ingredients,
)
from recipe_macros.services.nutrition import NutritionService
from recipe_macros.services.yields import (
    apply_retention,
    cooked_to_raw,
    detect_cooking_method,
    raw_to_cooked,
    retention_for,
)
from recipe_macros.tables.ingredients import COOKED_INDICATORS

_logger = logging.getLogger(__name__)

# Allowed gap between stated calories and 4/4/9 calories before warning.
CALORIE_SANITY_TOLERANCE = 0.10

_CONFIDENCE_RANK = {"low": 0, "medium": 1, "high": 2}


@dataclass
class _IngredientOutcome:
    estimate: IngredientEstimate
    warnings: list[str] = field(default_factory=list)
    assumption: str | None = None
    match_confidence: str | None = None


@dataclass
class MacroEstimator:
    """Combines parsed ingredients, gram weights and reference foods into macros."""

    nutrition_service: NutritionService
    lookup_concurrency: int = 6

    async def estimate(
        self,
        recipe: Recipe,
        normalized: Sequence[ParsedIngredient] | None = None,
        *,
        include_yield_factors: bool = True,
    ) -> MacroEstimate:
        """Estimate total and per-serving macros for a recipe.

        Raises NutritionConfigError when the reference service has no key.
        Unparsable or unmatched ingredients are left out of the totals and
        reported as warnings.
        """
        self.nutrition_service.require_credentials()
        parsed_ingredients = (
            list(normalized) if normalized is not None else normalize_recipe_ingredients(recipe)
        )
        outcomes = await gather_bounded(
            [
                lambda parsed=parsed: self._estimate_ingredient(parsed, include_yield_factors)
                for parsed in parsed_ingredients
            ],
            limit=self.lookup_concurrency,
        )

        totals = MacroVector()
        warnings: list[str] = []
        assumptions: list[str] = []
        confidences: list[str] = []
        dropped = False
        for outcome in outcomes:
            warnings.extend(outcome.warnings)
            if outcome.estimate.macros is None:
                dropped = True
                continue
            totals = totals + outcome.estimate.macros
            if outcome.assumption:
                assumptions.append(outcome.assumption)
            if outcome.match_confidence:
                confidences.append(outcome.match_confidence)

        servings = recipe.effective_servings
        per_serving = totals.scaled(1 / servings).rounded_to_tenth()
        from_macros = per_serving.calories_from_macros()
        if abs(from_macros - per_serving.calories) / max(1.0, per_serving.calories) > (
            CALORIE_SANITY_TOLERANCE
        ):
            warnings.append(
                "Calorie sum differs from macro-derived calories by more than "
                f"{CALORIE_SANITY_TOLERANCE:.0%} (check quantities)."
            )

        if dropped or not confidences:
            confidence = "low"
        else:
            confidence = min(confidences, key=lambda value: _CONFIDENCE_RANK.get(value, 0))
        return MacroEstimate(
            totals=totals.rounded_to_tenth(),
            per_serving=per_serving,
            servings=servings,
            ingredients=tuple(outcome.estimate for outcome in outcomes),
            assumptions=tuple(assumptions),
            warnings=tuple(warnings),
            confidence=confidence,
        )

    async def _estimate_ingredient(
        self, parsed: ParsedIngredient, include_yield_factors: bool
    ) -> _IngredientOutcome:
        label = parsed.name or parsed.original
        if parsed.quantity is None:
            return _IngredientOutcome(
                estimate=_unresolved(parsed, "failed"),
                warnings=[f'Could not parse quantity for "{parsed.original}"'],
            )

        food = await self.nutrition_service.find_food(label, parsed.search_queries)
        if food is None:
            return _IngredientOutcome(
                estimate=_unresolved(parsed, None),
                warnings=[f'No nutrition match for "{label}"'],
            )

        resolution = volume_to_grams(
            parsed.quantity, parsed.unit, parsed.name, food.description, food.portions
        )
        warnings = [resolution.warning] if resolution.warning else []
        if resolution.grams is None:
            warnings.append(f'Could not convert "{parsed.original}" to grams')
            return _IngredientOutcome(
                estimate=_unresolved(parsed, resolution.confidence, food),
                warnings=warnings,
            )

        grams = resolution.grams
        notes: list[str] = []
        method = detect_cooking_method(parsed.original)
        reference_state = _reference_state(food)
        if include_yield_factors:
            line_state = detect_cooked_state(parsed.original)
            conversion = None
            if line_state == "cooked" and reference_state == "raw":
                conversion = cooked_to_raw(grams, parsed.name, method)
            elif line_state == "raw" and reference_state == "cooked":
                conversion = raw_to_cooked(grams, parsed.name, method)
            if conversion is not None and conversion.grams is not None:
                grams = conversion.grams
                notes.append(conversion.note)

        macros = food.nutrients.macros_for_grams(grams)
        if include_yield_factors and method and method != "raw" and reference_state != "cooked":
            retention = retention_for(method)
            if retention.method != "raw":
                macros = apply_retention(macros, retention)
                notes.append(f"Applied {retention.method} nutrient retention")

        unit_label = parsed.unit or "count"
        assumption = (
            f'Ingredient "{label}" → {grams:.1f} g using unit "{unit_label}" '
            f"(FDC: {food.description})"
        )
        _logger.debug("Estimated %s: %.1f g, %s", label, grams, food.description)
        return _IngredientOutcome(
            estimate=IngredientEstimate(
                name=parsed.name,
                original=parsed.original,
                grams=grams,
                grams_confidence=resolution.confidence,
                unit=parsed.unit,
                macros=macros,
                fdc_match=food,
                cooking_note="; ".join(notes) or None,
            ),
            warnings=warnings,
            assumption=assumption,
            match_confidence=food.confidence,
        )


def _unresolved(
    parsed: ParsedIngredient, grams_confidence: str | None, food: FoodMatch | None = None
) -> IngredientEstimate:
    return IngredientEstimate(
        name=parsed.name,
        original=parsed.original,
        grams=None,
        grams_confidence=grams_confidence,
        unit=parsed.unit,
        macros=None,
        fdc_match=food,
    )


def _reference_state(food: FoodMatch) -> str:
    words = set(normalize_description(food.description).split())
    if "raw" in words:
        return "raw"
    if words & set(COOKED_INDICATORS):
        return "cooked"
    return "unknown"
