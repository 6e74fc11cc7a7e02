"""Raw/cooked weight conversion and nutrient retention."""

import math
from collections.abc import Sequence

from recipe_macros.domain.ingredients import (
    CookedMacros,
    CookingState,
    RetentionFactors,
    YieldConversion,
    YieldDirection,
    YieldFactor,
)
from recipe_macros.domain.nutrition import MacroVector
from recipe_macros.tables.yields import (
    COOKING_METHOD_PATTERNS,
    MACRO_RETENTION,
    RAW_CONTEXT_INDICATORS,
    VITAMIN_RETENTION,
    YIELD_FACTORS,
)

_RETENTION_ALIASES = {"pan_fried": "fried"}


def get_yield_factor(
    name: str | None,
    method: str | None = None,
    direction: YieldDirection = "raw_to_cooked",
) -> YieldFactor:
    """Look up the cooked/raw weight ratio for an ingredient.

    An unknown ingredient gets a neutral factor of 1.0 with low confidence.
    """
    name_lower = (name or "").lower().strip()
    method_lower = (method or "").lower().strip()
    if name_lower:
        for category, items in YIELD_FACTORS.items():
            for item_name, methods in items.items():
                if item_name not in name_lower and name_lower not in item_name:
                    continue
                if method_lower and method_lower in methods:
                    factor, used_method, confidence = methods[method_lower], method_lower, "high"
                else:
                    factor, used_method, confidence = methods["default"], "default", "medium"
                if direction == "cooked_to_raw":
                    factor = 1 / factor
                return YieldFactor(
                    factor=factor,
                    confidence=confidence,
                    category=category,
                    ingredient=item_name,
                    method=used_method,
                )
    return YieldFactor(
        factor=1.0,
        confidence="low",
        category="unknown",
        ingredient=name or "",
        method="none",
        note="No yield factor found, using 1:1 ratio",
    )


def raw_to_cooked(grams: float | None, name: str, method: str | None = None) -> YieldConversion:
    """Convert a raw weight to its cooked weight."""
    return _convert(grams, name, method, "raw_to_cooked")


def cooked_to_raw(grams: float | None, name: str, method: str | None = None) -> YieldConversion:
    """Convert a cooked weight back to the raw weight it came from."""
    return _convert(grams, name, method, "cooked_to_raw")


def _convert(
    grams: float | None, name: str, method: str | None, direction: YieldDirection
) -> YieldConversion:
    source, target = direction.split("_to_")
    if grams is None or not math.isfinite(grams) or grams <= 0:
        return YieldConversion(
            grams=None, factor=None, confidence=None, note=f"Invalid {source} weight"
        )
    yield_factor = get_yield_factor(name, method, direction)
    converted = grams * yield_factor.factor
    note = yield_factor.note or (
        f"{name} {yield_factor.method}: {grams:g}g {source} → {converted:.1f}g {target}"
    )
    return YieldConversion(
        grams=converted,
        factor=yield_factor.factor,
        confidence=yield_factor.confidence,
        note=note,
    )


def retention_for(method: str | None) -> RetentionFactors:
    """Return macro and vitamin retention for a method; unknown methods keep 100%."""
    key = (method or "raw").lower().strip()
    key = _RETENTION_ALIASES.get(key, key)
    macros = MACRO_RETENTION.get(key, MACRO_RETENTION["raw"])
    vitamins = VITAMIN_RETENTION.get(key, VITAMIN_RETENTION["raw"])
    return RetentionFactors(
        method=key if key in MACRO_RETENTION else "raw",
        protein=macros["protein"],
        carbs=macros["carbs"],
        fat=macros["fat"],
        vitamins=dict(vitamins),
    )


def apply_retention(macros: MacroVector, retention: RetentionFactors) -> MacroVector:
    """Scale protein, carbs and fat by retention; calories follow their energy share."""
    protein = macros.protein * retention.protein
    carbs = macros.carbs * retention.carbs
    fat = macros.fat * retention.fat
    energy_before = macros.calories_from_macros()
    if energy_before > 0:
        calories = macros.calories * (protein * 4 + carbs * 4 + fat * 9) / energy_before
    else:
        calories = macros.calories
    return MacroVector(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=macros.fiber,
        sodium=macros.sodium,
    )


def adjust_macros_for_cooking(
    macros: MacroVector, raw_grams: float, name: str, method: str | None = None
) -> CookedMacros:
    """Apply cooking retention to raw-weight macros and report per-100 g cooked."""
    yield_factor = get_yield_factor(name, method, "raw_to_cooked")
    total = apply_retention(macros, retention_for(method))
    cooked_grams = raw_grams * yield_factor.factor
    per_100g = total.scaled(100 / cooked_grams) if cooked_grams > 0 else MacroVector()
    return CookedMacros(
        raw_grams=raw_grams,
        cooked_grams=cooked_grams,
        yield_factor=yield_factor.factor,
        total=total,
        per_100g_cooked=per_100g,
        confidence=yield_factor.confidence,
        method=yield_factor.method,
    )


def detect_cooking_method(text: str | None) -> str | None:
    """Return the first cooking method mentioned in the text."""
    if not text:
        return None
    lower = text.lower()
    for pattern, method in COOKING_METHOD_PATTERNS:
        if pattern.search(lower):
            return method
    return None


def analyze_ingredient_cooking_state(text: str, steps: Sequence[str] = ()) -> CookingState:
    """Decide whether an ingredient is cooked, checking its line before the steps."""
    method = detect_cooking_method(text)
    if method == "raw":
        return CookingState(is_cooked=False, method="raw", confidence="high")
    if method:
        return CookingState(is_cooked=True, method=method, confidence="high")

    steps_method = detect_cooking_method(" ".join(steps))
    if steps_method and steps_method != "raw":
        return CookingState(is_cooked=True, method=steps_method, confidence="medium")

    lower = text.lower()
    if any(indicator in lower for indicator in RAW_CONTEXT_INDICATORS):
        return CookingState(is_cooked=False, method="raw", confidence="medium")
    return CookingState(is_cooked=True, method="default", confidence="low")
