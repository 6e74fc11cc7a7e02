"""Quantity and unit to gram conversion."""

import math
import re
from collections.abc import Sequence
from dataclasses import replace

from recipe_macros.domain.ingredients import DensityMatch, GramResolution
from recipe_macros.domain.nutrition import FoodPortion
from recipe_macros.services.normalizer import normalize_unit
from recipe_macros.tables.density import (
    CATEGORY_FALLBACKS,
    CATEGORY_PATTERNS,
    DEFAULT_FALLBACK,
    DENSITY_DATA,
    LAST_RESORT_GRAMS_PER_UNIT,
    SIZE_UNITS,
    VOLUME_UNIT_CUPS,
    WEIGHT_UNIT_GRAMS,
    WHOLE_UNITS,
)

_NON_WORD = re.compile(r"[^a-z0-9%]+")
_HOUSEHOLD_UNITS = ("cup", "tbsp", "tsp")
_EXACT_MATCHES = frozenset({"exact", "description_exact"})
_PARTIAL_MATCHES = frozenset({"partial", "description_partial"})


def normalize_description(text: str | None) -> str:
    """Lowercase and replace punctuation so "Oil, olive" reads "oil olive"."""
    return _NON_WORD.sub(" ", (text or "").lower()).strip()


def get_density_data(name: str, reference_description: str | None = None) -> DensityMatch:
    """Find household-measure weights for an ingredient.

    Tries the name exactly, then the reference description exactly, then
    substring matches in table order, then a keyword category, then a
    water-like default.
    """
    name_key = normalize_description(name)
    description_key = normalize_description(reference_description)

    if name_key in DENSITY_DATA:
        return replace(DENSITY_DATA[name_key], match_type="exact")
    if description_key in DENSITY_DATA:
        return replace(DENSITY_DATA[description_key], match_type="description_exact")

    for text, match_type in ((name_key, "partial"), (description_key, "description_partial")):
        if not text:
            continue
        for key, density in DENSITY_DATA.items():
            if key in text or text in key:
                return replace(density, match_type=match_type)

    category = detect_category(name_key, description_key)
    if category is not None:
        return replace(CATEGORY_FALLBACKS[category], match_type="category")
    return DEFAULT_FALLBACK


def detect_category(name: str, description: str | None = None) -> str | None:
    """Return the first keyword category matching the name or description."""
    combined = f"{name} {description or ''}".lower()
    for pattern, category in CATEGORY_PATTERNS:
        if pattern.search(combined):
            return category
    return None


def volume_to_grams(  # noqa: PLR0911
    quantity: float | None,
    unit: str | None,
    name: str,
    reference_description: str | None = None,
    portions: Sequence[FoodPortion] = (),
) -> GramResolution:
    """Convert a quantity in any supported unit to grams.

    Weight units convert directly. Household and liquid volumes use the
    density table. Counts use per-item weights, then reference portions.
    Anything else is approximated, with a warning naming the approximation.
    """
    if quantity is None or not math.isfinite(quantity) or quantity <= 0:
        return GramResolution(grams=None, confidence="failed", source="invalid_quantity")

    normalized_unit = normalize_unit(unit)
    if normalized_unit in WEIGHT_UNIT_GRAMS:
        return GramResolution(
            grams=quantity * WEIGHT_UNIT_GRAMS[normalized_unit],
            confidence="high",
            source="weight_unit",
        )

    density = get_density_data(name, reference_description)

    if normalized_unit in _HOUSEHOLD_UNITS:
        per_unit = density.per_unit(normalized_unit)
        if per_unit:
            return GramResolution(
                grams=quantity * per_unit,
                confidence=_volume_confidence(density),
                source=density.match_type,
            )

    if normalized_unit in VOLUME_UNIT_CUPS and density.cup:
        return GramResolution(
            grams=quantity * VOLUME_UNIT_CUPS[normalized_unit] * density.cup,
            confidence=_volume_confidence(density),
            source=f"{density.match_type}_liquid_volume",
        )

    count_grams = _count_weight(density, normalized_unit)
    if count_grams:
        return GramResolution(
            grams=quantity * count_grams,
            confidence="medium",
            source="size_unit" if normalized_unit in SIZE_UNITS else "count_unit",
        )

    portion_grams = _portion_weight(portions, normalized_unit)
    if portion_grams:
        return GramResolution(
            grams=quantity * portion_grams, confidence="medium", source="portion"
        )

    label = unit if unit else "no unit"
    if density.tbsp:
        return GramResolution(
            grams=quantity * density.tbsp,
            confidence="low",
            source="fallback_tbsp",
            warning=f'Unknown unit "{label}" for "{name}", approximated as tbsp',
        )
    return GramResolution(
        grams=quantity * LAST_RESORT_GRAMS_PER_UNIT,
        confidence="very_low",
        source="ultimate_fallback",
        warning=(
            f'Could not determine conversion for "{label}" ({name}); '
            f"assumed {LAST_RESORT_GRAMS_PER_UNIT:g} g per unit"
        ),
    )


def _volume_confidence(density: DensityMatch) -> str:
    if density.match_type in _EXACT_MATCHES:
        return "high"
    if density.match_type in _PARTIAL_MATCHES:
        return "medium"
    return "low"


def _count_weight(density: DensityMatch, unit: str | None) -> float | None:
    if unit == "clove":
        return density.clove
    if unit in SIZE_UNITS:
        return density.per_unit(unit) or density.each
    if unit is None or unit in WHOLE_UNITS:
        return density.each or density.medium or density.large
    return None


def _portion_weight(portions: Sequence[FoodPortion], unit: str | None) -> float | None:
    wanted = unit or "each"
    for portion in portions:
        words = normalize_description(portion.description).split()
        if wanted in words:
            return portion.grams_per_unit
    return None
