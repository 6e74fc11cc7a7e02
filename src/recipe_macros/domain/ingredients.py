"""Ingredient parsing and conversion models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from recipe_macros.domain.nutrition import MacroVector

CookedState = Literal["raw", "cooked", "unknown"]
GramConfidence = Literal["high", "medium", "low", "very_low", "failed"]
YieldDirection = Literal["raw_to_cooked", "cooked_to_raw"]


@dataclass(frozen=True)
class ParsedIngredient:
    """A single ingredient line split into quantity, unit and name."""

    original: str
    quantity: float | None
    unit: str | None
    name: str
    search_queries: tuple[str, ...]
    cooked_state: CookedState = "unknown"


@dataclass(frozen=True)
class DensityMatch:
    """Grams per household unit for an ingredient."""

    match_type: str
    cup: float | None = None
    tbsp: float | None = None
    tsp: float | None = None
    clove: float | None = None
    large: float | None = None
    medium: float | None = None
    small: float | None = None
    each: float | None = None
    category: str | None = None

    def per_unit(self, unit: str) -> float | None:
        return getattr(self, unit, None) if unit in _DENSITY_UNITS else None


_DENSITY_UNITS = frozenset(
    {"cup", "tbsp", "tsp", "clove", "large", "medium", "small", "each"}
)


@dataclass(frozen=True)
class GramResolution:
    """Result of converting a quantity and unit into grams."""

    grams: float | None
    confidence: GramConfidence
    source: str
    warning: str | None = None


@dataclass(frozen=True)
class YieldFactor:
    """Cooked/raw weight ratio resolved for an ingredient."""

    factor: float
    confidence: Literal["high", "medium", "low"]
    category: str
    ingredient: str
    method: str
    note: str | None = None


@dataclass(frozen=True)
class YieldConversion:
    """Weight converted between raw and cooked states."""

    grams: float | None
    factor: float | None
    confidence: str | None
    note: str


@dataclass(frozen=True)
class CookingState:
    """Whether an ingredient ends up cooked, and how."""

    is_cooked: bool
    method: str
    confidence: Literal["high", "medium", "low"]


@dataclass(frozen=True)
class RetentionFactors:
    """Fraction of each nutrient kept after a cooking method."""

    method: str
    protein: float = 1.0
    carbs: float = 1.0
    fat: float = 1.0
    vitamins: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class CookedMacros:
    """Macros for a raw weight after cooking losses and gains."""

    raw_grams: float
    cooked_grams: float
    yield_factor: float
    total: MacroVector
    per_100g_cooked: MacroVector
    confidence: str
    method: str
