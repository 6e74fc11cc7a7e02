"""Substitution domain models."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from recipe_macros.domain.nutrition import MacroVector

Condition = Literal["celiac", "diabetes", "hypertension", "high_cholesterol", "kidney"]


@dataclass(frozen=True)
class UserContext:
    """Dietary constraints supplied by the user."""

    allergens: frozenset[str] = frozenset()
    diet_style: str | None = None
    avoid_list: str | None = None
    conditions: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        allergens: Iterable[str] = (),
        diet_style: str | None = None,
        avoid_list: str | None = None,
        conditions: Iterable[str] = (),
    ) -> "UserContext":
        return cls(
            allergens=frozenset(str(item).lower().strip() for item in allergens),
            diet_style=diet_style.lower().strip() if diet_style else None,
            avoid_list=avoid_list,
            conditions=frozenset(str(item).lower().strip() for item in conditions),
        )


@dataclass(frozen=True)
class CatalogCandidate:
    """Curated swap option tagged with the roles it can fill."""

    id: str
    name: str
    roles: tuple[str, ...]
    fdc_queries: tuple[str, ...]
    taste_score: int = 3
    texture_score: int = 3
    commonness: int = 3
    allergens: tuple[str, ...] = ()
    diets: tuple[str, ...] = ()
    gram_ratio: float = 1.0
    notes: str | None = None


@dataclass(frozen=True)
class FoodReference:
    """Compact pointer to the reference food behind a number."""

    fdc_id: int
    description: str
    data_type: str | None
    category: str | None = None


@dataclass(frozen=True)
class SubstitutionCandidate:
    """A scored swap for one ingredient."""

    id: str
    name: str
    role: str
    swap_grams: float
    macro_per_swap: MacroVector
    macro_delta: MacroVector
    taste_score: int
    texture_score: int
    commonness: int
    goal_fit_score: float
    score: float
    caution: str | None
    fdc_match: FoodReference


@dataclass(frozen=True)
class IngredientPlan:
    """Substitution options for one recipe ingredient."""

    name: str
    original: str
    roles: tuple[str, ...]
    base_macros: MacroVector | None
    base_grams: float | None
    fdc_match: FoodReference | None
    grams_confidence: str | None = None
    candidates: tuple[SubstitutionCandidate, ...] = ()
    notes: tuple[str, ...] = ()


@dataclass(frozen=True)
class SubstitutionPlan:
    """Per-ingredient swap candidates plus diagnostics."""

    ingredients: tuple[IngredientPlan, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    assumptions: tuple[str, ...] = field(default_factory=tuple)
    confidence: str = "low"
