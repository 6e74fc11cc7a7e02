"""Nutrition domain models."""

from dataclasses import dataclass, field, fields
from typing import Literal

MatchConfidence = Literal["high", "medium", "low"]

_HIGH_MATCH_SCORE = 70
_MEDIUM_MATCH_SCORE = 50


@dataclass(frozen=True)
class MacroVector:
    """Macronutrient amounts; unknown components are zero."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0

    def __add__(self, other: "MacroVector") -> "MacroVector":
        return MacroVector(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    def __sub__(self, other: "MacroVector") -> "MacroVector":
        return MacroVector(
            **{f.name: getattr(self, f.name) - getattr(other, f.name) for f in fields(self)}
        )

    def scaled(self, factor: float) -> "MacroVector":
        """Return every component multiplied by a factor."""
        return MacroVector(**{f.name: getattr(self, f.name) * factor for f in fields(self)})

    def rounded(self) -> "MacroVector":
        """Round calories and sodium to whole numbers, the rest to 0.1."""
        return MacroVector(
            calories=round_value(self.calories, 0),
            protein=round_value(self.protein, 1),
            carbs=round_value(self.carbs, 1),
            fat=round_value(self.fat, 1),
            fiber=round_value(self.fiber, 1),
            sodium=round_value(self.sodium, 0),
        )

    def rounded_to_tenth(self) -> "MacroVector":
        """Round every component to 0.1."""
        return MacroVector(
            **{f.name: round_value(getattr(self, f.name), 1) for f in fields(self)}
        )

    def calories_from_macros(self) -> float:
        """Atwater estimate of calories from protein, carbs and fat."""
        return self.protein * 4 + self.carbs * 4 + self.fat * 9


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrients per 100 g of a reference food; None when not reported."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sodium: float | None = None
    sugars: float | None = None
    saturated_fat: float | None = None
    potassium: float | None = None
    cholesterol: float | None = None

    @property
    def has_energy(self) -> bool:
        return self.calories is not None

    def macros(self) -> MacroVector:
        """Return the macro vector with missing values treated as zero."""
        return MacroVector(
            calories=self.calories or 0.0,
            protein=self.protein or 0.0,
            carbs=self.carbs or 0.0,
            fat=self.fat or 0.0,
            fiber=self.fiber or 0.0,
            sodium=self.sodium or 0.0,
        )

    def macros_for_grams(self, grams: float) -> MacroVector:
        """Scale the per-100 g vector to a gram weight."""
        return self.macros().scaled(grams / 100)


@dataclass(frozen=True)
class FoodPortion:
    """A household serving size reported by the reference service."""

    description: str
    amount: float
    gram_weight: float

    @property
    def grams_per_unit(self) -> float:
        if self.amount <= 0:
            return self.gram_weight
        return self.gram_weight / self.amount


@dataclass(frozen=True)
class FoodMatch:
    """Reference food chosen for an ingredient."""

    fdc_id: int
    description: str
    data_type: str | None
    nutrients: NutrientProfile
    category: str | None = None
    brand_owner: str | None = None
    portions: tuple[FoodPortion, ...] = field(default_factory=tuple)
    match_score: float = 0.0

    @property
    def confidence(self) -> MatchConfidence:
        return confidence_for_score(self.match_score)


def confidence_for_score(score: float) -> MatchConfidence:
    """Map a 0-100 match score to a confidence label."""
    if score >= _HIGH_MATCH_SCORE:
        return "high"
    if score >= _MEDIUM_MATCH_SCORE:
        return "medium"
    return "low"


def round_value(value: float | None, decimals: int = 1) -> float:
    """Round half away from zero; non-finite or missing values become 0."""
    if value is None or value != value or value in {float("inf"), float("-inf")}:
        return 0.0
    factor = 10**decimals
    scaled = abs(value) * factor
    rounded = int(scaled + 0.5 + 1e-9) / factor
    return rounded if value >= 0 else -rounded
