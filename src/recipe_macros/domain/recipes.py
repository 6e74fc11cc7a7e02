"""Recipe and macro estimate models."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from recipe_macros.domain.nutrition import FoodMatch, MacroVector


class RecipeShapeError(ValueError):
    """Raised when a recipe payload does not have the expected structure."""


@dataclass(frozen=True)
class RecipeIngredient:
    """An ingredient as written in a recipe."""

    name: str
    quantity: str | None = None

    def as_text(self) -> str:
        return f"{self.quantity or ''} {self.name or ''}".strip()


@dataclass(frozen=True)
class Recipe:
    """Recipe input for estimation and substitution."""

    ingredients: tuple[RecipeIngredient | str, ...]
    servings: float | None = 1
    title: str | None = None
    steps: tuple[str, ...] = field(default_factory=tuple)

    @property
    def effective_servings(self) -> float:
        if self.servings is None or self.servings != self.servings:
            return 1.0
        return max(1.0, float(self.servings))

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Recipe":
        """Build a recipe from a plain mapping, validating its shape."""
        if not isinstance(payload, Mapping):
            raise RecipeShapeError("Recipe must be a mapping")
        raw_ingredients = payload.get("ingredients")
        if not isinstance(raw_ingredients, list | tuple):
            raise RecipeShapeError("Recipe ingredients must be a list")
        ingredients: list[RecipeIngredient | str] = []
        for index, item in enumerate(raw_ingredients):
            if isinstance(item, str):
                ingredients.append(item)
            elif isinstance(item, Mapping) and isinstance(item.get("name"), str):
                quantity = item.get("quantity")
                ingredients.append(
                    RecipeIngredient(
                        name=item["name"],
                        quantity=None if quantity is None else str(quantity),
                    )
                )
            else:
                raise RecipeShapeError(f"Ingredient {index} must be a string or have a name")
        servings = payload.get("servings", 1)
        if servings is not None and not isinstance(servings, int | float):
            raise RecipeShapeError("Recipe servings must be a number")
        steps = payload.get("steps") or []
        if not isinstance(steps, list | tuple):
            raise RecipeShapeError("Recipe steps must be a list")
        title = payload.get("title")
        return cls(
            ingredients=tuple(ingredients),
            servings=servings,
            title=title if isinstance(title, str) else None,
            steps=tuple(str(step) for step in steps),
        )


@dataclass(frozen=True)
class IngredientEstimate:
    """Macro contribution of a single ingredient."""

    name: str
    original: str
    grams: float | None
    grams_confidence: str | None
    unit: str | None
    macros: MacroVector | None
    fdc_match: FoodMatch | None = None
    cooking_note: str | None = None


@dataclass(frozen=True)
class MacroEstimate:
    """Recipe totals, per-serving values and the diagnostic trail."""

    totals: MacroVector
    per_serving: MacroVector
    servings: float
    ingredients: tuple[IngredientEstimate, ...] = field(default_factory=tuple)
    assumptions: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    confidence: str = "medium"
