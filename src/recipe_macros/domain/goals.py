"""Goal and guardrail models."""

from dataclasses import dataclass
from typing import Literal

from recipe_macros.domain.nutrition import MacroVector
from recipe_macros.domain.recipes import MacroEstimate, Recipe
from recipe_macros.domain.substitutions import SubstitutionPlan

GoalType = Literal["bulk", "lean_bulk", "cut"]


@dataclass(frozen=True)
class TargetBand:
    """Desired per-serving change for one macro."""

    direction: Literal["increase", "decrease", "maintain"]
    low: float
    high: float

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2


@dataclass(frozen=True)
class GoalConfig:
    """Display text and macro bands for a goal."""

    goal_type: str
    name: str
    description: str
    calories: TargetBand
    protein: TargetBand
    carbs: TargetBand
    fat: TargetBand


@dataclass(frozen=True)
class MacroTargets:
    """Per-serving macros the edited recipe should land on."""

    goal_type: str
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and macro goals derived from a body profile."""

    bmr: int
    tdee: int
    goal_adjustment: int
    macros: MacroVector


@dataclass(frozen=True)
class EditRequest:
    """Input handed to the generative recipe-editing collaborator."""

    recipe: Recipe
    goal_type: str
    substitution_plan: SubstitutionPlan
    macro_estimate: MacroEstimate
    macro_targets: MacroTargets


@dataclass(frozen=True)
class ConditionWarning:
    """A medical-condition concern detected in a recipe."""

    condition: str
    label: str
    message: str
    hits: tuple[str, ...]
    suggestion: str | None = None
    severity: Literal["info", "warning"] = "warning"
