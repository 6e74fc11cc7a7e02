"""Goal targets, goal-fit scoring and daily macro targets."""

from recipe_macros.domain.goals import (
    DailyTargets,
    EditRequest,
    GoalConfig,
    MacroTargets,
    TargetBand,
)
from recipe_macros.domain.nutrition import MacroVector, round_value
from recipe_macros.domain.recipes import MacroEstimate, Recipe
from recipe_macros.domain.substitutions import SubstitutionPlan

NEUTRAL_GOAL_FIT = 0.3

GOAL_CONFIGS: dict[str, GoalConfig] = {
    "bulk": GoalConfig(
        goal_type="bulk",
        name="Bulk",
        description="Maximize muscle gain with calorie surplus",
        calories=TargetBand("increase", 300, 500),
        protein=TargetBand("increase", 20, 40),
        carbs=TargetBand("increase", 0, 40),
        fat=TargetBand("increase", 0, 15),
    ),
    "lean_bulk": GoalConfig(
        goal_type="lean_bulk",
        name="Lean Bulk",
        description="Build muscle with minimal fat gain",
        calories=TargetBand("increase", 150, 250),
        protein=TargetBand("increase", 25, 40),
        carbs=TargetBand("increase", 0, 15),
        fat=TargetBand("maintain", -5, 0),
    ),
    "cut": GoalConfig(
        goal_type="cut",
        name="Cut",
        description="Lose fat while preserving muscle",
        calories=TargetBand("decrease", -400, -200),
        protein=TargetBand("maintain", 0, 10),
        carbs=TargetBand("decrease", -40, -10),
        fat=TargetBand("decrease", -20, -5),
    ),
}

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

# Base calorie change and change per pace step away from 3.
GOAL_ADJUSTMENTS: dict[str, tuple[int, int]] = {
    "bulk": (300, 50),
    "lean_bulk": (150, 25),
    "maintain": (0, 0),
    "cut": (-300, -50),
}
MIN_DAILY_CALORIES = 1200
MAX_DAILY_CALORIES = 5000

PROTEIN_PER_KG = {"cut": 2.2, "bulk": 1.6, "lean_bulk": 2.0}
DEFAULT_PROTEIN_PER_KG = 1.8
CARB_SHARE = {"cut": 0.45, "bulk": 0.60}
DEFAULT_CARB_SHARE = 0.55


def get_goal_config(goal_type: str) -> GoalConfig:
    """Return the configuration for a goal, raising ValueError if unknown."""
    try:
        return GOAL_CONFIGS[goal_type]
    except KeyError:
        raise ValueError(f"Invalid goal type: {goal_type}") from None


def compute_goal_fit(delta: MacroVector, goal_type: str) -> float:
    """Score how well a per-serving macro change serves a goal, from 0 to 1."""
    calories = delta.calories or 0.0
    protein = delta.protein or 0.0
    carbs = delta.carbs or 0.0
    fat = delta.fat or 0.0

    if goal_type == "bulk":
        fit = (
            0.45 * _positive(calories, 250)
            + 0.4 * _positive(protein, 12)
            + 0.15 * _positive(fat, 8)
        )
    elif goal_type == "lean_bulk":
        fat_penalty = _negative(fat, 10) * 0.5
        fit = (
            0.45 * _positive(protein, 12)
            + 0.35 * _band(calories, 75, 200)
            + 0.2 * (1 - fat_penalty)
        )
    elif goal_type == "cut":
        protein_guard = 1.0 if protein >= -3 else 1 - _negative(protein, 8)
        fit = (
            0.4 * _negative(calories, 180)
            + 0.25 * _negative(fat, 10)
            + 0.2 * protein_guard
            + 0.15 * _negative(carbs, 25)
        )
    else:
        return NEUTRAL_GOAL_FIT
    return _clamp(fit, 0.0, 1.0)


def _positive(delta: float, target: float) -> float:
    if delta <= 0:
        return 0.0
    return _clamp(delta / target, 0.0, 1.0)


def _negative(delta: float, target: float) -> float:
    if delta >= 0:
        return 0.0
    return _clamp(abs(delta) / target, 0.0, 1.0)


def _band(delta: float, low: float, high: float) -> float:
    if delta <= 0:
        return 0.0
    if delta >= high:
        return 1.0
    return _clamp((delta - low) / (high - low), 0.0, 1.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def macro_targets_for(per_serving: MacroVector, goal_type: str) -> MacroTargets:
    """Apply each band's midpoint to the current per-serving macros."""
    config = get_goal_config(goal_type)
    return MacroTargets(
        goal_type=goal_type,
        calories=max(0.0, round_value(per_serving.calories + config.calories.midpoint, 0)),
        protein=max(0.0, round_value(per_serving.protein + config.protein.midpoint, 1)),
        carbs=max(0.0, round_value(per_serving.carbs + config.carbs.midpoint, 1)),
        fat=max(0.0, round_value(per_serving.fat + config.fat.midpoint, 1)),
    )


def calculate_daily_targets(  # noqa: PLR0913
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: str | None,
    activity_level: str | None,
    goal: str | None,
    pace: int = 3,
) -> DailyTargets:
    """Daily calories and macros from Mifflin-St Jeor BMR and activity.

    Pace 3 is the baseline surplus or deficit; each step away from it moves
    the adjustment by the goal's per-pace amount. An unspecified sex
    averages the male and female equations.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == "male":
        bmr = _round_int(base + 5)
    elif sex == "female":
        bmr = _round_int(base - 161)
    else:
        bmr = _round_int((base + 5 + base - 161) / 2)
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level or "", ACTIVITY_MULTIPLIERS["sedentary"])
    tdee = _round_int(bmr * multiplier)

    base_adjustment, per_pace = GOAL_ADJUSTMENTS.get(goal or "", (0, 0))
    adjustment = base_adjustment + (pace - 3) * per_pace
    calories = max(MIN_DAILY_CALORIES, min(MAX_DAILY_CALORIES, tdee + adjustment))

    protein = _round_int(weight_kg * PROTEIN_PER_KG.get(goal or "", DEFAULT_PROTEIN_PER_KG))
    remaining = calories - protein * 4
    carb_share = CARB_SHARE.get(goal or "", DEFAULT_CARB_SHARE)
    return DailyTargets(
        bmr=bmr,
        tdee=tdee,
        goal_adjustment=adjustment,
        macros=MacroVector(
            calories=float(calories),
            protein=float(protein),
            carbs=float(_round_int(remaining * carb_share / 4)),
            fat=float(_round_int(remaining * (1 - carb_share) / 9)),
        ),
    )


def _round_int(value: float) -> int:
    return int(round_value(value, 0))


def build_edit_request(
    recipe: Recipe,
    goal_type: str,
    plan: SubstitutionPlan,
    estimate: MacroEstimate,
) -> EditRequest:
    """Package the plan and estimate for the recipe-editing collaborator."""
    return EditRequest(
        recipe=recipe,
        goal_type=goal_type,
        substitution_plan=plan,
        macro_estimate=estimate,
        macro_targets=macro_targets_for(estimate.per_serving, goal_type),
    )
