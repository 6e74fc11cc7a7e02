"""Pydantic models for API request and response payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recipe_macros.domain.recipes import Recipe
from recipe_macros.domain.substitutions import Condition, UserContext

GoalName = Literal["bulk", "lean_bulk", "cut"]


class ApiModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecipeIngredientPayload(ApiModel):
    """Ingredient record with a separate quantity."""

    name: str
    quantity: str | float | None = None


class RecipePayload(ApiModel):
    """Recipe submitted for estimation or substitution."""

    title: str | None = None
    ingredients: list[str | RecipeIngredientPayload]
    servings: float | None = 1
    steps: list[str] = Field(default_factory=list)

    def to_recipe(self) -> Recipe:
        return Recipe.from_dict(self.model_dump())


class UserContextPayload(ApiModel):
    """User dietary constraints."""

    allergens: list[str] = Field(default_factory=list)
    diet_style: str | None = None
    avoid_list: str | None = None
    conditions: list[Condition] = Field(default_factory=list)

    def to_context(self) -> UserContext:
        return UserContext.build(
            allergens=self.allergens,
            diet_style=self.diet_style,
            avoid_list=self.avoid_list,
            conditions=self.conditions,
        )


class EstimateRequest(ApiModel):
    recipe: RecipePayload
    include_yield_factors: bool = True


class SubstitutionRequest(ApiModel):
    recipe: RecipePayload
    goal_type: GoalName
    user_context: UserContextPayload | None = None


class MacroVectorModel(ApiModel):
    """Macro amounts."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    sodium: float = 0


class GuardrailRequest(ApiModel):
    recipe: RecipePayload
    conditions: list[Condition]
    per_serving: MacroVectorModel | None = None


class DailyTargetsRequest(ApiModel):
    """Body profile used for daily targets."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0)
    sex: Literal["female", "male", "unspecified"] | None = None
    activity_level: str | None = None
    goal: str | None = None
    pace: int = Field(default=3, ge=1, le=5)


class FoodReferenceModel(ApiModel):
    """Reference food behind a number."""

    fdc_id: int
    description: str
    data_type: str | None = None
    category: str | None = None


class FoodMatchModel(FoodReferenceModel):
    brand_owner: str | None = None
    match_score: float = 0
    confidence: str


class IngredientEstimateModel(ApiModel):
    name: str
    original: str
    grams: float | None = None
    grams_confidence: str | None = None
    unit: str | None = None
    macros: MacroVectorModel | None = None
    fdc_match: FoodMatchModel | None = None
    cooking_note: str | None = None


class MacroEstimateModel(ApiModel):
    """Recipe macro estimate."""

    totals: MacroVectorModel
    per_serving: MacroVectorModel
    servings: float
    ingredients: list[IngredientEstimateModel]
    assumptions: list[str]
    warnings: list[str]
    confidence: str


class SubstitutionCandidateModel(ApiModel):
    id: str
    name: str
    role: str
    swap_grams: float
    macro_per_swap: MacroVectorModel
    macro_delta: MacroVectorModel
    taste_score: int
    texture_score: int
    commonness: int
    goal_fit_score: float
    score: float
    caution: str | None = None
    fdc_match: FoodReferenceModel


class IngredientPlanModel(ApiModel):
    name: str
    original: str
    roles: list[str]
    base_macros: MacroVectorModel | None = None
    base_grams: float | None = None
    fdc_match: FoodReferenceModel | None = None
    grams_confidence: str | None = None
    candidates: list[SubstitutionCandidateModel]
    notes: list[str]


class SubstitutionPlanModel(ApiModel):
    """Per-ingredient substitution options."""

    ingredients: list[IngredientPlanModel]
    warnings: list[str]
    assumptions: list[str]
    confidence: str


class ConditionWarningModel(ApiModel):
    condition: str
    label: str
    message: str
    hits: list[str]
    suggestion: str | None = None
    severity: str


class TargetBandModel(ApiModel):
    direction: str
    low: float
    high: float


class GoalConfigModel(ApiModel):
    """Goal display text and per-serving bands."""

    goal_type: str
    name: str
    description: str
    calories: TargetBandModel
    protein: TargetBandModel
    carbs: TargetBandModel
    fat: TargetBandModel


class DailyTargetsModel(ApiModel):
    bmr: int
    tdee: int
    goal_adjustment: int
    macros: MacroVectorModel
