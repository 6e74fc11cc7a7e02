"""Goal-directed ingredient substitution planning."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from recipe_macros.domain.ingredients import ParsedIngredient
from recipe_macros.domain.nutrition import FoodMatch, MacroVector, round_value
from recipe_macros.domain.recipes import IngredientEstimate, MacroEstimate, Recipe
from recipe_macros.domain.substitutions import (
    CatalogCandidate,
    FoodReference,
    IngredientPlan,
    SubstitutionCandidate,
    SubstitutionPlan,
    UserContext,
)
from recipe_macros.services.cache import BoundedTTLCache, Cache
from recipe_macros.services.concurrency import gather_bounded
from recipe_macros.services.goals import compute_goal_fit
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.normalizer import normalize_recipe_ingredients
from recipe_macros.services.nutrition import DEFAULT_DATA_TYPES, NutritionService
from recipe_macros.tables.catalog import ROLE_NAME_KEYWORDS, candidates_for_roles
from recipe_macros.tables.guardrails import (
    ALLERGEN_SYNONYMS,
    CANDIDATE_CONDITION_DENYLISTS,
    NEGLIGIBLE_CALORIES,
    SKIP_SUBSTITUTION_EXACT,
    SKIP_SUBSTITUTION_KEYWORDS,
)

_logger = logging.getLogger(__name__)

MAX_CANDIDATES = 3

TASTE_TEXTURE_WEIGHT = 0.45
COMMONNESS_WEIGHT = 0.2
GOAL_FIT_WEIGHT = 0.3
SAFETY_WEIGHT = 0.05
ALLERGEN_SAFETY_SCORE = 0.8

_NO_KEY_WARNING = "FDC API key missing; substitution candidates limited to portion tweaks."
_NO_SWAPS_NOTE = "No safe USDA-backed swaps; use portion adjustments/adds instead."
_SKIP_NOTE = "Skip substitutions (minimal macro impact or no reliable USDA match)."

_SKIP_PATTERNS = tuple(
    re.compile(rf"\b{re.escape(keyword)}\b") for keyword in SKIP_SUBSTITUTION_KEYWORDS
)
_ROLE_PATTERNS = {
    role: re.compile(rf"\b(?:{'|'.join(map(re.escape, keywords))})(?:e?s)?\b")
    for role, keywords in ROLE_NAME_KEYWORDS.items()
}
_AVOID_SPLIT = re.compile(r"[,;]")


@dataclass
class SubstitutionService:
    """Builds ranked, constraint-filtered swap candidates for a recipe."""

    nutrition_service: NutritionService
    macro_estimator: MacroEstimator
    candidate_cache: Cache = field(
        default_factory=lambda: BoundedTTLCache(max_entries=200, ttl_seconds=None)
    )
    lookup_concurrency: int = 6

    async def build_plan(
        self,
        recipe: Recipe,
        goal_type: str,
        user_context: UserContext | None = None,
        macro_estimate: MacroEstimate | None = None,
    ) -> SubstitutionPlan:
        """Return up to three scored swaps per ingredient.

        Never raises for a missing key or a failed estimate; both produce an
        empty plan with a warning instead.
        """
        if not self.nutrition_service.is_configured():
            return SubstitutionPlan(warnings=(_NO_KEY_WARNING,), confidence="low")

        context = user_context or UserContext()
        normalized = normalize_recipe_ingredients(recipe)
        estimate = macro_estimate
        if estimate is None:
            try:
                estimate = await self.macro_estimator.estimate(recipe, normalized)
            except Exception as exc:
                _logger.warning("Macro estimation failed for substitution plan: %s", exc)
                return SubstitutionPlan(
                    warnings=(f"Macro estimation failed: {exc}",), confidence="low"
                )

        servings = estimate.servings or recipe.effective_servings
        request_cache: dict[str, FoodMatch | None] = {}
        ingredients: list[IngredientPlan] = []
        for index, parsed in enumerate(normalized):
            info = estimate.ingredients[index] if index < len(estimate.ingredients) else None
            ingredients.append(
                await self._plan_ingredient(
                    parsed, info, servings, goal_type, context, request_cache
                )
            )
        return SubstitutionPlan(
            ingredients=tuple(ingredients),
            warnings=tuple(estimate.warnings),
            assumptions=tuple(estimate.assumptions),
            confidence=estimate.confidence,
        )

    async def _plan_ingredient(  # noqa: PLR0913
        self,
        parsed: ParsedIngredient,
        info: IngredientEstimate | None,
        servings: float,
        goal_type: str,
        context: UserContext,
        request_cache: dict[str, FoodMatch | None],
    ) -> IngredientPlan:
        total_macros = info.macros if info else None
        base_grams = info.grams if info else None
        food = info.fdc_match if info else None
        base_macros = total_macros.scaled(1 / servings) if total_macros else None

        skip = should_skip_substitutions(parsed.name, total_macros)
        roles = () if skip else infer_roles(parsed.name, food, base_macros)
        candidates: tuple[SubstitutionCandidate, ...] = ()
        if not skip and roles and base_macros and base_grams and food:
            candidates = await self._candidates_for(
                parsed.name,
                roles,
                base_macros,
                base_grams,
                servings,
                goal_type,
                context,
                request_cache,
            )
            notes = () if candidates else (_NO_SWAPS_NOTE,)
        else:
            notes = (_SKIP_NOTE,)

        return IngredientPlan(
            name=parsed.name,
            original=parsed.original,
            roles=roles,
            base_macros=base_macros.rounded() if base_macros else None,
            base_grams=round_value(base_grams, 1) if base_grams else None,
            fdc_match=_reference(food) if food else None,
            grams_confidence=info.grams_confidence if info else None,
            candidates=candidates,
            notes=notes,
        )

    async def _candidates_for(  # noqa: PLR0913
        self,
        original_name: str,
        roles: tuple[str, ...],
        base_macros: MacroVector,
        base_grams: float,
        servings: float,
        goal_type: str,
        context: UserContext,
        request_cache: dict[str, FoodMatch | None],
    ) -> tuple[SubstitutionCandidate, ...]:
        allowed = [
            candidate
            for candidate in candidates_for_roles(roles)
            if is_candidate_allowed(candidate, context, original_name)
        ]
        results = await gather_bounded(
            [
                lambda candidate=candidate: self._score_candidate(
                    candidate,
                    roles,
                    base_macros,
                    base_grams,
                    servings,
                    goal_type,
                    request_cache,
                )
                for candidate in allowed
            ],
            limit=self.lookup_concurrency,
            return_exceptions=True,
        )
        scored: list[SubstitutionCandidate] = []
        for candidate, result in zip(allowed, results, strict=True):
            if isinstance(result, BaseException):
                _logger.warning("Scoring candidate %s failed: %s", candidate.id, result)
            elif result is not None:
                scored.append(result)
        scored.sort(key=lambda item: item.score, reverse=True)
        return tuple(scored[:MAX_CANDIDATES])

    async def _score_candidate(  # noqa: PLR0913
        self,
        candidate: CatalogCandidate,
        roles: tuple[str, ...],
        base_macros: MacroVector,
        base_grams: float,
        servings: float,
        goal_type: str,
        request_cache: dict[str, FoodMatch | None],
    ) -> SubstitutionCandidate | None:
        food = await self._load_candidate_food(candidate, request_cache)
        if food is None:
            return None

        swap_grams = max(base_grams * (candidate.gram_ratio or 1.0), 1.0)
        per_swap = food.nutrients.macros_for_grams(swap_grams)
        delta = per_swap.scaled(1 / servings) - base_macros
        goal_fit = compute_goal_fit(delta, goal_type)

        taste_texture = (candidate.taste_score + candidate.texture_score) / 10
        commonness = candidate.commonness / 5
        safety = ALLERGEN_SAFETY_SCORE if candidate.allergens else 1.0
        score = round_value(
            taste_texture * TASTE_TEXTURE_WEIGHT
            + commonness * COMMONNESS_WEIGHT
            + goal_fit * GOAL_FIT_WEIGHT
            + safety * SAFETY_WEIGHT,
            3,
        )
        return SubstitutionCandidate(
            id=candidate.id,
            name=candidate.name,
            role=next(role for role in candidate.roles if role in roles),
            swap_grams=round_value(swap_grams, 1),
            macro_per_swap=per_swap.rounded(),
            macro_delta=delta.rounded(),
            taste_score=candidate.taste_score,
            texture_score=candidate.texture_score,
            commonness=candidate.commonness,
            goal_fit_score=round_value(goal_fit * 100, 1),
            score=score,
            caution=candidate.notes,
            fdc_match=_reference(food),
        )

    async def _load_candidate_food(
        self, candidate: CatalogCandidate, request_cache: dict[str, FoodMatch | None]
    ) -> FoodMatch | None:
        if candidate.id in request_cache:
            return request_cache[candidate.id]
        cached = self.candidate_cache.get(candidate.id)
        if isinstance(cached, FoodMatch):
            request_cache[candidate.id] = cached
            return cached

        food = await self.nutrition_service.find_food(
            candidate.name,
            candidate.fdc_queries or (candidate.name,),
            data_types=DEFAULT_DATA_TYPES,
        )
        request_cache[candidate.id] = food
        if food is not None:
            self.candidate_cache.set(candidate.id, food)
        return food


def should_skip_substitutions(name: str | None, total_macros: MacroVector | None) -> bool:
    """True for seasonings, water, leavening, negligible calories or no match."""
    lower = (name or "").lower().strip()
    if lower in SKIP_SUBSTITUTION_EXACT:
        return True
    if any(pattern.search(lower) for pattern in _SKIP_PATTERNS):
        return True
    if total_macros is None:
        return True
    return total_macros.calories <= NEGLIGIBLE_CALORIES


def infer_roles(  # noqa: PLR0912
    name: str | None, food: FoodMatch | None, base_macros: MacroVector | None
) -> tuple[str, ...]:
    """Tag an ingredient with the culinary roles swaps must fill."""
    name = (name or "").lower()
    category = ""
    if food is not None:
        category = (food.category or food.description or "").lower()
    roles: list[str] = []

    def _add(role: str) -> None:
        if role not in roles:
            roles.append(role)

    def _named(role: str) -> bool:
        return _ROLE_PATTERNS[role].search(name) is not None

    if _named("poultry") or "poultry" in category:
        _add("poultry")
    if _named("red_meat") or "beef" in category:
        _add("red_meat")
    if _named("pork") or "pork" in category:
        _add("pork")
    if "fish" in category or "shellfish" in category or _named("seafood"):
        _add("seafood")
    if "soy" in category or "legume" in category or _named("plant_protein"):
        _add("plant_protein")
    if "fats and oils" in category or _named("fat_oil"):
        _add("fat_oil")
    if ("dairy" in category and not _named("binder")) or _named("creamy_dairy"):
        _add("creamy_dairy")
        if _named("cheese"):
            _add("cheese")
    if _named("binder"):
        _add("binder")
    if "cereal" in category or "pasta" in category or _named("carb_base"):
        _add("carb_base")
    if _named("bread_wrap"):
        _add("bread_wrap")
    if _named("low_carb_base"):
        _add("low_carb_base")

    if base_macros is not None:
        if base_macros.protein >= 15 and base_macros.fat <= 8:
            _add("lean_protein")
        if (
            base_macros.protein >= 12
            and base_macros.fat <= 5
            and ("ground" in category or _named("lean_ground"))
        ):
            _add("lean_ground")
    return tuple(roles)


def normalize_allergens(allergens: Iterable[str]) -> frozenset[str]:
    """Lowercase allergens and add canonical tags for common synonyms."""
    normalized: set[str] = set()
    for allergen in allergens:
        lower = str(allergen).lower().strip()
        if not lower:
            continue
        normalized.add(lower)
        normalized.update(ALLERGEN_SYNONYMS.get(lower, ()))
    return frozenset(normalized)


def is_candidate_allowed(  # noqa: PLR0911
    candidate: CatalogCandidate, context: UserContext, original_name: str = ""
) -> bool:
    """Apply allergen, diet, avoid-list, condition and same-ingredient filters."""
    allergens = normalize_allergens(context.allergens)
    for tag in candidate.allergens:
        lower = tag.lower()
        if lower in allergens:
            return False
        if lower == "gluten_optional" and "gluten" in allergens:
            return False
        if lower == "legume" and "peanut" in allergens:
            return False

    if not _diet_allows(candidate, (context.diet_style or "").lower().strip()):
        return False

    candidate_name = candidate.name.lower()
    avoid_terms = [
        term.strip().lower() for term in _AVOID_SPLIT.split(context.avoid_list or "")
    ]
    if any(term and term in candidate_name for term in avoid_terms):
        return False

    for condition in context.conditions:
        denylist = CANDIDATE_CONDITION_DENYLISTS.get(condition, ())
        if any(keyword in candidate_name for keyword in denylist):
            return False

    original = (original_name or "").lower().strip()
    return not (original and original in candidate_name)


def _diet_allows(candidate: CatalogCandidate, diet: str) -> bool:
    if diet == "vegan":
        return "vegan" in candidate.diets
    if diet == "vegetarian":
        return "vegetarian" in candidate.diets or "vegan" in candidate.diets
    if diet == "pescatarian":
        return "seafood" in candidate.roles or any(
            item in candidate.diets for item in ("vegan", "vegetarian")
        )
    if diet == "dairy_free":
        return "dairy" not in candidate.allergens
    return True


def _reference(food: FoodMatch) -> FoodReference:
    return FoodReference(
        fdc_id=food.fdc_id,
        description=food.description,
        data_type=food.data_type,
        category=food.category,
    )
