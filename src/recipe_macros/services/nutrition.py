"""Nutrition reference lookups: search, match scoring and caching."""

import asyncio
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from functools import partial
from typing import TYPE_CHECKING

from recipe_macros.adapters.fdc_client import FdcClient
from recipe_macros.domain.nutrition import FoodMatch, FoodPortion, NutrientProfile
from recipe_macros.services.cache import BoundedTTLCache, Cache
from recipe_macros.services.density import normalize_description

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

DEFAULT_DATA_TYPES: tuple[str, ...] = ("Foundation", "SR Legacy")
FALLBACK_DATA_TYPES: tuple[str, ...] = ("Survey (FNDDS)",)

# Nutrient ids used by FDC, with legacy nutrient numbers as a fallback.
# Foundation foods often report energy only as Atwater factors (2047/2048).
_NUTRIENT_IDS: dict[str, tuple[tuple[int, ...], tuple[str, ...]]] = {
    "calories": ((1008, 2047, 2048), ("208", "957", "958")),
    "protein": ((1003,), ("203",)),
    "fat": ((1004,), ("204",)),
    "carbs": ((1005,), ("205",)),
    "fiber": ((1079,), ("291",)),
    "sodium": ((1093,), ("307",)),
    "sugars": ((2000,), ("269",)),
    "saturated_fat": ((1258,), ("606",)),
    "potassium": ((1092,), ("306",)),
    "cholesterol": ((1253,), ("601",)),
}

_DATA_TYPE_BONUS = {
    "Foundation": 16,
    "SR Legacy": 12,
    "Survey (FNDDS)": 8,
    "Branded": 4,
}

_PROCESSED_INDICATORS = (
    "canned", "frozen", "prepared", "breaded", "battered", "fried", "dried",
    "dehydrated", "powder", "sauce", "soup", "mix", "fast food", "fast foods",
    "restaurant", "babyfood", "baby food", "snack", "snacks", "sweetened",
    "salted", "smoked", "cured", "flavored", "imitation", "pickled", "sandwich",
    "pizza", "casserole", "stew", "entree", "meal", "nuggets", "patty", "frankfurter",
)  # fmt: skip
_MAX_PROCESSED_PENALTY = 36

_COOKED_QUERY_TERMS = (
    "cooked", "boiled", "steamed", "fried", "baked", "roasted", "grilled",
    "sauteed", "braised", "poached", "stewed",
)  # fmt: skip

# Items that legitimately carry no energy value.
_ZERO_ENERGY_TERMS = (
    "salt", "pepper", "water", "spice", "spices", "seasoning", "herb", "herbs",
    "vinegar", "extract", "baking soda", "baking powder", "tea", "coffee",
)  # fmt: skip

_STOPWORDS = frozenset({"and", "or", "with", "of", "the", "for", "in", "raw", "fresh"})

_PARENS = re.compile(r"\([^)]*\)")
_QUANTITY_UNIT = re.compile(
    r"\b\d+(?:[./]\d+)?\s*(?:g|gm|grams?|kg|mg|oz|ounces?|lbs?|pounds?|ml|l|"
    r"cups?|tbsps?|tablespoons?|tsps?|teaspoons?)\b",
    re.IGNORECASE,
)
_NON_ALNUM = re.compile(r"[^a-z0-9\s]+")
_LEADING_NUMBERS = re.compile(r"^(?:\d+(?:\s+|$))+")
_WHITESPACE = re.compile(r"\s+")


class NutritionConfigError(RuntimeError):
    """Raised when the nutrition reference service has no credential."""


@dataclass
class NutritionService:
    """Service for nutrition lookups with caching."""

    fdc_client: FdcClient
    search_cache: Cache = field(
        default_factory=lambda: BoundedTTLCache(max_entries=1000, ttl_seconds=3600)
    )
    food_cache: Cache = field(
        default_factory=lambda: BoundedTTLCache(max_entries=500, ttl_seconds=3600)
    )
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def is_configured(self) -> bool:
        """Return whether the reference service can be called."""
        return self.fdc_client.is_configured()

    def require_credentials(self) -> None:
        """Raise when the API key is missing."""
        if not self.is_configured():
            raise NutritionConfigError("FDC API key missing; cannot look up nutrition data.")

    async def search(
        self,
        query: str,
        data_types: Sequence[str] = DEFAULT_DATA_TYPES,
        page_size: int = 10,
    ) -> list[FoodMatch]:
        """Search FDC foods with caching and one simplified retry."""
        self.require_credentials()
        sanitized = sanitize_query(query)
        if not sanitized:
            return []
        cache_key = f"{sanitized}|{','.join(data_types)}|{page_size}"
        cached = self.search_cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        attempts = [sanitized]
        simplified = simplify_query(sanitized)
        if simplified and simplified != sanitized:
            attempts.append(simplified)

        foods: list[FoodMatch] = []
        errors: list[Exception] = []
        for attempt in attempts:
            try:
                payload = await self._call_with_retry(
                    partial(self.fdc_client.search_foods, attempt, tuple(data_types), page_size),
                    action=f"search:{attempt}",
                )
            except Exception as exc:
                errors.append(exc)
                continue
            foods = [parse_food(item) for item in _as_list(payload.get("foods"))]
            if foods:
                break
        if len(errors) == len(attempts):
            raise errors[-1]

        # A failed attempt with no results is not cached.
        if foods or not errors:
            self.search_cache.set(cache_key, foods)
        if self.debug:
            _logger.info("Nutrition search FDC: query=%s results=%s", sanitized, len(foods))
        return foods

    async def get_food(self, fdc_id: int) -> FoodMatch:
        """Retrieve food details with nutrients and portions."""
        self.require_credentials()
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.food_cache.get(cache_key)
        if isinstance(cached, FoodMatch):
            return cached

        payload = await self._call_with_retry(
            partial(self.fdc_client.get_food, fdc_id),
            action=f"get_food:{fdc_id}",
        )
        details = parse_food(payload)
        self.food_cache.set(cache_key, details)
        if self.debug:
            _logger.info("Nutrition food FDC: fdc_id=%s", fdc_id)
        return details

    async def find_food(
        self,
        name: str,
        queries: Sequence[str] = (),
        data_types: Sequence[str] = DEFAULT_DATA_TYPES,
        page_size: int = 10,
    ) -> FoodMatch | None:
        """Return the best-scoring food across all queries, with details.

        Per-query failures are logged and skipped. When nothing matches,
        the lower-quality survey tier is tried before giving up.
        """
        self.require_credentials()
        search_queries = [query for query in queries if query] or [name]
        tiers = [tuple(data_types)]
        if tuple(data_types) != FALLBACK_DATA_TYPES:
            tiers.append(FALLBACK_DATA_TYPES)

        best: FoodMatch | None = None
        best_score = -1.0
        for tier in tiers:
            for query in search_queries:
                try:
                    foods = await self.search(query, tier, page_size)
                except Exception as exc:
                    _logger.warning(
                        "Nutrition search failed for %r (status=%s): %s",
                        query,
                        _status_code_from_exception(exc),
                        exc,
                    )
                    continue
                for food in foods:
                    score = score_match(food, name, query)
                    if score > best_score:
                        best, best_score = food, score
            if best is not None:
                break

        if best is None:
            return None
        try:
            details = await self.get_food(best.fdc_id)
        except Exception as exc:
            _logger.warning(
                "Nutrition details failed for fdc_id=%s (status=%s): %s",
                best.fdc_id,
                _status_code_from_exception(exc),
                exc,
            )
            return replace(best, match_score=best_score)
        return replace(
            details,
            category=details.category or best.category,
            brand_owner=details.brand_owner or best.brand_owner,
            nutrients=details.nutrients if details.nutrients.has_energy else best.nutrients,
            match_score=best_score,
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def sanitize_query(query: str | None) -> str:
    """Strip quantities, units, percent signs, notes and punctuation."""
    cleaned = (query or "").lower()
    cleaned = _PARENS.sub(" ", cleaned)
    cleaned = _QUANTITY_UNIT.sub(" ", cleaned)
    cleaned = _NON_ALNUM.sub(" ", cleaned.replace("%", ""))
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return _LEADING_NUMBERS.sub("", cleaned).strip()


def simplify_query(query: str) -> str:
    """Keep only alphabetic words of three or more letters."""
    return " ".join(word for word in query.split() if len(word) >= 3 and word.isalpha())


def score_match(food: FoodMatch, original_query: str, search_query: str = "") -> float:  # noqa: PLR0912
    """Score how well a reference food matches an ingredient, from 0 to 100."""
    description = normalize_description(food.description)
    description_words = description.split()
    query_text = normalize_description(original_query) or normalize_description(search_query)
    query_words = set(query_text.split()) | set(normalize_description(search_query).split())
    significant = [
        word
        for word in query_text.split()
        if len(word) >= 3 and word.isalpha() and word not in _STOPWORDS
    ]

    score = 0.0
    if len(significant) == 1:
        word = significant[0]
        if _word_present(word, description_words):
            score += 50
            if description_words and _same_word(description_words[0], word):
                score += 10
    elif significant:
        present = [word for word in significant if _word_present(word, description_words)]
        if len(present) == len(significant):
            score += 60
            if " ".join(significant) in description:
                score += 20
        else:
            score -= 25 * (len(significant) - len(present))
            score += 10 * len(present)

    if description in {query_text, normalize_description(search_query)}:
        score += 40

    score += _DATA_TYPE_BONUS.get(food.data_type or "", 0)

    wants_cooked = any(term in query_words for term in _COOKED_QUERY_TERMS)
    if "raw" in description_words and "raw" not in query_words and not wants_cooked:
        score += 5

    query_blob = " ".join((query_text, normalize_description(search_query)))
    penalty = sum(
        12
        for indicator in _PROCESSED_INDICATORS
        if _phrase_present(indicator, description)
        and not _phrase_present(indicator, query_blob)
    )
    score -= min(penalty, _MAX_PROCESSED_PENALTY)

    if food.brand_owner:
        brand_words = set(normalize_description(food.brand_owner).split())
        if not brand_words & query_words:
            score -= 10

    if not food.nutrients.has_energy and not any(
        _phrase_present(term, query_text) for term in _ZERO_ENERGY_TERMS
    ):
        score -= 30

    return max(0.0, min(100.0, score))


def _same_word(candidate: str, word: str) -> bool:
    return candidate in {word, f"{word}s", f"{word}es"} or word in {
        f"{candidate}s",
        f"{candidate}es",
    }


def _word_present(word: str, description_words: Sequence[str]) -> bool:
    return any(_same_word(candidate, word) for candidate in description_words)


def _phrase_present(phrase: str, text: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text) is not None


def parse_food(payload: Mapping[str, object]) -> FoodMatch:
    """Build a food match from an FDC search hit or details payload."""
    category = payload.get("foodCategory")
    if isinstance(category, Mapping):
        category = category.get("description")
    return FoodMatch(
        fdc_id=int(payload["fdcId"]),
        description=str(payload.get("description") or ""),
        data_type=_as_str(payload.get("dataType")),
        nutrients=_extract_nutrients(_as_list(payload.get("foodNutrients"))),
        category=_as_str(category),
        brand_owner=_as_str(payload.get("brandOwner")),
        portions=_extract_portions(_as_list(payload.get("foodPortions"))),
    )


def _extract_nutrients(food_nutrients: list[object]) -> NutrientProfile:
    """Extract nutrient amounts per 100 g, keeping the preferred id for each."""
    found: dict[str, tuple[int, float]] = {}
    for nutrient in food_nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        nutrient_info = nutrient.get("nutrient") or {}
        if not isinstance(nutrient_info, Mapping):
            nutrient_info = {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        number = str(nutrient_info.get("number") or nutrient.get("nutrientNumber") or "")
        amount = nutrient.get("amount", nutrient.get("value"))
        if not isinstance(amount, int | float):
            continue
        for key, (ids, numbers) in _NUTRIENT_IDS.items():
            if nutrient_id in ids:
                rank = ids.index(nutrient_id)
            elif number and number in numbers:
                rank = numbers.index(number)
            else:
                continue
            if key not in found or rank < found[key][0]:
                found[key] = (rank, float(amount))
    return NutrientProfile(**{key: value for key, (_, value) in found.items()})


def _extract_portions(food_portions: list[object]) -> tuple[FoodPortion, ...]:
    portions: list[FoodPortion] = []
    for portion in food_portions:
        if not isinstance(portion, Mapping):
            continue
        gram_weight = portion.get("gramWeight")
        if not isinstance(gram_weight, int | float) or gram_weight <= 0:
            continue
        amount = portion.get("amount")
        measure_unit = portion.get("measureUnit")
        unit_name = measure_unit.get("name") if isinstance(measure_unit, Mapping) else None
        description = " ".join(
            str(part)
            for part in (
                portion.get("portionDescription"),
                portion.get("modifier"),
                unit_name if unit_name != "undetermined" else None,
            )
            if part
        )
        portions.append(
            FoodPortion(
                description=description,
                amount=float(amount) if isinstance(amount, int | float) else 1.0,
                gram_weight=float(gram_weight),
            )
        )
    return tuple(portions)


def _as_list(value: object) -> list[object]:
    return value if isinstance(value, list) else []


def _as_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
