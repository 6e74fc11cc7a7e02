"""Ingredient line parsing and search-query generation."""

import re
from collections.abc import Sequence

from recipe_macros.domain.ingredients import CookedState, ParsedIngredient
from recipe_macros.domain.recipes import Recipe, RecipeIngredient
from recipe_macros.tables.ingredients import (
    BRAND_PATTERNS,
    COOKED_INDICATORS,
    COOKING_METHODS,
    INGREDIENT_ALIASES,
    PAREN_PATTERNS,
    RAW_INDICATORS,
    STRIP_DESCRIPTORS,
    UNICODE_FRACTIONS,
    UNIT_ALIASES,
)

MAX_SEARCH_QUERIES = 5

_NUMBER = r"\d+(?:\.\d+)?"
_SIMPLE = rf"{_NUMBER}(?:/\d+)?"
_UNICODE = "".join(UNICODE_FRACTIONS)

# Order matters: longer forms must be tried before their prefixes.
_QUANTITY_PATTERNS = (
    re.compile(rf"^({_SIMPLE}\s*(?:-|–|to)\s*{_SIMPLE})(?![\d/])\s*"),
    re.compile(rf"^(\d+\s*[{_UNICODE}])\s*"),
    re.compile(rf"^([{_UNICODE}])\s*"),
    re.compile(r"^(\d+\s+\d+/\d+)\s*"),
    re.compile(r"^(\d+/\d+)\s*"),
    re.compile(rf"^({_NUMBER})\s*"),
)
_UNIT_TOKEN = re.compile(r"^(fl\.?\s*oz\.?|fluid\s+ounces?|[a-zA-Z]+\.?)(?=\s|$)\s*")
_RANGE_SPLIT = re.compile(r"\s*(?:-|–|\bto\b)\s*")
_REMAINING_PARENS = re.compile(r"\([^)]*\)")
_PUNCTUATION = re.compile(r"[,;:*!?\"]")
_WHITESPACE = re.compile(r"\s+")
_CANONICAL_UNITS = frozenset(UNIT_ALIASES.values())

_STRIP_WORDS = tuple(
    re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
    for word in (*COOKING_METHODS, *STRIP_DESCRIPTORS)
)
# Whole words only: "uncooked" is not "cooked" and "strawberries" is not "raw".
_COOKED_WORDS = re.compile(rf"\b(?:{'|'.join(map(re.escape, COOKED_INDICATORS))})\b")
_RAW_WORDS = re.compile(rf"\b(?:{'|'.join(map(re.escape, RAW_INDICATORS))})\b")


def parse_ingredient(text: str | None, steps: Sequence[str] = ()) -> ParsedIngredient:
    """Split an ingredient line into quantity, unit, canonical name and queries.

    Never raises: input without a leading quantity comes back with
    ``quantity=None`` and the whole line treated as the name.
    """
    original = (text or "").strip() if isinstance(text, str) else ""
    remaining = original
    quantity: float | None = None
    unit: str | None = None

    for pattern in _QUANTITY_PATTERNS:
        match = pattern.match(remaining)
        if match:
            quantity = parse_quantity_value(match.group(1))
            remaining = remaining[match.end() :].strip()
            break

    unit_match = _UNIT_TOKEN.match(remaining)
    if unit_match:
        candidate = normalize_unit(unit_match.group(1))
        if candidate in _CANONICAL_UNITS and _is_unit_token(
            unit_match.group(1), remaining[unit_match.end() :]
        ):
            unit = candidate
            remaining = remaining[unit_match.end() :].strip()

    name = clean_ingredient_name(remaining)
    return ParsedIngredient(
        original=original,
        quantity=quantity,
        unit=unit,
        name=name,
        search_queries=generate_search_queries(name),
        cooked_state=detect_cooked_state(original, steps),
    )


def _is_unit_token(token: str, rest: str) -> bool:
    # "2 large eggs" has a size unit, but "1 large" alone is a name.
    return bool(rest.strip()) or normalize_unit(token) not in {"large", "medium", "small"}


def normalize_unit(unit: str | None) -> str | None:
    """Map a unit spelling to its canonical token; unknown units pass through."""
    if unit is None:
        return None
    lower = _WHITESPACE.sub(" ", unit.lower().strip()).replace(".", "")
    if not lower:
        return None
    if lower.startswith("fl") and lower.endswith("oz"):
        return "fl oz"
    return UNIT_ALIASES.get(lower, lower)


def parse_quantity_value(raw: str | None) -> float | None:
    """Parse integers, decimals, fractions, mixed numbers and ranges."""
    if not raw:
        return None
    value = raw.strip()
    for glyph, fraction in UNICODE_FRACTIONS.items():
        if glyph in value:
            whole = value.replace(glyph, "").strip()
            base = float(whole) if whole.isdigit() else 0.0
            return base + fraction
    parts = [part for part in _RANGE_SPLIT.split(value) if part]
    if len(parts) == 2:
        low = parse_quantity_value(parts[0])
        high = parse_quantity_value(parts[1])
        if low is not None and high is not None:
            return (low + high) / 2
        return low
    pieces = value.split()
    if len(pieces) == 2 and "/" in pieces[1]:
        whole = parse_quantity_value(pieces[0])
        fraction = parse_quantity_value(pieces[1])
        if whole is None or fraction is None:
            return None
        return whole + fraction
    if "/" in value:
        numerator, _, denominator = value.partition("/")
        try:
            return int(numerator) / int(denominator)
        except (ValueError, ZeroDivisionError):
            return None
    try:
        return float(value)
    except ValueError:
        return None


def clean_ingredient_name(text: str) -> str:
    """Lowercase and strip brands, notes, preparation words and filler."""
    cleaned = text.lower()
    for pattern in (*BRAND_PATTERNS, *PAREN_PATTERNS):
        cleaned = pattern.sub("", cleaned)
    cleaned = _REMAINING_PARENS.sub(" ", cleaned)
    for pattern in _STRIP_WORDS:
        cleaned = pattern.sub("", cleaned)
    cleaned = _PUNCTUATION.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip(" -.")


def detect_cooked_state(text: str, steps: Sequence[str] = ()) -> CookedState:
    """Look for cooked then raw keywords in the line, then in the steps."""
    for source in (text, " ".join(steps)):
        lower = source.lower()
        if _COOKED_WORDS.search(lower):
            return "cooked"
        if _RAW_WORDS.search(lower):
            return "raw"
    return "unknown"


def generate_search_queries(name: str) -> tuple[str, ...]:
    """Build up to five reference-search queries, most specific first."""
    lower = name.lower().strip()
    if not lower:
        return ()
    queries: list[str] = []

    def _add(query: str) -> None:
        if query and query not in queries:
            queries.append(query)

    alias = INGREDIENT_ALIASES.get(lower)
    if alias:
        _add(alias)
    _add(lower)
    _add(f"{lower} raw")
    words = lower.split()
    if len(words) > 1:
        _add(" ".join(words[:-1]))
        if len(words[0]) >= 4:
            _add(words[0])
    return tuple(queries[:MAX_SEARCH_QUERIES])


def normalize_recipe_ingredients(recipe: Recipe) -> list[ParsedIngredient]:
    """Parse every recipe ingredient, using the steps for cooked-state hints."""
    parsed: list[ParsedIngredient] = []
    for ingredient in recipe.ingredients:
        if isinstance(ingredient, RecipeIngredient):
            text = ingredient.as_text()
        else:
            text = str(ingredient)
        parsed.append(parse_ingredient(text, recipe.steps))
    return parsed
