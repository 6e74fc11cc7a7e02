"""Allergen synonyms and medical-condition keyword tables."""

# Ingredient names matching one of these on word boundaries never get swaps.
SKIP_SUBSTITUTION_KEYWORDS: tuple[str, ...] = (
    "salt",
    "black pepper",
    "white pepper",
    "water",
    "vanilla",
    "baking powder",
    "baking soda",
    "yeast",
    "spice",
    "spices",
    "seasoning",
)

# A name that is exactly one of these is also skipped ("pepper" alone is a spice).
SKIP_SUBSTITUTION_EXACT: frozenset[str] = frozenset({"pepper", "ground pepper"})

NEGLIGIBLE_CALORIES = 5.0

ALLERGEN_SYNONYMS: dict[str, tuple[str, ...]] = {
    "milk": ("dairy",),
    "lactose": ("dairy",),
    "eggs": ("egg",),
    "wheat": ("gluten",),
    "nuts": ("tree_nut", "peanut"),
    "peanuts": ("peanut",),
    "tree nuts": ("tree_nut",),
    "tree nut": ("tree_nut",),
    "soybean": ("soy",),
    "soybeans": ("soy",),
    "shellfish": ("shellfish",),
    "crustacean": ("shellfish",),
}

# Candidate names containing any of these are filtered for the condition.
CANDIDATE_CONDITION_DENYLISTS: dict[str, tuple[str, ...]] = {
    "celiac": ("flour", "wheat", "barley", "rye", "malt", "bread", "panko"),
    "diabetes": ("sugar", "syrup", "honey", "sweetened"),
    "hypertension": (
        "soy sauce", "salt", "bacon", "sausage", "ham", "broth", "bouillon", "cured",
    ),
    "high_cholesterol": (
        "butter", "cream", "cheese", "bacon", "sausage", "ribeye", "short rib",
        "pork belly", "lard", "ghee",
    ),
    "kidney": (
        "soy sauce", "salt", "broth", "spinach", "tomato", "potato", "beans",
        "lentil", "avocado",
    ),
}  # fmt: skip

CONDITION_LABELS: dict[str, str] = {
    "celiac": "Celiac / gluten-free",
    "diabetes": "Diabetes / blood sugar",
    "hypertension": "Hypertension",
    "high_cholesterol": "High cholesterol",
    "kidney": "Kidney-friendly",
}

# Recipe-level keyword rules: keywords, message, suggestion.
RECIPE_CONDITION_RULES: dict[str, tuple[tuple[str, ...], str, str]] = {
    "celiac": (
        (
            "flour", "wheat", "barley", "rye", "malt", "breadcrumb", "panko",
            "soy sauce", "beer",
        ),
        "Gluten sources detected. Use gluten-free flour blends, cornstarch, "
        "or tamari/aminos instead.",
        "Swap breading for cornmeal/rice crumbs; use gluten-free soy sauce "
        "or coconut aminos.",
    ),
    "diabetes": (
        (
            "sugar", "brown sugar", "honey", "syrup", "sweetened", "condensed milk",
            "white rice", "white bread", "flour tortilla", "pasta",
        ),
        "Recipe is carb-heavy or contains added sugars. Favor fiber-rich carbs "
        "and portion control.",
        "Swap to whole grains, add non-starchy veggies, and reduce sweeteners.",
    ),
    "hypertension": (
        (
            "salt", "soy sauce", "tamari", "fish sauce", "broth", "bouillon", "bacon",
            "sausage", "ham", "cured", "pickled", "canned",
        ),
        "Potentially high-sodium ingredients found. Use low-sodium swaps and "
        "watch added salt.",
        "Use low-sodium broth/soy sauce, drain canned items, and finish with "
        "herbs/citrus instead of salt.",
    ),
    "high_cholesterol": (
        (
            "butter", "heavy cream", "cream cheese", "cheddar", "mozzarella",
            "whole milk", "bacon", "sausage", "ribeye", "short rib", "pork belly",
            "lard", "ghee", "egg yolk",
        ),
        "High saturated fat items present. Lean proteins and plant oils are "
        "safer defaults.",
        "Swap butter/cream for olive oil or Greek yogurt; choose lean poultry "
        "or fish over fatty cuts.",
    ),
    "kidney": (
        (
            "soy sauce", "salt", "broth", "spinach", "tomato", "potato", "beans",
            "lentil", "avocado", "banana", "dark greens",
        ),
        "Recipe may be high in sodium, potassium, or protein. Adjust portions "
        "and choose gentle seasonings.",
        "Use herbs/acid instead of salty sauces, and balance protein portions "
        "with lower-potassium sides.",
    ),
}  # fmt: skip

DIABETES_CARB_LIMIT = 70.0
KIDNEY_PROTEIN_LIMIT = 45.0
