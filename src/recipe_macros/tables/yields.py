"""Cooked/raw yield factors and nutrient retention by cooking method.

A yield factor is cooked weight divided by raw weight: below 1 the food loses
water (meat, most vegetables), above 1 it absorbs water (grains, legumes).
"""

import re

YIELD_FACTORS: dict[str, dict[str, dict[str, float]]] = {
    "proteins": {
        "chicken breast": {
            "baked": 0.75, "grilled": 0.73, "fried": 0.70, "poached": 0.78,
            "boiled": 0.80, "default": 0.75,
        },
        "chicken thigh": {"baked": 0.72, "grilled": 0.70, "fried": 0.68, "default": 0.72},
        "chicken drumstick": {"baked": 0.75, "grilled": 0.73, "default": 0.75},
        "chicken wing": {"baked": 0.70, "fried": 0.65, "default": 0.70},
        "chicken whole": {"roasted": 0.72, "default": 0.72},
        "beef ground": {"pan_fried": 0.71, "grilled": 0.70, "baked": 0.73, "default": 0.71},
        "beef steak": {
            "rare": 0.88, "medium_rare": 0.85, "medium": 0.80, "well_done": 0.72,
            "default": 0.80,
        },
        "beef roast": {"roasted": 0.75, "braised": 0.70, "default": 0.75},
        "beef brisket": {"smoked": 0.55, "braised": 0.65, "default": 0.60},
        "pork chop": {"grilled": 0.75, "pan_fried": 0.73, "baked": 0.77, "default": 0.75},
        "pork tenderloin": {"roasted": 0.75, "grilled": 0.73, "default": 0.75},
        "pork shoulder": {"slow_cooked": 0.60, "braised": 0.65, "default": 0.62},
        "bacon": {"pan_fried": 0.30, "baked": 0.35, "microwaved": 0.32, "default": 0.30},
        "sausage": {"pan_fried": 0.75, "grilled": 0.73, "default": 0.75},
        "turkey breast": {"roasted": 0.75, "grilled": 0.73, "default": 0.75},
        "turkey ground": {"pan_fried": 0.72, "default": 0.72},
        "salmon": {
            "baked": 0.80, "grilled": 0.78, "poached": 0.85, "pan_seared": 0.77,
            "default": 0.80,
        },
        # canned tuna is already cooked
        "tuna": {"seared": 0.85, "baked": 0.78, "canned": 1.0, "default": 0.80},
        "tilapia": {"baked": 0.80, "pan_fried": 0.77, "default": 0.80},
        "cod": {"baked": 0.82, "poached": 0.85, "default": 0.82},
        "halibut": {"baked": 0.80, "grilled": 0.78, "default": 0.80},
        "shrimp": {"boiled": 0.77, "sauteed": 0.75, "grilled": 0.73, "default": 0.75},
        "scallops": {"seared": 0.75, "default": 0.75},
        "tofu": {"pan_fried": 0.85, "baked": 0.80, "pressed_fried": 0.70, "default": 0.85},
        "tempeh": {"pan_fried": 0.90, "baked": 0.88, "default": 0.90},
        "egg": {
            "scrambled": 0.90, "fried": 0.88, "boiled": 0.95, "poached": 0.95,
            "default": 0.92,
        },
    },
    "grains": {
        "rice white": {"boiled": 3.0, "steamed": 2.8, "default": 3.0},
        "rice brown": {"boiled": 2.5, "default": 2.5},
        "rice basmati": {"boiled": 3.0, "default": 3.0},
        "rice jasmine": {"boiled": 2.8, "default": 2.8},
        "pasta": {"boiled": 2.25, "default": 2.25},
        "spaghetti": {"boiled": 2.25, "default": 2.25},
        "penne": {"boiled": 2.1, "default": 2.1},
        "macaroni": {"boiled": 2.0, "default": 2.0},
        "noodles egg": {"boiled": 2.0, "default": 2.0},
        "quinoa": {"boiled": 3.0, "default": 3.0},
        "couscous": {"steamed": 2.5, "default": 2.5},
        "oatmeal": {"cooked": 4.0, "default": 4.0},
        "oats": {"cooked": 4.0, "default": 4.0},
        "barley": {"boiled": 3.5, "default": 3.5},
        "bulgur": {"soaked": 2.5, "default": 2.5},
        "farro": {"boiled": 2.5, "default": 2.5},
        "polenta": {"cooked": 4.0, "default": 4.0},
    },
    "legumes": {
        "beans black": {"boiled": 2.3, "default": 2.3},
        "beans kidney": {"boiled": 2.2, "default": 2.2},
        "beans pinto": {"boiled": 2.3, "default": 2.3},
        "beans white": {"boiled": 2.2, "default": 2.2},
        "chickpeas": {"boiled": 2.0, "default": 2.0},
        "lentils": {"boiled": 2.5, "default": 2.5},
        "split peas": {"boiled": 2.4, "default": 2.4},
    },
    "vegetables": {
        "spinach": {"sauteed": 0.23, "steamed": 0.25, "boiled": 0.20, "default": 0.23},
        "kale": {"sauteed": 0.35, "steamed": 0.40, "default": 0.35},
        "broccoli": {"steamed": 0.90, "boiled": 0.88, "roasted": 0.80, "default": 0.90},
        "cauliflower": {"steamed": 0.92, "roasted": 0.78, "default": 0.90},
        "carrots": {"boiled": 0.90, "roasted": 0.75, "steamed": 0.92, "default": 0.90},
        "onions": {"sauteed": 0.65, "caramelized": 0.40, "roasted": 0.60, "default": 0.65},
        "mushrooms": {"sauteed": 0.50, "roasted": 0.55, "default": 0.50},
        "zucchini": {"sauteed": 0.85, "grilled": 0.80, "roasted": 0.75, "default": 0.85},
        "bell peppers": {"sauteed": 0.85, "roasted": 0.70, "grilled": 0.75, "default": 0.80},
        "tomatoes": {"roasted": 0.70, "sauteed": 0.80, "default": 0.75},
        "asparagus": {"grilled": 0.85, "roasted": 0.80, "steamed": 0.92, "default": 0.85},
        "green beans": {"steamed": 0.90, "boiled": 0.88, "sauteed": 0.85, "default": 0.90},
        "cabbage": {"sauteed": 0.70, "steamed": 0.85, "default": 0.75},
        "brussels sprouts": {"roasted": 0.75, "steamed": 0.90, "default": 0.80},
        # mashed potatoes gain water or milk
        "potatoes": {
            "boiled": 0.95, "baked": 0.90, "roasted": 0.85, "mashed": 1.1,
            "fried": 0.65, "default": 0.90,
        },
        "sweet potatoes": {"baked": 0.88, "boiled": 0.95, "roasted": 0.82, "default": 0.88},
        "corn": {"boiled": 0.95, "grilled": 0.90, "default": 0.95},
        "eggplant": {"grilled": 0.70, "roasted": 0.65, "sauteed": 0.75, "default": 0.70},
    },
}  # fmt: skip

VITAMIN_RETENTION: dict[str, dict[str, float]] = {
    "boiled": {
        "vitamin_c": 0.50, "vitamin_b1": 0.70, "vitamin_b2": 0.80,
        "vitamin_b6": 0.70, "folate": 0.50, "vitamin_a": 0.90,
    },
    "steamed": {
        "vitamin_c": 0.70, "vitamin_b1": 0.85, "vitamin_b2": 0.90,
        "vitamin_b6": 0.85, "folate": 0.75, "vitamin_a": 0.95,
    },
    "microwaved": {
        "vitamin_c": 0.80, "vitamin_b1": 0.90, "vitamin_b2": 0.95,
        "vitamin_b6": 0.90, "folate": 0.85, "vitamin_a": 0.98,
    },
    "sauteed": {
        "vitamin_c": 0.65, "vitamin_b1": 0.80, "vitamin_b2": 0.85,
        "vitamin_b6": 0.80, "folate": 0.70, "vitamin_a": 0.95,
    },
    "roasted": {
        "vitamin_c": 0.55, "vitamin_b1": 0.75, "vitamin_b2": 0.85,
        "vitamin_b6": 0.75, "folate": 0.60, "vitamin_a": 0.90,
    },
    "grilled": {
        "vitamin_c": 0.50, "vitamin_b1": 0.75, "vitamin_b2": 0.85,
        "vitamin_b6": 0.75, "folate": 0.55, "vitamin_a": 0.90,
    },
    "fried": {
        "vitamin_c": 0.45, "vitamin_b1": 0.70, "vitamin_b2": 0.80,
        "vitamin_b6": 0.70, "folate": 0.50, "vitamin_a": 0.85,
    },
    "raw": {
        "vitamin_c": 1.0, "vitamin_b1": 1.0, "vitamin_b2": 1.0,
        "vitamin_b6": 1.0, "folate": 1.0, "vitamin_a": 1.0,
    },
}  # fmt: skip

# Fat above 1.0 means cooking oil was absorbed.
MACRO_RETENTION: dict[str, dict[str, float]] = {
    "boiled": {"protein": 0.98, "fat": 0.95, "carbs": 0.98},
    "steamed": {"protein": 0.99, "fat": 0.98, "carbs": 0.99},
    "sauteed": {"protein": 0.98, "fat": 1.0, "carbs": 0.98},
    "roasted": {"protein": 0.97, "fat": 0.90, "carbs": 0.97},
    "grilled": {"protein": 0.97, "fat": 0.85, "carbs": 0.97},
    "fried": {"protein": 0.96, "fat": 1.15, "carbs": 0.96},
    "raw": {"protein": 1.0, "fat": 1.0, "carbs": 1.0},
}

# Checked in order; the first match wins.
COOKING_METHOD_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), method)
    for pattern, method in (
        (r"\b(baked?|baking)\b", "baked"),
        (r"\b(roasted?|roasting)\b", "roasted"),
        (r"\b(grilled?|grilling)\b", "grilled"),
        (r"\b(deep[- ]?fried)\b", "fried"),
        (r"\b(fried|frying|pan[- ]?fried)\b", "pan_fried"),
        (r"\b(sauteed?|sautéed?|sauteing)\b", "sauteed"),
        (r"\b(boiled?|boiling)\b", "boiled"),
        (r"\b(steamed?|steaming)\b", "steamed"),
        (r"\b(poached?|poaching)\b", "poached"),
        (r"\b(braised?|braising)\b", "braised"),
        (r"\b(smoked?|smoking)\b", "smoked"),
        (r"\b(slow[- ]?cooked?|slow[- ]?cooking)\b", "slow_cooked"),
        (r"\b(microwaved?)\b", "microwaved"),
        (r"\b(seared?|searing)\b", "seared"),
        (r"\b(caramelized?)\b", "caramelized"),
        (r"\b(raw|uncooked|fresh)\b", "raw"),
    )
)

RAW_CONTEXT_INDICATORS: tuple[str, ...] = (
    "salad",
    "garnish",
    "topping",
    "serving",
    "dressing",
)
