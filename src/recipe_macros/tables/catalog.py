"""Curated swap catalog keyed by culinary role."""

from recipe_macros.domain.substitutions import CatalogCandidate

_VEGAN = ("vegan", "vegetarian")
_VEGETARIAN = ("vegetarian",)

SUBSTITUTION_CATALOG: tuple[CatalogCandidate, ...] = (
    # poultry and lean protein
    CatalogCandidate(
        id="chicken_breast_skinless",
        name="Skinless chicken breast",
        roles=("poultry", "lean_protein", "red_meat", "pork"),
        fdc_queries=("chicken broiler breast meat only raw", "chicken breast raw"),
        taste_score=4, texture_score=4, commonness=5,
    ),
    CatalogCandidate(
        id="turkey_breast",
        name="Turkey breast",
        roles=("poultry", "lean_protein", "pork"),
        fdc_queries=("turkey breast meat only raw", "turkey breast raw"),
        taste_score=4, texture_score=4, commonness=4,
    ),
    CatalogCandidate(
        id="chicken_thigh_skinless",
        name="Skinless chicken thigh",
        roles=("poultry", "red_meat"),
        fdc_queries=("chicken broiler thigh meat only raw", "chicken thigh raw"),
        taste_score=5, texture_score=4, commonness=5,
    ),
    CatalogCandidate(
        id="ground_turkey_93",
        name="93% lean ground turkey",
        roles=("lean_ground", "red_meat", "poultry"),
        fdc_queries=("turkey ground 93% lean 7% fat raw", "ground turkey raw"),
        taste_score=3, texture_score=4, commonness=4,
    ),
    CatalogCandidate(
        id="ground_chicken",
        name="Ground chicken",
        roles=("lean_ground", "poultry"),
        fdc_queries=("chicken ground raw",),
        taste_score=3, texture_score=3, commonness=3,
    ),
    # red meat and pork
    CatalogCandidate(
        id="lean_ground_beef_95",
        name="95% lean ground beef",
        roles=("lean_ground", "red_meat"),
        fdc_queries=("beef ground 95% lean meat 5% fat raw", "ground beef 95% lean raw"),
        taste_score=4, texture_score=4, commonness=4,
    ),
    CatalogCandidate(
        id="ground_beef_80",
        name="80% lean ground beef",
        roles=("red_meat", "lean_ground"),
        fdc_queries=("beef ground 80% lean meat 20% fat raw",),
        taste_score=5, texture_score=5, commonness=5,
        notes="Higher fat; suits bulking more than cutting.",
    ),
    CatalogCandidate(
        id="beef_sirloin",
        name="Top sirloin steak",
        roles=("red_meat", "lean_protein"),
        fdc_queries=("beef top sirloin steak separable lean only raw", "beef sirloin raw"),
        taste_score=5, texture_score=4, commonness=4,
    ),
    CatalogCandidate(
        id="bison_ground",
        name="Ground bison",
        roles=("red_meat", "lean_ground"),
        fdc_queries=("bison ground raw", "game meat bison ground raw"),
        taste_score=4, texture_score=4, commonness=2,
    ),
    CatalogCandidate(
        id="pork_tenderloin",
        name="Pork tenderloin",
        roles=("pork", "lean_protein", "red_meat"),
        fdc_queries=("pork fresh tenderloin separable lean only raw", "pork tenderloin raw"),
        taste_score=4, texture_score=4, commonness=4,
    ),
    CatalogCandidate(
        id="turkey_bacon",
        name="Turkey bacon",
        roles=("pork",),
        fdc_queries=("turkey bacon unprepared", "bacon turkey"),
        taste_score=3, texture_score=3, commonness=3,
        notes="Still high in sodium.",
    ),
    # seafood
    CatalogCandidate(
        id="cod",
        name="Atlantic cod",
        roles=("seafood", "lean_protein"),
        fdc_queries=("fish cod atlantic raw",),
        taste_score=3, texture_score=4, commonness=4,
        allergens=("fish",), diets=("pescatarian",),
    ),
    CatalogCandidate(
        id="salmon",
        name="Salmon fillet",
        roles=("seafood",),
        fdc_queries=("fish salmon atlantic farmed raw", "salmon raw"),
        taste_score=5, texture_score=4, commonness=4,
        allergens=("fish",), diets=("pescatarian",),
    ),
    CatalogCandidate(
        id="tuna_canned_water",
        name="Tuna canned in water",
        roles=("seafood", "lean_protein"),
        fdc_queries=("fish tuna light canned in water drained solids",),
        taste_score=3, texture_score=3, commonness=5,
        allergens=("fish",), diets=("pescatarian",),
    ),
    CatalogCandidate(
        id="shrimp",
        name="Shrimp",
        roles=("seafood", "lean_protein", "poultry"),
        fdc_queries=("crustaceans shrimp raw", "shrimp raw"),
        taste_score=4, texture_score=4, commonness=4,
        allergens=("shellfish",), diets=("pescatarian",),
    ),
    # plant protein
    CatalogCandidate(
        id="tofu_firm",
        name="Firm tofu",
        roles=("plant_protein", "lean_protein", "poultry"),
        fdc_queries=("tofu raw firm prepared with calcium sulfate", "tofu firm"),
        taste_score=3, texture_score=3, commonness=4,
        allergens=("soy",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="tempeh",
        name="Tempeh",
        roles=("plant_protein", "lean_ground"),
        fdc_queries=("tempeh",),
        taste_score=3, texture_score=3, commonness=3,
        allergens=("soy",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="seitan",
        name="Seitan",
        roles=("plant_protein", "lean_protein"),
        fdc_queries=("wheat gluten vital", "seitan"),
        taste_score=3, texture_score=4, commonness=2,
        allergens=("gluten",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="lentils",
        name="Lentils",
        roles=("plant_protein", "lean_ground", "carb_base"),
        fdc_queries=("lentils mature seeds cooked boiled without salt", "lentils cooked"),
        taste_score=3, texture_score=3, commonness=4,
        allergens=("legume",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="black_beans",
        name="Black beans",
        roles=("plant_protein", "carb_base"),
        fdc_queries=("beans black mature seeds cooked boiled without salt",),
        taste_score=4, texture_score=3, commonness=4,
        allergens=("legume",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="chickpeas",
        name="Chickpeas",
        roles=("plant_protein",),
        fdc_queries=("chickpeas garbanzo beans bengal gram mature seeds cooked boiled without salt",),
        taste_score=4, texture_score=3, commonness=4,
        allergens=("legume",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="edamame",
        name="Edamame",
        roles=("plant_protein",),
        fdc_queries=("edamame frozen unprepared", "edamame"),
        taste_score=4, texture_score=3, commonness=3,
        allergens=("soy", "legume"), diets=_VEGAN,
    ),
    # fats and oils
    CatalogCandidate(
        id="olive_oil",
        name="Olive oil",
        roles=("fat_oil",),
        fdc_queries=("oil olive salad or cooking",),
        taste_score=4, texture_score=4, commonness=5,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="avocado_oil",
        name="Avocado oil",
        roles=("fat_oil",),
        fdc_queries=("oil avocado",),
        taste_score=4, texture_score=4, commonness=3,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="cooking_spray",
        name="Cooking spray",
        roles=("fat_oil",),
        fdc_queries=("oil cooking spray canola", "cooking spray"),
        taste_score=3, texture_score=3, commonness=4,
        diets=_VEGAN, gram_ratio=0.2,
        notes="Use a light coating; swap weight is a fraction of the original fat.",
    ),
    CatalogCandidate(
        id="light_butter",
        name="Light butter",
        roles=("fat_oil",),
        fdc_queries=("butter light stick without salt", "butter light"),
        taste_score=4, texture_score=3, commonness=3,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="mashed_avocado",
        name="Mashed avocado",
        roles=("fat_oil", "creamy_dairy"),
        fdc_queries=("avocados raw all commercial varieties",),
        taste_score=4, texture_score=4, commonness=4,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="peanut_butter",
        name="Peanut butter",
        roles=("fat_oil",),
        fdc_queries=("peanut butter smooth style without salt",),
        taste_score=5, texture_score=4, commonness=5,
        allergens=("peanut", "legume"), diets=_VEGAN, gram_ratio=0.75,
        notes="Calorie dense; good for bulking.",
    ),
    # creamy dairy and cheese
    CatalogCandidate(
        id="greek_yogurt_nonfat",
        name="Nonfat Greek yogurt",
        roles=("creamy_dairy", "fat_oil"),
        fdc_queries=("yogurt greek plain nonfat",),
        taste_score=4, texture_score=4, commonness=5,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="skim_milk",
        name="Skim milk",
        roles=("creamy_dairy",),
        fdc_queries=("milk nonfat fluid with added vitamin a and vitamin d", "milk skim"),
        taste_score=3, texture_score=3, commonness=5,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="whole_milk",
        name="Whole milk",
        roles=("creamy_dairy",),
        fdc_queries=("milk whole 3.25% milkfat with added vitamin d",),
        taste_score=5, texture_score=4, commonness=5,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="unsweetened_almond_milk",
        name="Unsweetened almond milk",
        roles=("creamy_dairy",),
        fdc_queries=("beverages almond milk unsweetened shelf stable",),
        taste_score=3, texture_score=3, commonness=4,
        allergens=("tree_nut",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="light_coconut_milk",
        name="Light coconut milk",
        roles=("creamy_dairy",),
        fdc_queries=("coconut milk canned light", "nuts coconut milk canned"),
        taste_score=4, texture_score=3, commonness=3,
        allergens=("tree_nut",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="cottage_cheese_lowfat",
        name="Low-fat cottage cheese",
        roles=("creamy_dairy", "cheese"),
        fdc_queries=("cheese cottage lowfat 1% milkfat",),
        taste_score=3, texture_score=3, commonness=4,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="part_skim_mozzarella",
        name="Part-skim mozzarella",
        roles=("cheese",),
        fdc_queries=("cheese mozzarella part skim milk",),
        taste_score=4, texture_score=4, commonness=5,
        allergens=("dairy",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="parmesan",
        name="Parmesan",
        roles=("cheese",),
        fdc_queries=("cheese parmesan hard",),
        taste_score=5, texture_score=4, commonness=4,
        allergens=("dairy",), diets=_VEGETARIAN, gram_ratio=0.5,
        notes="Stronger flavor; use about half the weight.",
    ),
    CatalogCandidate(
        id="nutritional_yeast",
        name="Nutritional yeast",
        roles=("cheese",),
        fdc_queries=("leavening agents yeast bakers active dry", "nutritional yeast"),
        taste_score=3, texture_score=2, commonness=2,
        diets=_VEGAN, gram_ratio=0.3,
    ),
    # binders
    CatalogCandidate(
        id="egg_whites",
        name="Egg whites",
        roles=("binder", "lean_protein"),
        fdc_queries=("egg white raw fresh",),
        taste_score=3, texture_score=3, commonness=5,
        allergens=("egg",), diets=_VEGETARIAN,
    ),
    CatalogCandidate(
        id="flax_egg",
        name="Flax egg",
        roles=("binder",),
        fdc_queries=("seeds flaxseed",),
        taste_score=3, texture_score=2, commonness=2,
        diets=_VEGAN, gram_ratio=0.2,
        notes="Mix ground flax with water before use.",
    ),
    CatalogCandidate(
        id="unsweetened_applesauce",
        name="Unsweetened applesauce",
        roles=("binder", "fat_oil"),
        fdc_queries=("applesauce canned unsweetened without added ascorbic acid",),
        taste_score=3, texture_score=3, commonness=4,
        diets=_VEGAN,
        notes="Best in baking.",
    ),
    # carb bases
    CatalogCandidate(
        id="brown_rice",
        name="Brown rice",
        roles=("carb_base",),
        fdc_queries=("rice brown long-grain cooked",),
        taste_score=4, texture_score=3, commonness=5,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="quinoa",
        name="Quinoa",
        roles=("carb_base",),
        fdc_queries=("quinoa cooked",),
        taste_score=4, texture_score=3, commonness=4,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="whole_wheat_pasta",
        name="Whole wheat pasta",
        roles=("carb_base",),
        fdc_queries=("pasta whole-wheat cooked",),
        taste_score=3, texture_score=3, commonness=4,
        allergens=("gluten",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="chickpea_pasta",
        name="Chickpea pasta",
        roles=("carb_base",),
        fdc_queries=("pasta chickpea", "chickpea flour besan"),
        taste_score=3, texture_score=3, commonness=3,
        allergens=("legume",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="potatoes",
        name="Potatoes",
        roles=("carb_base",),
        fdc_queries=("potatoes flesh and skin raw",),
        taste_score=4, texture_score=4, commonness=5,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="oats_rolled",
        name="Rolled oats",
        roles=("carb_base", "bread_wrap"),
        fdc_queries=("oats", "cereals oats regular and quick not fortified dry"),
        taste_score=4, texture_score=3, commonness=5,
        allergens=("gluten_optional",), diets=_VEGAN,
        notes="Choose certified gluten-free oats if needed.",
    ),
    # low-carb bases
    CatalogCandidate(
        id="cauliflower_rice",
        name="Cauliflower rice",
        roles=("carb_base", "low_carb_base"),
        fdc_queries=("cauliflower raw",),
        taste_score=3, texture_score=3, commonness=4,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="zucchini_noodles",
        name="Zucchini noodles",
        roles=("carb_base", "low_carb_base"),
        fdc_queries=("squash summer zucchini includes skin raw",),
        taste_score=3, texture_score=2, commonness=3,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="shirataki_noodles",
        name="Shirataki noodles",
        roles=("carb_base", "low_carb_base"),
        fdc_queries=("shirataki noodles", "konjac"),
        taste_score=2, texture_score=2, commonness=2,
        diets=_VEGAN,
    ),
    # breads and wraps
    CatalogCandidate(
        id="whole_wheat_tortilla",
        name="Whole wheat tortilla",
        roles=("bread_wrap",),
        fdc_queries=("tortillas ready-to-bake or -fry whole wheat", "tortilla whole wheat"),
        taste_score=4, texture_score=4, commonness=4,
        allergens=("gluten",), diets=_VEGAN,
    ),
    CatalogCandidate(
        id="corn_tortilla",
        name="Corn tortilla",
        roles=("bread_wrap",),
        fdc_queries=("tortillas ready-to-bake or -fry corn",),
        taste_score=4, texture_score=3, commonness=4,
        diets=_VEGAN,
    ),
    CatalogCandidate(
        id="lettuce_wrap",
        name="Lettuce wrap",
        roles=("bread_wrap", "low_carb_base"),
        fdc_queries=("lettuce cos or romaine raw",),
        taste_score=3, texture_score=2, commonness=4,
        diets=_VEGAN, gram_ratio=0.5,
    ),
    CatalogCandidate(
        id="whole_grain_bread",
        name="Whole grain bread",
        roles=("bread_wrap",),
        fdc_queries=("bread whole-wheat commercially prepared",),
        taste_score=4, texture_score=4, commonness=5,
        allergens=("gluten",), diets=_VEGAN,
    ),
)  # fmt: skip

# Whole-word ingredient name keywords per role; plural forms also match.
ROLE_NAME_KEYWORDS: dict[str, tuple[str, ...]] = {
    "poultry": ("chicken", "turkey"),
    "red_meat": ("beef",),
    "pork": ("pork",),
    "seafood": ("shrimp",),
    "plant_protein": ("tofu", "tempeh", "bean", "lentil"),
    "fat_oil": ("oil", "butter", "ghee", "avocado"),
    "creamy_dairy": ("cheese", "milk", "yogurt", "cream"),
    "cheese": ("cheese",),
    "binder": ("egg",),
    "carb_base": ("rice", "pasta", "noodle", "quinoa", "oats"),
    "bread_wrap": ("tortilla", "bread"),
    "low_carb_base": ("cauliflower", "zucchini"),
    "lean_ground": ("ground",),
}


def candidates_for_roles(roles: tuple[str, ...] | list[str]) -> list[CatalogCandidate]:
    """Return catalog entries that fill any of the roles, in catalog order."""
    wanted = set(roles)
    return [
        candidate
        for candidate in SUBSTITUTION_CATALOG
        if wanted.intersection(candidate.roles)
    ]
