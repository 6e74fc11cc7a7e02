"""Household-measure gram weights by ingredient.

Values are grams per US cup, tablespoon and teaspoon, with optional count
weights (per clove, per egg size, per whole item). Keys use the word order of
the reference database descriptions ("oil olive", "rice white") so that
reference descriptions can be matched against the table directly.
"""

import re

from recipe_macros.domain.ingredients import DensityMatch


def _volume(
    cup: float, tbsp: float, tsp: float, category: str, **counts: float
) -> DensityMatch:
    return DensityMatch(
        match_type="table", cup=cup, tbsp=tbsp, tsp=tsp, category=category, **counts
    )


def _count(category: str, **counts: float) -> DensityMatch:
    return DensityMatch(match_type="table", category=category, **counts)


DENSITY_DATA: dict[str, DensityMatch] = {
    # flours & baking
    "flour all purpose": _volume(125, 7.8, 2.6, "flour"),
    "flour bread": _volume(127, 7.9, 2.6, "flour"),
    "flour whole wheat": _volume(120, 7.5, 2.5, "flour"),
    "flour cake": _volume(114, 7.1, 2.4, "flour"),
    "flour pastry": _volume(106, 6.6, 2.2, "flour"),
    "flour almond": _volume(96, 6, 2, "flour"),
    "flour coconut": _volume(112, 7, 2.3, "flour"),
    "flour rice": _volume(158, 9.9, 3.3, "flour"),
    "cornstarch": _volume(128, 8, 2.7, "flour"),
    "corn starch": _volume(128, 8, 2.7, "flour"),
    "cornmeal": _volume(157, 9.8, 3.3, "flour"),
    # sugars & sweeteners
    "sugar granulated": _volume(200, 12.5, 4.2, "sugar"),
    "sugar white": _volume(200, 12.5, 4.2, "sugar"),
    "sugar brown": _volume(220, 13.8, 4.6, "sugar"),
    "sugar brown packed": _volume(220, 13.8, 4.6, "sugar"),
    "sugar powdered": _volume(120, 7.5, 2.5, "sugar"),
    "sugar confectioners": _volume(120, 7.5, 2.5, "sugar"),
    "honey": _volume(340, 21, 7, "sweetener"),
    "maple syrup": _volume(322, 20, 6.7, "sweetener"),
    "syrups maple": _volume(322, 20, 6.7, "sweetener"),
    "molasses": _volume(328, 20.5, 6.8, "sweetener"),
    "corn syrup": _volume(328, 20.5, 6.8, "sweetener"),
    "agave": _volume(336, 21, 7, "sweetener"),
    "agave nectar": _volume(336, 21, 7, "sweetener"),
    # oils & fats
    "oil olive": _volume(216, 13.5, 4.5, "oil"),
    "oil olive extra virgin": _volume(216, 13.5, 4.5, "oil"),
    "oil vegetable": _volume(218, 13.6, 4.5, "oil"),
    "oil canola": _volume(218, 13.6, 4.5, "oil"),
    "oil coconut": _volume(218, 13.6, 4.5, "oil"),
    "oil sesame": _volume(218, 13.6, 4.5, "oil"),
    "oil avocado": _volume(218, 13.6, 4.5, "oil"),
    "oil peanut": _volume(216, 13.5, 4.5, "oil"),
    "butter salted": _volume(227, 14.2, 4.7, "fat"),
    "butter unsalted": _volume(227, 14.2, 4.7, "fat"),
    "butter": _volume(227, 14.2, 4.7, "fat"),
    "margarine": _volume(227, 14.2, 4.7, "fat"),
    "shortening": _volume(205, 12.8, 4.3, "fat"),
    "lard": _volume(205, 12.8, 4.3, "fat"),
    "coconut oil": _volume(218, 13.6, 4.5, "oil"),
    # dairy
    "milk whole": _volume(244, 15.3, 5.1, "dairy"),
    "milk": _volume(244, 15.3, 5.1, "dairy"),
    "milk skim": _volume(245, 15.3, 5.1, "dairy"),
    "milk nonfat": _volume(245, 15.3, 5.1, "dairy"),
    "milk 2%": _volume(244, 15.3, 5.1, "dairy"),
    "milk reduced fat": _volume(244, 15.3, 5.1, "dairy"),
    "buttermilk": _volume(245, 15.3, 5.1, "dairy"),
    "cream heavy": _volume(238, 14.9, 5, "dairy"),
    "cream heavy whipping": _volume(238, 14.9, 5, "dairy"),
    "cream light": _volume(240, 15, 5, "dairy"),
    "half and half": _volume(242, 15.1, 5, "dairy"),
    "sour cream": _volume(242, 15.1, 5, "dairy"),
    "yogurt": _volume(245, 15.3, 5.1, "dairy"),
    "yogurt greek": _volume(285, 17.8, 5.9, "dairy"),
    "yogurt greek plain nonfat": _volume(285, 17.8, 5.9, "dairy"),
    "cream cheese": _volume(232, 14.5, 4.8, "dairy"),
    "cottage cheese": _volume(226, 14.1, 4.7, "dairy"),
    "ricotta cheese": _volume(246, 15.4, 5.1, "dairy"),
    # cheeses (shredded/grated)
    "cheese cheddar": _volume(113, 7.1, 2.4, "cheese"),
    "cheese mozzarella": _volume(113, 7.1, 2.4, "cheese"),
    "cheese mozzarella whole milk": _volume(113, 7.1, 2.4, "cheese"),
    "cheese parmesan": _volume(100, 6.3, 2.1, "cheese"),
    "cheese parmesan hard": _volume(100, 6.3, 2.1, "cheese"),
    "cheese parmesan grated": _volume(100, 6.3, 2.1, "cheese"),
    "cheese swiss": _volume(108, 6.8, 2.3, "cheese"),
    "cheese feta": _volume(150, 9.4, 3.1, "cheese"),
    "cheese goat": _volume(144, 9, 3, "cheese"),
    "cheese blue": _volume(135, 8.4, 2.8, "cheese"),
    # grains & rice
    "rice white long grain raw": _volume(185, 11.6, 3.9, "grain"),
    "rice white": _volume(185, 11.6, 3.9, "grain"),
    "rice brown long grain raw": _volume(190, 11.9, 4, "grain"),
    "rice brown": _volume(190, 11.9, 4, "grain"),
    "rice basmati": _volume(180, 11.3, 3.8, "grain"),
    "rice jasmine": _volume(185, 11.6, 3.9, "grain"),
    "rice arborio": _volume(200, 12.5, 4.2, "grain"),
    "quinoa": _volume(170, 10.6, 3.5, "grain"),
    "quinoa uncooked": _volume(170, 10.6, 3.5, "grain"),
    "oats regular": _volume(80, 5, 1.7, "grain"),
    "oats rolled": _volume(80, 5, 1.7, "grain"),
    "oats steel cut": _volume(160, 10, 3.3, "grain"),
    "oatmeal": _volume(80, 5, 1.7, "grain"),
    "couscous": _volume(173, 10.8, 3.6, "grain"),
    "bulgur": _volume(140, 8.8, 2.9, "grain"),
    "barley": _volume(184, 11.5, 3.8, "grain"),
    "farro": _volume(170, 10.6, 3.5, "grain"),
    # pasta (dry)
    "pasta dry": _volume(100, 6.3, 2.1, "pasta"),
    "spaghetti dry": _volume(100, 6.3, 2.1, "pasta"),
    "penne dry": _volume(100, 6.3, 2.1, "pasta"),
    "macaroni dry": _volume(100, 6.3, 2.1, "pasta"),
    "noodles egg dry": _volume(80, 5, 1.7, "pasta"),
    # legumes (dry and cooked)
    "beans black dry": _volume(194, 12.1, 4, "legume"),
    "beans black cooked": _volume(172, 10.8, 3.6, "legume"),
    "beans black canned drained": _volume(172, 10.8, 3.6, "legume"),
    "beans kidney dry": _volume(184, 11.5, 3.8, "legume"),
    "beans kidney canned drained": _volume(177, 11.1, 3.7, "legume"),
    "beans pinto dry": _volume(193, 12.1, 4, "legume"),
    "beans white": _volume(179, 11.2, 3.7, "legume"),
    "chickpeas dry": _volume(200, 12.5, 4.2, "legume"),
    "chickpeas canned drained": _volume(164, 10.3, 3.4, "legume"),
    "lentils raw": _volume(192, 12, 4, "legume"),
    "lentils cooked": _volume(198, 12.4, 4.1, "legume"),
    # nuts & seeds
    "nuts almonds": _volume(143, 8.9, 3, "nut"),
    "nuts almonds sliced": _volume(92, 5.8, 1.9, "nut"),
    "nuts walnuts": _volume(117, 7.3, 2.4, "nut"),
    "nuts walnuts chopped": _volume(117, 7.3, 2.4, "nut"),
    "nuts pecans": _volume(109, 6.8, 2.3, "nut"),
    "nuts pecans chopped": _volume(109, 6.8, 2.3, "nut"),
    "nuts cashews raw": _volume(137, 8.6, 2.9, "nut"),
    "peanuts raw": _volume(146, 9.1, 3, "nut"),
    "peanuts roasted": _volume(146, 9.1, 3, "nut"),
    "pine nuts": _volume(135, 8.4, 2.8, "nut"),
    "macadamia nuts": _volume(134, 8.4, 2.8, "nut"),
    "hazelnuts": _volume(135, 8.4, 2.8, "nut"),
    "seeds chia": _volume(168, 10.5, 3.5, "seed"),
    "chia seeds": _volume(168, 10.5, 3.5, "seed"),
    "seeds flax": _volume(168, 10.5, 3.5, "seed"),
    "flaxseed": _volume(168, 10.5, 3.5, "seed"),
    "seeds sunflower": _volume(140, 8.8, 2.9, "seed"),
    "seeds pumpkin": _volume(129, 8.1, 2.7, "seed"),
    "seeds sesame": _volume(144, 9, 3, "seed"),
    # nut butters
    "peanut butter": _volume(258, 16, 5.3, "nut_butter"),
    "peanut butter smooth": _volume(258, 16, 5.3, "nut_butter"),
    "almond butter": _volume(256, 16, 5.3, "nut_butter"),
    "tahini": _volume(240, 15, 5, "nut_butter"),
    "sunflower seed butter": _volume(256, 16, 5.3, "nut_butter"),
    # vegetables (chopped/diced)
    "onions raw": _volume(160, 10, 3.3, "vegetable", each=110),
    "onions chopped": _volume(160, 10, 3.3, "vegetable"),
    "garlic raw": _volume(136, 8.5, 2.8, "vegetable", clove=3),
    "garlic minced": _volume(136, 8.5, 2.8, "vegetable", clove=3),
    "tomatoes red raw": _volume(180, 11.3, 3.8, "vegetable", each=123),
    "tomatoes chopped": _volume(180, 11.3, 3.8, "vegetable"),
    "tomatoes cherry raw": _volume(149, 9.3, 3.1, "vegetable"),
    "tomatoes diced canned": _volume(240, 15, 5, "vegetable"),
    "tomato paste": _volume(262, 16.4, 5.5, "vegetable"),
    "tomato sauce": _volume(245, 15.3, 5.1, "vegetable"),
    "carrots raw": _volume(128, 8, 2.7, "vegetable", each=61),
    "carrots chopped": _volume(128, 8, 2.7, "vegetable"),
    "celery raw": _volume(101, 6.3, 2.1, "vegetable", each=40),
    "peppers sweet raw": _volume(149, 9.3, 3.1, "vegetable", each=119),
    "peppers sweet red raw": _volume(149, 9.3, 3.1, "vegetable"),
    "peppers sweet green raw": _volume(149, 9.3, 3.1, "vegetable"),
    "broccoli raw": _volume(91, 5.7, 1.9, "vegetable"),
    "broccoli florets": _volume(91, 5.7, 1.9, "vegetable"),
    "spinach raw": _volume(30, 1.9, 0.6, "vegetable"),
    "spinach chopped": _volume(30, 1.9, 0.6, "vegetable"),
    "kale raw": _volume(67, 4.2, 1.4, "vegetable"),
    "kale chopped": _volume(67, 4.2, 1.4, "vegetable"),
    "lettuce iceberg raw": _volume(72, 4.5, 1.5, "vegetable"),
    "lettuce romaine raw": _volume(47, 2.9, 1, "vegetable"),
    "mushrooms white raw": _volume(70, 4.4, 1.5, "vegetable"),
    "mushrooms sliced": _volume(70, 4.4, 1.5, "vegetable"),
    "squash zucchini raw": _volume(124, 7.8, 2.6, "vegetable", each=196),
    "zucchini sliced": _volume(124, 7.8, 2.6, "vegetable"),
    "cucumber raw": _volume(104, 6.5, 2.2, "vegetable", each=301),
    "cucumber with peel raw": _volume(104, 6.5, 2.2, "vegetable"),
    "avocados raw": _volume(150, 9.4, 3.1, "vegetable", each=150),
    "avocado cubed": _volume(150, 9.4, 3.1, "vegetable"),
    "corn sweet yellow raw": _volume(154, 9.6, 3.2, "vegetable"),
    "corn kernels": _volume(154, 9.6, 3.2, "vegetable"),
    "beans green raw": _volume(100, 6.3, 2.1, "vegetable"),
    "asparagus raw": _volume(134, 8.4, 2.8, "vegetable"),
    "cauliflower raw": _volume(107, 6.7, 2.2, "vegetable"),
    "cabbage raw": _volume(89, 5.6, 1.9, "vegetable"),
    "potatoes raw": _volume(150, 9.4, 3.1, "vegetable", each=213),
    "potatoes diced": _volume(150, 9.4, 3.1, "vegetable"),
    "sweet potato raw": _volume(133, 8.3, 2.8, "vegetable", each=130),
    # fruits
    "apples raw with skin": _volume(125, 7.8, 2.6, "fruit", each=182),
    "apples chopped": _volume(125, 7.8, 2.6, "fruit"),
    "bananas raw": _volume(150, 9.4, 3.1, "fruit", each=118),
    "bananas sliced": _volume(150, 9.4, 3.1, "fruit"),
    "strawberries raw": _volume(152, 9.5, 3.2, "fruit"),
    "strawberries sliced": _volume(166, 10.4, 3.5, "fruit"),
    "blueberries raw": _volume(148, 9.3, 3.1, "fruit"),
    "raspberries raw": _volume(123, 7.7, 2.6, "fruit"),
    "grapes raw": _volume(151, 9.4, 3.1, "fruit"),
    "oranges raw": _volume(180, 11.3, 3.8, "fruit", each=131),
    "lemons raw": _volume(212, 13.3, 4.4, "fruit", each=58),
    "lemon juice raw": _volume(244, 15.3, 5.1, "fruit"),
    "limes raw": _volume(230, 14.4, 4.8, "fruit", each=67),
    "lime juice raw": _volume(246, 15.4, 5.1, "fruit"),
    "mango": _volume(165, 10.3, 3.4, "fruit"),
    "pineapple": _volume(165, 10.3, 3.4, "fruit"),
    "peaches": _volume(154, 9.6, 3.2, "fruit"),
    "raisins": _volume(165, 10.3, 3.4, "fruit"),
    "dates": _volume(178, 11.1, 3.7, "fruit"),
    # proteins (raw, for reference)
    "chicken broiler breast meat raw": _volume(140, 8.8, 2.9, "protein", each=174),
    "chicken breast": _volume(140, 8.8, 2.9, "protein", each=174),
    "beef ground 85% lean raw": _volume(226, 14.1, 4.7, "protein"),
    "turkey ground raw": _volume(226, 14.1, 4.7, "protein"),
    "egg whole raw": _count("protein", large=50, medium=44, small=38, each=50),
    "egg whites": _volume(243, 15.2, 5.1, "protein", large=33),
    "egg yolks": _volume(243, 15.2, 5.1, "protein", large=17),
    "tofu firm raw": _volume(252, 15.8, 5.3, "protein"),
    "shrimp raw": _volume(145, 9.1, 3, "protein"),
    "salmon atlantic raw": _volume(170, 10.6, 3.5, "protein"),
    # condiments & sauces
    "soy sauce": _volume(255, 16, 5.3, "condiment"),
    "worcestershire sauce": _volume(272, 17, 5.7, "condiment"),
    "ketchup": _volume(272, 17, 5.7, "condiment"),
    "mustard prepared yellow": _volume(249, 15.6, 5.2, "condiment"),
    "mayonnaise": _volume(232, 14.5, 4.8, "condiment"),
    "vinegar distilled": _volume(238, 14.9, 5, "condiment"),
    "vinegar balsamic": _volume(255, 15.9, 5.3, "condiment"),
    "vinegar cider": _volume(239, 14.9, 5, "condiment"),
    "vinegar rice": _volume(239, 14.9, 5, "condiment"),
    "hot sauce": _volume(273, 17.1, 5.7, "condiment"),
    "sauce hot chile pepper": _volume(273, 17.1, 5.7, "condiment"),
    # spices & seasonings
    "salt table": _volume(292, 18.3, 6.1, "seasoning"),
    "pepper black": _volume(105, 6.6, 2.2, "seasoning"),
    "spices paprika": _volume(109, 6.8, 2.3, "seasoning"),
    "spices cumin ground": _volume(104, 6.5, 2.2, "seasoning"),
    "spices cinnamon ground": _volume(125, 7.8, 2.6, "seasoning"),
    "spices oregano dried": _volume(27, 1.7, 0.6, "seasoning"),
    "spices basil dried": _volume(24, 1.5, 0.5, "seasoning"),
    "spices thyme dried": _volume(41, 2.6, 0.9, "seasoning"),
    "spices rosemary dried": _volume(40, 2.5, 0.8, "seasoning"),
    "spices garlic powder": _volume(155, 9.7, 3.2, "seasoning"),
    "spices onion powder": _volume(108, 6.8, 2.3, "seasoning"),
    "spices chili powder": _volume(128, 8, 2.7, "seasoning"),
    "spices cayenne": _volume(90, 5.6, 1.9, "seasoning"),
    "spices pepper red cayenne": _volume(90, 5.6, 1.9, "seasoning"),
    "spices ginger ground": _volume(96, 6, 2, "seasoning"),
    "spices nutmeg ground": _volume(112, 7, 2.3, "seasoning"),
    "spices italian seasoning": _volume(32, 2, 0.7, "seasoning"),
    "basil fresh": _volume(24, 1.5, 0.5, "herb"),
    "thyme fresh": _volume(28, 1.8, 0.6, "herb"),
    "rosemary fresh": _volume(25, 1.6, 0.5, "herb"),
    "cilantro fresh": _volume(16, 1, 0.3, "herb"),
    "parsley fresh": _volume(60, 3.8, 1.3, "herb"),
    "mint fresh": _volume(48, 3, 1, "herb"),
    "ginger root raw": _volume(96, 6, 2, "herb"),
    # baking ingredients
    "leavening agents baking powder": _volume(230, 14.4, 4.8, "baking"),
    "leavening agents baking soda": _volume(230, 14.4, 4.8, "baking"),
    "yeast bakers active dry": _volume(144, 9, 3, "baking"),
    "vanilla extract": _volume(208, 13, 4.3, "baking"),
    "cocoa dry powder unsweetened": _volume(86, 5.4, 1.8, "baking"),
    "chocolate chips semisweet": _volume(168, 10.5, 3.5, "baking"),
    "coconut shredded": _volume(93, 5.8, 1.9, "baking"),
    "breadcrumbs": _volume(108, 6.8, 2.3, "baking"),
    "breadcrumbs panko": _volume(60, 3.8, 1.3, "baking"),
    # liquids (for completeness)
    "water": _volume(237, 14.8, 4.9, "liquid"),
    "broth chicken": _volume(240, 15, 5, "liquid"),
    "broth beef": _volume(240, 15, 5, "liquid"),
    "broth vegetable": _volume(240, 15, 5, "liquid"),
    "stock chicken": _volume(240, 15, 5, "liquid"),
    "wine red": _volume(236, 14.8, 4.9, "liquid"),
    "wine white": _volume(236, 14.8, 4.9, "liquid"),
    "beer": _volume(240, 15, 5, "liquid"),
    "coconut milk": _volume(240, 15, 5, "liquid"),
    "almond milk": _volume(244, 15.3, 5.1, "liquid"),
}

CATEGORY_FALLBACKS: dict[str, DensityMatch] = {
    "flour": _volume(125, 7.8, 2.6, "flour"),
    "sugar": _volume(200, 12.5, 4.2, "sugar"),
    "sweetener": _volume(330, 20.6, 6.9, "sweetener"),
    "oil": _volume(218, 13.6, 4.5, "oil"),
    "fat": _volume(227, 14.2, 4.7, "fat"),
    "dairy": _volume(244, 15.3, 5.1, "dairy"),
    "cheese": _volume(113, 7.1, 2.4, "cheese"),
    "grain": _volume(180, 11.3, 3.8, "grain"),
    "pasta": _volume(100, 6.3, 2.1, "pasta"),
    "legume": _volume(180, 11.3, 3.8, "legume"),
    "nut": _volume(130, 8.1, 2.7, "nut"),
    "seed": _volume(150, 9.4, 3.1, "seed"),
    "nut_butter": _volume(256, 16, 5.3, "nut_butter"),
    "vegetable": _volume(130, 8.1, 2.7, "vegetable"),
    "fruit": _volume(150, 9.4, 3.1, "fruit"),
    "protein": _volume(170, 10.6, 3.5, "protein"),
    "condiment": _volume(250, 15.6, 5.2, "condiment"),
    "seasoning": _volume(110, 6.9, 2.3, "seasoning"),
    "herb": _volume(30, 1.9, 0.6, "herb"),
    "baking": _volume(150, 9.4, 3.1, "baking"),
    "liquid": _volume(240, 15, 5, "liquid"),
}

# Water-like density for anything unrecognised.
DEFAULT_FALLBACK = DensityMatch(match_type="default", cup=240, tbsp=15, tsp=5)

# First matching pattern wins.
CATEGORY_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), category)
    for pattern, category in (
        (r"flour|starch", "flour"),
        (r"sugar|sweetener|syrup|honey|molasses", "sugar"),
        (r"\b(peanut|almond|cashew|sunflower)\b.*\bbutter\b", "nut_butter"),
        (r"\boils?\b|olive|canola", "oil"),
        (r"butter|margarine|shortening|lard|ghee", "fat"),
        (r"cheese", "cheese"),
        (r"milk|cream|yogurt", "dairy"),
        (r"rice|quinoa|\boats?\b|barley|farro|bulgur|couscous", "grain"),
        (r"pasta|spaghetti|noodle|penne|macaroni", "pasta"),
        (r"\b(beans?|lentils?|chickpeas?|peas)\b", "legume"),
        (r"\bnuts?\b|almond|walnut|pecan|cashew|peanut|pistachio|macadamia", "nut"),
        (r"\bseeds?\b|chia|flax|sunflower|pumpkin|sesame", "seed"),
        (r"chicken|beef|pork|turkey|fish|salmon|shrimp|\beggs?\b|tofu|tempeh", "protein"),
        (r"sauce|ketchup|mustard|mayo|vinegar", "condiment"),
        (r"spice|powder|ground|dried|seasoning", "seasoning"),
        (r"fresh|basil|cilantro|parsley|mint|thyme|rosemary", "herb"),
        (r"broth|stock|water|wine|beer", "liquid"),
        (r"baking|yeast|extract|cocoa|chocolate", "baking"),
        (r"fruit|apple|banana|berry|berries|orange|lemon|lime|mango|peach", "fruit"),
        (
            r"vegetable|onion|garlic|tomato|carrot|celery|pepper|broccoli|spinach",
            "vegetable",
        ),
    )
)

WEIGHT_UNIT_GRAMS: dict[str, float] = {
    "g": 1,
    "kg": 1000,
    "mg": 0.001,
    "oz": 28.3495,
    "lb": 453.592,
}

# Liquid measures expressed in cups, converted through the cup density.
VOLUME_UNIT_CUPS: dict[str, float] = {
    "ml": 1 / 236.588,
    "l": 1000 / 236.588,
    "fl oz": 1 / 8,
    "pint": 2,
    "quart": 4,
    "gallon": 16,
}

SIZE_UNITS = frozenset({"large", "medium", "small"})
WHOLE_UNITS = frozenset({"whole", "each", "piece"})

# Grams per unit when nothing else is known (a tablespoon of water).
LAST_RESORT_GRAMS_PER_UNIT = 15.0
