"""Word lists used to parse and clean ingredient lines."""

import re

# Cooking methods and preparation words removed from ingredient names.
# "ground" and "dried" are kept because they change what the food is.
COOKING_METHODS: tuple[str, ...] = (
    "baked", "boiled", "braised", "broiled", "charred", "chopped", "cooked",
    "crispy", "crushed", "cubed", "diced", "fried", "frozen", "grated",
    "grilled", "julienned", "marinated", "mashed", "melted", "minced",
    "packed", "peeled", "poached", "raw", "roasted", "sauteed", "sautéed",
    "scrambled", "shredded", "sifted", "sliced", "smoked", "softened",
    "steamed", "stewed", "thawed", "toasted", "trimmed", "uncooked", "warmed",
    "whisked", "zested",
)  # fmt: skip

# Descriptors with no meaningful nutritional effect.
STRIP_DESCRIPTORS: tuple[str, ...] = (
    "fresh", "freshly", "organic", "natural", "pure", "real", "authentic",
    "homemade", "store-bought", "storebought", "premium", "quality", "good",
    "best", "fine", "extra", "large", "medium", "small", "thick", "thin",
    "cold", "warm", "hot", "room temperature", "divided", "optional",
    "to taste", "as needed", "for serving", "for garnish", "approximately",
    "about", "roughly", "heaping", "scant", "generous", "level",
    "loosely packed",
)  # fmt: skip

BRAND_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\([^)]*brand[^)]*\)", re.IGNORECASE),
    re.compile(r"\bbrand\b|[®™]", re.IGNORECASE),
)

PAREN_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\s*\([^)]*{word}[^)]*\)", re.IGNORECASE)
    for word in (
        "optional",
        "divided",
        "or more",
        "to taste",
        "for serving",
        "garnish",
        "such as",
    )
)

COOKED_INDICATORS: tuple[str, ...] = (
    "cooked", "boiled", "steamed", "fried", "baked", "roasted", "grilled",
    "sauteed", "sautéed", "poached", "braised",
)  # fmt: skip

RAW_INDICATORS: tuple[str, ...] = ("raw", "uncooked", "fresh")

UNICODE_FRACTIONS: dict[str, float] = {
    "¼": 0.25,
    "½": 0.5,
    "¾": 0.75,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

UNIT_ALIASES: dict[str, str] = {
    # volume
    "cup": "cup", "cups": "cup", "c": "cup",
    "tablespoon": "tbsp", "tablespoons": "tbsp", "tbsp": "tbsp", "tbsps": "tbsp",
    "tbs": "tbsp", "tb": "tbsp", "t": "tbsp", "tbl": "tbsp",
    "teaspoon": "tsp", "teaspoons": "tsp", "tsp": "tsp", "tsps": "tsp",
    "fluid ounce": "fl oz", "fluid ounces": "fl oz", "fl oz": "fl oz", "floz": "fl oz",
    "milliliter": "ml", "milliliters": "ml", "ml": "ml", "mls": "ml",
    "liter": "l", "liters": "l", "l": "l", "litre": "l", "litres": "l",
    "pint": "pint", "pints": "pint", "pt": "pint",
    "quart": "quart", "quarts": "quart", "qt": "quart",
    "gallon": "gallon", "gallons": "gallon", "gal": "gallon",
    # weight
    "gram": "g", "grams": "g", "g": "g", "gm": "g", "gms": "g",
    "kilogram": "kg", "kilograms": "kg", "kg": "kg", "kgs": "kg",
    "milligram": "mg", "milligrams": "mg", "mg": "mg",
    "ounce": "oz", "ounces": "oz", "oz": "oz", "ozs": "oz",
    "pound": "lb", "pounds": "lb", "lb": "lb", "lbs": "lb",
    # count
    "piece": "piece", "pieces": "piece", "pc": "piece", "pcs": "piece",
    "slice": "slice", "slices": "slice",
    "clove": "clove", "cloves": "clove",
    "head": "head", "heads": "head",
    "bunch": "bunch", "bunches": "bunch",
    "sprig": "sprig", "sprigs": "sprig",
    "stalk": "stalk", "stalks": "stalk",
    "stick": "stick", "sticks": "stick",
    "can": "can", "cans": "can",
    "jar": "jar", "jars": "jar",
    "package": "package", "packages": "package", "pkg": "package", "pkgs": "package",
    "container": "container", "containers": "container",
    "whole": "whole", "each": "each", "ea": "each",
    "large": "large", "medium": "medium", "small": "small",
}  # fmt: skip

# Names that search better under the reference database's own wording.
INGREDIENT_ALIASES: dict[str, str] = {
    # proteins
    "chicken breast": "chicken broiler breast meat raw",
    "chicken thigh": "chicken broiler thigh meat raw",
    "chicken thighs": "chicken broiler thigh meat raw",
    "ground beef": "beef ground 85% lean raw",
    "ground turkey": "turkey ground raw",
    "salmon fillet": "salmon atlantic raw",
    "salmon": "salmon atlantic raw",
    "shrimp": "shrimp raw",
    "bacon": "pork bacon raw",
    "sausage": "pork sausage raw",
    "tofu": "tofu firm raw",
    "egg": "egg whole raw",
    "eggs": "egg whole raw",
    # dairy
    "butter": "butter salted",
    "unsalted butter": "butter unsalted",
    "milk": "milk whole",
    "whole milk": "milk whole",
    "skim milk": "milk nonfat",
    "2% milk": "milk reduced fat 2%",
    "heavy cream": "cream heavy whipping",
    "cream cheese": "cream cheese",
    "sour cream": "sour cream",
    "greek yogurt": "yogurt greek plain nonfat",
    "yogurt": "yogurt plain whole milk",
    "cheddar": "cheese cheddar",
    "cheddar cheese": "cheese cheddar",
    "parmesan": "cheese parmesan hard",
    "parmesan cheese": "cheese parmesan hard",
    "mozzarella": "cheese mozzarella whole milk",
    "mozzarella cheese": "cheese mozzarella whole milk",
    # oils & fats
    "olive oil": "oil olive",
    "extra virgin olive oil": "oil olive extra virgin",
    "vegetable oil": "oil vegetable",
    "canola oil": "oil canola",
    "coconut oil": "oil coconut",
    "sesame oil": "oil sesame",
    "avocado oil": "oil avocado",
    # grains & starches
    "white rice": "rice white long grain raw",
    "brown rice": "rice brown long grain raw",
    "pasta": "pasta dry",
    "spaghetti": "spaghetti dry",
    "penne": "pasta dry",
    "bread": "bread white",
    "white bread": "bread white",
    "whole wheat bread": "bread whole wheat",
    "flour": "flour all purpose",
    "all purpose flour": "flour all purpose",
    "all-purpose flour": "flour all purpose",
    "bread flour": "flour bread",
    "whole wheat flour": "flour whole wheat",
    "oats": "oats regular",
    "rolled oats": "oats regular",
    "quinoa": "quinoa uncooked",
    # vegetables
    "onion": "onions raw",
    "onions": "onions raw",
    "garlic": "garlic raw",
    "garlic cloves": "garlic raw",
    "tomato": "tomatoes red ripe raw",
    "tomatoes": "tomatoes red ripe raw",
    "cherry tomatoes": "tomatoes grape raw",
    "grape tomatoes": "tomatoes grape raw",
    "potato": "potatoes raw",
    "potatoes": "potatoes raw",
    "sweet potato": "sweet potato raw",
    "sweet potatoes": "sweet potato raw",
    "carrot": "carrots raw",
    "carrots": "carrots raw",
    "celery": "celery raw",
    "bell pepper": "peppers sweet raw",
    "bell peppers": "peppers sweet raw",
    "red bell pepper": "peppers sweet red raw",
    "green bell pepper": "peppers sweet green raw",
    "broccoli": "broccoli raw",
    "spinach": "spinach raw",
    "kale": "kale raw",
    "lettuce": "lettuce iceberg raw",
    "romaine": "lettuce romaine raw",
    "romaine lettuce": "lettuce romaine raw",
    "mushrooms": "mushrooms white raw",
    "mushroom": "mushrooms white raw",
    "zucchini": "squash zucchini raw",
    "cucumber": "cucumber with peel raw",
    "avocado": "avocados raw",
    "corn": "corn sweet yellow raw",
    "green beans": "beans green raw",
    "asparagus": "asparagus raw",
    "cauliflower": "cauliflower raw",
    "cabbage": "cabbage raw",
    # fruits
    "apple": "apples raw with skin",
    "apples": "apples raw with skin",
    "banana": "bananas raw",
    "bananas": "bananas raw",
    "lemon": "lemons raw",
    "lemon juice": "lemon juice raw",
    "lime": "limes raw",
    "lime juice": "lime juice raw",
    "orange": "oranges raw",
    "strawberries": "strawberries raw",
    "blueberries": "blueberries raw",
    # legumes & nuts
    "black beans": "beans black canned drained",
    "kidney beans": "beans kidney canned drained",
    "chickpeas": "chickpeas canned drained",
    "lentils": "lentils raw",
    "peanut butter": "peanut butter smooth",
    "almond butter": "almond butter",
    "almonds": "nuts almonds",
    "walnuts": "nuts walnuts",
    "cashews": "nuts cashews raw",
    "peanuts": "peanuts raw",
    # sweeteners
    "sugar": "sugar granulated",
    "white sugar": "sugar granulated",
    "brown sugar": "sugar brown",
    "honey": "honey",
    "maple syrup": "syrups maple",
    "powdered sugar": "sugar powdered",
    # condiments & sauces
    "soy sauce": "soy sauce",
    "worcestershire": "worcestershire sauce",
    "worcestershire sauce": "worcestershire sauce",
    "ketchup": "ketchup",
    "mustard": "mustard prepared yellow",
    "mayonnaise": "mayonnaise",
    "mayo": "mayonnaise",
    "hot sauce": "sauce hot chile pepper",
    "sriracha": "sauce hot chile pepper",
    "vinegar": "vinegar distilled",
    "balsamic vinegar": "vinegar balsamic",
    "balsamic": "vinegar balsamic",
    "apple cider vinegar": "vinegar cider",
    "rice vinegar": "vinegar rice",
    "red wine vinegar": "vinegar red wine",
    "white wine vinegar": "vinegar white wine",
    # seasonings
    "salt": "salt table iodized",
    "table salt": "salt table iodized",
    "kosher salt": "salt table",
    "sea salt": "salt table",
    "pepper": "spices pepper black",
    "black pepper": "spices pepper black",
    "ground pepper": "spices pepper black",
    "ground black pepper": "spices pepper black",
    "paprika": "spices paprika",
    "cumin": "spices cumin ground",
    "oregano": "spices oregano dried",
    "basil": "basil fresh",
    "dried basil": "spices basil dried",
    "thyme": "thyme fresh",
    "dried thyme": "spices thyme dried",
    "rosemary": "rosemary fresh",
    "dried rosemary": "spices rosemary dried",
    "cinnamon": "spices cinnamon ground",
    "nutmeg": "spices nutmeg ground",
    "ginger": "ginger root raw",
    "fresh ginger": "ginger root raw",
    "ground ginger": "spices ginger ground",
    "cayenne": "spices pepper red cayenne",
    "cayenne pepper": "spices pepper red cayenne",
    "chili powder": "spices chili powder",
    "italian seasoning": "spices italian seasoning",
    "garlic powder": "spices garlic powder",
    "onion powder": "spices onion powder",
    # baking
    "baking powder": "leavening agents baking powder",
    "baking soda": "leavening agents baking soda",
    "vanilla extract": "vanilla extract",
    "vanilla": "vanilla extract",
    "cocoa powder": "cocoa dry powder unsweetened",
    "chocolate chips": "chocolate chips semisweet",
    "yeast": "yeast bakers active dry",
}
