"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from recipe_macros.adapters.fdc_client import FdcClient
from recipe_macros.config import Settings
from recipe_macros.services.macros import MacroEstimator
from recipe_macros.services.nutrition import NutritionService
from recipe_macros.services.substitutions import SubstitutionService


def fdc_food(  # noqa: PLR0913
    fdc_id: int,
    description: str,
    calories: float | None,
    protein: float,
    carbs: float,
    fat: float,
    *,
    data_type: str = "SR Legacy",
    category: str | None = None,
    portions: list[dict[str, object]] | None = None,
) -> dict[str, object]:
    """Build an FDC food payload with per-100 g nutrients."""
    nutrients = [
        {"nutrientId": 1003, "amount": protein},
        {"nutrientId": 1004, "amount": fat},
        {"nutrientId": 1005, "amount": carbs},
    ]
    if calories is not None:
        nutrients.append({"nutrientId": 1008, "amount": calories})
    payload: dict[str, object] = {
        "fdcId": fdc_id,
        "description": description,
        "dataType": data_type,
        "foodNutrients": nutrients,
        "foodPortions": portions or [],
    }
    if category:
        payload["foodCategory"] = {"description": category}
    return payload


CHICKEN_BREAST = fdc_food(
    171077,
    "Chicken, broiler or fryers, breast, skinless, boneless, meat only, raw",
    165,
    31,
    0,
    3.6,
    category="Poultry Products",
)
TURKEY_BREAST = fdc_food(
    171494,
    "Turkey, breast, meat only, raw",
    111,
    24.6,
    0,
    0.7,
    category="Poultry Products",
)
SHRIMP = fdc_food(
    175180,
    "Crustaceans, shrimp, raw",
    85,
    20.1,
    0,
    0.5,
    category="Finfish and Shellfish Products",
)
TOFU = fdc_food(
    172475,
    "Tofu, raw, firm, prepared with calcium sulfate",
    144,
    17.3,
    2.8,
    8.7,
    category="Legumes and Legume Products",
)
EGG_WHITE = fdc_food(
    172183,
    "Egg, white, raw, fresh",
    52,
    10.9,
    0.7,
    0.2,
    category="Dairy and Egg Products",
)
RICE_WHITE = fdc_food(
    169756,
    "Rice, white, long-grain, regular, enriched, cooked",
    130,
    2.7,
    28.2,
    0.3,
    category="Cereal Grains and Pasta",
)
SALT = fdc_food(173468, "Salt, table", 0, 0, 0, 0, category="Spices and Herbs")


def default_foods() -> list[dict[str, object]]:
    return [CHICKEN_BREAST, TURKEY_BREAST, SHRIMP, TOFU, EGG_WHITE, RICE_WHITE, SALT]


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory foods.

    A search returns every food whose description contains the first word of
    the query, restricted to the requested data types.
    """

    foods: list[dict[str, object]] = field(default_factory=default_foods)
    api_key: str | None = "fdc-key"
    search_calls: list[str] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)
    closed: bool = False

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def search_foods(
        self, query: str, data_types: tuple[str, ...] = (), page_size: int = 10
    ) -> dict[str, object]:
        self.search_calls.append(query)
        words = query.lower().split()
        if not words:
            return {"foods": []}
        hits = [
            food
            for food in self.foods
            if words[0] in str(food["description"]).lower().replace(",", " ").split()
            and (not data_types or food.get("dataType") in data_types)
        ]
        return {"foods": hits[:page_size]}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        for food in self.foods:
            if food["fdcId"] == fdc_id:
                return food
        raise LookupError(f"Unknown food {fdc_id}")

    async def close(self) -> None:
        self.closed = True


@dataclass
class FixedClock:
    """Manually advanced clock for cache expiry tests."""

    now: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def settings() -> Settings:
    return Settings(fdc_api_key="fdc-key")


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def nutrition_service(fdc_client: FakeFdcClient) -> NutritionService:
    return NutritionService(fdc_client, retry_delay_seconds=0)


@pytest.fixture
def macro_estimator(nutrition_service: NutritionService) -> MacroEstimator:
    return MacroEstimator(nutrition_service)


@pytest.fixture
def substitution_service(
    nutrition_service: NutritionService, macro_estimator: MacroEstimator
) -> SubstitutionService:
    return SubstitutionService(nutrition_service, macro_estimator)
