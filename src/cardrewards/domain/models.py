from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class SpendingCategory(str, Enum):
    DINING = "dining"
    GROCERIES = "groceries"
    GAS = "gas"
    TRAVEL = "travel"
    STREAMING = "streaming"
    TRANSIT = "transit"
    DRUGSTORES = "drugstores"
    DEPARTMENT_STORES = "department_stores"
    WHOLESALE = "wholesale"
    EVERYTHING = "everything"
    HOTELS = "hotels"
    AIRFARE = "airfare"
    RIDESHARE = "rideshare"
    COFFEE = "coffee"
    RESTAURANTS = "restaurants"
    ONLINE = "online"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    SpendingCategory.DINING: "Dining & Restaurants",
    SpendingCategory.GROCERIES: "Grocery Stores",
    SpendingCategory.GAS: "Gas Stations",
    SpendingCategory.TRAVEL: "Travel",
    SpendingCategory.STREAMING: "Streaming Services",
    SpendingCategory.TRANSIT: "Transit",
    SpendingCategory.DRUGSTORES: "Drugstores",
    SpendingCategory.DEPARTMENT_STORES: "Department Stores",
    SpendingCategory.WHOLESALE: "Wholesale Clubs",
    SpendingCategory.EVERYTHING: "Everything Else",
    SpendingCategory.HOTELS: "Hotels",
    SpendingCategory.AIRFARE: "Airfare",
    SpendingCategory.RIDESHARE: "Rideshare & Taxis",
    SpendingCategory.COFFEE: "Coffee Shops",
    SpendingCategory.RESTAURANTS: "Restaurants",
    SpendingCategory.ONLINE: "Online Shopping",
}


class RewardRate(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: SpendingCategory
    rate: float = Field(ge=0)  # points per dollar, or percent when is_percentage
    is_percentage: bool = False
    annual_cap: float | None = None
    quarterly_limit: float | None = None
    is_rotating: bool = False
    monthly_limit: float | None = None


class CardDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    institution_id: str
    product_name: str
    network: str = ""
    is_premium: bool = False
    annual_fee: float = 0
    reward_rates: tuple[RewardRate, ...] = ()
    base_rate: RewardRate
    signup_bonus: str | None = None
    benefits: tuple[str, ...] = ()

    @property
    def identity(self) -> tuple[str, str]:
        return self.institution_id, self.product_name


class EarningsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    points: float
    cash_value: float
    description: str

    @classmethod
    def zero(cls, description: str = "") -> "EarningsResult":
        return cls(points=0.0, cash_value=0.0, description=description)


class CardEarnings(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: CardDefinition
    earnings: EarningsResult


class RecommendationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: CardDefinition | None = None
    earnings: EarningsResult
    reason: str


class KnownCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: SpendingCategory


class FreeTextCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


CategoryKey = Union[KnownCategory, FreeTextCategory]


class SimpleRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: CardDefinition | None = None
    why: str
