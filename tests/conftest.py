import pytest

from cardrewards.domain.models import CardDefinition, RewardRate, SpendingCategory
from cardrewards.repository.card_catalog import CardCatalog, default_catalog


def _make_card(
    product_name: str,
    reward_rates: list[RewardRate] | None = None,
    base_rate: RewardRate | None = None,
    institution_id: str = "testbank",
) -> CardDefinition:
    return CardDefinition(
        institution_id=institution_id,
        product_name=product_name,
        network="Visa",
        reward_rates=tuple(reward_rates or ()),
        base_rate=base_rate or RewardRate(category=SpendingCategory.EVERYTHING, rate=1.0),
    )


@pytest.fixture
def dining_points_card() -> CardDefinition:
    return _make_card(
        "Dining Points",
        reward_rates=[RewardRate(category=SpendingCategory.DINING, rate=3.0)],
    )


@pytest.fixture
def grocery_cashback_card() -> CardDefinition:
    return _make_card(
        "Grocery Cash",
        reward_rates=[
            RewardRate(category=SpendingCategory.GROCERIES, rate=6.0, is_percentage=True, annual_cap=6000),
        ],
        base_rate=RewardRate(category=SpendingCategory.EVERYTHING, rate=1.0, is_percentage=True),
    )


@pytest.fixture
def monthly_capped_card() -> CardDefinition:
    return _make_card(
        "Monthly Cash",
        reward_rates=[
            RewardRate(category=SpendingCategory.GAS, rate=5.0, is_percentage=True, monthly_limit=500),
        ],
        base_rate=RewardRate(category=SpendingCategory.EVERYTHING, rate=1.0, is_percentage=True),
    )


@pytest.fixture
def rotating_card() -> CardDefinition:
    return _make_card(
        "Rotating Cash",
        reward_rates=[
            RewardRate(
                category=SpendingCategory.GROCERIES,
                rate=5.0,
                is_percentage=True,
                quarterly_limit=1500,
                is_rotating=True,
            ),
        ],
        base_rate=RewardRate(category=SpendingCategory.EVERYTHING, rate=1.0, is_percentage=True),
    )


@pytest.fixture
def catalog() -> CardCatalog:
    return default_catalog()


@pytest.fixture
def make_card():
    return _make_card
