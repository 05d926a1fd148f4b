from cardrewards.domain.models import CardDefinition, EarningsResult, RewardRate, SpendingCategory

POINT_VALUE = 0.01  # dollars per transferable point


def applicable_rate(card: CardDefinition, category: SpendingCategory) -> RewardRate:
    for rate in card.reward_rates:
        if rate.category == category:
            return rate
    return card.base_rate


def effective_amount(
    rate: RewardRate,
    amount: float,
    spent_this_year: float = 0,
    spent_this_month: float = 0,
) -> float:
    """Portion of `amount` that still earns `rate` once its caps are applied.

    The quarterly limit is checked against this transaction only; quarter-to-date
    spend is not tracked, so callers needing it must pre-clamp `amount`.
    """
    eligible = max(0.0, amount)

    if rate.annual_cap is not None:
        eligible = min(eligible, max(0.0, rate.annual_cap - spent_this_year))

    if rate.quarterly_limit is not None:
        eligible = min(eligible, rate.quarterly_limit)

    if rate.monthly_limit is not None:
        eligible = min(eligible, max(0.0, rate.monthly_limit - spent_this_month))

    return eligible


def describe_rate(rate: RewardRate) -> str:
    if rate.is_percentage:
        return f"{rate.rate}% cash back"
    return f"{rate.rate}× points"


def calculate_earnings(
    card: CardDefinition,
    category: SpendingCategory,
    amount: float,
    spent_this_year: float = 0,
    spent_this_month: float = 0,
    point_value: float = POINT_VALUE,
) -> EarningsResult:
    rate = applicable_rate(card, category)
    eligible = effective_amount(rate, amount, spent_this_year, spent_this_month)

    points = eligible * rate.rate
    if rate.is_percentage:
        cash_value = eligible * (rate.rate / 100.0)
    else:
        cash_value = points * point_value

    return EarningsResult(points=points, cash_value=cash_value, description=describe_rate(rate))
