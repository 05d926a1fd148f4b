from typing import Iterable

from cardrewards.domain.models import CardDefinition, CardEarnings, SpendingCategory
from cardrewards.engine.evaluator import POINT_VALUE, calculate_earnings


def evaluate_cards(
    cards: Iterable[CardDefinition],
    category: SpendingCategory,
    amount: float,
    point_value: float = POINT_VALUE,
) -> list[CardEarnings]:
    return [
        CardEarnings(card=card, earnings=calculate_earnings(card, category, amount, point_value=point_value))
        for card in cards
    ]


def rank_cards(
    cards: Iterable[CardDefinition],
    category: SpendingCategory,
    amount: float,
    point_value: float = POINT_VALUE,
) -> list[CardEarnings]:
    evaluations = evaluate_cards(cards, category, amount, point_value)
    # sorted() is stable, so equal cash values keep candidate order
    return sorted(evaluations, key=lambda item: item.earnings.cash_value, reverse=True)


def select_best(evaluations: Iterable[CardEarnings]) -> CardEarnings | None:
    """Strictly greatest positive cash value; the first one seen wins a tie."""
    best: CardEarnings | None = None
    for item in evaluations:
        threshold = best.earnings.cash_value if best else 0.0
        if item.earnings.cash_value > threshold:
            best = item
    return best
