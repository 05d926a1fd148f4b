import logging
from typing import Iterable, Sequence

from cardrewards.config import settings
from cardrewards.domain.models import (
    CardDefinition,
    CardEarnings,
    EarningsResult,
    RecommendationResult,
    RewardRate,
    SpendingCategory,
)
from cardrewards.engine.evaluator import POINT_VALUE, applicable_rate, calculate_earnings
from cardrewards.engine.selectors import evaluate_cards, rank_cards, select_best
from cardrewards.repository.card_catalog import CardCatalog, generic_card, load_catalog

logger = logging.getLogger(__name__)

NO_CARDS_REASON = "Add cards to get recommendations"
NO_MATCH_REASON = "No optimal card found"


class RecommendationEngine:
    """Picks the best card for a category and amount among the user's cards."""

    def __init__(self, catalog: CardCatalog, point_value: float = POINT_VALUE):
        self.catalog = catalog
        self.point_value = point_value

    @classmethod
    def from_settings(cls) -> "RecommendationEngine":
        return cls(load_catalog(settings.card_catalog_file), point_value=settings.point_value)

    def _resolve(self, product_names: Iterable[str]) -> list[CardDefinition]:
        cards: list[CardDefinition] = []
        seen: set[str] = set()
        for name in product_names:
            if name in seen:
                continue
            seen.add(name)
            card = self.catalog.find(name)
            if card is None:
                logger.debug("Ignoring unknown card %r", name)
                continue
            cards.append(card)
        return cards

    def recommend(
        self,
        category: SpendingCategory,
        amount: float,
        candidate_product_names: Sequence[str],
    ) -> RecommendationResult:
        if not candidate_product_names:
            return RecommendationResult(
                card=None,
                earnings=EarningsResult.zero("No cards available"),
                reason=NO_CARDS_REASON,
            )

        cards = self._resolve(candidate_product_names)
        best = select_best(evaluate_cards(cards, category, amount, self.point_value))
        if best is None:
            return RecommendationResult(
                card=None,
                earnings=EarningsResult.zero("No match"),
                reason=NO_MATCH_REASON,
            )

        return RecommendationResult(
            card=best.card,
            earnings=best.earnings,
            reason=f"Earn {best.earnings.description} with {best.card.product_name}",
        )

    def rank(
        self,
        category: SpendingCategory,
        amount: float,
        candidate_product_names: Sequence[str],
    ) -> list[CardEarnings]:
        return rank_cards(self._resolve(candidate_product_names), category, amount, self.point_value)

    def calculate_total_earnings(
        self,
        transactions: Iterable[tuple[SpendingCategory, float]],
        candidate_product_names: Sequence[str],
    ) -> float:
        total = 0.0
        for category, amount in transactions:
            total += self.recommend(category, amount, candidate_product_names).earnings.cash_value
        return total

    def earnings_for_card_name(
        self,
        product_name: str,
        category: SpendingCategory,
        amount: float,
        spent_this_year: float = 0,
        spent_this_month: float = 0,
    ) -> EarningsResult:
        """Earnings of the card actually used; unknown cards earn the 1x baseline."""
        card = self.catalog.find(product_name) or generic_card(product_name)
        return calculate_earnings(
            card,
            category,
            amount,
            spent_this_year=spent_this_year,
            spent_this_month=spent_this_month,
            point_value=self.point_value,
        )

    def reward_rate_for_card_name(self, product_name: str, category: SpendingCategory) -> RewardRate | None:
        card = self.catalog.find(product_name)
        if card is None:
            return None
        return applicable_rate(card, category)
