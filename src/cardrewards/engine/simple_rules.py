from typing import Sequence

from cardrewards.domain.models import CardDefinition, CategoryKey, SimpleRecommendation, SpendingCategory
from cardrewards.engine.benefits import benefits_summary
from cardrewards.engine.evaluator import applicable_rate
from cardrewards.nlp.category_parser import human_label, resolve_category
from cardrewards.repository.card_catalog import CardCatalog, generic_card

GENERAL_REWARDS = "General rewards"

# Venue categories that also earn a card's rate on a broader or sibling category.
_RELATED = {
    SpendingCategory.DINING: (SpendingCategory.RESTAURANTS,),
    SpendingCategory.RESTAURANTS: (SpendingCategory.DINING,),
    SpendingCategory.HOTELS: (SpendingCategory.TRAVEL,),
    SpendingCategory.AIRFARE: (SpendingCategory.TRAVEL,),
}


def venue_multiplier(card: CardDefinition, category: SpendingCategory) -> float:
    """Best bonus rate the card lists for `category` or its related categories, else its base rate."""
    listed = {rate.category for rate in card.reward_rates}
    bonuses = [
        applicable_rate(card, related).rate
        for related in (category, *_RELATED.get(category, ()))
        if related in listed
    ]
    return max(bonuses) if bonuses else card.base_rate.rate


class SimpleRulesEngine:
    """String-keyed recommender for nearby-venue prompts.

    Compares raw multipliers only (no caps, no amount), so it can disagree
    with RecommendationEngine once a capped bonus rate runs out.
    """

    def __init__(self, catalog: CardCatalog):
        self.catalog = catalog

    def _resolve(self, card: CardDefinition | str) -> tuple[CardDefinition, bool]:
        if isinstance(card, CardDefinition):
            return card, False
        found = self.catalog.find(card)
        if found is None:
            return generic_card(card), True
        return found, False

    def recommend(
        self,
        category: CategoryKey | str,
        cards: Sequence[CardDefinition | str],
    ) -> SimpleRecommendation:
        key = resolve_category(category)

        best: tuple[CardDefinition, float, bool] | None = None
        for candidate in cards:
            card, estimated = self._resolve(candidate)
            multiplier = venue_multiplier(card, key)
            if best is None or multiplier > best[1]:
                best = (card, multiplier, estimated)

        if best is None:
            return SimpleRecommendation(card=None, why=GENERAL_REWARDS)

        card, multiplier, estimated = best
        if multiplier > 1.0:
            why = f"{multiplier:.0f}× {human_label(key)}"
        else:
            why = benefits_summary(card, estimated=estimated)
        return SimpleRecommendation(card=card, why=why)
