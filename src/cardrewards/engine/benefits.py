from cardrewards.domain.models import CardDefinition, RewardRate, SpendingCategory
from cardrewards.engine.evaluator import applicable_rate, describe_rate
from cardrewards.nlp.category_parser import human_label


def _multipliers(card: CardDefinition) -> list[tuple[SpendingCategory, float]]:
    seen: dict[SpendingCategory, float] = {}
    for rate in card.reward_rates:
        seen.setdefault(rate.category, rate.rate)
    seen.setdefault(SpendingCategory.EVERYTHING, card.base_rate.rate)
    return list(seen.items())


def benefits_summary(card: CardDefinition, estimated: bool = False) -> str:
    """Short line naming the card's three strongest multipliers, e.g. '4× dining, 4× groceries, 1× everywhere'."""
    top = sorted(
        (item for item in _multipliers(card) if item[0] != SpendingCategory.COFFEE),
        key=lambda item: item[1],
        reverse=True,
    )[:3]
    parts = [f"{multiplier:.0f}× {human_label(category).lower()}" for category, multiplier in top]
    suffix = " (est.)" if estimated else ""
    return ", ".join(parts) + suffix


def _cap_line(rate: RewardRate) -> str | None:
    if rate.annual_cap is not None:
        return f"bonus rate capped at ${rate.annual_cap:,.0f}/year"
    if rate.quarterly_limit is not None:
        line = f"bonus rate capped at ${rate.quarterly_limit:,.0f}/quarter"
        return line + " (rotating)" if rate.is_rotating else line
    if rate.monthly_limit is not None:
        return f"bonus rate capped at ${rate.monthly_limit:,.0f}/month"
    return None


def rate_evidence(card: CardDefinition, category: SpendingCategory) -> list[str]:
    rate = applicable_rate(card, category)
    scope = category.display_name if rate.category == category else "everything else"
    snippets = [f"{card.product_name}: {describe_rate(rate)} on {scope}"]

    cap = _cap_line(rate)
    if cap:
        snippets.append(f"{card.product_name}: {cap}")

    if card.benefits:
        snippets.append(f"Perks: {', '.join(card.benefits)}")

    return snippets[:3]
