"""Map free-text venue/category strings onto SpendingCategory.

Point-of-interest searches hand us strings such as "Coffee Shop" or
"gas_station". Exact category names resolve directly; anything else goes
through an ordered substring heuristic and ends at EVERYTHING.
"""

from cardrewards.domain.models import (
    CategoryKey,
    FreeTextCategory,
    KnownCategory,
    SpendingCategory,
)

# Ordering matters: earlier matches win.
_KEYWORD_RULES: list[tuple[SpendingCategory, tuple[str, ...]]] = [
    (SpendingCategory.DINING, ("restaurant", "dining")),
    (SpendingCategory.COFFEE, ("coffee",)),
    (SpendingCategory.GROCERIES, ("grocery", "grocer")),
    (SpendingCategory.GAS, ("gas", "fuel")),
    (SpendingCategory.HOTELS, ("hotel",)),
    (SpendingCategory.AIRFARE, ("flight", "air")),
    (SpendingCategory.TRAVEL, ("travel",)),
    (SpendingCategory.DRUGSTORES, ("drugstore", "pharmacy")),
    (SpendingCategory.TRANSIT, ("transit", "transport", "uber", "lyft")),
    (SpendingCategory.STREAMING, ("stream",)),
    (SpendingCategory.ONLINE, ("online", "ecommerce")),
]

_HUMAN_LABELS = {
    SpendingCategory.DINING: "Dining",
    SpendingCategory.RESTAURANTS: "Dining",
    SpendingCategory.COFFEE: "Coffee",
    SpendingCategory.GROCERIES: "Groceries",
    SpendingCategory.GAS: "Gas",
    SpendingCategory.TRAVEL: "Travel",
    SpendingCategory.DRUGSTORES: "Drugstores",
    SpendingCategory.TRANSIT: "Transit",
    SpendingCategory.STREAMING: "Streaming",
    SpendingCategory.ONLINE: "Online",
    SpendingCategory.HOTELS: "Hotels",
    SpendingCategory.AIRFARE: "Airfare",
    SpendingCategory.RIDESHARE: "Rideshare",
    SpendingCategory.DEPARTMENT_STORES: "Department Stores",
    SpendingCategory.WHOLESALE: "Wholesale",
    SpendingCategory.EVERYTHING: "Everywhere",
}


def _norm(text: str) -> str:
    return "_".join(text.strip().lower().replace("-", " ").split())


_EXACT = {category.value: category for category in SpendingCategory}
_EXACT.update({_norm(category.display_name): category for category in SpendingCategory})


def parse_category_key(text: str) -> CategoryKey:
    category = _EXACT.get(_norm(text or ""))
    if category is not None:
        return KnownCategory(category=category)
    return FreeTextCategory(text=text or "")


def canonicalize(text: str) -> SpendingCategory:
    lowered = (text or "").lower()
    for category, keywords in _KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return SpendingCategory.EVERYTHING


def resolve_category(key: CategoryKey | SpendingCategory | str) -> SpendingCategory:
    if isinstance(key, SpendingCategory):
        return key
    if isinstance(key, str):
        key = parse_category_key(key)
    if isinstance(key, KnownCategory):
        return key.category
    return canonicalize(key.text)


def human_label(category: SpendingCategory) -> str:
    return _HUMAN_LABELS[category]
