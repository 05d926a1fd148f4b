import json
import logging
from collections import Counter
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import ValidationError

from cardrewards.config import DEFAULT_CATALOG_FILE, settings
from cardrewards.domain.models import CardDefinition, RewardRate, SpendingCategory

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    pass


class CardCatalog:
    """Read-only registry of card definitions.

    Built once from an iterable of definitions; the backing tuple is never
    mutated, so one instance can be shared across threads.
    """

    def __init__(self, cards: Iterable[CardDefinition]):
        self._cards: tuple[CardDefinition, ...] = tuple(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[CardDefinition]:
        return iter(self._cards)

    def __contains__(self, product_name: object) -> bool:
        return any(card.product_name == product_name for card in self._cards)

    def all_definitions(self) -> list[CardDefinition]:
        return list(self._cards)

    def find(self, product_name: str) -> CardDefinition | None:
        """Legacy lookup by product name alone (exact, case-sensitive).

        Two issuers shipping the same product name cannot be told apart here;
        the first one in catalog order is returned. Use `get` when the
        institution is known.
        """
        return next((card for card in self._cards if card.product_name == product_name), None)

    def get(self, institution_id: str, product_name: str) -> CardDefinition | None:
        key = (institution_id, product_name)
        return next((card for card in self._cards if card.identity == key), None)


class CatalogStore:
    def __init__(self, catalog_file: str | Path):
        self.catalog_file = Path(catalog_file)

    def load_cards(self) -> list[CardDefinition]:
        if not self.catalog_file.exists():
            raise FileNotFoundError(f"Card catalog file not found: {self.catalog_file}")

        with self.catalog_file.open("r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise CatalogError(f"Card catalog is not valid JSON: {self.catalog_file}") from exc

        if not isinstance(data, list):
            raise CatalogError(f"Card catalog must be a JSON array: {self.catalog_file}")

        try:
            cards = [CardDefinition.model_validate(item) for item in data]
        except ValidationError as exc:
            raise CatalogError(f"Invalid card definition in {self.catalog_file}: {exc}") from exc

        _check_cards(cards)
        logger.info("Loaded %d card definition(s) from %s", len(cards), self.catalog_file)
        return cards


def _check_cards(cards: list[CardDefinition]) -> None:
    identities = Counter(card.identity for card in cards)
    duplicates = [key for key, count in identities.items() if count > 1]
    if duplicates:
        raise CatalogError(f"Duplicate card identities in catalog: {duplicates}")

    names = Counter(card.product_name for card in cards)
    for name, count in names.items():
        if count > 1:
            logger.warning("Product name %r is shared by %d issuers; name lookups return the first", name, count)

    for card in cards:
        categories = Counter(rate.category for rate in card.reward_rates)
        repeated = [category.value for category, count in categories.items() if count > 1]
        if repeated:
            logger.warning("%s lists %s more than once; the first rate wins", card.product_name, repeated)


def load_catalog(catalog_file: str | Path | None = None) -> CardCatalog:
    return CardCatalog(CatalogStore(catalog_file or settings.card_catalog_file).load_cards())


@lru_cache(maxsize=1)
def default_catalog() -> CardCatalog:
    return load_catalog(DEFAULT_CATALOG_FILE)


def generic_card(product_name: str) -> CardDefinition:
    """Baseline 1x-points definition for a card missing from the catalog."""
    return CardDefinition(
        institution_id="unknown",
        product_name=product_name,
        base_rate=RewardRate(category=SpendingCategory.EVERYTHING, rate=1.0),
    )
