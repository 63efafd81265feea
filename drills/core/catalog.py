"""Catalog Queries — rating filter and most-expensive search over plain sequences.

Invariants:
    - filter_by_rating keeps order and never mutates its input
    - Rating threshold is inclusive (rating >= min_rating)
    - get_most_expensive_product returns None for empty input
    - Price ties resolve to the earliest product (strict > comparison)

Design Decisions:
    - DEFAULT_MIN_RATING (4.0) is single source of truth for "well rated"
"""

from typing import Sequence

from drills.core.domain_types import Product, RatedItem


DEFAULT_MIN_RATING: float = 4.0


def filter_by_rating(
    items: Sequence[RatedItem], min_rating: float = DEFAULT_MIN_RATING,
) -> list[RatedItem]:
    return [item for item in items if item.rating >= min_rating]


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Linear scan; first product wins on equal prices."""
    if not products:
        return None
    best = products[0]
    for product in products[1:]:
        if product.price > best.price:
            best = product
    return best
