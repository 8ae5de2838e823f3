"""
Reference ordering for the product sort dropdown.

Used as an oracle: tests compute the expected sequence here and compare
it with what the page renders after a sort option is selected.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from saucedemo_suite.catalog import Product, SortOrder


def _sort_key(order: SortOrder):
    if order.by_price:
        return lambda product: product.price
    return lambda product: product.name


def sort_products(products: Sequence[Product], order: SortOrder) -> list[Product]:
    """
    Return ``products`` arranged the way ``order`` should render them.

    Ties keep their original relative order for both ascending and
    descending orders.
    """
    # reverse=True keeps equal keys in document order, it does not flip them.
    return sorted(products, key=_sort_key(order), reverse=order.descending)


def is_sorted(products: Sequence[Product], order: SortOrder) -> bool:
    """Check that adjacent products respect ``order`` (ties allowed)."""
    key = _sort_key(order)
    pairs = zip(products, products[1:])
    if order.descending:
        return all(key(left) >= key(right) for left, right in pairs)
    return all(key(left) <= key(right) for left, right in pairs)


def is_permutation(actual: Sequence[Product], expected: Sequence[Product]) -> bool:
    """True when both sequences hold the same products with the same multiplicity."""
    return Counter((p.name, p.price) for p in actual) == Counter(
        (p.name, p.price) for p in expected
    )
