"""Currency text parsing for prices rendered as ``$29.99``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal

PRICE_PATTERN = re.compile(r"^\$(\d+\.\d{2})$")

ZERO = Decimal("0.00")


class PriceFormatError(ValueError):
    """Raised when a price label does not look like ``$<digits>.<2 digits>``."""


def parse_price(text: str | None) -> Decimal:
    """
    Parse a price label into an exact two-place decimal.

    Surrounding whitespace is ignored, anything else that deviates from
    ``$<digits>.<two digits>`` is rejected.

    Args:
        text: Label text as read from the page, e.g. ``"$29.99"``.

    Returns:
        The amount, e.g. ``Decimal("29.99")``.

    Raises:
        PriceFormatError: If the label is missing or malformed.
    """
    if text is None:
        raise PriceFormatError("Price label is missing")

    match = PRICE_PATTERN.match(text.strip())
    if not match:
        raise PriceFormatError(f"Unrecognised price label: {text!r}")
    return Decimal(match.group(1))


def format_price(amount: Decimal) -> str:
    """Render an amount the way the storefront labels it."""
    return f"${amount.quantize(ZERO)}"


def total(prices: Iterable[Decimal]) -> Decimal:
    """Exact sum of ``prices``; an empty iterable totals ``0.00``."""
    return sum(prices, ZERO)
