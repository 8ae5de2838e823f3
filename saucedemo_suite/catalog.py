"""
Expected-value test data for the SauceDemo storefront.

Everything here is an oracle for assertions: the live page is the source
of truth, these tables are what the tests expect to find there.  The data
is tied to ``CATALOG_VERSION`` so that a change to the demo site's
inventory shows up as a deliberate data bump rather than a silent drift
of literal prices across the suite.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

CATALOG_VERSION = "2024.1"


@dataclass(frozen=True)
class Credentials:
    """A username/password pair accepted (or rejected) by the login form."""

    username: str
    password: str


@dataclass(frozen=True)
class Product:
    """A product as rendered on the inventory page."""

    name: str
    price: Decimal
    description: str = ""


@dataclass(frozen=True)
class CartItem:
    """A row on the cart page. The storefront has no quantity control."""

    name: str
    price: Decimal
    quantity: int = 1


class SortOrder(str, Enum):
    """Options of the product sort dropdown, keyed by their ``<option>`` value."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"

    @property
    def label(self) -> str:
        """Visible text of the option."""
        return _SORT_LABELS[self]

    @property
    def by_price(self) -> bool:
        return self in (SortOrder.PRICE_ASC, SortOrder.PRICE_DESC)

    @property
    def descending(self) -> bool:
        return self in (SortOrder.NAME_DESC, SortOrder.PRICE_DESC)


_SORT_LABELS = {
    SortOrder.NAME_ASC: "Name (A to Z)",
    SortOrder.NAME_DESC: "Name (Z to A)",
    SortOrder.PRICE_ASC: "Price (low to high)",
    SortOrder.PRICE_DESC: "Price (high to low)",
}

DEFAULT_SORT_ORDER = SortOrder.NAME_ASC


# -----------------------------------------------------------------------------
# Credentials
# -----------------------------------------------------------------------------

VALID_USER = Credentials(username="standard_user", password="secret_sauce")
LOCKED_OUT_USER = Credentials(username="locked_out_user", password="secret_sauce")

LOCKED_OUT_MESSAGE = "Epic sadface: Sorry, this user has been locked out."
INVALID_CREDENTIALS_MESSAGE = (
    "Epic sadface: Username and password do not match any user in this service"
)


# -----------------------------------------------------------------------------
# Products
# -----------------------------------------------------------------------------

PRODUCTS = MappingProxyType(
    {
        "BACKPACK": "Sauce Labs Backpack",
        "BIKE_LIGHT": "Sauce Labs Bike Light",
        "BOLT_TSHIRT": "Sauce Labs Bolt T-Shirt",
        "FLEECE_JACKET": "Sauce Labs Fleece Jacket",
        "ONESIE": "Sauce Labs Onesie",
        "TSHIRT_RED": "Test.allTheThings() T-Shirt (Red)",
    }
)

PRODUCT_PRICES = MappingProxyType(
    {
        PRODUCTS["BACKPACK"]: Decimal("29.99"),
        PRODUCTS["BIKE_LIGHT"]: Decimal("9.99"),
        PRODUCTS["BOLT_TSHIRT"]: Decimal("15.99"),
        PRODUCTS["FLEECE_JACKET"]: Decimal("49.99"),
        PRODUCTS["ONESIE"]: Decimal("7.99"),
        PRODUCTS["TSHIRT_RED"]: Decimal("15.99"),
    }
)

# Default document order of the inventory page (Name A to Z).
CATALOG: tuple[Product, ...] = tuple(
    Product(name=name, price=PRODUCT_PRICES[name]) for name in PRODUCTS.values()
)


def price_of(name: str) -> Decimal:
    """
    Look up the expected price of a product by display name.

    Raises:
        KeyError: If the name is not part of the catalog.
    """
    return PRODUCT_PRICES[name]


def expected_total(names) -> Decimal:
    """Exact expected cart total for the given product names."""
    return sum((price_of(name) for name in names), Decimal("0.00"))
