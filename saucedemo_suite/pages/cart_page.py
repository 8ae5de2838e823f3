"""
Cart Page Object.

This page object wraps the cart page reached from the header cart icon:
listing cart rows, reading their prices and quantities, removing rows by
name or position, and leaving the page.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from playwright.sync_api import Locator, Page, expect

from saucedemo_suite.catalog import CartItem
from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.pages.base_page import BasePage
from saucedemo_suite.pages.locators import CART_LOCATORS, REMOVE_LABEL, scoped_item
from saucedemo_suite.pricing import parse_price, total

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """
    Page object for the cart page.

    Provides methods for:
    - Reading cart rows (names, prices, quantities, descriptions)
    - Removing rows
    - Continuing to shop or to checkout
    """

    URL_PATH = "/cart.html"
    URL_PATTERN = "**/cart.html"
    TITLE = "Your Cart"

    def __init__(self, page: Page, config: SuiteConfig):
        super().__init__(page, config)

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def cart_list(self) -> Locator:
        return self.page.locator(CART_LOCATORS["cart_list"])

    @property
    def cart_items(self) -> Locator:
        """Locator for every cart row."""
        return self.page.locator(CART_LOCATORS["item"])

    @property
    def item_names(self) -> Locator:
        return self.cart_items.locator(CART_LOCATORS["item_name"])

    @property
    def item_prices(self) -> Locator:
        return self.cart_items.locator(CART_LOCATORS["item_price"])

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.locator(CART_LOCATORS["continue_shopping"])

    @property
    def checkout_button(self) -> Locator:
        return self.page.locator(CART_LOCATORS["checkout"])

    def cart_item(self, item_name: str) -> Locator:
        """Locator for the cart row showing ``item_name``."""
        return scoped_item(
            self.page, CART_LOCATORS["item"], CART_LOCATORS["item_name"], item_name
        )

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def click_continue_shopping(self) -> None:
        """Go back to the product listing."""
        self.continue_shopping_button.click()
        self.wait_for_url("**/inventory.html")

    def click_checkout(self) -> None:
        """Start checkout; lands on the customer information step."""
        self.checkout_button.click()
        self.wait_for_url("**/checkout-step-one.html")

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def is_cart_empty(self) -> bool:
        return self.cart_items.count() == 0

    def has_item(self, item_name: str) -> bool:
        return item_name in self.get_cart_items()

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_cart_item_count(self) -> int:
        return self.cart_items.count()

    def get_cart_items(self) -> list[str]:
        """
        Names of the cart rows in display order.

        Returns:
            e.g. ``["Sauce Labs Backpack", "Sauce Labs Bike Light"]``.
        """
        return self.read_texts(self.item_names)

    def get_cart_item_prices(self) -> list[Decimal]:
        return self.read_prices(self.item_prices)

    def get_total_price(self) -> Decimal:
        """Exact sum of the row prices; ``0.00`` for an empty cart."""
        return total(self.get_cart_item_prices())

    def get_cart_contents(self) -> list[CartItem]:
        """Every cart row as a ``CartItem``."""
        contents = []
        for row in self.cart_items.all():
            name = row.locator(CART_LOCATORS["item_name"]).text_content() or ""
            price = row.locator(CART_LOCATORS["item_price"]).text_content()
            quantity = row.locator(CART_LOCATORS["item_quantity"]).text_content() or "1"
            contents.append(
                CartItem(name=name.strip(), price=parse_price(price), quantity=int(quantity))
            )
        return contents

    def get_item_price(self, item_name: str) -> Decimal:
        row = self.cart_item(item_name)
        return parse_price(row.locator(CART_LOCATORS["item_price"]).text_content())

    def get_item_quantity(self, item_name: str) -> int:
        """Quantity column of a row; always 1 on this storefront."""
        row = self.cart_item(item_name)
        return int((row.locator(CART_LOCATORS["item_quantity"]).text_content() or "").strip())

    def get_item_description(self, item_name: str) -> str:
        row = self.cart_item(item_name)
        return (row.locator(CART_LOCATORS["item_desc"]).text_content() or "").strip()

    # -------------------------------------------------------------------------
    # Removing Items
    # -------------------------------------------------------------------------

    def remove_item(self, item_name: str) -> None:
        """
        Remove the row of ``item_name`` and wait for it to be detached.

        The badge is also awaited so the next read sees the new count.
        """
        before = self._badge_count_now()
        row = self.cart_item(item_name)
        row.get_by_role("button", name=REMOVE_LABEL, exact=True).click()
        expect(row).to_have_count(0, timeout=self.config.action_timeout_ms)
        self.wait_for_cart_badge_count(max(before - 1, 0))
        logger.info("Removed %r from cart page", item_name)

    def remove_multiple_items(self, item_names: Iterable[str]) -> None:
        for item_name in item_names:
            self.remove_item(item_name)

    def remove_all_items(self) -> None:
        for item_name in self.get_cart_items():
            self.remove_item(item_name)

    def remove_item_by_index(self, index: int) -> None:
        """
        Remove the row at ``index`` (0-based, display order).

        Raises:
            IndexError: If there is no row at ``index``.
        """
        names = self.get_cart_items()
        if not 0 <= index < len(names):
            raise IndexError(f"No cart row at index {index} ({len(names)} rows)")
        self.remove_item(names[index])
