"""
Products Page Object.

This page object encapsulates the inventory page shown after login:
reading the product grid, sorting it, and adding or removing products
from the cart by their display name.

Every by-name action first narrows the page to the product's own
``.inventory_item`` row (see ``scoped_item``) and then acts inside it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from playwright.sync_api import Locator, Page, expect

from saucedemo_suite.catalog import Product, SortOrder
from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.pages.base_page import BasePage
from saucedemo_suite.pages.locators import (
    ADD_TO_CART_LABEL,
    INVENTORY_LOCATORS,
    REMOVE_LABEL,
    scoped_item,
)
from saucedemo_suite.pricing import parse_price

logger = logging.getLogger(__name__)


class ProductsPage(BasePage):
    """
    Page object for the inventory (products) page.

    Provides methods for:
    - Reading product names, prices and descriptions
    - Sorting products
    - Adding and removing products by name
    - Opening a product's detail page
    """

    URL_PATH = "/inventory.html"
    URL_PATTERN = "**/inventory.html"
    TITLE = "Products"

    def __init__(self, page: Page, config: SuiteConfig):
        super().__init__(page, config)

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def inventory_container(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["inventory_list"])

    @property
    def product_items(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item"])

    @property
    def product_names(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item_name"])

    @property
    def product_descriptions(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item_desc"])

    @property
    def product_prices(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item_price"])

    @property
    def product_images(self) -> Locator:
        return self.page.locator(INVENTORY_LOCATORS["item_img"])

    @property
    def sort_dropdown(self) -> Locator:
        """Locator for the sort ``<select>``."""
        return self.page.locator(INVENTORY_LOCATORS["sort_dropdown"])

    @property
    def active_sort_label(self) -> Locator:
        """Locator for the label that mirrors the selected sort option."""
        return self.page.locator(INVENTORY_LOCATORS["active_sort"])

    def product_item(self, product_name: str) -> Locator:
        """Locator for the grid row showing ``product_name``."""
        return scoped_item(
            self.page,
            INVENTORY_LOCATORS["item"],
            INVENTORY_LOCATORS["item_name"],
            product_name,
        )

    def _button_in(self, product_name: str, label: str) -> Locator:
        return self.product_item(product_name).get_by_role("button", name=label, exact=True)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def is_page_loaded(self) -> bool:
        """True when the title reads "Products" and the grid is visible."""
        if not super().is_page_loaded():
            return False
        return self.is_visible_within(
            self.inventory_container, self.config.page_load_timeout_ms
        )

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_product_count(self) -> int:
        return self.product_items.count()

    def get_product_names(self) -> list[str]:
        """Names in display order."""
        return self.read_texts(self.product_names)

    def get_product_descriptions(self) -> list[str]:
        return self.read_texts(self.product_descriptions)

    def get_price_labels(self) -> list[str]:
        """Raw price labels in display order, e.g. ``["$29.99", ...]``."""
        return self.read_texts(self.product_prices)

    def get_product_prices(self) -> list[Decimal]:
        """Prices in display order."""
        return self.read_prices(self.product_prices)

    def get_products(self) -> list[Product]:
        """
        Read the whole grid row by row.

        Returns:
            Products in display order; empty if the grid has no rows.
        """
        products = []
        for row in self.product_items.all():
            name = row.locator(INVENTORY_LOCATORS["item_name"]).text_content() or ""
            price = row.locator(INVENTORY_LOCATORS["item_price"]).text_content()
            desc = row.locator(INVENTORY_LOCATORS["item_desc"]).text_content() or ""
            products.append(
                Product(name=name.strip(), price=parse_price(price), description=desc.strip())
            )
        return products

    def get_product_price(self, product_name: str) -> Decimal:
        """Price shown in the row of ``product_name``."""
        row = self.product_item(product_name)
        return parse_price(row.locator(INVENTORY_LOCATORS["item_price"]).text_content())

    def get_image_count(self) -> int:
        """Number of product images that are currently visible."""
        return sum(1 for image in self.product_images.all() if image.is_visible())

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sort_products(self, order: SortOrder | str) -> "ProductsPage":
        """
        Select a sort option and wait for the dropdown to settle on it.

        Selecting the current option again is a no-op for the grid.

        Args:
            order: SortOrder or its option value (``az``, ``za``, ``lohi``, ``hilo``).

        Returns:
            Self for method chaining.
        """
        order = SortOrder(order)
        logger.debug("Sorting products by %s", order.label)
        self.sort_dropdown.select_option(order.value)
        timeout = self.config.action_timeout_ms
        expect(self.sort_dropdown).to_have_value(order.value, timeout=timeout)
        expect(self.active_sort_label).to_have_text(order.label, timeout=timeout)
        return self

    def get_current_sort_option(self) -> SortOrder:
        return SortOrder(self.sort_dropdown.input_value())

    def get_active_sort_label(self) -> str:
        return (self.active_sort_label.text_content() or "").strip()

    # -------------------------------------------------------------------------
    # Product Interaction
    # -------------------------------------------------------------------------

    def click_product_name(self, product_name: str) -> None:
        """Open the detail page of ``product_name``."""
        self.product_item(product_name).locator(INVENTORY_LOCATORS["item_name"]).click()
        self.wait_for_url("**/inventory-item.html*")

    def add_product_to_cart(self, product_name: str) -> None:
        """
        Click "Add to cart" in the row of ``product_name``.

        Waits until the row's button reads "Remove" and the badge shows
        one more item than before.
        """
        before = self._badge_count_now()
        self._button_in(product_name, ADD_TO_CART_LABEL).click()
        expect(self._button_in(product_name, REMOVE_LABEL)).to_be_visible(
            timeout=self.config.action_timeout_ms
        )
        self.wait_for_cart_badge_count(before + 1)
        logger.info("Added %r to cart (badge %d -> %d)", product_name, before, before + 1)

    def add_multiple_products(self, product_names: Iterable[str]) -> None:
        for product_name in product_names:
            self.add_product_to_cart(product_name)

    def remove_product_from_cart(self, product_name: str) -> None:
        """
        Click "Remove" in the row of ``product_name``.

        Waits until the row's button reads "Add to cart" again and the
        badge shows one item fewer (or disappears).
        """
        before = self._badge_count_now()
        self._button_in(product_name, REMOVE_LABEL).click()
        expect(self._button_in(product_name, ADD_TO_CART_LABEL)).to_be_visible(
            timeout=self.config.action_timeout_ms
        )
        self.wait_for_cart_badge_count(max(before - 1, 0))
        logger.info("Removed %r from cart", product_name)

    def is_product_in_cart(self, product_name: str) -> bool:
        """True when the row of ``product_name`` offers "Remove"."""
        return self.is_visible_within(
            self._button_in(product_name, REMOVE_LABEL), self.config.badge_timeout_ms
        )
