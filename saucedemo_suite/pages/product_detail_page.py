"""Product detail page object (``/inventory-item.html?id=N``)."""

from __future__ import annotations

from decimal import Decimal

from playwright.sync_api import Locator

from saucedemo_suite.pages.base_page import BasePage
from saucedemo_suite.pages.locators import DETAIL_LOCATORS
from saucedemo_suite.pricing import parse_price


class ProductDetailPage(BasePage):
    """Page object for a single product's detail view."""

    URL_PATH = "/inventory-item.html"
    URL_PATTERN = "**/inventory-item.html*"

    @property
    def name_label(self) -> Locator:
        return self.page.locator(DETAIL_LOCATORS["name"])

    @property
    def description_label(self) -> Locator:
        return self.page.locator(DETAIL_LOCATORS["desc"])

    @property
    def price_label(self) -> Locator:
        return self.page.locator(DETAIL_LOCATORS["price"])

    @property
    def back_button(self) -> Locator:
        return self.page.locator(DETAIL_LOCATORS["back_button"])

    def goto(self, product_id: int) -> "ProductDetailPage":
        """
        Open the detail page of one product by its storefront id.

        Args:
            product_id: Value of the ``id`` query parameter, e.g. ``4``.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(f"{self.URL_PATH}?id={product_id}")
        self.wait_for_url(self.URL_PATTERN)
        return self

    def is_page_loaded(self) -> bool:
        """The detail view has no title bar; the product name identifies it."""
        return self.is_visible_within(self.name_label, self.config.page_load_timeout_ms)

    def get_name(self) -> str:
        return (self.name_label.text_content() or "").strip()

    def get_description(self) -> str:
        return (self.description_label.text_content() or "").strip()

    def get_price(self) -> Decimal:
        return parse_price(self.price_label.text_content())

    def back_to_products(self) -> None:
        self.back_button.click()
        self.wait_for_url("**/inventory.html")
