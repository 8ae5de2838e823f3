"""Cart page object against the offline storefront."""

from __future__ import annotations

from decimal import Decimal

import pytest

from saucedemo_suite.catalog import PRODUCTS, CartItem, expected_total
from saucedemo_suite.pages import CartPage, ProductsPage

pytestmark = pytest.mark.ui

THREE_ITEMS = [PRODUCTS["BACKPACK"], PRODUCTS["BIKE_LIGHT"], PRODUCTS["BOLT_TSHIRT"]]


class TestCartContents:
    """Tests for reading cart rows."""

    def test_empty_cart(self, products_page: ProductsPage, cart_page: CartPage):
        """Test the cart page with nothing added."""
        # Act
        products_page.go_to_cart()

        # Assert
        assert cart_page.is_page_loaded() is True
        assert cart_page.is_cart_empty() is True
        assert cart_page.get_cart_item_count() == 0
        assert cart_page.is_cart_badge_visible() is False
        assert cart_page.get_total_price() == Decimal("0.00")

    def test_rows_match_added_products(self, products_page: ProductsPage, cart_page: CartPage):
        """Test that cart rows carry names, prices and quantity 1."""
        # Arrange
        products_page.add_multiple_products(THREE_ITEMS)

        # Act
        products_page.go_to_cart()

        # Assert
        assert cart_page.get_cart_contents() == [
            CartItem(PRODUCTS["BACKPACK"], Decimal("29.99")),
            CartItem(PRODUCTS["BIKE_LIGHT"], Decimal("9.99")),
            CartItem(PRODUCTS["BOLT_TSHIRT"], Decimal("15.99")),
        ]
        assert cart_page.get_total_price() == Decimal("55.97")
        assert cart_page.get_total_price() == sum(cart_page.get_cart_item_prices())
        assert cart_page.get_item_quantity(PRODUCTS["BIKE_LIGHT"]) == 1
        assert cart_page.get_item_description(PRODUCTS["BACKPACK"]) != ""


class TestCartRemoval:
    """Tests for removing rows from the cart page."""

    def test_remove_item_by_name(self, products_page: ProductsPage, cart_page: CartPage):
        """Test that removing one row reduces rows and badge by one."""
        # Arrange
        products_page.add_multiple_products(THREE_ITEMS)
        products_page.go_to_cart()

        # Act
        cart_page.remove_item(PRODUCTS["BIKE_LIGHT"])

        # Assert
        assert cart_page.get_cart_item_count() == 2
        assert cart_page.get_cart_badge_count() == 2
        assert cart_page.has_item(PRODUCTS["BIKE_LIGHT"]) is False
        assert cart_page.get_total_price() == expected_total(
            [PRODUCTS["BACKPACK"], PRODUCTS["BOLT_TSHIRT"]]
        )

    def test_remove_item_by_index(self, products_page: ProductsPage, cart_page: CartPage):
        """Test that removing by position drops the row shown there."""
        # Arrange
        products_page.add_multiple_products(THREE_ITEMS)
        products_page.go_to_cart()

        # Act
        cart_page.remove_item_by_index(0)

        # Assert
        assert cart_page.get_cart_items() == THREE_ITEMS[1:]

    def test_remove_item_by_index_out_of_range(
        self, products_page: ProductsPage, cart_page: CartPage
    ):
        """Test that a missing position raises instead of clicking anything."""
        # Arrange
        products_page.go_to_cart()

        # Act / Assert
        with pytest.raises(IndexError):
            cart_page.remove_item_by_index(0)

    def test_remove_all_items(self, products_page: ProductsPage, cart_page: CartPage):
        """Test that clearing the cart hides the badge."""
        # Arrange
        products_page.add_multiple_products(THREE_ITEMS)
        products_page.go_to_cart()

        # Act
        cart_page.remove_all_items()

        # Assert
        assert cart_page.is_cart_empty() is True
        assert cart_page.is_cart_badge_visible() is False


class TestCartNavigation:
    """Tests for leaving the cart page."""

    def test_continue_shopping_keeps_cart(self, products_page: ProductsPage, cart_page: CartPage):
        """Test that a cart round trip does not change the badge."""
        # Arrange
        products_page.add_product_to_cart(PRODUCTS["BACKPACK"])
        products_page.go_to_cart()

        # Act
        cart_page.click_continue_shopping()

        # Assert
        assert products_page.is_page_loaded() is True
        assert products_page.get_cart_badge_count() == 1

    def test_checkout_opens_information_step(
        self, products_page: ProductsPage, cart_page: CartPage
    ):
        """Test that checkout leads to the customer information step."""
        # Arrange
        products_page.add_product_to_cart(PRODUCTS["ONESIE"])
        products_page.go_to_cart()

        # Act
        cart_page.click_checkout()

        # Assert
        assert cart_page.current_url.endswith("/checkout-step-one.html")
