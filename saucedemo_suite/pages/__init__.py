"""
Page objects for the SauceDemo storefront.

Each page object wraps one Playwright ``Page`` (the test's browser
session) and the suite configuration, and exposes verbs that return
plain Python values for assertions.
"""

from saucedemo_suite.pages.base_page import BasePage
from saucedemo_suite.pages.cart_page import CartPage
from saucedemo_suite.pages.login_page import LoginPage
from saucedemo_suite.pages.product_detail_page import ProductDetailPage
from saucedemo_suite.pages.products_page import ProductsPage

__all__ = ["BasePage", "CartPage", "LoginPage", "ProductDetailPage", "ProductsPage"]
