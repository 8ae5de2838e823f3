"""
Fixtures for page-object tests against the offline storefront replica.

Every request made by the browser context is answered by
``tests.ui.storefront``, so these tests need a Playwright browser but no
network.  They exercise the same page objects as the e2e suite.
"""

from __future__ import annotations

import pytest
from playwright.sync_api import BrowserContext

from saucedemo_suite.catalog import VALID_USER
from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.pages import CartPage, LoginPage, ProductDetailPage, ProductsPage
from tests.ui import storefront


@pytest.fixture(autouse=True)
def offline_storefront(context: BrowserContext) -> None:
    """Route every request of the test's context to the replica."""
    context.route("**/*", storefront.handle)


@pytest.fixture
def login_page(page, suite_config: SuiteConfig) -> LoginPage:
    """LoginPage opened on the replica's login form."""
    return LoginPage(page, suite_config).goto()


@pytest.fixture
def products_page(login_page: LoginPage, page, suite_config: SuiteConfig) -> ProductsPage:
    """ProductsPage after a successful login."""
    login_page.login_as(VALID_USER)
    return ProductsPage(page, suite_config)


@pytest.fixture
def cart_page(page, suite_config: SuiteConfig) -> CartPage:
    return CartPage(page, suite_config)


@pytest.fixture
def detail_page(page, suite_config: SuiteConfig) -> ProductDetailPage:
    return ProductDetailPage(page, suite_config)
