"""Playwright fixtures for E2E scenarios against the live storefront."""

from __future__ import annotations

import pytest
from playwright.sync_api import Page

from saucedemo_suite.catalog import VALID_USER
from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.live_site import wait_for_site
from saucedemo_suite.pages import CartPage, LoginPage, ProductDetailPage, ProductsPage


@pytest.fixture(scope="session")
def live_site(suite_config: SuiteConfig) -> str:
    """
    Return the storefront URL once it answers.

    The whole e2e suite is skipped when the site cannot be reached, so an
    offline machine still runs the unit and ui suites cleanly.
    """
    try:
        wait_for_site(suite_config.base_url, timeout=30)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set SAUCEDEMO_BASE_URL to a reachable storefront")
    return suite_config.base_url


@pytest.fixture
def login_page(page: Page, suite_config: SuiteConfig, live_site: str) -> LoginPage:
    return LoginPage(page, suite_config)


@pytest.fixture
def products_page(page: Page, suite_config: SuiteConfig, live_site: str) -> ProductsPage:
    return ProductsPage(page, suite_config)


@pytest.fixture
def cart_page(page: Page, suite_config: SuiteConfig, live_site: str) -> CartPage:
    return CartPage(page, suite_config)


@pytest.fixture
def detail_page(page: Page, suite_config: SuiteConfig, live_site: str) -> ProductDetailPage:
    return ProductDetailPage(page, suite_config)


@pytest.fixture
def logged_in(login_page: LoginPage, products_page: ProductsPage) -> ProductsPage:
    """Log the standard user in and hand back the product listing."""
    login_page.goto()
    login_page.login_as(VALID_USER)
    return products_page
