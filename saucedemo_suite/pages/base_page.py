"""
Base Page class for the Page Object Model.

This class provides functionality shared by all storefront page objects:
the header (cart badge, cart link, burger menu), navigation with URL
checks, presence checks that answer with booleans, and helpers that
turn repeated elements into plain Python values.

Waiting rules:
- Presence checks (``is_*``) wait a bounded time and return False.
- Navigations raise ``NavigationTimeoutError`` with the last URL seen.
- Mutations wait for their visible post-condition, never a fixed delay.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.errors import NavigationTimeoutError
from saucedemo_suite.pages.locators import HEADER_LOCATORS
from saucedemo_suite.pricing import parse_price

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance (the test's browser session).
        config: Suite configuration with base URL and timeouts.
    """

    URL_PATH = "/"
    URL_PATTERN = "**/"
    TITLE = ""

    def __init__(self, page: Page, config: SuiteConfig):
        self.page = page
        self.config = config
        self.base_url = config.base_url

    # -------------------------------------------------------------------------
    # Header Locators
    # -------------------------------------------------------------------------

    @property
    def page_title(self) -> Locator:
        """Locator for the secondary header title ("Products", "Your Cart")."""
        return self.page.locator(HEADER_LOCATORS["page_title"])

    @property
    def cart_badge(self) -> Locator:
        """Locator for the item count bubble on the cart icon."""
        return self.page.locator(HEADER_LOCATORS["cart_badge"])

    @property
    def cart_icon(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["cart_link"])

    @property
    def menu_button(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["menu_button"])

    @property
    def logout_link(self) -> Locator:
        return self.page.locator(HEADER_LOCATORS["logout_link"])

    @property
    def current_url(self) -> str:
        return self.page.url

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a path relative to the base URL.

        Args:
            path: URL path, e.g. ``/inventory.html``.
        """
        url = f"{self.base_url}{path}"
        logger.debug("Navigating to %s", url)
        self.page.goto(url)

    def wait_for_url(self, pattern: str, timeout_ms: float | None = None) -> None:
        """
        Block until the page URL matches ``pattern``.

        Args:
            pattern: Glob pattern accepted by ``Page.wait_for_url``.
            timeout_ms: Override for the configured navigation timeout.

        Raises:
            NavigationTimeoutError: If the pattern is never matched.
        """
        timeout = timeout_ms or self.config.navigation_timeout_ms
        try:
            self.page.wait_for_url(pattern, timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeoutError(pattern, self.page.url, timeout) from exc

    def goto(self):
        """Open this page directly by URL and wait until it is reached."""
        self.navigate_to(self.URL_PATH)
        self.wait_for_url(self.URL_PATTERN)
        return self

    def go_to_cart(self) -> None:
        """Open the cart through the header icon."""
        self.cart_icon.click()
        self.wait_for_url("**/cart.html")

    def logout(self) -> None:
        """Log out through the burger menu and wait for the login page."""
        self.menu_button.click()
        # The sidebar slides in; the link is clickable once it is visible.
        expect(self.logout_link).to_be_visible(timeout=self.config.action_timeout_ms)
        self.logout_link.click()
        self.wait_for_url(f"{self.base_url}/")
        logger.info("Logged out")

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def is_visible_within(self, locator: Locator, timeout_ms: float) -> bool:
        """
        Wait up to ``timeout_ms`` for ``locator`` to become visible.

        Returns:
            True if it became visible, False on timeout. Never raises for
            a missing element.
        """
        try:
            locator.first.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    def is_page_loaded(self) -> bool:
        """
        Check that the page title is visible and reads ``TITLE``.

        Returns:
            True when loaded within ``page_load_timeout_ms``.
        """
        timeout = self.config.page_load_timeout_ms
        title = self.page_title.first
        try:
            title.wait_for(state="visible", timeout=timeout)
            # The title can detach between the two calls during a navigation.
            text = title.text_content(timeout=timeout)
        except PlaywrightTimeoutError:
            return False
        return (text or "").strip() == self.TITLE

    # -------------------------------------------------------------------------
    # Cart Badge
    # -------------------------------------------------------------------------

    def get_cart_badge_count(self) -> int:
        """
        Read the number on the cart badge.

        Returns:
            Item count, or 0 when the badge does not show up within
            ``badge_timeout_ms`` (an empty cart has no badge).
        """
        if not self.is_cart_badge_visible():
            return 0
        return int((self.cart_badge.text_content() or "0").strip())

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible_within(self.cart_badge, self.config.badge_timeout_ms)

    def wait_for_cart_badge_count(self, expected: int) -> None:
        """
        Wait until the badge reflects ``expected`` items.

        A count of zero means the badge is removed from the header.
        """
        timeout = self.config.action_timeout_ms
        if expected == 0:
            expect(self.cart_badge).to_have_count(0, timeout=timeout)
        else:
            expect(self.cart_badge).to_have_text(str(expected), timeout=timeout)

    def _badge_count_now(self) -> int:
        # No waiting: callers only use this between settled states.
        if self.cart_badge.count() == 0:
            return 0
        return int((self.cart_badge.text_content() or "0").strip())

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    @staticmethod
    def read_texts(locator: Locator) -> list[str]:
        """Text of every element matching ``locator``, whitespace stripped."""
        return [text.strip() for text in locator.all_text_contents()]

    @classmethod
    def read_prices(cls, locator: Locator) -> list[Decimal]:
        """Prices of every element matching ``locator``."""
        return [parse_price(text) for text in cls.read_texts(locator)]

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> str:
        """
        Take a full-page screenshot of the current page.

        Args:
            name: Name for the screenshot file.

        Returns:
            Path to the saved screenshot.
        """
        screenshot_dir = os.path.join(self.config.output_dir, "screenshots")
        os.makedirs(screenshot_dir, exist_ok=True)
        path = os.path.join(screenshot_dir, f"{name}.png")
        self.page.screenshot(path=path, full_page=True)
        return path
