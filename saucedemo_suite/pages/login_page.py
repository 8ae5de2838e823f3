"""Login page object for authentication flows."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page

from saucedemo_suite.catalog import Credentials
from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.pages.base_page import BasePage
from saucedemo_suite.pages.locators import LOGIN_LOCATORS

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """
    Page object for the login page.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Reading the inline error banner
    """

    URL_PATH = "/"

    def __init__(self, page: Page, config: SuiteConfig):
        super().__init__(page, config)

    def goto(self) -> "LoginPage":
        """
        Open the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_url(f"{self.base_url}/")
        return self

    @property
    def username_input(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["username_input"])

    @property
    def password_input(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["password_input"])

    @property
    def login_button(self) -> Locator:
        return self.page.locator(LOGIN_LOCATORS["login_button"])

    @property
    def error_message(self) -> Locator:
        """Locator for the error banner shown after a rejected login."""
        return self.page.locator(LOGIN_LOCATORS["error_message"])

    def is_page_loaded(self) -> bool:
        """The login page has no title bar; the form button identifies it."""
        return self.is_visible_within(self.login_button, self.config.page_load_timeout_ms)

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Does not wait for a destination: a rejected login stays on this
        page. Use ``login_as`` for the happy path.

        Args:
            username: Username to enter.
            password: Password to enter.
        """
        logger.info("Logging in as %s", username)
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.login_button.click()

    def login_as(self, credentials: Credentials) -> None:
        """
        Log in and wait for the product listing.

        Raises:
            NavigationTimeoutError: If the inventory page is never reached.
        """
        self.login(credentials.username, credentials.password)
        self.wait_for_url("**/inventory.html")

    def get_error_message(self) -> str:
        """Text of the error banner, or an empty string when none is shown."""
        if not self.is_visible_within(self.error_message, self.config.badge_timeout_ms):
            return ""
        return (self.error_message.text_content() or "").strip()
