"""
Locator registries for the storefront pages.

Each registry maps a semantic element name to a selector.  Page objects
read selectors from here so that a markup change is a one-line edit.

``scoped_item`` is the single place where "find the row that shows this
product name, then work inside it" is expressed.  Element ids on the
storefront are derived from product names, but they are a rendering
detail and are never built by hand here.
"""

from __future__ import annotations

import re

from playwright.sync_api import Locator, Page

HEADER_LOCATORS = {
    "cart_badge": ".shopping_cart_badge",
    "cart_link": ".shopping_cart_link",
    "menu_button": "#react-burger-menu-btn",
    "logout_link": "#logout_sidebar_link",
    "page_title": ".title",
}

LOGIN_LOCATORS = {
    "username_input": "#user-name",
    "password_input": "#password",
    "login_button": "#login-button",
    "error_message": "[data-test='error']",
    "login_logo": ".login_logo",
}

INVENTORY_LOCATORS = {
    "inventory_list": ".inventory_list",
    "item": ".inventory_item",
    "item_name": ".inventory_item_name",
    "item_desc": ".inventory_item_desc",
    "item_price": ".inventory_item_price",
    "item_img": ".inventory_item_img",
    "sort_dropdown": "[data-test='product-sort-container']",
    "active_sort": ".active_option",
}

CART_LOCATORS = {
    "cart_list": ".cart_list",
    "item": ".cart_item",
    "item_name": ".inventory_item_name",
    "item_desc": ".inventory_item_desc",
    "item_price": ".inventory_item_price",
    "item_quantity": ".cart_quantity",
    "continue_shopping": "#continue-shopping",
    "checkout": "#checkout",
}

DETAIL_LOCATORS = {
    "name": ".inventory_details_name",
    "desc": ".inventory_details_desc",
    "price": ".inventory_details_price",
    "back_button": "#back-to-products",
}

ADD_TO_CART_LABEL = "Add to cart"
REMOVE_LABEL = "Remove"


def scoped_item(page: Page, container: str, name_selector: str, text: str) -> Locator:
    """
    Locate the container element that displays ``text`` in its name element.

    The returned locator is meant to be chained: ``.locator(...)`` or
    ``.get_by_role(...)`` calls on it only see descendants of the matching
    container.

    Args:
        page: Playwright page to search.
        container: Selector of the repeated row element, e.g. ``.cart_item``.
        name_selector: Selector of the name element inside each row.
        text: Display name to match exactly.

    Returns:
        Locator for the matching row (zero or more elements).
    """
    name = page.locator(name_selector).filter(has_text=_exact(text))
    return page.locator(container).filter(has=name)


def _exact(text: str) -> re.Pattern:
    return re.compile(rf"^\s*{re.escape(text)}\s*$")
