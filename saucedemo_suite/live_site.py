"""Reachability checks for the storefront before browser suites start."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the storefront login page answers with 200."""
    try:
        response = requests.get(f"{url}/", timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Storefront at %s unreachable: %s", url, exc)
        return False
    return response.status_code == 200


def wait_for_site(url: str, timeout: int = 30, interval: int = 2) -> None:
    """
    Poll the storefront until it answers or ``timeout`` seconds pass.

    Raises:
        RuntimeError: If the site never answered with 200.
    """
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            logger.info("Storefront at %s is reachable", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Storefront at {url} not reachable after {timeout}s")
