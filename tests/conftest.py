"""
Shared browser fixtures for the SauceDemo suite.

pytest-playwright provides the ``browser`` fixture (one per ``--browser``
engine).  This module overrides ``context`` and ``page`` so that every
test gets a fresh, isolated browser session configured from
``SuiteConfig``, and so that artifacts follow the configured policy:

- screenshot of the final page (``screenshot``),
- video of the session, kept only on failure by default (``video``),
- Playwright trace, recorded on the first retry by default (``trace``).

Artifacts land in ``<output_dir>/<test id>[-retryN]/``.

Key Concepts Demonstrated:
- Browser context per test for isolation (cookies, localStorage)
- Fixture teardown reading the test outcome
- Configuration passed down from one session-scoped object
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from saucedemo_suite.config import SuiteConfig
from saucedemo_suite.plugin import item_failed
from saucedemo_suite.reporting import (
    artifact_dir,
    keep_screenshot,
    keep_trace,
    keep_video,
    record_video,
    start_trace,
)

logger = logging.getLogger(__name__)


def _attempt(request: pytest.FixtureRequest) -> int:
    # pytest-rerunfailures counts executions on the item, starting at 1.
    return getattr(request.node, "execution_count", 1)


@pytest.fixture
def artifacts_path(request: pytest.FixtureRequest, suite_config: SuiteConfig) -> Path:
    """Directory for this test attempt's screenshot, video and trace."""
    return artifact_dir(suite_config.output_dir, request.node.nodeid, _attempt(request))


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args(suite_config: SuiteConfig) -> dict:
    """
    Configure browser context options.

    Returns:
        dict: Base URL, viewport and TLS settings from the suite config.
    """
    return suite_config.browser_context_args()


@pytest.fixture(scope="function")
def context(
    browser: Browser,
    browser_context_args: dict,
    suite_config: SuiteConfig,
    artifacts_path: Path,
    request: pytest.FixtureRequest,
) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context ensures test isolation: cookies, localStorage and the
    cart are never shared between tests or between retries.
    """
    context_args = dict(browser_context_args)
    if record_video(suite_config.video):
        context_args["record_video_dir"] = str(artifacts_path)
        context_args["record_video_size"] = suite_config.viewport.as_dict()

    context = browser.new_context(**context_args)
    context.set_default_timeout(suite_config.action_timeout_ms)
    context.set_default_navigation_timeout(suite_config.navigation_timeout_ms)

    tracing = start_trace(suite_config.trace, _attempt(request))
    if tracing:
        context.tracing.start(screenshots=True, snapshots=True, sources=True)

    yield context

    if tracing:
        if keep_trace(suite_config.trace, item_failed(request.node)):
            trace_path = artifacts_path / "trace.zip"
            context.tracing.stop(path=str(trace_path))
            logger.info("Trace saved: %s", trace_path)
        else:
            context.tracing.stop()
    context.close()


@pytest.fixture(scope="function")
def page(
    context: BrowserContext,
    suite_config: SuiteConfig,
    artifacts_path: Path,
    request: pytest.FixtureRequest,
) -> Generator[Page, None, None]:
    """
    Create a new page (tab) for each test.

    On teardown the final page is captured and the video is dropped
    unless the policy keeps it.
    """
    page = context.new_page()
    yield page

    failed = item_failed(request.node)
    if keep_screenshot(suite_config.screenshot, failed):
        artifacts_path.mkdir(parents=True, exist_ok=True)
        screenshot_path = artifacts_path / "screenshot.png"
        try:
            page.screenshot(path=str(screenshot_path), full_page=True)
        except Exception as exc:  # pragma: no cover - best effort capture
            logger.warning("Failed to capture screenshot: %s", exc)

    video = page.video
    page.close()
    if video is not None and not keep_video(suite_config.video, failed):
        video.delete()
