"""Failures raised by page objects beyond Playwright's own errors."""

from __future__ import annotations


class NavigationTimeoutError(AssertionError):
    """
    Navigation never reached the expected URL pattern.

    Subclasses ``AssertionError`` so pytest reports it as a failed
    expectation, with the URL the browser was actually left on.
    """

    def __init__(self, expected: str, last_url: str, timeout_ms: float):
        self.expected = expected
        self.last_url = last_url
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Expected URL matching {expected!r} within {timeout_ms:.0f}ms, "
            f"last observed URL was {last_url!r}"
        )
