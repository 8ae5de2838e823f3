"""
Browser test suite for the SauceDemo storefront.

The package holds the page objects, the expected-value catalog, the
suite configuration and the pytest plugin that records results. The
scenarios themselves live under ``tests/``.
"""

__version__ = "1.0.0"
