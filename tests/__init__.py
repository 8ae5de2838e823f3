"""
Test suite for the SauceDemo browser suite.

This package contains:
- unit/: fast tests for pricing, ordering, config, reporting and the runner
- ui/: page objects against an offline replica of the storefront
- e2e/: login, products and cart scenarios against the live storefront
"""
