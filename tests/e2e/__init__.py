"""
End-to-end scenarios for the SauceDemo storefront.

These tests drive real browsers against the live site and demonstrate:
- Page Object Model (POM) pattern
- Condition-based waits instead of fixed sleeps
- Name-scoped locators for per-product actions
- Exact decimal assertions on prices and totals
"""
