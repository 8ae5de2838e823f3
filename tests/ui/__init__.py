"""
Page-object tests against an offline replica of the storefront.

These run a real browser through Playwright but answer every request
locally, so they check locator registries, name scoping and the
post-action waits without depending on the live site.
"""
