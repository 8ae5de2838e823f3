"""
pytest integration for the suite.

Loaded through ``addopts = "-p saucedemo_suite.plugin"`` so that its
command line options exist before any conftest is collected.  It owns:

- ``--suite-config`` and the session-scoped ``suite_config`` fixture,
- ``--results-json`` and the ``ResultRecorder`` registration,
- the per-phase report stash that artifact fixtures read at teardown.
"""

from __future__ import annotations

import pytest

from saucedemo_suite.config import SuiteConfig, load_config
from saucedemo_suite.reporting import ResultRecorder

RESULTS_PLUGIN_NAME = "saucedemo-results-json"

phase_report_key = pytest.StashKey[dict[str, pytest.TestReport]]()


def pytest_addoption(parser):
    group = parser.getgroup("saucedemo", "SauceDemo suite")
    group.addoption(
        "--suite-config",
        action="store",
        default=None,
        metavar="PATH",
        help="YAML file overriding suite configuration fields",
    )
    group.addoption(
        "--results-json",
        action="store",
        default=None,
        metavar="PATH",
        help="Write one JSON record per test (name, status, duration, error) to PATH",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a browser")
    config.addinivalue_line("markers", "ui: page objects against the offline storefront replica")
    config.addinivalue_line("markers", "e2e: scenarios against the live storefront")
    config.addinivalue_line("markers", "smoke: critical path subset of the e2e suite")

    path = config.getoption("--results-json")
    # Only the controller writes; xdist workers expose ``workerinput``.
    if path and not hasattr(config, "workerinput"):
        config.pluginmanager.register(ResultRecorder(path), RESULTS_PLUGIN_NAME)


def pytest_unconfigure(config):
    recorder = config.pluginmanager.get_plugin(RESULTS_PLUGIN_NAME)
    if recorder is not None:
        config.pluginmanager.unregister(recorder)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    item.stash.setdefault(phase_report_key, {})[report.when] = report


def item_failed(item) -> bool:
    """True when the setup or call phase of ``item`` failed."""
    reports = item.stash.get(phase_report_key, {})
    return any(report.failed for report in reports.values())


@pytest.fixture(scope="session")
def suite_config(pytestconfig) -> SuiteConfig:
    """Configuration assembled once per process (once per xdist worker)."""
    return load_config(pytestconfig.getoption("--suite-config"))
