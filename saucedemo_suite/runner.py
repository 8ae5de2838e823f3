"""
Command line entry point for the browser suite.

Turns one ``SuiteConfig`` into a pytest invocation: worker count
(pytest-xdist), retries (pytest-rerunfailures), per-test timeout
(pytest-timeout), browser engines (pytest-playwright), the JSON result
file and the Allure results directory.

Exit codes are pytest's own, so CI can gate on them directly:

- ``0``: every test passed (after retries)
- ``1``: at least one test failed after exhausting its retries
- ``4``: usage error, including a focused run while ``forbid_only`` is set

Usage::

    python -m saucedemo_suite                      # whole suite
    python -m saucedemo_suite -- -m smoke          # extra pytest args
    CI=1 python -m saucedemo_suite                 # CI defaults
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

from saucedemo_suite.config import SuiteConfig, load_config

logger = logging.getLogger(__name__)

EXIT_USAGE_ERROR = int(pytest.ExitCode.USAGE_ERROR)

DEFAULT_TEST_PATH = "tests"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the suite runner."""
    parser = argparse.ArgumentParser(
        prog="saucedemo_suite",
        description="Run the SauceDemo browser suite.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file overriding suite configuration fields",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show browser windows instead of running headless",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level for the runner and page objects",
    )
    parser.add_argument(
        "pytest_args",
        nargs=argparse.REMAINDER,
        help="Arguments after '--' are passed to pytest unchanged",
    )
    args = parser.parse_args(argv)
    if args.pytest_args and args.pytest_args[0] == "--":
        args.pytest_args = args.pytest_args[1:]
    return args


def is_focused(pytest_args: Sequence[str]) -> bool:
    """
    True when the extra arguments narrow the run to a subset of tests.

    Marker selection (``-m``) is not focusing; it is how CI picks suites.
    """
    for arg in pytest_args:
        if arg.startswith(("-k", "--deselect")):
            return True
        if "::" in arg:
            return True
    return False


def _is_test_path(arg: str) -> bool:
    if arg.startswith("-"):
        return False
    return Path(arg.split("::")[0]).exists()


def build_pytest_args(
    config: SuiteConfig,
    extra: Sequence[str] = (),
    config_path: Path | None = None,
    headed: bool = False,
) -> list[str]:
    """
    Translate the configuration into pytest command line arguments.

    Args:
        config: Assembled suite configuration.
        extra: Additional pytest arguments, appended last.
        config_path: YAML file to forward so that workers load the same
            overrides.
        headed: Run browsers with a visible window.

    Returns:
        Arguments for ``pytest.main``.
    """
    args: list[str] = []

    if not any(_is_test_path(arg) for arg in extra):
        args.append(DEFAULT_TEST_PATH)

    args += ["-n", str(config.workers)]
    if config.retries > 0:
        args += ["--reruns", str(config.retries)]
    args += ["--timeout", str(config.test_timeout_s)]

    for browser in config.browsers:
        args += ["--browser", browser]
    if headed:
        args.append("--headed")

    args += ["--results-json", config.json_report]
    args += ["--alluredir", config.html_report_dir]
    if config_path is not None:
        args += ["--suite-config", str(config_path)]

    args += list(extra)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the suite and return pytest's exit code."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        logger.error("Invalid suite configuration: %s", exc)
        return EXIT_USAGE_ERROR

    if config.forbid_only and is_focused(args.pytest_args):
        logger.error("Focused runs are not allowed here (forbid_only is set)")
        return EXIT_USAGE_ERROR

    pytest_args = build_pytest_args(
        config, args.pytest_args, config_path=args.config, headed=args.headed
    )
    logger.info("Running pytest %s", " ".join(pytest_args))
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    sys.exit(main())
