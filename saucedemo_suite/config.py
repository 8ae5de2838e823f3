"""
Suite configuration.

All knobs the suite exposes live on one frozen ``SuiteConfig``.  It is
assembled once at process start from built-in defaults (local or CI),
an optional YAML file and a couple of environment variables, then handed
to the runner and to the page objects.  Nothing below reads the
environment after that point.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_CONFIG_FILE = BASE_DIR / "suite.yml"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
SCREENSHOT_MODES = ("on", "off", "only-on-failure")
VIDEO_MODES = ("on", "off", "retain-on-failure")
TRACE_MODES = ("on", "off", "on-first-retry", "retain-on-failure")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Viewport:
    width: int = 1280
    height: int = 720

    def as_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class SuiteConfig:
    """
    Settings shared by the runner, the fixtures and the page objects.

    Attributes:
        base_url: Root URL of the storefront under test.
        test_timeout_s: Hard limit for a single test.
        action_timeout_ms: Default timeout for clicks, fills and reads.
        navigation_timeout_ms: Default timeout for navigations.
        page_load_timeout_ms: Bound for ``is_page_loaded`` checks.
        badge_timeout_ms: Bound for cart badge presence checks.
        workers: ``"auto"`` or a positive number of xdist workers.
        retries: Times a failed test is re-run from a fresh context.
        browsers: Browser engines every test runs against.
        viewport: Browser viewport.
        screenshot: When to keep a screenshot of the final page.
        video: When to keep the recorded video.
        trace: When to record a Playwright trace.
        forbid_only: Reject focused runs (``-k``/node ids) in CI.
        output_dir: Per-test artifact directory.
        json_report: Path of the machine-readable result report.
        html_report_dir: Allure results directory for the human report.
    """

    base_url: str = "https://www.saucedemo.com"
    test_timeout_s: int = 60
    action_timeout_ms: int = 10_000
    navigation_timeout_ms: int = 30_000
    page_load_timeout_ms: int = 5_000
    badge_timeout_ms: int = 2_000
    workers: int | str = "auto"
    retries: int = 0
    browsers: tuple[str, ...] = SUPPORTED_BROWSERS
    viewport: Viewport = field(default_factory=Viewport)
    screenshot: str = "on"
    video: str = "retain-on-failure"
    trace: str = "on-first-retry"
    forbid_only: bool = False
    output_dir: str = "test-results"
    json_report: str = "test-results/results.json"
    html_report_dir: str = "allure-results"

    def __post_init__(self):
        _validate(self)
        # Paths are appended to base_url, so it never ends in "/".
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def for_environment(cls, ci: bool) -> "SuiteConfig":
        """
        Built-in defaults for a local run or a CI run.

        CI runs serially, retries twice and rejects focused runs.
        """
        if ci:
            return cls(workers=1, retries=2, forbid_only=True)
        return cls()

    def browser_context_args(self) -> dict[str, Any]:
        """Keyword arguments for ``Browser.new_context``."""
        return {
            "base_url": self.base_url,
            "viewport": self.viewport.as_dict(),
            "ignore_https_errors": True,
        }


def _is_int(value: Any) -> bool:
    # bool is an int subclass; "yes" in YAML must not count as 1.
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(config: SuiteConfig) -> None:
    if not isinstance(config.base_url, str) or not config.base_url.startswith(
        ("http://", "https://")
    ):
        raise ValueError(f"base_url must be an http(s) URL, got {config.base_url!r}")

    for name in (
        "test_timeout_s",
        "action_timeout_ms",
        "navigation_timeout_ms",
        "page_load_timeout_ms",
        "badge_timeout_ms",
    ):
        value = getattr(config, name)
        if not _is_int(value) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")

    if config.workers != "auto" and (not _is_int(config.workers) or config.workers < 1):
        raise ValueError(f"workers must be 'auto' or >= 1, got {config.workers!r}")
    if not _is_int(config.retries) or config.retries < 0:
        raise ValueError(f"retries must be an integer >= 0, got {config.retries!r}")

    viewport = config.viewport
    if not (_is_int(viewport.width) and _is_int(viewport.height)) or min(
        viewport.width, viewport.height
    ) <= 0:
        raise ValueError(f"viewport must have positive integer sizes, got {viewport!r}")

    if not config.browsers:
        raise ValueError("browsers must name at least one engine")
    unknown = set(config.browsers) - set(SUPPORTED_BROWSERS)
    if unknown:
        raise ValueError(f"Unsupported browsers: {', '.join(sorted(map(str, unknown)))}")

    for name, allowed in (
        ("screenshot", SCREENSHOT_MODES),
        ("video", VIDEO_MODES),
        ("trace", TRACE_MODES),
    ):
        value = getattr(config, name)
        if value not in allowed:
            raise ValueError(f"{name} must be one of {allowed}, got {value!r}")


def is_ci(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the ``CI`` variable is set to a truthy value."""
    env = os.environ if environ is None else environ
    return env.get("CI", "").strip().lower() in _TRUTHY


def _load_overrides(path: Path) -> dict[str, Any]:
    """
    Read config overrides from a YAML mapping.

    Raises:
        ValueError: If the file is not valid YAML, is not a mapping, names
            unknown fields or has a malformed ``browsers``/``viewport``.
    """
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of config fields")

    known = {f.name for f in fields(SuiteConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config fields in {path}: {', '.join(sorted(unknown))}")

    if "browsers" in data:
        browsers = data["browsers"]
        if isinstance(browsers, str):
            browsers = [browsers]
        if not isinstance(browsers, list):
            raise ValueError(f"browsers in {path} must be a list, got {browsers!r}")
        data["browsers"] = tuple(browsers)
    if "viewport" in data:
        viewport = data["viewport"]
        if not isinstance(viewport, dict):
            raise ValueError(f"viewport in {path} must be a mapping, got {viewport!r}")
        try:
            data["viewport"] = Viewport(**viewport)
        except TypeError as exc:
            raise ValueError(f"viewport in {path} accepts only width and height") from exc
    return data


def load_config(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> SuiteConfig:
    """
    Assemble the suite configuration.

    Priority (lowest to highest):
    1. Local or CI defaults, depending on ``CI``.
    2. Fields from the YAML file at ``path`` (or ``suite.yml`` at the
       project root when it exists).
    3. ``SAUCEDEMO_BASE_URL`` from the environment.

    Args:
        path: Optional YAML override file.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A validated, frozen configuration.
    """
    env = os.environ if environ is None else environ
    ci = is_ci(env)
    config = SuiteConfig.for_environment(ci)

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if path is not None or config_path.exists():
        config = replace(config, **_load_overrides(config_path))

    base_url = env.get("SAUCEDEMO_BASE_URL")
    if base_url:
        config = replace(config, base_url=base_url)

    logger.info(
        "Loaded suite config (ci=%s, workers=%s, retries=%s, browsers=%s)",
        ci,
        config.workers,
        config.retries,
        ",".join(config.browsers),
    )
    return config
