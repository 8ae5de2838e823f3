"""
Run artifacts: result records and artifact policy.

Two concerns live here:

- ``ResultRecorder`` collects one record per test (name, status,
  duration, error) and writes them as JSON at the end of the session.
  Under pytest-xdist only the controller process writes the file; worker
  reports are replayed to it by xdist.
- Artifact policy helpers decide which screenshots, videos and traces a
  test keeps, given the configured modes and the test outcome.

``saucedemo_suite.plugin`` registers the recorder when ``--results-json``
is given.
"""

from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"
ERROR = "error"


@dataclass
class TestRecord:
    """Outcome of one test after all of its attempts."""

    __test__ = False

    name: str
    status: str = PASSED
    duration: float = 0.0
    error: str | None = None
    attempts: int = 1


class ResultRecorder:
    """Accumulates ``TestReport`` objects into per-test records."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.records: dict[str, TestRecord] = {}
        self.started_at = time.time()

    def record(self, report: Any) -> None:
        """
        Fold one phase report (setup, call or teardown) into its test record.

        A ``rerun`` outcome (from pytest-rerunfailures) starts a fresh
        attempt: status, duration and error of the failed attempt are
        discarded and the attempt counter goes up.
        """
        entry = self.records.setdefault(report.nodeid, TestRecord(name=report.nodeid))

        if report.outcome == "rerun":
            entry.attempts += 1
            entry.status = PASSED
            entry.duration = 0.0
            entry.error = None
            return

        entry.duration += report.duration

        if report.failed:
            # A failure outside the test body is an error, but never
            # downgrades a failure already seen in the call phase.
            if report.when == "call":
                entry.status = FAILED
            elif entry.status != FAILED:
                entry.status = ERROR
            entry.error = report.longreprtext
        elif report.skipped and entry.status == PASSED:
            entry.status = SKIPPED
            entry.error = _skip_reason(report)

    def summary(self) -> dict[str, int]:
        counts = {PASSED: 0, FAILED: 0, SKIPPED: 0, ERROR: 0}
        for entry in self.records.values():
            counts[entry.status] += 1
        return counts

    def as_dict(self) -> dict[str, Any]:
        return {
            "created": self.started_at,
            "duration": round(time.time() - self.started_at, 3),
            "summary": self.summary(),
            "tests": [asdict(entry) for entry in self.records.values()],
        }

    def write(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(self.as_dict(), handle, indent=2)
        logger.info("Wrote %d test results to %s", len(self.records), self.path)
        return self.path

    # pytest hooks, active once the recorder is registered as a plugin

    def pytest_runtest_logreport(self, report):
        self.record(report)

    def pytest_sessionfinish(self, session):
        self.write()


def _skip_reason(report: Any) -> str | None:
    longrepr = report.longrepr
    if isinstance(longrepr, tuple) and len(longrepr) == 3:
        return str(longrepr[2])
    return None


# -----------------------------------------------------------------------------
# Artifact Policy
# -----------------------------------------------------------------------------

def keep_screenshot(mode: str, failed: bool) -> bool:
    return mode == "on" or (mode == "only-on-failure" and failed)


def record_video(mode: str) -> bool:
    return mode != "off"


def keep_video(mode: str, failed: bool) -> bool:
    return mode == "on" or (mode == "retain-on-failure" and failed)


def start_trace(mode: str, attempt: int) -> bool:
    """
    Decide whether to record a trace for this attempt (1 = first run).

    ``on-first-retry`` traces only the second attempt.
    """
    if mode == "on-first-retry":
        return attempt == 2
    return mode in ("on", "retain-on-failure")


def keep_trace(mode: str, failed: bool) -> bool:
    if mode == "retain-on-failure":
        return failed
    return mode in ("on", "on-first-retry")


def artifact_dir(output_dir: Path | str, nodeid: str, attempt: int = 1) -> Path:
    """
    Per-test artifact directory, e.g. ``test-results/tests-e2e-test_cart-py-test_x-chromium``.

    Retries get their own ``-retryN`` suffix so attempts never overwrite
    each other.
    """
    slug = re.sub(r"[^A-Za-z0-9_.]+", "-", nodeid).strip("-")
    if attempt > 1:
        slug = f"{slug}-retry{attempt - 1}"
    return Path(output_dir) / slug
