"""Session setup and teardown for the E2E run.

Setup creates the artifact directories and makes sure the application
answers before any browser test starts. Teardown writes a run summary,
optionally removes scratch directories and logs how much disk the
artifacts use.
"""

from __future__ import annotations

import json
import platform
import shutil
import sys
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import httpx
from playwright.sync_api import Browser

from ideoz_e2e.config import Settings
from ideoz_e2e.config.logging import get_logger
from ideoz_e2e.core.exceptions import AppUnreachableError
from ideoz_e2e.helpers import directory_size, format_bytes

log = get_logger(__name__)


# =============================================================================
# Setup
# =============================================================================


def prepare_artifact_dirs(directories: list[str]) -> list[Path]:
    """Create missing artifact directories. Returns the ones created."""
    created = []
    for name in directories:
        path = Path(name)
        if not path.exists():
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
            log.info("artifact_dir_created", path=str(path))
    return created


def check_app_reachable(url: str, timeout: float = 10.0) -> int:
    """
    Probe the application over plain HTTP.

    Returns:
        HTTP status code of the response

    Raises:
        AppUnreachableError: On transport errors or a 5xx response
    """
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url)
    except httpx.HTTPError as e:
        raise AppUnreachableError(url=url, message=str(e)) from e

    if response.status_code >= 500:
        raise AppUnreachableError(
            url=url,
            message=f"Server error {response.status_code}",
            status_code=response.status_code,
        )

    log.info("app_reachable", url=url, status_code=response.status_code)
    return response.status_code


def warm_up_app(browser: Browser, url: str) -> str:
    """Load the app once in a throwaway page so the first test hits a warm server."""
    page = browser.new_page()
    try:
        page.goto(url)
        page.wait_for_load_state("networkidle")
        title = page.title()
    finally:
        page.close()

    log.info("app_warmed_up", url=url, title=title)
    return title


def environment_info(settings: Settings) -> dict[str, Any]:
    return {
        "base_url": settings.base_url,
        "environment": settings.environment,
        "ci": settings.ci,
        "python": platform.python_version(),
        "platform": sys.platform,
    }


# =============================================================================
# Outcome tracking
# =============================================================================


@dataclass
class RunStats:
    """Outcome counters fed from pytest test reports."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    started_at: float = field(default_factory=time.monotonic)
    duration_seconds: float = 0.0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped + self.errors

    def record(self, report: Any) -> None:
        """
        Count one pytest report.

        The call phase decides pass/fail; setup and teardown only count when
        they fail (as errors) or skip the test.
        """
        if report.when == "call":
            if report.passed:
                self.passed += 1
            elif report.failed:
                self.failed += 1
            elif report.skipped:
                self.skipped += 1
        elif report.failed:
            self.errors += 1
        elif report.when == "setup" and report.skipped:
            self.skipped += 1

    def finish(self) -> None:
        self.duration_seconds = round(time.monotonic() - self.started_at, 3)

    def as_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "errors": self.errors,
            "duration_seconds": self.duration_seconds,
        }


# =============================================================================
# Teardown
# =============================================================================


def write_run_summary(stats: RunStats, settings: Settings, path: str | Path | None = None) -> Path:
    """Write the run summary JSON next to the other results."""
    summary_path = Path(path) if path is not None else settings.results_dir / "summary.json"
    summary = {
        "timestamp": datetime.now(UTC).isoformat(),
        "stats": stats.as_dict(),
        "environment": environment_info(settings),
    }

    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")

    log.info("run_summary_written", path=str(summary_path), **stats.as_dict())
    return summary_path


def cleanup_temp_dirs(directories: list[str]) -> list[Path]:
    """Remove scratch directories. Returns the ones removed."""
    removed = []
    for name in directories:
        path = Path(name)
        if path.exists():
            shutil.rmtree(path, ignore_errors=True)
            removed.append(path)
            log.info("temp_dir_removed", path=str(path))
    return removed


def log_artifact_sizes(directories: list[str]) -> dict[str, str]:
    """Disk usage of each existing artifact directory."""
    sizes = {}
    for name in directories:
        if Path(name).is_dir():
            sizes[name] = format_bytes(directory_size(name))
    log.info("artifact_sizes", sizes=sizes)
    return sizes
