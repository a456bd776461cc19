"""Shared pytest configuration for the Ideoz E2E suite.

This module provides:
- Environment loading from .env
- structlog configuration for the run
- Session hooks: artifact directories at start, outcome tracking,
  run summary and artifact sizes at the end
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(user_factory):
        user = user_factory()
        assert "@" in user["email"]
"""

import pytest
from dotenv import load_dotenv

from ideoz_e2e.config import get_settings
from ideoz_e2e.config.logging import configure_logging
from ideoz_e2e.lifecycle import (
    RunStats,
    cleanup_temp_dirs,
    log_artifact_sizes,
    prepare_artifact_dirs,
    write_run_summary,
)
from tests.support.factories import UserFactory

# =============================================================================
# Session Hooks
# =============================================================================


class RunStatsPlugin:
    """Collects test outcomes and writes the run summary when the session ends."""

    def __init__(self) -> None:
        self.stats = RunStats()

    def pytest_runtest_logreport(self, report: pytest.TestReport) -> None:
        self.stats.record(report)

    def pytest_sessionfinish(self, session: pytest.Session, exitstatus: int) -> None:
        settings = get_settings()
        self.stats.finish()
        write_run_summary(self.stats, settings)

        if settings.cleanup_temp_files:
            cleanup_temp_dirs(settings.temp_dirs)

        log_artifact_sizes(settings.artifact_dirs)


def pytest_configure(config: pytest.Config) -> None:
    """Register markers, load the environment and prepare the session."""
    config.addinivalue_line("markers", "e2e: end-to-end test against the live app")
    config.addinivalue_line("markers", "unit: browser-free test")
    config.addinivalue_line("markers", "smoke: quick check that the app is usable")
    config.addinivalue_line("markers", "slow: mark test as slow running")

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()
    get_settings.cache_clear()
    configure_logging()

    # Under xdist only the controller sees every report
    if not hasattr(config, "workerinput"):
        prepare_artifact_dirs(get_settings().artifact_dirs)
        config.pluginmanager.register(RunStatsPlugin(), "ideoz-run-stats")


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def user_factory() -> type[UserFactory]:
    """Provide user factory for generating credentials."""
    return UserFactory
