"""Shared fixtures for browser-free unit tests.

Page objects and the exploration helpers are exercised against a MagicMock
Playwright page: every locator factory call returns a fresh mock so each
named locator can be configured and asserted on independently.
"""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import capture_logs

from ideoz_e2e.config import Settings

LOCATOR_FACTORIES = ("locator", "get_by_role", "get_by_placeholder", "get_by_text")


def _locator_factory(factory_name: str):
    def create(*args, **kwargs):
        return MagicMock(name=f"{factory_name}{args}")

    return create


@pytest.fixture
def unit_settings(tmp_path: Path) -> Settings:
    """Settings with upload fixtures written below tmp_path."""
    return Settings(test_files_dir=tmp_path / "test-files", _env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def mock_page(unit_settings: Settings) -> MagicMock:
    """Playwright page stand-in sitting on the application root."""
    page = MagicMock(name="page")
    for factory_name in LOCATOR_FACTORIES:
        getattr(page, factory_name).side_effect = _locator_factory(factory_name)
    page.url = unit_settings.base_url
    return page


@pytest.fixture
def debug_logs() -> Generator[list[dict], None, None]:
    """Log entries captured at DEBUG; loggers must be created inside the test."""
    previous = structlog.get_config()
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG))
    with capture_logs() as entries:
        yield entries
    structlog.configure(**previous)
