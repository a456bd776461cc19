"""Playwright E2E test fixtures for the Ideoz chat application.

This module provides fixtures for:
- Browser and context setup (viewport, HTTPS errors, Accept-Language)
- A one-off warm-up of the application before the first test
- Page objects already navigated to their screen
- Per-test upload fixture directories

Usage:
    @pytest.mark.e2e
    def test_login_modal(login_dialog):
        expect(login_dialog.login_modal).to_be_visible()
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from playwright.sync_api import Browser, Page, expect

from ideoz_e2e.config import Settings, get_settings
from ideoz_e2e.files import cleanup_test_files
from ideoz_e2e.lifecycle import check_app_reachable, warm_up_app
from ideoz_e2e.pages import FileUploadPage, LoginPage, RegistrationPage

# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings for the whole e2e session."""
    return get_settings()


@pytest.fixture(scope="session")
def base_url(pytestconfig: pytest.Config, settings: Settings) -> str:
    """Application URL; --base-url on the command line wins over BASE_URL."""
    return pytestconfig.getoption("base_url", default=None) or settings.base_url


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], settings: Settings, base_url: str
) -> dict[str, Any]:
    """Configure browser context for the chat app."""
    return {
        **browser_context_args,
        "base_url": base_url,
        "viewport": settings.viewport,
        "ignore_https_errors": True,
        "extra_http_headers": {"Accept-Language": settings.accept_language},
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any], settings: Settings
) -> dict[str, Any]:
    """Configure browser launch arguments; --headed, HEADED=1 or settings.headed show the browser."""
    headed = settings.headed or os.environ.get("HEADED", "0") == "1"
    return {
        **browser_type_launch_args,
        "headless": browser_type_launch_args.get("headless", True) and not headed,
        "slow_mo": settings.slow_mo or browser_type_launch_args.get("slow_mo", 0),
    }


# =============================================================================
# Session Warm-up
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def warmed_up_app(browser: Browser, settings: Settings, base_url: str) -> str | None:
    """Check the app answers and load it once before any scenario runs.

    Raises AppUnreachableError, failing every e2e test, when the app is down.
    """
    expect.set_options(timeout=settings.expect_timeout_ms)

    if not settings.warm_up:
        return None

    check_app_reachable(base_url)
    return warm_up_app(browser, base_url)


@pytest.fixture
def configured_page(page: Page, settings: Settings) -> Page:
    """Page with the suite's default action and navigation timeouts."""
    page.set_default_timeout(settings.action_timeout_ms)
    page.set_default_navigation_timeout(settings.navigation_timeout_ms)
    return page


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def page_settings(settings: Settings, base_url: str, tmp_path: Path) -> Settings:
    """Settings for one test: resolved base URL and a private upload directory."""
    return settings.model_copy(
        update={"base_url": base_url, "test_files_dir": tmp_path / "test-files"}
    )


@pytest.fixture
def login_page(configured_page: Page, page_settings: Settings) -> LoginPage:
    """Login page object on the landing page."""
    login = LoginPage(configured_page, page_settings)
    login.goto()
    return login


@pytest.fixture
def login_dialog(login_page: LoginPage) -> LoginPage:
    """Login page object with the login modal open."""
    login_page.click_login_button()
    return login_page


@pytest.fixture
def registration_page(configured_page: Page, page_settings: Settings) -> RegistrationPage:
    """Registration page object with the sign-up modal open."""
    registration = RegistrationPage(configured_page, page_settings)
    registration.goto()
    registration.click_register_button()
    return registration


@pytest.fixture
def file_upload_page(
    configured_page: Page, page_settings: Settings
) -> Generator[FileUploadPage, None, None]:
    """Chat composer ready for attachments; generated files are removed afterwards."""
    upload = FileUploadPage(configured_page, page_settings)
    upload.navigate_to_chat()

    yield upload

    cleanup_test_files(page_settings.test_files_dir)
