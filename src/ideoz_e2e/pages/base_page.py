"""Shared plumbing for page objects."""

from __future__ import annotations

from urllib.parse import urlparse

from playwright.sync_api import Page

from ideoz_e2e.config import Settings, get_settings
from ideoz_e2e.config.logging import get_logger


class BasePage:
    """Holds the Playwright page, settings and a logger bound to the page object."""

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        self.page = page
        self.settings = settings or get_settings()
        self.log = get_logger(type(self).__module__).bind(page_object=type(self).__name__)

    def goto(self) -> None:
        """Open the application root."""
        self.page.goto(self.settings.base_url)

    def pause(self, ms: int) -> None:
        """Give the UI time to settle after an action."""
        if ms > 0:
            self.page.wait_for_timeout(ms)

    @property
    def current_path(self) -> str:
        return urlparse(self.page.url).path

    @property
    def app_host(self) -> str:
        return urlparse(self.settings.base_url).netloc
