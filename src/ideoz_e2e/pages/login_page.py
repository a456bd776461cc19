"""Login dialog page object."""

from __future__ import annotations

import re
import time
from urllib.parse import urlparse

from playwright.sync_api import Page

from ideoz_e2e.config import Settings
from ideoz_e2e.models import LoginState, PasswordFieldSecurity
from ideoz_e2e.pages.base_page import BasePage

LOGGED_IN_PATH = re.compile(r"dashboard|app|home")


class LoginPage(BasePage):
    """Login modal opened from the landing page header."""

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        super().__init__(page, settings)

        # Main login elements
        self.login_button = page.get_by_role("button", name="Login").first
        self.email_input = page.get_by_placeholder("Enter your email")
        self.password_input = page.get_by_placeholder("Enter your password")
        self.submit_button = page.get_by_role("button", name="Login", exact=True)
        self.google_login_button = page.get_by_role("button", name="Login with Google")
        self.sign_up_link = page.get_by_text("Sign up")

        # Form and modal elements
        self.login_modal = page.locator('[role="dialog"]')
        self.login_form = page.locator("form")
        self.password_toggle = page.locator("button").filter(has=page.locator("svg")).last

        # Error and validation elements
        self.error_message = page.locator('[role="alert"], .error-message, .alert-error')
        self.validation_errors = page.locator('text="Field is required"')
        self.email_validation_error = page.locator("text=/invalid email|enter a valid email/i")

        # Navigation elements
        self.home_link = page.get_by_role("link", name="ideoz.")
        self.register_button = page.get_by_role("button", name="Register for free")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click_login_button(self) -> None:
        self.login_button.click()

    def fill_login_form(self, email: str | None = None, password: str | None = None) -> None:
        """Fill only the fields that were given."""
        if email is not None:
            self.email_input.fill(email)
        if password is not None:
            self.password_input.fill(password)

    def submit_login(self) -> None:
        self.submit_button.click()

    def login(self, email: str | None = None, password: str | None = None) -> None:
        self.fill_login_form(email=email, password=password)
        self.submit_login()

    def click_google_login(self) -> None:
        self.google_login_button.click()

    def click_sign_up(self) -> None:
        self.sign_up_link.click()

    def toggle_password_visibility(self) -> None:
        self.password_toggle.click()

    def clear_fields(self) -> None:
        self.email_input.clear()
        self.password_input.clear()

    def submit_with_keyboard(self) -> None:
        """Submit the form with Enter from the email field."""
        self.email_input.focus()
        self.page.keyboard.press("Enter")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_login_modal_visible(self) -> bool:
        return self.login_modal.is_visible()

    def is_login_form_visible(self) -> bool:
        return self.login_form.is_visible()

    def get_email_value(self) -> str:
        return self.email_input.input_value()

    def get_password_value(self) -> str:
        return self.password_input.input_value()

    def is_password_visible(self) -> bool:
        return self.password_input.get_attribute("type") == "text"

    def get_error_message(self) -> str | None:
        return self.error_message.text_content()

    def has_validation_errors(self) -> bool:
        return self.validation_errors.is_visible()

    def get_email_validation_message(self) -> str:
        """Browser constraint-validation message of the email field."""
        return self.email_input.evaluate("el => el.validationMessage")

    def wait_for_login_success(self, timeout_ms: int | None = None) -> None:
        """Wait until the URL path shows a signed-in area."""
        self.page.wait_for_url(
            lambda url: bool(LOGGED_IN_PATH.search(urlparse(url).path)),
            timeout=timeout_ms if timeout_ms is not None else self.settings.login_success_timeout_ms,
        )

    def check_login_state(self) -> LoginState:
        """Sample the outcome of a submit once the UI had time to react.

        Only the URL path is inspected: the test host itself contains "app".
        """
        self.pause(self.settings.state_check_delay_ms)
        modal_visible = self.is_login_modal_visible()
        url = self.page.url
        path = self.current_path
        logged_in = "dashboard" in path or "app" in path or not modal_visible

        self.log.info("login_state", modal_visible=modal_visible, url=url, logged_in=logged_in)
        return LoginState(modal_visible=modal_visible, url=url, logged_in=logged_in)

    def check_password_field_security(self) -> PasswordFieldSecurity:
        input_type = self.password_input.get_attribute("type")
        autocomplete = self.password_input.get_attribute("autocomplete")
        return PasswordFieldSecurity(
            is_password_type=input_type == "password",
            has_autocomplete=autocomplete is not None,
        )

    def measure_login_speed(self) -> int:
        """Milliseconds from submit click until the network goes idle."""
        start = time.monotonic()
        self.submit_button.click()
        self.page.wait_for_load_state("networkidle")
        elapsed_ms = int((time.monotonic() - start) * 1000)

        self.log.info("login_speed_measured", elapsed_ms=elapsed_ms)
        return elapsed_ms
