"""Registration dialog page object."""

from __future__ import annotations

from urllib.parse import urlparse

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ideoz_e2e.config import Settings
from ideoz_e2e.models import SubmissionState
from ideoz_e2e.pages.base_page import BasePage


class RegistrationPage(BasePage):
    """Sign-up modal opened through "Register for free"."""

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        super().__init__(page, settings)

        self.register_button = page.get_by_role("button", name="Register for free")
        self.name_input = page.get_by_placeholder("Enter your first and last name")
        self.email_input = page.get_by_placeholder("Enter your email")
        self.password_input = page.locator('input[type="password"]')
        self.submit_button = page.get_by_role("button", name="Create account", exact=True)
        self.error_message = page.locator('text="Field is required"').first
        self.validation_errors = page.locator('text="Field is required"')
        self.email_validation_tooltip = page.locator('[role="tooltip"], .tooltip')
        self.password_strength_text = page.locator(
            "text=/password should include.*character/i"
        )
        self.privacy_policy_link = page.get_by_role("link", name="privacy policy")
        self.registration_form = page.locator("form")
        self.login_link = page.get_by_role("link", name="Log in")
        self.google_sign_up_button = page.get_by_role("button", name="Create account with Google")

    def click_register_button(self) -> None:
        self.register_button.click()

    def fill_registration_form(self, name: str, email: str, password: str) -> None:
        self.name_input.fill(name)
        self.email_input.fill(email)
        self.password_input.fill(password)

    def submit_form(self) -> None:
        self.submit_button.click()

    def get_error_message(self) -> str | None:
        return self.error_message.text_content()

    def navigate_to_login(self) -> None:
        self.login_link.click()

    def click_google_sign_up(self) -> None:
        self.google_sign_up_button.click()

    def is_form_visible(self) -> bool:
        return self.registration_form.is_visible()

    def clear_all_fields(self) -> None:
        self.name_input.clear()
        self.email_input.clear()
        self.password_input.clear()

    def get_field_value(self, field: Locator) -> str:
        return field.input_value()

    def is_field_empty(self, field: Locator) -> bool:
        return field.input_value() == ""

    def get_email_validation_message(self) -> str:
        return self.email_input.evaluate("el => el.validationMessage")

    def wait_for_form_to_disappear(self, timeout_ms: int = 5_000) -> bool:
        """Return whether the form got hidden within the timeout."""
        try:
            self.registration_form.wait_for(state="hidden", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    def check_form_submission_state(self) -> SubmissionState:
        """Sample the outcome of a submit once the UI had time to react."""
        self.pause(self.settings.state_check_delay_ms)
        form_visible = self.registration_form.is_visible()
        url = self.page.url
        parsed = urlparse(url)
        redirected = parsed.netloc != self.app_host or "dashboard" in parsed.path

        self.log.info(
            "registration_state", form_visible=form_visible, url=url, redirected=redirected
        )
        return SubmissionState(form_visible=form_visible, url=url, redirected=redirected)
