"""Manual probing of the live UI.

Used when the application's markup changes and locators need to be
re-discovered: each probe opens a screen, records which controls it can
find and saves screenshots along the way.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from playwright.sync_api import Page

from ideoz_e2e.config.logging import get_logger
from ideoz_e2e.pages.file_upload_page import FileUploadPage

log = get_logger(__name__)

LOGIN_PATTERN = re.compile(r"login", re.IGNORECASE)
SUBMIT_PATTERN = re.compile(r"log in|login|sign in", re.IGNORECASE)
DROP_ZONE_SELECTOR = '[data-testid*="drop"], [data-drop], .drop-zone, [ondrop]'


def _screenshot(page: Page, screenshot_dir: Path, name: str) -> str:
    screenshot_dir.mkdir(parents=True, exist_ok=True)
    path = screenshot_dir / name
    page.screenshot(path=str(path))
    log.info("screenshot_saved", path=str(path))
    return str(path)


def explore_login(page: Page, base_url: str, screenshot_dir: str | Path) -> dict[str, Any]:
    """Find the login entry point, open it and report which controls render."""
    screenshot_dir = Path(screenshot_dir)
    findings: dict[str, Any] = {"screenshots": []}

    page.goto(base_url)
    page.wait_for_load_state("networkidle")
    findings["screenshots"].append(_screenshot(page, screenshot_dir, "homepage.png"))

    login_button = page.get_by_role("button", name=LOGIN_PATTERN)
    login_link = page.get_by_role("link", name=LOGIN_PATTERN)

    if login_button.first.is_visible():
        findings["login_entry"] = "button"
        entry = login_button.first
    elif login_link.first.is_visible():
        findings["login_entry"] = "link"
        entry = login_link.first
    else:
        findings["login_entry"] = "text"
        entry = page.get_by_text("Login").first

    entry.click()
    page.wait_for_timeout(2_000)
    findings["screenshots"].append(_screenshot(page, screenshot_dir, "login-form.png"))

    findings["email_input"] = page.get_by_role("textbox", name=re.compile("email", re.I)).is_visible()
    findings["password_input"] = page.get_by_placeholder(re.compile("password", re.I)).is_visible()
    findings["submit_button"] = page.get_by_role("button", name=SUBMIT_PATTERN).first.is_visible()
    findings["google_login"] = page.get_by_text(re.compile("google", re.I)).first.is_visible()
    findings["facebook_login"] = page.get_by_text(re.compile("facebook", re.I)).first.is_visible()

    log.info("login_explored", **{k: v for k, v in findings.items() if k != "screenshots"})
    return findings


def explore_file_upload(page: Page, base_url: str, screenshot_dir: str | Path) -> dict[str, Any]:
    """Open the chat composer and report how attachments can be added."""
    screenshot_dir = Path(screenshot_dir)
    findings: dict[str, Any] = {"screenshots": []}

    upload_page = FileUploadPage(page)
    page.goto(base_url)
    page.wait_for_load_state("networkidle")
    upload_page.chat_textarea.click()
    findings["chat_placeholder"] = upload_page.chat_textarea.get_attribute("placeholder")

    findings["attach_button"] = upload_page.attach_button.is_visible()
    upload_page.trigger_file_upload()
    findings["screenshots"].append(_screenshot(page, screenshot_dir, "after-attach-click.png"))

    findings["file_inputs"] = upload_page.file_input.count()
    findings["file_input_visible"] = upload_page.file_input.first.is_visible()
    if findings["file_inputs"]:
        findings["accept"] = upload_page.file_input.first.get_attribute("accept")
        findings["multiple"] = upload_page.file_input.first.get_attribute("multiple") is not None

    findings["drop_zones"] = page.locator(DROP_ZONE_SELECTOR).count()

    upload_page.simulate_drag_enter("test.txt", "text/plain")
    findings["drop_message_visible"] = upload_page.drop_message.is_visible()
    findings["screenshots"].append(_screenshot(page, screenshot_dir, "during-drag.png"))

    log.info("file_upload_explored", **{k: v for k, v in findings.items() if k != "screenshots"})
    return findings
