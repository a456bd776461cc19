"""Chat composer page object: attachments, drag-and-drop and AI replies."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ideoz_e2e.config import Settings
from ideoz_e2e.files import (
    FileType,
    create_test_file,
    get_supported_file_types,
    get_unsupported_file_types,
    mime_type_for,
    validate_file_size,
)
from ideoz_e2e.helpers import poll_locator_visible
from ideoz_e2e.pages.base_page import BasePage

DROP_MESSAGE = re.compile(r"drop.*file", re.IGNORECASE)

# Builds a DataTransfer carrying one File so drag events look like a real OS drag
_DATA_TRANSFER_JS = """
([name, type, bytes]) => {
    const dataTransfer = new DataTransfer();
    dataTransfer.items.add(new File([new Uint8Array(bytes)], name, { type }));
    return dataTransfer;
}
"""


class FileUploadPage(BasePage):
    """Chat input with its attach button, hidden file input and drop zone."""

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        super().__init__(page, settings)

        self.chat_textarea = page.locator("textarea").first
        self.file_input = page.locator('input[type="file"]')
        self.drop_zone = page.locator('textarea, .chat-input, [data-testid*="chat"]').first
        self.drop_message = page.get_by_text(DROP_MESSAGE).first
        self.send_button = page.locator("button").filter(has=page.locator("svg")).last
        self.attach_button = page.locator("button").filter(has=page.locator("svg")).first
        self.ai_response = page.locator(
            '.ai-response, [data-testid*="response"], .response-message'
        ).first

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to_chat(self) -> None:
        """Open the app and focus the chat composer."""
        self.goto()
        self.page.wait_for_load_state("networkidle")
        self.chat_textarea.click()
        self.pause(self.settings.ui_settle_ms)

    # -------------------------------------------------------------------------
    # File picker
    # -------------------------------------------------------------------------

    def trigger_file_upload(self) -> None:
        """Click the attach button if it can be clicked."""
        try:
            if self.attach_button.is_visible():
                self.attach_button.click()
                self.pause(self.settings.ui_settle_ms)
        except PlaywrightError as e:
            self.log.warning("attach_button_not_accessible", error=str(e))

    def upload_file_via_input(self, file_path: str | Path) -> bool:
        return self.upload_multiple_files([file_path])

    def upload_multiple_files(self, file_paths: Sequence[str | Path]) -> bool:
        """Set files on the file input; False when the input never became visible."""
        self.trigger_file_upload()
        if not self.file_input.is_visible():
            self.log.info("file_input_not_visible", files=len(file_paths))
            return False

        self.file_input.set_input_files([str(p) for p in file_paths])
        self.log.info("files_attached", files=[Path(p).name for p in file_paths])
        return True

    def get_file_input_accept_attribute(self) -> str | None:
        try:
            self.trigger_file_upload()
            if self.file_input.count() > 0:
                return self.file_input.first.get_attribute("accept")
        except PlaywrightError as e:
            self.log.warning("accept_attribute_unavailable", error=str(e))
        return None

    # -------------------------------------------------------------------------
    # Drag and drop
    # -------------------------------------------------------------------------

    def _dispatch_drag_event(
        self, event_type: str, file_name: str, file_type: str, content: bytes = b""
    ) -> None:
        data_transfer = self.page.evaluate_handle(
            _DATA_TRANSFER_JS, [file_name, file_type, list(content)]
        )
        try:
            self.drop_zone.dispatch_event(event_type, {"dataTransfer": data_transfer})
        finally:
            data_transfer.dispose()
        self.log.debug("drag_event_dispatched", event_type=event_type, file_name=file_name)

    def simulate_drag_enter(self, file_name: str = "test.txt", file_type: str = "text/plain") -> None:
        self._dispatch_drag_event("dragenter", file_name, file_type)
        self.pause(self.settings.drag_settle_ms)

    def simulate_drag_over(self, file_name: str = "test.txt", file_type: str = "text/plain") -> None:
        self._dispatch_drag_event("dragover", file_name, file_type)
        self.pause(self.settings.drag_settle_ms)

    def simulate_drop(self, file_path: str | Path) -> None:
        path = Path(file_path)
        self._dispatch_drag_event("drop", path.name, mime_type_for(path.name), path.read_bytes())
        self.pause(self.settings.ui_settle_ms)

    def drag_and_drop_file(self, file_path: str | Path) -> None:
        name = Path(file_path).name
        file_type = mime_type_for(name)
        self.simulate_drag_enter(name, file_type)
        self.simulate_drag_over(name, file_type)
        self.simulate_drop(file_path)

    def is_drop_message_visible(self) -> bool:
        return self.drop_message.is_visible()

    def wait_for_drop_message(self, timeout_ms: int = 5_000) -> bool:
        """Poll for the transient "drop files here" overlay."""
        return poll_locator_visible(self.drop_message, timeout_ms)

    def get_drop_message_text(self) -> str | None:
        if self.is_drop_message_visible():
            return self.drop_message.text_content()
        return None

    # -------------------------------------------------------------------------
    # Messaging
    # -------------------------------------------------------------------------

    def type_message(self, message: str) -> None:
        self.chat_textarea.fill(message)

    def send_message(self) -> None:
        if self.send_button.is_visible():
            self.send_button.click()
            self.pause(self.settings.ui_settle_ms)

    def upload_file_and_send(self, file_path: str | Path, message: str = "") -> bool:
        uploaded = self.upload_file_via_input(file_path)
        if uploaded and message:
            self.type_message(message)
        self.send_message()
        return uploaded

    def wait_for_ai_response(self, timeout_ms: int | None = None) -> str | None:
        """Text of the first AI reply, or None if none arrived in time."""
        timeout = timeout_ms if timeout_ms is not None else self.settings.ai_response_timeout_ms
        try:
            self.ai_response.wait_for(timeout=timeout)
        except PlaywrightTimeoutError:
            self.log.warning("ai_response_timeout", timeout_ms=timeout)
            return None
        return self.ai_response.text_content()

    # -------------------------------------------------------------------------
    # Fixture helpers
    # -------------------------------------------------------------------------

    def create_test_file(
        self, file_name: str, content: str = "Test file content", size_kb: int = 1
    ) -> Path:
        return create_test_file(
            file_name, content, size_kb, directory=self.settings.test_files_dir
        )

    def validate_file_size(self, file_path: str | Path, max_size_kb: int | None = None) -> bool:
        limit = max_size_kb if max_size_kb is not None else self.settings.max_upload_kb
        return validate_file_size(file_path, limit)

    def get_supported_file_types(self) -> list[FileType]:
        return get_supported_file_types()

    def get_unsupported_file_types(self) -> list[FileType]:
        return get_unsupported_file_types()
