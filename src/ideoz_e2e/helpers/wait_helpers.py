"""
Wait Helpers

Polling and condition-waiting utilities.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ideoz_e2e.core.exceptions import ConditionTimeoutError

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        ConditionTimeoutError: If condition not met within timeout

    Example:
        # Wait for the chat textarea to be cleared after sending
        value = wait_for_condition(
            action=lambda: upload_page.chat_textarea.input_value(),
            condition=lambda v: v == "",
            timeout_seconds=5.0,
        )
    """
    start_time = time.monotonic()
    last_result: T | None = None

    while time.monotonic() - start_time < timeout_seconds:
        last_result = action()

        if condition(last_result):
            return last_result

        time.sleep(poll_interval_seconds)

    raise ConditionTimeoutError(error_message, last_result)


def poll_locator_visible(
    locator: Locator,
    timeout_ms: int,
    poll_interval_ms: int = 250,
) -> bool:
    """
    Poll a locator's visibility.

    Transient UI (the drag-and-drop overlay) can appear and vanish between
    two Playwright auto-waits, so this samples `is_visible()` repeatedly.

    Args:
        locator: Element to watch
        timeout_ms: Maximum time to wait
        poll_interval_ms: Time between samples

    Returns:
        True as soon as the locator is visible, False when time runs out
        or the page/element went away

    Raises:
        PlaywrightError: Any other locator failure, e.g. a strict mode
            violation when the locator matches several elements
    """
    try:
        wait_for_condition(
            action=locator.is_visible,
            condition=bool,
            timeout_seconds=timeout_ms / 1000,
            poll_interval_seconds=poll_interval_ms / 1000,
        )
    except ConditionTimeoutError:
        return False
    except PlaywrightError as e:
        if _is_gone_error(e):
            return False
        raise
    return True


_GONE_MARKERS = ("has been closed", "detached", "not attached")


def _is_gone_error(error: PlaywrightError) -> bool:
    """True when the error only says the page, context or element no longer exists."""
    message = str(error).lower()
    return any(marker in message for marker in _GONE_MARKERS)
