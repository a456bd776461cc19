"""
Helpers

Polling and formatting utilities shared by page objects and session hooks.

Usage:
    from ideoz_e2e.helpers import wait_for_condition, format_bytes
"""

from ideoz_e2e.helpers.format_helpers import directory_size, format_bytes
from ideoz_e2e.helpers.wait_helpers import poll_locator_visible, wait_for_condition

__all__ = ["wait_for_condition", "poll_locator_visible", "format_bytes", "directory_size"]
