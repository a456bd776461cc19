"""E2E test fixtures package."""

from tests.e2e.fixtures.test_data import (
    INVALID_EMAILS,
    LONG_NAME_255,
    SPECIAL_CREDENTIALS,
    SQL_INJECTIONS,
    UPLOAD_SIZES_UNDER_LIMIT_KB,
    VALID_EMAILS,
    XSS_PAYLOADS,
)

__all__ = [
    "INVALID_EMAILS",
    "LONG_NAME_255",
    "SPECIAL_CREDENTIALS",
    "SQL_INJECTIONS",
    "UPLOAD_SIZES_UNDER_LIMIT_KB",
    "VALID_EMAILS",
    "XSS_PAYLOADS",
]
