"""Ideoz E2E exception hierarchy.

This module defines the base exception class and specialized exceptions
for the failures the suite itself can run into, as opposed to assertion
failures in the scenarios.
"""


class IdeozE2EError(Exception):
    """Base exception for all Ideoz E2E errors.

    All custom exceptions in the suite should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(IdeozE2EError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("BASE_URL points at production")
    """

    pass


class AppUnreachableError(IdeozE2EError):
    """Raised when the application under test cannot be reached.

    Attributes:
        url: URL that was probed.
        status_code: HTTP status code if a response arrived, None otherwise.

    Example:
        raise AppUnreachableError(url="https://app-test.ideoz.ai/", message="Connection refused")
    """

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url}: {message}")


class TestFileError(IdeozE2EError):
    """Raised when a generated upload fixture cannot be written or read."""

    # Keep pytest from collecting this as a test class
    __test__ = False


class ConditionTimeoutError(IdeozE2EError, TimeoutError):
    """Raised when a polling wait runs out of time.

    Attributes:
        last_result: Value returned by the last poll.
    """

    def __init__(self, message: str, last_result: object = None) -> None:
        self.last_result = last_result
        super().__init__(f"{message}. Last result: {last_result}")
