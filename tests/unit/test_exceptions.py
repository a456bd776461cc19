"""Tests for the Ideoz E2E exception hierarchy."""

import pytest

from ideoz_e2e.core.exceptions import (
    AppUnreachableError,
    ConditionTimeoutError,
    ConfigurationError,
    IdeozE2EError,
    TestFileError,
)

pytestmark = pytest.mark.unit


class TestIdeozE2EError:
    """Tests for the base exception."""

    def test_can_be_raised(self) -> None:
        with pytest.raises(IdeozE2EError, match="Test error message"):
            raise IdeozE2EError("Test error message")

    @pytest.mark.parametrize(
        "exc_class", [ConfigurationError, AppUnreachableError, TestFileError, ConditionTimeoutError]
    )
    def test_subclasses_inherit_from_base(self, exc_class: type[Exception]) -> None:
        assert issubclass(exc_class, IdeozE2EError)


class TestAppUnreachableError:
    """Tests for AppUnreachableError."""

    def test_message_includes_url(self) -> None:
        """
        Given: AppUnreachableError with URL and message
        When: Converting to string
        Then: Both are included
        """
        error = AppUnreachableError(url="https://app-test.ideoz.ai/", message="Connection refused")

        assert str(error) == "https://app-test.ideoz.ai/: Connection refused"
        assert error.url == "https://app-test.ideoz.ai/"
        assert error.status_code is None

    def test_status_code_is_kept(self) -> None:
        error = AppUnreachableError(url="https://x.test/", message="Server error 503", status_code=503)

        assert error.status_code == 503


class TestConditionTimeoutError:
    """Tests for ConditionTimeoutError."""

    def test_is_a_builtin_timeout(self) -> None:
        """
        Given: ConditionTimeoutError
        When: Caught as TimeoutError
        Then: It is handled like any timeout
        """
        with pytest.raises(TimeoutError):
            raise ConditionTimeoutError("Condition not met", last_result=False)

    def test_last_result_in_message(self) -> None:
        error = ConditionTimeoutError("Drop overlay never showed", last_result=False)

        assert error.last_result is False
        assert str(error) == "Drop overlay never showed. Last result: False"


class TestTestFileError:
    def test_not_collected_by_pytest(self) -> None:
        assert TestFileError.__test__ is False
