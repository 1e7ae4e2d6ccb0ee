"""Tests for error handling and exception classes."""

import pytest

from tdma_client.exceptions import (
    TDMAAPIError,
    TDMAAuthError,
    TDMAError,
    TDMAHandleError,
    TDMAValueError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_tdma_error_is_base(self) -> None:
        """All exceptions should inherit from TDMAError."""
        assert issubclass(TDMAAPIError, TDMAError)
        assert issubclass(TDMAAuthError, TDMAError)
        assert issubclass(TDMAHandleError, TDMAError)
        assert issubclass(TDMAValueError, TDMAError)

    def test_error_codes_are_distinct_and_nonzero(self) -> None:
        """Zero is reserved for success."""
        codes = [
            TDMAError.error_code,
            TDMAValueError.error_code,
            TDMAHandleError.error_code,
            TDMAAuthError.error_code,
            TDMAAPIError.error_code,
        ]
        assert 0 not in codes
        assert len(set(codes)) == len(codes)


class TestTDMAError:
    """Tests for base TDMAError."""

    def test_stores_message(self) -> None:
        error = TDMAError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"


class TestTDMAValueError:
    """Tests for TDMAValueError."""

    def test_stores_field_and_value(self) -> None:
        error = TDMAValueError("invalid ISO-8601 date: x", field="start_date", value="x")

        assert error.field == "start_date"
        assert error.value == "x"
        assert error.error_code == 1

    def test_can_catch_as_tdma_error(self) -> None:
        with pytest.raises(TDMAError):
            raise TDMAValueError("bad")


class TestTDMAAPIError:
    """Tests for TDMAAPIError."""

    def test_stores_status_and_body(self) -> None:
        body = {"error": "Not found"}
        error = TDMAAPIError("Not found", status_code=404, response_body=body)

        assert error.status_code == 404
        assert error.response_body == body
        assert error.error_code == 4


class TestTDMAAuthError:
    """Tests for TDMAAuthError."""

    def test_status_code_optional(self) -> None:
        assert TDMAAuthError("No access token").status_code is None
        assert TDMAAuthError("Unauthorized", status_code=401).status_code == 401
