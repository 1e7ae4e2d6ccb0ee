"""Typed exceptions for the TD Ameritrade client.

Every exception carries an integer ``error_code`` so an embedding layer can
map failures to status codes. Zero is reserved for success.
"""

from typing import Any


class TDMAError(Exception):
    """Base exception for all TD Ameritrade client errors."""

    error_code: int = 99

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TDMAValueError(TDMAError):
    """Invalid value passed to a getter constructor or setter."""

    error_code = 1

    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class TDMAHandleError(TDMAError):
    """Operation attempted on a closed getter."""

    error_code = 2


class TDMAAuthError(TDMAError):
    """Missing or rejected credentials."""

    error_code = 3

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TDMAAPIError(TDMAError):
    """API request error with status code and response details."""

    error_code = 4

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)
