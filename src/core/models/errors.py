"""Custom exception classes for the leaderboard client."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_BAD_STATUS,
    ERROR_CODE_FETCH_FAILED,
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_PARSE_FAILED,
)


class IdalonError(Exception):
    """
    Base exception for all leaderboard client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class FetchError(IdalonError):
    """Raised when the server could not be reached (DNS, connection, timeout)."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FETCH_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ParseError(IdalonError):
    """Raised when a response body does not decode into the expected shape."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PARSE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class BadStatusError(IdalonError):
    """Raised when the server answers with a status code of 400 or above."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_BAD_STATUS,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

    @property
    def status_code(self) -> int | None:
        return self.details.get("status_code")


class FilterError(IdalonError):
    """Raised when filter parameters are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
