"""
Unit tests for core.models.errors
"""

from core.models.errors import (
    BadStatusError,
    FetchError,
    FilterError,
    IdalonError,
    ParseError,
)


class TestIdalonError:
    def test_base_error(self) -> None:
        err = IdalonError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert isinstance(err, Exception)
        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"


class TestFetchError:
    def test_fetch_error_defaults(self) -> None:
        err = FetchError(message="Failed to fetch URL")

        assert isinstance(err, IdalonError)
        assert err.error_code == "FETCH_FAILED"
        assert err.details == {}


class TestParseError:
    def test_parse_error(self) -> None:
        err = ParseError(
            message="Failed to parse JSON",
            details={"url": "https://api.idalon.com/v2/nights"},
        )

        assert err.error_code == "PARSE_FAILED"
        assert err.details["url"] == "https://api.idalon.com/v2/nights"


class TestBadStatusError:
    def test_bad_status_error_exposes_status_code(self) -> None:
        err = BadStatusError(
            message="Request returned an error status code.",
            details={"status_code": 503},
        )

        assert err.error_code == "BAD_STATUS"
        assert err.status_code == 503

    def test_bad_status_error_without_status_code(self) -> None:
        err = BadStatusError(message="Request returned an error status code.")

        assert err.status_code is None


class TestFilterError:
    def test_filter_error(self) -> None:
        err = FilterError(
            message="Invalid filter",
            details={"field": "limit"},
        )

        assert err.error_code == "INVALID_FILTER"
        assert err.details == {"field": "limit"}
