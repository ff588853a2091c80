"""Thin HTTP adapter wrapping a requests session."""

from typing import Any, Protocol

import requests

from core.utils.constants import DEFAULT_HEADERS, get_http_timeout


class HttpResponse(Protocol):
    """Minimal response protocol: status code plus raw body bytes."""

    status_code: int
    content: bytes


class HttpAdapterProtocol(Protocol):
    """Minimal GET-only transport protocol."""

    def get(self, *, url: str, params: dict[str, Any] | None = None) -> HttpResponse: ...


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Wraps a requests.Session with default headers and timeout
    - Does NOT handle errors or inspect status codes (lets them bubble up)
    - Fetch functions catch and translate errors
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize session; timeout falls back to the environment."""
        self.timeout = timeout if timeout is not None else get_http_timeout()
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    def get(self, *, url: str, params: dict[str, Any] | None = None) -> requests.Response:
        """Send a GET request.

        Raises requests exceptions - caught by the fetch functions.
        """
        return self.session.get(url, params=params, timeout=self.timeout)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
