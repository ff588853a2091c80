"""
Fetch functions for the leaderboard API.

These are the only functions that talk to the transport and the JSON
decoder. Every failure is translated into exactly one of:

- FetchError: the request never produced a response
- BadStatusError: the server answered with a status code >= 400
- ParseError: the body does not decode into the expected shape
"""

from typing import Any, TypeVar

import requests
from aws_lambda_powertools import Logger
from pydantic import BaseModel, ValidationError

from core.filters.paginable import Paginable
from core.infrastructure.adapters.http_adapter import (
    HttpAdapter,
    HttpAdapterProtocol,
    HttpResponse,
)
from core.models.collection import Collection
from core.models.errors import BadStatusError, FetchError, ParseError
from core.utils.constants import BAD_STATUS_THRESHOLD

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = Logger(utc=True)


def _get(
    adapter: HttpAdapterProtocol | None,
    *,
    url: str,
    params: dict[str, Any] | None = None,
) -> HttpResponse:
    logger.debug("Sending request", extra={"url": url, "params": params})

    try:
        if adapter is not None:
            response = adapter.get(url=url, params=params)
        else:
            with HttpAdapter() as owned:
                response = owned.get(url=url, params=params)
    except requests.RequestException as exc:
        logger.error("Request failed", extra={"url": url, "error": str(exc)})
        raise FetchError(
            message=f"Failed to fetch URL: {url}",
            details={"url": url, "error": str(exc)},
        ) from exc

    if response.status_code >= BAD_STATUS_THRESHOLD:
        logger.warning(
            "Request returned an error status code",
            extra={"url": url, "status_code": response.status_code},
        )
        raise BadStatusError(
            message="Request returned an error status code.",
            details={"url": url, "status_code": response.status_code},
        )

    return response


def _decode(model: type[ModelT], response: HttpResponse, *, url: str) -> ModelT:
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        logger.error(
            "Failed to parse response body",
            extra={"url": url, "error_count": exc.error_count()},
        )
        raise ParseError(
            message=f"Failed to parse JSON from URL: {url}",
            details={"url": url, "errors": exc.errors(include_url=False)},
        ) from exc


def fetch_many(
    url: str,
    filters: Paginable,
    item_type: type[ModelT],
    *,
    adapter: HttpAdapterProtocol | None = None,
) -> Collection[ModelT]:
    """Fetch one page of a listing.

    Args:
        url: Absolute listing endpoint
        filters: Query filters, serialized as query parameters
        item_type: Record model each item decodes into
        adapter: Optional transport; a fresh session is used per call otherwise

    Returns:
        The decoded Collection

    Raises:
        FetchError, BadStatusError, ParseError
    """
    response = _get(adapter, url=url, params=filters.to_query_params())
    page = _decode(Collection[item_type], response, url=url)  # type: ignore[valid-type]

    logger.debug(
        "Page fetched",
        extra={"url": url, "total": page.total, "count": len(page.items)},
    )

    return page


def fetch_one(
    url: str,
    item_type: type[ModelT],
    *,
    adapter: HttpAdapterProtocol | None = None,
) -> ModelT:
    """Fetch and decode a single record.

    Raises:
        FetchError, BadStatusError, ParseError
    """
    response = _get(adapter, url=url)
    return _decode(item_type, response, url=url)
