"""
Lazy, asynchronous page-by-page iteration over a resource listing.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from aws_lambda_powertools import Logger

from core.filters.paginable import Paginable
from core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from core.models.collection import Collection
from core.models.errors import IdalonError

if TYPE_CHECKING:
    from core.models.resource import ResourceModel

ResourceT = TypeVar("ResourceT", bound="ResourceModel")

logger = Logger(utc=True)


class PaginatorState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


class Paginator(Generic[ResourceT]):
    """
    Async iterator yielding one Collection per page.

    Each step requests the page selected by the stored filters, then commits
    the advanced cursor (page + 1) once the response arrives. At most one
    request is in flight: a step taken while FETCHING awaits the request
    already outstanding instead of issuing another.

    The sequence ends when:
    - a page comes back empty
    - the page after the one reaching the reported total has been delivered
    - a request fails

    A failed request ends the sequence the same way an exhausted listing
    does. The error is logged and kept on `last_error`.

    Usage:
        async for page in Night.paginate(NightFilters.leaderboard()):
            ...

    A Paginator is owned by a single consumer and is not safe to share.
    """

    def __init__(
        self,
        model: type[ResourceT],
        filters: Paginable,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> None:
        self._model = model
        self._adapter = adapter
        self._pending: asyncio.Task[Collection[ResourceT] | None] | None = None
        self._exhausted = False

        self.filters = filters.model_copy()
        self.last_error: IdalonError | None = None

    @property
    def state(self) -> PaginatorState:
        if self._exhausted:
            return PaginatorState.EXHAUSTED
        if self._pending is not None and not self._pending.done():
            return PaginatorState.FETCHING
        return PaginatorState.IDLE

    def __aiter__(self) -> Paginator[ResourceT]:
        return self

    async def __anext__(self) -> Collection[ResourceT]:
        if self._exhausted:
            raise StopAsyncIteration

        if self._pending is None or self._pending.cancelled():
            self._pending = asyncio.ensure_future(self._fetch_next_page())

        try:
            page = await self._pending
        except asyncio.CancelledError:
            # aclose() discarded the request this step was waiting on.
            if self._exhausted:
                raise StopAsyncIteration from None
            raise

        if page is None:
            raise StopAsyncIteration

        return page

    async def aclose(self) -> None:
        """Discard the in-flight request, if any, and end the sequence."""
        self._exhausted = True

        if self._pending is not None and not self._pending.done():
            self._pending.cancel()

        self._pending = None

    async def _fetch_next_page(self) -> Collection[ResourceT] | None:
        requested = self.filters.model_copy()
        advanced = self.filters.model_copy()
        advanced.set_page(advanced.get_page() + 1)

        try:
            page = await self._model.find_many(requested, adapter=self._adapter)
        except IdalonError as exc:
            logger.warning(
                "Pagination stopped after a failed page request",
                extra={
                    "resource": self._model.__name__,
                    "page": requested.get_page(),
                    "error_code": exc.error_code,
                    "error": exc.message,
                },
            )
            self.last_error = exc
            self._exhausted = True
            return None
        finally:
            self._pending = None

        self.filters = advanced

        # Items the previous pages should have covered; reaching the total
        # ends the sequence after this page is delivered.
        polled = (self.filters.get_page() - 1) * self.filters.get_page_size()
        if page.total <= polled:
            self._exhausted = True

        if not page.items:
            self._exhausted = True
            return None

        logger.debug(
            "Page delivered",
            extra={
                "resource": self._model.__name__,
                "page": requested.get_page(),
                "count": len(page.items),
                "total": page.total,
            },
        )

        return page
