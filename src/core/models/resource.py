"""Abstract contract for remotely listed resources."""

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.filters.paginable import OffsetFilters, Paginable
from core.filters.paginator import Paginator
from core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from core.infrastructure.api.fetcher import fetch_many, fetch_one
from core.models.collection import Collection

ResourceT = TypeVar("ResourceT", bound="ResourceModel")


class ResourceModel(BaseModel, ABC):
    """Contract for a record type exposed as a listable, fetchable collection.

    Subclasses declare their wire schema as pydantic fields, their filter
    schema via `filters_class`, and their endpoint via `resource_url()`.
    Listing, lookup and pagination then work the same way for every kind.

    Records are immutable and decoded from camelCase JSON.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    filters_class: ClassVar[type[Paginable]] = OffsetFilters

    @classmethod
    @abstractmethod
    def resource_url(cls) -> str:
        """Base endpoint for this resource kind, without a trailing slash."""

    @classmethod
    async def find_one(
        cls: type[ResourceT],
        resource_id: str,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> ResourceT:
        """Fetch `resource_url()/resource_id`.

        Raises:
            FetchError, BadStatusError, ParseError
        """
        url = f"{cls.resource_url()}/{resource_id}"
        return await asyncio.to_thread(fetch_one, url, cls, adapter=adapter)

    @classmethod
    async def find_many(
        cls: type[ResourceT],
        filters: Paginable,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> Collection[ResourceT]:
        """Fetch the page of `resource_url()` selected by `filters`.

        Raises:
            FetchError, BadStatusError, ParseError
        """
        return await asyncio.to_thread(
            fetch_many,
            cls.resource_url(),
            filters,
            cls,
            adapter=adapter,
        )

    @classmethod
    def paginate(
        cls: type[ResourceT],
        filters: Paginable | None = None,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> Paginator[ResourceT]:
        """Lazily page through the listing, starting at the page in `filters`."""
        return Paginator(cls, filters if filters is not None else cls.filters_class(), adapter=adapter)
