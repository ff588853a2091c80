"""
Offset-based page cursor contract shared by every resource filter schema.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.utils.constants import DEFAULT_LIMIT, DEFAULT_OFFSET, MIN_LIMIT


@runtime_checkable
class Paginable(Protocol):
    """Protocol for query filters exposing a page cursor.

    The paginator only ever talks to filters through this contract: it
    clones them, reads and moves the page, and hands them to the fetcher
    as query parameters.

    `get_page()` must return the value last passed to `set_page`; the
    paginator relies on it to detect exhaustion.
    """

    def get_page(self) -> int: ...
    def set_page(self, page: int) -> None: ...
    def get_page_size(self) -> int: ...
    def model_copy(self) -> "Paginable": ...
    def to_query_params(self) -> dict[str, Any]: ...


class OffsetFilters(BaseModel):
    """
    Base query filters paginated by `offset` and `limit`.

    The page number is derived, never stored:

        page   = offset // limit
        offset = page * limit

    Subclasses add their own predicates and ordering. Field names are
    translated to camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    offset: int = Field(default=DEFAULT_OFFSET, ge=0, description="Number of items to skip")
    limit: int = Field(default=DEFAULT_LIMIT, ge=MIN_LIMIT, description="Page size")

    def get_page(self) -> int:
        return self.offset // self.limit

    def set_page(self, page: int) -> None:
        self.offset = page * self.limit

    def get_page_size(self) -> int:
        return self.limit

    def to_query_params(self) -> dict[str, Any]:
        """Serialize the filters into flat query parameters.

        Keys use the wire casing, unset predicates are dropped and booleans
        are rendered as `true` / `false`.

        Example:
            NightFilters(verified_only=True).to_query_params()
            → {"offset": 0, "limit": 10, "verifiedOnly": "true", ...}
        """
        params: dict[str, Any] = {}

        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = value

        return params
