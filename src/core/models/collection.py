"""Collection model returned by list endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

ItemT = TypeVar("ItemT")


class Collection(BaseModel, Generic[ItemT]):
    """One page of a listing: the reported total plus the items in this response."""

    total: int = Field(..., ge=0, description="Total number of items matching the query")
    items: list[ItemT] = Field(..., description="Items present in this response")
