"""Filter schema shared by the night and run listings."""

from typing import Literal, TypeVar

from pydantic import Field

from core.filters.paginable import OffsetFilters
from core.utils.constants import (
    DEFAULT_ORDER_BY,
    DEFAULT_ORDER_DIRECTION,
    LEADERBOARD_SEASON,
)

FiltersT = TypeVar("FiltersT", bound="LeaderboardFilters")


class LeaderboardFilters(OffsetFilters):
    """
    Query filters for a leaderboard listing.

    Supports:
    - Verification predicate (verified_only)
    - Season predicate (season)
    - Ordering (order_by, order_direction)
    """

    verified_only: bool | None = Field(None, description="Only return verified records")
    season: int | None = Field(None, ge=0, description="Season number")

    order_by: str = Field(
        default=DEFAULT_ORDER_BY,
        min_length=1,
        description="Wire name of the field to order by",
    )
    order_direction: Literal["asc", "desc"] = Field(
        default=DEFAULT_ORDER_DIRECTION,
        description="Order direction",
    )

    @classmethod
    def ranking_preset(cls: type[FiltersT], *, limit: int, order_by: str) -> FiltersT:
        return cls(
            offset=0,
            limit=limit,
            season=LEADERBOARD_SEASON,
            verified_only=True,
            order_by=order_by,
            order_direction="asc",
        )
