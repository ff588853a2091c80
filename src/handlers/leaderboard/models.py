"""
Pydantic models for leaderboard summaries.
"""

from typing import Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt

ResourceName = Literal["nights", "runs"]


class PageSummary(BaseModel):
    """Aggregate timings of one fetched page."""

    page: StrictInt = Field(..., description="Zero-based page number")
    total: StrictInt = Field(..., description="Total number of records reported by the server")
    count: StrictInt = Field(..., description="Number of records in this page")
    timed_count: StrictInt = Field(..., description="Number of records carrying a time")
    median: float = Field(..., description="Median time in seconds, 0 when nothing is timed")
    average: float = Field(..., description="Average time in seconds, 0 when nothing is timed")


class LeaderboardReport(BaseModel):
    """Summaries of every page delivered by a pagination run."""

    resource: ResourceName
    pages: list[PageSummary] = Field(default_factory=list)
    complete: StrictBool = Field(
        ...,
        description="False when pagination stopped because a page request failed",
    )
    error_code: str | None = Field(None, description="Error code of the failed page request")
