"""
Business logic for leaderboard summaries and single-record lookups.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.paginable import Paginable
from core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from core.models.collection import Collection
from core.models.night import Night
from core.models.resource import ResourceModel
from core.models.run import Run
from core.utils.aggregates import find_average, find_median

from .models import LeaderboardReport, PageSummary, ResourceName

logger = Logger(utc=True)

RESOURCES: dict[ResourceName, type[ResourceModel]] = {
    "nights": Night,
    "runs": Run,
}


class LeaderboardService:
    """Application service responsible for summarizing leaderboards.

    This service coordinates:
    - Paging through a resource listing
    - Computing median / average timings per page
    - Looking up single records by identifier
    """

    def __init__(
        self,
        resource: ResourceName,
        *,
        adapter: HttpAdapterProtocol | None = None,
    ) -> None:
        """Initialize for one resource kind with an optional transport."""
        self.resource = resource
        self.model = RESOURCES[resource]
        self.adapter = adapter

    async def summarize(self, filters: Paginable | None = None) -> LeaderboardReport:
        """Page through the listing and summarize every delivered page."""
        paginator = self.model.paginate(filters, adapter=self.adapter)
        page_number = paginator.filters.get_page()

        pages: list[PageSummary] = []
        async for page in paginator:
            pages.append(self.summarize_page(page, page=page_number))
            page_number += 1

        error = paginator.last_error
        if error is not None:
            logger.warning(
                "Leaderboard is incomplete",
                extra={"resource": self.resource, "pages": len(pages), "error_code": error.error_code},
            )

        logger.info(
            "Leaderboard summarized",
            extra={"resource": self.resource, "pages": len(pages)},
        )

        return LeaderboardReport(
            resource=self.resource,
            pages=pages,
            complete=error is None,
            error_code=error.error_code if error is not None else None,
        )

    async def lookup(self, resource_id: str) -> ResourceModel:
        """Fetch one record; errors propagate to the caller."""
        record = await self.model.find_one(resource_id, adapter=self.adapter)

        logger.info(
            "Record fetched",
            extra={"resource": self.resource, "uuid": resource_id},
        )

        return record

    @staticmethod
    def summarize_page(collection: Collection[Any], *, page: int) -> PageSummary:
        """Compute timing aggregates for one page."""
        times = [t for t in (timing_of(item) for item in collection.items) if t is not None]

        return PageSummary(
            page=page,
            total=collection.total,
            count=len(collection.items),
            timed_count=len(times),
            median=find_median(times),
            average=find_average(times),
        )


def timing_of(record: ResourceModel) -> float | None:
    """Ranking time of a record: average real time for nights, real time for runs."""
    if isinstance(record, Night):
        return record.average_real_time
    if isinstance(record, Run):
        return record.real_time
    return None
