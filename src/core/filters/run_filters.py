"""Run listing filters."""

from core.filters.leaderboard_filters import LeaderboardFilters
from core.utils.constants import RUN_LEADERBOARD_LIMIT, RUN_LEADERBOARD_ORDER_BY


class RunFilters(LeaderboardFilters):
    """Query filters for `/runs`. Defaults list the newest runs first."""

    @classmethod
    def leaderboard(cls) -> "RunFilters":
        """Verified runs of the current season, fastest real time first."""
        return cls.ranking_preset(
            limit=RUN_LEADERBOARD_LIMIT,
            order_by=RUN_LEADERBOARD_ORDER_BY,
        )
