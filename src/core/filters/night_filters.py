"""Night listing filters."""

from core.filters.leaderboard_filters import LeaderboardFilters
from core.utils.constants import NIGHT_LEADERBOARD_LIMIT, NIGHT_LEADERBOARD_ORDER_BY


class NightFilters(LeaderboardFilters):
    """Query filters for `/nights`. Defaults list the newest nights first."""

    @classmethod
    def leaderboard(cls) -> "NightFilters":
        """Verified nights of the current season, fastest average first."""
        return cls.ranking_preset(
            limit=NIGHT_LEADERBOARD_LIMIT,
            order_by=NIGHT_LEADERBOARD_ORDER_BY,
        )
