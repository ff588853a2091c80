import pytest
from helpers import ListingServer, StubAdapter, make_response, run_payload

from core.filters.night_filters import NightFilters
from core.filters.run_filters import RunFilters
from core.models.collection import Collection
from core.models.errors import BadStatusError
from core.models.night import Night
from core.models.run import Run
from handlers.leaderboard.service import LeaderboardService, timing_of


class TestLeaderboardService:
    @pytest.mark.asyncio
    async def test_summarize_nights(self, nights_server) -> None:
        service = LeaderboardService("nights", adapter=nights_server(25))

        report = await service.summarize(NightFilters(limit=10))

        assert report.resource == "nights"
        assert report.complete is True
        assert [summary.page for summary in report.pages] == [0, 1, 2]
        assert [summary.count for summary in report.pages] == [10, 10, 5]
        assert report.pages[0].median == 4.5
        assert report.pages[0].average == 4.5
        assert report.pages[2].median == 22

    @pytest.mark.asyncio
    async def test_summarize_runs_skips_untimed(self) -> None:
        items = [run_payload("a", 90.0), run_payload("b", None), run_payload("c", 100.0)]
        service = LeaderboardService("runs", adapter=StubAdapter(ListingServer(items)))

        report = await service.summarize(RunFilters(limit=50))

        summary = report.pages[0]
        assert summary.count == 3
        assert summary.timed_count == 2
        assert summary.median == 95.0
        assert summary.average == 95.0

    @pytest.mark.asyncio
    async def test_summarize_reports_failed_pagination(self, stub_adapter) -> None:
        service = LeaderboardService("nights", adapter=stub_adapter(lambda **_: make_response(500, {})))

        report = await service.summarize()

        assert report.pages == []
        assert report.complete is False
        assert report.error_code == "BAD_STATUS"

    @pytest.mark.asyncio
    async def test_lookup(self, stub_adapter, sample_night) -> None:
        service = LeaderboardService("nights", adapter=stub_adapter(lambda **_: make_response(200, sample_night)))

        night = await service.lookup("night-1")

        assert isinstance(night, Night)

    @pytest.mark.asyncio
    async def test_lookup_propagates_errors(self, stub_adapter) -> None:
        service = LeaderboardService("runs", adapter=stub_adapter(lambda **_: make_response(404, {})))

        with pytest.raises(BadStatusError):
            await service.lookup("missing")

    def test_summarize_empty_page(self) -> None:
        summary = LeaderboardService.summarize_page(Collection[Night](total=0, items=[]), page=0)

        assert summary.count == 0
        assert summary.median == 0
        assert summary.average == 0


class TestTimingOf:
    def test_night_uses_average_real_time(self, sample_night) -> None:
        assert timing_of(Night.model_validate(sample_night)) == 312.5

    def test_run_uses_real_time(self, sample_run) -> None:
        assert timing_of(Run.model_validate(sample_run)) == 95.2
