#!/usr/bin/env python3
"""
Command-line entry point printing per-page leaderboard statistics.

Run:
    idalon-leaderboard --resource nights --preset leaderboard \
      --lookup-id d4bad0ba-5b5a-412b-a75a-e92e24c4f908
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from aws_lambda_powertools import Logger

from core.filters.leaderboard_filters import LeaderboardFilters
from core.models.errors import IdalonError
from core.utils.validators import build_filters

from .service import RESOURCES, LeaderboardService

logger = Logger(service="idalon-leaderboard", utc=True)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize leaderboard pages from the Idalon API")

    parser.add_argument(
        "--resource",
        choices=sorted(RESOURCES),
        default="nights",
        help="Resource kind to page through",
    )
    parser.add_argument(
        "--preset",
        choices=("leaderboard", "default"),
        default="leaderboard",
        help="Filter preset to start from",
    )
    parser.add_argument("--limit", type=int, default=None, help="Page size")
    parser.add_argument("--season", type=int, default=None, help="Season number")
    parser.add_argument(
        "--verified-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only include verified records (--no-verified-only to include all)",
    )
    parser.add_argument(
        "--order-direction",
        choices=("asc", "desc"),
        default=None,
        help="Order direction",
    )
    parser.add_argument(
        "--lookup-id",
        default=None,
        help="Identifier of a single record to fetch after the leaderboard",
    )

    return parser.parse_args(argv)


def resolve_filters(args: argparse.Namespace) -> LeaderboardFilters:
    """Start from the requested preset and apply command-line overrides.

    Raises:
        FilterError: If an override is invalid
    """
    filters_class = RESOURCES[args.resource].filters_class
    preset = filters_class.leaderboard() if args.preset == "leaderboard" else filters_class()

    return build_filters(
        preset,
        {
            "limit": args.limit,
            "season": args.season,
            "verified_only": args.verified_only,
            "order_direction": args.order_direction,
        },
    )


async def run(args: argparse.Namespace, service: LeaderboardService | None = None) -> int:
    """Summarize the leaderboard, then optionally look up one record.

    Returns:
        Process exit code
    """
    service = service or LeaderboardService(args.resource)

    try:
        filters = resolve_filters(args)
    except IdalonError as exc:
        logger.error(exc.message, extra={"error_code": exc.error_code, "details": exc.details})
        return 1

    report = await service.summarize(filters)

    for summary in report.pages:
        logger.info(
            f"Page {summary.page}: median is {summary.median:.3f}, average is {summary.average:.3f}",
            extra=summary.model_dump(),
        )

    if args.lookup_id:
        try:
            record = await service.lookup(args.lookup_id)
        except IdalonError as exc:
            logger.error(
                "Lookup failed",
                extra={"uuid": args.lookup_id, "error_code": exc.error_code, "details": exc.details},
            )
            return 1

        logger.info("Lookup result", extra={"record": record.model_dump(mode="json")})

    return 0


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
