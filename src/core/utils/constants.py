"""Global constants used throughout the client.

This module centralizes error codes, endpoint defaults, environment variable
names and filter presets shared by the resource models and the CLI.
"""

import os
from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Transport / Decoding Errors
ERROR_CODE_FETCH_FAILED = "FETCH_FAILED"
ERROR_CODE_PARSE_FAILED = "PARSE_FAILED"
ERROR_CODE_BAD_STATUS = "BAD_STATUS"

# Validation Errors
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"

# ============================================================================
# HTTP
# ============================================================================

DEFAULT_API_URL = "https://api.idalon.com/v2"
DEFAULT_TIMEOUT_SECONDS = 30.0
BAD_STATUS_THRESHOLD = 400

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "idalon-client/1.0.0",
}

NIGHTS_PATH = "nights"
RUNS_PATH = "runs"

# ============================================================================
# Pagination / Filter Presets
# ============================================================================

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MIN_LIMIT = 1

DEFAULT_ORDER_BY = "createdAt"
DEFAULT_ORDER_DIRECTION = "desc"

LEADERBOARD_SEASON = 3
NIGHT_LEADERBOARD_LIMIT = 25
NIGHT_LEADERBOARD_ORDER_BY = "averageRealTime"
RUN_LEADERBOARD_LIMIT = 50
RUN_LEADERBOARD_ORDER_BY = "realTime"

ALLOWED_ORDER_DIRECTIONS = {"asc", "desc"}

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_API_URL = "IDALON_API_URL"
ENV_HTTP_TIMEOUT = "IDALON_HTTP_TIMEOUT"

# ============================================================================
# Helper Functions
# ============================================================================


def get_api_base_url() -> str:
    """Get the API base URL without a trailing slash."""
    return (os.getenv(ENV_API_URL) or DEFAULT_API_URL).rstrip("/")


def get_http_timeout() -> float:
    """Get the per-request timeout in seconds.

    Falls back to the default when the variable is unset or not a number.
    """
    raw = os.getenv(ENV_HTTP_TIMEOUT)
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS

    return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS
