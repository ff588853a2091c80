"""Aggregate statistics over a fetched page."""

import statistics
from collections.abc import Sequence


def find_median(values: Sequence[float]) -> float:
    """Median of the values; mean of the two middle values for even lengths.

    Example:
        find_median([1, 2, 2, 2, 2, 10]) → 2.0
        find_median([]) → 0.0
    """
    if not values:
        return 0.0

    return float(statistics.median(values))


def find_average(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if not values:
        return 0.0

    return statistics.fmean(values)
