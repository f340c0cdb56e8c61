"""Statistical utilities for simulated outcomes.

Provides index-based percentile selection, percentile ranking, and
distribution binning for terminal balances.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy import stats

if TYPE_CHECKING:
    from numpy.typing import NDArray


def index_percentile(
    sorted_values: NDArray[np.float64],
    fraction: float,
) -> NDArray[np.float64]:
    """Select the ``floor(N * fraction)``-th row of values sorted along axis 0.

    No interpolation: the result is always one of the observed values, so
    bands built this way are exactly reproducible.

    Args:
        sorted_values: Array sorted ascending along axis 0, N rows.
        fraction: Quantile in [0, 1).

    Returns:
        The selected row (a scalar array for 1-D input).

    """
    index = math.floor(len(sorted_values) * fraction)
    return np.asarray(sorted_values[index], dtype=np.float64)


def percentile_rank(
    values: NDArray[np.float64],
    target: float,
) -> float:
    """Calculate the percentile rank of a target value within a distribution.

    Uses scipy.stats.percentileofscore with "rank" interpolation.

    Args:
        values: Array of observed values.
        target: The value to rank.

    Returns:
        Percentile rank as a float between 0 and 100.

    """
    return float(stats.percentileofscore(values, target, kind="rank"))


def outcome_histogram(
    outcomes: NDArray[np.float64],
    bins: int = 20,
) -> list[dict[str, Any]]:
    """Bin terminal outcomes into equal-width buckets for charting.

    Args:
        outcomes: Terminal balances of every simulated path.
        bins: Number of buckets between the minimum and maximum outcome.

    Returns:
        One dict per bucket with keys: range (label), lower, upper,
        midpoint, count. Empty input returns an empty list. When every
        outcome is identical a single bucket holds all of them.

    Raises:
        ValueError: If bins < 1.

    """
    if bins < 1:
        msg = f"bins must be >= 1, got {bins}"
        raise ValueError(msg)
    values = np.asarray(outcomes, dtype=np.float64)
    if values.size == 0:
        return []

    low = float(values.min())
    high = float(values.max())
    if low == high:
        return [_bucket(low, high, int(values.size))]

    counts, edges = np.histogram(values, bins=bins, range=(low, high))
    return [
        _bucket(float(edges[i]), float(edges[i + 1]), int(counts[i]))
        for i in range(bins)
    ]


def _bucket(lower: float, upper: float, count: int) -> dict[str, Any]:
    return {
        "range": f"{lower:.0f} - {upper:.0f}",
        "lower": lower,
        "upper": upper,
        "midpoint": (lower + upper) / 2.0,
        "count": count,
    }
