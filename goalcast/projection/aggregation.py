"""Percentile aggregation of simulated paths.

Reduces a set of balance paths to pessimistic (p10), median and optimistic
(p90) bands plus the terminal outcome of every path. Percentiles are
selected by index from the sorted cross-section at each month, never
interpolated.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from goalcast.analysis.statistics import (
    index_percentile,
    outcome_histogram,
    percentile_rank,
)

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

P10 = 0.1
MEDIAN = 0.5
P90 = 0.9


def _empty_path() -> NDArray[np.float64]:
    return np.empty(0, dtype=np.float64)


@dataclass(eq=False)
class ProjectionResult:
    """Percentile bands and terminal outcomes of a set of simulated paths.

    Attributes:
        median_path: 50th percentile balance per month.
        p10_path: 10th percentile (pessimistic) balance per month.
        p90_path: 90th percentile (optimistic) balance per month.
        final_outcomes: Terminal balance of every path, in path order.

    """

    median_path: NDArray[np.float64] = field(default_factory=_empty_path)
    p10_path: NDArray[np.float64] = field(default_factory=_empty_path)
    p90_path: NDArray[np.float64] = field(default_factory=_empty_path)
    final_outcomes: NDArray[np.float64] = field(default_factory=_empty_path)

    @property
    def simulation_count(self) -> int:
        """Number of paths the result was built from."""
        return int(self.final_outcomes.size)

    @property
    def is_empty(self) -> bool:
        """True when built from no paths (or zero-length paths)."""
        return self.final_outcomes.size == 0 or self.median_path.size == 0

    def success_probability(self, target: float) -> float:
        """Percentage (0-100) of terminal balances at or above ``target``.

        Always 0.0 for an empty result.
        """
        if self.is_empty:
            return 0.0
        hits = int(np.count_nonzero(self.final_outcomes >= target))
        return 100.0 * hits / self.simulation_count

    def percentile_rank(self, target: float) -> float:
        """Percentile rank (0-100) of ``target`` among terminal balances."""
        if self.is_empty:
            return 0.0
        return percentile_rank(self.final_outcomes, target)

    def histogram(self, bins: int = 20) -> list[dict[str, Any]]:
        """Terminal outcome distribution in ``bins`` equal-width buckets."""
        return outcome_histogram(self.final_outcomes, bins=bins)

    def to_dict(self, target: float | None = None) -> dict[str, Any]:
        """Serialize to plain lists for JSON transport and export.

        Args:
            target: When given, include success_probability and
                target_percentile_rank for it.

        """
        data: dict[str, Any] = {
            "median_path": self.median_path.tolist(),
            "p10_path": self.p10_path.tolist(),
            "p90_path": self.p90_path.tolist(),
            "final_outcomes": self.final_outcomes.tolist(),
            "simulation_count": self.simulation_count,
        }
        if target is not None:
            data["target"] = target
            data["success_probability"] = self.success_probability(target)
            data["target_percentile_rank"] = self.percentile_rank(target)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectionResult:
        """Rebuild a result from the output of ``to_dict``."""
        return cls(
            median_path=np.asarray(data.get("median_path", []), dtype=np.float64),
            p10_path=np.asarray(data.get("p10_path", []), dtype=np.float64),
            p90_path=np.asarray(data.get("p90_path", []), dtype=np.float64),
            final_outcomes=np.asarray(data.get("final_outcomes", []), dtype=np.float64),
        )


def analyze(
    paths: NDArray[np.float64] | Sequence[Sequence[float]],
) -> ProjectionResult:
    """Summarize simulated paths into percentile bands.

    For each month the balances of all N paths are sorted and the values
    at indices ``floor(N * 0.1)``, ``floor(N * 0.5)`` and ``floor(N * 0.9)``
    become the p10, median and p90 bands.

    Args:
        paths: 2-D array (or equal-length sequences) of shape
            (n_paths, months + 1).

    Returns:
        ProjectionResult. With no paths, or paths of length zero, every
        field is empty and success_probability always returns 0.

    Raises:
        ValueError: If the paths are ragged.

    """
    if len(paths) == 0:
        logger.warning("No simulated paths to analyze; returning empty result")
        return ProjectionResult()

    matrix = np.asarray(paths, dtype=np.float64)
    if matrix.ndim != 2:  # noqa: PLR2004
        msg = f"paths must be a 2-D collection of equal-length paths, got {matrix.ndim}-D"
        raise ValueError(msg)
    if matrix.shape[1] == 0:
        logger.warning("Simulated paths are empty; returning empty result")
        return ProjectionResult()

    by_month = np.sort(matrix, axis=0)
    return ProjectionResult(
        median_path=index_percentile(by_month, MEDIAN),
        p10_path=index_percentile(by_month, P10),
        p90_path=index_percentile(by_month, P90),
        final_outcomes=matrix[:, -1].copy(),
    )
