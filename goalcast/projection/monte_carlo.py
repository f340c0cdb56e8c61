"""Monte Carlo path simulator.

Simulates goal balances under log-normal monthly returns (geometric
Brownian motion sampled monthly). The drift is corrected by half the
monthly variance so compounded outcomes stay centred on the stated annual
return instead of being biased upward.

All paths are simulated together with NumPy array operations; each row of
the path buffer is an independent simulation and the buffer is allocated
per call.

"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from goalcast.projection.deterministic import project
from goalcast.projection.randomness import BoxMullerSource

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from goalcast.projection.inputs import ProjectionInput
    from goalcast.projection.randomness import NormalSource

logger = logging.getLogger(__name__)

_MONTHS_PER_YEAR = 12


def simulate(
    inputs: ProjectionInput,
    source: NormalSource | None = None,
) -> NDArray[np.float64]:
    """Simulate ``inputs.simulation_count`` independent balance paths.

    Each month: ``r = exp(mu - sigma**2 / 2 + sigma * z) - 1`` with
    ``mu = annual_return_rate / 12`` and ``sigma = annual_volatility / sqrt(12)``,
    then ``balance = max(0, balance * (1 + r) + monthly_contribution)``.

    A zero horizon or zero volatility needs no random draws: the former
    returns single-point paths, the latter repeats the deterministic
    projection (without contribution escalation) for every path.

    Args:
        inputs: Validated projection input.
        source: Normal variate source. Defaults to an unseeded
            BoxMullerSource.

    Returns:
        NDArray of shape (simulation_count, months + 1). Column 0 is the
        principal for every path.

    """
    n_paths = inputs.simulation_count
    n_months = inputs.months

    if n_months == 0:
        return np.full((n_paths, 1), inputs.principal, dtype=np.float64)

    if inputs.annual_volatility == 0:
        baseline = project(
            principal=inputs.principal,
            monthly_contribution=inputs.monthly_contribution,
            months=n_months,
            annual_return_rate=inputs.annual_return_rate,
        )
        return np.tile(baseline, (n_paths, 1))

    if source is None:
        source = BoxMullerSource()

    monthly_mean = inputs.annual_return_rate / _MONTHS_PER_YEAR
    monthly_vol = inputs.annual_volatility / math.sqrt(_MONTHS_PER_YEAR)
    drift = monthly_mean - monthly_vol**2 / 2.0

    shocks = np.asarray(source.standard_normal((n_paths, n_months)), dtype=np.float64)
    growth = np.exp(drift + monthly_vol * shocks)

    paths = np.empty((n_paths, n_months + 1), dtype=np.float64)
    paths[:, 0] = inputs.principal
    for month in range(n_months):
        stepped = paths[:, month] * growth[:, month] + inputs.monthly_contribution
        paths[:, month + 1] = np.maximum(stepped, 0.0)

    if not np.all(np.isfinite(paths)):
        msg = "simulation overflowed; return or volatility assumptions are too large"
        raise ValueError(msg)

    logger.debug(
        "Simulated %d paths over %d months (mu=%.4f, sigma=%.4f)",
        n_paths,
        n_months,
        inputs.annual_return_rate,
        inputs.annual_volatility,
    )
    return paths
