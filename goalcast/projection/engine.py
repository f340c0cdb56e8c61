"""Model selection for goal projections.

``run_projection`` is the single entry point callers use to switch between
the deterministic compounding model and the Monte Carlo model. Both return
a ``ProjectionResult`` so charting code reads the same bands either way;
the compounding model produces one path, so its three bands coincide.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from goalcast.projection.aggregation import ProjectionResult, analyze
from goalcast.projection.deterministic import project
from goalcast.projection.inputs import ProjectionModel
from goalcast.projection.monte_carlo import simulate

if TYPE_CHECKING:
    from goalcast.projection.inputs import ProjectionInput
    from goalcast.projection.randomness import NormalSource

logger = logging.getLogger(__name__)


def run_projection(
    inputs: ProjectionInput,
    model: ProjectionModel | str = ProjectionModel.MONTE_CARLO,
    source: NormalSource | None = None,
) -> ProjectionResult:
    """Run the selected projection model and aggregate its paths.

    Args:
        inputs: Validated projection input.
        model: ProjectionModel or its value ("compounding", "monte_carlo").
        source: Normal variate source for the Monte Carlo model.

    Returns:
        ProjectionResult for the chosen model.

    Raises:
        ValueError: If the model name is not recognized.

    """
    selected = ProjectionModel(model)

    if selected is ProjectionModel.COMPOUNDING:
        path = project(
            principal=inputs.principal,
            monthly_contribution=inputs.monthly_contribution,
            months=inputs.months,
            annual_return_rate=inputs.annual_return_rate,
            inflation_rate=inputs.inflation_rate,
        )
        result = analyze(path.reshape(1, -1))
    else:
        result = analyze(simulate(inputs, source=source))

    logger.debug(
        "%s projection over %d months: median final %.2f",
        selected.value,
        inputs.months,
        float(result.median_path[-1]),
    )
    return result
