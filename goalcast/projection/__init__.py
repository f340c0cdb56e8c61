"""Goal projection engine: deterministic projector, Monte Carlo simulator,
and percentile aggregation."""

from goalcast.projection.aggregation import ProjectionResult, analyze
from goalcast.projection.deterministic import future_value, present_value, project
from goalcast.projection.engine import run_projection
from goalcast.projection.inputs import (
    ProjectionInput,
    ProjectionModel,
    RiskProfile,
    risk_profile_assumptions,
)
from goalcast.projection.monte_carlo import simulate
from goalcast.projection.randomness import BoxMullerSource, NormalSource

__all__ = [
    "BoxMullerSource",
    "NormalSource",
    "ProjectionInput",
    "ProjectionModel",
    "ProjectionResult",
    "RiskProfile",
    "analyze",
    "future_value",
    "present_value",
    "project",
    "risk_profile_assumptions",
    "run_projection",
    "simulate",
]
