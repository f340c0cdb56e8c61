"""Projection inputs, model selection, and risk profile presets.

All engine parameters travel in a single ``ProjectionInput`` value that is
validated when it is built, so nothing downstream has to re-check them.

"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum

DEFAULT_SIMULATION_COUNT = 1000


class ProjectionModel(Enum):
    """Supported projection models."""

    COMPOUNDING = "compounding"
    MONTE_CARLO = "monte_carlo"


class RiskProfile(Enum):
    """Investor risk tolerance used to pick return/volatility assumptions."""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


# (annual_return_rate, annual_volatility)
_RISK_PROFILE_ASSUMPTIONS: dict[RiskProfile, tuple[float, float]] = {
    RiskProfile.CONSERVATIVE: (0.04, 0.08),
    RiskProfile.MODERATE: (0.07, 0.15),
    RiskProfile.AGGRESSIVE: (0.09, 0.25),
}


def risk_profile_assumptions(profile: RiskProfile | str) -> tuple[float, float]:
    """Return the canonical (annual return, annual volatility) for a profile.

    Args:
        profile: A RiskProfile or its string value (e.g. "moderate").

    Returns:
        Tuple of (annual_return_rate, annual_volatility).

    Raises:
        ValueError: If the profile name is not recognized.

    """
    return _RISK_PROFILE_ASSUMPTIONS[RiskProfile(profile)]


def check_non_negative(name: str, value: float) -> None:
    """Raise ValueError unless ``value`` is a finite number >= 0."""
    check_finite(name, value)
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def check_finite(name: str, value: float) -> None:
    """Raise ValueError if ``value`` is NaN or infinite."""
    if not math.isfinite(value):
        msg = f"{name} must be finite, got {value}"
        raise ValueError(msg)


def check_integer(name: str, value: int) -> int:
    """Return ``value`` as a plain int, rejecting bools and non-integers.

    NumPy integer scalars are accepted.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        msg = f"{name} must be an integer, got {value!r}"
        raise ValueError(msg)
    return int(value)


def check_months(months: int) -> int:
    """Return ``months`` as an int; raise ValueError unless it is >= 0."""
    months = check_integer("months", months)
    if months < 0:
        msg = f"months must be non-negative, got {months}"
        raise ValueError(msg)
    return months


@dataclass(frozen=True)
class ProjectionInput:
    """Goal state and market assumptions for a single projection.

    Attributes:
        principal: Starting balance.
        monthly_contribution: Amount added at the end of each month.
        months: Horizon in months. Zero yields a single-point path.
        annual_return_rate: Expected nominal annual return (0.07 = 7%).
        annual_volatility: Annualized standard deviation of returns.
            Used by the Monte Carlo model only; zero degenerates to
            the deterministic projection.
        target_amount: Goal threshold used for success probability.
        simulation_count: Number of Monte Carlo paths.
        inflation_rate: Annual contribution escalation applied by the
            compounding model.

    """

    principal: float
    monthly_contribution: float
    months: int
    annual_return_rate: float
    annual_volatility: float = 0.0
    target_amount: float = 0.0
    simulation_count: int = DEFAULT_SIMULATION_COUNT
    inflation_rate: float = 0.0

    def __post_init__(self) -> None:
        """Validate every field before any computation can run."""
        check_non_negative("principal", self.principal)
        check_non_negative("monthly_contribution", self.monthly_contribution)
        object.__setattr__(self, "months", check_months(self.months))
        check_finite("annual_return_rate", self.annual_return_rate)
        check_non_negative("annual_volatility", self.annual_volatility)
        check_non_negative("target_amount", self.target_amount)
        check_finite("inflation_rate", self.inflation_rate)
        simulation_count = check_integer("simulation_count", self.simulation_count)
        if simulation_count < 1:
            msg = f"simulation_count must be >= 1, got {simulation_count}"
            raise ValueError(msg)
        object.__setattr__(self, "simulation_count", simulation_count)

    @classmethod
    def for_risk_profile(
        cls,
        profile: RiskProfile | str,
        principal: float,
        monthly_contribution: float,
        months: int,
        target_amount: float = 0.0,
        simulation_count: int = DEFAULT_SIMULATION_COUNT,
    ) -> ProjectionInput:
        """Build an input whose return and volatility come from a preset."""
        annual_return_rate, annual_volatility = risk_profile_assumptions(profile)
        return cls(
            principal=principal,
            monthly_contribution=monthly_contribution,
            months=months,
            annual_return_rate=annual_return_rate,
            annual_volatility=annual_volatility,
            target_amount=target_amount,
            simulation_count=simulation_count,
        )
