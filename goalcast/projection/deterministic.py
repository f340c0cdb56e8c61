"""Deterministic compounding projector.

Monthly compounding with contributions added before growth each month.
Contributions escalate by the inflation rate at the start of every new
simulated year (months 13, 25, ...), so a nominal savings plan keeps pace
with cost of living while the target stays in today's dollars.

Also provides the closed-form future/present value helpers used for
quick goal checks.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from goalcast.projection.inputs import check_finite, check_months, check_non_negative

if TYPE_CHECKING:
    from numpy.typing import NDArray

_MONTHS_PER_YEAR = 12


def project(
    principal: float,
    monthly_contribution: float,
    months: int,
    annual_return_rate: float,
    inflation_rate: float = 0.0,
) -> NDArray[np.float64]:
    """Project a balance month by month with no randomness.

    Args:
        principal: Starting balance.
        monthly_contribution: Contribution for the first year.
        months: Horizon in months.
        annual_return_rate: Nominal annual return (0.07 for 7%).
        inflation_rate: Annual escalation applied to the contribution
            once per simulated year.

    Returns:
        NDArray of shape (months + 1,); index 0 is the principal.

    Raises:
        ValueError: If any argument is negative where it must not be,
            or not finite.

    """
    check_non_negative("principal", principal)
    check_non_negative("monthly_contribution", monthly_contribution)
    months = check_months(months)
    check_finite("annual_return_rate", annual_return_rate)
    check_finite("inflation_rate", inflation_rate)

    monthly_rate = annual_return_rate / _MONTHS_PER_YEAR
    path = np.empty(months + 1, dtype=np.float64)
    path[0] = principal

    balance = float(principal)
    contribution = float(monthly_contribution)
    for month in range(1, months + 1):
        if month > 1 and (month - 1) % _MONTHS_PER_YEAR == 0:
            contribution *= 1.0 + inflation_rate
        balance = max((balance + contribution) * (1.0 + monthly_rate), 0.0)
        path[month] = balance

    if not np.all(np.isfinite(path)):
        msg = "projection overflowed; return or inflation assumptions are too large"
        raise ValueError(msg)
    return path


def future_value(
    principal: float,
    monthly_contribution: float,
    months: int,
    annual_rate: float,
) -> float:
    """Closed-form future value with monthly compounding.

    Principal compounds for ``months`` and contributions are treated as
    an ordinary annuity (paid at the end of each month).

    Args:
        principal: Initial amount invested.
        monthly_contribution: Amount contributed each month.
        months: Number of months.
        annual_rate: Annual interest rate (0.05 for 5%).

    Returns:
        Future value of principal plus contributions.

    """
    months = check_months(months)
    monthly_rate = annual_rate / _MONTHS_PER_YEAR
    if monthly_rate == 0:
        return float(principal + monthly_contribution * months)
    growth = (1.0 + monthly_rate) ** months
    return float(
        principal * growth + monthly_contribution * ((growth - 1.0) / monthly_rate)
    )


def present_value(future_amount: float, annual_rate: float, months: int) -> float:
    """Discount a future amount back to today with monthly compounding.

    Returns ``future_amount`` unchanged when the rate or horizon is zero.
    """
    months = check_months(months)
    monthly_rate = annual_rate / _MONTHS_PER_YEAR
    if monthly_rate == 0 or months == 0:
        return float(future_amount)
    return float(future_amount / (1.0 + monthly_rate) ** months)
