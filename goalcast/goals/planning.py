"""Goal planning helpers used by callers around the projection engine.

Covers horizon calculation from dates, folding recurring contributions
into a single monthly figure, the naive required saving, and optional
inflation adjustment of a target. Target inflation is a caller-side
adjustment; the engine itself only escalates contributions.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from goalcast.projection.inputs import check_finite, check_months

if TYPE_CHECKING:
    from datetime import date

    from numpy.typing import NDArray

# Monthly equivalents of recurring contribution frequencies
_FREQUENCY_FACTORS: dict[str, float] = {
    "monthly": 1.0,
    "bi-weekly": 26.0 / 12.0,
    "weekly": 52.0 / 12.0,
}


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end``.

    Returns 0 when ``end`` is before ``start``, including an earlier day
    within the same month count.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months < 0 or (months == 0 and end.day < start.day):
        return 0
    return months


def effective_monthly_contribution(
    base: float,
    recurring: list[dict[str, Any]] | None = None,
) -> float:
    """Combine a base monthly contribution with active recurring ones.

    Args:
        base: Planned monthly contribution.
        recurring: Dicts with keys: amount, frequency ("weekly",
            "bi-weekly", "monthly"), and optionally is_active (default
            True).

    Returns:
        Total monthly-equivalent contribution.

    Raises:
        ValueError: If a frequency is not recognized.

    """
    total = float(base)
    for item in recurring or []:
        if not item.get("is_active", True):
            continue
        frequency = str(item.get("frequency", "monthly"))
        if frequency not in _FREQUENCY_FACTORS:
            msg = (
                f"frequency must be one of {sorted(_FREQUENCY_FACTORS)}, "
                f"got '{frequency}'"
            )
            raise ValueError(msg)
        total += float(item["amount"]) * _FREQUENCY_FACTORS[frequency]
    return total


def required_monthly_saving(target: float, current: float, months: int) -> float:
    """Monthly amount needed to close the gap ignoring growth.

    A horizon of zero months is treated as one month.
    """
    months = check_months(months)
    return (target - current) / max(months, 1)


def inflation_adjusted_target(
    target: float,
    months: int,
    inflation_rate: float,
) -> NDArray[np.float64]:
    """Grow a target by monthly inflation over the horizon.

    Args:
        target: Goal amount in today's dollars.
        months: Horizon in months.
        inflation_rate: Annual inflation (0.025 for 2.5%), applied as
            ``inflation_rate / 12`` per month.

    Returns:
        NDArray of shape (months + 1,); index 0 is the unadjusted target.

    """
    months = check_months(months)
    check_finite("inflation_rate", inflation_rate)
    monthly_inflation = inflation_rate / 12.0
    return target * (1.0 + monthly_inflation) ** np.arange(months + 1, dtype=np.float64)
