"""Plain-language summaries of projection results.

Builds the prompt text handed to an external advice generator. Nothing
here calls a generator; it only turns the numbers into words.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from goalcast.projection.aggregation import ProjectionResult


def build_advice_prompt(
    result: ProjectionResult,
    target_amount: float,
    months: int,
    goal_name: str | None = None,
) -> str:
    """Describe a projection result as a prompt for savings advice.

    Args:
        result: Aggregated projection result.
        target_amount: Goal amount the user is saving toward.
        months: Horizon the result covers.
        goal_name: Optional goal label (e.g. "House down payment").

    Returns:
        Prompt text.

    """
    label = f'the goal "{goal_name}"' if goal_name else "a savings goal"
    if result.is_empty:
        return (
            f"I am saving toward {label} of ${target_amount:,.2f} over "
            f"{months} months, but no simulation data is available yet. "
            "What should I consider when planning for it?"
        )

    probability = result.success_probability(target_amount)
    return (
        f"I am saving toward {label} of ${target_amount:,.2f} over {months} "
        f"months. Across {result.simulation_count} simulated market scenarios "
        f"there is a {probability:.1f}% chance of reaching it. The median "
        f"outcome is ${float(result.median_path[-1]):,.2f}, the pessimistic "
        f"(10th percentile) outcome is ${float(result.p10_path[-1]):,.2f}, and "
        f"the optimistic (90th percentile) outcome is "
        f"${float(result.p90_path[-1]):,.2f}. "
        "Give brief, practical advice to improve my chances."
    )
