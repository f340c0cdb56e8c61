"""goalcast sidecar entry point.

Communicates with the dashboard process via stdin/stdout
using newline-delimited JSON messages.

Protocol:
    Request:  {"id": "uuid", "method": "string", "params": {}}
    Response: {"id": "uuid", "result": {}}
    Error:    {"id": "uuid", "error": {"message": "string"}}
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import date
from functools import partial
from typing import Any

from goalcast import log_config
from goalcast.config import EngineSettings, load_settings
from goalcast.export.csv_export import export_projection_csv
from goalcast.export.json_export import ProjectionEncoder, export_projection_json
from goalcast.goals.planning import (
    effective_monthly_contribution,
    inflation_adjusted_target,
    months_between,
    required_monthly_saving,
)
from goalcast.projection.aggregation import ProjectionResult
from goalcast.projection.deterministic import future_value, present_value, project
from goalcast.projection.engine import run_projection
from goalcast.projection.inputs import ProjectionInput, risk_profile_assumptions
from goalcast.projection.randomness import BoxMullerSource
from goalcast.projection.summary import build_advice_prompt

logger = logging.getLogger(__name__)


def _handle_deterministic(
    principal: float,
    monthly_contribution: float,
    months: int,
    annual_return_rate: float,
    inflation_rate: float = 0.0,
) -> dict[str, Any]:
    """Project a deterministic path (no randomness)."""
    path = project(
        principal=principal,
        monthly_contribution=monthly_contribution,
        months=months,
        annual_return_rate=annual_return_rate,
        inflation_rate=inflation_rate,
    )
    return {"path": path, "final_value": float(path[-1])}


def _handle_projection(
    settings: EngineSettings,
    model: str = "monte_carlo",
    seed: int | None = None,
    **params: Any,
) -> dict[str, Any]:
    """Run a projection and return its bands, outcomes and histogram.

    Args:
        settings: Engine defaults for omitted parameters.
        model: "compounding" or "monte_carlo".
        seed: Random seed. Falls back to the configured seed.
        **params: ProjectionInput fields. simulation_count falls back to
            the configured default.

    Returns:
        Result dict (see ProjectionResult.to_dict) plus "histogram".

    """
    params.setdefault("simulation_count", settings.simulation_count)
    inputs = ProjectionInput(**params)
    source = BoxMullerSource(seed=seed if seed is not None else settings.seed)
    result = run_projection(inputs, model=model, source=source)

    response = result.to_dict(target=inputs.target_amount)
    response["model"] = model
    response["histogram"] = result.histogram(bins=settings.histogram_bins)
    return response


def _handle_monte_carlo(
    settings: EngineSettings,
    seed: int | None = None,
    **params: Any,
) -> dict[str, Any]:
    """Run the Monte Carlo model; the model itself is not selectable here."""
    if "model" in params:
        msg = (
            "projection.monte_carlo does not accept a model parameter; "
            "use projection.run"
        )
        raise ValueError(msg)
    return _handle_projection(settings, model="monte_carlo", seed=seed, **params)


def _handle_risk_profile(profile: str) -> dict[str, float]:
    annual_return_rate, annual_volatility = risk_profile_assumptions(profile)
    return {
        "annual_return_rate": annual_return_rate,
        "annual_volatility": annual_volatility,
    }


def _handle_months_between(start: str, end: str) -> int:
    return months_between(date.fromisoformat(start), date.fromisoformat(end))


def _handle_export_csv(
    result: dict[str, Any],
    target: float | None = None,
    output_path: str | None = None,
) -> str:
    return export_projection_csv(
        ProjectionResult.from_dict(result), target=target, output_path=output_path
    )


def _handle_export_json(
    result: dict[str, Any],
    inputs: dict[str, Any] | None = None,
    target: float | None = None,
    output_path: str | None = None,
) -> str:
    return export_projection_json(
        ProjectionResult.from_dict(result),
        inputs=ProjectionInput(**inputs) if inputs is not None else None,
        target=target,
        output_path=output_path,
    )


def _handle_advice_prompt(
    result: dict[str, Any],
    target_amount: float,
    months: int,
    goal_name: str | None = None,
) -> str:
    return build_advice_prompt(
        ProjectionResult.from_dict(result),
        target_amount=target_amount,
        months=months,
        goal_name=goal_name,
    )


def dispatch(
    method: str,
    params: dict[str, Any],
    settings: EngineSettings | None = None,
) -> Any:
    """Route a method call to the appropriate handler.

    Args:
        method: The method name (e.g., "projection.monte_carlo").
        params: The parameters for the method.
        settings: Engine defaults. Loaded from the environment if None.

    Returns:
        The result of the method call.

    Raises:
        ValueError: If the method is not recognized.

    """
    if settings is None:
        settings = load_settings()

    handlers: dict[str, Any] = {
        # Projection
        "projection.deterministic": _handle_deterministic,
        "projection.monte_carlo": partial(_handle_monte_carlo, settings),
        "projection.run": partial(_handle_projection, settings),
        "projection.future_value": future_value,
        "projection.present_value": present_value,
        "projection.risk_profile": _handle_risk_profile,
        # Goal planning
        "goals.months_between": _handle_months_between,
        "goals.effective_contribution": effective_monthly_contribution,
        "goals.required_monthly": required_monthly_saving,
        "goals.inflation_adjusted_target": inflation_adjusted_target,
        # Export
        "export.projection_csv": _handle_export_csv,
        "export.projection_json": _handle_export_json,
        # Advice
        "advice.prompt": _handle_advice_prompt,
    }
    if method not in handlers:
        msg = f"Unknown method: {method}"
        raise ValueError(msg)
    logger.info("Dispatching %s", method)
    return handlers[method](**params)


def main() -> None:
    """Run the sidecar message loop.

    Reads newline-delimited JSON from stdin, dispatches to handlers,
    and writes JSON responses to stdout. Runs indefinitely until
    stdin is closed.
    """
    settings = load_settings()
    log_config.setup(verbose=settings.verbose)

    for raw_line in sys.stdin:
        stripped = raw_line.strip()
        if not stripped:
            continue

        request: dict[str, Any] = {}
        try:
            request = json.loads(stripped)
            request_id = request.get("id", "unknown")
            method = request["method"]
            params = request.get("params", {})
            result = dispatch(method, params, settings=settings)
            response: dict[str, Any] = {"id": request_id, "result": result}
        except Exception as exc:  # noqa: BLE001 — dispatcher must catch all errors and return them as JSON
            logger.warning("Request failed: %s", exc)
            request_id = (
                request.get("id", "unknown") if isinstance(request, dict) else "unknown"
            )
            response = {
                "id": request_id,
                "error": {
                    "message": str(exc),
                    "traceback": traceback.format_exc(),
                },
            }
        sys.stdout.write(json.dumps(response, cls=ProjectionEncoder) + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
