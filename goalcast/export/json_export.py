"""JSON export for projection results.

Produces a JSON document of the projection inputs, percentile bands and
terminal outcomes with metadata.

"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from goalcast.projection.aggregation import ProjectionResult
    from goalcast.projection.inputs import ProjectionInput


class ProjectionEncoder(json.JSONEncoder):
    """JSON encoder that handles NumPy types and datetimes."""

    def default(self, o: Any) -> Any:
        """Convert non-serializable types to JSON-safe values."""
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


def export_projection_json(
    result: ProjectionResult,
    inputs: ProjectionInput | None = None,
    target: float | None = None,
    output_path: str | None = None,
) -> str:
    """Export a projection result to JSON format.

    Args:
        result: Aggregated projection result.
        inputs: The input the result was computed from, if available.
        target: Goal amount used for success probability. Defaults to
            ``inputs.target_amount`` when inputs are given.
        output_path: File path to write. If None, returns JSON string.

    Returns:
        JSON string, or file path if output_path given.

    """
    if target is None and inputs is not None:
        target = inputs.target_amount

    export_data: dict[str, Any] = {
        "metadata": {
            "export_date": datetime.now(tz=UTC),
            "format_version": "1.0",
            "source": "goalcast",
            "simulation_count": result.simulation_count,
        },
    }
    if inputs is not None:
        export_data["inputs"] = asdict(inputs)
    export_data["result"] = result.to_dict(target=target)

    content = json.dumps(export_data, cls=ProjectionEncoder, indent=2)

    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
        return output_path
    return content
