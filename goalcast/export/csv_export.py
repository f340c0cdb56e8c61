"""CSV export for projection results.

Generates CSV files with metadata headers including export date,
horizon, and success probability information.

"""

from __future__ import annotations

import csv
import io
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from goalcast.projection.aggregation import ProjectionResult


def export_projection_csv(
    result: ProjectionResult,
    target: float | None = None,
    output_path: str | None = None,
) -> str:
    """Export projection percentile bands to CSV.

    Writes one row per month with p10, median and p90 balances.

    Args:
        result: Aggregated projection result.
        target: Goal amount; when given, its success probability is
            written to the metadata header.
        output_path: File path to write. If None, returns CSV string.

    Returns:
        The CSV content as a string, or file path if output_path given.
        An empty result exports as an empty string.

    """
    if result.is_empty:
        return ""

    extra = [f"Simulations: {result.simulation_count}"]
    if target is not None:
        extra.append(
            f"Success Probability: {result.success_probability(target):.1f}% "
            f"(target {target:.2f})"
        )

    output = io.StringIO()
    _write_metadata_header(output, "Projection Results Export", extra=extra)

    fieldnames = ["month", "p10", "median", "p90"]
    writer = csv.DictWriter(output, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    for month in range(len(result.median_path)):
        row: dict[str, Any] = {
            "month": month,
            "p10": f"{float(result.p10_path[month]):.2f}",
            "median": f"{float(result.median_path[month]):.2f}",
            "p90": f"{float(result.p90_path[month]):.2f}",
        }
        writer.writerow(row)

    content = output.getvalue()
    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
        return output_path
    return content


def _write_metadata_header(
    output: io.StringIO,
    title: str,
    extra: list[str] | None = None,
) -> None:
    """Write metadata comment lines at the top of a CSV export.

    Args:
        output: StringIO buffer to write to.
        title: Export title.
        extra: Optional additional metadata lines.

    """
    now = datetime.now(tz=UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    output.write(f"# {title}\n")
    output.write(f"# Generated: {now}\n")
    for line in extra or []:
        output.write(f"# {line}\n")
