"""Tests for CSV and JSON export modules."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from goalcast.export.csv_export import export_projection_csv
from goalcast.export.json_export import export_projection_json
from goalcast.projection.aggregation import ProjectionResult, analyze
from goalcast.projection.inputs import ProjectionInput


@pytest.fixture
def sample_result() -> ProjectionResult:
    return analyze(
        [
            [1000.0, 1100.0, 1200.0],
            [1000.0, 1050.0, 1080.0],
            [1000.0, 1150.0, 1300.0],
            [1000.0, 980.0, 1010.0],
        ]
    )


class TestExportProjectionCSV:
    """Test projection CSV export."""

    def test_basic_export(self, sample_result: ProjectionResult) -> None:
        csv_str = export_projection_csv(sample_result)
        assert "# Projection Results Export" in csv_str
        assert "# Simulations: 4" in csv_str
        assert "month,p10,median,p90" in csv_str

    def test_one_row_per_month(self, sample_result: ProjectionResult) -> None:
        csv_str = export_projection_csv(sample_result)
        lines = [
            line for line in csv_str.strip().split("\n") if not line.startswith("#")
        ]
        assert len(lines) == 4  # header + months 0..2
        assert lines[1].split(",") == ["0", "1000.00", "1000.00", "1000.00"]
        assert lines[3].split(",") == ["2", "1010.00", "1200.00", "1300.00"]

    def test_metadata_and_rows_share_line_endings(
        self, sample_result: ProjectionResult
    ) -> None:
        csv_str = export_projection_csv(sample_result, target=1100.0)
        assert "\r" not in csv_str
        assert csv_str.splitlines() == csv_str.split("\n")[:-1]

    def test_success_probability_header(self, sample_result: ProjectionResult) -> None:
        csv_str = export_projection_csv(sample_result, target=1100.0)
        assert "# Success Probability: 50.0% (target 1100.00)" in csv_str

    def test_export_to_file(
        self, sample_result: ProjectionResult, tmp_path: Path
    ) -> None:
        out_path = str(tmp_path / "projection.csv")
        result = export_projection_csv(sample_result, output_path=out_path)
        assert result == out_path
        assert "month,p10,median,p90" in Path(out_path).read_text()

    def test_empty_result(self) -> None:
        assert export_projection_csv(ProjectionResult()) == ""


class TestExportProjectionJSON:
    """Test projection JSON export."""

    def test_structure(self, sample_result: ProjectionResult) -> None:
        data = json.loads(export_projection_json(sample_result, target=1100.0))
        assert data["metadata"]["source"] == "goalcast"
        assert data["metadata"]["simulation_count"] == 4
        assert data["result"]["success_probability"] == 50.0
        assert data["result"]["p90_path"] == [1000.0, 1150.0, 1300.0]
        assert "inputs" not in data

    def test_target_from_inputs(self, sample_result: ProjectionResult) -> None:
        inputs = ProjectionInput(1000.0, 0.0, 2, 0.05, target_amount=1200.0)
        data = json.loads(export_projection_json(sample_result, inputs=inputs))
        assert data["inputs"]["target_amount"] == 1200.0
        assert data["result"]["success_probability"] == 50.0

    def test_export_date_is_iso(self, sample_result: ProjectionResult) -> None:
        data = json.loads(export_projection_json(sample_result))
        assert "T" in data["metadata"]["export_date"]

    def test_export_to_file(
        self, sample_result: ProjectionResult, tmp_path: Path
    ) -> None:
        out_path = str(tmp_path / "projection.json")
        assert export_projection_json(sample_result, output_path=out_path) == out_path
        data = json.loads(Path(out_path).read_text())
        assert data["metadata"]["format_version"] == "1.0"
