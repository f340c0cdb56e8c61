"""Tests for advice prompt building."""

from __future__ import annotations

from goalcast.projection.aggregation import ProjectionResult, analyze
from goalcast.projection.summary import build_advice_prompt


class TestBuildAdvicePrompt:
    """Tests for build_advice_prompt."""

    def test_includes_probability_and_bands(self) -> None:
        result = analyze([[100.0, v] for v in (900.0, 1000.0, 1100.0, 1200.0)])
        prompt = build_advice_prompt(result, target_amount=1000.0, months=1)
        assert "75.0% chance" in prompt
        assert "4 simulated market scenarios" in prompt
        assert "$1,100.00" in prompt
        assert "1 months" in prompt

    def test_goal_name(self) -> None:
        result = analyze([[1.0, 2.0]])
        prompt = build_advice_prompt(result, 5.0, 1, goal_name="Emergency fund")
        assert '"Emergency fund"' in prompt

    def test_empty_result(self) -> None:
        prompt = build_advice_prompt(ProjectionResult(), 5000.0, 12)
        assert "no simulation data is available" in prompt
        assert "$5,000.00" in prompt
