"""Tests for projection input validation and risk profiles."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from goalcast.projection.inputs import (
    DEFAULT_SIMULATION_COUNT,
    ProjectionInput,
    RiskProfile,
    risk_profile_assumptions,
)


def _build(**overrides: object) -> ProjectionInput:
    fields: dict[str, object] = {
        "principal": 1000.0,
        "monthly_contribution": 100.0,
        "months": 12,
        "annual_return_rate": 0.05,
    }
    fields.update(overrides)
    return ProjectionInput(**fields)  # type: ignore[arg-type]


class TestProjectionInput:
    """Tests for ProjectionInput construction."""

    def test_defaults(self) -> None:
        inputs = _build()
        assert inputs.annual_volatility == 0.0
        assert inputs.target_amount == 0.0
        assert inputs.inflation_rate == 0.0
        assert inputs.simulation_count == DEFAULT_SIMULATION_COUNT == 1000

    def test_zero_months_allowed(self) -> None:
        assert _build(months=0).months == 0

    def test_negative_return_allowed(self) -> None:
        assert _build(annual_return_rate=-0.2).annual_return_rate == -0.2

    def test_numpy_integers_accepted(self) -> None:
        inputs = _build(months=np.int64(12), simulation_count=np.int32(50))
        assert inputs.months == 12
        assert type(inputs.months) is int
        assert inputs.simulation_count == 50
        assert type(inputs.simulation_count) is int

    def test_frozen(self) -> None:
        inputs = _build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.months = 24  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("overrides", "match"),
        [
            ({"months": -1}, "months must be non-negative"),
            ({"months": 2.5}, "months must be an integer"),
            ({"months": True}, "months must be an integer"),
            ({"annual_volatility": -0.1}, "annual_volatility"),
            ({"simulation_count": 0}, "simulation_count must be >= 1"),
            ({"simulation_count": 10.0}, "simulation_count must be an integer"),
            ({"principal": -1.0}, "principal"),
            ({"monthly_contribution": -1.0}, "monthly_contribution"),
            ({"target_amount": -5.0}, "target_amount"),
            ({"annual_return_rate": float("nan")}, "annual_return_rate"),
            ({"principal": float("inf")}, "principal must be finite"),
            ({"inflation_rate": float("nan")}, "inflation_rate"),
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            _build(**overrides)

    def test_for_risk_profile(self) -> None:
        inputs = ProjectionInput.for_risk_profile(
            "aggressive", principal=500.0, monthly_contribution=50.0, months=24
        )
        assert inputs.annual_return_rate == 0.09
        assert inputs.annual_volatility == 0.25
        assert inputs.simulation_count == 1000


class TestRiskProfiles:
    """Tests for the canonical risk profile mapping."""

    @pytest.mark.parametrize(
        ("profile", "expected"),
        [
            (RiskProfile.CONSERVATIVE, (0.04, 0.08)),
            (RiskProfile.MODERATE, (0.07, 0.15)),
            (RiskProfile.AGGRESSIVE, (0.09, 0.25)),
            ("moderate", (0.07, 0.15)),
        ],
    )
    def test_assumptions(self, profile: RiskProfile | str, expected: tuple) -> None:
        assert risk_profile_assumptions(profile) == expected

    def test_unknown_profile(self) -> None:
        with pytest.raises(ValueError):
            risk_profile_assumptions("reckless")

    def test_volatility_increases_with_risk(self) -> None:
        vols = [risk_profile_assumptions(p)[1] for p in RiskProfile]
        assert vols == sorted(vols)
