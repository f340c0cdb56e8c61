"""Shared pytest fixtures for goalcast engine tests."""

from __future__ import annotations

import numpy as np
import pytest

from goalcast.projection.inputs import ProjectionInput
from goalcast.projection.randomness import BoxMullerSource


class FixedNormalSource:
    """Normal source that returns a constant shock and counts its calls."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.calls = 0

    def standard_normal(self, shape: tuple[int, ...]) -> np.ndarray:
        self.calls += 1
        return np.full(shape, self.value, dtype=np.float64)


class ExplodingNormalSource:
    """Normal source that fails the test if it is ever used."""

    def standard_normal(self, shape: tuple[int, ...]) -> np.ndarray:
        msg = f"random draws requested for shape {shape}"
        raise AssertionError(msg)


@pytest.fixture
def seeded_source() -> BoxMullerSource:
    """Provide a seeded Box-Muller source for deterministic tests."""
    return BoxMullerSource(seed=42)


@pytest.fixture
def zero_shock_source() -> FixedNormalSource:
    """Provide a source whose every draw is exactly zero."""
    return FixedNormalSource(0.0)


@pytest.fixture
def exploding_source() -> ExplodingNormalSource:
    """Provide a source that must never be called."""
    return ExplodingNormalSource()


@pytest.fixture
def moderate_input() -> ProjectionInput:
    """Provide a typical ten-year goal with moderate risk assumptions."""
    return ProjectionInput(
        principal=10_000.0,
        monthly_contribution=500.0,
        months=120,
        annual_return_rate=0.07,
        annual_volatility=0.15,
        target_amount=100_000.0,
        simulation_count=1000,
    )
