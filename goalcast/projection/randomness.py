"""Sources of standard-normal variates for the Monte Carlo simulator.

The simulator never touches a global random state; it asks a
``NormalSource`` for a block of draws. Tests swap in seeded or fixed
sources to make runs reproducible.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


class NormalSource(Protocol):
    """Anything that can produce standard-normal draws of a given shape."""

    def standard_normal(self, shape: tuple[int, ...]) -> NDArray[np.float64]:
        """Return an array of N(0, 1) variates with the requested shape."""
        ...


class BoxMullerSource:
    """Box-Muller transform over a NumPy uniform generator.

    ``z = sqrt(-2 ln u) * cos(2 pi v)`` with ``u, v ~ U(0, 1)``. Any ``u``
    that comes back as exactly zero is redrawn so ``ln(0)`` never occurs.

    Args:
        seed: Seed for a fresh ``numpy.random.Generator``. Ignored when
            ``rng`` is given.
        rng: Existing generator to draw uniforms from.

    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def standard_normal(self, shape: tuple[int, ...]) -> NDArray[np.float64]:
        """Return Box-Muller normal variates with the requested shape."""
        u = self._rng.random(shape)
        zeros = u == 0.0
        while np.any(zeros):
            u[zeros] = self._rng.random(int(np.count_nonzero(zeros)))
            zeros = u == 0.0
        v = self._rng.random(shape)
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
