"""Engine settings loaded from the environment.

Settings only supply defaults for parameters a caller leaves out; the
projection functions themselves never read the environment.

Environment variables:
    GOALCAST_SIMULATION_COUNT: Default number of Monte Carlo paths.
    GOALCAST_SEED: Default random seed (unset means fresh entropy).
    GOALCAST_VERBOSE: "1"/"true"/"yes" enables DEBUG logging.
    GOALCAST_HISTOGRAM_BINS: Bins used for terminal-outcome histograms.

"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class EngineSettings:
    """Default engine parameters.

    Attributes:
        simulation_count: Monte Carlo paths per run when not specified.
        seed: Seed for the default randomness source, or None.
        verbose: Enable DEBUG logging in the sidecar.
        histogram_bins: Number of bins for outcome distributions.

    """

    simulation_count: int = 1000
    seed: int | None = None
    verbose: bool = False
    histogram_bins: int = 20

    def __post_init__(self) -> None:
        """Reject settings the engine cannot run with."""
        if self.simulation_count < 1:
            msg = f"simulation_count must be >= 1, got {self.simulation_count}"
            raise ValueError(msg)
        if self.histogram_bins < 1:
            msg = f"histogram_bins must be >= 1, got {self.histogram_bins}"
            raise ValueError(msg)


def load_settings(environ: Mapping[str, str] | None = None) -> EngineSettings:
    """Build settings from GOALCAST_* environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        EngineSettings with any provided overrides applied.

    Raises:
        ValueError: If a variable is set to a malformed value.

    """
    env = os.environ if environ is None else environ
    defaults = EngineSettings()

    seed_raw = env.get("GOALCAST_SEED", "").strip()
    return EngineSettings(
        simulation_count=_read_int(
            env, "GOALCAST_SIMULATION_COUNT", defaults.simulation_count
        ),
        seed=_parse_int("GOALCAST_SEED", seed_raw) if seed_raw else None,
        verbose=_read_bool(env, "GOALCAST_VERBOSE", defaults.verbose),
        histogram_bins=_read_int(env, "GOALCAST_HISTOGRAM_BINS", defaults.histogram_bins),
    )


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    return _parse_int(name, raw)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got '{raw}'"
        raise ValueError(msg) from exc


def _read_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    msg = f"{name} must be a boolean flag, got '{raw}'"
    raise ValueError(msg)
