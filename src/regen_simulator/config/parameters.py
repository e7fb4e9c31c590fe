"""Simulation parameters — the complete, immutable input for one run."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class SimulationParameters(BaseModel):
    """Vehicle + road inputs, fixed for the duration of a run.

    Validation happens here, at construction.  The engine trusts whatever
    it is given and relies on its own numeric bounds to terminate.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mass: float = Field(default=1800.0, gt=0, description="Vehicle mass (kg)")
    initial_speed: float = Field(default=60.0, gt=0, description="Speed at lift-off (km/h)")
    target_distance: float = Field(default=500.0, gt=0, description="Distance to the stop point (m)")
    drag_coefficient: float = Field(default=0.23, gt=0, description="Aerodynamic drag coefficient Cd")
    frontal_area: float = Field(default=2.22, gt=0, description="Frontal area (m²)")
    rolling_resistance_coefficient: float = Field(
        default=0.01, ge=0, description="Tyre rolling resistance coefficient Crr",
    )
    regen_efficiency: float = Field(
        default=0.70, ge=0, le=1.0,
        description="Fraction of braking work returned to the battery (0.70 = 70%)",
    )
    braking_distance: float = Field(
        default=50.0, ge=0,
        description="Distance before the target at which braking / regen may begin (m)",
    )
    apply_regen_to_strategy_a: bool = Field(
        default=False,
        description="Let the coasting strategy regen-brake inside the braking distance "
                    "if it has not stopped yet. False = pure coast.",
    )

    @property
    def initial_speed_ms(self) -> float:
        """Initial speed in m/s."""
        return self.initial_speed / 3.6

    @property
    def brake_start_distance(self) -> float:
        """Distance from the start at which the braking window opens (floored at 0)."""
        return max(0.0, self.target_distance - self.braking_distance)


def load_parameters(path: str | Path) -> SimulationParameters:
    """Load a YAML scenario file into ``SimulationParameters``.

    Keys missing from the file take their defaults; unknown keys are rejected.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return SimulationParameters(**data)
