"""Result types — the contract between engine, API, and dashboard.

One ``SimulationStep`` per integration tick.  Each strategy's run is an
ordered ``list[SimulationStep]`` that always opens with a synthetic start
step (distance 0, time 0, energy 0, power 0).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from regen_simulator.config.parameters import SimulationParameters


class StrategyPhase(str, Enum):
    """Control phase a strategy was in when a step was produced."""

    COAST = "coast"
    """Strategy A: no motor force, drag only."""
    REGEN = "regen"
    """Strategy A: controlled regen inside the braking window (toggle on)."""
    MAINTAIN = "maintain"
    """Strategy B: motor cancels drag, speed held."""
    BRAKE = "brake"
    """Strategy B: braking control law, regen or crawl."""


class SimulationStep(BaseModel):
    """State after one tick."""

    model_config = ConfigDict(use_attribute_docstrings=True)

    distance: float
    """Distance travelled since lift-off (m)."""
    speed: float
    """Speed (km/h)."""
    time: float
    """Elapsed time (s)."""
    energy_net: float
    """Cumulative net energy (J). Positive = consumed, negative = regenerated."""
    power: float
    """Instantaneous battery power this tick (W). Zero while coasting."""
    phase: StrategyPhase


class RunSummary(BaseModel):
    """Headline numbers read off the final step of each run."""

    model_config = ConfigDict(use_attribute_docstrings=True)

    time_a: float
    time_b: float
    energy_a_wh: float
    energy_b_wh: float
    final_distance_a: float
    final_distance_b: float
    did_reach_target_a: bool
    """Strategy A ended within 2 m of the target (or beyond it)."""


class SimulationResult(BaseModel):
    """Complete output of one engine invocation."""

    parameters: SimulationParameters
    strategy_a: list[SimulationStep]
    """Coast (optionally with end-phase regen)."""
    strategy_b: list[SimulationStep]
    """Maintain speed, then regen brake."""
    summary: RunSummary
