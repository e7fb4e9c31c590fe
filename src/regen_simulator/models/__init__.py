"""Result models — simulation output contracts."""

from regen_simulator.models.results import (
    RunSummary,
    SimulationResult,
    SimulationStep,
    StrategyPhase,
)

__all__ = [
    "RunSummary",
    "SimulationResult",
    "SimulationStep",
    "StrategyPhase",
]
