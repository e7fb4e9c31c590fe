"""Configuration models — simulation inputs and analyst settings."""

from regen_simulator.config.parameters import SimulationParameters, load_parameters
from regen_simulator.config.analyst import AnalystConfig

__all__ = [
    "SimulationParameters",
    "load_parameters",
    "AnalystConfig",
]
