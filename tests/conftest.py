"""Shared test fixtures — parameter sets matching scenarios/base_case.yaml."""

from __future__ import annotations

import pytest

from regen_simulator.config import SimulationParameters
from regen_simulator.engine.orchestrator import run_simulation
from regen_simulator.models.results import SimulationResult


@pytest.fixture
def params() -> SimulationParameters:
    """Reference vehicle, pure coast."""
    return SimulationParameters(
        mass=1800,
        initial_speed=60,
        target_distance=500,
        drag_coefficient=0.23,
        frontal_area=2.22,
        rolling_resistance_coefficient=0.01,
        regen_efficiency=0.70,
        braking_distance=50,
        apply_regen_to_strategy_a=False,
    )


@pytest.fixture
def regen_params(params: SimulationParameters) -> SimulationParameters:
    """Reference vehicle, Strategy A allowed to regen in the last 50 m."""
    return params.model_copy(update={"apply_regen_to_strategy_a": True})


@pytest.fixture
def short_coast_params(params: SimulationParameters) -> SimulationParameters:
    """Target far enough away that drag stops a pure coast well before it."""
    return params.model_copy(update={"target_distance": 2000})


@pytest.fixture
def result(params: SimulationParameters) -> SimulationResult:
    return run_simulation(params)


@pytest.fixture
def regen_result(regen_params: SimulationParameters) -> SimulationResult:
    return run_simulation(regen_params)


@pytest.fixture
def unchecked_params():
    """Factory for parameters that bypass validation, for engine robustness tests."""
    def _make(**overrides) -> SimulationParameters:
        data = SimulationParameters().model_dump()
        data.update(overrides)
        return SimulationParameters.model_construct(**data)
    return _make
