"""Tests for engine/forces.py — hand-calculated expected values."""

from __future__ import annotations

import pytest

from regen_simulator.config import SimulationParameters
from regen_simulator.engine.forces import (
    aerodynamic_drag,
    drag_breakdown,
    rolling_resistance,
    total_drag_force,
)


def test_aerodynamic_drag(params: SimulationParameters):
    # 0.5 × 1.225 × 0.23 × 2.22 × 10² = 31.27425
    assert aerodynamic_drag(10.0, params) == pytest.approx(31.27425)


def test_aerodynamic_drag_zero_at_rest(params: SimulationParameters):
    assert aerodynamic_drag(0.0, params) == 0.0


def test_aero_scales_with_speed_squared(params: SimulationParameters):
    assert aerodynamic_drag(20.0, params) == pytest.approx(4 * aerodynamic_drag(10.0, params))


def test_rolling_resistance(params: SimulationParameters):
    # 0.01 × 1800 × 9.81 = 176.58
    assert rolling_resistance(params) == pytest.approx(176.58)


def test_rolling_resistance_zero_crr(params: SimulationParameters):
    p = params.model_copy(update={"rolling_resistance_coefficient": 0.0})
    assert rolling_resistance(p) == 0.0


def test_total_drag_force(params: SimulationParameters):
    assert total_drag_force(10.0, params) == pytest.approx(31.27425 + 176.58)


def test_breakdown_sums(params: SimulationParameters):
    f = drag_breakdown(16.0, params)
    assert f.total == pytest.approx(f.aero + f.rolling)
    assert f.total == pytest.approx(total_drag_force(16.0, params))
    assert f.aero > 0 and f.rolling > 0
