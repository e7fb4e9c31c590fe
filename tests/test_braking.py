"""Tests for engine/braking.py — the stop-at-target control law."""

from __future__ import annotations

import pytest

from regen_simulator.config import SimulationParameters
from regen_simulator.engine.braking import BrakingPolicy, braking_motor_force, required_braking_force

DRAG = 207.85425  # total drag at 10 m/s for the reference vehicle


def test_required_force_formula(params: SimulationParameters):
    # a_req = −10² / (2 × 50) = −1.0 → F = 1800 × −1 + drag
    assert required_braking_force(10.0, 50.0, params, DRAG) == pytest.approx(-1800 + DRAG)


def test_regen_when_braking_needed(params: SimulationParameters):
    # 450 m travelled → 50 m remaining
    for policy in BrakingPolicy:
        f = braking_motor_force(10.0, 450.0, params, DRAG, policy)
        assert f == pytest.approx(-1800 + DRAG)
        assert f < 0


def test_regen_only_suppresses_push(params: SimulationParameters):
    """Slow car, lots of room: drag alone stops it short → no push."""
    # a_req = −1 / 200 = −0.005 → F = −9 + drag > 0
    f = braking_motor_force(1.0, 400.0, params, DRAG, BrakingPolicy.REGEN_ONLY)
    assert f == 0.0


def test_regen_or_crawl_applies_push(params: SimulationParameters):
    f = braking_motor_force(1.0, 400.0, params, DRAG, BrakingPolicy.REGEN_OR_CRAWL)
    assert f == pytest.approx(-9 + DRAG)
    assert f > 0


def test_within_tolerance_signals_stop(params: SimulationParameters):
    for policy in BrakingPolicy:
        assert braking_motor_force(5.0, 499.95, params, DRAG, policy) is None


def test_past_target_signals_stop(params: SimulationParameters):
    assert braking_motor_force(5.0, 510.0, params, DRAG, BrakingPolicy.REGEN_OR_CRAWL) is None


def test_just_outside_tolerance_computes_force(params: SimulationParameters):
    assert braking_motor_force(5.0, 499.8, params, DRAG, BrakingPolicy.REGEN_OR_CRAWL) is not None
