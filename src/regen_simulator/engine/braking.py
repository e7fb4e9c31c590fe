"""Braking control law — stop exactly at the target.

From v_f² = v² + 2·a·r with v_f = 0:

  a_req = −v² / (2·r)
  F_req = m · a_req + F_drag

``F_req < 0`` is braking the motor must supply (regen).  ``F_req ≥ 0``
means drag alone already stops the car at or before the target; whether
the motor then pushes is the strategy's policy.
"""

from __future__ import annotations

from enum import Enum

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.constants import STOP_TOLERANCE


class BrakingPolicy(str, Enum):
    REGEN_ONLY = "regen_only"
    """Never push: a non-negative requirement becomes zero motor force."""
    REGEN_OR_CRAWL = "regen_or_crawl"
    """Apply the requirement as-is, including positive crawl force."""


def required_braking_force(
    speed_ms: float,
    remaining: float,
    params: SimulationParameters,
    drag: float,
) -> float:
    """Motor force (N) that gives the constant deceleration to stop in ``remaining`` metres."""
    a_req = -(speed_ms * speed_ms) / (2.0 * remaining)
    return params.mass * a_req + drag


def braking_motor_force(
    speed_ms: float,
    distance: float,
    params: SimulationParameters,
    drag: float,
    policy: BrakingPolicy,
) -> float | None:
    """Motor force for this tick under ``policy``.

    Returns ``None`` when the car is within ``STOP_TOLERANCE`` of the
    target: the caller must force speed to zero.
    """
    remaining = params.target_distance - distance
    if remaining <= STOP_TOLERANCE:
        return None

    f_req = required_braking_force(speed_ms, remaining, params, drag)
    if policy is BrakingPolicy.REGEN_ONLY and f_req >= 0:
        return 0.0
    return f_req
