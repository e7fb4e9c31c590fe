"""Road-load force model shared by both strategies.

  F_aero    = ½ · ρ · Cd · A · v²
  F_rolling = Crr · m · g
  F_drag    = F_aero + F_rolling      (≥ 0, opposes motion)
"""

from __future__ import annotations

from typing import NamedTuple

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.constants import AIR_DENSITY, GRAVITY


class ForceBreakdown(NamedTuple):
    aero: float
    rolling: float
    total: float


def aerodynamic_drag(speed_ms: float, params: SimulationParameters) -> float:
    """Aerodynamic drag at ``speed_ms`` (N)."""
    return 0.5 * AIR_DENSITY * params.drag_coefficient * params.frontal_area * speed_ms * speed_ms


def rolling_resistance(params: SimulationParameters) -> float:
    """Rolling resistance (N). Independent of speed on flat road."""
    return params.rolling_resistance_coefficient * params.mass * GRAVITY


def drag_breakdown(speed_ms: float, params: SimulationParameters) -> ForceBreakdown:
    aero = aerodynamic_drag(speed_ms, params)
    rolling = rolling_resistance(params)
    return ForceBreakdown(aero=aero, rolling=rolling, total=aero + rolling)


def total_drag_force(speed_ms: float, params: SimulationParameters) -> float:
    """Total opposing force at ``speed_ms`` (N)."""
    return aerodynamic_drag(speed_ms, params) + rolling_resistance(params)
