"""Engine — force model, braking control law, strategy integrators, summary."""

from regen_simulator.engine.forces import (
    ForceBreakdown,
    aerodynamic_drag,
    drag_breakdown,
    rolling_resistance,
    total_drag_force,
)
from regen_simulator.engine.braking import BrakingPolicy, braking_motor_force, required_braking_force
from regen_simulator.engine.strategies import (
    coast_phase,
    maintain_phase,
    simulate_coast,
    simulate_maintain_then_brake,
)
from regen_simulator.engine.summary import summarize
from regen_simulator.engine.orchestrator import apply_overrides, run_comparison, run_simulation

__all__ = [
    "ForceBreakdown",
    "aerodynamic_drag",
    "drag_breakdown",
    "rolling_resistance",
    "total_drag_force",
    "BrakingPolicy",
    "braking_motor_force",
    "required_braking_force",
    "coast_phase",
    "maintain_phase",
    "simulate_coast",
    "simulate_maintain_then_brake",
    "summarize",
    "run_simulation",
    "apply_overrides",
    "run_comparison",
]
