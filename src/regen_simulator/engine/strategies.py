"""Strategy integrators — forward-Euler loops for both deceleration strategies.

Strategy A (coast):
  COAST  → motor off, drag decelerates the car.
  REGEN  → only when ``apply_regen_to_strategy_a`` and inside the braking
           window; braking control law, regen only (never pushes).

Strategy B (maintain then brake):
  MAINTAIN → motor force = drag, speed held constant.
  BRAKE    → braking control law, regen or crawl.

Each tick:  F_net = F_motor − F_drag → a = F_net / m → v ← max(0, v + a·dt)
→ x ← x + v·dt → t ← t + dt.  Energy for the tick is F_motor · dx, scaled
by ``regen_efficiency`` when F_motor < 0.

Termination: v ≤ MIN_SPEED, distance overrun, or t > MAX_TIME.
"""

from __future__ import annotations

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.braking import BrakingPolicy, braking_motor_force
from regen_simulator.engine.constants import (
    BRAKE_OVERRUN_MARGIN,
    COAST_OVERRUN_FACTOR,
    KMH_PER_MS,
    MAX_TIME,
    MIN_SPEED,
    TIME_STEP,
)
from regen_simulator.engine.forces import total_drag_force
from regen_simulator.models.results import SimulationStep, StrategyPhase


# ═══════════════════════════════════════════════════════════════════════════
# Phase selection (evaluated every tick)
# ═══════════════════════════════════════════════════════════════════════════

def coast_phase(distance: float, params: SimulationParameters) -> StrategyPhase:
    """Strategy A phase at ``distance``."""
    if params.apply_regen_to_strategy_a and distance >= params.brake_start_distance:
        return StrategyPhase.REGEN
    return StrategyPhase.COAST


def maintain_phase(distance: float, params: SimulationParameters) -> StrategyPhase:
    """Strategy B phase at ``distance``."""
    if distance < params.brake_start_distance:
        return StrategyPhase.MAINTAIN
    return StrategyPhase.BRAKE


# ═══════════════════════════════════════════════════════════════════════════
# Shared tick helpers
# ═══════════════════════════════════════════════════════════════════════════

def tick_energy(
    motor_force: float,
    dx: float,
    speed_ms: float,
    regen_efficiency: float,
) -> tuple[float, float]:
    """Energy (J) and power (W) drawn from the battery this tick.

    Negative force is regen: only ``regen_efficiency`` of the braking work
    comes back.  Non-negative force is drawn in full.
    """
    if motor_force < 0:
        return (
            motor_force * dx * regen_efficiency,
            motor_force * speed_ms * regen_efficiency,
        )
    return motor_force * dx, motor_force * speed_ms


def _start_step(speed_ms: float, phase: StrategyPhase) -> SimulationStep:
    return SimulationStep(
        distance=0.0,
        speed=speed_ms * KMH_PER_MS,
        time=0.0,
        energy_net=0.0,
        power=0.0,
        phase=phase,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Strategy A — coast, optional end-phase regen
# ═══════════════════════════════════════════════════════════════════════════

def simulate_coast(params: SimulationParameters) -> list[SimulationStep]:
    """Integrate Strategy A from lift-off until termination."""
    v = params.initial_speed_ms
    x = 0.0
    t = 0.0
    energy = 0.0
    overrun = params.target_distance * COAST_OVERRUN_FACTOR

    steps = [_start_step(v, coast_phase(0.0, params))]

    while v > MIN_SPEED and x < overrun:
        phase = coast_phase(x, params)
        drag = total_drag_force(v, params)

        motor = 0.0
        if phase is StrategyPhase.REGEN:
            force = braking_motor_force(v, x, params, drag, BrakingPolicy.REGEN_ONLY)
            if force is None:
                v = 0.0  # arrived
            else:
                motor = force

        a = (motor - drag) / params.mass
        v = max(0.0, v + a * TIME_STEP)
        dx = v * TIME_STEP
        x += dx
        t += TIME_STEP

        d_energy, power = tick_energy(motor, dx, v, params.regen_efficiency)
        energy += d_energy

        steps.append(SimulationStep(
            distance=x,
            speed=v * KMH_PER_MS,
            time=t,
            energy_net=energy,
            power=power,
            phase=phase,
        ))

        if t > MAX_TIME:
            break

    return steps


# ═══════════════════════════════════════════════════════════════════════════
# Strategy B — maintain speed, then regen brake
# ═══════════════════════════════════════════════════════════════════════════

def simulate_maintain_then_brake(params: SimulationParameters) -> list[SimulationStep]:
    """Integrate Strategy B from lift-off until termination."""
    v = params.initial_speed_ms
    x = 0.0
    t = 0.0
    energy = 0.0
    overrun = params.target_distance + BRAKE_OVERRUN_MARGIN

    steps = [_start_step(v, maintain_phase(0.0, params))]

    while v > MIN_SPEED and x < overrun:
        phase = maintain_phase(x, params)
        drag = total_drag_force(v, params)

        if phase is StrategyPhase.MAINTAIN:
            # Motor exactly cancels drag: zero net force, speed unchanged.
            motor = drag
        else:
            force = braking_motor_force(v, x, params, drag, BrakingPolicy.REGEN_OR_CRAWL)
            if force is None:
                # Arrived: stop without recording a tick.
                v = 0.0
                continue
            motor = force
            a = (motor - drag) / params.mass
            v = max(0.0, v + a * TIME_STEP)

        dx = v * TIME_STEP
        x += dx
        t += TIME_STEP

        d_energy, power = tick_energy(motor, dx, v, params.regen_efficiency)
        energy += d_energy

        steps.append(SimulationStep(
            distance=x,
            speed=v * KMH_PER_MS,
            time=t,
            energy_net=energy,
            power=power,
            phase=phase,
        ))

        if t > MAX_TIME:
            break

    return steps
