"""Engine entry point — one parameter set in, one ``SimulationResult`` out.

Synchronous, no I/O, no shared state: every call integrates both
strategies from scratch against the same immutable parameters.

Entry points:
  - ``run_simulation(params)``           — single run
  - ``run_comparison(base, variants)``   — one run per override set
"""

from __future__ import annotations

from typing import Any

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.strategies import simulate_coast, simulate_maintain_then_brake
from regen_simulator.engine.summary import summarize
from regen_simulator.models.results import SimulationResult


def run_simulation(params: SimulationParameters) -> SimulationResult:
    """Run both strategies and attach the summary."""
    strategy_a = simulate_coast(params)
    strategy_b = simulate_maintain_then_brake(params)
    return SimulationResult(
        parameters=params,
        strategy_a=strategy_a,
        strategy_b=strategy_b,
        summary=summarize(strategy_a, strategy_b, params),
    )


def apply_overrides(base: SimulationParameters, overrides: dict[str, Any]) -> SimulationParameters:
    """Return a new, validated parameter set with ``overrides`` applied to ``base``."""
    merged = base.model_dump()
    merged.update(overrides)
    return SimulationParameters(**merged)


def run_comparison(
    base: SimulationParameters,
    variants: list[dict[str, Any]],
) -> list[SimulationResult]:
    """Run the engine once per variant (overrides onto ``base``), in order.

    An empty ``variants`` list runs ``base`` alone.
    """
    if not variants:
        return [run_simulation(base)]
    return [run_simulation(apply_overrides(base, v)) for v in variants]
