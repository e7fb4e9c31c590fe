"""Summary extraction — headline numbers from the final step of each run."""

from __future__ import annotations

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.constants import J_PER_WH, TARGET_TOLERANCE
from regen_simulator.models.results import RunSummary, SimulationStep


def summarize(
    strategy_a: list[SimulationStep],
    strategy_b: list[SimulationStep],
    params: SimulationParameters,
) -> RunSummary:
    """Build the ``RunSummary`` for a pair of runs.

    Both runs always hold at least the start step.
    """
    last_a = strategy_a[-1]
    last_b = strategy_b[-1]
    return RunSummary(
        time_a=last_a.time,
        time_b=last_b.time,
        energy_a_wh=last_a.energy_net / J_PER_WH,
        energy_b_wh=last_b.energy_net / J_PER_WH,
        final_distance_a=last_a.distance,
        final_distance_b=last_b.distance,
        did_reach_target_a=last_a.distance >= params.target_distance - TARGET_TOLERANCE,
    )
