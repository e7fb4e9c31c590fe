"""Tabular views of simulation runs for plotting and CSV export."""

from __future__ import annotations

import numpy as np
import pandas as pd

from regen_simulator.engine.constants import J_PER_WH
from regen_simulator.models.results import SimulationResult, SimulationStep, StrategyPhase

_COLUMNS = ["distance_m", "speed_kmh", "time_s", "energy_net_j", "energy_net_wh", "power_w", "phase"]


def run_to_frame(steps: list[SimulationStep]) -> pd.DataFrame:
    """One row per step, in tick order."""
    rows = [
        {
            "distance_m": s.distance,
            "speed_kmh": s.speed,
            "time_s": s.time,
            "energy_net_j": s.energy_net,
            "energy_net_wh": s.energy_net / J_PER_WH,
            "power_w": s.power,
            "phase": s.phase.value,
        }
        for s in steps
    ]
    return pd.DataFrame(rows, columns=_COLUMNS)


def result_to_frame(result: SimulationResult) -> pd.DataFrame:
    """Both runs stacked in long format with a ``strategy`` column ("A" / "B")."""
    frame_a = run_to_frame(result.strategy_a)
    frame_a.insert(0, "strategy", "A")
    frame_b = run_to_frame(result.strategy_b)
    frame_b.insert(0, "strategy", "B")
    return pd.concat([frame_a, frame_b], ignore_index=True)


def energy_by_phase(steps: list[SimulationStep]) -> dict[StrategyPhase, float]:
    """Net energy (Wh) accumulated over the ticks spent in each phase.

    Only phases that produced at least one tick appear.  Values sum to the
    run's final ``energy_net`` in Wh.
    """
    if len(steps) < 2:
        return {}
    deltas = np.diff(np.array([s.energy_net for s in steps], dtype=float))
    phases = np.array([s.phase.value for s in steps[1:]])
    return {
        StrategyPhase(value): float(deltas[phases == value].sum()) / J_PER_WH
        for value in dict.fromkeys(phases.tolist())
    }
