"""Narrative generator — plain-English interpretation of simulation results.

Deterministic and offline: turns a ``SimulationResult`` into a structured
text block explaining which stopping strategy wins and why.  The optional
model-written analysis lives in ``analyst.py``.
"""

from __future__ import annotations

from typing import Any

from regen_simulator.engine.forces import drag_breakdown
from regen_simulator.engine.series import energy_by_phase
from regen_simulator.models.results import SimulationResult, StrategyPhase


def strategy_a_label(apply_regen: bool) -> str:
    if apply_regen:
        return "Strategy A (Coast then Regen at end)"
    return "Strategy A (Pure Coast - Motor Off)"


STRATEGY_B_LABEL = "Strategy B (Maintain Speed then Regen Brake)"


def headline_metrics(result: SimulationResult) -> dict[str, Any]:
    """Key comparison numbers, rounded for display.

    ``energy_saved_wh`` > 0 means coasting used less net energy than
    maintaining speed.  ``time_penalty_s`` > 0 means coasting took longer.
    """
    s = result.summary
    p = result.parameters
    return {
        "time_a_s": round(s.time_a, 1),
        "time_b_s": round(s.time_b, 1),
        "energy_a_wh": round(s.energy_a_wh, 2),
        "energy_b_wh": round(s.energy_b_wh, 2),
        "energy_saved_wh": round(s.energy_b_wh - s.energy_a_wh, 2),
        "time_penalty_s": round(s.time_a - s.time_b, 1),
        "final_distance_a_m": round(s.final_distance_a, 1),
        "final_distance_b_m": round(s.final_distance_b, 1),
        "did_reach_target_a": s.did_reach_target_a,
        "stopped_short_m": round(max(0.0, p.target_distance - s.final_distance_a), 1),
    }


def generate_narrative(result: SimulationResult) -> str:
    """Generate a plain-English narrative from a simulation result.

    Returns a structured text block covering:
      1. Scenario
      2. Strategy A outcome
      3. Strategy B outcome
      4. Comparison
      5. Recommendations
    """
    p = result.parameters
    s = result.summary
    m = headline_metrics(result)
    forces = drag_breakdown(p.initial_speed_ms, p)

    sections: list[str] = []

    # ── 1. Scenario ──
    sections.append("=" * 60)
    sections.append("SCENARIO")
    sections.append("=" * 60)
    sections.append(
        f"Mass: {p.mass:,.0f} kg\n"
        f"Initial speed: {p.initial_speed:.0f} km/h ({p.initial_speed_ms:.2f} m/s)\n"
        f"Target stop distance: {p.target_distance:,.0f} m\n"
        f"Braking window: last {p.braking_distance:,.0f} m (starts at {p.brake_start_distance:,.0f} m)\n"
        f"Drag at lift-off: {forces.total:.1f} N "
        f"(aero {forces.aero:.1f} N + rolling {forces.rolling:.1f} N)\n"
        f"Regen efficiency: {p.regen_efficiency * 100:.0f}%"
    )

    # ── 2. Strategy A ──
    sections.append("")
    sections.append("=" * 60)
    sections.append(strategy_a_label(p.apply_regen_to_strategy_a).upper())
    sections.append("=" * 60)
    if s.did_reach_target_a:
        reach = "Reached the target"
    else:
        reach = f"Stopped SHORT by {m['stopped_short_m']:.1f} m"
    sections.append(
        f"Final distance: {s.final_distance_a:.1f} m ({reach})\n"
        f"Time taken: {s.time_a:.1f} s\n"
        f"Net energy: {s.energy_a_wh:.2f} Wh"
    )
    if p.apply_regen_to_strategy_a:
        sections.append(
            f"Recovered in regen window: {-energy_by_phase(result.strategy_a).get(StrategyPhase.REGEN, 0.0):.2f} Wh"
        )

    # ── 3. Strategy B ──
    sections.append("")
    sections.append("=" * 60)
    sections.append(STRATEGY_B_LABEL.upper())
    sections.append("=" * 60)
    phase_wh = energy_by_phase(result.strategy_b)
    maintain_wh = phase_wh.get(StrategyPhase.MAINTAIN, 0.0)
    brake_wh = phase_wh.get(StrategyPhase.BRAKE, 0.0)
    sections.append(
        f"Final distance: {s.final_distance_b:.1f} m\n"
        f"Time taken: {s.time_b:.1f} s\n"
        f"Spent holding speed: {maintain_wh:.2f} Wh\n"
        f"Braking phase net: {brake_wh:.2f} Wh "
        f"({'recovered' if brake_wh < 0 else 'consumed'})\n"
        f"Net energy: {s.energy_b_wh:.2f} Wh"
    )

    # ── 4. Comparison ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("COMPARISON")
    sections.append("=" * 60)
    saved = m["energy_saved_wh"]
    if saved > 0:
        winner = f"Coasting uses {saved:.2f} Wh less net energy"
    elif saved < 0:
        winner = f"Maintain-then-regen uses {-saved:.2f} Wh less net energy"
    else:
        winner = "Both strategies use the same net energy"
    sections.append(
        f"{winner}.\n"
        f"Coasting takes {m['time_penalty_s']:+.1f} s relative to maintain-then-regen."
    )

    # ── 5. Recommendations ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("RECOMMENDATIONS")
    sections.append("=" * 60)

    recs: list[str] = []
    if not s.did_reach_target_a:
        recs.append(
            "Drag stops the car before the target. Lift off later, or hold speed "
            "for part of the approach, to arrive at the stop point."
        )
    elif s.final_distance_a > p.target_distance + 2.0:
        recs.append(
            "Coasting alone overshoots the target. Enable regen for Strategy A or "
            "lift off earlier so drag can bleed off the speed."
        )
    if saved > 0:
        recs.append(
            "Every regen cycle loses energy to conversion; letting drag do the "
            "work avoids that loss when the arrival time is flexible."
        )
    else:
        recs.append(
            "Regen recovery outweighs the cost of holding speed here; braking late "
            "with regen is the more efficient approach for this vehicle."
        )
    if p.regen_efficiency < 0.6:
        recs.append(f"Regen efficiency is low ({p.regen_efficiency * 100:.0f}%); braking recovery is limited.")

    for i, rec in enumerate(recs, 1):
        sections.append(f"  {i}. {rec}")

    return "\n".join(sections)


def generate_comparison_narrative(results: list[SimulationResult], labels: list[str] | None = None) -> str:
    """Compare several parameter variants, best energy saving from coasting first."""
    if len(results) < 2:
        return generate_narrative(results[0]) if results else "No results to compare."

    labels = labels or [f"Variant {i}" for i in range(1, len(results) + 1)]

    rows: list[dict[str, Any]] = []
    for label, r in zip(labels, results):
        m = headline_metrics(r)
        rows.append({"label": label, **m})
    rows.sort(key=lambda row: row["energy_saved_wh"], reverse=True)

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("VARIANT COMPARISON")
    sections.append("=" * 60)
    sections.append(f"Comparing {len(results)} parameter variants:\n")

    header = f"{'Variant':20s}  {'A Wh':>9s}  {'B Wh':>9s}  {'Saved Wh':>9s}  {'A s':>7s}  {'B s':>7s}  {'A reached':>9s}"
    sections.append(header)
    sections.append("-" * len(header))
    for row in rows:
        sections.append(
            f"{row['label']:20s}  {row['energy_a_wh']:>9.2f}  {row['energy_b_wh']:>9.2f}  "
            f"{row['energy_saved_wh']:>9.2f}  {row['time_a_s']:>7.1f}  {row['time_b_s']:>7.1f}  "
            f"{'yes' if row['did_reach_target_a'] else 'no':>9s}"
        )

    best = rows[0]
    sections.append(
        f"\nLargest coasting advantage: {best['label']} ({best['energy_saved_wh']:.2f} Wh saved)"
    )
    return "\n".join(sections)
