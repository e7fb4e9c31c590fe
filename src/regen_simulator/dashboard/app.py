"""EV Regen vs Coast Simulator — Streamlit Dashboard.

Layout: sidebar inputs → headline cards → speed / energy / power charts →
narrative + optional model-written analysis.
Run with:  streamlit run src/regen_simulator/dashboard/app.py
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from regen_simulator.api.analyst import analyze_simulation
from regen_simulator.api.narrative import STRATEGY_B_LABEL, generate_narrative, headline_metrics, strategy_a_label
from regen_simulator.config import AnalystConfig, SimulationParameters
from regen_simulator.engine.orchestrator import run_simulation
from regen_simulator.engine.series import result_to_frame, run_to_frame
from regen_simulator.models.results import SimulationResult

_DEF = SimulationParameters()
_COLOR_A = "#00b894"
_COLOR_B = "#6c5ce7"


@st.cache_resource
def _analyst_config() -> AnalystConfig:
    """Analysis capability, resolved once per server process."""
    return AnalystConfig.from_env()


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="EV Regen vs Coast", page_icon="⚡", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
</style>
""", unsafe_allow_html=True)

st.title("⚡ EV Regen vs Coast Simulator")
st.caption("Coasting to a stop versus maintaining speed and regen braking — physics and net energy.")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _layout(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        xaxis_title=x_title,
        yaxis_title=y_title,
        height=340,
        margin=dict(l=20, r=20, t=30, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _series_chart(result: SimulationResult, column: str, x: str, x_title: str, y_title: str,
                  target: float | None = None) -> go.Figure:
    """Overlay one column of both runs against a shared x column."""
    a = run_to_frame(result.strategy_a)
    b = run_to_frame(result.strategy_b)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=a[x], y=a[column], mode="lines", name="Strategy A",
                             line=dict(color=_COLOR_A, width=2)))
    fig.add_trace(go.Scatter(x=b[x], y=b[column], mode="lines", name="Strategy B",
                             line=dict(color=_COLOR_B, width=2)))
    if target is not None:
        fig.add_vline(x=target, line_dash="dash", line_color="#ef4444",
                      annotation_text="Target", annotation_position="top left")
    return _layout(fig, x_title, y_title)


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Simulation Parameters")

with st.sidebar.expander("Vehicle", expanded=True):
    p_mass = st.slider("Vehicle mass (kg)", 1000, 3000, int(_DEF.mass), 50)
    p_cd = st.slider("Drag coefficient (Cd)", 0.15, 0.45, _DEF.drag_coefficient, 0.01)
    p_area = st.slider("Frontal area (m²)", 1.5, 3.5, _DEF.frontal_area, 0.01)
    p_crr = st.slider("Rolling resistance (Crr)", 0.005, 0.03, _DEF.rolling_resistance_coefficient, 0.001,
                      format="%.3f")
    p_regen = st.slider("Regen efficiency (%)", 40, 95, int(round(_DEF.regen_efficiency * 100)), 5)

with st.sidebar.expander("Approach", expanded=True):
    p_speed = st.slider("Initial speed (km/h)", 20, 150, int(_DEF.initial_speed), 5)
    p_target = st.slider("Target distance (m)", 100, 2000, int(_DEF.target_distance), 50)
    p_brake = st.slider("Braking distance (m)", 10, 300, int(_DEF.braking_distance), 10,
                        help="Distance before the target at which regen may begin.")
    p_regen_a = st.toggle("Enable regen for Strategy A", _DEF.apply_regen_to_strategy_a,
                          help="Strategy A also regens inside the braking distance if it has not stopped yet.")

params = SimulationParameters(
    mass=p_mass,
    initial_speed=p_speed,
    target_distance=p_target,
    drag_coefficient=p_cd,
    frontal_area=p_area,
    rolling_resistance_coefficient=p_crr,
    regen_efficiency=p_regen / 100,
    braking_distance=p_brake,
    apply_regen_to_strategy_a=p_regen_a,
)

# ---------------------------------------------------------------------------
# RUN ENGINE
# ---------------------------------------------------------------------------
result = run_simulation(params)
s = result.summary
m = headline_metrics(result)

if st.session_state.get("analysis_params") != params:
    st.session_state.pop("analysis", None)

# ---------------------------------------------------------------------------
# Headline metrics
# ---------------------------------------------------------------------------
col_a, col_b, col_cmp = st.columns(3)
with col_a:
    st.markdown(f"**{strategy_a_label(params.apply_regen_to_strategy_a)}**")
    st.metric("Net energy", f"{s.energy_a_wh:.2f} Wh")
    st.metric("Time", f"{s.time_a:.1f} s")
    st.metric("Final distance", f"{s.final_distance_a:.1f} m",
              delta=None if s.did_reach_target_a else f"-{m['stopped_short_m']:.1f} m short",
              delta_color="inverse")
with col_b:
    st.markdown(f"**{STRATEGY_B_LABEL}**")
    st.metric("Net energy", f"{s.energy_b_wh:.2f} Wh")
    st.metric("Time", f"{s.time_b:.1f} s")
    st.metric("Final distance", f"{s.final_distance_b:.1f} m")
with col_cmp:
    st.markdown("**Comparison**")
    st.metric("Energy saved by coasting", f"{m['energy_saved_wh']:.2f} Wh")
    st.metric("Extra time coasting", f"{m['time_penalty_s']:+.1f} s")
    if not s.did_reach_target_a:
        st.warning("Strategy A stops before the target.")

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------
st.divider()
c1, c2 = st.columns(2)
with c1:
    st.subheader("Speed vs Distance")
    st.plotly_chart(
        _series_chart(result, "speed_kmh", "distance_m", "Distance (m)", "Speed (km/h)", params.target_distance),
        use_container_width=True,
    )
with c2:
    st.subheader("Net Energy vs Distance")
    st.plotly_chart(
        _series_chart(result, "energy_net_wh", "distance_m", "Distance (m)", "Net energy (Wh)", params.target_distance),
        use_container_width=True,
    )

st.subheader("Battery Power vs Time")
st.plotly_chart(
    _series_chart(result, "power_w", "time_s", "Time (s)", "Power (W)"),
    use_container_width=True,
)

st.download_button(
    "Download time series (CSV)",
    result_to_frame(result).to_csv(index=False),
    file_name="regen_vs_coast.csv",
    mime="text/csv",
)

# ---------------------------------------------------------------------------
# Interpretation
# ---------------------------------------------------------------------------
st.divider()
with st.expander("Show narrative"):
    st.code(generate_narrative(result), language=None)

analyst = _analyst_config()
if analyst.is_available:
    st.subheader("AI Analysis")
    if st.button("Analyze with Gemini", type="primary"):
        with st.spinner("Generating analysis…"):
            st.session_state["analysis"] = analyze_simulation(params, result, analyst)
            st.session_state["analysis_params"] = params
    if "analysis" in st.session_state:
        st.markdown(st.session_state["analysis"])
else:
    st.info("AI analysis is unavailable: set GEMINI_API_KEY to enable it.")
