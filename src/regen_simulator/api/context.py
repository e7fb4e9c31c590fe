"""Context manifest generator — makes the simulator self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schema + outputs + endpoints
  - ``full``:    adds the physics model and an interpretation guide
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.models.results import RunSummary, SimulationStep


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class OutputFieldInfo(BaseModel):
    """One output field, machine-readable."""
    name: str
    type: str
    description: str
    unit: str = ""


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class SimulatorContext(BaseModel):
    """Self-describing context for API consumers."""
    simulator_name: str
    version: str
    description: str
    physics_model: str
    parameters: list[ParameterInfo]
    step_fields: list[OutputFieldInfo]
    summary_fields: list[OutputFieldInfo]
    endpoints: list[EndpointInfo]
    interpretation_guide: str
    analysis_available: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        type_str = getattr(field_info.annotation, "__name__", str(field_info.annotation))

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=field_info.default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


_UNITS = {
    "distance": "m",
    "speed": "km/h",
    "time": "s",
    "energy_net": "J",
    "power": "W",
    "time_a": "s",
    "time_b": "s",
    "energy_a_wh": "Wh",
    "energy_b_wh": "Wh",
    "final_distance_a": "m",
    "final_distance_b": "m",
}


def _extract_outputs(model_cls: type[BaseModel]) -> list[OutputFieldInfo]:
    """Output fields with their attribute docstrings as descriptions."""
    outputs: list[OutputFieldInfo] = []
    for name, field_info in model_cls.model_fields.items():
        outputs.append(OutputFieldInfo(
            name=name,
            type=getattr(field_info.annotation, "__name__", str(field_info.annotation)),
            description=field_info.description or "",
            unit=_UNITS.get(name, ""),
        ))
    return outputs


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_PHYSICS_MODEL = """
Flat road, single vehicle, fixed 0.1 s forward-Euler step.

FORCES:
  F_aero    = 0.5 × 1.225 × Cd × A × v²
  F_rolling = Crr × m × 9.81
  F_drag    = F_aero + F_rolling

BRAKING CONTROL LAW (stop exactly at the target, remaining distance r):
  a_req = −v² / (2r)
  F_req = m × a_req + F_drag
  F_req < 0 → regen force; F_req ≥ 0 → drag alone suffices.

STRATEGY A — coast: motor off. With apply_regen_to_strategy_a, inside the
braking window it follows the control law but never pushes (regen only).
Stops at v ≤ 0.1 m/s, distance ≥ 1.5 × target, or t > 600 s.

STRATEGY B — maintain then brake: motor = drag until target − braking_distance,
then the control law, applying positive crawl force when needed.
Stops at v ≤ 0.1 m/s, distance ≥ target + 5 m, or t > 600 s.

ENERGY: ΔE = F_motor × dx, × regen_efficiency when F_motor < 0.
"""

_INTERPRETATION_GUIDE = """
- energy_net > 0 means energy drawn from the battery; < 0 means net recovered.
- Summary energies are in Wh (J ÷ 3600).
- did_reach_target_a is true when Strategy A ends within 2 m of the target or beyond it.
- A pure coast that ends far beyond the target (≈1.5 × target) was cut off by the
  overrun guard: drag was too weak to stop the car in time.
- Compare energy_a_wh vs energy_b_wh for efficiency and time_a vs time_b for the
  time cost of coasting.
"""

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema for SimulationParameters"),
    EndpointInfo(method="GET", path="/parameters/defaults", description="Default parameter set"),
    EndpointInfo(method="POST", path="/simulate", description="Run both strategies; full result + narrative"),
    EndpointInfo(method="POST", path="/simulate/narrative", description="Narrative + headline metrics only"),
    EndpointInfo(method="POST", path="/simulate/compare", description="Run several parameter variants"),
    EndpointInfo(method="POST", path="/simulate/analysis", description="Model-written analysis (fallback text when unavailable)"),
]


def build_context(
    detail_level: Literal["compact", "full"] = "full",
    analysis_available: bool = False,
) -> SimulatorContext:
    """Build the context manifest at the requested detail level."""
    full = detail_level == "full"
    return SimulatorContext(
        simulator_name="EV Regen vs Coast Simulator",
        version="1.0",
        description=(
            "Compares coasting to a stop against maintaining speed and regen braking, "
            "reporting time series and net energy for both strategies."
        ),
        physics_model=_PHYSICS_MODEL.strip() if full else "",
        parameters=_extract_params(SimulationParameters),
        step_fields=_extract_outputs(SimulationStep),
        summary_fields=_extract_outputs(RunSummary),
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
        analysis_available=analysis_available,
    )


def get_parameters_schema() -> dict[str, Any]:
    """JSON Schema for ``SimulationParameters``."""
    return SimulationParameters.model_json_schema()


def get_default_parameters() -> dict[str, Any]:
    """Default parameter set as a plain dict."""
    return SimulationParameters().model_dump()
