"""FastAPI server — HTTP access to the regen vs coast simulator.

Run with:
    uvicorn regen_simulator.api.server:app --reload --port 8000

Or:
    python -m regen_simulator.api.server

Endpoints:
    GET  /context              — self-describing manifest (physics + schemas)
    GET  /schema               — JSON Schema for SimulationParameters
    GET  /parameters/defaults  — default parameter set as JSON
    POST /simulate             — run both strategies (partial or full parameters)
    POST /simulate/narrative   — run + plain-English interpretation only
    POST /simulate/compare     — run several parameter variants side by side
    POST /simulate/analysis    — run + model-written analysis (optional service)
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from regen_simulator.api.analyst import analyze_simulation
from regen_simulator.api.context import build_context, get_default_parameters, get_parameters_schema
from regen_simulator.api.narrative import (
    generate_comparison_narrative,
    generate_narrative,
    headline_metrics,
)
from regen_simulator.config.analyst import AnalystConfig
from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.engine.orchestrator import run_comparison, run_simulation

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="EV Regen vs Coast Simulator API",
    version="1.0",
    description=(
        "Compare coasting to a stop against maintaining speed and regen braking. "
        "Send vehicle and road parameters, get both time series, a summary, and "
        "a plain-English interpretation. Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Capability flag: resolved once, read by the endpoints below.
app.state.analyst = AnalystConfig.from_env()
logger.info("Narrative analysis %s", "enabled" if app.state.analyst.is_available else "disabled")


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    parameters: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full SimulationParameters. Missing fields use defaults. "
                    "Example: {'initial_speed': 80, 'apply_regen_to_strategy_a': true}",
    )


class CompareRequest(BaseModel):
    """Request body for /simulate/compare."""
    parameters: dict[str, Any] = Field(default_factory=dict, description="Base parameters")
    variants: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Overrides applied to the base, one run each. "
                    "Example: [{'initial_speed': 50}, {'initial_speed': 90}]",
    )
    labels: list[str] | None = Field(default=None, description="Optional display label per variant")


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    narrative: str = ""


class CompareResponse(BaseModel):
    """Response from /simulate/compare."""
    results: list[dict[str, Any]]
    comparison_narrative: str
    ranking: list[dict[str, Any]]


class AnalysisResponse(BaseModel):
    """Response from /simulate/analysis."""
    analysis: str
    analysis_available: bool
    headline_metrics: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_parameters(overrides: dict[str, Any]) -> SimulationParameters:
    """Merge ``overrides`` onto the defaults; invalid values → HTTP 422."""
    merged = get_default_parameters()
    merged.update(overrides)
    try:
        return SimulationParameters(**merged)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "EV Regen vs Coast Simulator API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
        "analysis_available": app.state.analyst.is_available,
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds physics model + guide",
    ),
):
    """Self-describing context manifest. Call this first."""
    return build_context(detail_level, analysis_available=app.state.analyst.is_available)


@app.get("/schema")
def get_schema():
    """JSON Schema for SimulationParameters — types, defaults, constraints."""
    return get_parameters_schema()


@app.get("/parameters/defaults")
def get_defaults():
    """Default parameter set. Use as a starting point for modifications."""
    return get_default_parameters()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run both strategies and return the full result + narrative.

    Example minimal request:
    ```json
    {"parameters": {"initial_speed": 80, "target_distance": 800}}
    ```
    """
    params = _build_parameters(req.parameters)
    result = run_simulation(params)
    return SimulateResponse(
        result=result.model_dump(mode="json"),
        narrative=generate_narrative(result),
    )


@app.post("/simulate/narrative")
def simulate_with_narrative(req: SimulateRequest):
    """Same as /simulate but returns only the narrative and headline metrics."""
    params = _build_parameters(req.parameters)
    result = run_simulation(params)
    return {
        "narrative": generate_narrative(result),
        "headline_metrics": headline_metrics(result),
    }


@app.post("/simulate/compare", response_model=CompareResponse)
def simulate_compare(req: CompareRequest):
    """Run each variant (overrides on the base) and rank by coasting energy saving."""
    base = _build_parameters(req.parameters)
    try:
        results = run_comparison(base, req.variants)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc

    labels = req.labels if req.labels and len(req.labels) == len(results) else None
    labels = labels or [f"Variant {i}" for i in range(1, len(results) + 1)]

    ranking: list[dict[str, Any]] = [
        {"variant": label, **headline_metrics(r)}
        for label, r in zip(labels, results)
    ]
    ranking.sort(key=lambda x: x["energy_saved_wh"], reverse=True)

    return CompareResponse(
        results=[r.model_dump(mode="json") for r in results],
        comparison_narrative=generate_comparison_narrative(results, labels),
        ranking=ranking,
    )


@app.post("/simulate/analysis", response_model=AnalysisResponse)
def simulate_analysis(req: SimulateRequest):
    """Run the simulation and ask the analysis service to explain it.

    Always succeeds: when the service is not configured or fails, the
    ``analysis`` field carries an explanatory fallback message.
    """
    params = _build_parameters(req.parameters)
    result = run_simulation(params)
    config: AnalystConfig = app.state.analyst
    return AnalysisResponse(
        analysis=analyze_simulation(params, result, config),
        analysis_available=config.is_available,
        headline_metrics=headline_metrics(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "regen_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
