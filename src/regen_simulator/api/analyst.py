"""Model-written analysis of a simulation result.

Optional collaborator: runs only after a result exists, and never
changes it.  Every failure (no key, network, quota, malformed reply)
comes back as a user-facing fallback string rather than an exception.
"""

from __future__ import annotations

import logging

import requests

from regen_simulator.api.narrative import STRATEGY_B_LABEL, strategy_a_label
from regen_simulator.config.analyst import AnalystConfig
from regen_simulator.config.parameters import SimulationParameters
from regen_simulator.models.results import SimulationResult

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = (
    "Gemini API key not found. Analysis is only available when a GEMINI_API_KEY "
    "(or API_KEY) is configured."
)
FAILURE_MESSAGE = (
    "Unable to generate analysis at this time. Please check your network "
    "connection or API usage limits."
)


def build_analysis_prompt(
    params: SimulationParameters,
    result: SimulationResult,
    max_words: int = 200,
) -> str:
    """Prompt asking for a short expert comparison of the two strategies."""
    s = result.summary
    reached = "Yes" if s.did_reach_target_a else "No (Stopped short)"
    return f"""
You are an expert EV engineer. Analyze the following simulation data comparing two stopping strategies for an electric vehicle.

Parameters:
- Mass: {params.mass:g} kg
- Initial Speed: {params.initial_speed:g} km/h
- Target Distance: {params.target_distance:g} m
- Drag Coefficient: {params.drag_coefficient:g}
- Frontal Area: {params.frontal_area:g} m²
- Rolling Resistance: {params.rolling_resistance_coefficient:g}
- Regen Efficiency: {params.regen_efficiency * 100:.1f}%
- Braking Distance: {params.braking_distance:g} m

Results:
{strategy_a_label(params.apply_regen_to_strategy_a)}:
- Final Distance: {s.final_distance_a:.1f} m
- Did it reach target? {reached}
- Time taken: {s.time_a:.1f} s
- Net Energy Used: {s.energy_a_wh:.2f} Wh
(Negative means net energy gain/regen)

{STRATEGY_B_LABEL}:
- Final Distance: {s.final_distance_b:.1f} m
- Time taken: {s.time_b:.1f} s
- Net Energy Used (Total): {s.energy_b_wh:.2f} Wh

Please provide a concise analysis:
1. Which strategy is more energy efficient for this specific scenario and why?
2. How does the modified coasting strategy (if enabled) compare to maintaining speed?
3. Analyze the physics trade-off (Drag losses vs Time vs Regen recovery).

Keep the tone technical but accessible. Max {max_words} words.
""".strip()


def _extract_text(body: dict) -> str:
    """First candidate's text from a ``generateContent`` response body."""
    parts = body["candidates"][0]["content"]["parts"]
    text = "".join(part.get("text", "") for part in parts).strip()
    if not text:
        raise ValueError("empty analysis text")
    return text


def analyze_simulation(
    params: SimulationParameters,
    result: SimulationResult,
    config: AnalystConfig,
) -> str:
    """Ask the generative model for an analysis; fall back to a message on any failure."""
    if not config.is_available:
        return UNAVAILABLE_MESSAGE

    url = f"{config.endpoint.rstrip('/')}/models/{config.model}:generateContent"
    payload = {
        "contents": [
            {"parts": [{"text": build_analysis_prompt(params, result, config.max_words)}]},
        ],
    }
    try:
        response = requests.post(
            url,
            json=payload,
            headers={"x-goog-api-key": config.api_key},
            timeout=config.timeout_s,
        )
        response.raise_for_status()
        return _extract_text(response.json())
    except requests.RequestException as exc:
        logger.warning("Analysis request failed: %s", exc)
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        logger.warning("Analysis response malformed: %s", exc)
    return FAILURE_MESSAGE
