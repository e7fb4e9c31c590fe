"""Pydantic validation tests — invalid inputs are rejected at the boundary."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from regen_simulator.config import AnalystConfig, SimulationParameters, load_parameters

SCENARIOS = Path(__file__).parent.parent / "scenarios"


# ═══════════════════════════════════════════════════════════════════════════
# SimulationParameters
# ═══════════════════════════════════════════════════════════════════════════

class TestParameterValidation:
    """SimulationParameters field constraints."""

    def test_defaults_are_reference_vehicle(self):
        p = SimulationParameters()
        assert p.mass == 1800
        assert p.initial_speed == 60
        assert p.target_distance == 500
        assert p.drag_coefficient == 0.23
        assert p.frontal_area == 2.22
        assert p.rolling_resistance_coefficient == 0.01
        assert p.regen_efficiency == 0.70
        assert p.braking_distance == 50
        assert p.apply_regen_to_strategy_a is False

    @pytest.mark.parametrize("field", [
        "mass", "initial_speed", "target_distance", "drag_coefficient", "frontal_area",
    ])
    @pytest.mark.parametrize("value", [0, -1.0])
    def test_strictly_positive_fields(self, field, value):
        with pytest.raises(ValidationError):
            SimulationParameters(**{field: value})

    def test_zero_rolling_resistance_allowed(self):
        assert SimulationParameters(rolling_resistance_coefficient=0).rolling_resistance_coefficient == 0

    def test_negative_rolling_resistance_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(rolling_resistance_coefficient=-0.01)

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
    def test_regen_efficiency_bounds_accepted(self, value):
        assert SimulationParameters(regen_efficiency=value).regen_efficiency == value

    @pytest.mark.parametrize("value", [-0.1, 1.01])
    def test_regen_efficiency_out_of_range(self, value):
        with pytest.raises(ValidationError):
            SimulationParameters(regen_efficiency=value)

    def test_zero_braking_distance_allowed(self):
        assert SimulationParameters(braking_distance=0).braking_distance == 0

    def test_negative_braking_distance_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(braking_distance=-5)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(grade=0.02)

    def test_frozen(self):
        p = SimulationParameters()
        with pytest.raises(ValidationError):
            p.mass = 2000

    def test_initial_speed_ms(self):
        assert SimulationParameters(initial_speed=36).initial_speed_ms == pytest.approx(10.0)

    def test_brake_start_distance(self):
        assert SimulationParameters().brake_start_distance == 450.0
        assert SimulationParameters(braking_distance=800).brake_start_distance == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# YAML scenarios
# ═══════════════════════════════════════════════════════════════════════════

class TestLoadParameters:

    def test_base_case_matches_defaults(self):
        assert load_parameters(SCENARIOS / "base_case.yaml") == SimulationParameters()

    def test_coast_with_regen(self):
        p = load_parameters(SCENARIOS / "coast_with_regen.yaml")
        assert p.apply_regen_to_strategy_a is True

    def test_partial_file_uses_defaults(self, tmp_path):
        f = tmp_path / "fast.yaml"
        f.write_text("initial_speed: 100\n")
        p = load_parameters(f)
        assert p.initial_speed == 100
        assert p.mass == 1800

    def test_empty_file_is_defaults(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert load_parameters(f) == SimulationParameters()

    def test_unknown_key_rejected(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("road_grade: 0.05\n")
        with pytest.raises(ValidationError):
            load_parameters(f)

    def test_invalid_value_rejected(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("mass: -10\n")
        with pytest.raises(ValidationError):
            load_parameters(f)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parameters(tmp_path / "nope.yaml")


# ═══════════════════════════════════════════════════════════════════════════
# AnalystConfig
# ═══════════════════════════════════════════════════════════════════════════

class TestAnalystConfig:

    def test_default_unavailable(self):
        assert AnalystConfig().is_available is False

    def test_key_makes_available(self):
        assert AnalystConfig(api_key="abc").is_available is True

    def test_empty_key_unavailable(self):
        assert AnalystConfig(api_key="").is_available is False

    def test_zero_timeout_rejected(self):
        with pytest.raises(ValidationError):
            AnalystConfig(timeout_s=0)

    def test_from_env_gemini_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")
        monkeypatch.setenv("API_KEY", "other")
        cfg = AnalystConfig.from_env()
        assert cfg.api_key == "g-key"
        assert cfg.is_available

    def test_from_env_fallback_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "k")
        assert AnalystConfig.from_env().api_key == "k"

    def test_from_env_empty_is_absent(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        monkeypatch.setenv("API_KEY", "")
        cfg = AnalystConfig.from_env()
        assert cfg.api_key is None
        assert not cfg.is_available

    def test_from_env_model_override(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        assert AnalystConfig.from_env().model == "gemini-2.5-flash"
