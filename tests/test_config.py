"""Tests for presets, input coercion, and scenario configuration."""

from __future__ import annotations

import pytest

from retrofit_savings.config import (
    ScenarioConfig,
    ScenarioError,
    load_scenario,
    resolve_scenario,
)
from retrofit_savings.data.coercion import coerce_float, coerce_int, parse_localized_number
from retrofit_savings.data.models import (
    CoolingSystem,
    CoolingUpgrade,
    InterventionSelection,
    InvestmentOption,
)
from retrofit_savings.data.presets import PRESETS, ScenarioPreset, get_preset
from retrofit_savings.savings.engine import SavingsEngine


class TestPresets:
    """Preset registration and retrieval."""

    @pytest.mark.parametrize("name", list(PRESETS.keys()))
    def test_get_preset_returns_correct_type(self, name: str):
        preset = get_preset(name)
        assert isinstance(preset, ScenarioPreset)
        assert preset.name == name

    def test_get_preset_unknown_raises(self):
        with pytest.raises(KeyError):
            get_preset("nonexistent_preset")

    def test_all_presets_registered(self):
        assert set(PRESETS) == {"default", "low_rise_split", "retrofit_package"}

    @pytest.mark.parametrize("name", list(PRESETS.keys()))
    def test_catalog_prices_every_option(self, name: str):
        catalog = get_preset(name).investments
        assert set(catalog.costs) == set(InvestmentOption)

    def test_default_has_no_interventions(self):
        assert get_preset("default").interventions.is_empty

    def test_low_rise_is_split_unit(self):
        building = get_preset("low_rise_split").building
        assert building.dominant_cooling_system is CoolingSystem.split_unit


class TestCoercion:
    """Lenient numeric parsing of form input."""

    @pytest.mark.parametrize("raw,expected", [
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("3.5 m", 3.5),
        ("12abc", 12.0),
        (7, 7.0),
        (True, 1.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
    ])
    def test_coerce_float(self, raw, expected):
        assert coerce_float(raw) == expected

    @pytest.mark.parametrize("raw,expected", [
        ("1.587,92", 1587.92),
        ("150.000.000", 150_000_000.0),
        ("0,87", 0.87),
        ("abc", 0.0),
        (42.5, 42.5),
    ])
    def test_parse_localized_number(self, raw, expected):
        assert parse_localized_number(raw) == pytest.approx(expected)

    def test_coerce_int_truncates(self):
        assert coerce_int("10,9") == 10
        assert coerce_int("x") == 0


class TestScenarioConfig:
    """YAML scenarios merged over presets."""

    def test_empty_scenario_matches_default_preset(self):
        building, tariffs, interventions, catalog = ScenarioConfig().resolve()
        preset = get_preset("default")
        assert building == preset.building
        assert tariffs == preset.tariffs
        assert interventions.is_empty
        assert catalog == preset.investments

    def test_localized_strings_are_coerced(self):
        scenario = ScenarioConfig(
            building={"monthly_utility_bill": "200000000", "floors": "12"},
            tariffs={"electricity_tariff": "1.444,70"},
        )
        building, tariffs, _, _ = scenario.resolve()
        assert building.monthly_utility_bill == pytest.approx(200_000_000.0)
        assert building.floors == 12
        assert building.length == 40.0
        assert tariffs.electricity_tariff == pytest.approx(1444.70)
        assert tariffs.emission_factor == pytest.approx(0.87)

    def test_building_decimals_are_not_localized(self):
        scenario = ScenarioConfig(building={"floor_height": "3.5", "length": "40.5"})
        building, _, _, _ = scenario.resolve()
        assert building.floor_height == pytest.approx(3.5)
        assert building.length == pytest.approx(40.5)

    def test_non_numeric_dimension_becomes_zero(self, engine):
        scenario = ScenarioConfig(building={"length": "abc"})
        building, tariffs, interventions, catalog = resolve_scenario(scenario)
        assert building.length == 0.0
        result = engine.compute(building, tariffs, interventions, catalog)
        assert result.building_area == 0.0
        assert result.roof_area == 0.0
        assert result.window_area == 0.0

    def test_investment_overrides_are_marked(self):
        scenario = ScenarioConfig(investments={"bms": "900.000.000"})
        _, _, _, catalog = scenario.resolve()
        assert catalog.cost(InvestmentOption.bms) == pytest.approx(900_000_000.0)
        assert InvestmentOption.bms in catalog.overridden

    def test_unknown_preset_is_scenario_error(self):
        with pytest.raises(ScenarioError):
            resolve_scenario(ScenarioConfig(preset="nope"))

    def test_invalid_building_is_scenario_error(self):
        with pytest.raises(ScenarioError):
            resolve_scenario(ScenarioConfig(building={"floors": -1}))


class TestLoadScenario:
    """Reading scenario files from disk."""

    def test_load_and_compute_matches_code(self, tmp_path, engine, building, tariffs, catalog):
        path = tmp_path / "scenario.yaml"
        path.write_text(
            "name: Office tower\n"
            "interventions:\n"
            "  solar_glass: true\n"
            "  cooling_upgrade: vrf\n"
        )
        scenario = load_scenario(path)
        assert scenario.name == "Office tower"

        from_file = engine.compute(*resolve_scenario(scenario))
        in_code = engine.compute(
            building,
            tariffs,
            InterventionSelection(solar_glass=True, cooling_upgrade=CoolingUpgrade.vrf),
            catalog,
        )
        assert from_file == in_code

    def test_sticky_overrides_flag(self, tmp_path):
        path = tmp_path / "sticky.yaml"
        path.write_text(
            "sticky_overrides: true\n"
            "interventions: {solar_glass: true}\n"
            "investments: {solar_glass: 1000}\n"
        )
        scenario = load_scenario(path)
        assert scenario.sticky_overrides
        result = SavingsEngine(sticky_overrides=True).compute(*resolve_scenario(scenario))
        assert result.total_investment == pytest.approx(1000.0)

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_scenario(path).preset == "default"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "missing.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ScenarioError):
            load_scenario(path)

    def test_unknown_investment_option_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("investments: {heat_pump: 10}\n")
        with pytest.raises(ScenarioError):
            load_scenario(path)
