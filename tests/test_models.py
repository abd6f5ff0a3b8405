"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from retrofit_savings.data.models import (
    BuildingParameters,
    CategoryBreakdown,
    CoolingUpgrade,
    DeviceCategory,
    InterventionSavings,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    RoofType,
)


class TestBuildingParameters:
    """Validation of building inputs."""

    def _make_building(self, **overrides) -> BuildingParameters:
        defaults = {
            "length": 40.0,
            "width": 20.0,
            "floors": 10,
            "floor_height": 3.5,
            "window_to_wall_ratio": 30.0,
            "monthly_utility_bill": 150_000_000.0,
        }
        defaults.update(overrides)
        return BuildingParameters(**defaults)

    def test_defaults(self):
        b = self._make_building()
        assert b.roof_type is RoofType.flat
        assert b.roof_slope_degrees == 0.0

    @pytest.mark.parametrize("field,value", [
        ("length", -1),
        ("width", -1),
        ("floors", -1),
        ("floor_height", -0.5),
        ("monthly_utility_bill", -1),
        ("roof_slope_degrees", 90),
    ])
    def test_rejects_invalid(self, field, value):
        with pytest.raises(ValidationError):
            self._make_building(**{field: value})

    def test_accepts_zero_dimensions(self):
        b = self._make_building(length=0, width=0, floors=0, floor_height=0)
        assert b.length == 0.0
        assert b.floors == 0

    @pytest.mark.parametrize("floors,label", [
        (1, "low-rise"),
        (7, "low-rise"),
        (8, "high-rise"),
        (40, "high-rise"),
    ])
    def test_height_class(self, floors, label):
        b = self._make_building(floors=floors)
        assert b.height_class == label
        assert b.is_low_rise is (label == "low-rise")

    def test_frozen(self):
        b = self._make_building()
        with pytest.raises(ValidationError):
            b.length = 10.0

    def test_roof_type_from_string(self):
        assert self._make_building(roof_type="hip").roof_type.is_pitched


class TestInterventionSelection:
    """Selection helpers."""

    def test_default_is_empty(self):
        selection = InterventionSelection()
        assert selection.is_empty
        assert selection.cooling_upgrade is CoolingUpgrade.none
        assert not selection.has_cooling_upgrade

    def test_any_choice_makes_it_non_empty(self):
        assert not InterventionSelection(pump_upgrade="new_pump").is_empty

    def test_unknown_branch_rejected(self):
        with pytest.raises(ValidationError):
            InterventionSelection(cooling_upgrade="heat_pump")


class TestInvestmentCatalog:
    """Catalog lookups and override tracking."""

    def test_sixteen_options(self):
        assert len(InvestmentOption) == 16

    def test_missing_cost_is_zero(self):
        assert InvestmentCatalog().cost(InvestmentOption.bms) == 0.0

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentCatalog(costs={InvestmentOption.bms: -1.0})

    def test_with_cost_marks_override(self, catalog):
        edited = catalog.with_cost(InvestmentOption.bms, 1.0)
        assert edited.cost(InvestmentOption.bms) == 1.0
        assert edited.overridden == {InvestmentOption.bms}
        assert catalog.cost(InvestmentOption.bms) == 855_000_000.0

    def test_with_defaults_keeps_or_clears_override(self, catalog):
        edited = catalog.with_cost(InvestmentOption.ems, 1.0)
        kept = edited.with_defaults({InvestmentOption.ems: 2.0}, keep_overrides=True)
        replaced = edited.with_defaults({InvestmentOption.ems: 2.0})
        assert kept.cost(InvestmentOption.ems) == 1.0
        assert replaced.cost(InvestmentOption.ems) == 2.0
        assert InvestmentOption.ems not in replaced.overridden

    def test_display_names(self):
        assert all(option.display_name for option in InvestmentOption)


class TestResultModels:
    """Computed fields on result models."""

    def test_intervention_total(self):
        savings = InterventionSavings(solar_glass=2, cooling_upgrade=31, water_heater=0.4)
        assert savings.total == pytest.approx(33.4)

    def test_category_breakdown_fields(self):
        row = CategoryBreakdown(
            category=DeviceCategory.lighting, weight=0.04, baseline_mwh=40.0, savings_mwh=10.0
        )
        assert row.projected_mwh == pytest.approx(30.0)
        assert row.reduction_pct == pytest.approx(25.0)

    def test_zero_baseline_reduction(self):
        row = CategoryBreakdown(
            category=DeviceCategory.other, weight=0.02, baseline_mwh=0.0, savings_mwh=0.0
        )
        assert row.reduction_pct == 0.0

    def test_category_weight_property(self):
        assert DeviceCategory.cooling.weight == pytest.approx(0.69)
        assert DeviceCategory.hot_water.display_name == "Hot Water"

    def test_result_serializes_to_json(self, package_result):
        data = package_result.model_dump_json()
        assert '"savings_by_category"' in data
        assert '"category_breakdown"' in data
