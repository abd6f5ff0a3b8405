"""Tests for building geometry, baseline energy, and default investments."""

from __future__ import annotations

import pytest

from retrofit_savings.analysis.baseline import estimate_annual_energy
from retrofit_savings.analysis.default_investments import (
    apply_default_investments,
    estimate_default_investments,
)
from retrofit_savings.analysis.geometry import calculate_geometry
from retrofit_savings.data.models import (
    InvestmentCatalog,
    InvestmentOption,
    RoofType,
    TariffParameters,
)


class TestGeometry:
    """Floor, roof, and window areas."""

    def test_default_building_areas(self, building):
        geometry = calculate_geometry(building)
        assert geometry.building_area == pytest.approx(8000.0)
        assert geometry.roof_area == pytest.approx(800.0)
        assert geometry.window_area == pytest.approx(1260.0)

    def test_flat_roof_ignores_slope(self, building):
        assert building.roof_type is RoofType.flat
        assert building.roof_slope_degrees > 0
        assert calculate_geometry(building).roof_area == pytest.approx(800.0)

    @pytest.mark.parametrize("roof_type", [RoofType.gable, RoofType.hip])
    def test_pitched_roof_is_slope_corrected(self, building, roof_type):
        pitched = building.model_copy(
            update={"roof_type": roof_type, "roof_slope_degrees": 60}
        )
        assert calculate_geometry(pitched).roof_area == pytest.approx(1600.0)

    def test_zero_slope_pitched_roof_equals_footprint(self, building):
        pitched = building.model_copy(
            update={"roof_type": RoofType.gable, "roof_slope_degrees": 0}
        )
        assert calculate_geometry(pitched).roof_area == pytest.approx(800.0)

    def test_window_area_scales_with_ratio(self, building):
        doubled = building.model_copy(update={"window_to_wall_ratio": 60})
        assert calculate_geometry(doubled).window_area == pytest.approx(2520.0)

    def test_zero_window_ratio(self, building):
        blind = building.model_copy(update={"window_to_wall_ratio": 0})
        assert calculate_geometry(blind).window_area == 0.0


class TestBaseline:
    """Annual energy from the monthly bill."""

    def test_default_annual_energy(self, building, tariffs):
        expected = 150_000_000 / 1587.92 * 12 / 1000
        assert estimate_annual_energy(building, tariffs) == pytest.approx(expected)

    @pytest.mark.parametrize("tariff", [0.0, -10.0])
    def test_non_positive_tariff_gives_zero(self, building, tariff):
        tariffs = TariffParameters(electricity_tariff=tariff, emission_factor=0.87)
        assert estimate_annual_energy(building, tariffs) == 0.0

    def test_zero_bill(self, building, tariffs):
        idle = building.model_copy(update={"monthly_utility_bill": 0})
        assert estimate_annual_energy(idle, tariffs) == 0.0


class TestDefaultInvestments:
    """Geometry-derived costs and the catalog refresh."""

    def test_default_values(self, building):
        defaults = estimate_default_investments(calculate_geometry(building))
        assert defaults[InvestmentOption.solar_glass] == pytest.approx(409_500_000.0)
        assert defaults[InvestmentOption.reflective_roof] == pytest.approx(68_000_000.0)

    def test_refresh_overwrites_user_edit(self, building, catalog):
        edited = catalog.with_cost(InvestmentOption.solar_glass, 1.0)
        refreshed = apply_default_investments(edited, calculate_geometry(building))
        assert refreshed.cost(InvestmentOption.solar_glass) == pytest.approx(409_500_000.0)
        assert InvestmentOption.solar_glass not in refreshed.overridden

    def test_keep_overrides_preserves_user_edit(self, building, catalog):
        edited = catalog.with_cost(InvestmentOption.solar_glass, 1.0)
        refreshed = apply_default_investments(
            edited, calculate_geometry(building), keep_overrides=True
        )
        assert refreshed.cost(InvestmentOption.solar_glass) == 1.0
        assert refreshed.cost(InvestmentOption.reflective_roof) == pytest.approx(68_000_000.0)
        assert InvestmentOption.solar_glass in refreshed.overridden

    def test_refresh_leaves_other_options_alone(self, building, catalog):
        edited = catalog.with_cost(InvestmentOption.bms, 5.0)
        refreshed = apply_default_investments(edited, calculate_geometry(building))
        assert refreshed.cost(InvestmentOption.bms) == 5.0
        assert InvestmentOption.bms in refreshed.overridden

    def test_empty_catalog_gets_defaults(self, building):
        refreshed = apply_default_investments(InvestmentCatalog(), calculate_geometry(building))
        assert set(refreshed.costs) == {
            InvestmentOption.solar_glass,
            InvestmentOption.reflective_roof,
        }
