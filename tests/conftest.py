# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the retrofit savings test suite."""

from __future__ import annotations

import pytest

from retrofit_savings.data.models import (
    BuildingParameters,
    CalculationResult,
    CoolingSystem,
    InterventionSelection,
    InvestmentCatalog,
    TariffParameters,
)
from retrofit_savings.data.presets import default_catalog, get_preset
from retrofit_savings.savings.engine import SavingsEngine


@pytest.fixture()
def building() -> BuildingParameters:
    """The default ten-storey, central-AC office tower."""
    return get_preset("default").building


@pytest.fixture()
def split_unit_building(building: BuildingParameters) -> BuildingParameters:
    """The default tower, cooled mainly by split units."""
    return building.model_copy(
        update={"dominant_cooling_system": CoolingSystem.split_unit}
    )


@pytest.fixture()
def tariffs() -> TariffParameters:
    return TariffParameters(electricity_tariff=1587.92, emission_factor=0.87)


@pytest.fixture()
def catalog() -> InvestmentCatalog:
    return default_catalog()


@pytest.fixture()
def engine() -> SavingsEngine:
    return SavingsEngine()


@pytest.fixture()
def package_result(
    engine: SavingsEngine,
    building: BuildingParameters,
    tariffs: TariffParameters,
    catalog: InvestmentCatalog,
) -> CalculationResult:
    """Result for a broad retrofit package on the default tower."""
    selection = InterventionSelection(
        solar_glass=True,
        reflective_roof=True,
        cooling_upgrade="vrf",
        led_lights=True,
        lighting_control="centralized",
        pump_upgrade="new_pump",
        water_heater_upgrade=True,
        building_management_system=True,
    )
    return engine.compute(building, tariffs, selection, catalog)


@pytest.fixture()
def empty_result(
    engine: SavingsEngine,
    building: BuildingParameters,
    tariffs: TariffParameters,
    catalog: InvestmentCatalog,
) -> CalculationResult:
    """Result with no interventions selected."""
    return engine.compute(building, tariffs, InterventionSelection(), catalog)
