"""Scenario presets used as calculation starting points.

Each preset bundles a building, a tariff set, and a default investment
catalog.  The ``default`` preset reproduces a ten-storey, central-AC
office tower billed in Indonesian rupiah.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from retrofit_savings.data.models import (
    BuildingParameters,
    CoolingSystem,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    RoofType,
    TariffParameters,
)


class ScenarioPreset(BaseModel):
    """A named set of engine inputs."""

    name: str = Field(description="Short identifier for the preset")
    description: str = Field(description="Human-readable description of the preset")
    building: BuildingParameters
    tariffs: TariffParameters
    interventions: InterventionSelection = Field(default_factory=InterventionSelection)
    investments: InvestmentCatalog


# ---------------------------------------------------------------------------
# Default investment catalog (IDR)
# ---------------------------------------------------------------------------

DEFAULT_INVESTMENT_COSTS: dict[InvestmentOption, float] = {
    InvestmentOption.solar_glass: 1_310_400_000.0,
    InvestmentOption.reflective_roof: 136_000_000.0,
    InvestmentOption.cooling_air_chiller: 6_500_000_000.0,
    InvestmentOption.cooling_water_chiller: 8_500_000_000.0,
    InvestmentOption.cooling_vrf: 8_000_000_000.0,
    InvestmentOption.cooling_package: 16_000_000_000.0,
    InvestmentOption.cooling_split_units: 18_000_000_000.0,
    InvestmentOption.exhaust_fan_sensors: 60_000_000.0,
    InvestmentOption.led_lights: 216_000_000.0,
    InvestmentOption.lighting_separate: 200_000_000.0,
    InvestmentOption.lighting_centralized: 540_000_000.0,
    InvestmentOption.pump_new: 648_000_000.0,
    InvestmentOption.pump_existing: 1_300_000_000.0,
    InvestmentOption.water_heater: 364_000_000.0,
    InvestmentOption.bms: 855_000_000.0,
    InvestmentOption.ems: 165_000_000.0,
}

DEFAULT_TARIFFS = TariffParameters(electricity_tariff=1587.92, emission_factor=0.87)


def default_catalog() -> InvestmentCatalog:
    """Return a fresh catalog holding the default costs."""
    return InvestmentCatalog(costs=dict(DEFAULT_INVESTMENT_COSTS))


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

DEFAULT = ScenarioPreset(
    name="default",
    description=(
        "Ten-storey 40 x 20 m office tower with a flat roof, 30% glazing and "
        "central air conditioning, billed IDR 150 million per month."
    ),
    building=BuildingParameters(
        length=40,
        width=20,
        floors=10,
        floor_height=3.5,
        window_to_wall_ratio=30,
        roof_type=RoofType.flat,
        roof_slope_degrees=30,
        monthly_utility_bill=150_000_000,
        dominant_cooling_system=CoolingSystem.central_ac,
    ),
    tariffs=DEFAULT_TARIFFS,
    investments=default_catalog(),
)

LOW_RISE_SPLIT = ScenarioPreset(
    name="low_rise_split",
    description=(
        "Three-storey 30 x 15 m office with a 25 degree gable roof, 40% glazing "
        "and split-unit air conditioning."
    ),
    building=BuildingParameters(
        length=30,
        width=15,
        floors=3,
        floor_height=3.2,
        window_to_wall_ratio=40,
        roof_type=RoofType.gable,
        roof_slope_degrees=25,
        monthly_utility_bill=35_000_000,
        dominant_cooling_system=CoolingSystem.split_unit,
    ),
    tariffs=DEFAULT_TARIFFS,
    investments=default_catalog(),
)

RETROFIT_PACKAGE = ScenarioPreset(
    name="retrofit_package",
    description=(
        "The default tower with a typical deep-retrofit package: solar glass, "
        "VRF cooling, LED relamping with centralized control and a BMS."
    ),
    building=DEFAULT.building,
    tariffs=DEFAULT_TARIFFS,
    interventions=InterventionSelection(
        solar_glass=True,
        cooling_upgrade="vrf",
        led_lights=True,
        lighting_control="centralized",
        building_management_system=True,
    ),
    investments=default_catalog(),
)


PRESETS: dict[str, ScenarioPreset] = {
    p.name: p for p in [DEFAULT, LOW_RISE_SPLIT, RETROFIT_PACKAGE]
}


def get_preset(name: str) -> ScenarioPreset:
    """Return the preset registered under *name*.

    Raises
    ------
    KeyError
        If *name* is not a registered preset.
    """
    if name not in PRESETS:
        available = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available: {available}")
    return PRESETS[name]
