"""Capital investment for the selected interventions."""

from __future__ import annotations

from retrofit_savings.data.models import (
    CoolingUpgrade,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    LightingControl,
    PumpUpgrade,
)

COOLING_OPTIONS: dict[CoolingUpgrade, InvestmentOption] = {
    CoolingUpgrade.air_cooled_chiller: InvestmentOption.cooling_air_chiller,
    CoolingUpgrade.water_cooled_chiller: InvestmentOption.cooling_water_chiller,
    CoolingUpgrade.vrf: InvestmentOption.cooling_vrf,
    CoolingUpgrade.package_units: InvestmentOption.cooling_package,
    CoolingUpgrade.split_units: InvestmentOption.cooling_split_units,
}

LIGHTING_CONTROL_OPTIONS: dict[LightingControl, InvestmentOption] = {
    LightingControl.separate_circuits: InvestmentOption.lighting_separate,
    LightingControl.centralized: InvestmentOption.lighting_centralized,
}

PUMP_OPTIONS: dict[PumpUpgrade, InvestmentOption] = {
    PumpUpgrade.new_pump: InvestmentOption.pump_new,
    PumpUpgrade.retrofit_existing_pump: InvestmentOption.pump_existing,
}


def selected_options(selection: InterventionSelection) -> list[InvestmentOption]:
    """Return the options that are charged for *selection*.

    Fan sensors, lighting control, pump upgrades, water-heater replacement
    and energy monitoring are superseded by a building management system
    and are not charged separately when one is selected.  LED relamping is
    charged regardless.
    """
    bms = selection.building_management_system
    options: list[InvestmentOption] = []

    if selection.solar_glass:
        options.append(InvestmentOption.solar_glass)
    if selection.reflective_roof:
        options.append(InvestmentOption.reflective_roof)
    if selection.has_cooling_upgrade:
        options.append(COOLING_OPTIONS[selection.cooling_upgrade])
    if selection.exhaust_fan_sensors and not bms:
        options.append(InvestmentOption.exhaust_fan_sensors)
    if selection.led_lights:
        options.append(InvestmentOption.led_lights)
    if selection.has_lighting_control and not bms:
        options.append(LIGHTING_CONTROL_OPTIONS[selection.lighting_control])
    if selection.has_pump_upgrade and not bms:
        options.append(PUMP_OPTIONS[selection.pump_upgrade])
    if selection.water_heater_upgrade and not bms:
        options.append(InvestmentOption.water_heater)
    if bms:
        options.append(InvestmentOption.bms)
    if selection.energy_monitoring_system and not bms:
        options.append(InvestmentOption.ems)

    return options


def total_investment(
    selection: InterventionSelection,
    catalog: InvestmentCatalog,
) -> float:
    """Sum the catalog cost of every charged option."""
    return sum((catalog.cost(option) for option in selected_options(selection)), 0.0)
