# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Interaction rules between simultaneously selected interventions.

Each function returns the *effective* savings percentage of one
intervention given the full selection snapshot.  Rules read only the
selection (and the building's dominant cooling system), never each
other's output, so they can be evaluated in any order.

Two selections dominate the others:

- A building management system (BMS) already captures most of what fan
  sensors, lighting control, pump tuning, water-heater scheduling and a
  separate energy monitoring system would add, so those are reduced or
  suppressed when a BMS is selected.
- A cooling upgrade shrinks the cooling load that envelope measures act
  on, so solar glass and reflective roof are discounted alongside one,
  and the cooling upgrade itself loses 2 points per envelope measure.

Percentages are not clamped: a rule combination may drive a value below
zero or the total above 100.
"""

from __future__ import annotations

from retrofit_savings.data.models import (
    BuildingParameters,
    CoolingSystem,
    InterventionSavings,
    InterventionSelection,
)
from retrofit_savings.savings.weights import (
    BMS_PCT,
    BMS_WITH_COOLING_PCT,
    COOLING_ENVELOPE_DEDUCTION_PCT,
    COOLING_UPGRADE_PCT,
    EMS_PCT,
    EXHAUST_FAN_SENSORS_PCT,
    LED_LIGHTS_PCT,
    LED_LIGHTS_WITH_CONTROLS_PCT,
    LIGHTING_CONTROL_PCT,
    PUMP_UPGRADE_PCT,
    PUMP_UPGRADE_WITH_BMS_PCT,
    REFLECTIVE_ROOF_PCT,
    REFLECTIVE_ROOF_WITH_COOLING_PCT,
    REFLECTIVE_ROOF_WITH_SOLAR_GLASS_PCT,
    SOLAR_GLASS_PCT,
    SOLAR_GLASS_WITH_COOLING_PCT,
    WATER_HEATER_PCT,
    WATER_HEATER_WITH_BMS_PCT,
)


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

def solar_glass_savings(
    selection: InterventionSelection,
    building: BuildingParameters,
) -> float:
    """Solar glass saves less when cooling is upgraded or split-unit based."""
    if not selection.solar_glass:
        return 0.0
    split_unit_building = (
        building.dominant_cooling_system is CoolingSystem.split_unit
    )
    if selection.has_cooling_upgrade or split_unit_building:
        return SOLAR_GLASS_WITH_COOLING_PCT
    return SOLAR_GLASS_PCT


def reflective_roof_savings(selection: InterventionSelection) -> float:
    if not selection.reflective_roof:
        return 0.0
    if selection.solar_glass:
        return REFLECTIVE_ROOF_WITH_SOLAR_GLASS_PCT
    if selection.has_cooling_upgrade:
        return REFLECTIVE_ROOF_WITH_COOLING_PCT
    return REFLECTIVE_ROOF_PCT


# ---------------------------------------------------------------------------
# Cooling
# ---------------------------------------------------------------------------

def cooling_upgrade_savings(selection: InterventionSelection) -> float:
    """Cooling plant savings, less 2 points per envelope measure selected."""
    if not selection.has_cooling_upgrade:
        return 0.0
    savings = COOLING_UPGRADE_PCT[selection.cooling_upgrade]
    if selection.solar_glass:
        savings -= COOLING_ENVELOPE_DEDUCTION_PCT
    if selection.reflective_roof:
        savings -= COOLING_ENVELOPE_DEDUCTION_PCT
    return savings


# ---------------------------------------------------------------------------
# Ventilation and lighting
# ---------------------------------------------------------------------------

def exhaust_fan_sensors_savings(selection: InterventionSelection) -> float:
    if not selection.exhaust_fan_sensors or selection.building_management_system:
        return 0.0
    return EXHAUST_FAN_SENSORS_PCT


def led_lights_savings(selection: InterventionSelection) -> float:
    if not selection.led_lights:
        return 0.0
    if selection.building_management_system or selection.has_lighting_control:
        return LED_LIGHTS_WITH_CONTROLS_PCT
    return LED_LIGHTS_PCT


def lighting_control_savings(selection: InterventionSelection) -> float:
    if selection.building_management_system:
        return 0.0
    return LIGHTING_CONTROL_PCT[selection.lighting_control]


# ---------------------------------------------------------------------------
# Water
# ---------------------------------------------------------------------------

def pump_upgrade_savings(selection: InterventionSelection) -> float:
    if selection.building_management_system:
        return PUMP_UPGRADE_WITH_BMS_PCT[selection.pump_upgrade]
    return PUMP_UPGRADE_PCT[selection.pump_upgrade]


def water_heater_savings(selection: InterventionSelection) -> float:
    if not selection.water_heater_upgrade:
        return 0.0
    if selection.building_management_system:
        return WATER_HEATER_WITH_BMS_PCT
    return WATER_HEATER_PCT


# ---------------------------------------------------------------------------
# Management
# ---------------------------------------------------------------------------

def bms_savings(selection: InterventionSelection) -> float:
    """BMS savings, reduced when any cooling upgrade is also selected."""
    if not selection.building_management_system:
        return 0.0
    if selection.has_cooling_upgrade:
        return BMS_WITH_COOLING_PCT
    return BMS_PCT


def ems_savings(selection: InterventionSelection) -> float:
    """Energy monitoring is fully subsumed by a BMS."""
    if not selection.energy_monitoring_system or selection.building_management_system:
        return 0.0
    return EMS_PCT


def resolve_interventions(
    selection: InterventionSelection,
    building: BuildingParameters,
) -> InterventionSavings:
    """Apply every interaction rule and return the effective percentages."""
    return InterventionSavings(
        solar_glass=solar_glass_savings(selection, building),
        reflective_roof=reflective_roof_savings(selection),
        cooling_upgrade=cooling_upgrade_savings(selection),
        exhaust_fan_sensors=exhaust_fan_sensors_savings(selection),
        led_lights=led_lights_savings(selection),
        lighting_control=lighting_control_savings(selection),
        pump_upgrade=pump_upgrade_savings(selection),
        water_heater=water_heater_savings(selection),
        building_management_system=bms_savings(selection),
        energy_monitoring_system=ems_savings(selection),
    )
