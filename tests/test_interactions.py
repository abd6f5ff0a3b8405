"""Tests for the intervention interaction rules."""

from __future__ import annotations

import pytest

from retrofit_savings.data.models import (
    CoolingUpgrade,
    InterventionSelection,
    LightingControl,
    PumpUpgrade,
)
from retrofit_savings.savings.interactions import resolve_interventions


def _resolve(building, **selected):
    return resolve_interventions(InterventionSelection(**selected), building)


class TestEnvelope:
    """Solar glass and reflective roof."""

    def test_solar_glass_alone(self, building):
        assert _resolve(building, solar_glass=True).solar_glass == 8

    def test_solar_glass_with_cooling_upgrade(self, building):
        savings = _resolve(building, solar_glass=True, cooling_upgrade="air_cooled_chiller")
        assert savings.solar_glass == 2

    def test_solar_glass_in_split_unit_building(self, split_unit_building):
        assert _resolve(split_unit_building, solar_glass=True).solar_glass == 2

    def test_reflective_roof_alone(self, building):
        assert _resolve(building, reflective_roof=True).reflective_roof == 4

    def test_reflective_roof_with_solar_glass(self, building):
        savings = _resolve(
            building, reflective_roof=True, solar_glass=True, cooling_upgrade="vrf"
        )
        assert savings.reflective_roof == 2

    def test_reflective_roof_with_cooling_only(self, building):
        savings = _resolve(building, reflective_roof=True, cooling_upgrade="vrf")
        assert savings.reflective_roof == 1


class TestCooling:
    """Cooling upgrade base values and envelope deductions."""

    @pytest.mark.parametrize("upgrade,expected", [
        (CoolingUpgrade.air_cooled_chiller, 28),
        (CoolingUpgrade.water_cooled_chiller, 32),
        (CoolingUpgrade.vrf, 33),
        (CoolingUpgrade.package_units, 28),
        (CoolingUpgrade.split_units, 30),
    ])
    def test_base_values(self, building, upgrade, expected):
        assert _resolve(building, cooling_upgrade=upgrade).cooling_upgrade == expected

    def test_solar_glass_deduction(self, building):
        savings = _resolve(building, solar_glass=True, cooling_upgrade="vrf")
        assert savings.solar_glass == 2
        assert savings.cooling_upgrade == 31

    def test_both_envelope_deductions_stack(self, building):
        savings = _resolve(
            building, solar_glass=True, reflective_roof=True, cooling_upgrade="vrf"
        )
        assert savings.cooling_upgrade == 29

    def test_no_upgrade_is_zero(self, building):
        assert _resolve(building, solar_glass=True).cooling_upgrade == 0


class TestLightingAndVentilation:
    """LED relamping, lighting control, and fan sensors."""

    def test_led_alone(self, building):
        assert _resolve(building, led_lights=True).led_lights == 4

    @pytest.mark.parametrize("control", [
        LightingControl.separate_circuits,
        LightingControl.centralized,
    ])
    def test_led_with_lighting_control(self, building, control):
        assert _resolve(building, led_lights=True, lighting_control=control).led_lights == 1

    def test_led_with_bms(self, building):
        savings = _resolve(building, led_lights=True, building_management_system=True)
        assert savings.led_lights == 1

    @pytest.mark.parametrize("control,expected", [
        (LightingControl.none, 0),
        (LightingControl.separate_circuits, 2),
        (LightingControl.centralized, 3),
    ])
    def test_lighting_control_values(self, building, control, expected):
        assert _resolve(building, lighting_control=control).lighting_control == expected

    def test_lighting_control_zero_with_bms(self, building):
        savings = _resolve(
            building, lighting_control="centralized", building_management_system=True
        )
        assert savings.lighting_control == 0

    def test_fan_sensors(self, building):
        assert _resolve(building, exhaust_fan_sensors=True).exhaust_fan_sensors == 1

    def test_fan_sensors_zero_with_bms(self, building):
        savings = _resolve(
            building, exhaust_fan_sensors=True, building_management_system=True
        )
        assert savings.exhaust_fan_sensors == 0


class TestWaterAndManagement:
    """Pumps, water heater, BMS, and EMS."""

    @pytest.mark.parametrize("pump,alone,with_bms", [
        (PumpUpgrade.new_pump, 2, 1),
        (PumpUpgrade.retrofit_existing_pump, 4, 2),
    ])
    def test_pump_values(self, building, pump, alone, with_bms):
        assert _resolve(building, pump_upgrade=pump).pump_upgrade == alone
        savings = _resolve(building, pump_upgrade=pump, building_management_system=True)
        assert savings.pump_upgrade == with_bms

    def test_water_heater(self, building):
        assert _resolve(building, water_heater_upgrade=True).water_heater == pytest.approx(0.4)
        savings = _resolve(
            building, water_heater_upgrade=True, building_management_system=True
        )
        assert savings.water_heater == pytest.approx(0.1)

    def test_bms_alone(self, building):
        savings = _resolve(building, building_management_system=True)
        assert savings.building_management_system == 19

    @pytest.mark.parametrize("upgrade", [
        u for u in CoolingUpgrade if u is not CoolingUpgrade.none
    ])
    def test_bms_with_any_cooling_upgrade(self, building, upgrade):
        savings = _resolve(
            building, building_management_system=True, cooling_upgrade=upgrade
        )
        assert savings.building_management_system == 5

    def test_ems_alone(self, building):
        assert _resolve(building, energy_monitoring_system=True).energy_monitoring_system == 4

    def test_ems_zero_with_bms(self, building):
        savings = _resolve(
            building, energy_monitoring_system=True, building_management_system=True
        )
        assert savings.energy_monitoring_system == 0


class TestResolution:
    """Properties of the resolved savings as a whole."""

    def test_empty_selection_is_all_zero(self, building):
        savings = _resolve(building)
        assert savings.total == 0

    def test_total_is_sum_of_effective_values(self, building):
        savings = _resolve(
            building,
            solar_glass=True,
            reflective_roof=True,
            cooling_upgrade="vrf",
            led_lights=True,
        )
        # 2 + 2 + 29 + 4
        assert savings.total == pytest.approx(37)

    def test_total_is_not_clamped(self, building):
        savings = _resolve(
            building,
            solar_glass=True,
            reflective_roof=True,
            cooling_upgrade="vrf",
            exhaust_fan_sensors=True,
            led_lights=True,
            lighting_control="centralized",
            pump_upgrade="retrofit_existing_pump",
            water_heater_upgrade=True,
            energy_monitoring_system=True,
        )
        # 2 + 2 + 29 + 1 + 1 + 3 + 4 + 0.4 + 4
        assert savings.total == pytest.approx(46.4)
