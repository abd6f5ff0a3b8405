"""Savings percentages and category weights for the calculation engine.

Every percentage below is the share of baseline annual building energy an
intervention saves.  Values in the ``*_WITH_*`` constants are the reduced
figures applied when a dominant intervention is selected alongside.
"""

from retrofit_savings.data.models import (
    CoolingUpgrade,
    DeviceCategory,
    LightingControl,
    PumpUpgrade,
)

# ---------------------------------------------------------------------------
# Device category weights (must sum to 1.0)
# ---------------------------------------------------------------------------
CATEGORY_WEIGHTS: dict[DeviceCategory, float] = {
    category: category.weight for category in DeviceCategory
}

# Categories that share whole-building management savings.
REDISTRIBUTION_CATEGORIES: tuple[DeviceCategory, ...] = (
    DeviceCategory.cooling,
    DeviceCategory.lighting,
    DeviceCategory.ventilation,
    DeviceCategory.pumps,
    DeviceCategory.hot_water,
)

# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------
SOLAR_GLASS_PCT = 8.0
SOLAR_GLASS_WITH_COOLING_PCT = 2.0  # cooling upgrade or split-unit building

REFLECTIVE_ROOF_PCT = 4.0
REFLECTIVE_ROOF_WITH_SOLAR_GLASS_PCT = 2.0
REFLECTIVE_ROOF_WITH_COOLING_PCT = 1.0

# ---------------------------------------------------------------------------
# Cooling
# ---------------------------------------------------------------------------
COOLING_UPGRADE_PCT: dict[CoolingUpgrade, float] = {
    CoolingUpgrade.none: 0.0,
    CoolingUpgrade.air_cooled_chiller: 28.0,
    CoolingUpgrade.water_cooled_chiller: 32.0,
    CoolingUpgrade.vrf: 33.0,
    CoolingUpgrade.package_units: 28.0,
    CoolingUpgrade.split_units: 30.0,
}
# Deducted once per envelope measure selected with a cooling upgrade.
COOLING_ENVELOPE_DEDUCTION_PCT = 2.0

# ---------------------------------------------------------------------------
# Ventilation and lighting
# ---------------------------------------------------------------------------
EXHAUST_FAN_SENSORS_PCT = 1.0

LED_LIGHTS_PCT = 4.0
LED_LIGHTS_WITH_CONTROLS_PCT = 1.0  # with BMS or any lighting control

LIGHTING_CONTROL_PCT: dict[LightingControl, float] = {
    LightingControl.none: 0.0,
    LightingControl.separate_circuits: 2.0,
    LightingControl.centralized: 3.0,
}

# ---------------------------------------------------------------------------
# Water
# ---------------------------------------------------------------------------
PUMP_UPGRADE_PCT: dict[PumpUpgrade, float] = {
    PumpUpgrade.none: 0.0,
    PumpUpgrade.new_pump: 2.0,
    PumpUpgrade.retrofit_existing_pump: 4.0,
}
PUMP_UPGRADE_WITH_BMS_PCT: dict[PumpUpgrade, float] = {
    PumpUpgrade.none: 0.0,
    PumpUpgrade.new_pump: 1.0,
    PumpUpgrade.retrofit_existing_pump: 2.0,
}

WATER_HEATER_PCT = 0.4
WATER_HEATER_WITH_BMS_PCT = 0.1

# ---------------------------------------------------------------------------
# Management
# ---------------------------------------------------------------------------
BMS_PCT = 19.0
BMS_WITH_COOLING_PCT = 5.0
EMS_PCT = 4.0
