"""Attribution of resolved savings to end-use device categories.

Point interventions are credited to the category they act on.  Savings of
a building management or energy monitoring system are spread over the
five categories a controller can influence, in proportion to each one's
baseline energy share.  Office equipment and other loads are never
credited.
"""

from __future__ import annotations

from retrofit_savings.data.models import (
    DeviceCategory,
    InterventionSavings,
    InterventionSelection,
)
from retrofit_savings.savings.weights import CATEGORY_WEIGHTS, REDISTRIBUTION_CATEGORIES


def attribute_savings(
    selection: InterventionSelection,
    savings: InterventionSavings,
    annual_energy: float,
) -> dict[DeviceCategory, float]:
    """Return attributed savings in MWh/yr for every device category."""
    by_category = {category: 0.0 for category in DeviceCategory}

    if selection.solar_glass or selection.reflective_roof or selection.has_cooling_upgrade:
        cooling_pct = savings.solar_glass + savings.reflective_roof + savings.cooling_upgrade
        by_category[DeviceCategory.cooling] += cooling_pct / 100 * annual_energy

    if selection.exhaust_fan_sensors:
        by_category[DeviceCategory.ventilation] += (
            savings.exhaust_fan_sensors / 100 * annual_energy
        )

    if selection.led_lights or selection.has_lighting_control:
        lighting_pct = savings.led_lights + savings.lighting_control
        by_category[DeviceCategory.lighting] += lighting_pct / 100 * annual_energy

    if selection.has_pump_upgrade:
        by_category[DeviceCategory.pumps] += savings.pump_upgrade / 100 * annual_energy

    if selection.water_heater_upgrade:
        by_category[DeviceCategory.hot_water] += savings.water_heater / 100 * annual_energy

    if selection.building_management_system or selection.energy_monitoring_system:
        _redistribute_management_savings(by_category, savings, annual_energy)

    return by_category


def _redistribute_management_savings(
    by_category: dict[DeviceCategory, float],
    savings: InterventionSavings,
    annual_energy: float,
) -> None:
    """Add BMS/EMS savings to the controllable categories, weight-proportionally."""
    ratio = (savings.building_management_system + savings.energy_monitoring_system) / 100
    total_weight = sum(CATEGORY_WEIGHTS[c] for c in REDISTRIBUTION_CATEGORIES)
    for category in REDISTRIBUTION_CATEGORIES:
        share = CATEGORY_WEIGHTS[category] / total_weight
        by_category[category] += ratio * share * annual_energy
