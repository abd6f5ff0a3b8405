"""Baseline annual energy estimate from the utility bill."""

from __future__ import annotations

from retrofit_savings.data.models import BuildingParameters, TariffParameters

MONTHS_PER_YEAR = 12
KWH_PER_MWH = 1000


def estimate_annual_energy(
    building: BuildingParameters,
    tariffs: TariffParameters,
) -> float:
    """Return baseline consumption in MWh/yr.

    The monthly bill divided by the tariff gives monthly kWh, which is
    annualised and converted to MWh.  A non-positive tariff yields 0.0
    rather than a division error.
    """
    if tariffs.electricity_tariff <= 0:
        return 0.0
    monthly_kwh = building.monthly_utility_bill / tariffs.electricity_tariff
    return monthly_kwh * MONTHS_PER_YEAR / KWH_PER_MWH
