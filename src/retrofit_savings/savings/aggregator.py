"""Aggregate effective percentages into energy, emissions, and cost savings."""

from __future__ import annotations

from dataclasses import dataclass

from retrofit_savings.analysis.baseline import KWH_PER_MWH
from retrofit_savings.data.models import InterventionSavings, TariffParameters


@dataclass(frozen=True)
class SavingsImpact:
    """Annual impact of the combined selection."""

    total_savings_percent: float
    energy_savings: float  # MWh/yr
    co2_reduction: float  # t CO2e/yr
    cost_savings: float  # currency/yr


def aggregate_savings(
    savings: InterventionSavings,
    annual_energy: float,
    tariffs: TariffParameters,
) -> SavingsImpact:
    """Convert the resolved percentages into annual savings.

    The total percentage is the plain sum of the ten effective
    percentages and is not capped at 100.  Since the emission factor is
    in kg/kWh, multiplying MWh by it gives tonnes directly.
    """
    total_pct = savings.total
    energy_savings = annual_energy * total_pct / 100
    co2_reduction = energy_savings * tariffs.emission_factor
    cost_savings = energy_savings * KWH_PER_MWH * tariffs.electricity_tariff
    return SavingsImpact(
        total_savings_percent=total_pct,
        energy_savings=energy_savings,
        co2_reduction=co2_reduction,
        cost_savings=cost_savings,
    )
