"""Generate a short plain-language summary of a calculation."""

from __future__ import annotations

from retrofit_savings.data.models import CalculationResult
from retrofit_savings.finance.investment import selected_options
from retrofit_savings.reporting.formatting import format_currency, format_number

# Paybacks at or under this many years are flagged as quick wins.
QUICK_PAYBACK_YEARS = 3.0


def generate_summary(result: CalculationResult, currency: str = "Rp") -> str:
    """Build the summary text.

    Structure:
    1. Baseline sentence
    2. Savings headline (or a note that nothing is selected)
    3. Investment and payback
    4. Largest category reduction
    5. Suppressed investments when a BMS is selected
    """
    parts: list[str] = []

    parts.append(
        f"The building's {format_number(result.building_area, 0)} m2 of floor area "
        f"uses an estimated {format_number(result.annual_energy, 2)} MWh per year."
    )

    if result.interventions.is_empty:
        parts.append("")
        parts.append("No interventions are selected; select measures to estimate savings.")
        return "\n".join(parts)

    parts.append("")
    parts.append(
        f"SAVINGS: {format_number(result.total_savings_percent, 1)}% "
        f"({format_number(result.energy_savings, 2)} MWh/yr), avoiding "
        f"{format_number(result.co2_reduction, 2)} t CO2e/yr and "
        f"{format_currency(result.cost_savings, currency)} per year."
    )

    parts.append("")
    if result.payback_period > 0:
        color = "green" if result.payback_period <= QUICK_PAYBACK_YEARS else "yellow"
        parts.append(
            f"INVESTMENT: {format_currency(result.total_investment, currency)} "
            f"with a simple payback of [{color}]"
            f"{format_number(result.payback_period, 1)} years[/{color}]."
        )
    else:
        parts.append(
            f"INVESTMENT: {format_currency(result.total_investment, currency)}; "
            "[red]no cost savings, so the investment does not pay back.[/red]"
        )

    top = max(result.category_breakdown, key=lambda c: c.savings_mwh)
    if top.savings_mwh > 0:
        parts.append("")
        parts.append(
            f"LARGEST REDUCTION: {top.category.display_name} falls by "
            f"{format_number(top.savings_mwh, 2)} MWh/yr "
            f"({format_number(top.reduction_pct, 1)}% of its baseline)."
        )

    interventions = result.interventions
    if interventions.building_management_system:
        superseded = [
            name for name, selected in (
                ("exhaust fan sensors", interventions.exhaust_fan_sensors),
                ("lighting control", interventions.has_lighting_control),
                ("pump upgrade", interventions.has_pump_upgrade),
                ("water heater", interventions.water_heater_upgrade),
                ("energy monitoring", interventions.energy_monitoring_system),
            )
            if selected
        ]
        if superseded:
            parts.append("")
            parts.append(
                "COVERED BY BMS (not charged separately): " + ", ".join(superseded) + "."
            )

    parts.append("")
    parts.append(f"Charged options: {len(selected_options(interventions))}.")
    return "\n".join(parts)

