# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Master calculation orchestrator for the retrofit savings engine.

Runs geometry, baseline, default investments, interaction resolution,
aggregation, investment totals, payback, and category attribution in one
pass and returns a fresh :class:`CalculationResult`.
"""

from __future__ import annotations

import logging

from retrofit_savings.analysis.baseline import estimate_annual_energy
from retrofit_savings.analysis.default_investments import apply_default_investments
from retrofit_savings.analysis.geometry import calculate_geometry
from retrofit_savings.data.models import (
    BuildingParameters,
    CalculationResult,
    InterventionSelection,
    InvestmentCatalog,
    TariffParameters,
)
from retrofit_savings.finance.investment import total_investment
from retrofit_savings.finance.payback import payback_period
from retrofit_savings.savings.aggregator import aggregate_savings
from retrofit_savings.savings.attribution import attribute_savings
from retrofit_savings.savings.interactions import resolve_interventions

logger = logging.getLogger(__name__)


class SavingsEngine:
    """Pure, synchronous calculation over one input snapshot.

    The engine keeps no state between calls: callers recompute after
    every input change and replace their previous result wholesale.

    Usage::

        engine = SavingsEngine()
        result = engine.compute(building, tariffs, interventions, investments)

    Parameters
    ----------
    sticky_overrides:
        When true, solar-glass and reflective-roof costs the user overrode
        in the catalog survive the geometry-driven default refresh.  By
        default the refresh always wins.
    """

    def __init__(self, sticky_overrides: bool = False) -> None:
        self.sticky_overrides = sticky_overrides

    def compute(
        self,
        building: BuildingParameters,
        tariffs: TariffParameters,
        interventions: InterventionSelection,
        investments: InvestmentCatalog,
    ) -> CalculationResult:
        """Run the full calculation pipeline.

        Args:
            building: Building dimensions, bill, and dominant cooling system.
            tariffs: Electricity tariff and grid emission factor.
            interventions: The selected retrofit interventions.
            investments: Capital cost catalog, possibly user-edited.

        Returns:
            A new ``CalculationResult``.  Degenerate inputs (zero tariff,
            zero savings) produce zeros, never an exception.
        """
        geometry = calculate_geometry(building)
        annual_energy = estimate_annual_energy(building, tariffs)
        catalog = apply_default_investments(
            investments, geometry, keep_overrides=self.sticky_overrides
        )

        savings = resolve_interventions(interventions, building)
        impact = aggregate_savings(savings, annual_energy, tariffs)

        investment = total_investment(interventions, catalog)
        payback = payback_period(investment, impact.cost_savings)

        by_category = attribute_savings(interventions, savings, annual_energy)

        logger.debug(
            "Computed %.2f%% savings (%.2f MWh/yr) for investment %.2f, payback %.2f yr",
            impact.total_savings_percent,
            impact.energy_savings,
            investment,
            payback,
        )

        return CalculationResult(
            building=building,
            tariffs=tariffs,
            interventions=interventions,
            investments=catalog,
            building_area=geometry.building_area,
            roof_area=geometry.roof_area,
            window_area=geometry.window_area,
            annual_energy=annual_energy,
            intervention_savings=savings,
            total_savings_percent=impact.total_savings_percent,
            energy_savings=impact.energy_savings,
            co2_reduction=impact.co2_reduction,
            cost_savings=impact.cost_savings,
            total_investment=investment,
            payback_period=payback,
            savings_by_category=by_category,
        )


def compute(
    building: BuildingParameters,
    tariffs: TariffParameters,
    interventions: InterventionSelection,
    investments: InvestmentCatalog,
) -> CalculationResult:
    """Run the engine with default settings."""
    return SavingsEngine().compute(building, tariffs, interventions, investments)
