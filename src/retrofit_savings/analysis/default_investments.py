"""Suggested capital costs for area-scaled interventions.

Solar control glass is priced per square metre of treated glazing and
reflective roof coating per batch covering a fixed roof area.  These
defaults seed the investment catalog; the user may still edit them.
"""

from __future__ import annotations

from retrofit_savings.analysis.geometry import BuildingGeometry
from retrofit_savings.data.models import InvestmentCatalog, InvestmentOption

# Share of the window area that receives solar control film.
SOLAR_GLASS_COVERAGE = 0.5
SOLAR_GLASS_UNIT_COST_PER_M2 = 650_000.0

# Roof area (m2) covered by one batch of reflective coating.
REFLECTIVE_ROOF_M2_PER_BATCH = 20.0
REFLECTIVE_ROOF_UNIT_COST_PER_BATCH = 1_700_000.0


def solar_glass_investment(geometry: BuildingGeometry) -> float:
    return geometry.window_area * SOLAR_GLASS_COVERAGE * SOLAR_GLASS_UNIT_COST_PER_M2


def reflective_roof_investment(geometry: BuildingGeometry) -> float:
    batches = geometry.roof_area / REFLECTIVE_ROOF_M2_PER_BATCH
    return batches * REFLECTIVE_ROOF_UNIT_COST_PER_BATCH


def estimate_default_investments(
    geometry: BuildingGeometry,
) -> dict[InvestmentOption, float]:
    """Return the geometry-derived default cost of each area-scaled option."""
    return {
        InvestmentOption.solar_glass: solar_glass_investment(geometry),
        InvestmentOption.reflective_roof: reflective_roof_investment(geometry),
    }


def apply_default_investments(
    catalog: InvestmentCatalog,
    geometry: BuildingGeometry,
    keep_overrides: bool = False,
) -> InvestmentCatalog:
    """Refresh the geometry-derived entries of *catalog*.

    By default the refreshed values replace whatever the catalog held,
    including user edits.  With *keep_overrides* the entries the user
    explicitly overrode are left untouched.
    """
    return catalog.with_defaults(
        estimate_default_investments(geometry), keep_overrides=keep_overrides
    )
