# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models, presets, and input coercion."""

from retrofit_savings.data.coercion import coerce_float, coerce_int, parse_localized_number
from retrofit_savings.data.models import (
    BuildingParameters,
    CalculationResult,
    CategoryBreakdown,
    InterventionSavings,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    TariffParameters,
)
from retrofit_savings.data.presets import PRESETS, ScenarioPreset, default_catalog, get_preset

__all__ = [
    "BuildingParameters",
    "CalculationResult",
    "CategoryBreakdown",
    "InterventionSavings",
    "InterventionSelection",
    "InvestmentCatalog",
    "InvestmentOption",
    "PRESETS",
    "ScenarioPreset",
    "TariffParameters",
    "coerce_float",
    "coerce_int",
    "default_catalog",
    "get_preset",
    "parse_localized_number",
]
