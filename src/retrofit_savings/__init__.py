# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Retrofit Savings - Building Retrofit Savings & Investment Calculator."""

__version__ = "0.1.0"

from retrofit_savings.data.models import (
    BuildingParameters,
    CalculationResult,
    CoolingSystem,
    CoolingUpgrade,
    DeviceCategory,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    LightingControl,
    PumpUpgrade,
    RoofType,
    TariffParameters,
)
from retrofit_savings.data.presets import PRESETS, ScenarioPreset, get_preset
from retrofit_savings.savings.engine import SavingsEngine, compute
from retrofit_savings.savings.weights import CATEGORY_WEIGHTS

__all__ = [
    "BuildingParameters",
    "CATEGORY_WEIGHTS",
    "CalculationResult",
    "CoolingSystem",
    "CoolingUpgrade",
    "DeviceCategory",
    "InterventionSelection",
    "InvestmentCatalog",
    "InvestmentOption",
    "LightingControl",
    "PRESETS",
    "PumpUpgrade",
    "RoofType",
    "SavingsEngine",
    "ScenarioPreset",
    "TariffParameters",
    "compute",
    "get_preset",
]
