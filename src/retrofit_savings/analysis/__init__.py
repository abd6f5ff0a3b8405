# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Building geometry, baseline energy, and default investment estimates."""

from retrofit_savings.analysis.baseline import estimate_annual_energy
from retrofit_savings.analysis.default_investments import (
    apply_default_investments,
    estimate_default_investments,
)
from retrofit_savings.analysis.geometry import BuildingGeometry, calculate_geometry

__all__ = [
    "BuildingGeometry",
    "apply_default_investments",
    "calculate_geometry",
    "estimate_annual_energy",
    "estimate_default_investments",
]
