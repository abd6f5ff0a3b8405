"""Building geometry derived from the outline dimensions.

Provides the floor, roof, and window areas that drive both the baseline
report and the area-scaled default investments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from retrofit_savings.data.models import BuildingParameters


@dataclass(frozen=True)
class BuildingGeometry:
    """Derived building areas in square metres."""

    building_area: float
    roof_area: float
    window_area: float


def floor_area(building: BuildingParameters) -> float:
    """Gross floor area: footprint times number of floors."""
    return building.length * building.width * building.floors


def roof_area(building: BuildingParameters) -> float:
    """Roof surface area.

    A flat roof equals the footprint.  Gable and hip roofs are projected
    onto the sloped surface by dividing the footprint by the cosine of the
    roof pitch.
    """
    footprint = building.length * building.width
    if building.roof_type.is_pitched:
        slope_radians = math.radians(building.roof_slope_degrees)
        return footprint / math.cos(slope_radians)
    return footprint


def window_area(building: BuildingParameters) -> float:
    """Glazed area of the four facades at the given window-to-wall ratio."""
    perimeter = 2 * (building.length + building.width)
    wall_area = perimeter * building.floor_height * building.floors
    return wall_area * (building.window_to_wall_ratio / 100)


def calculate_geometry(building: BuildingParameters) -> BuildingGeometry:
    """Return all derived areas for *building*."""
    return BuildingGeometry(
        building_area=floor_area(building),
        roof_area=roof_area(building),
        window_area=window_area(building),
    )
