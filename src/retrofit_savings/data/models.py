# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the retrofit savings calculator.

This module defines the data contract shared by the calculation engine,
the scenario loader, and the reporting and CLI layers.  Inputs and results
are frozen: a new calculation always produces a new result object.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RoofType(str, Enum):
    """Roof geometry; pitched roofs have a slope-corrected surface."""

    flat = "flat"
    gable = "gable"
    hip = "hip"

    @property
    def is_pitched(self) -> bool:
        return self is not RoofType.flat


class CoolingSystem(str, Enum):
    """Dominant cooling system currently installed in the building."""

    split_unit = "split_unit"
    central_ac = "central_ac"


class CoolingUpgrade(str, Enum):
    """Replacement cooling plant; ``none`` means no cooling upgrade."""

    none = "none"
    air_cooled_chiller = "air_cooled_chiller"
    water_cooled_chiller = "water_cooled_chiller"
    vrf = "vrf"
    package_units = "package_units"
    split_units = "split_units"


class LightingControl(str, Enum):
    """Lighting control strategy; ``none`` means no control upgrade."""

    none = "none"
    separate_circuits = "separate_circuits"
    centralized = "centralized"


class PumpUpgrade(str, Enum):
    """Water pump intervention; ``none`` means the pumps are untouched."""

    none = "none"
    new_pump = "new_pump"
    retrofit_existing_pump = "retrofit_existing_pump"


class DeviceCategory(str, Enum):
    """End-use bucket used to attribute savings for reporting."""

    cooling = "cooling"
    lighting = "lighting"
    ventilation = "ventilation"
    office_equipment = "office_equipment"
    pumps = "pumps"
    hot_water = "hot_water"
    other = "other"

    @property
    def display_name(self) -> str:
        """Human-readable label used in tables and charts."""
        return self.value.replace("_", " ").title()

    @property
    def weight(self) -> float:
        """Fixed share of baseline building energy used by this category."""
        return _CATEGORY_WEIGHTS[self]


# Baseline end-use split of a typical air-conditioned office; sums to 1.00.
_CATEGORY_WEIGHTS: dict[DeviceCategory, float] = {
    DeviceCategory.cooling: 0.69,
    DeviceCategory.lighting: 0.04,
    DeviceCategory.ventilation: 0.05,
    DeviceCategory.office_equipment: 0.07,
    DeviceCategory.pumps: 0.10,
    DeviceCategory.hot_water: 0.03,
    DeviceCategory.other: 0.02,
}


class InvestmentOption(str, Enum):
    """A concrete, individually priced intervention option."""

    solar_glass = "solar_glass"
    reflective_roof = "reflective_roof"
    cooling_air_chiller = "cooling_air_chiller"
    cooling_water_chiller = "cooling_water_chiller"
    cooling_vrf = "cooling_vrf"
    cooling_package = "cooling_package"
    cooling_split_units = "cooling_split_units"
    exhaust_fan_sensors = "exhaust_fan_sensors"
    led_lights = "led_lights"
    lighting_separate = "lighting_separate"
    lighting_centralized = "lighting_centralized"
    pump_new = "pump_new"
    pump_existing = "pump_existing"
    water_heater = "water_heater"
    bms = "bms"
    ems = "ems"

    @property
    def display_name(self) -> str:
        return _OPTION_LABELS[self]


_OPTION_LABELS: dict[InvestmentOption, str] = {
    InvestmentOption.solar_glass: "Solar control glass",
    InvestmentOption.reflective_roof: "Reflective roof coating",
    InvestmentOption.cooling_air_chiller: "Air-cooled chiller",
    InvestmentOption.cooling_water_chiller: "Water-cooled chiller",
    InvestmentOption.cooling_vrf: "VRF system",
    InvestmentOption.cooling_package: "Package units",
    InvestmentOption.cooling_split_units: "Split units",
    InvestmentOption.exhaust_fan_sensors: "Exhaust fan sensors",
    InvestmentOption.led_lights: "LED relamping",
    InvestmentOption.lighting_separate: "Separate lighting circuits",
    InvestmentOption.lighting_centralized: "Centralized lighting control",
    InvestmentOption.pump_new: "New water pump",
    InvestmentOption.pump_existing: "Retrofit existing pump",
    InvestmentOption.water_heater: "Water heater replacement",
    InvestmentOption.bms: "Building management system",
    InvestmentOption.ems: "Energy monitoring system",
}

# Options whose default cost is derived from building geometry.
GEOMETRY_DERIVED_OPTIONS: frozenset[InvestmentOption] = frozenset(
    {InvestmentOption.solar_glass, InvestmentOption.reflective_roof}
)


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

# Buildings with fewer storeys than this are reported as low-rise.
LOW_RISE_MAX_FLOORS = 8


class BuildingParameters(BaseModel):
    """Physical description of the building and its utility bill."""

    model_config = {"frozen": True, "populate_by_name": True}

    length: float = Field(..., ge=0, description="Building length in metres")
    width: float = Field(..., ge=0, description="Building width in metres")
    floors: int = Field(..., ge=0, description="Number of storeys")
    floor_height: float = Field(
        ..., ge=0, description="Floor-to-floor height in metres"
    )
    window_to_wall_ratio: float = Field(
        ..., ge=0,
        description="Glazed share of the facade in percent (intended 0-100)",
    )
    roof_type: RoofType = Field(default=RoofType.flat, description="Roof geometry")
    roof_slope_degrees: float = Field(
        default=0.0, ge=0, lt=90,
        description="Roof pitch in degrees; ignored for flat roofs",
    )
    monthly_utility_bill: float = Field(
        ..., ge=0, description="Average monthly electricity bill (currency)"
    )
    dominant_cooling_system: CoolingSystem = Field(
        default=CoolingSystem.central_ac,
        description="Cooling system that serves most of the floor area",
    )

    @property
    def is_low_rise(self) -> bool:
        return self.floors < LOW_RISE_MAX_FLOORS

    @property
    def height_class(self) -> str:
        """One-word label used in report headers."""
        return "low-rise" if self.is_low_rise else "high-rise"


class TariffParameters(BaseModel):
    """Electricity price and grid emission factor."""

    model_config = {"frozen": True, "populate_by_name": True}

    electricity_tariff: float = Field(
        ..., description="Electricity price in currency per kWh"
    )
    emission_factor: float = Field(
        ..., ge=0, description="Grid emission factor in kg CO2e per kWh"
    )


class InterventionSelection(BaseModel):
    """The set of retrofit interventions the user has selected.

    Single-choice families (cooling, lighting control, pumps) are enums
    with an explicit ``none`` member, so at most one branch per family
    can ever be active.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    # Envelope
    solar_glass: bool = False
    reflective_roof: bool = False

    # Cooling
    cooling_upgrade: CoolingUpgrade = CoolingUpgrade.none

    # Ventilation
    exhaust_fan_sensors: bool = False

    # Lighting
    led_lights: bool = False
    lighting_control: LightingControl = LightingControl.none

    # Water
    pump_upgrade: PumpUpgrade = PumpUpgrade.none
    water_heater_upgrade: bool = False

    # Management
    building_management_system: bool = False
    energy_monitoring_system: bool = False

    @property
    def has_cooling_upgrade(self) -> bool:
        return self.cooling_upgrade is not CoolingUpgrade.none

    @property
    def has_lighting_control(self) -> bool:
        return self.lighting_control is not LightingControl.none

    @property
    def has_pump_upgrade(self) -> bool:
        return self.pump_upgrade is not PumpUpgrade.none

    @property
    def is_empty(self) -> bool:
        """True when no intervention in any family is selected."""
        return self == InterventionSelection()


class InvestmentCatalog(BaseModel):
    """Capital cost per intervention option.

    ``overridden`` records the options whose cost was set explicitly by the
    user, as opposed to seeded from a preset or derived from geometry.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    costs: dict[InvestmentOption, float] = Field(
        default_factory=dict, description="Capital cost per option"
    )
    overridden: frozenset[InvestmentOption] = Field(
        default_factory=frozenset,
        description="Options explicitly edited by the user",
    )

    @field_validator("costs")
    @classmethod
    def _check_costs(
        cls, value: dict[InvestmentOption, float]
    ) -> dict[InvestmentOption, float]:
        for option, cost in value.items():
            if cost < 0:
                raise ValueError(
                    f"Investment for '{option.value}' must be >= 0, got {cost}"
                )
        return value

    def cost(self, option: InvestmentOption) -> float:
        """Return the cost of *option*, or 0.0 when it is not priced."""
        return self.costs.get(option, 0.0)

    def with_cost(self, option: InvestmentOption, cost: float) -> InvestmentCatalog:
        """Return a copy with *option* set to *cost* and marked overridden."""
        costs = dict(self.costs)
        costs[option] = cost
        return InvestmentCatalog(
            costs=costs, overridden=self.overridden | {option}
        )

    def with_defaults(
        self,
        defaults: dict[InvestmentOption, float],
        keep_overrides: bool = False,
    ) -> InvestmentCatalog:
        """Return a copy with *defaults* written over the current costs.

        When *keep_overrides* is true, options the user overrode keep their
        edited value; otherwise every default wins and the override marks
        for those options are cleared.
        """
        costs = dict(self.costs)
        overridden = set(self.overridden)
        for option, cost in defaults.items():
            if keep_overrides and option in self.overridden:
                continue
            costs[option] = cost
            overridden.discard(option)
        return InvestmentCatalog(costs=costs, overridden=frozenset(overridden))


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class InterventionSavings(BaseModel):
    """Effective savings percentage of each intervention after interactions.

    An intervention that is not selected contributes 0.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    solar_glass: float = 0.0
    reflective_roof: float = 0.0
    cooling_upgrade: float = 0.0
    exhaust_fan_sensors: float = 0.0
    led_lights: float = 0.0
    lighting_control: float = 0.0
    pump_upgrade: float = 0.0
    water_heater: float = 0.0
    building_management_system: float = 0.0
    energy_monitoring_system: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        """Sum of all ten effective percentages (unclamped)."""
        return (
            self.solar_glass
            + self.reflective_roof
            + self.cooling_upgrade
            + self.exhaust_fan_sensors
            + self.led_lights
            + self.lighting_control
            + self.pump_upgrade
            + self.water_heater
            + self.building_management_system
            + self.energy_monitoring_system
        )


class CategoryBreakdown(BaseModel):
    """Baseline and projected consumption for one device category."""

    model_config = {"frozen": True, "populate_by_name": True}

    category: DeviceCategory
    weight: float = Field(..., ge=0, le=1, description="Baseline energy share")
    baseline_mwh: float = Field(..., description="Baseline consumption (MWh/yr)")
    savings_mwh: float = Field(..., description="Attributed savings (MWh/yr)")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def projected_mwh(self) -> float:
        """Consumption after the selected interventions (MWh/yr)."""
        return self.baseline_mwh - self.savings_mwh

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reduction_pct(self) -> float:
        """Savings as a percentage of this category's baseline."""
        if self.baseline_mwh == 0:
            return 0.0
        return self.savings_mwh / self.baseline_mwh * 100


class CalculationResult(BaseModel):
    """Complete output of one engine run.

    Produced fresh on every calculation and consumed verbatim by the
    terminal, chart, PDF, and JSON reporting layers.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    # Inputs the result was computed from
    building: BuildingParameters
    tariffs: TariffParameters
    interventions: InterventionSelection
    investments: InvestmentCatalog = Field(
        ..., description="Effective catalog used for the investment total"
    )

    # Geometry and baseline
    building_area: float = Field(..., description="Gross floor area (m2)")
    roof_area: float = Field(..., description="Roof surface area (m2)")
    window_area: float = Field(..., description="Glazed facade area (m2)")
    annual_energy: float = Field(..., description="Baseline consumption (MWh/yr)")

    # Savings
    intervention_savings: InterventionSavings
    total_savings_percent: float = Field(
        ..., description="Sum of effective percentages (unclamped)"
    )
    energy_savings: float = Field(..., description="Energy saved (MWh/yr)")
    co2_reduction: float = Field(..., description="Emissions avoided (t CO2e/yr)")
    cost_savings: float = Field(..., description="Cost saved (currency/yr)")

    # Finance
    total_investment: float = Field(..., ge=0, description="Capital cost (currency)")
    payback_period: float = Field(
        ..., description="Simple payback in years; 0 when nothing is saved"
    )

    savings_by_category: dict[DeviceCategory, float] = Field(
        ..., description="Attributed savings per device category (MWh/yr)"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def category_breakdown(self) -> list[CategoryBreakdown]:
        """Baseline vs. projected consumption for every device category."""
        return [
            CategoryBreakdown(
                category=category,
                weight=category.weight,
                baseline_mwh=self.annual_energy * category.weight,
                savings_mwh=self.savings_by_category.get(category, 0.0),
            )
            for category in DeviceCategory
        ]
