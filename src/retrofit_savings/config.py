# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scenario configuration model and YAML loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from retrofit_savings.data.coercion import coerce_float, coerce_int, parse_localized_number
from retrofit_savings.data.models import (
    BuildingParameters,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    TariffParameters,
)
from retrofit_savings.data.presets import get_preset

logger = logging.getLogger(__name__)

_BUILDING_NUMERIC_FIELDS = (
    "length",
    "width",
    "floor_height",
    "window_to_wall_ratio",
    "roof_slope_degrees",
    "monthly_utility_bill",
)
_TARIFF_NUMERIC_FIELDS = ("electricity_tariff", "emission_factor")


class ScenarioError(ValueError):
    """Raised when a scenario file cannot be turned into engine inputs."""


def _coerce_section(
    section: dict[str, Any],
    fields: tuple[str, ...],
    parse: Callable[[Any], float],
) -> dict[str, Any]:
    coerced = dict(section)
    for name in fields:
        if name in coerced:
            coerced[name] = parse(coerced[name])
    return coerced


# ---------------------------------------------------------------------------
# Scenario model
# ---------------------------------------------------------------------------

class ScenarioConfig(BaseModel):
    """A scenario as written in YAML.

    Every section is optional and partial: missing keys fall back to the
    named base preset.  Building values are read as plain decimals
    ("3.5"); tariffs and investment costs may be locale-formatted
    ("1.587,92", "150.000.000").
    """

    name: str = Field(default="Unnamed scenario")
    preset: str = Field(default="default", description="Base preset name")
    building: dict[str, Any] = Field(default_factory=dict)
    tariffs: dict[str, Any] = Field(default_factory=dict)
    interventions: dict[str, Any] = Field(default_factory=dict)
    investments: dict[InvestmentOption, Any] = Field(
        default_factory=dict, description="Explicit catalog overrides"
    )
    sticky_overrides: bool = Field(default=False)

    @field_validator("building")
    @classmethod
    def _coerce_building(cls, value: dict[str, Any]) -> dict[str, Any]:
        coerced = _coerce_section(value, _BUILDING_NUMERIC_FIELDS, coerce_float)
        if "floors" in coerced:
            coerced["floors"] = coerce_int(coerced["floors"])
        return coerced

    @field_validator("tariffs")
    @classmethod
    def _coerce_tariffs(cls, value: dict[str, Any]) -> dict[str, Any]:
        return _coerce_section(value, _TARIFF_NUMERIC_FIELDS, parse_localized_number)

    def resolve(
        self,
    ) -> tuple[BuildingParameters, TariffParameters, InterventionSelection, InvestmentCatalog]:
        """Merge this scenario over its base preset into the four engine inputs."""
        base = get_preset(self.preset)
        building = BuildingParameters.model_validate(
            {**base.building.model_dump(), **self.building}
        )
        tariffs = TariffParameters.model_validate(
            {**base.tariffs.model_dump(), **self.tariffs}
        )
        interventions = InterventionSelection.model_validate(
            {**base.interventions.model_dump(), **self.interventions}
        )
        catalog = base.investments
        for option, cost in self.investments.items():
            catalog = catalog.with_cost(option, parse_localized_number(cost))
        return building, tariffs, interventions, catalog


def load_scenario(path: str | Path) -> ScenarioConfig:
    """Load a ScenarioConfig from a YAML file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ScenarioError
        If the file is not a YAML mapping or fails validation.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ScenarioError(f"Scenario file {config_path} must contain a mapping")

    try:
        scenario = ScenarioConfig.model_validate(raw)
    except ValidationError as exc:
        raise ScenarioError(f"Invalid scenario file {config_path}:\n{exc}") from exc

    logger.info("Loaded scenario %r from %s", scenario.name, config_path)
    return scenario


def resolve_scenario(
    scenario: ScenarioConfig,
) -> tuple[BuildingParameters, TariffParameters, InterventionSelection, InvestmentCatalog]:
    """Resolve *scenario* into engine inputs, wrapping failures as ScenarioError."""
    try:
        return scenario.resolve()
    except KeyError as exc:
        raise ScenarioError(str(exc)) from exc
    except ValidationError as exc:
        raise ScenarioError(f"Invalid scenario {scenario.name!r}:\n{exc}") from exc
