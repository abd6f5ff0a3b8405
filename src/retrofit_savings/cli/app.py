# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for retrofit-savings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from retrofit_savings import __version__
from retrofit_savings.analysis.default_investments import apply_default_investments
from retrofit_savings.analysis.geometry import calculate_geometry
from retrofit_savings.config import ScenarioError, load_scenario, resolve_scenario
from retrofit_savings.data.coercion import parse_localized_number
from retrofit_savings.data.models import (
    BuildingParameters,
    CalculationResult,
    CoolingSystem,
    CoolingUpgrade,
    InterventionSelection,
    InvestmentCatalog,
    InvestmentOption,
    LightingControl,
    PumpUpgrade,
    RoofType,
    TariffParameters,
)
from retrofit_savings.data.presets import PRESETS, get_preset
from retrofit_savings.reporting.charts import CHART_NAMES, ChartGenerator
from retrofit_savings.reporting.terminal import TerminalRenderer
from retrofit_savings.savings.engine import SavingsEngine

logger = logging.getLogger(__name__)

PRESET_CHOICES = list(PRESETS.keys())

# CLI flag name -> InterventionSelection field
_INTERVENTION_FLAGS = {
    "solar_glass": "solar_glass",
    "reflective_roof": "reflective_roof",
    "cooling_upgrade": "cooling_upgrade",
    "exhaust_fan_sensors": "exhaust_fan_sensors",
    "led_lights": "led_lights",
    "lighting_control": "lighting_control",
    "pump_upgrade": "pump_upgrade",
    "water_heater": "water_heater_upgrade",
    "bms": "building_management_system",
    "ems": "energy_monitoring_system",
}


@dataclass
class Inputs:
    """Engine inputs gathered from a preset or scenario plus CLI overrides."""

    name: str
    building: BuildingParameters
    tariffs: TariffParameters
    interventions: InterventionSelection
    investments: InvestmentCatalog
    sticky_overrides: bool = False

    def compute(self) -> CalculationResult:
        engine = SavingsEngine(sticky_overrides=self.sticky_overrides)
        return engine.compute(self.building, self.tariffs, self.interventions, self.investments)


def _fail(console: Console, message: str) -> None:
    console.print(f"[red]{escape(message)}[/]")
    raise SystemExit(1)


def _load_inputs(preset: str, scenario: str | None, console: Console) -> Inputs:
    """Build the engine inputs from a YAML scenario or a named preset."""
    try:
        if scenario:
            config = load_scenario(scenario)
            building, tariffs, interventions, catalog = resolve_scenario(config)
            return Inputs(
                config.name, building, tariffs, interventions, catalog,
                sticky_overrides=config.sticky_overrides,
            )
        base = get_preset(preset)
    except (ScenarioError, FileNotFoundError) as exc:
        _fail(console, str(exc))
    except KeyError as exc:
        _fail(console, exc.args[0] if exc.args else str(exc))
    return Inputs(base.name, base.building, base.tariffs, base.interventions, base.investments)


def _parse_cost_override(value: str) -> tuple[InvestmentOption, float]:
    option_name, sep, raw_cost = value.partition("=")
    if not sep:
        raise click.BadParameter(f"expected OPTION=VALUE, got {value!r}", param_hint="--set-cost")
    try:
        option = InvestmentOption(option_name.strip())
    except ValueError:
        available = ", ".join(o.value for o in InvestmentOption)
        raise click.BadParameter(
            f"unknown option {option_name!r}. Available: {available}",
            param_hint="--set-cost",
        ) from None
    return option, parse_localized_number(raw_cost)


def _apply_overrides(
    inputs: Inputs,
    console: Console,
    interventions: dict[str, Any],
    building: dict[str, Any],
    tariffs: dict[str, Any],
    costs: tuple[str, ...],
    sticky_overrides: bool,
) -> Inputs:
    """Layer command-line overrides on top of the loaded inputs."""
    for option, cost in (_parse_cost_override(c) for c in costs):
        inputs.investments = inputs.investments.with_cost(option, cost)

    selection = {
        _INTERVENTION_FLAGS[flag]: value
        for flag, value in interventions.items()
        if value is not None
    }
    building = {k: v for k, v in building.items() if v is not None}
    tariffs = {k: v for k, v in tariffs.items() if v is not None}

    try:
        if selection:
            inputs.interventions = InterventionSelection.model_validate(
                {**inputs.interventions.model_dump(), **selection}
            )
        if building:
            inputs.building = BuildingParameters.model_validate(
                {**inputs.building.model_dump(), **building}
            )
        if tariffs:
            inputs.tariffs = TariffParameters.model_validate(
                {**inputs.tariffs.model_dump(), **tariffs}
            )
    except ValidationError as exc:
        _fail(console, f"Invalid input:\n{exc}")

    if sticky_overrides:
        inputs.sticky_overrides = True
    return inputs


def _input_options(func: Callable) -> Callable:
    """Attach the --preset/--scenario options shared by every command."""
    func = click.option(
        "--scenario", "-s", type=click.Path(), default=None,
        help="YAML scenario file (takes precedence over --preset)",
    )(func)
    func = click.option(
        "--preset", "-p",
        type=click.Choice(PRESET_CHOICES),
        default="default",
        help="Built-in scenario preset",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="retrofit-savings")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """retrofit-savings: Building Retrofit Savings & Investment Calculator

    Estimate the energy, emissions, and cost savings of retrofit
    interventions for a building, and the payback of their investment.

    \b
      calculate   Run a calculation and print the report
      catalog     Show the effective investment catalog
      categories  Show the baseline energy split by device category
      export      Write a report as JSON, PDF, or a PNG chart
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True, no_color=no_color))],
            force=True,
        )


@cli.command()
@_input_options
@click.option("--solar-glass/--no-solar-glass", default=None, help="Solar control glass")
@click.option("--reflective-roof/--no-reflective-roof", default=None, help="Reflective roof coating")
@click.option(
    "--cooling-upgrade",
    type=click.Choice([c.value for c in CoolingUpgrade]),
    default=None,
    help="Cooling system replacement",
)
@click.option(
    "--exhaust-fan-sensors/--no-exhaust-fan-sensors", default=None,
    help="Occupancy sensors on exhaust fans",
)
@click.option("--led-lights/--no-led-lights", default=None, help="LED relamping")
@click.option(
    "--lighting-control",
    type=click.Choice([c.value for c in LightingControl]),
    default=None,
    help="Lighting control scheme",
)
@click.option(
    "--pump-upgrade",
    type=click.Choice([c.value for c in PumpUpgrade]),
    default=None,
    help="Water pump upgrade",
)
@click.option("--water-heater/--no-water-heater", default=None, help="Water heater upgrade")
@click.option("--bms/--no-bms", default=None, help="Building management system")
@click.option("--ems/--no-ems", default=None, help="Energy monitoring system")
@click.option("--length", type=float, default=None, help="Building length (m)")
@click.option("--width", type=float, default=None, help="Building width (m)")
@click.option("--floors", type=int, default=None, help="Number of storeys")
@click.option("--floor-height", type=float, default=None, help="Floor-to-floor height (m)")
@click.option(
    "--window-to-wall-ratio", "--wwr", "window_to_wall_ratio", type=float, default=None,
    help="Glazed share of the facade in percent",
)
@click.option(
    "--roof-type",
    type=click.Choice([r.value for r in RoofType]),
    default=None,
    help="Roof geometry",
)
@click.option("--roof-slope", type=float, default=None, help="Roof pitch in degrees")
@click.option(
    "--cooling-system",
    type=click.Choice([c.value for c in CoolingSystem]),
    default=None,
    help="Dominant existing cooling system",
)
@click.option("--monthly-bill", type=float, default=None, help="Monthly utility bill")
@click.option("--tariff", type=float, default=None, help="Electricity tariff per kWh")
@click.option("--emission-factor", type=float, default=None, help="Grid emission factor (kgCO2e/kWh)")
@click.option(
    "--set-cost", "set_cost", multiple=True, metavar="OPTION=VALUE",
    help="Override one investment catalog entry (repeatable)",
)
@click.option(
    "--sticky-overrides", is_flag=True, default=False,
    help="Keep overridden solar glass / reflective roof costs instead of geometry defaults",
)
@click.option("--show-details/--no-details", default=True, help="Show the intervention breakdown")
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export raw results as JSON at this path",
)
@click.option(
    "--export-pdf", type=click.Path(), default=None,
    help="Export results to PDF at this path",
)
@click.option(
    "--export-chart", type=click.Path(), default=None,
    help="Save the category comparison chart as PNG at this path",
)
@click.pass_context
def calculate(
    ctx: click.Context,
    preset: str,
    scenario: str | None,
    solar_glass: bool | None,
    reflective_roof: bool | None,
    cooling_upgrade: str | None,
    exhaust_fan_sensors: bool | None,
    led_lights: bool | None,
    lighting_control: str | None,
    pump_upgrade: str | None,
    water_heater: bool | None,
    bms: bool | None,
    ems: bool | None,
    length: float | None,
    width: float | None,
    floors: int | None,
    floor_height: float | None,
    window_to_wall_ratio: float | None,
    roof_type: str | None,
    roof_slope: float | None,
    cooling_system: str | None,
    monthly_bill: float | None,
    tariff: float | None,
    emission_factor: float | None,
    set_cost: tuple[str, ...],
    sticky_overrides: bool,
    show_details: bool,
    export_json: str | None,
    export_pdf: str | None,
    export_chart: str | None,
) -> None:
    """Run a savings calculation and print the report.

    Building, tariff and intervention flags override the preset or the
    --scenario file, which can describe every input at once.
    """
    console: Console = ctx.obj["console"]

    inputs = _load_inputs(preset, scenario, console)
    inputs = _apply_overrides(
        inputs,
        console,
        interventions={
            "solar_glass": solar_glass,
            "reflective_roof": reflective_roof,
            "cooling_upgrade": cooling_upgrade,
            "exhaust_fan_sensors": exhaust_fan_sensors,
            "led_lights": led_lights,
            "lighting_control": lighting_control,
            "pump_upgrade": pump_upgrade,
            "water_heater": water_heater,
            "bms": bms,
            "ems": ems,
        },
        building={
            "length": length,
            "width": width,
            "floors": floors,
            "floor_height": floor_height,
            "window_to_wall_ratio": window_to_wall_ratio,
            "roof_type": roof_type,
            "roof_slope_degrees": roof_slope,
            "monthly_utility_bill": monthly_bill,
            "dominant_cooling_system": cooling_system,
        },
        tariffs={"electricity_tariff": tariff, "emission_factor": emission_factor},
        costs=set_cost,
        sticky_overrides=sticky_overrides,
    )

    result = inputs.compute()

    renderer = TerminalRenderer(console)
    renderer.render(result, show_details=show_details)

    if export_json:
        _export_json(result, export_json, console)
    if export_pdf:
        _export_pdf(result, export_pdf, console)
    if export_chart:
        _export_chart(result, export_chart, "category_comparison", console)


@cli.command()
@_input_options
@click.pass_context
def catalog(ctx: click.Context, preset: str, scenario: str | None) -> None:
    """Show the effective investment catalog, with geometry-derived defaults."""
    console: Console = ctx.obj["console"]
    inputs = _load_inputs(preset, scenario, console)
    effective = apply_default_investments(
        inputs.investments,
        calculate_geometry(inputs.building),
        keep_overrides=inputs.sticky_overrides,
    )
    TerminalRenderer(console).render_catalog(effective)


@cli.command()
@click.pass_context
def categories(ctx: click.Context) -> None:
    """Show the baseline energy split across device categories."""
    console: Console = ctx.obj["console"]
    TerminalRenderer(console).render_category_weights()


@cli.command()
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "pdf", "png"]),
    default="pdf",
    help="Export format",
)
@click.option("--output", "-o", type=click.Path(), required=True, help="Output file path")
@click.option(
    "--chart",
    type=click.Choice(list(CHART_NAMES)),
    default="category_comparison",
    help="Chart to save when --format is png",
)
@_input_options
@click.pass_context
def export(
    ctx: click.Context,
    format: str,
    output: str,
    chart: str,
    preset: str,
    scenario: str | None,
) -> None:
    """Export a calculation report to JSON, PDF, or a PNG chart."""
    console: Console = ctx.obj["console"]
    result = _load_inputs(preset, scenario, console).compute()

    if format == "json":
        _export_json(result, output, console)
    elif format == "pdf":
        _export_pdf(result, output, console)
    elif format == "png":
        _export_chart(result, output, chart, console)


def _export_pdf(result: CalculationResult, path: str, console: Console) -> None:
    """Export to PDF."""
    from retrofit_savings.reporting.pdf_report import PDFReportGenerator

    with console.status("[bold cyan]Generating PDF report..."):
        PDFReportGenerator().generate(result, path)
    console.print(f"  [green]PDF report exported to:[/green] {path}")


def _export_json(result: CalculationResult, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        f.write(result.model_dump_json(indent=2))
    logger.info("JSON report written to %s", path)
    console.print(f"  [green]JSON report exported to:[/green] {path}")


def _export_chart(result: CalculationResult, path: str, name: str, console: Console) -> None:
    """Export one chart to PNG."""
    saved = ChartGenerator(result).save(name, path)
    console.print(f"  [green]Chart exported to:[/green] {saved}")
