"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII bars into the primary user-facing
terminal output of a retrofit calculation.  Every figure is taken from
the :class:`CalculationResult` verbatim; nothing is recomputed here.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from retrofit_savings import __version__
from retrofit_savings.data.models import (
    GEOMETRY_DERIVED_OPTIONS,
    CalculationResult,
    InvestmentCatalog,
    InvestmentOption,
)
from retrofit_savings.finance.investment import selected_options
from retrofit_savings.reporting.ascii_charts import percentage_bar, reduction_bar
from retrofit_savings.reporting.formatting import format_currency, format_number
from retrofit_savings.reporting.summary import generate_summary
from retrofit_savings.savings.weights import CATEGORY_WEIGHTS

# (label, InterventionSavings field) rows for the intervention table.
_INTERVENTION_ROWS = (
    ("Solar control glass", "solar_glass"),
    ("Reflective roof", "reflective_roof"),
    ("Cooling upgrade", "cooling_upgrade"),
    ("Exhaust fan sensors", "exhaust_fan_sensors"),
    ("LED relamping", "led_lights"),
    ("Lighting control", "lighting_control"),
    ("Pump upgrade", "pump_upgrade"),
    ("Water heater", "water_heater"),
    ("Building management system", "building_management_system"),
    ("Energy monitoring system", "energy_monitoring_system"),
)


def _selection_label(result: CalculationResult, field: str) -> str | None:
    """Return a short description of the selected branch, or None if unselected."""
    sel = result.interventions
    if field == "cooling_upgrade":
        return sel.cooling_upgrade.value if sel.has_cooling_upgrade else None
    if field == "lighting_control":
        return sel.lighting_control.value if sel.has_lighting_control else None
    if field == "pump_upgrade":
        return sel.pump_upgrade.value if sel.has_pump_upgrade else None
    if field == "water_heater":
        return "yes" if sel.water_heater_upgrade else None
    return "yes" if getattr(sel, field) else None


class TerminalRenderer:
    """Renders calculation results to the terminal using Rich."""

    def __init__(self, console: Console | None = None, currency: str = "Rp") -> None:
        self.console = console or Console()
        self.currency = currency

    def render(self, result: CalculationResult, show_details: bool = True) -> None:
        """Render the full calculation report to the terminal."""
        self._render_header(result)
        self._render_baseline(result)
        if show_details:
            self._render_interventions(result)
        self._render_impact(result)
        self._render_categories(result)
        self._render_summary(result)
        self._render_footer()

    def render_catalog(self, catalog: InvestmentCatalog) -> None:
        """Render the investment catalog as a table."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Option", style="bold", min_width=28)
        table.add_column("Key", style="dim")
        table.add_column(f"Cost ({self.currency})", justify="right", min_width=18)
        table.add_column("Source", justify="center")

        for option in InvestmentOption:
            if option in catalog.overridden:
                source = "[yellow]edited[/yellow]"
            elif option in GEOMETRY_DERIVED_OPTIONS:
                source = "[cyan]geometry[/cyan]"
            else:
                source = "[dim]default[/dim]"
            table.add_row(
                option.display_name,
                option.value,
                format_number(catalog.cost(option), 0),
                source,
            )

        self.console.print()
        self.console.print(Panel(table, title="[bold]INVESTMENT CATALOG[/bold]"))

    def render_category_weights(self) -> None:
        """Render the fixed baseline energy share of each device category."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Category", style="bold", min_width=18)
        table.add_column("Weight", justify="right")

        for category, weight in CATEGORY_WEIGHTS.items():
            table.add_row(category.display_name, f"{weight:.0%}")
        table.add_row("[bold]Total[/bold]", f"[bold]{sum(CATEGORY_WEIGHTS.values()):.0%}[/bold]")

        self.console.print()
        self.console.print(Panel(table, title="[bold]BASELINE ENERGY SPLIT[/bold]"))

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: CalculationResult) -> None:
        b = result.building
        header_text = Text()
        header_text.append("RETROFIT SAVINGS", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(f"{format_number(b.length, 1)} x {format_number(b.width, 1)} m")
        header_text.append(f" | {b.floors} floors ({b.height_class})", style="")
        header_text.append(f" | {b.roof_type.value} roof", style="")
        header_text.append(f" | {b.dominant_cooling_system.value}", style="dim")

        self.console.print()
        self.console.print(Panel(header_text, title="Retrofit Savings Report"))

    def _render_baseline(self, result: CalculationResult) -> None:
        table = Table(show_header=False, padding=(0, 2), box=None)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Building area", f"{format_number(result.building_area, 2)} m2")
        table.add_row("Roof area", f"{format_number(result.roof_area, 2)} m2")
        table.add_row("Window area", f"{format_number(result.window_area, 2)} m2")
        table.add_row("Annual energy", f"{format_number(result.annual_energy, 2)} MWh")
        table.add_row(
            "Tariff",
            f"{format_currency(result.tariffs.electricity_tariff, self.currency, 2)}/kWh",
        )
        table.add_row(
            "Emission factor",
            f"{format_number(result.tariffs.emission_factor, 2)} kgCO2e/kWh",
        )

        self.console.print()
        self.console.print(Panel(table, title="[bold]BASELINE[/bold]"))

    def _render_interventions(self, result: CalculationResult) -> None:
        """Render each intervention with its effective savings and charge."""
        self.console.print()
        self.console.print(Rule("[bold]INTERVENTIONS[/bold]"))

        charged = set(selected_options(result.interventions))
        charged_cost = {
            option: result.investments.cost(option) for option in charged
        }

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Intervention", style="bold", min_width=26)
        table.add_column("Selection", min_width=14)
        table.add_column("Savings", justify="right", min_width=8)

        for label, field in _INTERVENTION_ROWS:
            selection = _selection_label(result, field)
            if selection is None:
                continue
            pct = getattr(result.intervention_savings, field)
            color = "green" if pct > 0 else "red" if pct < 0 else "dim"
            table.add_row(
                label,
                selection,
                f"[{color}]{format_number(pct, 1)}%[/{color}]",
            )

        if table.row_count == 0:
            self.console.print("  [dim]No interventions selected.[/dim]")
        else:
            self.console.print(table)

        if charged_cost:
            costs = Table(show_header=True, header_style="bold", padding=(0, 1))
            costs.add_column("Charged option", min_width=28)
            costs.add_column(f"Investment ({self.currency})", justify="right", min_width=18)
            for option in InvestmentOption:
                if option in charged_cost:
                    costs.add_row(option.display_name, format_number(charged_cost[option], 0))
            self.console.print()
            self.console.print(costs)

    def _render_impact(self, result: CalculationResult) -> None:
        table = Table(show_header=False, padding=(0, 2), box=None)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Total savings", percentage_bar("", result.total_savings_percent, width=20))
        table.add_row("Energy savings", f"{format_number(result.energy_savings, 2)} MWh/yr")
        table.add_row("CO2 reduction", f"{format_number(result.co2_reduction, 2)} tCO2e/yr")
        table.add_row("Cost savings", f"{format_currency(result.cost_savings, self.currency)}/yr")
        table.add_row("Investment", format_currency(result.total_investment, self.currency))
        table.add_row("Payback period", f"{format_number(result.payback_period, 1)} years")

        self.console.print()
        self.console.print(Panel(table, title="[bold]IMPACT[/bold]", border_style="green"))

    def _render_categories(self, result: CalculationResult) -> None:
        """Render baseline vs. projected consumption per device category."""
        self.console.print()
        self.console.print(Rule("[bold]ENERGY BY DEVICE CATEGORY[/bold]"))

        breakdown = result.category_breakdown
        max_value = max((c.baseline_mwh for c in breakdown), default=0.0)

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Category", style="bold", min_width=16)
        table.add_column("Baseline", justify="right", min_width=10)
        table.add_column("Projected", justify="right", min_width=10)
        table.add_column("Reduction", justify="right", min_width=9)
        table.add_column("", min_width=30)

        for row in breakdown:
            reduction = (
                f"[green]{format_number(row.reduction_pct, 1)}%[/green]"
                if row.savings_mwh > 0
                else "[dim]-[/dim]"
            )
            table.add_row(
                row.category.display_name,
                format_number(row.baseline_mwh, 2),
                format_number(row.projected_mwh, 2),
                reduction,
                reduction_bar(row.baseline_mwh, row.projected_mwh, max_value),
            )

        self.console.print(table)
        self.console.print("  [dim]MWh/yr; [cyan]█[/cyan] projected, [green]▓[/green] saved[/dim]")

    def _render_summary(self, result: CalculationResult) -> None:
        self.console.print()
        self.console.print(
            Panel(
                generate_summary(result, self.currency),
                title="[bold]SUMMARY[/bold]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def _render_footer(self) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(f"  [dim]retrofit-savings v{__version__}[/dim]")
        self.console.print()
