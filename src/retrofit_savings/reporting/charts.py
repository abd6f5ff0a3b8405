"""Matplotlib chart generators for retrofit calculation reports.

This module provides a ``ChartGenerator`` class that turns a
``CalculationResult`` into Matplotlib figures suitable for embedding in a
ReportLab PDF or saving as standalone PNG images.

The Agg (Anti-Grain Geometry) backend is selected unconditionally so that
chart rendering works in headless / server environments without a display.
"""

from __future__ import annotations

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from retrofit_savings.data.models import CalculationResult  # noqa: E402
from retrofit_savings.reporting.formatting import format_number  # noqa: E402

# ---------------------------------------------------------------------------
# Style / palette constants
# ---------------------------------------------------------------------------

_STYLE_CANDIDATES = ["seaborn-v0_8-whitegrid", "seaborn-whitegrid"]

_BLUE = "#2196F3"
_GREEN = "#4CAF50"
_RED = "#F44336"
_GREY = "#9E9E9E"

_DPI = 150

CHART_NAMES = ("category_comparison", "intervention_savings")


def _apply_style() -> None:
    """Apply the best available Matplotlib style."""
    for style in _STYLE_CANDIDATES:
        if style in plt.style.available:
            plt.style.use(style)
            return


_apply_style()


# ---------------------------------------------------------------------------
# ChartGenerator
# ---------------------------------------------------------------------------


class ChartGenerator:
    """Generate the charts of a retrofit calculation report.

    Each public method returns a :class:`matplotlib.figure.Figure`.

    Parameters
    ----------
    result:
        A ``CalculationResult`` produced by the savings engine.
    """

    def __init__(self, result: CalculationResult) -> None:
        self.result = result

    # -- 1. Baseline vs. projected consumption ---------------------------

    def category_comparison(self) -> Figure:
        """Grouped bars of baseline and projected energy per device category."""
        breakdown = self.result.category_breakdown
        labels = [row.category.display_name for row in breakdown]
        baseline = [row.baseline_mwh for row in breakdown]
        projected = [row.projected_mwh for row in breakdown]

        x = np.arange(len(labels))
        width = 0.38

        fig, ax = plt.subplots(figsize=(10, 6), dpi=_DPI)
        ax.bar(x - width / 2, baseline, width, label="Baseline consumption", color=_BLUE)
        bars = ax.bar(
            x + width / 2, projected, width, label="Projected consumption", color=_GREEN
        )

        # Annotate categories that actually receive savings.
        for bar, row in zip(bars, breakdown):
            if row.savings_mwh > 0:
                ax.text(
                    bar.get_x() + bar.get_width() / 2,
                    bar.get_height(),
                    f"-{format_number(row.reduction_pct, 1)}%",
                    ha="center",
                    va="bottom",
                    fontsize=9,
                    fontweight="bold",
                    color=_GREEN,
                )

        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=20, ha="right")
        ax.set_ylabel("MWh/yr", fontsize=12)
        ax.set_title(
            "Energy Consumption by Device Category",
            fontsize=16,
            fontweight="bold",
        )
        ax.legend()

        top = max(baseline, default=0.0)
        if top > 0:
            ax.set_ylim(0, top * 1.12)

        fig.tight_layout()
        return fig

    # -- 2. Effective savings per intervention ---------------------------

    def intervention_savings(self) -> Figure:
        """Horizontal bars of each intervention's effective savings percentage."""
        savings = self.result.intervention_savings
        items = [
            (name, getattr(savings, name))
            for name in type(savings).model_fields
            if getattr(savings, name) != 0
        ]
        if not items:
            items = [("none selected", 0.0)]

        labels = [name.replace("_", " ") for name, _ in items]
        values = [pct for _, pct in items]
        colors = [_GREEN if v > 0 else _RED if v < 0 else _GREY for v in values]

        fig, ax = plt.subplots(figsize=(10, 6), dpi=_DPI)
        y = np.arange(len(labels))
        ax.barh(y, values, color=colors, edgecolor="white")
        ax.set_yticks(y)
        ax.set_yticklabels(labels)
        ax.invert_yaxis()

        for pos, value in zip(y, values):
            ax.text(value, pos, f" {format_number(value, 1)}%", va="center", fontsize=10)

        ax.set_xlabel("Share of annual energy saved (%)", fontsize=12)
        ax.set_title(
            f"Effective Savings per Intervention "
            f"(total {format_number(self.result.total_savings_percent, 1)}%)",
            fontsize=16,
            fontweight="bold",
        )

        fig.tight_layout()
        return fig

    # -- Convenience methods ----------------------------------------------

    def generate_all(self) -> dict[str, Figure]:
        """Generate all charts and return as a name -> figure dict."""
        return {
            "category_comparison": self.category_comparison(),
            "intervention_savings": self.intervention_savings(),
        }

    def save(self, name: str, path: str) -> str:
        """Save the chart called *name* to *path* and return the absolute path."""
        if name not in CHART_NAMES:
            raise ValueError(f"Unknown chart {name!r}. Available: {', '.join(CHART_NAMES)}")
        fig = getattr(self, name)()
        fig.savefig(path, dpi=_DPI, bbox_inches="tight", facecolor="white")
        plt.close(fig)
        return os.path.abspath(path)

    def save_all(self, output_dir: str) -> dict[str, str]:
        """Save all charts as PNG files.

        Parameters
        ----------
        output_dir:
            Directory where PNG files will be written. Created if it does
            not already exist.

        Returns
        -------
        dict[str, str]
            Mapping of chart name to the absolute file path of the saved PNG.
        """
        os.makedirs(output_dir, exist_ok=True)
        charts = self.generate_all()
        paths: dict[str, str] = {}
        for name, fig in charts.items():
            filepath = os.path.join(output_dir, f"{name}.png")
            fig.savefig(filepath, dpi=_DPI, bbox_inches="tight", facecolor="white")
            plt.close(fig)
            paths[name] = os.path.abspath(filepath)
        return paths
