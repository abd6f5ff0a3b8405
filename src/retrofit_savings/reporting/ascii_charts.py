# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as bar charts and
gauges in the terminal via the Rich library.
"""

from __future__ import annotations


def reduction_bar(
    baseline: float,
    projected: float,
    max_value: float,
    width: int = 30,
) -> str:
    """Baseline bar with the saved portion highlighted.

    The projected consumption is drawn solid, the saved share in green
    shade and the remaining width empty::

        [cyan]██████████[/][green]▓▓▓[/]░░░░░
    """
    if max_value <= 0:
        return "[dim]no data[/]"
    projected_cells = int(max(0.0, min(projected / max_value, 1.0)) * width)
    baseline_cells = int(max(0.0, min(baseline / max_value, 1.0)) * width)
    saved_cells = max(baseline_cells - projected_cells, 0)
    empty_cells = width - projected_cells - saved_cells
    return (
        f"[cyan]{'█' * projected_cells}[/]"
        f"[green]{'▓' * saved_cells}[/]"
        f"{'░' * empty_cells}"
    )


def percentage_bar(
    label: str,
    pct: float,
    width: int = 20,
) -> str:
    """Simple percentage bar: [label] ████░░░░ 45%"""
    clamped = max(0.0, min(100.0, pct))
    filled = int(clamped / 100 * width)
    empty = width - filled

    if clamped >= 30:
        color = "green"
    elif clamped >= 10:
        color = "yellow"
    else:
        color = "red"

    bar = "█" * filled + "░" * empty
    return f"{label} [{color}]{bar}[/] {pct:.1f}%"
