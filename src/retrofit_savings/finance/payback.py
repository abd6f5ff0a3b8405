"""Simple payback period."""

from __future__ import annotations


def payback_period(total_investment: float, annual_cost_savings: float) -> float:
    """Years needed for annual savings to repay the investment.

    Returns 0.0 when nothing is saved, so the caller never sees an
    infinite or negative payback.
    """
    if annual_cost_savings <= 0:
        return 0.0
    return total_investment / annual_cost_savings
