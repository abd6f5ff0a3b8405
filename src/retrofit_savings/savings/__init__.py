# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Savings engine for the retrofit calculator."""

from retrofit_savings.savings.engine import SavingsEngine, compute

__all__ = ["SavingsEngine", "compute"]
