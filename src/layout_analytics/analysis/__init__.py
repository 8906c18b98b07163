# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Normalizer, scenario builders, aggregator and the engine that runs them."""

from layout_analytics.analysis.normalizer import normalize
from layout_analytics.analysis.scenarios import (
    build_layout_scenarios,
    build_seasonal_periods,
    improve,
    rank_layouts,
)
from layout_analytics.analysis.aggregator import (
    build_carbon_breakdown,
    compute_key_metrics,
    compute_roi,
    select_best_layout,
)
from layout_analytics.analysis.engine import AnalyticsEngine

__all__ = [
    "AnalyticsEngine",
    "build_carbon_breakdown",
    "build_layout_scenarios",
    "build_seasonal_periods",
    "compute_key_metrics",
    "compute_roi",
    "improve",
    "normalize",
    "rank_layouts",
    "select_best_layout",
]
