# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Layout Analytics - warehouse layout ROI, seasonal and carbon projections."""

__version__ = "0.1.0"

from layout_analytics.data.models import (
    AnalyticsReport,
    BaseMetrics,
    LayoutScenario,
    LiveMetrics,
    PeriodName,
    ROIProjection,
    RolloutImpact,
    SeasonalPeriod,
)
from layout_analytics.errors import AnalyticsError, EmptyScenarioSet, RoiUndefined
from layout_analytics.config import EngineConfig, load_config
from layout_analytics.analysis.normalizer import normalize
from layout_analytics.analysis.scenarios import (
    build_layout_scenarios,
    build_seasonal_periods,
    rank_layouts,
)
from layout_analytics.analysis.aggregator import compute_roi, select_best_layout
from layout_analytics.analysis.engine import AnalyticsEngine

__all__ = [
    "AnalyticsEngine",
    "AnalyticsError",
    "AnalyticsReport",
    "BaseMetrics",
    "EmptyScenarioSet",
    "EngineConfig",
    "LayoutScenario",
    "LiveMetrics",
    "PeriodName",
    "ROIProjection",
    "RoiUndefined",
    "RolloutImpact",
    "SeasonalPeriod",
    "build_layout_scenarios",
    "build_seasonal_periods",
    "compute_roi",
    "load_config",
    "normalize",
    "rank_layouts",
    "select_best_layout",
]
