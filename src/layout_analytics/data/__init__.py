# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and constant tables."""

from layout_analytics.data.models import (
    AnalyticsReport,
    BaseMetrics,
    CarbonSlice,
    KeyMetrics,
    LayoutScenario,
    LiveMetrics,
    PeriodName,
    RankedLayout,
    ReportError,
    ROIProjection,
    RolloutImpact,
    SeasonalPeriod,
)

__all__ = [
    "AnalyticsReport",
    "BaseMetrics",
    "CarbonSlice",
    "KeyMetrics",
    "LayoutScenario",
    "LiveMetrics",
    "PeriodName",
    "RankedLayout",
    "ReportError",
    "ROIProjection",
    "RolloutImpact",
    "SeasonalPeriod",
]
