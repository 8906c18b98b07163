# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the layout analytics engine.

This module defines the data contract shared by the normalizer, the
scenario builders, the aggregator, and the reporting and CLI layers.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, StrictFloat, computed_field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PeriodName(str, Enum):
    """Calendar windows with a fixed seasonal uplift."""

    normal = "Normal"
    black_friday = "Black Friday"
    christmas = "Christmas"
    new_year = "New Year"

    @property
    def is_holiday(self) -> bool:
        return self is not PeriodName.normal


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class LiveMetrics(BaseModel):
    """Partial measurement record from an external simulation feed.

    Every field is optional.  The feed uses camelCase names; the
    snake_case field names are accepted as well.  Values must be real
    numbers; numeric strings and bools are rejected, as in the normalizer.
    """

    model_config = {"populate_by_name": True, "extra": "ignore"}

    efficiency: Optional[StrictFloat] = Field(
        default=None, description="Picking efficiency (%)"
    )
    cost_savings: Optional[StrictFloat] = Field(
        default=None, alias="costSavings",
        description="Cost savings per store per day (USD)",
    )
    carbon_reduction: Optional[StrictFloat] = Field(
        default=None, alias="carbonReduction",
        description="Carbon reduction (%)",
    )
    total_distance: Optional[StrictFloat] = Field(
        default=None, alias="totalDistance", description="Total travel distance"
    )
    total_time: Optional[StrictFloat] = Field(
        default=None, alias="totalTime", description="Total fulfilment time"
    )


class BaseMetrics(BaseModel):
    """Canonical measurement snapshot that seeds every derived figure.

    Percentages are expected in [0, 100] and amounts to be non-negative,
    but nothing is clamped or rejected here: range checks belong to
    whoever produces the data.
    """

    model_config = {"frozen": True}

    efficiency: float = Field(..., description="Efficiency (%)")
    cost_savings_per_store_per_day: float = Field(
        ..., description="Cost savings per store per day (USD)"
    )
    carbon_reduction_percent: float = Field(..., description="Carbon reduction (%)")
    total_distance: float = Field(..., description="Total travel distance")
    total_time: float = Field(..., description="Total fulfilment time")


# ---------------------------------------------------------------------------
# Scenario tables
# ---------------------------------------------------------------------------

class LayoutScenario(BaseModel):
    """One candidate warehouse layout with its performance profile."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Layout name, unique within a table")
    efficiency: float = Field(..., description="Efficiency (%)")
    distance: float = Field(..., description="Total travel distance")
    time: float = Field(..., description="Total fulfilment time")
    cost_savings_per_store_per_day: float = Field(
        ..., description="Cost savings per store per day (USD)"
    )
    carbon_reduction_percent: float = Field(..., description="Carbon reduction (%)")


class RankedLayout(BaseModel):
    """A layout scenario with its efficiency rank (1 = most efficient)."""

    model_config = {"frozen": True}

    rank: int = Field(..., ge=1)
    scenario: LayoutScenario


class SeasonalPeriod(BaseModel):
    """Projected performance for a seasonal demand window."""

    model_config = {"frozen": True}

    name: PeriodName
    efficiency: float = Field(..., description="Projected efficiency (%)")
    projected_orders: int = Field(
        ..., ge=0, description="Projected orders per store per day"
    )
    cost_savings_per_store_per_day: float = Field(
        ..., description="Projected cost savings per store per day (USD)"
    )


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

class ROIProjection(BaseModel):
    """Annualized return on a fleet-wide rollout."""

    model_config = {"frozen": True}

    daily_savings_per_store: float
    annual_savings_per_store: float
    total_annual_savings: float
    implementation_cost_total: float
    roi_percent: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_annual_benefit(self) -> float:
        """First-year savings minus the implementation cost."""
        return self.total_annual_savings - self.implementation_cost_total


class RolloutImpact(BaseModel):
    """Projected outcome of deploying the best layout to every store."""

    model_config = {"frozen": True}

    best_layout: LayoutScenario
    potential_annual_savings: float
    potential_carbon_reduction_percent: float


class CarbonSlice(BaseModel):
    """One source of carbon reduction and its share of the total."""

    model_config = {"frozen": True}

    name: str
    share_percent: float = Field(..., description="Share of the total reduction (%)")
    reduction_points: float = Field(
        ..., description="Percentage points of carbon reduction from this source"
    )


class KeyMetrics(BaseModel):
    """Headline figures shown above the detailed tables."""

    model_config = {"frozen": True}

    average_efficiency: float
    carbon_reduction_percent: float
    store_count: int
    daily_orders: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def fleet_daily_orders(self) -> int:
        """Orders per day across the whole fleet."""
        return self.daily_orders * self.store_count


class ReportError(BaseModel):
    """An error returned to the caller in place of a figure."""

    code: str
    message: str


class AnalyticsReport(BaseModel):
    """Output bundle of a single engine evaluation."""

    base: BaseMetrics
    layouts: list[LayoutScenario]
    rankings: list[RankedLayout]
    seasonal: list[SeasonalPeriod]
    roi: Optional[ROIProjection] = None
    rollout: Optional[RolloutImpact] = None
    carbon_breakdown: list[CarbonSlice] = Field(default_factory=list)
    key_metrics: KeyMetrics
    insights: list[str] = Field(default_factory=list)
    errors: list[ReportError] = Field(default_factory=list)

    def error_for(self, code: str) -> Optional[ReportError]:
        """Return the first recorded error with *code*, if any."""
        for err in self.errors:
            if err.code == code:
                return err
        return None
