# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Aggregation of the scenario table into fleet-level figures.

Every function here is a pure reduction over its explicit arguments.
Conditions that make a figure meaningless raise an
:class:`~layout_analytics.errors.AnalyticsError` subclass instead of
returning ``inf`` or ``nan``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from layout_analytics.data.defaults import (
    CARBON_SOURCE_SHARES,
    DAYS_PER_YEAR,
    PER_STORE_IMPLEMENTATION_COST,
)
from layout_analytics.data.models import (
    BaseMetrics,
    CarbonSlice,
    KeyMetrics,
    LayoutScenario,
    ROIProjection,
    RolloutImpact,
)
from layout_analytics.errors import EmptyScenarioSet, RoiUndefined


def _check_store_count(store_count: int) -> None:
    if store_count <= 0:
        raise ValueError(f"store_count must be positive, got {store_count}")


# ---------------------------------------------------------------------------
# ROI projection
# ---------------------------------------------------------------------------

def compute_roi(
    scenarios: Sequence[LayoutScenario],
    store_count: int,
    per_store_implementation_cost: float = PER_STORE_IMPLEMENTATION_COST,
) -> ROIProjection:
    """Project annual savings and ROI for a fleet-wide rollout.

    Daily savings per store is the plain mean of the scenario savings;
    each scenario counts once.  ROI compares one year of fleet savings
    with the one-off implementation cost.

    Raises:
        EmptyScenarioSet: *scenarios* is empty.
        RoiUndefined: the implementation cost total is zero.
        ValueError: *store_count* is not positive or the per-store cost
            is negative.
    """
    if not scenarios:
        raise EmptyScenarioSet()
    _check_store_count(store_count)
    if per_store_implementation_cost < 0:
        raise ValueError(
            "per_store_implementation_cost must not be negative, "
            f"got {per_store_implementation_cost}"
        )

    daily = sum(s.cost_savings_per_store_per_day for s in scenarios) / len(scenarios)
    annual = daily * DAYS_PER_YEAR
    total = annual * store_count
    implementation = store_count * per_store_implementation_cost

    if implementation == 0:
        raise RoiUndefined()

    roi = (total - implementation) / implementation * 100

    return ROIProjection(
        daily_savings_per_store=daily,
        annual_savings_per_store=annual,
        total_annual_savings=total,
        implementation_cost_total=implementation,
        roi_percent=roi,
    )


# ---------------------------------------------------------------------------
# Best layout
# ---------------------------------------------------------------------------

def select_best_layout(
    scenarios: Sequence[LayoutScenario],
    store_count: int,
) -> RolloutImpact:
    """Pick the layout with the highest daily savings per store.

    Ties go to the layout that appears first in *scenarios*.

    Raises:
        EmptyScenarioSet: *scenarios* is empty.
    """
    if not scenarios:
        raise EmptyScenarioSet()

    best = scenarios[0]
    for scenario in scenarios[1:]:
        if scenario.cost_savings_per_store_per_day > best.cost_savings_per_store_per_day:
            best = scenario

    return RolloutImpact(
        best_layout=best,
        potential_annual_savings=(
            best.cost_savings_per_store_per_day * store_count * DAYS_PER_YEAR
        ),
        potential_carbon_reduction_percent=best.carbon_reduction_percent,
    )


# ---------------------------------------------------------------------------
# Carbon breakdown and headline metrics
# ---------------------------------------------------------------------------

def build_carbon_breakdown(
    base: BaseMetrics,
    shares: Mapping[str, float] | None = None,
) -> list[CarbonSlice]:
    """Split the base carbon reduction across its contributing sources."""
    table = CARBON_SOURCE_SHARES if shares is None else shares
    return [
        CarbonSlice(
            name=name,
            share_percent=share,
            reduction_points=round(base.carbon_reduction_percent * share / 100, 2),
        )
        for name, share in table.items()
    ]


def compute_key_metrics(
    base: BaseMetrics,
    scenarios: Sequence[LayoutScenario],
    store_count: int,
    daily_orders: int,
) -> KeyMetrics:
    """Headline figures: average layout efficiency, carbon, fleet orders.

    With no scenarios the average efficiency falls back to the base value.
    """
    if scenarios:
        avg_efficiency = sum(s.efficiency for s in scenarios) / len(scenarios)
    else:
        avg_efficiency = base.efficiency

    return KeyMetrics(
        average_efficiency=round(avg_efficiency, 2),
        carbon_reduction_percent=base.carbon_reduction_percent,
        store_count=store_count,
        daily_orders=daily_orders,
    )
