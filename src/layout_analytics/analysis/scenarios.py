# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scenario table builder.

Expands a :class:`BaseMetrics` snapshot into the layout comparison rows
and the seasonal projection rows.  Layout variants are deterministic
perturbations of the baseline using fixed scale factors; they are not
the output of a live optimizer.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from layout_analytics.data.defaults import (
    LAYOUT_SCALE_FACTORS,
    SEASONAL_PROJECTED_ORDERS,
    SEASONAL_UPLIFTS,
)
from layout_analytics.data.models import (
    BaseMetrics,
    LayoutScenario,
    PeriodName,
    RankedLayout,
    SeasonalPeriod,
)


def improve(base_value: float, percent: float) -> int:
    """Apply a percentage uplift and round half up to an integer.

    ``improve(88, 15)`` -> ``101``.
    """
    return math.floor(base_value * (1 + percent / 100) + 0.5)


# ---------------------------------------------------------------------------
# Layout scenarios
# ---------------------------------------------------------------------------

def _scaled(base: BaseMetrics, row: Mapping[str, float], field: str) -> float:
    return getattr(base, field) * row.get(field, 1.0)


def build_layout_scenarios(
    base: BaseMetrics,
    factors: Mapping[str, Mapping[str, float]] | None = None,
) -> list[LayoutScenario]:
    """Return one :class:`LayoutScenario` per entry of the factor table.

    Rows come out in the table's declaration order.  A factor missing
    from a row defaults to 1.0 (the base value is kept).
    """
    table = LAYOUT_SCALE_FACTORS if factors is None else factors

    return [
        LayoutScenario(
            name=name,
            efficiency=_scaled(base, row, "efficiency"),
            distance=_scaled(base, row, "total_distance"),
            time=_scaled(base, row, "total_time"),
            cost_savings_per_store_per_day=_scaled(
                base, row, "cost_savings_per_store_per_day"
            ),
            carbon_reduction_percent=_scaled(base, row, "carbon_reduction_percent"),
        )
        for name, row in table.items()
    ]


def rank_layouts(scenarios: Sequence[LayoutScenario]) -> list[RankedLayout]:
    """Rank layouts by efficiency, highest first.

    The sort is stable, so equally efficient layouts keep table order.
    The input sequence is not modified.
    """
    ordered = sorted(scenarios, key=lambda s: s.efficiency, reverse=True)
    return [
        RankedLayout(rank=i, scenario=scenario)
        for i, scenario in enumerate(ordered, start=1)
    ]


# ---------------------------------------------------------------------------
# Seasonal periods
# ---------------------------------------------------------------------------

def build_seasonal_periods(
    base: BaseMetrics,
    uplifts: Mapping[str, tuple[float, float]] | None = None,
) -> list[SeasonalPeriod]:
    """Project efficiency and savings for each seasonal window.

    *uplifts* maps a period name to ``(efficiency_pct, savings_pct)``.
    Projected orders are fixed per period and independent of *base*.
    """
    table = SEASONAL_UPLIFTS if uplifts is None else uplifts

    periods: list[SeasonalPeriod] = []
    for name, (efficiency_pct, savings_pct) in table.items():
        period = PeriodName(name)
        periods.append(
            SeasonalPeriod(
                name=period,
                efficiency=improve(base.efficiency, efficiency_pct),
                projected_orders=SEASONAL_PROJECTED_ORDERS[period.value],
                cost_savings_per_store_per_day=improve(
                    base.cost_savings_per_store_per_day, savings_pct
                ),
            )
        )
    return periods
