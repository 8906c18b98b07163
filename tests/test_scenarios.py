# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the layout and seasonal scenario builders."""

from __future__ import annotations

import pytest

from layout_analytics.analysis.normalizer import normalize
from layout_analytics.analysis.scenarios import (
    build_layout_scenarios,
    build_seasonal_periods,
    improve,
    rank_layouts,
)
from layout_analytics.data.defaults import LAYOUT_SCALE_FACTORS
from layout_analytics.data.models import BaseMetrics, LayoutScenario, PeriodName


def _base(efficiency: float = 88.0, savings: float = 1500.0) -> BaseMetrics:
    return BaseMetrics(
        efficiency=efficiency,
        cost_savings_per_store_per_day=savings,
        carbon_reduction_percent=48.0,
        total_distance=2200.0,
        total_time=33.0,
    )


class TestImprove:
    """Tests for the uplift rounding helper."""

    def test_zero_percent(self):
        assert improve(88, 0) == 88

    def test_rounds_to_nearest(self):
        assert improve(88, 15) == 101  # 101.2
        assert improve(88, 12) == 99   # 98.56

    def test_half_rounds_up(self):
        assert improve(2.5, 0) == 3
        assert improve(0.5, 0) == 1

    def test_returns_int(self):
        assert isinstance(improve(1500, 25), int)


class TestLayoutScenarios:
    """Tests for build_layout_scenarios()."""

    def test_three_rows_in_order(self, default_layouts: list[LayoutScenario]):
        assert [s.name for s in default_layouts] == ["Layout 1", "Layout 2", "Layout 3"]

    def test_cost_savings(self, default_layouts: list[LayoutScenario]):
        savings = [s.cost_savings_per_store_per_day for s in default_layouts]
        assert savings == pytest.approx([1500, 1350, 1200])

    def test_layout_1_is_base(self, default_layouts, default_base):
        first = default_layouts[0]
        assert first.efficiency == default_base.efficiency
        assert first.distance == default_base.total_distance
        assert first.time == default_base.total_time
        assert first.carbon_reduction_percent == default_base.carbon_reduction_percent

    def test_layout_1_equals_non_round_base(self):
        base = normalize({
            "efficiency": 87.654,
            "costSavings": 1500.456,
            "carbonReduction": 48.125,
            "totalDistance": 2201.987,
            "totalTime": 33.333,
        })
        first = build_layout_scenarios(base)[0]
        assert first.efficiency == 87.654
        assert first.cost_savings_per_store_per_day == 1500.456
        assert first.carbon_reduction_percent == 48.125
        assert first.distance == 2201.987
        assert first.time == 33.333

    def test_scaled_values_unrounded(self):
        base = normalize({"costSavings": 1500.456})
        second = build_layout_scenarios(base)[1]
        assert second.cost_savings_per_store_per_day == 1500.456 * 0.90

    def test_scaled_fields(self, default_layouts: list[LayoutScenario]):
        second, third = default_layouts[1], default_layouts[2]
        assert second.efficiency == pytest.approx(83.6)
        assert second.distance == pytest.approx(2299)
        assert second.time == pytest.approx(34.98)
        assert second.carbon_reduction_percent == pytest.approx(44)
        assert third.efficiency == pytest.approx(79.2)
        assert third.distance == pytest.approx(2398)
        assert third.time == pytest.approx(36.96)
        assert third.carbon_reduction_percent == pytest.approx(40)

    def test_unique_names(self, default_layouts: list[LayoutScenario]):
        names = [s.name for s in default_layouts]
        assert len(names) == len(set(names))

    def test_custom_factor_table(self, default_base):
        table = {
            "Compact": {"cost_savings_per_store_per_day": 1.1},
            "Wide": {"efficiency": 0.5},
        }
        rows = build_layout_scenarios(default_base, table)
        assert [r.name for r in rows] == ["Compact", "Wide"]
        assert rows[0].cost_savings_per_store_per_day == pytest.approx(1650)
        assert rows[0].efficiency == 88
        assert rows[1].efficiency == 44

    def test_default_table_not_mutated(self, default_base):
        before = {k: dict(v) for k, v in LAYOUT_SCALE_FACTORS.items()}
        build_layout_scenarios(default_base)
        assert LAYOUT_SCALE_FACTORS == before


class TestRankLayouts:
    """Tests for rank_layouts()."""

    def test_sorted_by_efficiency(self, default_layouts):
        ranked = rank_layouts(default_layouts)
        efficiencies = [r.scenario.efficiency for r in ranked]
        assert efficiencies == sorted(efficiencies, reverse=True)

    def test_sequential_ranks(self, default_layouts):
        ranks = [r.rank for r in rank_layouts(default_layouts)]
        assert ranks == list(range(1, len(default_layouts) + 1))

    def test_input_order_untouched(self, make_scenario):
        rows = [make_scenario("A", 100, 70), make_scenario("B", 100, 95)]
        ranked = rank_layouts(rows)
        assert [r.scenario.name for r in ranked] == ["B", "A"]
        assert [s.name for s in rows] == ["A", "B"]

    def test_ties_keep_table_order(self, make_scenario):
        rows = [make_scenario("A", 100, 90), make_scenario("B", 100, 90)]
        assert [r.scenario.name for r in rank_layouts(rows)] == ["A", "B"]

    def test_empty(self):
        assert rank_layouts([]) == []


class TestSeasonalPeriods:
    """Tests for build_seasonal_periods()."""

    def test_four_periods_in_order(self, default_base):
        periods = build_seasonal_periods(default_base)
        assert [p.name for p in periods] == [
            PeriodName.normal,
            PeriodName.black_friday,
            PeriodName.christmas,
            PeriodName.new_year,
        ]

    def test_default_values(self, default_base):
        periods = {p.name: p for p in build_seasonal_periods(default_base)}
        assert periods[PeriodName.normal].efficiency == 88
        assert periods[PeriodName.normal].cost_savings_per_store_per_day == 1500
        assert periods[PeriodName.black_friday].efficiency == 101
        assert periods[PeriodName.black_friday].cost_savings_per_store_per_day == 1875
        assert periods[PeriodName.christmas].efficiency == 99
        assert periods[PeriodName.christmas].cost_savings_per_store_per_day == 1800
        assert periods[PeriodName.new_year].efficiency == 97
        assert periods[PeriodName.new_year].cost_savings_per_store_per_day == 1725

    def test_projected_orders_fixed(self):
        for base in (_base(), _base(efficiency=10, savings=5)):
            orders = [p.projected_orders for p in build_seasonal_periods(base)]
            assert orders == [1000, 2500, 2000, 1200]

    @pytest.mark.parametrize("efficiency", [0, 0.5, 1, 12.3, 33.3, 49.5, 50, 77.7, 88, 99.4, 100])
    @pytest.mark.parametrize("savings", [0, 1, 999.5, 1500, 25_000])
    def test_monotonic_uplift(self, efficiency, savings):
        periods = build_seasonal_periods(_base(efficiency, savings))
        normal = periods[0]
        for holiday in periods[1:]:
            assert holiday.efficiency >= normal.efficiency
            assert holiday.cost_savings_per_store_per_day >= normal.cost_savings_per_store_per_day

    def test_custom_uplift_table(self, default_base):
        periods = build_seasonal_periods(
            default_base, {"Normal": (0, 0), "Black Friday": (50, 100)}
        )
        assert len(periods) == 2
        assert periods[1].efficiency == 132
        assert periods[1].cost_savings_per_store_per_day == 3000

    def test_unknown_period_rejected(self, default_base):
        with pytest.raises(ValueError):
            build_seasonal_periods(default_base, {"Easter": (5, 5)})
