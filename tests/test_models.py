# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from layout_analytics.analysis.normalizer import normalize
from layout_analytics.data.models import (
    BaseMetrics,
    KeyMetrics,
    LiveMetrics,
    PeriodName,
    ROIProjection,
)


class TestBaseMetrics:
    """Tests for BaseMetrics."""

    def test_frozen(self, default_base: BaseMetrics):
        with pytest.raises(ValidationError):
            default_base.efficiency = 10.0

    def test_out_of_range_values_accepted(self):
        base = BaseMetrics(
            efficiency=140.0,
            cost_savings_per_store_per_day=-20.0,
            carbon_reduction_percent=-5.0,
            total_distance=0.0,
            total_time=0.0,
        )
        assert base.cost_savings_per_store_per_day == -20.0


class TestLiveMetrics:
    """Tests for LiveMetrics aliases."""

    def test_camel_case_aliases(self):
        live = LiveMetrics.model_validate({"costSavings": 900, "totalTime": 12})
        assert live.cost_savings == 900
        assert live.total_time == 12
        assert live.efficiency is None

    def test_field_names_accepted(self):
        live = LiveMetrics(carbon_reduction=30.0)
        assert live.carbon_reduction == 30.0

    def test_unknown_keys_ignored(self):
        live = LiveMetrics.model_validate({"efficiency": 90, "robotCount": 12})
        assert live.efficiency == 90

    @pytest.mark.parametrize("value", ["92", True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            LiveMetrics.model_validate({"efficiency": value})

    def test_normalizer_and_model_agree_on_strings(self):
        with pytest.raises(ValidationError):
            LiveMetrics(efficiency="92")
        assert normalize({"efficiency": "92"}).efficiency == 88


class TestPeriodName:
    """Tests for the seasonal period enum."""

    def test_values(self):
        assert [p.value for p in PeriodName] == [
            "Normal", "Black Friday", "Christmas", "New Year",
        ]

    def test_is_holiday(self):
        assert PeriodName.normal.is_holiday is False
        assert PeriodName.black_friday.is_holiday is True


class TestComputedFields:
    """Tests for computed fields on aggregate models."""

    def test_net_annual_benefit(self):
        roi = ROIProjection(
            daily_savings_per_store=10.0,
            annual_savings_per_store=3650.0,
            total_annual_savings=36500.0,
            implementation_cost_total=10000.0,
            roi_percent=265.0,
        )
        assert roi.net_annual_benefit == 26500.0

    def test_fleet_daily_orders(self):
        km = KeyMetrics(
            average_efficiency=88.0,
            carbon_reduction_percent=48.0,
            store_count=4700,
            daily_orders=1000,
        )
        assert km.fleet_daily_orders == 4_700_000
        assert km.model_dump()["fleet_daily_orders"] == 4_700_000
