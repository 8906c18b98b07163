# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the layout analytics test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from layout_analytics.analysis.engine import AnalyticsEngine
from layout_analytics.analysis.normalizer import normalize
from layout_analytics.analysis.scenarios import build_layout_scenarios
from layout_analytics.data.models import AnalyticsReport, BaseMetrics, LayoutScenario


@pytest.fixture()
def default_base() -> BaseMetrics:
    """BaseMetrics built entirely from the fallback defaults."""
    return normalize(None)


@pytest.fixture()
def default_layouts(default_base: BaseMetrics) -> list[LayoutScenario]:
    """The three built-in layout scenarios for the default base."""
    return build_layout_scenarios(default_base)


@pytest.fixture()
def default_report() -> AnalyticsReport:
    """A full report for default inputs (4,700 stores, $50k per store)."""
    return AnalyticsEngine().evaluate()


@pytest.fixture()
def make_scenario() -> Callable[..., LayoutScenario]:
    """Factory for ad-hoc layout scenarios with fixed distance, time and carbon."""

    def _make(name: str, savings: float, efficiency: float = 80.0) -> LayoutScenario:
        return LayoutScenario(
            name=name,
            efficiency=efficiency,
            distance=2000.0,
            time=30.0,
            cost_savings_per_store_per_day=savings,
            carbon_reduction_percent=40.0,
        )

    return _make
