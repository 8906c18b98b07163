# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Orchestrator for a single analytics evaluation.

Runs normalizer -> scenario builders -> aggregator and packs the results
into an :class:`AnalyticsReport`.  Domain errors from the aggregator are
recorded on the report instead of propagating, so the presentation layer
can show a fallback for the missing figure.
"""

from __future__ import annotations

import logging

from layout_analytics.analysis.aggregator import (
    build_carbon_breakdown,
    compute_key_metrics,
    compute_roi,
    select_best_layout,
)
from layout_analytics.analysis.normalizer import LiveInput, normalize
from layout_analytics.analysis.scenarios import (
    build_layout_scenarios,
    build_seasonal_periods,
    rank_layouts,
)
from layout_analytics.config import EngineConfig
from layout_analytics.data.models import AnalyticsReport, ReportError
from layout_analytics.errors import AnalyticsError
from layout_analytics.reporting.insights import generate_insights

logger = logging.getLogger(__name__)


class AnalyticsEngine:
    """Derives the full analytics bundle from live metrics.

    The engine holds only its configuration snapshot and never mutates
    it, so one instance can serve concurrent evaluations.

    Usage::

        engine = AnalyticsEngine()
        report = engine.evaluate({"efficiency": 91.5}, store_count=1200)
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def evaluate(
        self,
        live_metrics: LiveInput = None,
        *,
        store_count: int | None = None,
        daily_orders: int | None = None,
        per_store_implementation_cost: float | None = None,
    ) -> AnalyticsReport:
        """Run one evaluation.

        Args:
            live_metrics: Optional partial live measurements.
            store_count: Overrides ``config.store_count``.
            daily_orders: Overrides ``config.daily_orders``.
            per_store_implementation_cost: Overrides the configured cost.

        Returns:
            An :class:`AnalyticsReport`.  ``roi`` and ``rollout`` are
            ``None`` when their figure is undefined; the reason is in
            ``errors``.
        """
        cfg = self.config
        stores = cfg.store_count if store_count is None else store_count
        orders = cfg.daily_orders if daily_orders is None else daily_orders
        unit_cost = (
            cfg.per_store_implementation_cost
            if per_store_implementation_cost is None
            else per_store_implementation_cost
        )

        base = normalize(live_metrics)
        layouts = build_layout_scenarios(base, cfg.layout_factor_table())
        seasonal = build_seasonal_periods(base, cfg.seasonal_uplift_table())
        logger.debug("Base metrics: %s", base)

        errors: list[ReportError] = []

        roi = None
        try:
            roi = compute_roi(layouts, stores, unit_cost)
        except AnalyticsError as exc:
            logger.warning("ROI projection unavailable: %s", exc)
            errors.append(ReportError(code=exc.code, message=str(exc)))

        rollout = None
        try:
            rollout = select_best_layout(layouts, stores)
        except AnalyticsError as exc:
            logger.warning("Rollout impact unavailable: %s", exc)
            errors.append(ReportError(code=exc.code, message=str(exc)))

        report = AnalyticsReport(
            base=base,
            layouts=layouts,
            rankings=rank_layouts(layouts),
            seasonal=seasonal,
            roi=roi,
            rollout=rollout,
            carbon_breakdown=build_carbon_breakdown(base),
            key_metrics=compute_key_metrics(base, layouts, stores, orders),
            errors=errors,
        )
        report.insights = generate_insights(report)

        logger.info(
            "Evaluated %d layouts and %d seasonal periods for %d stores (%d errors)",
            len(layouts), len(seasonal), stores, len(errors),
        )
        return report
