# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Metrics normalizer.

Turns an optional, possibly partial live-metrics record into a complete
:class:`BaseMetrics` snapshot.  Missing or unusable fields fall back to
the constants in :mod:`layout_analytics.data.defaults`.  The function is
total: it never raises on bad input and never range-checks values.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Union

from layout_analytics.data.defaults import DEFAULT_BASE_METRICS
from layout_analytics.data.models import BaseMetrics, LiveMetrics

logger = logging.getLogger(__name__)

# Keys accepted for each BaseMetrics field, in lookup order.
FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "efficiency": ("efficiency",),
    "cost_savings_per_store_per_day": (
        "costSavings",
        "costSavingsPerStorePerDay",
        "cost_savings_per_store_per_day",
        "cost_savings",
    ),
    "carbon_reduction_percent": (
        "carbonReduction",
        "carbonReductionPercent",
        "carbon_reduction_percent",
        "carbon_reduction",
    ),
    "total_distance": ("totalDistance", "total_distance"),
    "total_time": ("totalTime", "total_time"),
}

LiveInput = Union[LiveMetrics, Mapping[str, Any], None]


def _finite_number(value: Any) -> float | None:
    """Return *value* as a float if it is a finite real number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _as_mapping(live_metrics: LiveInput) -> Mapping[str, Any]:
    if live_metrics is None:
        return {}
    if isinstance(live_metrics, LiveMetrics):
        return live_metrics.model_dump(by_alias=True)
    if isinstance(live_metrics, Mapping):
        return live_metrics
    logger.warning(
        "Ignoring live metrics of unsupported type %s", type(live_metrics).__name__
    )
    return {}


def normalize(live_metrics: LiveInput = None) -> BaseMetrics:
    """Build a complete :class:`BaseMetrics` from optional live measurements.

    For each field the first key from :data:`FIELD_KEYS` whose value is a
    finite number is used; otherwise the documented default
    is substituted.  Negative or out-of-range numbers pass through.
    """
    raw = _as_mapping(live_metrics)
    values: dict[str, float] = {}

    for field, keys in FIELD_KEYS.items():
        number = None
        rejected = []
        for key in keys:
            candidate = raw.get(key)
            if candidate is None:
                continue
            number = _finite_number(candidate)
            if number is not None:
                break
            rejected.append(candidate)

        if number is None:
            if rejected:
                logger.warning(
                    "Live value for %s is not a finite number (%r); using default",
                    field, rejected[0],
                )
            else:
                logger.debug("No live value for %s; using default", field)
            number = DEFAULT_BASE_METRICS[field]
        values[field] = number

    return BaseMetrics(**values)
