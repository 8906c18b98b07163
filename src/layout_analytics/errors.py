# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Domain errors raised by the analytics derivation functions."""

from __future__ import annotations


class AnalyticsError(Exception):
    """Base class for errors the engine reports back to the caller."""

    code = "analytics_error"


class RoiUndefined(AnalyticsError):
    """The implementation cost total is zero, so ROI has no value."""

    code = "roi_undefined"

    def __init__(self, message: str = "ROI is undefined: implementation cost total is 0") -> None:
        super().__init__(message)


class EmptyScenarioSet(AnalyticsError):
    """An aggregate was requested over an empty scenario sequence."""

    code = "empty_scenario_set"

    def __init__(self, message: str = "No layout scenarios to aggregate") -> None:
        super().__init__(message)
