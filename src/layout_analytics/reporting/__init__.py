# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Insight text and terminal rendering for analytics reports."""

from layout_analytics.reporting.insights import format_money, generate_insights

__all__ = ["format_money", "generate_insights"]
