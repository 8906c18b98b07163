"""Short, decision-ready insight lines for an analytics report."""

from __future__ import annotations

from layout_analytics.data.models import AnalyticsReport


def format_money(amount: float) -> str:
    """Compact currency: ``$2.6B``, ``$235.0M``, ``$493K``, ``$1,350``."""
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if value >= 1e9:
        return f"{sign}${value / 1e9:.1f}B"
    if value >= 1e6:
        return f"{sign}${value / 1e6:.1f}M"
    if value >= 1e4:
        return f"{sign}${value / 1e3:.0f}K"
    return f"{sign}${value:,.0f}"


def generate_insights(report: AnalyticsReport) -> list[str]:
    """Build the insight lines shown beneath the report.

    Lines:
    1. Rollout recommendation for the best layout (skipped if undefined)
    2. Fleet-wide carbon reduction
    3. Largest seasonal efficiency uplift over the Normal period
    """
    lines: list[str] = []
    stores = report.key_metrics.store_count

    if report.rollout is not None:
        best = report.rollout.best_layout
        lines.append(
            f"Implement {best.name} across all {stores:,} stores for "
            f"{format_money(report.rollout.potential_annual_savings)} annual savings"
        )

    lines.append(
        f"Reduce carbon footprint by {report.base.carbon_reduction_percent:.0f}% "
        f"across {stores:,} stores"
    )

    normal = next((p for p in report.seasonal if not p.name.is_holiday), None)
    holidays = [p for p in report.seasonal if p.name.is_holiday]
    if normal is not None and holidays and normal.efficiency > 0:
        peak = max(holidays, key=lambda p: p.efficiency)
        uplift = (peak.efficiency - normal.efficiency) / normal.efficiency * 100
        if uplift > 0:
            lines.append(
                f"Increase {peak.name.value} efficiency by {uplift:.0f}% "
                f"with optimized routing"
            )

    return lines
