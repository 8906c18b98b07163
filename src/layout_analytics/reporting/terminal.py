"""Rich terminal report renderer.

Composes Rich tables, panels and bar charts into the user-facing
terminal output for an :class:`AnalyticsReport`.
"""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from layout_analytics import __version__
from layout_analytics.data.models import AnalyticsReport
from layout_analytics.reporting.ascii_charts import (
    horizontal_bar,
    percentage_bar,
    share_bar,
)
from layout_analytics.reporting.insights import format_money

NOT_AVAILABLE = "[dim]N/A[/dim]"
CARBON_COLORS = ("green", "blue", "yellow", "magenta", "cyan")


class TerminalRenderer:
    """Renders analytics reports to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, report: AnalyticsReport) -> None:
        """Render the full report."""
        self._render_header(report)
        self._render_roi(report)
        self._render_key_metrics(report)
        self._render_layouts(report)
        self._render_carbon(report)
        self._render_seasonal(report)
        self._render_insights(report)
        self._render_footer()

    def render_roi(self, report: AnalyticsReport) -> None:
        """Render only the ROI and rollout panels."""
        self._render_header(report)
        self._render_roi(report)

    def render_layouts(self, report: AnalyticsReport) -> None:
        """Render the layout ranking."""
        self._render_header(report)
        self._render_layouts(report)

    def render_seasonal(self, report: AnalyticsReport) -> None:
        """Render the seasonal projection."""
        self._render_header(report)
        self._render_seasonal(report)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, report: AnalyticsReport) -> None:
        km = report.key_metrics
        header_text = Text()
        header_text.append("LAYOUT ANALYTICS", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(f"{km.store_count:,} stores", style="bold")
        header_text.append(" | ", style="dim")
        header_text.append(f"{km.daily_orders:,} orders/store/day")
        self.console.print(Panel(header_text, title="Supply Chain Analytics"))

    def _render_roi(self, report: AnalyticsReport) -> None:
        roi = report.roi
        if roi is not None:
            figures = [
                ("Annual Savings", format_money(roi.total_annual_savings)),
                ("ROI", f"{roi.roi_percent:,.0f}%"),
                ("Per Store/Year", format_money(roi.annual_savings_per_store)),
                ("Implementation Cost", format_money(roi.implementation_cost_total)),
            ]
        else:
            figures = [
                ("Annual Savings", NOT_AVAILABLE),
                ("ROI", NOT_AVAILABLE),
                ("Per Store/Year", NOT_AVAILABLE),
                ("Implementation Cost", NOT_AVAILABLE),
            ]

        panels = [
            Panel(f"[bold]{value}[/bold]", title=label, border_style="green", width=24)
            for label, value in figures
        ]
        self.console.print()
        self.console.print(Rule("[bold]ROI CALCULATOR[/bold]"))
        self.console.print(Columns(panels, padding=(0, 1)))

        rollout = report.rollout
        if rollout is not None:
            self.console.print(
                f"  [bold]Best layout:[/bold] {rollout.best_layout.name} | "
                f"[green]{format_money(rollout.potential_annual_savings)}/year[/green] "
                f"fleet-wide | {rollout.potential_carbon_reduction_percent:.0f}% CO₂ reduction"
            )
        else:
            self.console.print(f"  [bold]Best layout:[/bold] {NOT_AVAILABLE}")

        for err in report.errors:
            self.console.print(f"  [yellow]⚠ {err.message}[/yellow]")

    def _render_key_metrics(self, report: AnalyticsReport) -> None:
        km = report.key_metrics

        table = Table(show_header=False, padding=(0, 2), box=None)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Avg Efficiency", percentage_bar("", km.average_efficiency, width=15))
        table.add_row("Daily Orders", f"{km.fleet_daily_orders / 1e6:.1f}M")
        table.add_row("Carbon Reduction", percentage_bar("", km.carbon_reduction_percent, width=15))
        table.add_row("Stores", f"{km.store_count:,}")

        self.console.print()
        self.console.print(Panel(table, title="[bold]KEY METRICS[/bold]"))

    def _render_layouts(self, report: AnalyticsReport) -> None:
        self.console.print()
        self.console.print(Rule("[bold]LAYOUT PERFORMANCE RANKINGS[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Layout", min_width=10)
        table.add_column("Efficiency", justify="right")
        table.add_column("Distance", justify="right")
        table.add_column("Time", justify="right")
        table.add_column("Savings/Store/Day", justify="right")
        table.add_column("CO₂ Reduction", justify="right")

        for ranked in report.rankings:
            s = ranked.scenario
            table.add_row(
                str(ranked.rank),
                s.name,
                f"{s.efficiency:.1f}%",
                f"{s.distance:,.0f}",
                f"{s.time:.1f}",
                f"[green]${s.cost_savings_per_store_per_day:,.0f}[/green]",
                f"{s.carbon_reduction_percent:.0f}%",
            )
        self.console.print(table)

        max_savings = max(
            (s.cost_savings_per_store_per_day for s in report.layouts), default=0.0
        )
        self.console.print("\n  [bold]Daily savings per store[/bold]")
        for s in report.layouts:
            self.console.print(
                horizontal_bar(s.name, s.cost_savings_per_store_per_day, max_savings)
            )

    def _render_carbon(self, report: AnalyticsReport) -> None:
        self.console.print()
        self.console.print(Rule("[bold]CARBON FOOTPRINT REDUCTION[/bold]"))
        for i, slice_ in enumerate(report.carbon_breakdown):
            color = CARBON_COLORS[i % len(CARBON_COLORS)]
            self.console.print(
                f"  {slice_.name:.<22} {share_bar(slice_.share_percent, color=color)} "
                f"{slice_.share_percent:.0f}% ({slice_.reduction_points:.1f} pts)"
            )

    def _render_seasonal(self, report: AnalyticsReport) -> None:
        self.console.print()
        self.console.print(Rule("[bold]HOLIDAY SEASON IMPACT[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Period", min_width=12)
        table.add_column("Efficiency", justify="right")
        table.add_column("Orders/Store/Day", justify="right")
        table.add_column("Savings/Store/Day", justify="right")

        for period in report.seasonal:
            style = "bold" if period.name.is_holiday else "dim"
            table.add_row(
                f"[{style}]{period.name.value}[/{style}]",
                f"{period.efficiency:.0f}%",
                f"{period.projected_orders:,}",
                f"${period.cost_savings_per_store_per_day:,.0f}",
            )
        self.console.print(table)

    def _render_insights(self, report: AnalyticsReport) -> None:
        if not report.insights:
            return
        body = "\n".join(f"• {line}" for line in report.insights)
        self.console.print()
        self.console.print(
            Panel(
                body,
                title="[bold]STRATEGIC INSIGHTS[/bold]",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def _render_footer(self) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(f"  [dim]layout-analytics v{__version__}[/dim]")
        self.console.print()
