# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for layout-analytics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from layout_analytics import __version__
from layout_analytics.analysis.engine import AnalyticsEngine
from layout_analytics.config import EngineConfig, load_config
from layout_analytics.data.models import AnalyticsReport
from layout_analytics.logging_config import configure_logging
from layout_analytics.reporting.terminal import TerminalRenderer


def engine_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the evaluation input options shared by every command."""
    options = [
        click.option(
            "--config", "-c", type=click.Path(exists=True, dir_okay=False), default=None,
            help="YAML file with store count, costs and factor tables",
        ),
        click.option(
            "--metrics", "-m", type=click.Path(exists=True, dir_okay=False), default=None,
            help="JSON file with live metrics (efficiency, costSavings, ...)",
        ),
        click.option(
            "--stores", "-n", type=click.IntRange(min=1), default=None,
            help="Number of stores in the rollout",
        ),
        click.option(
            "--daily-orders", "-d", type=click.IntRange(min=0), default=None,
            help="Average orders per store per day",
        ),
        click.option(
            "--implementation-cost", type=click.FloatRange(min=0), default=None,
            help="Implementation cost per store (USD)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _evaluate(
    console: Console,
    config: str | None,
    metrics: str | None,
    stores: int | None,
    daily_orders: int | None,
    implementation_cost: float | None,
) -> AnalyticsReport:
    """Load inputs and run one evaluation, exiting with status 1 on bad input."""
    try:
        engine_config = load_config(config) if config else EngineConfig()
    except (OSError, ValidationError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid config {escape(config)}:[/] {escape(str(exc))}")
        raise SystemExit(1)

    live = None
    if metrics:
        try:
            live = json.loads(Path(metrics).read_text())
        except (OSError, json.JSONDecodeError) as exc:
            console.print(
                f"[red]Could not read metrics file {escape(metrics)}:[/] {escape(str(exc))}"
            )
            raise SystemExit(1)
        if not isinstance(live, dict):
            console.print(f"[red]Metrics must be a JSON object:[/] {escape(metrics)}")
            raise SystemExit(1)

    engine = AnalyticsEngine(engine_config)
    return engine.evaluate(
        live,
        store_count=stores,
        daily_orders=daily_orders,
        per_store_implementation_cost=implementation_cost,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """layout-analytics: Warehouse Layout ROI & Impact Analytics

    Derive decision-ready figures from layout simulation metrics:

    \b
      ROI projection for a fleet-wide rollout
      Layout rankings and best-layout selection
      Holiday season projections and carbon breakdown
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)


@cli.command()
@engine_options
@click.pass_context
def report(ctx: click.Context, **kwargs: Any) -> None:
    """Show the full analytics report."""
    console: Console = ctx.obj["console"]
    result = _evaluate(console, **kwargs)
    TerminalRenderer(console).render(result)


@cli.command()
@engine_options
@click.pass_context
def roi(ctx: click.Context, **kwargs: Any) -> None:
    """Show the ROI projection and best-layout rollout impact."""
    console: Console = ctx.obj["console"]
    result = _evaluate(console, **kwargs)
    TerminalRenderer(console).render_roi(result)


@cli.command()
@engine_options
@click.pass_context
def layouts(ctx: click.Context, **kwargs: Any) -> None:
    """Rank layout scenarios by efficiency."""
    console: Console = ctx.obj["console"]
    result = _evaluate(console, **kwargs)
    TerminalRenderer(console).render_layouts(result)


@cli.command()
@engine_options
@click.pass_context
def seasonal(ctx: click.Context, **kwargs: Any) -> None:
    """Project holiday-season efficiency and savings."""
    console: Console = ctx.obj["console"]
    result = _evaluate(console, **kwargs)
    TerminalRenderer(console).render_seasonal(result)


@cli.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True,
              help="Output JSON file path")
@engine_options
@click.pass_context
def export(ctx: click.Context, output: str, **kwargs: Any) -> None:
    """Export the analytics report as JSON."""
    console: Console = ctx.obj["console"]
    result = _evaluate(console, **kwargs)
    with open(output, "w") as f:
        f.write(result.model_dump_json(indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {output}")
