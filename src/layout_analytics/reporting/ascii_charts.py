# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly bar charts using Unicode block characters.

These functions return Rich-markup strings for the terminal renderer.
"""

from __future__ import annotations


def _color_for_pct(pct: float) -> str:
    if pct >= 80:
        return "green"
    if pct >= 50:
        return "yellow"
    return "red"


def horizontal_bar(
    label: str,
    value: float,
    max_value: float,
    width: int = 30,
    color: str = "green",
    fmt: str = "{:,.0f}",
) -> str:
    """Render one bar of a bar chart.

    Returns a Rich-markup string like:
        Layout 1.............. [green]████████████░░░░░░░░[/] 1,500
    """
    if max_value <= 0:
        return f"  {label:.<22} [dim]no data[/]"
    ratio = max(0.0, min(value / max_value, 1.0))
    filled = int(ratio * width)
    bar = "█" * filled + "░" * (width - filled)
    return f"  {label:.<22} [{color}]{bar}[/] {fmt.format(value)}"


def percentage_bar(label: str, pct: float, width: int = 20) -> str:
    """Simple percentage bar: [label] ████░░░░ 45%

    The bar is clamped to 0-100 but the printed value is not.
    """
    clamped = max(0.0, min(100.0, pct))
    filled = int(clamped / 100 * width)
    empty = width - filled
    color = _color_for_pct(clamped)
    bar = "█" * filled + "░" * empty
    return f"{label} [{color}]{bar}[/] {pct:.1f}%"


def share_bar(share_pct: float, width: int = 20, color: str = "green") -> str:
    """Bar for a slice of a whole (e.g. a carbon source share)."""
    clamped = max(0.0, min(100.0, share_pct))
    filled = round(clamped / 100 * width)
    return f"[{color}]" + "█" * filled + "[/]" + "░" * (width - filled)
