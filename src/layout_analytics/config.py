# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Engine configuration model and YAML loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from layout_analytics.data.defaults import (
    DEFAULT_DAILY_ORDERS,
    DEFAULT_STORE_COUNT,
    LAYOUT_SCALE_FACTORS,
    PER_STORE_IMPLEMENTATION_COST,
    SEASONAL_UPLIFTS,
)
from layout_analytics.data.models import PeriodName


# ---------------------------------------------------------------------------
# Constant table overrides
# ---------------------------------------------------------------------------

class LayoutFactors(BaseModel):
    """Relative scale factors for one layout variant."""

    efficiency: float = Field(default=1.0, ge=0)
    total_distance: float = Field(default=1.0, ge=0)
    total_time: float = Field(default=1.0, ge=0)
    cost_savings_per_store_per_day: float = Field(default=1.0, ge=0)
    carbon_reduction_percent: float = Field(default=1.0, ge=0)


class SeasonalUplift(BaseModel):
    """Uplift percentages applied for one seasonal period."""

    efficiency_pct: float = Field(default=0.0, ge=0)
    cost_savings_pct: float = Field(default=0.0, ge=0)


def _default_layout_factors() -> dict[str, LayoutFactors]:
    return {name: LayoutFactors(**row) for name, row in LAYOUT_SCALE_FACTORS.items()}


def _default_seasonal_uplifts() -> dict[str, SeasonalUplift]:
    return {
        name: SeasonalUplift(efficiency_pct=eff, cost_savings_pct=savings)
        for name, (eff, savings) in SEASONAL_UPLIFTS.items()
    }


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

class EngineConfig(BaseModel):
    """Snapshot of the inputs an evaluation runs with.

    A zero per-store implementation cost is accepted; the ROI figure is
    then reported as undefined rather than rejected here.
    """

    store_count: int = Field(default=DEFAULT_STORE_COUNT, gt=0)
    daily_orders: int = Field(default=DEFAULT_DAILY_ORDERS, ge=0)
    per_store_implementation_cost: float = Field(
        default=PER_STORE_IMPLEMENTATION_COST, ge=0
    )
    layout_factors: dict[str, LayoutFactors] = Field(
        default_factory=_default_layout_factors, min_length=1
    )
    seasonal_uplifts: dict[str, SeasonalUplift] = Field(
        default_factory=_default_seasonal_uplifts, min_length=1
    )

    @field_validator("seasonal_uplifts")
    @classmethod
    def _known_periods(cls, value: dict[str, SeasonalUplift]) -> dict[str, SeasonalUplift]:
        known = {p.value for p in PeriodName}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(
                f"Unknown seasonal period(s): {', '.join(unknown)}; "
                f"expected one of {', '.join(p.value for p in PeriodName)}"
            )
        return value

    def layout_factor_table(self) -> dict[str, dict[str, float]]:
        """Layout factors as plain mappings, in declaration order."""
        return {name: f.model_dump() for name, f in self.layout_factors.items()}

    def seasonal_uplift_table(self) -> dict[str, tuple[float, float]]:
        """Seasonal uplifts as ``(efficiency_pct, cost_savings_pct)`` pairs."""
        return {
            name: (u.efficiency_pct, u.cost_savings_pct)
            for name, u in self.seasonal_uplifts.items()
        }


def load_config(path: str | Path) -> EngineConfig:
    """Load an EngineConfig from a YAML file.  An empty file gives defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    return EngineConfig.model_validate(raw or {})
