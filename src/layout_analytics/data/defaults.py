"""Named constant tables for the analytics engine.

Every fallback value, scale factor and uplift percentage lives here so
that each table can be tested and swapped on its own.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Fallback base metrics (used when the live feed omits a field)
# ---------------------------------------------------------------------------
DEFAULT_EFFICIENCY = 88.0
DEFAULT_COST_SAVINGS_PER_STORE_PER_DAY = 1500.0
DEFAULT_CARBON_REDUCTION_PERCENT = 48.0
DEFAULT_TOTAL_DISTANCE = 2200.0
DEFAULT_TOTAL_TIME = 33.0

DEFAULT_BASE_METRICS: dict[str, float] = {
    "efficiency": DEFAULT_EFFICIENCY,
    "cost_savings_per_store_per_day": DEFAULT_COST_SAVINGS_PER_STORE_PER_DAY,
    "carbon_reduction_percent": DEFAULT_CARBON_REDUCTION_PERCENT,
    "total_distance": DEFAULT_TOTAL_DISTANCE,
    "total_time": DEFAULT_TOTAL_TIME,
}

# ---------------------------------------------------------------------------
# Fleet defaults
# ---------------------------------------------------------------------------
DEFAULT_STORE_COUNT = 4700
DEFAULT_DAILY_ORDERS = 1000           # orders per store per day
PER_STORE_IMPLEMENTATION_COST = 50_000.0  # USD
DAYS_PER_YEAR = 365

# ---------------------------------------------------------------------------
# Layout variants: relative scale factors applied to the base metrics.
# Keys are BaseMetrics field names; order of the outer dict is table order.
# ---------------------------------------------------------------------------
LAYOUT_SCALE_FACTORS: dict[str, dict[str, float]] = {
    "Layout 1": {
        "efficiency": 1.0,
        "total_distance": 1.0,
        "total_time": 1.0,
        "cost_savings_per_store_per_day": 1.0,
        "carbon_reduction_percent": 1.0,
    },
    "Layout 2": {
        "efficiency": 0.95,
        "total_distance": 1.045,
        "total_time": 1.06,
        "cost_savings_per_store_per_day": 0.90,
        "carbon_reduction_percent": 11 / 12,   # 48 -> 44
    },
    "Layout 3": {
        "efficiency": 0.90,
        "total_distance": 1.09,
        "total_time": 1.12,
        "cost_savings_per_store_per_day": 0.80,
        "carbon_reduction_percent": 5 / 6,     # 48 -> 40
    },
}

# ---------------------------------------------------------------------------
# Seasonal uplift percentages: (efficiency %, cost savings %)
# ---------------------------------------------------------------------------
SEASONAL_UPLIFTS: dict[str, tuple[float, float]] = {
    "Normal": (0.0, 0.0),
    "Black Friday": (15.0, 25.0),
    "Christmas": (12.0, 20.0),
    "New Year": (10.0, 15.0),
}

# Projected orders per store per day; fixed, not derived from the base.
SEASONAL_PROJECTED_ORDERS: dict[str, int] = {
    "Normal": 1000,
    "Black Friday": 2500,
    "Christmas": 2000,
    "New Year": 1200,
}

# ---------------------------------------------------------------------------
# Carbon reduction sources (percent of the total reduction, sums to 100)
# ---------------------------------------------------------------------------
CARBON_SOURCE_SHARES: dict[str, float] = {
    "Reduced Travel": 45.0,
    "Optimized Routes": 30.0,
    "Efficient Loading": 25.0,
}
