"""Cost facets of a project item.

Absent amounts stay ``None`` here; only the report aggregator coerces them to zero.
"""
from typing import Any

from budget_app.core.config import settings

COST_FACETS = ("estimated_cost", "internal_cost", "client_cost")


def line_total(cost: float | None, quantity: int | None = 1) -> float | None:
    if cost is None:
        return None
    qty = 1 if quantity is None else quantity
    return float(cost) * qty


def item_line_totals(item: Any) -> dict[str, float | None]:
    """Scale the three per-unit facets of ``item`` by its quantity."""
    qty = getattr(item, "quantity", None)
    return {facet: line_total(getattr(item, facet, None), qty) for facet in COST_FACETS}


def difference_percentage(estimated: float | None, actual: float | None) -> float | None:
    if estimated is None or actual is None or estimated == 0:
        return None
    return (actual - estimated) * 100.0 / estimated


def format_currency(value: float | None, prefix: str | None = None) -> str:
    # es-DO grouping: comma thousands, dot decimals
    if value is None:
        return "-"
    p = settings.CURRENCY_PREFIX if prefix is None else prefix
    sign = "-" if value < 0 else ""
    return f"{sign}{p}{abs(value):,.2f}"


def format_percentage(value: float | None) -> str:
    if not value:
        return "-"
    return f"{value:.2f}%"
