"""Grouping and totals for the project report.

All functions here build new structures and leave their inputs untouched.
Missing amounts count as zero in every total.
"""
import math
from typing import Iterable, Sequence

from budget_app.core.config import settings
from budget_app.core.logging import logger
from budget_app.schemas.reports import (
    GrandTotals,
    GroupedReportData,
    ProjectReport,
    ReportItem,
    ReportTotals,
    SummaryRow,
)

TOTAL_COLUMNS = ("estimated_cost", "actual_cost", "amount_paid", "internal_amount_paid", "pending_to_pay")

INCOME_LABEL = "INGRESOS DEL CLIENTE"
BALANCE_LABEL = "BALANCE RESTANTE"


def area_key(area: str | None, no_area_label: str | None = None) -> str:
    label = settings.NO_AREA_LABEL if no_area_label is None else no_area_label
    if area is None or not area.strip():
        return label
    return area


def as_report_item(row: ReportItem | dict) -> ReportItem:
    """Fresh ``ReportItem`` from a model or a raw query row; never aliases ``row``."""
    if isinstance(row, ReportItem):
        return row.model_copy(deep=True)
    return ReportItem.model_validate(row)


def _sum_column(items: Iterable[ReportItem], column: str) -> float:
    return math.fsum(getattr(it, column) or 0.0 for it in items)


def column_totals(items: Sequence[ReportItem]) -> ReportTotals:
    return ReportTotals(**{c: _sum_column(items, c) for c in TOTAL_COLUMNS})


def group_by_area(items: Sequence[ReportItem | dict], no_area_label: str | None = None) -> list[GroupedReportData]:
    """Stable partition of ``items`` by area, groups in first-seen order."""
    buckets: dict[str, list[ReportItem]] = {}
    for row in map(as_report_item, items):
        buckets.setdefault(area_key(row.area, no_area_label), []).append(row)

    return [
        GroupedReportData(area=area, items=rows, totals=column_totals(rows))
        for area, rows in buckets.items()
    ]


def grand_totals(groups: Sequence[GroupedReportData]) -> GrandTotals:
    # summed from the items, not from the already rounded group totals
    items = flatten(groups)
    return GrandTotals(**{c: _sum_column(items, c) for c in TOTAL_COLUMNS})


def flatten(groups: Sequence[GroupedReportData]) -> list[ReportItem]:
    return [it for g in groups for it in g.items]


def income_row(total_income: float) -> SummaryRow:
    # received money offsets cost, so it is shown negated
    return SummaryRow(kind="income", label=INCOME_LABEL, actual_cost=-total_income, negative=total_income > 0)


def balance_row(totals: ReportTotals, total_income: float) -> SummaryRow:
    remaining = totals.actual_cost - total_income
    return SummaryRow(kind="balance", label=BALANCE_LABEL, actual_cost=remaining, negative=remaining < 0)


def filter_report_items(
    items: Sequence[ReportItem | dict],
    area: str | None = None,
    category: str | None = None,
    supplier_id: int | None = None,
    item_id: int | None = None,
    no_area_label: str | None = None,
) -> list[ReportItem]:
    out = []
    for it in map(as_report_item, items):
        if area is not None and area_key(it.area, no_area_label) != area_key(area, no_area_label):
            continue
        if category is not None and it.category != category:
            continue
        if supplier_id is not None and it.supplier_id != supplier_id:
            continue
        if item_id is not None and it.item_id != item_id:
            continue
        out.append(it)
    return out


def filter_subtitle(
    area: str | None = None,
    category: str | None = None,
    supplier_name: str | None = None,
    item_name: str | None = None,
) -> str:
    parts = []
    if area:
        parts.append(f"Área: {area}")
    if category:
        parts.append(f"Categoría: {category}")
    if supplier_name:
        parts.append(f"Proveedor: {supplier_name}")
    if item_name:
        parts.append(f"Artículo: {item_name}")
    return " · ".join(parts)


def build_report(
    items: Sequence[ReportItem | dict],
    total_income: float = 0.0,
    show_income: bool = True,
    show_balance: bool = True,
    project_id: int | None = None,
    subtitle: str | None = None,
    no_area_label: str | None = None,
) -> ProjectReport:
    """Group ``items`` and overlay the income and balance rows.

    ``total_income`` is the positive sum of client payments for the whole
    project; it is supplied by the caller and only rendered here.
    """
    groups = group_by_area(items, no_area_label)
    totals = grand_totals(groups)
    report = ProjectReport(
        project_id=project_id,
        groups=groups,
        grand_totals=totals,
        total_income=total_income,
        income_row=income_row(total_income) if show_income else None,
        balance_row=balance_row(totals, total_income) if show_balance else None,
        filter_subtitle=subtitle or None,
    )
    logger.debug("report_grouped", project_id=project_id, items=len(items), groups=len(groups))
    return report
