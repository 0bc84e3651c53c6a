"""Per-item report rows computed from stored items and transactions."""
import math
from collections import defaultdict
from typing import Any, Iterable, Mapping

from sqlalchemy.orm import Session

from budget_app.db.models.project_item import ProjectItem
from budget_app.db.models.supplier import Supplier
from budget_app.db.models.transaction import Transaction
from budget_app.schemas.reports import ReportItem
from budget_app.services.costs import difference_percentage, item_line_totals
from budget_app.services.ledger.rules import is_expense, total_income


def _sort_key(item: Any):
    return (item.area or "", item.category or "", item.item_name or "", item.id or 0)


def build_report_items(
    items: Iterable[Any],
    transactions: Iterable[Any],
    supplier_names: Mapping[int, str] | None = None,
) -> list[ReportItem]:
    supplier_names = supplier_names or {}
    paid: dict[int, list[float]] = defaultdict(list)
    internal_paid: dict[int, list[float]] = defaultdict(list)
    for t in transactions:
        if t.project_item_id is None or not is_expense(t):
            continue
        paid[t.project_item_id].append(t.client_facing_amount or 0.0)
        internal_paid[t.project_item_id].append(t.amount)

    rows = []
    for item in sorted(items, key=_sort_key):
        totals = item_line_totals(item)
        amount_paid = math.fsum(paid.get(item.id, ()))
        actual = totals["client_cost"]
        rows.append(
            ReportItem(
                item_id=item.id,
                area=item.area,
                category=item.category,
                item_name=item.item_name,
                description=item.description,
                estimated_cost=totals["estimated_cost"],
                internal_cost=totals["internal_cost"],
                actual_cost=actual,
                difference_percentage=difference_percentage(totals["estimated_cost"], actual),
                amount_paid=amount_paid,
                internal_amount_paid=math.fsum(internal_paid.get(item.id, ())),
                pending_to_pay=max(0.0, (actual or 0.0) - amount_paid),
                supplier_id=item.supplier_id,
                supplier_name=supplier_names.get(item.supplier_id) if item.supplier_id is not None else None,
            )
        )
    return rows


def project_report_items(db: Session, project_id: int) -> list[ReportItem]:
    items = db.query(ProjectItem).filter(ProjectItem.project_id == project_id).all()
    transactions = db.query(Transaction).filter(Transaction.project_id == project_id).all()
    supplier_ids = {i.supplier_id for i in items if i.supplier_id is not None}
    names = {}
    if supplier_ids:
        names = dict(db.query(Supplier.id, Supplier.name).filter(Supplier.id.in_(supplier_ids)).all())
    return build_report_items(items, transactions, names)


def project_total_income(db: Session, project_id: int) -> float:
    transactions = db.query(Transaction).filter(Transaction.project_id == project_id).all()
    return total_income(transactions)
