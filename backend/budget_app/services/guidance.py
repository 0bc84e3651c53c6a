"""Budget guidance for a single project item.

Re-run by the transaction form whenever the selected item or the amounts
change, so it stays a pure O(n) pass over that item's transactions.
"""
import math
from typing import Any, Iterable

from budget_app.core.logging import logger
from budget_app.schemas.reports import BudgetGuidance
from budget_app.services.ledger.rules import is_expense
from budget_app.services.ledger.validators import require_fields


def compute_budget_guidance(
    item: Any,
    transactions: Iterable[Any],
    exclude_transaction_id: int | None = None,
) -> BudgetGuidance:
    """Spent, remaining and recommended next client-facing amount for ``item``.

    ``exclude_transaction_id`` is the transaction open for editing; its stored
    value is left out so the edit is not counted against itself. New
    transactions have no id yet and exclude nothing.

    Income rows attached to the item are ignored: only expenses consume the
    item's client budget.
    """
    require_fields(item, "id", "project_id")

    considered = [t for t in transactions if exclude_transaction_id is None or t.id != exclude_transaction_id]
    expenses = [t.amount for t in considered if is_expense(t) and t.amount > 0]
    prior_expense_count = sum(1 for t in considered if is_expense(t))
    total_expenses = math.fsum(expenses)

    client_cost = item.client_cost
    if client_cost is None:
        remaining = None
        recommended = None
    else:
        remaining = client_cost - total_expenses
        # first payment bills the full budget, later ones top up what is left
        recommended = max(0.0, client_cost if prior_expense_count == 0 else remaining)

    guidance = BudgetGuidance(
        item_name=item.item_name or "",
        client_cost=client_cost,
        estimated_cost=item.estimated_cost,
        total_expenses=total_expenses,
        remaining_budget=remaining,
        is_over_budget=remaining is not None and remaining < 0,
        recommended_client_facing_amount=recommended,
    )
    logger.debug(
        "budget_guidance",
        item_id=item.id,
        excluded=exclude_transaction_id,
        considered=len(considered),
        total_expenses=total_expenses,
        over_budget=guidance.is_over_budget,
    )
    return guidance
