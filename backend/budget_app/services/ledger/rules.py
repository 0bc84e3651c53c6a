"""Sign convention for stored transactions.

A stored ``amount`` below zero is money received from the client (income);
zero or above is money paid out (expense). :func:`classify` is the only place
that reading happens; everything else asks it.
"""
import math
from typing import Any, Iterable

from budget_app.schemas.transactions import Transaction, TransactionIn, TransactionKind
from budget_app.services.ledger.validators import ValidationError, is_negative, require_fields

KINDS: tuple[str, ...] = ("expense", "income")


def _check_kind(kind: str) -> None:
    if kind not in KINDS:
        raise ValidationError(f"unknown transaction kind: {kind!r}", field="kind")


def to_stored_amount(kind: TransactionKind, entered_amount: float) -> float:
    _check_kind(kind)
    if entered_amount is None:
        raise ValidationError("amount is required", field="amount")
    if is_negative(entered_amount):
        raise ValidationError("amount must be entered as a non-negative magnitude", field="amount")
    magnitude = abs(float(entered_amount))
    return -magnitude if kind == "income" else magnitude


def to_stored_client_facing_amount(
    kind: TransactionKind,
    stored_amount: float,
    entered_client_facing_amount: float | None,
) -> float | None:
    _check_kind(kind)
    if kind == "income":
        # income is always fully attributed to the client
        return stored_amount
    if entered_client_facing_amount is None:
        return None
    if is_negative(entered_client_facing_amount):
        raise ValidationError("client facing amount must be non-negative", field="client_facing_amount")
    return float(entered_client_facing_amount)


def classify(stored_amount: float) -> TransactionKind:
    # -0.0 is a zero-value income entry, see to_stored_amount("income", 0)
    if stored_amount < 0 or math.copysign(1.0, stored_amount) < 0:
        return "income"
    return "expense"


def is_income(tx: Any) -> bool:
    return classify(tx.amount) == "income"


def is_expense(tx: Any) -> bool:
    return classify(tx.amount) == "expense"


def total_income(transactions: Iterable[Any]) -> float:
    """Money received from the client, as a positive number."""
    return math.fsum(abs(t.amount) for t in transactions if is_income(t))


def build_transaction(data: TransactionIn, transaction_id: int | None = None) -> Transaction:
    """Resolve a form payload into the stored signed representation."""
    require_fields(data, "project_id")
    amount = to_stored_amount(data.kind, data.amount)
    return Transaction(
        id=transaction_id,
        project_id=data.project_id,
        project_item_id=data.project_item_id,
        amount=amount,
        client_facing_amount=to_stored_client_facing_amount(data.kind, amount, data.client_facing_amount),
        date=data.date,
        payment_method=data.payment_method.value,
        description=data.description,
        invoice_receipt_number=data.invoice_receipt_number,
        attachment_url=data.attachment_url,
    )


def form_values(tx: Any) -> dict:
    """Inverse of :func:`build_transaction`: what the edit form shows for a stored row."""
    cfa = tx.client_facing_amount
    return {
        "kind": classify(tx.amount),
        "amount": abs(tx.amount),
        "client_facing_amount": abs(cfa) if cfa is not None else None,
    }
