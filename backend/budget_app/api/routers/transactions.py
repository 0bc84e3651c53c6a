from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from budget_app.core.deps import get_db, get_notifier
from budget_app.crud.items import get_item
from budget_app.crud.transactions import (
    create_transaction,
    delete_transaction,
    get_transaction,
    item_transactions,
    list_transactions,
    update_transaction,
)
from budget_app.schemas.reports import BudgetGuidance
from budget_app.schemas.transactions import Transaction, TransactionIn, TransactionOut
from budget_app.services.guidance import compute_budget_guidance
from budget_app.services.ledger.rules import build_transaction, classify, form_values
from budget_app.services.notify import Notifier

router = APIRouter()


def _out(t) -> TransactionOut:
    data = Transaction.model_validate(t).model_dump()
    item_name = t.project_item.item_name if t.project_item is not None else None
    form = form_values(t)
    return TransactionOut(
        **data,
        kind=form["kind"],
        entered_amount=form["amount"],
        entered_client_facing_amount=form["client_facing_amount"],
        item_name=item_name,
    )


@router.get("", response_model=list[TransactionOut])
def get_transactions(
    project_id: int = Query(...),
    project_item_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    return [_out(t) for t in list_transactions(db, project_id, project_item_id)]


@router.get("/guidance", response_model=BudgetGuidance)
def get_guidance(
    item_id: int = Query(...),
    exclude_transaction_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    it = get_item(db, item_id)
    if not it:
        raise HTTPException(status_code=404, detail="Item not found")
    return compute_budget_guidance(it, item_transactions(db, item_id), exclude_transaction_id)


@router.post("", response_model=TransactionOut)
def post_transaction(data: TransactionIn, db: Session = Depends(get_db), notifier: Notifier = Depends(get_notifier)):
    tx = build_transaction(data)
    t = create_transaction(db, tx)
    notifier.success("Transacción registrada", transaction_id=t.id, kind=classify(t.amount))
    return _out(t)


@router.put("/{transaction_id}", response_model=TransactionOut)
def put_transaction(
    transaction_id: int,
    data: TransactionIn,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    t = get_transaction(db, transaction_id)
    if not t:
        raise HTTPException(status_code=404, detail="Transaction not found")
    t = update_transaction(db, t, build_transaction(data, transaction_id=transaction_id))
    notifier.success("Transacción actualizada", transaction_id=transaction_id)
    return _out(t)


@router.delete("/{transaction_id}")
def remove_transaction(transaction_id: int, db: Session = Depends(get_db), notifier: Notifier = Depends(get_notifier)):
    t = get_transaction(db, transaction_id)
    if not t:
        raise HTTPException(status_code=404, detail="Transaction not found")
    delete_transaction(db, t)
    notifier.success("Transacción eliminada", transaction_id=transaction_id)
    return {"status": "ok"}
