from sqlalchemy.orm import Session
from budget_app.db.models.transaction import Transaction
from budget_app.schemas.transactions import Transaction as TransactionData

_FIELDS = (
    "project_id",
    "project_item_id",
    "amount",
    "client_facing_amount",
    "date",
    "payment_method",
    "description",
    "invoice_receipt_number",
    "attachment_url",
)

def list_transactions(db: Session, project_id: int, project_item_id: int | None = None):
    q = db.query(Transaction).filter(Transaction.project_id == project_id)
    if project_item_id is not None:
        q = q.filter(Transaction.project_item_id == project_item_id)
    return q.order_by(Transaction.date.desc(), Transaction.id.desc()).all()

def item_transactions(db: Session, project_item_id: int):
    return db.query(Transaction).filter(Transaction.project_item_id == project_item_id).all()

def get_transaction(db: Session, transaction_id: int) -> Transaction | None:
    return db.query(Transaction).filter(Transaction.id == transaction_id).one_or_none()

def create_transaction(db: Session, data: TransactionData) -> Transaction:
    t = Transaction(**{f: getattr(data, f) for f in _FIELDS})
    db.add(t)
    db.commit()
    db.refresh(t)
    return t


def update_transaction(db: Session, t: Transaction, data: TransactionData) -> Transaction:
    # the stored row is fully replaced by the resolved form values
    for f in _FIELDS:
        setattr(t, f, getattr(data, f))
    db.commit()
    db.refresh(t)
    return t


def delete_transaction(db: Session, t: Transaction) -> None:
    db.delete(t)
    db.commit()
