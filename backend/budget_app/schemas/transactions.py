import datetime as dt
from enum import Enum
from typing import Literal
from pydantic import BaseModel, ConfigDict

TransactionKind = Literal["expense", "income"]


class PaymentMethod(str, Enum):
    cash = "Efectivo"
    transfer = "Transferencia"
    credit_card = "Tarjeta de Credito"
    other = "Otros"


class Transaction(BaseModel):
    """Stored movement. ``amount < 0`` is a client payment, anything else an expense."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    project_id: int | None = None
    project_item_id: int | None = None
    amount: float
    client_facing_amount: float | None = None
    date: dt.date | None = None
    payment_method: str | None = None
    description: str | None = None
    invoice_receipt_number: str | None = None
    attachment_url: str | None = None


class TransactionIn(BaseModel):
    """Form payload: ``amount`` is the magnitude typed by the user, ``kind`` picks the sign."""

    project_id: int
    project_item_id: int | None = None
    kind: TransactionKind = "expense"
    amount: float
    client_facing_amount: float | None = None
    date: dt.date
    payment_method: PaymentMethod = PaymentMethod.cash
    description: str | None = None
    invoice_receipt_number: str | None = None
    attachment_url: str | None = None


class TransactionOut(Transaction):
    """Stored row plus the values the edit form is prefilled with."""

    id: int
    kind: TransactionKind
    entered_amount: float
    entered_client_facing_amount: float | None = None
    item_name: str | None = None
