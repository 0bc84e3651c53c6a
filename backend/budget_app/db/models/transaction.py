import datetime as dt
from sqlalchemy import ForeignKey, Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from budget_app.db.base import Base
from budget_app.db.models._mixins import TimestampMixin

class Transaction(Base, TimestampMixin):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("project.id", ondelete="CASCADE"), index=True)
    project_item_id: Mapped[int | None] = mapped_column(
        ForeignKey("project_items.id", ondelete="CASCADE"), nullable=True, index=True
    )

    amount: Mapped[float] = mapped_column(Float)  # < 0 client payment, otherwise expense
    client_facing_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    payment_method: Mapped[str] = mapped_column(String(32), default="Efectivo")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    invoice_receipt_number: Mapped[str | None] = mapped_column(String(128), nullable=True)
    attachment_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    project = relationship("Project", back_populates="transactions")
    project_item = relationship("ProjectItem", back_populates="transactions")
