from sqlalchemy import ForeignKey, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from budget_app.db.base import Base
from budget_app.db.models._mixins import TimestampMixin

class ProjectItem(Base, TimestampMixin):
    __tablename__ = "project_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("project.id", ondelete="CASCADE"), index=True)
    supplier_id: Mapped[int | None] = mapped_column(ForeignKey("supplier.id", ondelete="SET NULL"), nullable=True)

    area: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    category: Mapped[str] = mapped_column(String(64), default="")
    item_name: Mapped[str] = mapped_column(String(512))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=1)

    # per unit
    estimated_cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    internal_cost: Mapped[float | None] = mapped_column(Float, nullable=True)
    client_cost: Mapped[float | None] = mapped_column(Float, nullable=True)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)

    project = relationship("Project", back_populates="items")
    supplier = relationship("Supplier")
    transactions = relationship(
        "Transaction", back_populates="project_item", cascade="all, delete"
    )
