from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from budget_app.db.base import Base
from budget_app.db.models._mixins import TimestampMixin

class Supplier(Base, TimestampMixin):
    __tablename__ = "supplier"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), unique=True, index=True)
    contact_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str | None] = mapped_column(String(256), nullable=True)
