from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from budget_app.db.base import Base
from budget_app.db.models._mixins import TimestampMixin

class Project(Base, TimestampMixin):
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256))
    client_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), default="Planificación")

    items = relationship("ProjectItem", back_populates="project", cascade="all, delete")
    transactions = relationship("Transaction", back_populates="project", cascade="all, delete")
