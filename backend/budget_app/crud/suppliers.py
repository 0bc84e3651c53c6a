from sqlalchemy.orm import Session
from budget_app.db.models.supplier import Supplier
from budget_app.schemas.suppliers import SupplierCreate

def list_suppliers(db: Session):
    return db.query(Supplier).order_by(Supplier.name).all()

def get_supplier(db: Session, supplier_id: int) -> Supplier | None:
    return db.query(Supplier).filter(Supplier.id == supplier_id).one_or_none()

def create_supplier(db: Session, data: SupplierCreate) -> Supplier:
    s = Supplier(**data.model_dump())
    db.add(s)
    db.commit()
    db.refresh(s)
    return s
