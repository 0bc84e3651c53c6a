from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from budget_app.core.deps import get_db
from budget_app.crud.suppliers import create_supplier, list_suppliers
from budget_app.schemas.suppliers import SupplierCreate, SupplierOut

router = APIRouter()

@router.get("", response_model=list[SupplierOut])
def get_suppliers(db: Session = Depends(get_db)):
    return list_suppliers(db)

@router.post("", response_model=SupplierOut)
def post_supplier(data: SupplierCreate, db: Session = Depends(get_db)):
    return create_supplier(db, data)
