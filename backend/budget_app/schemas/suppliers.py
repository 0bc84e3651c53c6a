from pydantic import BaseModel, ConfigDict, Field


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1)
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None


class SupplierOut(SupplierCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
