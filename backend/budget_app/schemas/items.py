from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectItemBase(BaseModel):
    area: str | None = None
    category: str = ""
    item_name: str = ""
    description: str | None = None
    quantity: int = Field(default=1, ge=1)
    # per-unit amounts; totals scale by quantity
    estimated_cost: float | None = None
    internal_cost: float | None = None
    client_cost: float | None = None
    supplier_id: int | None = None
    notes: str | None = None
    status: str | None = None

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, v):
        return 1 if v is None else v


class ProjectItemCreate(ProjectItemBase):
    project_id: int
    item_name: str = Field(..., min_length=1)


class ProjectItemUpdate(BaseModel):
    area: str | None = None
    category: str | None = None
    item_name: str | None = None
    description: str | None = None
    quantity: int | None = Field(default=None, ge=1)
    estimated_cost: float | None = None
    internal_cost: float | None = None
    client_cost: float | None = None
    supplier_id: int | None = None
    notes: str | None = None
    status: str | None = None


class ProjectItem(ProjectItemBase):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    project_id: int | None = None
