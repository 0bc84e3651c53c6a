from sqlalchemy.orm import Session
from budget_app.db.models.project_item import ProjectItem
from budget_app.schemas.items import ProjectItemCreate, ProjectItemUpdate
from budget_app.services.ledger.validators import require_fields

def list_items(db: Session, project_id: int):
    return (
        db.query(ProjectItem)
        .filter(ProjectItem.project_id == project_id)
        .order_by(ProjectItem.area, ProjectItem.item_name, ProjectItem.id)
        .all()
    )

def get_item(db: Session, item_id: int) -> ProjectItem | None:
    return db.query(ProjectItem).filter(ProjectItem.id == item_id).one_or_none()

def create_item(db: Session, data: ProjectItemCreate) -> ProjectItem:
    require_fields(data, "project_id")
    it = ProjectItem(**data.model_dump())
    db.add(it)
    db.commit()
    db.refresh(it)
    return it


def update_item(db: Session, it: ProjectItem, data: ProjectItemUpdate) -> ProjectItem:
    # explicit nulls clear a cost; omitted fields stay as they are
    for field, value in data.model_dump(exclude_unset=True).items():
        if field in ("item_name", "category", "quantity") and value is None:
            continue
        setattr(it, field, value)
    db.commit()
    db.refresh(it)
    return it


def delete_item(db: Session, it: ProjectItem) -> None:
    # transactions go with the item (relationship cascade)
    db.delete(it)
    db.commit()
