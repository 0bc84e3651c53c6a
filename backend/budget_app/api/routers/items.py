from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from budget_app.core.deps import get_db, get_notifier
from budget_app.crud.items import create_item, delete_item, get_item, list_items, update_item
from budget_app.crud.projects import get_project
from budget_app.schemas.items import ProjectItem, ProjectItemCreate, ProjectItemUpdate
from budget_app.services.notify import Notifier

router = APIRouter()

@router.get("", response_model=list[ProjectItem])
def get_items(project_id: int = Query(...), db: Session = Depends(get_db)):
    return list_items(db, project_id)

@router.post("", response_model=ProjectItem)
def post_item(data: ProjectItemCreate, db: Session = Depends(get_db), notifier: Notifier = Depends(get_notifier)):
    if not get_project(db, data.project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    it = create_item(db, data)
    notifier.success("Artículo creado", item_id=it.id)
    return it


@router.put("/{item_id}", response_model=ProjectItem)
def put_item(
    item_id: int,
    data: ProjectItemUpdate,
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    it = get_item(db, item_id)
    if not it:
        raise HTTPException(status_code=404, detail="Item not found")
    it = update_item(db, it, data)
    notifier.success("Artículo actualizado", item_id=item_id)
    return it


@router.delete("/{item_id}")
def remove_item(item_id: int, db: Session = Depends(get_db), notifier: Notifier = Depends(get_notifier)):
    it = get_item(db, item_id)
    if not it:
        raise HTTPException(status_code=404, detail="Item not found")
    delete_item(db, it)
    notifier.success("Artículo eliminado", item_id=item_id)
    return {"status": "ok"}
