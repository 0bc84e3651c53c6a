from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from budget_app.core.deps import get_db
from budget_app.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from budget_app.crud.projects import create_project, get_project, list_projects, update_project

router = APIRouter()

@router.get("", response_model=list[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    return list_projects(db)

@router.post("", response_model=ProjectOut)
def post_project(data: ProjectCreate, db: Session = Depends(get_db)):
    return create_project(db, data)


@router.get("/{project_id}", response_model=ProjectOut)
def get_one_project(project_id: int, db: Session = Depends(get_db)):
    p = get_project(db, project_id)
    if not p:
        raise HTTPException(status_code=404, detail="Project not found")
    return p


@router.put("/{project_id}", response_model=ProjectOut)
def put_project(project_id: int, data: ProjectUpdate, db: Session = Depends(get_db)):
    p = get_project(db, project_id)
    if not p:
        raise HTTPException(status_code=404, detail="Project not found")
    return update_project(db, p, data)
