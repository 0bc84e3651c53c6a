from sqlalchemy.orm import Session
from budget_app.db.models.project import Project
from budget_app.schemas.project import ProjectCreate, ProjectUpdate

def list_projects(db: Session):
    return db.query(Project).order_by(Project.id).all()

def get_project(db: Session, project_id: int) -> Project | None:
    return db.query(Project).filter(Project.id == project_id).one_or_none()

def create_project(db: Session, data: ProjectCreate) -> Project:
    p = Project(
        name=data.name,
        client_name=data.client_name,
        description=data.description,
        status=data.status.value,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def update_project(db: Session, p: Project, data: ProjectUpdate) -> Project:
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if "status" in changes:
        changes["status"] = data.status.value
    for field, value in changes.items():
        setattr(p, field, value)
    db.commit()
    db.refresh(p)
    return p
