from enum import Enum
from pydantic import BaseModel, ConfigDict


class ProjectStatus(str, Enum):
    planning = "Planificación"
    in_progress = "En Progreso"
    paused = "En Pausa"
    completed = "Completado"


class ProjectCreate(BaseModel):
    name: str
    client_name: str | None = None
    description: str | None = None
    status: ProjectStatus = ProjectStatus.planning


class ProjectUpdate(BaseModel):
    name: str | None = None
    client_name: str | None = None
    description: str | None = None
    status: ProjectStatus | None = None

class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    client_name: str | None = None
    description: str | None = None
    status: str
