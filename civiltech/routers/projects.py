
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.db.features import OptionalFeatures
from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.projects import ProjectCreate, ProgressCreate, ScopeCreate
from civiltech.services import projects as project_service

router = APIRouter(
    prefix="/api",
    tags=["projects"],
)

@router.get("/projects-full")
def list_projects(db: Session = Depends(deps.get_db)):
    return project_service.list_projects_full(db)

@router.post("/projects", response_model=Ack)
def create_project(payload: ProjectCreate, db: Session = Depends(deps.get_db)):
    project_id = project_service.create_project(db, payload)
    return Ack(message="Project created", id=project_id)

@router.get("/projects/{id}")
def get_project(id: int, db: Session = Depends(deps.get_db)):
    return project_service.get_project(db, id)

# --- Project sub-data ---

@router.get("/projects/{id}/scope")
def project_scope(id: int, db: Session = Depends(deps.get_db)):
    return project_service.list_project_scope(db, id)

@router.post("/projects/{id}/scope", response_model=Ack)
def add_project_scope(id: int, payload: ScopeCreate, db: Session = Depends(deps.get_db)):
    scope_id = project_service.add_project_scope(db, id, payload)
    return Ack(message="Scope added", id=scope_id)

@router.get("/projects/{id}/photos")
def project_photos(id: int, db: Session = Depends(deps.get_db)):
    return project_service.list_project_photos(db, id)

@router.get("/projects/{id}/labor")
def project_labor(id: int, db: Session = Depends(deps.get_db)):
    return project_service.list_project_labor(db, id)

@router.get("/projects/{id}/equipment")
def project_equipment(id: int, db: Session = Depends(deps.get_db)):
    return project_service.list_project_equipment(db, id)

@router.get("/projects/{id}/gis")
def project_gis(
    id: int,
    db: Session = Depends(deps.get_db),
    features: OptionalFeatures = Depends(deps.get_features),
):
    return project_service.list_project_gis(db, id, features)

@router.get("/projects/{id}/documents")
def project_documents(
    id: int,
    db: Session = Depends(deps.get_db),
    features: OptionalFeatures = Depends(deps.get_features),
):
    return project_service.list_project_documents(db, id, features)
