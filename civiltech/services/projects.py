from typing import List, Optional, Tuple

from sqlalchemy import func, desc
from sqlalchemy.orm import Session

from civiltech.core.errors import ClientError, NotFoundError
from civiltech.db.features import OptionalFeatures
from civiltech.db.models.company import Company
from civiltech.db.models.document import ProjectDocument, ProjectGis
from civiltech.db.models.operations import DailyLabor, EquipmentLog
from civiltech.db.models.progress import Category, DailyProgress, ProgressPhoto, ProjectScope
from civiltech.db.models.project import Project
from civiltech.schemas.projects import ProjectCreate, ProgressCreate, ScopeCreate
from civiltech.utils.rows import row_to_dict

DEFAULT_STATUS = "Planned"


def parse_coordinates(coordinates: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    """
    Splits a free-text "lat,long" pair into two floats.

    Anything without a comma, or with a side that is not a number, gives (None, None).
    """
    if not coordinates or "," not in coordinates:
        return None, None
    lat, long = coordinates.split(",")[:2]
    try:
        return float(lat.strip()), float(long.strip())
    except ValueError:
        return None, None


def _projects_with_company(db: Session):
    return db.query(Project, Company.company_name).outerjoin(Company, Project.company_id == Company.id)


def list_projects_full(db: Session) -> List[dict]:
    rows = _projects_with_company(db).order_by(desc(Project.id)).all()
    return [row_to_dict(p, company_name=name) for p, name in rows]


def get_project(db: Session, project_id: int) -> dict:
    row = _projects_with_company(db).filter(Project.id == project_id).first()
    if not row:
        raise NotFoundError("Not found")
    project, name = row
    return row_to_dict(project, company_name=name)


def create_project(db: Session, payload: ProjectCreate) -> int:
    lat, long = parse_coordinates(payload.coordinates)
    project = Project(
        project_name=payload.project_name,
        company_id=payload.company_id,
        location_address=payload.location,
        location_coordinates=payload.coordinates,
        start_date=payload.start_date,
        end_date=payload.end_date,
        status=payload.status or DEFAULT_STATUS,
        project_type=payload.project_type,
        description=payload.description,
        country=payload.country,
        city=payload.city,
        area=payload.area,
        block=payload.block,
        street=payload.street,
        gps_lat=lat,
        gps_long=long,
        estimated_cost=payload.estimated_cost,
        approved_budget=payload.approved_budget,
        actual_cost=payload.actual_cost,
        supervisor_name=payload.supervisor_name,
        engineer_name=payload.engineer_name,
    )
    db.add(project)
    db.commit()
    return project.id


# --- Project sub-records ---

def list_project_scope(db: Session, project_id: int) -> List[dict]:
    # Correlated sum keeps one row per scope line without a GROUP BY over every selected column
    actual = (
        db.query(func.coalesce(func.sum(DailyProgress.quantity_completed), 0))
        .filter(
            DailyProgress.project_id == ProjectScope.project_id,
            DailyProgress.category_id == ProjectScope.category_id,
        )
        .correlate(ProjectScope)
        .scalar_subquery()
    )
    rows = (
        db.query(
            Category.category_name,
            Category.unit_of_measurement,
            ProjectScope.planned_quantity,
            actual.label("actual_quantity"),
        )
        .select_from(ProjectScope)
        .join(Category, ProjectScope.category_id == Category.id)
        .filter(ProjectScope.project_id == project_id)
        .order_by(ProjectScope.id)
        .all()
    )
    return [dict(r._mapping) for r in rows]


def add_project_scope(db: Session, project_id: int, payload: ScopeCreate) -> int:
    scope = ProjectScope(
        project_id=project_id,
        category_id=payload.category_id,
        planned_quantity=payload.planned_quantity,
    )
    db.add(scope)
    db.commit()
    return scope.id


def list_project_photos(db: Session, project_id: int) -> List[dict]:
    rows = (
        db.query(ProgressPhoto.photo_url, ProgressPhoto.upload_timestamp, Category.category_name)
        .join(DailyProgress, ProgressPhoto.daily_progress_id == DailyProgress.id)
        .join(Category, DailyProgress.category_id == Category.id)
        .filter(DailyProgress.project_id == project_id)
        .order_by(desc(ProgressPhoto.upload_timestamp), desc(ProgressPhoto.id))
        .all()
    )
    return [dict(r._mapping) for r in rows]


def create_daily_progress(db: Session, payload: ProgressCreate) -> int:
    entry = DailyProgress(
        project_id=payload.project_id,
        category_id=payload.category_id,
        progress_date=payload.progress_date,
        quantity_completed=payload.quantity_completed,
    )
    db.add(entry)
    db.commit()
    return entry.id


def ensure_progress_exists(db: Session, progress_id: int) -> None:
    if db.get(DailyProgress, progress_id) is None:
        raise NotFoundError("Progress entry not found")


def add_progress_photo(db: Session, progress_id: int, filename: Optional[str]) -> int:
    if not filename:
        raise ClientError("No file uploaded")
    ensure_progress_exists(db, progress_id)
    photo = ProgressPhoto(daily_progress_id=progress_id, photo_url=filename)
    db.add(photo)
    db.commit()
    return photo.id


def list_project_labor(db: Session, project_id: int) -> List[dict]:
    rows = (
        db.query(DailyLabor)
        .filter(DailyLabor.project_id == project_id)
        .order_by(desc(DailyLabor.report_date), desc(DailyLabor.id))
        .all()
    )
    return [row_to_dict(r) for r in rows]


def list_project_equipment(db: Session, project_id: int) -> List[dict]:
    rows = (
        db.query(EquipmentLog)
        .filter(EquipmentLog.project_id == project_id)
        .order_by(desc(EquipmentLog.log_date), desc(EquipmentLog.id))
        .all()
    )
    return [row_to_dict(r) for r in rows]


def list_project_gis(db: Session, project_id: int, features: OptionalFeatures) -> List[dict]:
    if not features.gis:
        return []
    rows = db.query(ProjectGis).filter(ProjectGis.project_id == project_id).order_by(ProjectGis.id).all()
    return [row_to_dict(r) for r in rows]


def list_project_documents(db: Session, project_id: int, features: OptionalFeatures) -> List[dict]:
    if not features.documents:
        return []
    rows = (
        db.query(ProjectDocument)
        .filter(ProjectDocument.project_id == project_id)
        .order_by(desc(ProjectDocument.uploaded_at), desc(ProjectDocument.id))
        .all()
    )
    return [row_to_dict(r) for r in rows]
