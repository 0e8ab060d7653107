from typing import List

from sqlalchemy import desc
from sqlalchemy.orm import Session

from civiltech.db.models.operations import DailyLabor, EquipmentLog, Fleet, LaborRole
from civiltech.db.models.progress import Category
from civiltech.db.models.project import Project
from civiltech.schemas.resources import (
    CategoryCreate,
    EquipmentCreate,
    FleetCreate,
    LaborCreate,
    LaborRoleCreate,
)
from civiltech.utils.rows import row_to_dict


def _add(db: Session, record) -> int:
    db.add(record)
    db.commit()
    return record.id


# Categories
def list_categories(db: Session) -> List[dict]:
    return [row_to_dict(c) for c in db.query(Category).order_by(Category.id).all()]


def create_category(db: Session, payload: CategoryCreate) -> int:
    return _add(db, Category(category_name=payload.category_name, unit_of_measurement=payload.unit_of_measurement))


# Fleet
def list_fleet(db: Session) -> List[dict]:
    return [row_to_dict(v) for v in db.query(Fleet).order_by(desc(Fleet.id)).all()]


def create_vehicle(db: Session, payload: FleetCreate) -> int:
    return _add(db, Fleet(vehicle_name=payload.vehicle_name, plate_number=payload.plate_number, type=payload.type))


# Labor roles
def list_labor_roles(db: Session) -> List[dict]:
    return [row_to_dict(r) for r in db.query(LaborRole).order_by(LaborRole.id).all()]


def create_labor_role(db: Session, payload: LaborRoleCreate) -> int:
    return _add(db, LaborRole(role_name=payload.role_name))


# Daily labor
def list_labor(db: Session) -> List[dict]:
    rows = (
        db.query(DailyLabor, Project.project_name)
        .outerjoin(Project, DailyLabor.project_id == Project.id)
        .order_by(desc(DailyLabor.report_date), desc(DailyLabor.id))
        .all()
    )
    return [row_to_dict(l, project_name=name) for l, name in rows]


def create_labor(db: Session, payload: LaborCreate) -> int:
    return _add(db, DailyLabor(
        project_id=payload.project_id,
        report_date=payload.report_date,
        engineer_count=payload.engineer_count,
        technician_count=payload.technician_count,
        labor_count=payload.labor_count,
        total_hours=payload.total_hours,
    ))


# Equipment
def list_equipment(db: Session) -> List[dict]:
    rows = (
        db.query(EquipmentLog, Project.project_name)
        .outerjoin(Project, EquipmentLog.project_id == Project.id)
        .order_by(desc(EquipmentLog.log_date), desc(EquipmentLog.id))
        .all()
    )
    return [row_to_dict(e, project_name=name) for e, name in rows]


def create_equipment(db: Session, payload: EquipmentCreate) -> int:
    return _add(db, EquipmentLog(
        project_id=payload.project_id,
        equipment_name=payload.equipment_name,
        status=payload.status,
        hours_operated=payload.hours_operated,
        log_date=payload.log_date,
    ))
