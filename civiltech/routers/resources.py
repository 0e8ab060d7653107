
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.resources import (
    CategoryCreate,
    EquipmentCreate,
    FleetCreate,
    LaborCreate,
    LaborRoleCreate,
)
from civiltech.services import resources

router = APIRouter(
    prefix="/api",
    tags=["resources"],
)

@router.get("/categories")
def list_categories(db: Session = Depends(deps.get_db)):
    return resources.list_categories(db)

@router.post("/categories", response_model=Ack)
def create_category(payload: CategoryCreate, db: Session = Depends(deps.get_db)):
    return Ack(message="Added", id=resources.create_category(db, payload))

@router.get("/fleet")
def list_fleet(db: Session = Depends(deps.get_db)):
    return resources.list_fleet(db)

@router.post("/fleet", response_model=Ack)
def create_vehicle(payload: FleetCreate, db: Session = Depends(deps.get_db)):
    return Ack(message="Added", id=resources.create_vehicle(db, payload))

@router.get("/labor-roles")
def list_labor_roles(db: Session = Depends(deps.get_db)):
    return resources.list_labor_roles(db)

@router.post("/labor-roles", response_model=Ack)
def create_labor_role(payload: LaborRoleCreate, db: Session = Depends(deps.get_db)):
    return Ack(message="Added", id=resources.create_labor_role(db, payload))

@router.get("/labor")
def list_labor(db: Session = Depends(deps.get_db)):
    return resources.list_labor(db)

@router.post("/labor", response_model=Ack)
def create_labor(payload: LaborCreate, db: Session = Depends(deps.get_db)):
    return Ack(message="Added", id=resources.create_labor(db, payload))

@router.get("/equipment")
def list_equipment(db: Session = Depends(deps.get_db)):
    return resources.list_equipment(db)

@router.post("/equipment", response_model=Ack)
def create_equipment(payload: EquipmentCreate, db: Session = Depends(deps.get_db)):
    return Ack(message="Added", id=resources.create_equipment(db, payload))
