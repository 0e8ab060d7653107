
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.companies import CompanyCreate, PaymentCreate, PaymentUpdate
from civiltech.services import companies as company_service

router = APIRouter(
    prefix="/api",
    tags=["companies"],
)

@router.get("/companies")
def list_companies(db: Session = Depends(deps.get_db)):
    return company_service.list_companies(db)

@router.post("/companies", response_model=Ack)
def create_company(payload: CompanyCreate, db: Session = Depends(deps.get_db)):
    company_id = company_service.create_company(db, payload)
    return Ack(message="Company added", id=company_id)

@router.get("/companies/{id}")
def get_company(id: int, db: Session = Depends(deps.get_db)):
    return company_service.get_company(db, id)

@router.get("/companies/{id}/projects")
def company_projects(id: int, db: Session = Depends(deps.get_db)):
    return company_service.list_company_projects(db, id)

@router.get("/companies/{id}/payments")
def company_payments(id: int, db: Session = Depends(deps.get_db)):
    return company_service.list_company_payments(db, id)

# --- Payments ---

@router.post("/payments", response_model=Ack)
def create_payment(payload: PaymentCreate, db: Session = Depends(deps.get_db)):
    payment_id = company_service.create_payment(db, payload)
    return Ack(message="Recorded", id=payment_id)

@router.put("/payments/{id}", response_model=Ack)
def update_payment(id: int, payload: PaymentUpdate, db: Session = Depends(deps.get_db)):
    company_service.update_payment(db, id, payload)
    return Ack(message="Updated", id=id)

@router.delete("/payments/{id}", response_model=Ack)
def delete_payment(id: int, db: Session = Depends(deps.get_db)):
    company_service.delete_payment(db, id)
    return Ack(message="Deleted", id=id)
