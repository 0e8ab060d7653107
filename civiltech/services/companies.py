from typing import List

from sqlalchemy import func, desc
from sqlalchemy.orm import Session

from civiltech.core.errors import NotFoundError
from civiltech.db.models.company import Company, CompanyPayment
from civiltech.db.models.project import Project
from civiltech.schemas.companies import CompanyCreate, PaymentCreate, PaymentUpdate
from civiltech.utils.rows import row_to_dict

DEFAULT_STATUS = "Active"


def list_companies(db: Session) -> List[dict]:
    rows = (
        db.query(Company, func.count(Project.id).label("project_count"))
        .outerjoin(Project, Company.id == Project.company_id)
        .group_by(Company.id)
        .order_by(desc(Company.id))
        .all()
    )
    return [row_to_dict(c, project_count=count) for c, count in rows]


def create_company(db: Session, payload: CompanyCreate) -> int:
    company = Company(
        company_name=payload.company_name,
        type=payload.type,
        phone=payload.phone,
        email=payload.email,
        status=payload.status or DEFAULT_STATUS,
    )
    db.add(company)
    db.commit()
    return company.id


def get_company(db: Session, company_id: int) -> dict:
    company = db.get(Company, company_id)
    if not company:
        raise NotFoundError("Company not found")
    return row_to_dict(company)


def list_company_projects(db: Session, company_id: int) -> List[dict]:
    rows = db.query(Project).filter(Project.company_id == company_id).order_by(desc(Project.id)).all()
    return [row_to_dict(p) for p in rows]


# --- Payments ---

def list_company_payments(db: Session, company_id: int) -> List[dict]:
    rows = (
        db.query(CompanyPayment)
        .filter(CompanyPayment.company_id == company_id)
        .order_by(desc(CompanyPayment.payment_date), desc(CompanyPayment.id))
        .all()
    )
    return [row_to_dict(p) for p in rows]


def create_payment(db: Session, payload: PaymentCreate) -> int:
    payment = CompanyPayment(
        company_id=payload.company_id,
        amount=payload.amount,
        payment_type=payload.payment_type,
        description=payload.description,
        payment_date=payload.payment_date,
    )
    db.add(payment)
    db.commit()
    return payment.id


def _get_payment(db: Session, payment_id: int) -> CompanyPayment:
    payment = db.get(CompanyPayment, payment_id)
    if not payment:
        raise NotFoundError("Payment not found")
    return payment


def update_payment(db: Session, payment_id: int, payload: PaymentUpdate) -> None:
    payment = _get_payment(db, payment_id)
    # Full replace, like the form that sends it
    payment.amount = payload.amount
    payment.payment_type = payload.payment_type
    payment.description = payload.description
    payment.payment_date = payload.payment_date
    db.commit()


def delete_payment(db: Session, payment_id: int) -> None:
    payment = _get_payment(db, payment_id)
    db.delete(payment)
    db.commit()
