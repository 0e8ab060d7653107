
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.routers import deps
from civiltech.schemas.dashboard import CompanyStatusRow, DashboardStats, WorkDistributionRow
from civiltech.services import dashboard as dashboard_service

router = APIRouter(
    prefix="/api",
    tags=["dashboard"],
)

@router.get("/dashboard/stats", response_model=DashboardStats)
def dashboard_stats(
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
):
    return dashboard_service.summary_counters(db, civil_category_id=settings.CIVIL_CATEGORY_ID)

@router.get("/charts/company-status", response_model=List[CompanyStatusRow])
def company_status_chart(db: Session = Depends(deps.get_db)):
    return dashboard_service.company_status_series(db)

@router.get("/charts/work-distribution", response_model=List[WorkDistributionRow])
def work_distribution_chart(db: Session = Depends(deps.get_db)):
    return dashboard_service.work_distribution_series(db)
