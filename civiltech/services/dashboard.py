from datetime import date
from typing import Any, List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from civiltech.db.models.company import Company
from civiltech.db.models.operations import DailyLabor
from civiltech.db.models.progress import Category, DailyProgress
from civiltech.db.models.project import Project

# Chart legend colors, handed out by row position
PALETTE = ["#3b82f6", "#f59e0b", "#10b981", "#8b5cf6", "#ef4444", "#64748b"]

STATUS_COMPLETED = "Completed"
STATUS_ONGOING = "Ongoing"


def palette_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _counter(value: Any) -> Any:
    # NULL from an empty SUM and negatives both read as zero
    if value is None:
        return 0
    return max(value, 0)


def summary_counters(db: Session, civil_category_id: int = 1, today: Optional[date] = None) -> dict:
    """
    Six independent aggregates for the dashboard header.

    Each query runs on its own; nothing ties them to a single snapshot.
    """
    today = today or date.today()

    total = db.query(func.count(Project.id)).scalar()
    completed = db.query(func.count(Project.id)).filter(Project.status == STATUS_COMPLETED).scalar()
    ongoing = db.query(func.count(Project.id)).filter(Project.status == STATUS_ONGOING).scalar()
    companies = db.query(func.count(Company.id)).scalar()
    labor = db.query(func.sum(DailyLabor.labor_count)).filter(DailyLabor.report_date == today).scalar()
    civil = (
        db.query(func.sum(DailyProgress.quantity_completed))
        .filter(DailyProgress.category_id == civil_category_id)
        .scalar()
    )

    return {
        "total": int(_counter(total)),
        "completed": int(_counter(completed)),
        "ongoing": int(_counter(ongoing)),
        "companies": int(_counter(companies)),
        "labor": int(_counter(labor)),
        "civil": as_float(_counter(civil)),
    }


def company_status_series(db: Session) -> List[dict]:
    rows = (
        db.query(
            Company.company_name.label("name"),
            func.sum(case((Project.status == STATUS_COMPLETED, 1), else_=0)).label("completed"),
            func.sum(case((Project.status == STATUS_ONGOING, 1), else_=0)).label("ongoing"),
        )
        .select_from(Project)
        .join(Company, Project.company_id == Company.id)
        .group_by(Company.company_name)
        .order_by(Company.company_name)
        .all()
    )
    return [
        {"name": r.name, "completed": int(r.completed or 0), "ongoing": int(r.ongoing or 0)}
        for r in rows
    ]


def work_distribution_series(db: Session) -> List[dict]:
    rows = (
        db.query(
            Category.category_name.label("name"),
            func.sum(DailyProgress.quantity_completed).label("value"),
        )
        .select_from(DailyProgress)
        .join(Category, DailyProgress.category_id == Category.id)
        .group_by(Category.category_name)
        .order_by(Category.category_name)
        .all()
    )
    return [
        {"name": r.name, "value": as_float(r.value), "color": palette_color(i)}
        for i, r in enumerate(rows)
    ]
