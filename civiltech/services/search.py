from typing import List, Optional

from sqlalchemy import literal, select, union
from sqlalchemy.orm import Session

from civiltech.db.models.company import Company
from civiltech.db.models.project import Project


def search(db: Session, q: Optional[str]) -> List[dict]:
    """Projects and companies whose name contains q, tagged with where they came from."""
    q = (q or "").strip()
    if not q:
        return []

    like = f"%{q}%"
    projects = select(
        Project.id,
        Project.project_name.label("title"),
        literal("Project").label("type"),
    ).where(Project.project_name.like(like))
    companies = select(
        Company.id,
        Company.company_name.label("title"),
        literal("Company").label("type"),
    ).where(Company.company_name.like(like))

    rows = db.execute(union(projects, companies)).mappings().all()
    return [dict(r) for r in rows]
