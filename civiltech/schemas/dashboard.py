from typing import Literal, Optional

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total: int = 0
    completed: int = 0
    ongoing: int = 0
    companies: int = 0
    labor: int = 0
    civil: float = 0.0


class CompanyStatusRow(BaseModel):
    name: Optional[str] = None
    completed: int = 0
    ongoing: int = 0


class WorkDistributionRow(BaseModel):
    name: Optional[str] = None
    value: float = 0.0
    color: str


class SearchHit(BaseModel):
    id: int
    title: Optional[str] = None
    type: Literal["Project", "Company"]
