from typing import Optional

from civiltech.schemas.common import (
    PassThroughModel,
    NullableInt,
    NullableDate,
    NullableDecimal,
)


class ProjectCreate(PassThroughModel):
    project_name: Optional[str] = None
    company_id: NullableInt = None
    location: Optional[str] = None
    coordinates: Optional[str] = None
    start_date: NullableDate = None
    end_date: NullableDate = None
    status: Optional[str] = None
    project_type: Optional[str] = None
    description: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    area: Optional[str] = None
    block: Optional[str] = None
    street: Optional[str] = None
    estimated_cost: NullableDecimal = None
    approved_budget: NullableDecimal = None
    actual_cost: NullableDecimal = None
    supervisor_name: Optional[str] = None
    engineer_name: Optional[str] = None


class ScopeCreate(PassThroughModel):
    category_id: NullableInt = None
    planned_quantity: NullableDecimal = None


class ProgressCreate(PassThroughModel):
    project_id: NullableInt = None
    category_id: NullableInt = None
    progress_date: NullableDate = None
    quantity_completed: NullableDecimal = None
