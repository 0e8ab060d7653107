from typing import Optional

from civiltech.schemas.common import PassThroughModel, NullableInt, NullableDate, NullableFloat


class CategoryCreate(PassThroughModel):
    category_name: Optional[str] = None
    unit_of_measurement: Optional[str] = None


class FleetCreate(PassThroughModel):
    vehicle_name: Optional[str] = None
    plate_number: Optional[str] = None
    type: Optional[str] = None


class LaborRoleCreate(PassThroughModel):
    role_name: Optional[str] = None


class LaborCreate(PassThroughModel):
    project_id: NullableInt = None
    report_date: NullableDate = None
    engineer_count: NullableInt = None
    technician_count: NullableInt = None
    labor_count: NullableInt = None
    total_hours: NullableFloat = None


class EquipmentCreate(PassThroughModel):
    project_id: NullableInt = None
    equipment_name: Optional[str] = None
    status: Optional[str] = None
    hours_operated: NullableFloat = None
    log_date: NullableDate = None
