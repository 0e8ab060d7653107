
from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from civiltech.db.base_class import Base

class DailyLabor(Base):
    __tablename__ = "daily_labor"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
    report_date = Column(Date, nullable=True, index=True)
    engineer_count = Column(Integer, default=0)
    technician_count = Column(Integer, default=0)
    labor_count = Column(Integer, default=0)
    total_hours = Column(Float, default=0.0)

class EquipmentLog(Base):
    __tablename__ = "equipment_log"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
    equipment_name = Column(String(150))
    status = Column(String(50))  # Working, Idle, Maintenance
    hours_operated = Column(Float, default=0.0)
    log_date = Column(Date, nullable=True, index=True)

class Fleet(Base):
    __tablename__ = "fleet"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_name = Column(String(150))
    plate_number = Column(String(50))
    type = Column(String(50))

class LaborRole(Base):
    __tablename__ = "labor_roles"

    id = Column(Integer, primary_key=True, index=True)
    role_name = Column(String(100), nullable=False)
