
from sqlalchemy import Column, Integer, String, Text, Float, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from civiltech.db.base_class import Base

class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    project_name = Column(String(255), index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)

    # Location
    location_address = Column(Text)
    location_coordinates = Column(String(100))  # free text, "lat,long"
    gps_lat = Column(Float, nullable=True)
    gps_long = Column(Float, nullable=True)
    country = Column(String(100))
    city = Column(String(100))
    area = Column(String(100))
    block = Column(String(100))
    street = Column(String(255))

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    status = Column(String(30), default="Planned")  # Planned, Ongoing, Completed, On Hold, Cancelled
    project_type = Column(String(100))
    description = Column(Text)

    # Costs
    estimated_cost = Column(Numeric(15, 2), nullable=True)
    approved_budget = Column(Numeric(15, 2), nullable=True)
    actual_cost = Column(Numeric(15, 2), nullable=True)

    supervisor_name = Column(String(150))
    engineer_name = Column(String(150))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    company = relationship("Company", back_populates="projects")
