
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from civiltech.db.base_class import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String(150), nullable=False)
    unit_of_measurement = Column(String(50))  # m3, m2, ton, unit

class ProjectScope(Base):
    __tablename__ = "project_scope"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    planned_quantity = Column(Numeric(15, 2), default=0)

    category = relationship("Category")

class DailyProgress(Base):
    __tablename__ = "daily_progress"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    progress_date = Column(Date, nullable=True)
    quantity_completed = Column(Numeric(15, 2), default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    category = relationship("Category")
    photos = relationship("ProgressPhoto", back_populates="progress", cascade="all, delete-orphan")

class ProgressPhoto(Base):
    __tablename__ = "progress_photos"

    id = Column(Integer, primary_key=True, index=True)
    daily_progress_id = Column(Integer, ForeignKey("daily_progress.id"), nullable=False)
    photo_url = Column(String(255), nullable=False)
    upload_timestamp = Column(DateTime(timezone=True), server_default=func.now())

    progress = relationship("DailyProgress", back_populates="photos")
