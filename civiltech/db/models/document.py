
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from civiltech.db.base_class import Base

# Both tables are optional: older deployments run without them

class ProjectDocument(Base):
    __tablename__ = "project_documents"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
    doc_type = Column(String(50))  # Contract, Drawing, Permit, Report
    title = Column(String(255))
    file_url = Column(String(255), nullable=True)  # stored filename under the upload dir
    uploaded_by = Column(String(150))
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now())

class ProjectGis(Base):
    __tablename__ = "project_gis"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    layer_name = Column(String(150))
    geometry_type = Column(String(30))  # Point, LineString, Polygon
    coordinates = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
