
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from civiltech.db.base_class import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(150))
    email = Column(String(150), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # hash only
    role = Column(String(30))  # Admin, Engineer, Supervisor, Viewer
    status = Column(String(30), default="Active")
    profile_image = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
