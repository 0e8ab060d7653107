
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from civiltech.db.base_class import Base

class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String(255), index=True)
    type = Column(String(100))  # Contractor, Consultant, Supplier...
    phone = Column(String(50))
    email = Column(String(150))
    status = Column(String(30), default="Active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    projects = relationship("Project", back_populates="company")
    payments = relationship("CompanyPayment", back_populates="company")

class CompanyPayment(Base):
    __tablename__ = "company_payments"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    amount = Column(Numeric(15, 2), nullable=True)
    payment_type = Column(String(50))
    description = Column(Text)
    payment_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    company = relationship("Company", back_populates="payments")
