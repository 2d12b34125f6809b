"""
Package model for database.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from carwash.database import Base


class Package(Base):
    """Wash package database model."""

    __tablename__ = "packages"

    package_number = Column(Integer, primary_key=True, autoincrement=True)
    package_name = Column(String(100), nullable=False)
    package_description = Column(String, nullable=False)
    package_price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    services = relationship("ServicePackage", back_populates="package", passive_deletes="all")
