"""
Service record model for database.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from carwash.database import Base


class ServicePackage(Base):
    """A package applied to a car on a given date."""

    __tablename__ = "service_packages"

    record_number = Column(Integer, primary_key=True, autoincrement=True)
    service_date = Column(Date, nullable=False, index=True)
    plate_number = Column(
        String(20), ForeignKey("cars.plate_number", ondelete="RESTRICT"), nullable=False, index=True
    )
    package_number = Column(
        Integer, ForeignKey("packages.package_number", ondelete="RESTRICT"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    car = relationship("Car", back_populates="services")
    package = relationship("Package", back_populates="services")
    payment = relationship("Payment", back_populates="service", uselist=False, passive_deletes="all")
