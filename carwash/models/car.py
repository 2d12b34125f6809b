"""
Car model for database.
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from carwash.database import Base


class Car(Base):
    """Car database model, keyed by plate number."""

    __tablename__ = "cars"

    plate_number = Column(String(20), primary_key=True)
    car_type = Column(String(50), nullable=False)
    car_size = Column(String(50), nullable=False)
    driver_name = Column(String(100), nullable=False)
    phone_number = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    services = relationship("ServicePackage", back_populates="car", passive_deletes="all")
