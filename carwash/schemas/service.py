"""
Pydantic schemas for service records.
"""
from datetime import date
from typing import Optional

from carwash.schemas.common import CamelModel
from carwash.validators import RecordId, RequiredStr


class ServiceBase(CamelModel):
    """Base service schema with common fields."""
    service_date: date
    plate_number: RequiredStr
    package_number: RecordId


class ServiceCreate(ServiceBase):
    """Schema for creating a service record."""
    pass


class ServiceUpdate(ServiceBase):
    """Schema for replacing a service record."""
    pass


class Service(ServiceBase):
    """Schema for service responses."""
    record_number: int
    plate_number: str
    package_number: int


class ServiceDetail(CamelModel):
    """A service record with its car, package and payment attributes."""
    record_number: int
    service_date: date
    plate_number: str
    car_type: Optional[str] = None
    car_size: Optional[str] = None
    driver_name: Optional[str] = None
    phone_number: Optional[str] = None
    package_number: Optional[int] = None
    package_name: Optional[str] = None
    package_description: Optional[str] = None
    package_price: Optional[float] = None
    payment_number: Optional[int] = None
    amount_paid: Optional[float] = None
    payment_date: Optional[date] = None
