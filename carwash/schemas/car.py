"""
Pydantic schemas for Car.
"""
from carwash.schemas.common import CamelModel
from carwash.validators import RequiredStr


class CarUpdate(CamelModel):
    """Schema for replacing a car's mutable fields."""
    car_type: RequiredStr
    car_size: RequiredStr
    driver_name: RequiredStr
    phone_number: RequiredStr


class CarCreate(CarUpdate):
    """Schema for creating a car."""
    plate_number: RequiredStr


class Car(CamelModel):
    """Schema for car responses."""
    plate_number: str
    car_type: str
    car_size: str
    driver_name: str
    phone_number: str
