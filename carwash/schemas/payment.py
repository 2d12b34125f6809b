"""
Pydantic schemas for Payment.
"""
from datetime import date
from typing import Optional

from carwash.schemas.common import CamelModel
from carwash.validators import Amount, RecordId, RequiredStr


class PaymentUpdate(CamelModel):
    """Schema for replacing a payment. The paid service cannot change."""
    amount_paid: Amount
    payment_date: date
    payment_method: RequiredStr = "Cash"
    payment_status: RequiredStr = "Completed"


class PaymentCreate(PaymentUpdate):
    """Schema for creating a payment."""
    record_number: RecordId


class Payment(CamelModel):
    """Schema for payment responses."""
    payment_number: int
    amount_paid: float
    payment_date: date
    record_number: int
    payment_method: str
    payment_status: str


class PaymentDetail(Payment):
    """A payment with the service, car and package it settles."""
    service_date: Optional[date] = None
    plate_number: Optional[str] = None
    car_type: Optional[str] = None
    car_size: Optional[str] = None
    driver_name: Optional[str] = None
    phone_number: Optional[str] = None
    package_number: Optional[int] = None
    package_name: Optional[str] = None
    package_description: Optional[str] = None
    package_price: Optional[float] = None
