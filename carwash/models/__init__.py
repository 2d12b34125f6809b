"""
SQLAlchemy database models.
"""
from carwash.models.user import User
from carwash.models.car import Car
from carwash.models.package import Package
from carwash.models.service import ServicePackage
from carwash.models.payment import Payment

__all__ = ["User", "Car", "Package", "ServicePackage", "Payment"]
